"""Text layout entry point."""

import logging
from dataclasses import dataclass

from textlayout.config import StyleSettings
from textlayout.layout.box import box_width, compute_box, surface_size, wrap_width
from textlayout.layout.plan import DrawPlan, assemble_draw_plan
from textlayout.layout.truncate import truncate_lines
from textlayout.layout.wrap import split_lines, wrap_text
from textlayout.metrics import MeasureText

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutInfo:
    """
    Measurement results of a layout pass.

    Attributes:
        w: Total box width, scaled by precision. Not floored, so it is 0 for
            empty text without padding (the draw plan surface is at least 1).
        h: Total box height, scaled by precision. Not floored either.
        precision: Scale factor used.
        lines: Visible lines, top to bottom.
        line_widths: Measured width of each visible line (unscaled).
        more_text_lines: True if text was cut off by max_lines.
        remaining_text: Text that did not fit.
    """

    w: float
    h: float
    precision: float
    lines: tuple[str, ...]
    line_widths: tuple[float, ...]
    more_text_lines: bool
    remaining_text: str


@dataclass(frozen=True)
class LayoutResult:
    """Layout info plus the draw plan (None for measure-only calls)."""

    info: LayoutInfo
    draw_plan: DrawPlan | None = None


def layout(settings: StyleSettings, measure: MeasureText, draw: bool = True) -> LayoutResult:
    """
    Lay out styled text.

    Runs word wrapping, max-line truncation, measurement and positioning, and
    optionally assembles the draw instructions for a rasterizer.

    Args:
        settings: Validated style settings including the text.
        measure: Width measurer. Errors it raises propagate unchanged.
        draw: Build a DrawPlan. Set False to only measure.

    Returns:
        LayoutResult with layout info and, if requested, the draw plan.
    """
    font = settings.font_state()

    _, inner_width = box_width(settings)
    line_wrap_width = wrap_width(settings, inner_width)

    if settings.word_wrap:
        wrapped = wrap_text(settings.text, line_wrap_width, measure, font)
    else:
        wrapped = split_lines(settings.text)

    truncation = truncate_lines(
        wrapped,
        settings.max_lines,
        settings.max_lines_suffix,
        line_wrap_width,
        measure,
        font,
    )

    line_widths = tuple(measure(line, font) for line in truncation.lines)
    box = compute_box(truncation.lines, line_widths, settings)

    info = LayoutInfo(
        w=box.scaled_width,
        h=box.scaled_height,
        precision=settings.precision,
        lines=truncation.lines,
        line_widths=line_widths,
        more_text_lines=truncation.truncated,
        remaining_text=truncation.remaining_text,
    )
    logger.debug(f"Laid out {len(info.lines)} line(s) in {info.w}x{info.h} box")

    if not draw:
        return LayoutResult(info=info)

    plan = assemble_draw_plan(box, settings, surface_size(box, settings))
    return LayoutResult(info=info, draw_plan=plan)
