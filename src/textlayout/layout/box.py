"""Box sizing and per-line positioning."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from textlayout.config import StyleSettings

logger = logging.getLogger(__name__)

# Smallest inner width an explicit box is allowed to have
MIN_INNER_WIDTH = 10.0

# Provisional box width (in pixels) used for wrapping when no width is set
AUTO_WIDTH = 2048.0


@dataclass(frozen=True)
class Line:
    """
    A positioned line of text. All values are scaled by precision.

    Attributes:
        text: Line content.
        width: Measured width.
        x: Left edge of the text run.
        y: Baseline position.
    """

    text: str
    width: float
    x: float
    y: float


@dataclass(frozen=True)
class BoxLayout:
    """
    Resolved geometry of a text box.

    Attributes:
        width: Total box width in layout units (unscaled).
        height: Total box height in layout units (unscaled).
        inner_width: Text flow width in layout units (unscaled).
        precision: Scale factor applied to lines and output sizes.
        lines: Positioned lines, scaled by precision.
    """

    width: float
    height: float
    inner_width: float
    precision: float
    lines: tuple[Line, ...]

    @property
    def scaled_width(self) -> float:
        return self.width * self.precision

    @property
    def scaled_height(self) -> float:
        return self.height * self.precision


def box_width(settings: StyleSettings) -> tuple[float, float]:
    """
    Calculate the box width before measuring lines.

    An explicit width is grown when its inner width would drop below
    MIN_INNER_WIDTH. Without an explicit width a provisional width of
    AUTO_WIDTH pixels is used so that wrapping has an upper bound.

    Args:
        settings: Style settings.

    Returns:
        Tuple of (width, inner_width) in layout units.
    """
    width = settings.w or (AUTO_WIDTH / settings.precision)
    inner_width = width - (settings.padding_left + settings.padding_right)

    if inner_width < MIN_INNER_WIDTH:
        width += MIN_INNER_WIDTH - inner_width
        inner_width = MIN_INNER_WIDTH

    return width, inner_width


def wrap_width(settings: StyleSettings, inner_width: float) -> float:
    """Wrap width with inner-width fallback."""
    return settings.word_wrap_width or inner_width


def box_height(settings: StyleSettings, line_count: int) -> float:
    """
    Calculate the box height for a number of lines.

    Formula: line_height * (n - 1) + 0.5 * font_size + max(line_height, font_size) + offset_y
    """
    if settings.h:
        return settings.h

    line_height = settings.effective_line_height
    return (
        line_height * (line_count - 1)
        + 0.5 * settings.font_size
        + max(line_height, settings.font_size)
        + settings.effective_offset_y
    )


def compute_box(lines: Sequence[str], line_widths: Sequence[float], settings: StyleSettings) -> BoxLayout:
    """
    Size the box and position every line.

    Args:
        lines: Visible lines, top to bottom.
        line_widths: Measured width of every line in layout units.
        settings: Style settings.

    Returns:
        BoxLayout with scaled line positions.
    """
    width, inner_width = box_width(settings)

    if not settings.w:
        # Auto-size to the widest line
        max_line_width = max(line_widths, default=0.0)
        width = max_line_width + settings.padding_left + settings.padding_right
        inner_width = max_line_width
        logger.debug(f"Auto-sized box width to {width}")

    height = box_height(settings, len(lines))

    precision = settings.precision
    line_height = settings.effective_line_height
    offset_y = settings.effective_offset_y
    align = settings.effective_text_align

    positioned: list[Line] = []
    for i, (text, line_width) in enumerate(zip(lines, line_widths)):
        x = 0.0
        y = i * line_height + offset_y

        if align == "right":
            x += inner_width - line_width
        elif align == "center":
            x += (inner_width - line_width) / 2
        x += settings.padding_left

        positioned.append(Line(text=text, width=line_width * precision, x=x * precision, y=y * precision))

    return BoxLayout(
        width=width,
        height=height,
        inner_width=inner_width,
        precision=precision,
        lines=tuple(positioned),
    )


def surface_size(box: BoxLayout, settings: StyleSettings) -> tuple[int, int]:
    """
    Calculate the pixel size of the drawing surface.

    Degenerate sizes are floored to 1 and a clip region limits the size to
    its extent before scaling.

    Args:
        box: Resolved box geometry.
        settings: Style settings (clip region and precision).

    Returns:
        Tuple of (width, height) in pixels.
    """
    width = max(box.width, 1.0)
    height = max(box.height, 1.0)

    if settings.clip_x_set:
        width = min(width, settings.cut_ex - settings.cut_sx)
    if settings.clip_y_set:
        height = min(height, settings.cut_ey - settings.cut_sy)

    precision = settings.precision
    return max(math.ceil(width * precision), 1), max(math.ceil(height * precision), 1)
