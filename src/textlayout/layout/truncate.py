"""Max-line truncation and overflow reassembly."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from textlayout.layout.wrap import WrapResult, wrap_text
from textlayout.metrics import FontState, MeasureText

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TruncationResult:
    """
    Visible lines after applying the max-line limit.

    Attributes:
        lines: Lines to render, top to bottom.
        truncated: True if some text did not fit.
        remaining_text: Text that did not fit, with explicit paragraph breaks
            preserved as ``\\n`` and wrap-induced breaks collapsed to spaces.
    """

    lines: tuple[str, ...]
    truncated: bool = False
    remaining_text: str = ""


def truncate_lines(
    wrapped: WrapResult,
    max_lines: int | None,
    suffix: str | None,
    wrap_width: float,
    measure: MeasureText,
    font: FontState,
) -> TruncationResult:
    """
    Limit wrapped text to max_lines and reassemble the overflow.

    When a suffix is given, the last visible line is wrapped again together
    with the suffix. Its first line replaces the last visible line and any
    second line becomes the start of the remaining text.

    Args:
        wrapped: Output of the word wrapper.
        max_lines: Maximum number of visible lines. None or 0 disables truncation.
        suffix: Text appended to the last visible line when truncating (e.g., "...").
        wrap_width: Wrap width used for re-wrapping the last line.
        measure: Width measurer.
        font: Font state passed to the measurer.

    Returns:
        TruncationResult with visible lines and remaining text.
    """
    lines = wrapped.lines

    if not max_lines or len(lines) <= max_lines:
        return TruncationResult(lines=lines)

    used = list(lines[:max_lines])

    if suffix:
        rewrapped = wrap_text(used[-1] + suffix, wrap_width, measure, font)
        used[-1] = rewrapped.lines[0]
        other_lines = [rewrapped.lines[1] if len(rewrapped.lines) > 1 else ""]
    else:
        other_lines = [""]

    # Overflow lines are joined with spaces until the next line begins a new paragraph
    for index in range(max_lines, len(lines)):
        bucket = other_lines[-1]
        other_lines[-1] = f"{bucket} {lines[index]}" if bucket else lines[index]
        if wrapped.starts_paragraph(index + 1):
            other_lines.append("")

    logger.debug(f"Truncated {len(lines)} line(s) to {max_lines}, {len(other_lines)} remaining paragraph(s)")
    return TruncationResult(lines=tuple(used), truncated=True, remaining_text="\n".join(other_lines))
