"""Greedy word wrapping."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from textlayout.metrics import FontState, MeasureText

logger = logging.getLogger(__name__)

# Paragraph separators for wrapping and for plain line splitting
_WRAP_NEWLINE = re.compile(r"\r?\n")
_ANY_NEWLINE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True)
class WrapResult:
    """
    Wrapped lines and the explicit paragraph boundaries between them.

    Attributes:
        lines: Wrapped lines, top to bottom.
        newline_indices: Index of the first line of every paragraph after the
            first, i.e. the lines preceded by an explicit newline in the source.
    """

    lines: tuple[str, ...]
    newline_indices: tuple[int, ...] = ()

    def starts_paragraph(self, index: int) -> bool:
        """Whether line ``index`` follows an explicit newline."""
        return index in self.newline_indices


def wrap_text(text: str, wrap_width: float, measure: MeasureText, font: FontState) -> WrapResult:
    """
    Wrap text greedily so that lines fit within wrap_width where possible.

    Each paragraph is split on single spaces and words are packed onto the
    current line while their width plus one space fits into the space left.
    A word that is wider than wrap_width is never split: it gets a line of
    its own and overflows.

    Args:
        text: Text to wrap. ``\\n`` and ``\\r\\n`` start a new paragraph.
        wrap_width: Maximum line width in layout units.
        measure: Width measurer.
        font: Font state passed to the measurer.

    Returns:
        WrapResult with the wrapped lines and paragraph boundaries.
    """
    space_width = measure(" ", font)
    paragraphs = _WRAP_NEWLINE.split(text)

    lines: list[str] = []
    newline_indices: list[int] = []

    for i, paragraph in enumerate(paragraphs):
        current = ""
        space_left = wrap_width

        for j, word in enumerate(paragraph.split(" ")):
            word_width = measure(word, font)
            word_width_with_space = word_width + space_width

            if j == 0 or word_width_with_space > space_left:
                # The first word of a paragraph never breaks, even if it overflows
                if j > 0:
                    lines.append(current)
                    current = ""
                current += word
                space_left = wrap_width - word_width
            else:
                space_left -= word_width_with_space
                current += " " + word

        lines.append(current)

        if i < len(paragraphs) - 1:
            newline_indices.append(len(lines))

    logger.debug(f"Wrapped {len(paragraphs)} paragraph(s) into {len(lines)} line(s) at width {wrap_width}")
    return WrapResult(lines=tuple(lines), newline_indices=tuple(newline_indices))


def split_lines(text: str) -> WrapResult:
    """
    Split text on explicit newlines only (word wrap disabled).

    Every line after the first starts its own paragraph.
    """
    lines = _ANY_NEWLINE.split(text)
    return WrapResult(lines=tuple(lines), newline_indices=tuple(range(1, len(lines))))
