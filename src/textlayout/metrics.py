"""Text measurement port used by the layout engine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

# A measurer returns the rendered width of a string for a font state.
# Errors raised by a measurer (e.g., an unknown font) propagate to the caller.
MeasureText = Callable[[str, "FontState"], float]


@dataclass(frozen=True)
class FontState:
    """
    Font settings in effect while measuring or drawing.

    Attributes:
        faces: Font family names in order of preference.
        style: Style prefix (e.g., "normal", "italic", "bold").
        size: Font size in layout units (or pixels once scaled).
        baseline: Text baseline the draw position refers to.
    """

    faces: tuple[str, ...]
    style: str = "normal"
    size: float = 40.0
    baseline: str = "alphabetic"

    def scaled(self, precision: float) -> FontState:
        """Return a copy with the size multiplied by precision."""
        return replace(self, size=self.size * precision)

    @property
    def css(self) -> str:
        """
        CSS font shorthand for canvas-style backends.

        Examples:
            >>> FontState(("Roboto", "sans-serif"), "italic", 24).css
            'italic 24px "Roboto","sans-serif"'
        """
        families = ",".join(f'"{face}"' for face in self.faces)
        return f"{self.style} {self.size:g}px {families}"

    @property
    def is_bold(self) -> bool:
        return "bold" in self.style.lower()

    @property
    def is_italic(self) -> bool:
        style = self.style.lower()
        return "italic" in style or "oblique" in style


@dataclass(frozen=True)
class FixedWidthMetrics:
    """
    Deterministic measurer where every character has the same advance.

    Width is ``len(text) * size * em_ratio``, so a 20 unit font with the
    default ratio gives 10 units per character. Useful for tests and for
    headless layout where no font files are available.
    """

    em_ratio: float = 0.5

    def __call__(self, text: str, font: FontState) -> float:
        return len(text) * font.size * self.em_ratio
