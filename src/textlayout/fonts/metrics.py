"""Font-backed measurers for the layout engine."""

import logging
from pathlib import Path

import uharfbuzz as hb
from PIL import ImageFont
from reportlab.pdfbase import pdfmetrics

from textlayout.fonts import load_image_font, resolve_font
from textlayout.metrics import FontState

logger = logging.getLogger(__name__)


class ReportLabMetrics:
    """Measures text with ReportLab's font metrics (built-in PDF fonts or registered TTFs)."""

    def __init__(self) -> None:
        self._font_names: dict[FontState, str] = {}

    def font_name(self, font: FontState) -> str:
        """Registered font name used for a font state."""
        if font not in self._font_names:
            self._font_names[font] = resolve_font(font.faces, font.style)
        return self._font_names[font]

    def __call__(self, text: str, font: FontState) -> float:
        return pdfmetrics.stringWidth(text, self.font_name(font), font.size)


class PillowMetrics:
    """Measures text with the Pillow font that the image renderer draws with."""

    def __init__(self) -> None:
        self._fonts: dict[FontState, ImageFont.FreeTypeFont | ImageFont.ImageFont] = {}

    def __call__(self, text: str, font: FontState) -> float:
        if font not in self._fonts:
            self._fonts[font] = load_image_font(font)
        return self._fonts[font].getlength(text)


class HarfBuzzMetrics:
    """
    Measures shaped text advances with HarfBuzz.

    Shaping applies the font's kerning and ligatures, so widths match what a
    shaping rasterizer produces. The font file is fixed; faces and style of
    the font state are ignored, only its size is used.
    """

    def __init__(self, font_path: Path) -> None:
        """
        Load a font for shaping.

        Args:
            font_path: Path to a TrueType/OpenType font file.

        Raises:
            FileNotFoundError: If the font file doesn't exist.
        """
        if not font_path.exists():
            raise FileNotFoundError(f"Font file not found: {font_path}")

        with open(font_path, "rb") as f:
            fontdata = f.read()

        self._face = hb.Face(fontdata)
        self._font = hb.Font(self._face)
        logger.debug(f"Loaded {font_path.name} for shaping ({self._face.upem} units/em)")

    def __call__(self, text: str, font: FontState) -> float:
        if not text:
            return 0.0

        buf = hb.Buffer()
        buf.add_str(text)
        buf.guess_segment_properties()
        hb.shape(self._font, buf)

        # Advances are in font units at the default scale (upem)
        advance = sum(pos.x_advance for pos in buf.glyph_positions)
        return advance * font.size / self._face.upem
