"""Font registration and resolution."""

import logging
from pathlib import Path
from typing import Optional, Sequence

from PIL import ImageFont
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from textlayout.metrics import FontState

logger = logging.getLogger(__name__)

FONTS_DIR = Path(__file__).parent

# Font path registry: maps registered font names to their file paths
# This is needed for measuring and drawing with Pillow and HarfBuzz
_FONT_PATHS: dict[str, Path] = {}

# CSS generic families mapped onto PDF built-in fonts
GENERIC_FAMILIES = {
    "sans-serif": "Helvetica",
    "serif": "Times-Roman",
    "monospace": "Courier",
}

# Style variants of the PDF built-in fonts: (bold, italic) -> name
BUILTIN_VARIANTS = {
    "Helvetica": {
        (True, False): "Helvetica-Bold",
        (False, True): "Helvetica-Oblique",
        (True, True): "Helvetica-BoldOblique",
    },
    "Courier": {
        (True, False): "Courier-Bold",
        (False, True): "Courier-Oblique",
        (True, True): "Courier-BoldOblique",
    },
    "Times-Roman": {
        (True, False): "Times-Bold",
        (False, True): "Times-Italic",
        (True, True): "Times-BoldItalic",
    },
}

# Suffixes tried for style variants of registered TTF fonts
_TTF_VARIANT_SUFFIXES = {
    (True, False): ("Bold",),
    (False, True): ("Italic", "Oblique"),
    (True, True): ("Bold-Italic", "Bolditalic", "Bold-Oblique"),
}


def _normalize_font_name(name: str) -> str:
    """
    Normalize a font name to TitleCase convention.

    Converts hyphen-separated parts to Title Case to match PostScript naming.

    Examples:
        "roboto-regular" → "Roboto-Regular"
        "helvetica-bold" → "Helvetica-Bold"
        "times-roman" → "Times-Roman"

    Args:
        name: Font name to normalize (can be any case)

    Returns:
        TitleCase font name
    """
    parts = name.split('-')
    return '-'.join(part.title() for part in parts)


def _is_registered(font_name: str) -> bool:
    try:
        pdfmetrics.getFont(font_name)
        return True
    except Exception:
        return False


def register_fonts(fonts_dir: Path = FONTS_DIR) -> int:
    """
    Register TTF fonts with ReportLab.

    Auto-discovers all TTF font files in fonts_dir. Each font is registered
    with a TitleCase name based on its filename (without extension), e.g.
    ``roboto-bold.ttf`` is registered as "Roboto-Bold".

    Args:
        fonts_dir: Directory to scan for .ttf files.

    Returns:
        Number of fonts registered.
    """
    ttf_files = sorted(fonts_dir.glob("*.ttf"))

    if not ttf_files:
        logger.warning(
            f"No TTF font files found in {fonts_dir}. "
            "Using built-in fonts (Helvetica, Courier, Times-Roman)."
        )
        return 0

    registered_count = 0
    for font_path in ttf_files:
        font_name = _normalize_font_name(font_path.stem)

        try:
            pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
            _FONT_PATHS[font_name] = font_path
            logger.info(f"Registered font: {font_name} from {font_path.name}")
            registered_count += 1
        except Exception as e:
            logger.warning(
                f"Failed to register font {font_name} from {font_path.name}: {e}. "
                "Skipping this font."
            )

    if registered_count > 0:
        logger.info(f"Successfully registered {registered_count} custom font(s).")
    return registered_count


def _style_variant(font_name: str, bold: bool, italic: bool) -> str:
    if not (bold or italic):
        return font_name

    if font_name in BUILTIN_VARIANTS:
        return BUILTIN_VARIANTS[font_name][(bold, italic)]

    for suffix in _TTF_VARIANT_SUFFIXES[(bold, italic)]:
        candidate = f"{font_name}-{suffix}"
        if _is_registered(candidate):
            return candidate

    logger.debug(f"No {'bold ' if bold else ''}{'italic ' if italic else ''}variant for '{font_name}'")
    return font_name


def resolve_font(faces: Sequence[str], style: str = "normal", fallback: str = "Helvetica") -> str:
    """
    Resolve a font family list to a registered font name (case-insensitive).

    The first face that is registered (TTF fonts or PDF built-ins) wins.
    CSS generic families ("sans-serif", "serif", "monospace") map onto the
    built-in fonts. Bold and italic styles select the matching variant
    where one exists.

    Args:
        faces: Font family names in order of preference.
        style: Font style (e.g., "normal", "bold", "italic", "bold italic").
        fallback: Font used when no face resolves.

    Returns:
        TitleCase registered font name

    Examples:
        >>> resolve_font(["NonExistentFont", "serif"])
        "Times-Roman"

        >>> resolve_font(["sans-serif"], "bold")
        "Helvetica-Bold"
    """
    state = FontState(faces=tuple(faces), style=style)
    bold, italic = state.is_bold, state.is_italic

    for face in faces:
        face = face.strip().strip('"\'')
        font_name = GENERIC_FAMILIES.get(face.lower()) or _normalize_font_name(face)
        if _is_registered(font_name):
            logger.debug(f"Font '{face}' resolved to '{font_name}'")
            return _style_variant(font_name, bold, italic)

    fallback_normalized = _normalize_font_name(fallback)
    logger.warning(f"Using fallback font '{fallback_normalized}' for {list(faces)}")
    return _style_variant(fallback_normalized, bold, italic)


def get_font_path(font_name: str) -> Optional[Path]:
    """
    Get the file path for a registered font.

    Args:
        font_name: Registered font name (e.g., "Roboto-Bold").

    Returns:
        Path to the font file, or None if font path is not tracked.
        Note: PDF built-in fonts (Helvetica, Courier, etc.) won't have paths.
    """
    return _FONT_PATHS.get(font_name)


def load_image_font(font: FontState) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """
    Load a Pillow font for a font state.

    Uses the TTF file of the resolved font when one was registered, otherwise
    Pillow's bundled default font at the requested size.

    Args:
        font: Font state (size in pixels).

    Returns:
        Pillow font object.
    """
    font_name = resolve_font(font.faces, font.style)

    if font_path := get_font_path(font_name):
        return ImageFont.truetype(str(font_path), font.size)

    logger.debug(f"No font file for '{font_name}', using Pillow default font")
    return ImageFont.load_default(size=font.size)
