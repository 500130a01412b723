"""Style settings loading and validation."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel, to_snake

from textlayout.metrics import FontState
from textlayout.types import ARGBColor, TextAlign

logger = logging.getLogger(__name__)

TEXT_ALIGNMENTS: tuple[TextAlign, ...] = ("left", "center", "right")


class StyleSettings(BaseModel):
    """
    Complete text style with all layout and drawing settings.

    Settings are immutable and validated once on construction. Every field
    accepts its camelCase alias as well (``fontSize``, ``maxLinesSuffix``,
    ``cutSx``...), so settings dictionaries written for canvas text
    renderers can be passed in unchanged:

        base = StyleSettings(text="Hello", fontSize=24)
        wrapped = base.model_copy(update={"w": 200})
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    # ========================================================================
    # Text & Font
    # ========================================================================
    text: str
    """Text to lay out. May contain explicit newlines."""

    font_face: tuple[str, ...] = ("sans-serif",)
    """Font family list in order of preference. A single string is accepted."""

    font_style: str = "normal"
    """Font style prefix (e.g., "normal", "italic", "bold")."""

    font_size: float = Field(default=40, gt=0)
    """Font size in layout units."""

    text_baseline: str = "alphabetic"
    """Baseline the y position of each line refers to."""

    text_color: ARGBColor = 0xFFFFFFFF
    """Text color as ARGB integer. Default: opaque white."""

    # ========================================================================
    # Box
    # ========================================================================
    w: float | None = None
    """Explicit box width. None (or 0) auto-sizes to the widest line."""

    h: float | None = None
    """Explicit box height. None (or 0) auto-sizes to the line count."""

    padding_left: float = 0
    """Space left of the text flow area."""

    padding_right: float = 0
    """Space right of the text flow area."""

    # ========================================================================
    # Wrapping & Truncation
    # ========================================================================
    word_wrap: bool = True
    """Greedily wrap words to the wrap width."""

    word_wrap_width: float | None = None
    """Wrap width. None (or 0) wraps at the inner box width."""

    max_lines: int | None = Field(default=None, ge=0)
    """Maximum visible lines. None (or 0) disables truncation."""

    max_lines_suffix: str | None = None
    """Suffix appended to the last visible line when text is truncated (e.g., "...")."""

    # ========================================================================
    # Vertical Metrics & Alignment
    # ========================================================================
    line_height: float | None = None
    """Distance between baselines. None (or 0) uses font_size."""

    offset_y: float | None = None
    """Baseline of the first line. None uses font_size."""

    text_align: str = "left"
    """Horizontal alignment: "left", "center" or "right". Anything else acts as left."""

    # ========================================================================
    # Highlight
    # ========================================================================
    highlight: bool = False
    """Draw a filled rectangle behind every line."""

    highlight_color: ARGBColor = 0x00000000
    """Highlight color as ARGB integer."""

    highlight_height: float | None = None
    """Highlight rectangle height. None uses 1.5 * font_size."""

    highlight_offset: float | None = None
    """Highlight top relative to the baseline. None uses -0.5 * font_size."""

    highlight_padding_left: float | None = None
    """Highlight extension left of the text. None uses padding_left."""

    highlight_padding_right: float | None = None
    """Highlight extension right of the text. None uses padding_right."""

    # ========================================================================
    # Shadow
    # ========================================================================
    shadow: bool = False
    """Draw text runs with a drop shadow."""

    shadow_color: ARGBColor = 0xFF000000
    """Shadow color as ARGB integer. Default: opaque black."""

    shadow_offset_x: float = 0
    shadow_offset_y: float = 0
    shadow_blur: float = 5

    # ========================================================================
    # Clip Region
    # ========================================================================
    cut_sx: float = 0
    cut_sy: float = 0
    cut_ex: float = 0
    cut_ey: float = 0

    # ========================================================================
    # Output
    # ========================================================================
    precision: float = Field(default=1, gt=0)
    """Uniform scale applied to all output geometry (e.g., 2 for high-density targets)."""

    @field_validator("font_face", mode="before")
    @classmethod
    def _coerce_font_face(cls, value: Any) -> Any:
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("w", "h", "word_wrap_width", "line_height", "max_lines", "highlight_height")
    @classmethod
    def _zero_is_unset(cls, value: Any) -> Any:
        # A zero dimension means "not set" rather than a degenerate box
        return value or None

    @model_validator(mode="after")
    def _check_alignment(self) -> "StyleSettings":
        if self.text_align not in TEXT_ALIGNMENTS:
            logger.warning(f"Unsupported text_align '{self.text_align}', treating as left")
        return self

    # ========================================================================
    # Computed Properties
    # ========================================================================

    @property
    def effective_line_height(self) -> float:
        """Line height with font_size fallback."""
        return self.line_height or self.font_size

    @property
    def effective_offset_y(self) -> float:
        """First baseline offset with font_size fallback."""
        return self.font_size if self.offset_y is None else self.offset_y

    @property
    def effective_text_align(self) -> TextAlign:
        """Alignment with unsupported values mapped to left."""
        if self.text_align in TEXT_ALIGNMENTS:
            return self.text_align  # type: ignore[return-value]
        return "left"

    @property
    def clip_x_set(self) -> bool:
        return bool(self.cut_sx or self.cut_ex)

    @property
    def clip_y_set(self) -> bool:
        return bool(self.cut_sy or self.cut_ey)

    @property
    def clip_origin_set(self) -> bool:
        """Whether drawing must be translated to the clip origin."""
        return bool(self.cut_sx or self.cut_sy)

    def font_state(self, scaled: bool = False) -> FontState:
        """
        Build the font state for measurement or drawing.

        Args:
            scaled: Multiply the font size by precision (used for drawing).

        Returns:
            FontState for this style.
        """
        state = FontState(
            faces=self.font_face,
            style=self.font_style,
            size=self.font_size,
            baseline=self.text_baseline,
        )
        return state.scaled(self.precision) if scaled else state


def load_style(style_path: Path, **overrides: Any) -> StyleSettings:
    """
    Load style settings from a TOML file.

    Settings are read from a ``[style]`` table if present, otherwise from the
    top level. Keys may use either snake_case or camelCase names.

    Args:
        style_path: Path to the TOML file.
        **overrides: Settings that replace values from the file (e.g., text).

    Returns:
        Validated StyleSettings object.

    Raises:
        FileNotFoundError: If the style file doesn't exist.
        pydantic.ValidationError: If the settings are invalid.
    """
    if not style_path.exists():
        raise FileNotFoundError(f"Style file not found: {style_path}")

    with open(style_path, "rb") as f:
        style_dict = tomllib.load(f)

    # Normalize camelCase keys so overrides always win over file values
    settings = {to_snake(key): value for key, value in style_dict.get("style", style_dict).items()}
    settings.update({to_snake(key): value for key, value in overrides.items()})
    settings.setdefault("text", "")

    logger.debug(f"Loaded {len(settings)} style setting(s) from {style_path}")
    return StyleSettings(**settings)
