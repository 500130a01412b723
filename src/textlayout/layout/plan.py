"""Renderer-agnostic draw instructions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Union

from textlayout.layout.box import BoxLayout
from textlayout.metrics import FontState
from textlayout.types import ARGBColor

if TYPE_CHECKING:
    from textlayout.config import StyleSettings


@dataclass(frozen=True)
class Translate:
    """Move the coordinate origin by (dx, dy) pixels."""

    dx: float
    dy: float
    kind: Literal["translate"] = field(default="translate", init=False)


@dataclass(frozen=True)
class FillRect:
    """Fill a rectangle (line highlight)."""

    x: float
    y: float
    width: float
    height: float
    color: ARGBColor
    kind: Literal["fill_rect"] = field(default="fill_rect", init=False)


@dataclass(frozen=True)
class SetShadow:
    """Apply a drop shadow to the following text runs."""

    color: ARGBColor
    offset_x: float
    offset_y: float
    blur: float
    kind: Literal["set_shadow"] = field(default="set_shadow", init=False)


@dataclass(frozen=True)
class DrawText:
    """Draw one line of text with its baseline at (x, y)."""

    text: str
    x: float
    y: float
    color: ARGBColor
    kind: Literal["draw_text"] = field(default="draw_text", init=False)


@dataclass(frozen=True)
class RestoreShadow:
    """Restore the shadow state in effect before the last SetShadow."""

    kind: Literal["restore_shadow"] = field(default="restore_shadow", init=False)


DrawInstruction = Union[Translate, FillRect, SetShadow, DrawText, RestoreShadow]


@dataclass(frozen=True)
class DrawPlan:
    """
    Everything a rasterizer needs to draw a laid out text box.

    Attributes:
        width: Surface width in pixels.
        height: Surface height in pixels.
        font: Font state with precision-scaled size.
        instructions: Draw instructions in execution order.
    """

    width: int
    height: int
    font: FontState
    instructions: tuple[DrawInstruction, ...]

    @property
    def text_runs(self) -> list[DrawText]:
        return [i for i in self.instructions if isinstance(i, DrawText)]


def assemble_draw_plan(box: BoxLayout, settings: StyleSettings, size: tuple[int, int]) -> DrawPlan:
    """
    Resolve highlight, shadow and clip settings into draw instructions.

    Order: clip translation, highlight rectangles, shadow, text runs,
    shadow restore, clip translation back.

    Args:
        box: Resolved box geometry with scaled line positions.
        settings: Style settings.
        size: Surface size in pixels.

    Returns:
        DrawPlan for the box.
    """
    precision = settings.precision
    font_size = settings.font_size
    instructions: list[DrawInstruction] = []

    if settings.clip_origin_set:
        instructions.append(Translate(-(settings.cut_sx * precision), -(settings.cut_sy * precision)))

    if settings.highlight:
        height = settings.highlight_height or font_size * 1.5
        offset = -0.5 * font_size if settings.highlight_offset is None else settings.highlight_offset
        padding_left = (
            settings.padding_left if settings.highlight_padding_left is None else settings.highlight_padding_left
        )
        padding_right = (
            settings.padding_right if settings.highlight_padding_right is None else settings.highlight_padding_right
        )

        for line in box.lines:
            instructions.append(FillRect(
                x=line.x - padding_left * precision,
                y=line.y + offset * precision,
                width=line.width + (padding_left + padding_right) * precision,
                height=height * precision,
                color=settings.highlight_color,
            ))

    if settings.shadow:
        instructions.append(SetShadow(
            color=settings.shadow_color,
            offset_x=settings.shadow_offset_x * precision,
            offset_y=settings.shadow_offset_y * precision,
            blur=settings.shadow_blur * precision,
        ))

    for line in box.lines:
        instructions.append(DrawText(text=line.text, x=line.x, y=line.y, color=settings.text_color))

    if settings.shadow:
        instructions.append(RestoreShadow())

    if settings.clip_origin_set:
        # Undone in layout units, not pixels
        instructions.append(Translate(settings.cut_sx, settings.cut_sy))

    width, height = size
    return DrawPlan(
        width=width,
        height=height,
        font=settings.font_state(scaled=True),
        instructions=tuple(instructions),
    )
