"""Layout stages: wrapping, truncation, box geometry and draw plans."""

from textlayout.layout.box import BoxLayout, Line, compute_box, surface_size
from textlayout.layout.plan import (
    DrawInstruction,
    DrawPlan,
    DrawText,
    FillRect,
    RestoreShadow,
    SetShadow,
    Translate,
    assemble_draw_plan,
)
from textlayout.layout.truncate import TruncationResult, truncate_lines
from textlayout.layout.wrap import WrapResult, split_lines, wrap_text

__all__ = [
    "BoxLayout",
    "DrawInstruction",
    "DrawPlan",
    "DrawText",
    "FillRect",
    "Line",
    "RestoreShadow",
    "SetShadow",
    "Translate",
    "TruncationResult",
    "WrapResult",
    "assemble_draw_plan",
    "compute_box",
    "split_lines",
    "surface_size",
    "truncate_lines",
    "wrap_text",
]
