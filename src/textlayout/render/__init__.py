"""Rasterization backends for draw plans."""

from textlayout.render.image import (
    PillowRenderer,
    argb_to_rgba,
    render_text,
    save_image_to_bytes,
)

__all__ = [
    "PillowRenderer",
    "argb_to_rgba",
    "render_text",
    "save_image_to_bytes",
]
