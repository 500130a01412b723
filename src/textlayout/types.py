"""Type aliases used across the textlayout package."""

from typing import Literal, Tuple

# Colors are opaque ARGB integers (0xAARRGGBB), passed through to the renderer
ARGBColor = int
RGBAColor = Tuple[int, int, int, int]  # Pillow fill color, 0-255 per channel

# Horizontal alignment options
TextAlign = Literal["left", "center", "right"]
