#!/usr/bin/env python3
"""
Simple Example: Wrapped, Truncated Text

Lays out a paragraph in a fixed-width box, limits it to three lines and
renders it to a PNG with Pillow.
"""

from textlayout import StyleSettings, layout
from textlayout.fonts.metrics import PillowMetrics
from textlayout.render import PillowRenderer

settings = StyleSettings(
    text=(
        "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod "
        "tempor incididunt ut labore et dolore magna aliqua.\nUt enim ad minim veniam."
    ),
    fontSize=24,
    w=320,
    paddingLeft=8,
    paddingRight=8,
    maxLines=3,
    maxLinesSuffix="...",
    textAlign="center",
    highlight=True,
    highlightColor=0xFF202020,
    shadow=True,
    shadowOffsetX=2,
    shadowOffsetY=2,
    precision=2,
)

result = layout(settings, PillowMetrics())

print(f"Box: {result.info.w} x {result.info.h}")
for line, width in zip(result.info.lines, result.info.line_widths):
    print(f"  {width:7.2f}  {line}")
print(f"Remaining text: {result.info.remaining_text!r}")

image = PillowRenderer().render(result.draw_plan)
image.save("simple_example.png")

print("✓ Text saved to: simple_example.png")
