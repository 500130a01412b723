#!/usr/bin/env python3
"""
Measure Example: Layout Without Drawing

Uses ReportLab's built-in Helvetica metrics to size a label, then inspects
the draw instructions a custom rasterizer would execute.
"""

from textlayout import StyleSettings, layout
from textlayout.fonts.metrics import ReportLabMetrics

settings = StyleSettings(
    text="Side A\nThe quick brown fox jumps over the lazy dog",
    fontFace=["Helvetica"],
    fontSize=14,
    wordWrapWidth=150,
    paddingLeft=4,
    paddingRight=4,
)

metrics = ReportLabMetrics()

info = layout(settings, metrics, draw=False).info
print(f"Auto-sized box: {info.w:.1f} x {info.h:.1f}")
for line in info.lines:
    print(f"  {line}")

plan = layout(settings, metrics).draw_plan
print(f"\nSurface: {plan.width} x {plan.height} px, font {plan.font.css}")
for instruction in plan.instructions:
    print(f"  {instruction}")
