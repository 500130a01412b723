"""Word-wrapped text layout plans for canvas-style renderers."""

__version__ = "0.1.0"

# High-level Python API
from textlayout.config import StyleSettings, load_style
from textlayout.engine import LayoutInfo, LayoutResult, layout
from textlayout.layout.plan import DrawPlan
from textlayout.metrics import FixedWidthMetrics, FontState, MeasureText

__all__ = [
    "DrawPlan",
    "FixedWidthMetrics",
    "FontState",
    "LayoutInfo",
    "LayoutResult",
    "MeasureText",
    "StyleSettings",
    "layout",
    "load_style",
]
