"""Draw plan rasterization using Pillow."""

import logging
from io import BytesIO

from PIL import Image, ImageDraw, ImageFilter, ImageFont

from textlayout.config import StyleSettings
from textlayout.engine import LayoutInfo, layout
from textlayout.fonts import load_image_font
from textlayout.fonts.metrics import PillowMetrics
from textlayout.layout.plan import DrawPlan, DrawText, FillRect, RestoreShadow, SetShadow, Translate
from textlayout.metrics import MeasureText
from textlayout.types import ARGBColor, RGBAColor

logger = logging.getLogger(__name__)

# Canvas text baselines mapped to Pillow text anchors (left-aligned)
BASELINE_ANCHORS = {
    "alphabetic": "ls",
    "top": "la",
    "hanging": "la",
    "middle": "lm",
    "ideographic": "ld",
    "bottom": "ld",
}


def argb_to_rgba(color: ARGBColor) -> RGBAColor:
    """
    Convert an ARGB integer (0xAARRGGBB) to a Pillow RGBA tuple.

    Args:
        color: ARGB color.

    Returns:
        Tuple of (r, g, b, a) in 0-255 range.
    """
    return (
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
        (color >> 24) & 0xFF,
    )


class PillowRenderer:
    """Executes draw plans onto transparent RGBA images."""

    def render(self, plan: DrawPlan) -> Image.Image:
        """
        Rasterize a draw plan.

        Args:
            plan: Draw plan with surface size, font and instructions.

        Returns:
            RGBA image of the plan's surface size.
        """
        image = Image.new("RGBA", (plan.width, plan.height), (0, 0, 0, 0))
        font = load_image_font(plan.font)
        anchor = BASELINE_ANCHORS.get(plan.font.baseline, "ls")

        origin_x, origin_y = 0.0, 0.0
        shadow: SetShadow | None = None

        for instruction in plan.instructions:
            if isinstance(instruction, Translate):
                origin_x += instruction.dx
                origin_y += instruction.dy
            elif isinstance(instruction, FillRect):
                if instruction.width <= 0 or instruction.height <= 0:
                    continue
                x = origin_x + instruction.x
                y = origin_y + instruction.y
                ImageDraw.Draw(image).rectangle(
                    (x, y, x + instruction.width, y + instruction.height),
                    fill=argb_to_rgba(instruction.color),
                )
            elif isinstance(instruction, SetShadow):
                shadow = instruction
            elif isinstance(instruction, RestoreShadow):
                shadow = None
            elif isinstance(instruction, DrawText):
                position = (origin_x + instruction.x, origin_y + instruction.y)
                if shadow is not None:
                    self._draw_shadow(image, instruction.text, position, font, anchor, shadow)
                ImageDraw.Draw(image).text(
                    position, instruction.text, font=font, fill=argb_to_rgba(instruction.color), anchor=anchor
                )

        logger.debug(f"Rendered {len(plan.text_runs)} text run(s) to {plan.width}x{plan.height} image")
        return image

    def _draw_shadow(
        self,
        image: Image.Image,
        text: str,
        position: tuple[float, float],
        font: ImageFont.FreeTypeFont | ImageFont.ImageFont,
        anchor: str,
        shadow: SetShadow,
    ) -> None:
        """Draw a blurred copy of the text below the text run."""
        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        shadow_position = (position[0] + shadow.offset_x, position[1] + shadow.offset_y)
        ImageDraw.Draw(layer).text(
            shadow_position, text, font=font, fill=argb_to_rgba(shadow.color), anchor=anchor
        )

        # Canvas shadow blur corresponds to a Gaussian with sigma = blur / 2
        if shadow.blur > 0:
            layer = layer.filter(ImageFilter.GaussianBlur(shadow.blur / 2))

        image.alpha_composite(layer)


def render_text(
    settings: StyleSettings, measure: MeasureText | None = None
) -> tuple[LayoutInfo, Image.Image]:
    """
    Lay out and rasterize text in one step.

    Args:
        settings: Style settings including the text.
        measure: Width measurer. Defaults to PillowMetrics so that layout
                 widths match the drawn glyphs.

    Returns:
        Tuple of (layout info, RGBA image).
    """
    result = layout(settings, measure or PillowMetrics(), draw=True)
    if result.draw_plan is None:
        raise RuntimeError("Layout returned no draw plan for a drawing request")
    return result.info, PillowRenderer().render(result.draw_plan)


def save_image_to_bytes(img: Image.Image, format: str = "PNG") -> bytes:
    """
    Save PIL Image to bytes.

    Args:
        img: PIL Image object.
        format: Image format (PNG, JPEG, etc.).

    Returns:
        Image as bytes.
    """
    buffer = BytesIO()
    img.save(buffer, format=format)
    return buffer.getvalue()
