"""Sprite rendering for text, rectangle and image nodes."""

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFilter, ImageFont

from ..config import config
from ..models import ImageNode, RectNode, TextNode
from .colors import parse_color
from .effects import EffectState

logger = logging.getLogger(__name__)

FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
    "/Library/Fonts/Arial.ttf",
    "C:/Windows/Fonts/arialbd.ttf",
]


@dataclass
class TextStyle:
    """Configuration for text overlay styling."""

    font: Optional[str] = None
    font_size: int = 48
    color: str = "white"
    stroke_color: Optional[str] = "black"
    stroke_width: int = 2
    background_color: Optional[str] = None
    background_padding: Tuple[int, int] = field(default_factory=lambda: (10, 5))


# Preset styles
STYLES = {
    "default": TextStyle(),
    "title": TextStyle(font_size=72, stroke_width=3),
    "subtitle": TextStyle(font_size=36, stroke_width=1),
    "caption": TextStyle(
        font_size=32,
        background_color="rgba(0,0,0,0.7)",
        stroke_color=None,
        stroke_width=0
    ),
    "minimal": TextStyle(
        font_size=42,
        stroke_color=None,
        stroke_width=0
    ),
}


def get_style(name: str) -> TextStyle:
    """Get a text style by name.

    Args:
        name: Style name.

    Returns:
        TextStyle configuration.

    Raises:
        ValueError: If style not found.
    """
    if name not in STYLES:
        raise ValueError(f"Unknown style: {name}. Available: {list(STYLES.keys())}")
    return STYLES[name]


def register_style(name: str, style: TextStyle) -> None:
    """Register a custom text style.

    Args:
        name: Name for the style.
        style: TextStyle configuration.
    """
    STYLES[name] = style


@lru_cache(maxsize=64)
def load_font(size: int, font: Optional[str] = None) -> ImageFont.ImageFont:
    """Load a font at the given pixel size.

    Tries the requested font, then ``CHARTREEL_FONT``, then common system
    fonts, and finally Pillow's built-in font.
    """
    for candidate in (font, config.font or None):
        if not candidate:
            continue
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            logger.warning(f"Font not usable, falling back: {candidate}")

    for font_path in FONT_CANDIDATES:
        if Path(font_path).exists():
            try:
                return ImageFont.truetype(font_path, size)
            except OSError:
                continue

    logger.debug("No TrueType font found, using Pillow default font")
    return ImageFont.load_default(size=size)


def resolve_text_style(node: TextNode) -> TextStyle:
    """Merge a node's own settings over its style preset.

    The node's size and color always win. Stroke, background and font come
    from the preset only where the node leaves them unset.
    """
    base = get_style(node.style) if node.style else TextStyle(stroke_color=None, stroke_width=0, background_padding=(0, 0))
    return TextStyle(
        font=node.font or base.font,
        font_size=node.font_size,
        color=node.color,
        stroke_color=node.stroke_color or base.stroke_color,
        stroke_width=node.stroke_width or base.stroke_width,
        background_color=node.background_color or base.background_color,
        background_padding=node.padding if any(node.padding) else base.background_padding,
    )


def render_text(node: TextNode) -> Image.Image:
    """Draw a text node onto a tight transparent sprite."""
    style = resolve_text_style(node)
    font = load_font(style.font_size, style.font)
    stroke = style.stroke_width if style.stroke_color else 0
    pad_x, pad_y = style.background_padding

    lines = node.text.split("\n")
    widths = []
    for line in lines:
        left, _, right, _ = font.getbbox(line or " ", stroke_width=stroke)
        widths.append(right - left)
    line_height = int(round(style.font_size * node.line_spacing))

    width = max(1, max(widths) + 2 * (pad_x + stroke))
    height = max(1, line_height * len(lines) + 2 * (pad_y + stroke))

    background = parse_color(style.background_color) if style.background_color else (0, 0, 0, 0)
    sprite = Image.new("RGBA", (width, height), background)
    draw = ImageDraw.Draw(sprite)

    fill = parse_color(style.color)
    stroke_fill = parse_color(style.stroke_color) if stroke else None
    inner = width - 2 * (pad_x + stroke)

    for i, (line, line_width) in enumerate(zip(lines, widths)):
        if node.align == "center":
            x = pad_x + stroke + (inner - line_width) / 2
        elif node.align == "right":
            x = pad_x + stroke + inner - line_width
        else:
            x = pad_x + stroke
        y = pad_y + stroke + i * line_height + line_height / 2
        draw.text(
            (x, y),
            line,
            font=font,
            fill=fill,
            anchor="lm",
            stroke_width=stroke,
            stroke_fill=stroke_fill,
        )

    return sprite


def render_rect(node: RectNode) -> Image.Image:
    """Draw a rectangle node."""
    size = (max(1, int(round(node.width))), max(1, int(round(node.height))))
    color = parse_color(node.color)
    if node.radius <= 0:
        return Image.new("RGBA", size, color)

    sprite = Image.new("RGBA", size, (0, 0, 0, 0))
    ImageDraw.Draw(sprite).rounded_rectangle(
        (0, 0, size[0] - 1, size[1] - 1), radius=node.radius, fill=color
    )
    return sprite


def render_image(node: ImageNode) -> Image.Image:
    """Load and size an image node.

    Raises:
        FileNotFoundError: If the image file doesn't exist.
    """
    path = Path(node.path)
    if not path.exists():
        raise FileNotFoundError(f"Image not found: {path}")

    with Image.open(path) as source:
        sprite = source.convert("RGBA")

    if node.width and node.height:
        return sprite.resize((node.width, node.height), Image.LANCZOS)
    if node.width:
        ratio = node.width / sprite.width
        return sprite.resize((node.width, max(1, round(sprite.height * ratio))), Image.LANCZOS)
    if node.height:
        ratio = node.height / sprite.height
        return sprite.resize((max(1, round(sprite.width * ratio)), node.height), Image.LANCZOS)
    return sprite


def render_node(node) -> Image.Image:
    """Render a static node sprite. Charts are drawn by the chart animator."""
    if isinstance(node, TextNode):
        return render_text(node)
    if isinstance(node, RectNode):
        return render_rect(node)
    if isinstance(node, ImageNode):
        return render_image(node)
    raise TypeError(f"No static sprite for node type: {type(node).__name__}")


def anchor_offset(node, size: Tuple[int, int]) -> Tuple[float, float]:
    """Top-left corner of a node's sprite on the canvas."""
    width, height = size
    if isinstance(node, TextNode):
        if node.align == "center":
            left = node.x - width / 2
        elif node.align == "right":
            left = node.x - width
        else:
            left = node.x
    else:
        left = node.x - width / 2
    return left, node.y - height / 2


def apply_state(sprite: Image.Image, state: EffectState) -> Image.Image:
    """Scale, rotate, blur and fade a sprite for one frame."""
    result = sprite
    if abs(state.scale - 1.0) > 1e-3:
        size = (
            max(1, int(round(result.width * state.scale))),
            max(1, int(round(result.height * state.scale))),
        )
        result = result.resize(size, Image.BILINEAR)
    if abs(state.angle) > 1e-2:
        result = result.rotate(state.angle, resample=Image.BICUBIC, expand=True)
    if state.blur > 0.1:
        result = result.filter(ImageFilter.GaussianBlur(state.blur))
    if state.opacity < 0.999:
        alpha = result.getchannel("A").point(lambda a: int(a * state.opacity))
        result = result.copy()
        result.putalpha(alpha)
    return result


def paste_centered(canvas: Image.Image, sprite: Image.Image, cx: float, cy: float) -> None:
    """Alpha-composite a sprite centred at (cx, cy), clipped to the canvas."""
    left = int(round(cx - sprite.width / 2))
    top = int(round(cy - sprite.height / 2))

    x0, y0 = max(0, left), max(0, top)
    x1 = min(canvas.width, left + sprite.width)
    y1 = min(canvas.height, top + sprite.height)
    if x0 >= x1 or y0 >= y1:
        return

    visible = sprite.crop((x0 - left, y0 - top, x1 - left, y1 - top))
    canvas.alpha_composite(visible, dest=(x0, y0))
