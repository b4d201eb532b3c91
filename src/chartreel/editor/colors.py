"""Color parsing shared by the sprite, chart and scene renderers."""

import re
from typing import Tuple

from PIL import ImageColor

RGBA = Tuple[int, int, int, int]

_RGBA_PATTERN = re.compile(
    r"^rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)$"
)


def parse_color(value: str) -> RGBA:
    """Parse a CSS-style color string.

    Accepts ``#rgb``, ``#rrggbb``, ``#rrggbbaa``, ``rgb(r, g, b)``,
    ``rgba(r, g, b, a)`` with ``a`` in 0..1, named colors and
    ``transparent``.

    Raises:
        ValueError: If the value is not a recognised color.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid color: {value!r}")

    text = value.strip().lower()
    if text == "transparent":
        return (0, 0, 0, 0)

    match = _RGBA_PATTERN.match(text)
    if match:
        r, g, b, a = match.groups()
        channels = [min(255, int(round(float(c)))) for c in (r, g, b)]
        alpha = 255 if a is None else int(round(min(1.0, float(a)) * 255))
        return (channels[0], channels[1], channels[2], alpha)

    try:
        rgb = ImageColor.getrgb(text)
    except ValueError:
        raise ValueError(f"Invalid color: {value!r}") from None

    if len(rgb) == 4:
        return rgb
    return (rgb[0], rgb[1], rgb[2], 255)


def to_hex(value: str) -> str:
    """Render a color as ``#rrggbb`` (alpha dropped)."""
    r, g, b, _ = parse_color(value)
    return f"#{r:02x}{g:02x}{b:02x}"


def to_mpl(value: str) -> Tuple[float, float, float, float]:
    """Convert a color to a matplotlib RGBA float tuple."""
    r, g, b, a = parse_color(value)
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)
