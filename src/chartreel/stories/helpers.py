"""Layout helpers shared by the story builders."""

from typing import List, Optional

from ..models import RectNode, Scene, TextNode

# Vertical short-video canvas
WIDTH = 1080
HEIGHT = 1920
FPS = 30


def add_centered_text(
    scene: Scene,
    text: str,
    y: float,
    font_size: int = 64,
    color: str = "#ffffff",
    effect: Optional[str] = "fadeIn",
    duration: float = 0.8,
    delay: float = 0.0,
    **fields,
) -> TextNode:
    """Add a horizontally centred text node to a scene.

    Args:
        scene: Scene to add to.
        text: Text content.
        y: Vertical centre in pixels.
        font_size: Font size in pixels.
        color: Fill color.
        effect: Entrance animation name, or None for none.
        duration: Animation duration in seconds.
        delay: Animation delay in seconds.
        **fields: Extra TextNode fields (stroke, background, font...).

    Returns:
        The created node.
    """
    node = TextNode(
        text=text,
        x=WIDTH / 2,
        y=y,
        font_size=font_size,
        color=color,
        align="center",
        **fields,
    )
    if effect:
        node.add_effect(effect, duration, delay)
    scene.add_child(node)
    return node


def add_shadow_card(
    scene: Scene,
    x: float,
    y: float,
    width: float,
    height: float,
    delay: float = 0.0,
    color: str = "#ffffff",
    shadow: str = "rgba(0,0,0,0.08)",
    radius: int = 24,
) -> RectNode:
    """Add a card with a soft offset shadow. Returns the card node."""
    scene.add_child(
        RectNode(x=x + 6, y=y + 10, width=width, height=height, color=shadow, radius=radius)
        .add_effect("fadeIn", 0.8, delay)
    )
    card = RectNode(x=x, y=y, width=width, height=height, color=color, radius=radius)
    card.add_effect("fadeInUp", 0.8, delay)
    scene.add_child(card)
    return card


def add_lower_third(
    scene: Scene,
    title: str,
    subtitle: str,
    delay: float = 0.0,
    title_color: str = "#1d1d1f",
    subtitle_color: str = "#86868b",
    box_color: str = "#ffffff",
) -> List[TextNode]:
    """Add a title and subtitle bar near the bottom of the frame."""
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT - 250, width=900, height=180, color=box_color, radius=16)
        .add_effect("fadeInUp", 0.6, delay)
    )
    return [
        add_centered_text(scene, title, HEIGHT - 280, 32, title_color, "fadeInUp", 0.6, delay + 0.2),
        add_centered_text(scene, subtitle, HEIGHT - 220, 24, subtitle_color, "fadeIn", 0.6, delay + 0.4),
    ]


def add_progress_indicator(
    scene: Scene,
    current: int,
    total: int,
    delay: float = 0.0,
    active: str = "#0071e3",
    inactive: str = "#d2d2d7",
    spacing: float = 40.0,
) -> List[RectNode]:
    """Add a row of dots with the ``current`` one (1-based) highlighted."""
    first = WIDTH / 2 - spacing * (total - 1) / 2
    dots = []
    for i in range(total):
        size = 14 if i + 1 == current else 10
        dot = RectNode(
            x=first + i * spacing,
            y=HEIGHT - 100,
            width=size,
            height=size,
            radius=size // 2,
            color=active if i + 1 == current else inactive,
        )
        dot.add_effect("zoomIn", 0.4, delay + i * 0.1)
        scene.add_child(dot)
        dots.append(dot)
    return dots


def add_series_footer(scene: Scene, number: int, color: str = "#666666", delay: float = 1.0) -> TextNode:
    """Add the "STORY N OF 30" footer."""
    return add_centered_text(scene, f"STORY {number} OF 30", HEIGHT - 160, 28, color, "fadeIn", 0.8, delay)
