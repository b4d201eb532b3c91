"""Story 21: three streetwear looks laid out as pages of a glossy magazine."""

from typing import List, NamedTuple

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

PAPER = "#f5f5f5"
CREAM = "#fef9f3"
RICH_BLACK = "#0a0a0a"
CHARCOAL = "#1a1a1a"
RED = "#c41e3a"
GOLD = "#d4af37"
PURPLE = "#4a154b"
BODY = "#4a4a4a"
CAPTION = "#7a7a7a"

ISSUE = "ISSUE 21 / FALL 2024"


class Look(NamedTuple):
    headline: str
    pieces: List[str]
    quote: str
    page: str
    accent: str


LOOKS = [
    Look("URBAN MINIMAL", ["Oversized Blazer", "Tailored Trousers", "Minimalist Sneakers"], '"Less is always more"', "02", CHARCOAL),
    Look("BOLD STATEMENT", ["Statement Jacket", "Vibrant Accessories", "Confidence is Key"], '"Make them stop and stare"', "04", RED),
    Look("VINTAGE REVIVAL", ["Classic Trench Coat", "Retro Sunglasses", "Leather Handbag"], '"Old is the new gold"', "06", GOLD),
]
TRANSITIONS = ["windowslice", "crosswarp", "slice"]
PERKS = ["Weekly Style Guides", "Exclusive Lookbooks", "Fashion Trends 2024", "Designer Interviews"]


def _page(scene: Scene, color: str = PAPER) -> None:
    """Page sheet with a spine shadow on the left edge."""
    scene.add_child(RectNode(x=WIDTH / 2 + 10, y=HEIGHT / 2 + 10, width=WIDTH - 80, height=HEIGHT - 120, color="rgba(0,0,0,0.25)"))
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=WIDTH - 80, height=HEIGHT - 120, color=color).add_effect("fadeInRight", 0.6))
    scene.add_child(RectNode(x=52, y=HEIGHT / 2, width=24, height=HEIGHT - 120, color="rgba(0,0,0,0.12)"))


def _model(scene: Scene, x: float, y: float, color: str, delay: float) -> None:
    """Fashion silhouette blocked out in the look colour."""
    scene.add_child(RectNode(x=x, y=y - 300, width=110, height=130, radius=55, color=BODY).add_effect("fadeIn", 0.6, delay))
    scene.add_child(RectNode(x=x, y=y - 40, width=300, height=380, radius=40, color=color).add_effect("fadeInUp", 0.6, delay + 0.2))
    for dx in (-60, 60):
        scene.add_child(RectNode(x=x + dx, y=y + 300, width=90, height=320, radius=20, color=CHARCOAL).add_effect("fadeInUp", 0.6, delay + 0.3))


def _cover_scene() -> Scene:
    scene = Scene(id="cover", bg_color=RICH_BLACK, duration=5.0)
    _page(scene, CREAM)
    add_centered_text(scene, "STYLE", 260, 200, RED, "fadeInDown", 0.6, 0.3)
    add_centered_text(scene, ISSUE, 400, 28, CAPTION, "fadeIn", 0.5, 0.8)
    _model(scene, WIDTH / 2, 1050, PURPLE, 1.0)
    add_centered_text(scene, "STREET STYLE", 1560, 72, CHARCOAL, "fadeInLeft", 0.5, 1.8)
    add_centered_text(scene, "REVOLUTION", 1650, 80, RED, "fadeInRight", 0.5, 2.2)
    return scene.set_transition("directionalwarp", 0.6)


def _look_scene(index: int) -> Scene:
    look = LOOKS[index]
    scene = Scene(id=f"page-{look.page}", bg_color=RICH_BLACK, duration=6.0)
    _page(scene)
    # Drop cap and headline
    scene.add_child(TextNode(text=look.headline[0], x=100, y=260, font_size=220, color=look.accent).add_effect("zoomIn", 0.5, 0.4))
    scene.add_child(TextNode(text=look.headline, x=280, y=260, font_size=56, color=CHARCOAL).add_effect("fadeInRight", 0.5, 0.7))
    scene.add_child(RectNode(x=WIDTH / 2, y=420, width=WIDTH - 200, height=4, color=look.accent).add_effect("fadeInLeft", 0.5, 1.0))
    _model(scene, WIDTH * 0.32, 900, look.accent, 1.0)
    for i, piece in enumerate(look.pieces):
        scene.add_child(TextNode(text=f"- {piece}", x=600, y=700 + i * 70, font_size=32, color=BODY).add_effect("fadeIn", 0.4, 2.0 + i * 0.3))
    add_centered_text(scene, look.quote, 1520, 44, look.accent, "fadeInUp", 0.5, 3.2, style="minimal")
    scene.add_child(TextNode(text=look.page, x=WIDTH - 100, y=HEIGHT - 120, font_size=28, color=CAPTION, align="right").add_effect("fadeIn", 0.3, 0.8))
    return scene.set_transition(TRANSITIONS[index], 0.6)


def _back_cover_scene(number: int) -> Scene:
    scene = Scene(id="back-cover", bg_color=RICH_BLACK, duration=6.0)
    add_centered_text(scene, "STYLE", 300, 140, RED, "fadeInDown", 0.5)
    add_centered_text(scene, "MAGAZINE", 420, 48, GOLD, "fadeIn", 0.5, 0.4)
    for i, word in enumerate(["SUBSCRIBE", "FOR MORE", "FASHION"]):
        add_centered_text(scene, word, 640 + i * 100, 72, "#ffffff", "fadeInUp", 0.5, 0.8 + i * 0.3)
    for i, perk in enumerate(PERKS):
        add_centered_text(scene, f"+ {perk}", 1060 + i * 70, 36, CAPTION, "fadeIn", 0.4, 2.0 + i * 0.3)
    add_centered_text(scene, "@StyleMagazine", 1460, 40, GOLD, "fadeIn", 0.5, 3.4)
    add_centered_text(scene, ISSUE, 1540, 28, CAPTION, "fadeIn", 0.5, 3.6)
    add_series_footer(scene, number, CAPTION, 4.0)
    return scene


@register_story(21)
def build() -> Manifest:
    story = get_story(21)
    scenes = [_cover_scene(), *(_look_scene(i) for i in range(len(LOOKS))), _back_cover_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
