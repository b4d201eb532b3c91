"""Story 6: a scrapbook lookbook where each outfit tears the last one away."""

from ..models import Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

CORK = "#c4a574"
KRAFT = "#d4a574"
CREAM = "#f5f0e6"
TORN = "#e8e0d0"
TAPE = "rgba(255,235,150,0.7)"
INK = "#2c2c2c"
PENCIL = "#5a5a5a"
MARKER = "#d63031"

# (number, name, lines, swatch, tag)
LOOKS = [
    ("01", "CASUAL CHIC", ["Oversized blazer", "+ vintage denim"], "#5b7fa3", "tear to see more"),
    ("02", "STREET STYLE", ["Graphic tee", "Cargo pants"], "#9caf88", "urban vibes"),
    ("03", "EVENING GLAM", ["Silk slip dress", "+ statement earrings"], "#c94c4c", "sparkle & shine"),
]


def _tape(scene: Scene, x: float, y: float, delay: float) -> None:
    scene.add_child(RectNode(x=x, y=y, width=180, height=50, color=TAPE).add_effect("zoomIn", 0.3, delay))


def _paper(scene: Scene, y: float, height: float, color: str = CREAM, delay: float = 0.0) -> None:
    """A sheet with a rough torn strip along its bottom edge."""
    scene.add_child(RectNode(x=WIDTH / 2 + 8, y=y + 10, width=860, height=height, color="rgba(0,0,0,0.15)").add_effect("fadeIn", 0.4, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=860, height=height, color=color).add_effect("fadeInDown", 0.5, delay))
    for i in range(9):
        notch = 18 if i % 2 else 30
        scene.add_child(
            RectNode(x=WIDTH / 2 - 384 + i * 96, y=y + height / 2 + notch / 2, width=96, height=notch, color=TORN)
            .add_effect("fadeIn", 0.4, delay)
        )
    _tape(scene, WIDTH / 2 - 300, y - height / 2, delay + 0.4)
    _tape(scene, WIDTH / 2 + 300, y - height / 2, delay + 0.5)


def _cover_scene() -> Scene:
    scene = Scene(id="cover", bg_color=CORK, duration=4.0)
    _paper(scene, HEIGHT / 2 - 100, 900)
    add_centered_text(scene, "LOOKBOOK", HEIGHT / 2 - 360, 120, INK, "fadeInDown", 0.6, 0.6)
    add_centered_text(scene, "FALL / WINTER", HEIGHT / 2 - 200, 64, MARKER, "fadeIn", 0.6, 1.0)
    add_centered_text(scene, "3 LOOKS", HEIGHT / 2, 90, INK, "bounceIn", 0.6, 1.5)
    add_centered_text(scene, "-> SWIPE TO REVEAL ->", HEIGHT / 2 + 200, 40, PENCIL, "fadeIn", 0.6, 2.2)
    return scene.set_transition("windowslice", 0.6)


def _look_scene(index: int) -> Scene:
    number, name, lines, swatch, tag = LOOKS[index]
    scene = Scene(id=f"look-{number}", bg_color=KRAFT if index % 2 == 0 else CORK, duration=5.0)
    add_centered_text(scene, f"LOOK {number}", 220, 72, INK, "fadeInDown", 0.5)
    _paper(scene, 820, 900, delay=0.3)
    # Model silhouette: head and body blocks in the outfit color
    scene.add_child(RectNode(x=WIDTH / 2, y=560, width=140, height=140, color=PENCIL, radius=70).add_effect("zoomIn", 0.5, 0.8))
    scene.add_child(RectNode(x=WIDTH / 2, y=880, width=320, height=460, color=swatch, radius=40).add_effect("fadeInUp", 0.6, 1.0))
    add_centered_text(scene, name, 1390, 72, MARKER, "bounceIn", 0.6, 1.6)
    for i, line in enumerate(lines):
        add_centered_text(scene, line, 1500 + i * 70, 44, INK, "fadeInLeft", 0.5, 2.0 + i * 0.3)
    add_centered_text(scene, f"~ {tag} ~", 1700, 36, PENCIL, "fadeIn", 0.5, 2.8)
    return scene.set_transition("windowshades" if index == 0 else "crosswarp", 0.5)


def _end_scene(number: int) -> Scene:
    scene = Scene(id="end", bg_color=CORK, duration=5.0)
    _paper(scene, HEIGHT / 2 - 100, 1000)
    add_centered_text(scene, "3 LOOKS FEATURED:", HEIGHT / 2 - 420, 56, INK, "fadeInDown", 0.5, 0.5)
    for i, (look, name, *_rest) in enumerate(LOOKS):
        add_centered_text(scene, f"{look} - {name.title()}", HEIGHT / 2 - 260 + i * 100, 52, MARKER, "fadeInLeft", 0.5, 0.9 + i * 0.3)
    add_centered_text(scene, "FOLLOW FOR MORE", HEIGHT / 2 + 150, 48, INK, "bounceIn", 0.6, 2.2)
    add_centered_text(scene, "FASHION INSPO", HEIGHT / 2 + 230, 40, PENCIL, "fadeIn", 0.5, 2.6)
    add_series_footer(scene, number, INK, 3.0)
    return scene


@register_story(6)
def build() -> Manifest:
    story = get_story(6)
    scenes = [_cover_scene(), *(_look_scene(i) for i in range(len(LOOKS))), _end_scene(story.number)]
    scenes[-2].set_transition("fade", 0.5)
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
