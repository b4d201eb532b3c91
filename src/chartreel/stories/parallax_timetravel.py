"""Story 3: a sepia photograph of New York, 1925, split into parallax layers."""

from ..models import Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

FILM = "#0d0a07"
DARK_SEPIA = "#1a1510"
SEPIA = "#704214"
LIGHT_SEPIA = "#c4a35a"
CREAM = "#f5e6c8"
GOLD = "#d4af37"
DUST = "#3d2914"

ERA = ["JAZZ AGE", "PROHIBITION ERA", "ART DECO", "THE GREAT GATSBY"]

# (label, y, width, drift in px, shade)
LAYERS = [
    ("FAR LAYER", 620, 900, 40, "#3d2914"),
    ("MID LAYER", 900, 760, 120, "#704214"),
    ("NEAR LAYER", 1180, 620, 240, "#c4a35a"),
]


def _film_strip(scene: Scene) -> None:
    """Sprocket holes down both edges."""
    for side in (40, WIDTH - 40):
        scene.add_child(RectNode(x=side, y=HEIGHT / 2, width=60, height=HEIGHT, color="#000000"))
        for i in range(12):
            scene.add_child(RectNode(x=side, y=80 + i * 160, width=30, height=50, color=DUST, radius=6))


def _intro_scene() -> Scene:
    scene = Scene(id="film-reel", bg_color=FILM, duration=4.0)
    _film_strip(scene)
    add_centered_text(scene, "1925", HEIGHT / 2 - 160, 200, GOLD, "zoomIn", 1.0, 0.2)
    add_centered_text(scene, "A JOURNEY THROUGH TIME", HEIGHT / 2 + 40, 44, CREAM, "fadeIn", 0.8, 1.0)
    add_centered_text(scene, "NEW YORK CITY", HEIGHT / 2 + 140, 60, LIGHT_SEPIA, "fadeInUp", 0.8, 1.6)
    return scene.set_transition("fade", 0.8)


def _photograph_scene() -> Scene:
    scene = Scene(id="photograph", bg_color=DARK_SEPIA, duration=5.0)
    # The photograph: a cream frame around sepia "buildings"
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=860, height=1100, color=CREAM).add_effect("zoomIn", 1.0))
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=800, height=1040, color=SEPIA).add_effect("fadeIn", 1.0, 0.3))
    for i, height in enumerate([700, 860, 560, 780, 640]):
        scene.add_child(
            RectNode(x=WIDTH / 2 - 320 + i * 160, y=HEIGHT / 2 + 520 - height / 2, width=130, height=height, color=DUST)
            .add_effect("fadeInUp", 0.8, 0.6 + i * 0.15)
        )
    add_centered_text(scene, "LOOK CLOSER", 240, 64, CREAM, "fadeInDown", 0.6, 1.8)
    add_centered_text(scene, "EVERY FACE HAD A STORY", HEIGHT - 220, 48, GOLD, "fadeInUp", 0.6, 2.6)
    return scene.set_transition("directionalwarp", 0.6)


def _layers_scene() -> Scene:
    scene = Scene(id="layers", bg_color=DARK_SEPIA, duration=5.0)
    add_centered_text(scene, "PARALLAX", 260, 96, GOLD, "fadeInDown", 0.6)
    add_centered_text(scene, "TIME-TRAVEL", 370, 72, CREAM, "fadeInDown", 0.6, 0.3)
    for i, (label, y, width, drift, shade) in enumerate(LAYERS):
        layer = RectNode(x=WIDTH / 2, y=y, width=width, height=200, color=shade, radius=12)
        # Nearer layers drift further, which reads as depth
        layer.add_effect("fadeIn", 0.5, 0.6 + i * 0.3).add_animate(x=WIDTH / 2 - drift, duration=3.5, delay=1.2)
        scene.add_child(layer)
        add_centered_text(scene, label, y, 36, CREAM, "fadeIn", 0.5, 0.9 + i * 0.3)
    add_centered_text(scene, "HISTORY IN 3D", HEIGHT - 300, 56, LIGHT_SEPIA, "zoomIn", 0.6, 2.8)
    return scene.set_transition("windowslice", 0.6)


def _era_scene() -> Scene:
    scene = Scene(id="era", bg_color=FILM, duration=5.0)
    add_centered_text(scene, "THE ROARING", 420, 64, CREAM, "fadeInLeft", 0.6)
    add_centered_text(scene, "TWENTIES", 540, 110, GOLD, "fadeInRight", 0.6, 0.3)
    for i, item in enumerate(ERA):
        add_centered_text(scene, f"- {item} -", 800 + i * 120, 44, LIGHT_SEPIA, "fadeInUp", 0.5, 1.0 + i * 0.4)
    return scene.set_transition("colorphase", 0.6)


def _question_scene(number: int) -> Scene:
    scene = Scene(id="question", bg_color=DARK_SEPIA, duration=6.0)
    add_centered_text(scene, "WHAT IF YOU COULD", HEIGHT / 2 - 300, 56, CREAM, "fadeIn", 0.6)
    add_centered_text(scene, "STEP INTO", HEIGHT / 2 - 180, 88, GOLD, "zoomIn", 0.6, 0.6)
    add_centered_text(scene, "THIS PHOTO", HEIGHT / 2 - 60, 88, GOLD, "zoomIn", 0.6, 1.0)
    add_centered_text(scene, "AND WALK THOSE STREETS?", HEIGHT / 2 + 80, 48, CREAM, "fadeInUp", 0.6, 1.6)
    add_centered_text(scene, "Time fades the photograph", HEIGHT / 2 + 260, 36, LIGHT_SEPIA, "fadeIn", 0.6, 2.4)
    add_centered_text(scene, "But not the souls within", HEIGHT / 2 + 320, 36, LIGHT_SEPIA, "fadeIn", 0.6, 2.9)
    add_series_footer(scene, number, LIGHT_SEPIA, 3.5)
    return scene


@register_story(3)
def build() -> Manifest:
    story = get_story(3)
    scenes = [_intro_scene(), _photograph_scene(), _layers_scene(), _era_scene(), _question_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
