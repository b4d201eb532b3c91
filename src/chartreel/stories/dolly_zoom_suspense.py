"""Story 25: a late night in the library and the slow realisation of being followed."""

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

DEEP_BLACK = "#0a0a0a"
CHARCOAL = "#1a1a1a"
SHADOW = "#2a2a2a"
DARK_WOOD = "#2b1810"
SPINE = "#4a3728"
DUSTY = "#8b7355"
BLOOD = "#8b0000"
DANGER = "#cc0000"
SPOTLIGHT = "#ffd700"
DIM_LIGHT = "#ffe4b5"
SHADOW_BLUE = "#1a1a2e"
LIGHT_GRAY = "#cccccc"

SPINE_COLORS = [SPINE, DUSTY, "#5a2a1a", "#3a4a2a", SPINE, "#2a2a4a"]


def _shelves(scene: Scene, spread: float = 0.0, duration: float = 0.0, delay: float = 0.0) -> None:
    """Two bookcases framing the aisle. ``spread`` pushes them outwards over ``duration``."""
    for side in (-1, 1):
        x = WIDTH / 2 + side * 380
        case = RectNode(x=x, y=HEIGHT / 2, width=300, height=HEIGHT, color=DARK_WOOD)
        if spread:
            case.add_animate(x=x + side * spread, duration=duration, delay=delay)
        scene.add_child(case)
        for shelf in range(7):
            for book in range(6):
                bx = x - 120 + book * 48
                spine = RectNode(x=bx, y=200 + shelf * 240, width=38, height=180, color=SPINE_COLORS[(shelf + book) % len(SPINE_COLORS)])
                if spread:
                    spine.add_animate(x=bx + side * spread, duration=duration, delay=delay)
                scene.add_child(spine)


def _figure(scene: Scene, y: float, scale: float, color: str, delay: float, effect: str = "fadeIn") -> None:
    """Head and shoulders silhouette."""
    scene.add_child(RectNode(x=WIDTH / 2, y=y - 160 * scale, width=140 * scale, height=160 * scale, radius=int(70 * scale), color=color).add_effect(effect, 1.0, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=y + 60 * scale, width=340 * scale, height=280 * scale, radius=int(60 * scale), color=color).add_effect(effect, 1.0, delay))


def _title_scene() -> Scene:
    scene = Scene(id="title", bg_color=DEEP_BLACK, duration=4.0)
    add_centered_text(scene, "THE LIBRARY", HEIGHT / 2 - 100, 100, DIM_LIGHT, "fadeIn", 1.2, 0.3)
    add_centered_text(scene, "11:47 PM", HEIGHT / 2 + 20, 48, LIGHT_GRAY, "fadeIn", 0.8, 1.2)
    add_centered_text(scene, "Something feels... wrong", HEIGHT / 2 + 200, 40, DANGER, "fadeIn", 0.8, 2.2)
    return scene.set_transition("fade", 0.5)


def _aisle_scene() -> Scene:
    scene = Scene(id="aisle", bg_color=CHARCOAL, duration=5.0)
    _shelves(scene)
    # Desk lamp pool of light
    scene.add_child(RectNode(x=WIDTH / 2, y=1300, width=600, height=600, radius=300, color="rgba(255,215,0,0.12)").add_effect("fadeIn", 1.5))
    scene.add_child(RectNode(x=WIDTH / 2, y=1450, width=460, height=40, color=DUSTY).add_effect("fadeIn", 0.8, 0.4))
    _figure(scene, 1250, 1.0, SHADOW_BLUE, 0.6)
    add_centered_text(scene, "Studying alone...", 300, 44, DIM_LIGHT, "fadeIn", 0.8, 1.6)
    return scene.set_transition("crosswarp", 0.4)


def _footsteps_scene() -> Scene:
    scene = Scene(id="footsteps", bg_color=DEEP_BLACK, duration=5.0)
    _shelves(scene)
    for i in range(3):
        # Steps approach from the back of the aisle
        step = RectNode(x=WIDTH / 2 + (-50 if i % 2 else 50), y=500 + i * 220, width=60 + i * 20, height=100 + i * 30, radius=30, color=SHADOW)
        scene.add_child(step.add_effect("fadeIn", 0.2, 0.8 + i * 0.8).add_effect("fadeOut", 0.4, 1.4 + i * 0.8))
    add_centered_text(scene, "Did you hear that?", 1500, 56, "#ffffff", "fadeIn", 0.5, 3.2)
    return scene.set_transition("directionalwarp", 0.5)


def _dolly_scene() -> Scene:
    scene = Scene(id="dolly-zoom", bg_color=DEEP_BLACK, duration=6.0)
    # Background stretches away while the face holds its size
    _shelves(scene, spread=260, duration=5.0, delay=0.5)
    _figure(scene, HEIGHT / 2 + 200, 1.6, SHADOW_BLUE, 0.0, "zoomIn")
    for side in (-1, 1):
        scene.add_child(RectNode(x=WIDTH / 2 + side * 60, y=HEIGHT / 2 - 90, width=40, height=24, radius=12, color="#ffffff").add_effect("zoomIn", 0.3, 2.0))
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=WIDTH, height=HEIGHT, color="rgba(139,0,0,0.25)").add_effect("fadeIn", 2.0, 3.0))
    return scene.set_transition("zoomin", 0.6)


def _figure_scene() -> Scene:
    scene = Scene(id="figure", bg_color=CHARCOAL, duration=5.0)
    _shelves(scene)
    _figure(scene, 700, 0.6, "#000000", 0.6)
    scene.add_child(TextNode(text="15 meters away", x=WIDTH / 2, y=1050, font_size=36, color=LIGHT_GRAY, align="center").add_effect("fadeIn", 0.5, 1.6))
    add_centered_text(scene, "RUN", 1400, 160, DANGER, "zoomIn", 0.3, 3.2, stroke_color="#000000", stroke_width=8)
    return scene.set_transition("windowslice", 0.4)


def _trapped_scene() -> Scene:
    scene = Scene(id="trapped", bg_color=DEEP_BLACK, duration=5.0)
    _shelves(scene, spread=-220, duration=3.0, delay=0.3)
    add_centered_text(scene, "GETTING CLOSER", 500, 64, DIM_LIGHT, "fadeIn", 0.3, 0.4)
    _figure(scene, 1200, 1.3, "#000000", 1.2, "zoomIn")
    add_centered_text(scene, "NO ESCAPE", 1700, 80, BLOOD, "fadeIn", 0.4, 3.2)
    return scene.set_transition("zoomin", 0.7)


def _finale_scene(number: int) -> Scene:
    scene = Scene(id="finale", bg_color="#000000", duration=5.0)
    add_centered_text(scene, "...", HEIGHT / 2 - 200, 96, LIGHT_GRAY, "fadeIn", 0.6, 0.6)
    add_centered_text(scene, "THE END", HEIGHT / 2, 96, DANGER, "fadeIn", 1.0, 1.6)
    add_centered_text(scene, "DOLLY ZOOM SUSPENSE", HEIGHT / 2 + 160, 40, SPOTLIGHT, "fadeIn", 0.8, 2.4)
    add_series_footer(scene, number, "#555555", 3.0)
    return scene


@register_story(25)
def build() -> Manifest:
    story = get_story(25)
    scenes = [
        _title_scene(), _aisle_scene(), _footsteps_scene(), _dolly_scene(), _figure_scene(), _trapped_scene(),
        _finale_scene(story.number),
    ]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
