"""Story 28: a pencil sketch of the Eiffel Tower fills with watercolour and comes to life."""

from typing import List, Tuple

from ..models import Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

CANVAS = "#f8f5f0"
PAPER = "#e8e4dc"
PENCIL = "#4a4a4a"
CHARCOAL = "#2a2a2a"
SKETCH = "#6a6a6a"
TOWER = "#8b7355"
TOWER_DARK = "#6b5a47"
RUST = "#9d8468"
SKY = "#87ceeb"
SKY_LIGHT = "#b0d4f1"
SUNSET = "#ff9966"
WATER_BLUE = "#6ba3d4"
WATER_GREEN = "#8bc34a"
WATER_PINK = "#ff6b9d"
WATER_YELLOW = "#ffd54f"

BASE_Y = 1500


def tower_strokes() -> List[Tuple[float, float, float, float]]:
    """Eiffel Tower as stacked (x, y, width, height) bands, narrowing towards the tip."""
    levels = [(560, 60), (440, 220), (300, 60), (220, 300), (140, 50), (90, 260), (40, 160)]
    strokes = []
    y = BASE_Y
    for width, height in levels:
        strokes.append((WIDTH / 2, y - height / 2, width, height))
        y -= height
    return strokes


def _tower(scene: Scene, colors: List[str], effect: str, delay: float, step: float) -> None:
    for i, (x, y, w, h) in enumerate(tower_strokes()):
        scene.add_child(RectNode(x=x, y=y, width=w, height=h, color=colors[i % len(colors)]).add_effect(effect, 0.5, delay + i * step))
    # Arch under the first platform
    scene.add_child(RectNode(x=WIDTH / 2, y=BASE_Y - 120, width=260, height=180, radius=90, color=CANVAS if colors[0] == PENCIL else SKY_LIGHT).add_effect(effect, 0.5, delay + step))


def _outline(scene: Scene, delay: float, step: float) -> None:
    """Pencil edges only: a thin stroke down each side of every band."""
    for i, (x, y, w, h) in enumerate(tower_strokes()):
        for side in (-1, 1):
            scene.add_child(RectNode(x=x + side * w / 2, y=y, width=4, height=h, color=PENCIL).add_effect("fadeInUp", 0.4, delay + i * step))
        scene.add_child(RectNode(x=x, y=y - h / 2, width=w, height=4, color=PENCIL).add_effect("fadeInLeft", 0.4, delay + i * step + 0.2))


def _canvas_scene() -> Scene:
    scene = Scene(id="canvas", bg_color=CANVAS, duration=5.0)
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=WIDTH - 120, height=HEIGHT - 240, color=PAPER).add_effect("fadeIn", 0.8))
    add_centered_text(scene, "SKETCH TO LIFE", HEIGHT / 2 - 120, 96, CHARCOAL, "fadeIn", 1.0, 0.6, style="minimal")
    add_centered_text(scene, "An Artistic Journey", HEIGHT / 2, 44, SKETCH, "fadeIn", 0.8, 1.4)
    add_centered_text(scene, "Paris, France", HEIGHT / 2 + 240, 40, PENCIL, "fadeIn", 0.8, 2.4)
    return scene.set_transition("fade", 0.5)


def _drawing_scene() -> Scene:
    scene = Scene(id="drawing", bg_color=CANVAS, duration=6.0)
    _outline(scene, 0.4, 0.6)
    pencil = RectNode(x=WIDTH / 2 + 300, y=BASE_Y, width=24, height=200, radius=6, color=WATER_YELLOW)
    scene.add_child(pencil.add_effect("fadeIn", 0.3, 0.2).add_animate(x=WIDTH / 2 + 60, y=BASE_Y - 1100, duration=4.2, delay=0.4))
    add_centered_text(scene, "Drawing...", 260, 48, SKETCH, "fadeIn", 0.5, 0.4)
    return scene.set_transition("crosswarp", 0.5)


def _color_scene() -> Scene:
    scene = Scene(id="color", bg_color=CANVAS, duration=5.0)
    # Watercolour washes bleed in behind the sketch
    for i, (x, y, size, color) in enumerate([
        (300, 500, 500, "rgba(107,163,212,0.4)"), (780, 640, 460, "rgba(255,153,102,0.35)"),
        (240, 1500, 420, "rgba(139,195,74,0.4)"), (840, 1520, 380, "rgba(255,107,157,0.3)"),
    ]):
        scene.add_child(RectNode(x=x, y=y, width=size, height=size, radius=size // 2, color=color).add_effect("zoomIn", 1.2, 0.3 + i * 0.4))
    _tower(scene, [TOWER, RUST], "fadeIn", 1.0, 0.3)
    _outline(scene, 0.0, 0.0)
    add_centered_text(scene, "Adding color...", 260, 48, TOWER_DARK, "fadeIn", 0.5, 0.4)
    return scene.set_transition("windowslice", 0.5)


def _alive_scene() -> Scene:
    scene = Scene(id="alive", bg_color=SKY, duration=5.0)
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT - 200, width=WIDTH, height=400, color=WATER_GREEN).add_effect("fadeInUp", 0.8))
    scene.add_child(RectNode(x=WIDTH - 220, y=380, width=200, height=200, radius=100, color=SUNSET).add_effect("zoomIn", 0.8, 0.4))
    for i, x in enumerate((260, 620)):
        cloud = RectNode(x=x, y=520 + i * 120, width=260, height=90, radius=45, color="#ffffff")
        scene.add_child(cloud.add_effect("fadeIn", 0.6, 0.6).add_animate(x=x + 140, duration=4.0, delay=0.6))
    _tower(scene, [TOWER_DARK, TOWER], "zoomIn", 0.8, 0.15)
    add_centered_text(scene, "Coming to life...", 260, 48, "#ffffff", "fadeIn", 0.5, 0.4, stroke_color=CHARCOAL, stroke_width=2)
    return scene.set_transition("zoomin", 0.6)


def _reveal_scene(number: int) -> Scene:
    scene = Scene(id="reveal", bg_color=SKY_LIGHT, duration=5.0)
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT - 200, width=WIDTH, height=400, color=WATER_GREEN))
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=WIDTH, height=HEIGHT, color="rgba(255,213,79,0.15)").add_effect("fadeIn", 1.5))
    _tower(scene, [TOWER_DARK, TOWER], "fadeIn", 0.0, 0.0)
    add_centered_text(scene, "PARIS", 300, 140, "#ffffff", "zoomIn", 0.6, 0.8, stroke_color=WATER_BLUE, stroke_width=6)
    add_centered_text(scene, "From Sketch to Reality", 430, 44, CHARCOAL, "fadeIn", 0.6, 1.6)
    add_series_footer(scene, number, CHARCOAL, 2.6)
    return scene


@register_story(28)
def build() -> Manifest:
    story = get_story(28)
    scenes = [_canvas_scene(), _drawing_scene(), _color_scene(), _alive_scene(), _reveal_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
