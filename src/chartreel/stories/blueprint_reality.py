"""Story 17: pencil lines on a drafting table grow into a finished house."""

from typing import List, Tuple

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

DRAFT = "#fff8dc"
BLUEPRINT = "#003d82"
BLUEPRINT_DARK = "#001f3f"
GRID = "#4a90d9"
INK = "#1a1a1a"
PENCIL = "#4a4a4a"
RED = "#e74c3c"
MEASURE = "#27ae60"
CALLOUT = "#3498db"
CONCRETE = "#95a5a6"
STEEL = "#7f8c8d"
GLASS = "#85c1e9"
SKY = "#87ceeb"
DARK_TEXT = "#2c3e50"

# House outline as (x, y, width, height) strokes relative to the house centre
OUTLINE: List[Tuple[float, float, float, float]] = [
    (0, 220, 640, 6),      # ground
    (-310, 40, 6, 360),    # left wall
    (310, 40, 6, 360),     # right wall
    (0, -140, 640, 6),     # first floor ceiling
    (-160, -260, 340, 6),  # upper storey roof
    (-320, -200, 6, 120),  # upper storey walls
    (0, -200, 6, 120),
]
WINDOWS = [(-180, 60), (0, 60), (180, 60), (-160, -200)]
HOUSE_Y = 900
STATS = ["AREA: 2,400 SQ FT", "FLOORS: 2", "BEDROOMS: 4"]


def _grid(scene: Scene, color: str) -> None:
    for i in range(1, 9):
        scene.add_child(RectNode(x=i * 120, y=HEIGHT / 2, width=2, height=HEIGHT, color=color))
    for i in range(1, 16):
        scene.add_child(RectNode(x=WIDTH / 2, y=i * 120, width=WIDTH, height=2, color=color))


def _strokes(scene: Scene, color: str, delay: float, step: float) -> None:
    """Draw the outline one stroke at a time."""
    for i, (dx, dy, w, h) in enumerate(OUTLINE):
        effect = "fadeInLeft" if w > h else "fadeInDown"
        scene.add_child(RectNode(x=WIDTH / 2 + dx, y=HOUSE_Y + dy, width=w, height=h, color=color).add_effect(effect, 0.5, delay + i * step))


def _intro_scene() -> Scene:
    scene = Scene(id="intro", bg_color=DRAFT, duration=4.5)
    _grid(scene, "rgba(74,144,217,0.15)")
    add_centered_text(scene, "BLUEPRINT", HEIGHT / 2 - 200, 120, BLUEPRINT, "fadeInDown", 0.6)
    add_centered_text(scene, "TO REALITY", HEIGHT / 2 - 70, 96, INK, "fadeInUp", 0.6, 0.4)
    add_centered_text(scene, "FROM SKETCH TO STRUCTURE", HEIGHT / 2 + 60, 40, PENCIL, "fadeIn", 0.6, 1.0)
    add_centered_text(scene, "ARCHITECTURAL VISUALIZATION", HEIGHT - 300, 32, STEEL, "fadeIn", 0.6, 1.8)
    return scene.set_transition("fade", 0.6)


def _sketch_scene() -> Scene:
    scene = Scene(id="sketch", bg_color=DRAFT, duration=6.0)
    add_centered_text(scene, "THE SKETCH", 240, 72, INK, "fadeInDown", 0.5)
    _strokes(scene, PENCIL, 0.6, 0.5)
    for i, (dx, dy) in enumerate(WINDOWS):
        scene.add_child(RectNode(x=WIDTH / 2 + dx, y=HOUSE_Y + dy, width=100, height=90, color="rgba(74,74,74,0.3)").add_effect("zoomIn", 0.3, 3.6 + i * 0.2))
    pencil = RectNode(x=WIDTH / 2 - 320, y=HOUSE_Y + 240, width=24, height=180, color="#f4c542", radius=6)
    scene.add_child(pencil.add_effect("fadeIn", 0.3, 0.4).add_animate(x=WIDTH / 2 + 320, y=HOUSE_Y - 260, duration=3.0, delay=0.6))
    add_centered_text(scene, "MODERN RESIDENCE", HEIGHT - 420, 48, DARK_TEXT, "fadeInUp", 0.5, 4.2)
    return scene.set_transition("directionalwarp", 0.6)


def _blueprint_scene() -> Scene:
    scene = Scene(id="blueprint", bg_color=BLUEPRINT_DARK, duration=6.0)
    _grid(scene, "rgba(74,144,217,0.3)")
    add_centered_text(scene, "BLUEPRINT PHASE", 240, 64, "#ffffff", "fadeInDown", 0.5)
    _strokes(scene, "#ffffff", 0.3, 0.15)
    # Dimension callouts
    scene.add_child(RectNode(x=WIDTH / 2, y=HOUSE_Y + 300, width=640, height=3, color=RED).add_effect("fadeInLeft", 0.5, 1.6))
    scene.add_child(TextNode(text="18.0 m", x=WIDTH / 2, y=HOUSE_Y + 340, font_size=30, color=RED, align="center").add_effect("fadeIn", 0.4, 1.9))
    scene.add_child(RectNode(x=WIDTH / 2 + 380, y=HOUSE_Y + 40, width=3, height=360, color=MEASURE).add_effect("fadeInDown", 0.5, 2.0))
    scene.add_child(TextNode(text="7.2 m", x=WIDTH / 2 + 400, y=HOUSE_Y + 40, font_size=30, color=MEASURE).add_effect("fadeIn", 0.4, 2.3))
    for i, stat in enumerate(STATS):
        scene.add_child(TextNode(text=stat, x=120, y=1400 + i * 70, font_size=36, color=GRID).add_effect("fadeInLeft", 0.4, 2.8 + i * 0.3))
    return scene.set_transition("crosswarp", 0.6)


def _transform_scene() -> Scene:
    scene = Scene(id="transform", bg_color=BLUEPRINT, duration=5.0)
    add_centered_text(scene, "TRANSFORMATION", 240, 64, "#ffffff", "fadeInDown", 0.5)
    add_centered_text(scene, "LINES TO 3D STRUCTURE", 330, 36, GLASS, "fadeIn", 0.5, 0.4)
    _strokes(scene, "rgba(255,255,255,0.5)", 0.0, 0.0)
    # Walls and slabs rise from the ground line
    for i, (dx, dy, w, h, color) in enumerate([
        (0, 40, 620, 360, CONCRETE), (-160, -200, 320, 120, STEEL), (0, -140, 660, 20, INK),
    ]):
        block = RectNode(x=WIDTH / 2 + dx, y=HOUSE_Y + 220, width=w, height=h, color=color)
        scene.add_child(block.add_effect("fadeIn", 0.4, 0.8 + i * 0.8).add_animate(y=HOUSE_Y + dy, duration=0.8, delay=0.8 + i * 0.8))
    return scene.set_transition("dreamy", 0.7)


def _reality_scene() -> Scene:
    scene = Scene(id="reality", bg_color=SKY, duration=5.0)
    add_centered_text(scene, "REALITY", 240, 80, "#ffffff", "zoomIn", 0.5, stroke_color=DARK_TEXT, stroke_width=3)
    scene.add_child(RectNode(x=WIDTH / 2, y=HOUSE_Y + 280, width=WIDTH, height=120, color="#6ab04c"))
    scene.add_child(RectNode(x=WIDTH / 2, y=HOUSE_Y + 40, width=620, height=360, color="#f5f5f5").add_effect("fadeIn", 0.5, 0.2))
    scene.add_child(RectNode(x=WIDTH / 2 - 160, y=HOUSE_Y - 200, width=320, height=120, color="#dfe6e9").add_effect("fadeIn", 0.5, 0.4))
    for i, (dx, dy) in enumerate(WINDOWS):
        scene.add_child(RectNode(x=WIDTH / 2 + dx, y=HOUSE_Y + dy, width=100, height=90, color=GLASS).add_effect("zoomIn", 0.4, 0.8 + i * 0.2))
    for x in (120, WIDTH - 120):
        scene.add_child(RectNode(x=x, y=HOUSE_Y + 120, width=140, height=200, radius=70, color="#2e7d32").add_effect("bounceIn", 0.5, 1.8))
    add_centered_text(scene, "PROJECT COMPLETE", HEIGHT - 400, 52, CALLOUT, "bounceIn", 0.5, 2.6,
                      background_color="#ffffff", padding=(24, 12))
    return scene.set_transition("fade", 0.6)


def _end_scene(number: int) -> Scene:
    scene = Scene(id="end", bg_color=DRAFT, duration=5.0)
    add_centered_text(scene, "BLUEPRINT", HEIGHT / 2 - 300, 110, BLUEPRINT, "fadeInDown", 0.6)
    add_centered_text(scene, "TO REALITY", HEIGHT / 2 - 180, 90, INK, "fadeInUp", 0.6, 0.3)
    add_centered_text(scene, "FROM VISION TO STRUCTURE", HEIGHT / 2 - 60, 40, PENCIL, "fadeIn", 0.5, 0.8)
    add_centered_text(scene, "SKETCH > BLUEPRINT > BUILD > HOME", HEIGHT / 2 + 80, 36, CALLOUT, "fadeIn", 0.5, 1.2)
    add_centered_text(scene, "NEXT: INTERIOR DESIGN EVOLUTION", HEIGHT / 2 + 300, 36, DARK_TEXT, "fadeIn", 0.5, 2.0)
    add_series_footer(scene, number, STEEL, 2.6)
    return scene


@register_story(17)
def build() -> Manifest:
    story = get_story(17)
    scenes = [
        _intro_scene(), _sketch_scene(), _blueprint_scene(), _transform_scene(), _reality_scene(),
        _end_scene(story.number),
    ]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
