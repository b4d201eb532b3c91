"""Story 9: the same day twice, side by side, split by one missed bus."""

from typing import List, Tuple

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

COLD_BG = "#0d1b2a"
COLD = "#1b263b"
ICY = "#778da9"
PALE = "#e0e1dd"
WARM_BG = "#2d1810"
WARM = "#bc6c25"
GOLD = "#dda15e"
SUNNY = "#fefae0"
MISSED = "#e63946"
SUCCESS = "#2a9d8f"

LEFT = WIDTH / 4
RIGHT = WIDTH * 3 / 4

# (left line, right line) per beat of the day
RUSH = [
    ("No breakfast", "Full breakfast"),
    ("Forgot keys", "Everything packed"),
    ("Messy hair", "Looking fresh"),
    ("Wrong shoes", "Ready to go"),
]


def _split(scene: Scene, delay: float = 0.0) -> None:
    """Cold left half, warm right half and a glowing divider."""
    scene.add_child(RectNode(x=LEFT, y=HEIGHT / 2, width=WIDTH / 2, height=HEIGHT, color=COLD_BG).add_effect("fadeInLeft", 0.5, delay))
    scene.add_child(RectNode(x=RIGHT, y=HEIGHT / 2, width=WIDTH / 2, height=HEIGHT, color=WARM_BG).add_effect("fadeInRight", 0.5, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=6, height=HEIGHT, color="#ffffff").add_effect("fadeInDown", 0.5, delay + 0.3))


def _pair(scene: Scene, left: str, right: str, y: float, size: int, colors: Tuple[str, str], delay: float) -> List[TextNode]:
    nodes = [
        TextNode(text=left, x=LEFT, y=y, font_size=size, color=colors[0], align="center").add_effect("fadeInLeft", 0.4, delay),
        TextNode(text=right, x=RIGHT, y=y, font_size=size, color=colors[1], align="center").add_effect("fadeInRight", 0.4, delay),
    ]
    for node in nodes:
        scene.add_child(node)
    return nodes


def _intro_scene() -> Scene:
    scene = Scene(id="intro", bg_color="#000000", duration=4.0)
    add_centered_text(scene, "WHAT IF", HEIGHT / 2 - 240, 72, PALE, "fadeIn", 0.5)
    add_centered_text(scene, "ONE MOMENT", HEIGHT / 2 - 100, 96, "#ffffff", "zoomIn", 0.6, 0.6)
    add_centered_text(scene, "CHANGED", HEIGHT / 2 + 40, 96, "#ffffff", "zoomIn", 0.6, 1.1)
    add_centered_text(scene, "EVERYTHING?", HEIGHT / 2 + 180, 110, GOLD, "bounceIn", 0.7, 1.6)
    return scene.set_transition("fade", 0.5)


def _alarm_scene() -> Scene:
    scene = Scene(id="alarm", bg_color="#000000", duration=4.5)
    _split(scene)
    _pair(scene, "7:00", "7:00", HEIGHT / 2 - 200, 120, (ICY, GOLD), 0.5)
    _pair(scene, "AM", "AM", HEIGHT / 2 - 80, 48, (ICY, GOLD), 0.7)
    _pair(scene, "SNOOZE", "WAKE UP", HEIGHT / 2 + 100, 52, (PALE, SUNNY), 1.2)
    _pair(scene, "MISSED", "CAUGHT", HEIGHT / 2 + 300, 64, (MISSED, SUCCESS), 2.2)
    return scene.set_transition("windowslice", 0.5)


def _rush_scene() -> Scene:
    scene = Scene(id="rush", bg_color="#000000", duration=5.0)
    _split(scene)
    add_centered_text(scene, "THE MORNING RUSH", 200, 56, "#ffffff", "fadeInDown", 0.5, 0.3)
    _pair(scene, "7:45", "7:15", 380, 96, (ICY, GOLD), 0.5)
    for i, (left, right) in enumerate(RUSH):
        _pair(scene, f"x {left}", f"+ {right}", 620 + i * 140, 36, (MISSED, SUCCESS), 1.0 + i * 0.4)
    _pair(scene, "STRESS: HIGH", "STRESS: LOW", 1400, 44, (MISSED, SUCCESS), 3.0)
    return scene.set_transition("shake", 0.4)


def _bus_scene() -> Scene:
    scene = Scene(id="bus-stop", bg_color="#000000", duration=5.5)
    _split(scene)
    add_centered_text(scene, "THE PIVOTAL MOMENT", 200, 56, "#ffffff", "fadeInDown", 0.5, 0.3)
    _pair(scene, "BUS STOP", "BUS STOP", 400, 48, (PALE, SUNNY), 0.5)
    _pair(scene, "8:02 AM", "7:58 AM", 500, 64, (ICY, GOLD), 0.8)
    # The bus pulls away on the left and pulls in on the right
    leaving = RectNode(x=LEFT, y=850, width=380, height=180, color=ICY, radius=20)
    leaving.add_effect("fadeIn", 0.3, 1.0).add_animate(x=-300, duration=1.2, delay=1.6)
    arriving = RectNode(x=WIDTH + 300, y=850, width=380, height=180, color=WARM, radius=20)
    arriving.add_effect("fadeIn", 0.3, 1.0).add_animate(x=RIGHT, duration=1.2, delay=1.6)
    scene.add_child(leaving)
    scene.add_child(arriving)
    _pair(scene, "MISSED IT", "CAUGHT IT", 1150, 64, (MISSED, SUCCESS), 3.0)
    _pair(scene, "Next bus: 25 min", "On the bus!", 1260, 36, (PALE, SUNNY), 3.4)
    return scene.set_transition("slice", 0.5)


def _ripple_scene() -> Scene:
    scene = Scene(id="ripple", bg_color="#000000", duration=5.0)
    _split(scene)
    add_centered_text(scene, "THE RIPPLE EFFECT", 220, 56, "#ffffff", "fadeInDown", 0.5, 0.3)
    _pair(scene, "WORST DAY", "BEST DAY", HEIGHT / 2 - 80, 64, (MISSED, SUCCESS), 0.8)
    _pair(scene, "EVER", "EVER", HEIGHT / 2 + 20, 64, (MISSED, SUCCESS), 1.1)
    _pair(scene, "Exhausted", "Fulfilled", HEIGHT / 2 + 200, 44, (ICY, GOLD), 1.8)
    add_centered_text(
        scene, "SAME DAY. DIFFERENT CHOICES.", HEIGHT - 320, 40, "#ffffff", "fadeInUp", 0.5, 2.6,
        background_color="rgba(0,0,0,0.7)", padding=(24, 12),
    )
    return scene.set_transition("directionalwarp", 0.5)


def _moral_scene(number: int) -> Scene:
    scene = Scene(id="moral", bg_color="#0a0a0f", duration=5.5)
    for i, (word, size, color) in enumerate([
        ("EVERY", 64, PALE), ("SMALL CHOICE", 96, "#ffffff"), ("CREATES A", 64, PALE),
        ("DIFFERENT", 96, GOLD), ("FUTURE", 120, GOLD),
    ]):
        add_centered_text(scene, word, 480 + i * 160, size, color, "fadeInUp", 0.5, 0.3 + i * 0.4)
    add_centered_text(scene, "Which path would YOU take?", HEIGHT - 360, 44, ICY, "fadeIn", 0.6, 2.8)
    add_series_footer(scene, number, "#666666", 3.4)
    return scene


@register_story(9)
def build() -> Manifest:
    story = get_story(9)
    scenes = [
        _intro_scene(), _alarm_scene(), _rush_scene(), _bus_scene(), _ripple_scene(), _moral_scene(story.number),
    ]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
