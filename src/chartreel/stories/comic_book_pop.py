"""Story 18: one stubborn jar, three attempts and a superhero finish in comic panels."""

from ..models import Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

RED = "#ff0000"
BLUE = "#0066ff"
YELLOW = "#ffff00"
GREEN = "#00ff00"
PURPLE = "#9900ff"
ORANGE = "#ff6600"
PAPER = "#f5f5f5"
INK = "#000000"
SHADOW = "#333333"


def _comic(scene: Scene, text: str, y: float, size: int, color: str, effect: str, delay: float) -> None:
    """Comic lettering: thick black outline."""
    add_centered_text(scene, text, y, size, color, effect, 0.5, delay, stroke_color=INK, stroke_width=max(size // 12, 3))


def _bang(scene: Scene, text: str, y: float, color: str, delay: float) -> None:
    """Onomatopoeia burst: a tilted star card behind big lettering."""
    scene.add_child(RectNode(x=WIDTH / 2 + 12, y=y + 12, width=560, height=220, radius=40, color=INK).add_effect("zoomIn", 0.3, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=560, height=220, radius=40, color=YELLOW).add_effect("zoomIn", 0.3, delay))
    _comic(scene, text, y, 110, color, "bounceIn", delay + 0.1)


def _panel(scene: Scene, y: float, height: float, color: str, delay: float) -> None:
    scene.add_child(RectNode(x=WIDTH / 2 + 14, y=y + 14, width=940, height=height, color=SHADOW).add_effect("fadeIn", 0.3, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=960, height=height + 20, color=INK).add_effect("fadeIn", 0.3, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=940, height=height, color=color).add_effect("fadeIn", 0.3, delay))


def _jar(scene: Scene, y: float, delay: float, lid: str = RED) -> None:
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=260, height=320, radius=40, color="rgba(200,230,255,0.8)").add_effect("zoomIn", 0.4, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=y - 180, width=280, height=70, radius=12, color=lid).add_effect("zoomIn", 0.4, delay + 0.1))


def _title_scene() -> Scene:
    scene = Scene(id="title", bg_color=YELLOW, duration=5.0)
    # Halftone dots
    for row in range(8):
        for col in range(6):
            scene.add_child(RectNode(x=90 + col * 180, y=120 + row * 240, width=40, height=40, radius=20, color="rgba(255,0,0,0.15)"))
    _comic(scene, "COMIC", 420, 120, "#ffffff", "backInDown", 0.5)
    _comic(scene, "BOOK", 540, 110, YELLOW, "backInDown", 0.8)
    _comic(scene, "POP!", 650, 100, "#ffffff", "bounceIn", 1.1)
    _comic(scene, "THE JAR CHALLENGE", 850, 48, "#ffffff", "fadeIn", 1.8)
    _jar(scene, 1250, 2.2)
    _comic(scene, "AN EPIC BATTLE", 1700, 40, RED, "fadeInUp", 3.0)
    return scene.set_transition("zoomin", 0.5)


def _attempt_scene() -> Scene:
    scene = Scene(id="attempt-1", bg_color=BLUE, duration=6.0)
    _panel(scene, 480, 620, PAPER, 0.2)
    _jar(scene, 560, 0.5)
    _comic(scene, "ATTEMPT #1", 230, 56, "#ffffff", "fadeInDown", 0.3)
    _comic(scene, "EASY...", 400, 40, BLUE, "fadeIn", 1.6)
    _bang(scene, "TWIST!", 1250, GREEN, 2.4)
    _comic(scene, "NOTHING HAPPENED", 1650, 45, RED, "fadeIn", 3.8)
    return scene.set_transition("directionalwarp", 0.5)


def _serious_scene() -> Scene:
    scene = Scene(id="attempt-2", bg_color=ORANGE, duration=6.0)
    _comic(scene, "ATTEMPT #2", 240, 56, "#ffffff", "fadeInDown", 0.3)
    _comic(scene, "GETTING SERIOUS", 330, 40, "#ffffff", "fadeIn", 0.7)
    _panel(scene, 740, 600, PAPER, 0.4)
    _jar(scene, 820, 0.7)
    # Sweat drops
    for i, x in enumerate((WIDTH / 2 - 240, WIDTH / 2 + 240)):
        drop = RectNode(x=x, y=560, width=30, height=44, radius=15, color=BLUE)
        scene.add_child(drop.add_effect("fadeIn", 0.2, 1.6 + i * 0.3).add_animate(y=700, duration=0.8, delay=1.6 + i * 0.3))
    _bang(scene, "GRUNT!", 1350, PURPLE, 2.6)
    _comic(scene, "STILL STUCK!", 1680, 50, RED, "bounceIn", 4.0)
    return scene.set_transition("crosswarp", 0.5)


def _superhero_scene() -> Scene:
    scene = Scene(id="superhero", bg_color=INK, duration=7.0)
    _comic(scene, "SUPERHERO MODE!", 150, 65, YELLOW, "backInDown", 0.3)
    for i, (y, color) in enumerate(((470, RED), (900, BLUE), (1330, PURPLE))):
        _panel(scene, y, 380, color, 0.6 + i * 1.6)
    _comic(scene, "POWER", 430, 50, YELLOW, "zoomIn", 1.0)
    _comic(scene, "UP!", 510, 60, "#ffffff", "bounceIn", 1.3)
    _comic(scene, "THE", 860, 40, "#ffffff", "fadeIn", 2.6)
    _comic(scene, "GRIP", 930, 55, YELLOW, "bounceIn", 2.9)
    _comic(scene, "MAXIMUM", 1270, 45, ORANGE, "fadeIn", 4.2)
    _comic(scene, "EFFORT!", 1350, 55, "#ffffff", "bounceIn", 4.5)
    _bang(scene, "TWIST!", 1700, PURPLE, 5.2)
    return scene.set_transition("zoomin", 0.6)


def _victory_scene(number: int) -> Scene:
    scene = Scene(id="victory", bg_color=GREEN, duration=6.0)
    _jar(scene, 700, 0.2)
    lid = RectNode(x=WIDTH / 2, y=520, width=280, height=70, radius=12, color=RED)
    scene.add_child(lid.add_effect("fadeIn", 0.1, 1.0).add_animate(x=WIDTH / 2 + 260, y=260, duration=0.6, delay=1.2))
    _bang(scene, "POP!", 1000, RED, 1.4)
    _comic(scene, "SUCCESS!", 1250, 90, "#ffffff", "bounceIn", 2.4)
    _comic(scene, "JAR DEFEATED!", 1360, 50, YELLOW, "fadeIn", 2.8)
    _comic(scene, "THE END", 1620, 55, RED, "fadeIn", 3.6)
    add_series_footer(scene, number, INK, 4.0)
    return scene


@register_story(18)
def build() -> Manifest:
    story = get_story(18)
    scenes = [_title_scene(), _attempt_scene(), _serious_scene(), _superhero_scene(), _victory_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
