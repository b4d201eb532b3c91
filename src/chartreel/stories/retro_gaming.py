"""Story 23: a morning routine life hack played as a Level 1 tutorial."""

from typing import List, Tuple

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

BLACK = "#000000"
RED = "#ff0040"
BLUE = "#0080ff"
GREEN = "#00ff00"
YELLOW = "#ffff00"
PURPLE = "#ff00ff"
CYAN = "#00ffff"
ORANGE = "#ff8000"
GAME_DARK = "#1a1a2e"
GAME_BLUE = "#16213e"

MAX_HEALTH = 100
BAR_WIDTH = 800
PIXEL = 20

STEPS: List[Tuple[str, List[str], str]] = [
    ("STEP 1: PREPARE", ["Lay out clothes", "Pack your bag", "Prep breakfast", "Set alarm"], "+25 PRODUCTIVITY"),
    ("STEP 2: EXECUTE", ["Wake up instantly", "Quick shower", "Grab pre-made items", "Out the door!"], "TIME SAVED: 30 MIN"),
]
TIPS = [
    ("PRO TIP #1", "Use a sunrise alarm"),
    ("PRO TIP #2", "Keep water by bed"),
    ("PRO TIP #3", "No phone for 30 min"),
    ("PRO TIP #4", "Stretch while brewing"),
]


def health_color(health: int) -> str:
    """Bar color for a productivity score: red when low, yellow midway, green when high."""
    if health > 60:
        return GREEN
    if health > 30:
        return YELLOW
    return RED


def _health_bar(scene: Scene, health: int) -> None:
    """PRODUCTIVITY meter in the top bar."""
    y = 150
    scene.add_child(TextNode(text="PRODUCTIVITY", x=WIDTH / 2, y=y - 60, font_size=28, color="#ffffff", align="center"))
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=BAR_WIDTH + 4, height=54, color="#ffffff"))
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=BAR_WIDTH, height=50, color=BLACK))
    fill = max((BAR_WIDTH - 10) * health / MAX_HEALTH, 1)
    scene.add_child(RectNode(x=WIDTH / 2 - (BAR_WIDTH - fill) / 2 + 5, y=y, width=fill, height=40, color=health_color(health)).add_effect("fadeInLeft", 0.5, 0.3))
    scene.add_child(TextNode(text="LVL 1", x=WIDTH - 60, y=y + 70, font_size=28, color=YELLOW, align="right"))


def _pixel_star(scene: Scene, x: float, y: float, color: str, delay: float) -> None:
    """Plus-shaped block of pixels."""
    for dx, dy in ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1)):
        scene.add_child(RectNode(x=x + dx * PIXEL, y=y + dy * PIXEL, width=PIXEL, height=PIXEL, color=color).add_effect("zoomIn", 0.2, delay))


def _title_scene() -> Scene:
    scene = Scene(id="title", bg_color=BLACK, duration=5.0)
    for i, color in enumerate([RED, ORANGE, YELLOW, GREEN, CYAN, BLUE, PURPLE]):
        scene.add_child(RectNode(x=WIDTH / 2, y=300 + i * 24, width=WIDTH, height=24, color=color).add_effect("fadeInLeftBig", 0.3, i * 0.08))
    add_centered_text(scene, "LIFE HACK", 700, 110, YELLOW, "bounceIn", 0.5, 0.8, stroke_color=RED, stroke_width=6)
    add_centered_text(scene, "QUEST", 830, 110, CYAN, "bounceIn", 0.5, 1.1, stroke_color=BLUE, stroke_width=6)
    add_centered_text(scene, "LEVEL 1", 1020, 64, "#ffffff", "fadeIn", 0.4, 1.6)
    add_centered_text(scene, "THE MORNING ROUTINE HACK", 1110, 36, GREEN, "fadeIn", 0.4, 2.0)
    start = add_centered_text(scene, "PRESS START", 1400, 52, "#ffffff", "fadeIn", 0.2, 2.6)
    start.add_effect("fadeOut", 0.2, 3.2).add_effect("fadeIn", 0.2, 3.6)
    for i, x in enumerate((200, WIDTH - 200)):
        _pixel_star(scene, x, 1400, YELLOW, 2.8 + i * 0.2)
    return scene.set_transition("zoomin", 0.5)


def _step_scene(index: int, health: int) -> Scene:
    title, actions, reward = STEPS[index]
    scene = Scene(id=f"step-{index + 1}", bg_color=GAME_DARK, duration=6.0)
    _health_bar(scene, health)
    add_centered_text(scene, title, 400, 60, CYAN, "fadeInDown", 0.4, 0.4)
    scene.add_child(RectNode(x=WIDTH / 2, y=850, width=904, height=604, color="#ffffff").add_effect("fadeIn", 0.3, 0.8))
    scene.add_child(RectNode(x=WIDTH / 2, y=850, width=900, height=600, color=GAME_BLUE).add_effect("fadeIn", 0.3, 0.8))
    for i, action in enumerate(actions):
        scene.add_child(TextNode(text=f"> {action}", x=170, y=650 + i * 130, font_size=44, color="#ffffff").add_effect("fadeInLeft", 0.3, 1.4 + i * 0.5))
        _pixel_star(scene, WIDTH - 190, 650 + i * 130, GREEN, 1.6 + i * 0.5)
    add_centered_text(scene, reward, 1380, 56, YELLOW, "bounceIn", 0.4, 3.8)
    return scene.set_transition("directionalwarp" if index == 0 else "crosswarp", 0.5)


def _bonus_scene() -> Scene:
    scene = Scene(id="bonus", bg_color=BLACK, duration=6.0)
    _health_bar(scene, 85)
    add_centered_text(scene, "* BONUS ROUND *", 420, 64, PURPLE, "bounceIn", 0.4, 0.4)
    scene.add_child(RectNode(x=WIDTH / 2, y=950, width=900, height=700, color=GAME_DARK).add_effect("fadeIn", 0.4, 1.0))
    for i, (tip, description) in enumerate(TIPS):
        add_centered_text(scene, tip, 700 + i * 150, 38, YELLOW, "fadeIn", 0.3, 1.6 + i * 0.4)
        add_centered_text(scene, description, 745 + i * 150, 32, "#ffffff", "fadeIn", 0.3, 1.8 + i * 0.4)
    add_centered_text(scene, "BONUS: +250 POINTS!", 1460, 52, GREEN, "zoomIn", 0.4, 3.8)
    return scene.set_transition("slice", 0.5)


def _victory_scene(number: int) -> Scene:
    scene = Scene(id="victory", bg_color=BLACK, duration=6.0)
    _health_bar(scene, MAX_HEALTH)
    add_centered_text(scene, "LEVEL", 620, 120, YELLOW, "bounceIn", 0.5, 0.4, stroke_color=RED, stroke_width=6)
    add_centered_text(scene, "COMPLETE!", 760, 110, GREEN, "bounceIn", 0.5, 0.8, stroke_color=BLUE, stroke_width=6)
    for i in range(5):
        _pixel_star(scene, 180 + i * 180, 980, [RED, ORANGE, YELLOW, GREEN, CYAN][i], 1.4 + i * 0.15)
    add_centered_text(scene, "HIGH SCORE: 9999", 1150, 48, "#ffffff", "fadeIn", 0.4, 2.2)
    add_centered_text(scene, "PRESS START TO CONTINUE", 1400, 36, CYAN, "fadeIn", 0.4, 2.8)
    add_series_footer(scene, number, "#888888", 3.4)
    return scene


@register_story(23)
def build() -> Manifest:
    story = get_story(23)
    scenes = [_title_scene(), _step_scene(0, 25), _step_scene(1, 60), _bonus_scene(), _victory_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
