"""Story 27: every task gets dragged into the "Tomorrow" folder until the desktop crashes."""

from typing import List, Tuple

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

WALLPAPER = "#1e3a5f"
DESKTOP_GRAY = "#2d2d30"
WINDOW = "#ffffff"
TITLE_BAR = "#e5e5e5"
CHROME = "#323232"
TAB = "#4a4a4a"
FOLDER = "#ffd966"
FOLDER_DARK = "#ff9933"
BLUE = "#4a90e2"
GREEN = "#7ed321"
RED = "#d0021b"
PURPLE = "#9013fe"
CLOSE = "#e81123"
WARNING = "#ffb900"
TASKBAR = "#0078d4"

FILES: List[Tuple[str, str]] = [
    ("Report.doc", BLUE), ("Budget.xls", GREEN), ("Email.msg", RED), ("Meeting.ppt", PURPLE),
    ("Task1.pdf", BLUE), ("Task2.pdf", GREEN), ("Task3.pdf", RED), ("Task4.pdf", PURPLE),
]
TABS = ["Work Report", "YouTube", "Twitter", "Reddit", "Netflix"]

FOLDER_X = WIDTH / 2
FOLDER_Y = 1400


def badge(count: int) -> str:
    """Unread badge text, capped the way desktop notifications are."""
    return "99+" if count > 99 else str(count)


def _file_position(index: int) -> Tuple[float, float]:
    return 250 + (index % 4) * 200, 500 + (index // 4) * 250


def _desktop(scene: Scene) -> None:
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT - 40, width=WIDTH, height=80, color=TASKBAR))
    scene.add_child(RectNode(x=60, y=HEIGHT - 40, width=44, height=44, radius=6, color=WINDOW))
    scene.add_child(TextNode(text="9:00 AM", x=WIDTH - 30, y=HEIGHT - 40, font_size=24, color=WINDOW, align="right"))


def _folder(scene: Scene, count: int = 0, delay: float = 0.0) -> None:
    scene.add_child(RectNode(x=FOLDER_X - 60, y=FOLDER_Y - 90, width=120, height=40, radius=8, color=FOLDER_DARK).add_effect("fadeIn", 0.4, delay))
    scene.add_child(RectNode(x=FOLDER_X, y=FOLDER_Y, width=240, height=170, radius=12, color=FOLDER).add_effect("zoomIn", 0.4, delay))
    scene.add_child(TextNode(text="Tomorrow", x=FOLDER_X, y=FOLDER_Y + 130, font_size=32, color=WINDOW, align="center").add_effect("fadeIn", 0.4, delay))
    if count:
        scene.add_child(RectNode(x=FOLDER_X + 120, y=FOLDER_Y - 90, width=90, height=56, radius=28, color=CLOSE).add_effect("bounceIn", 0.4, delay + 0.3))
        scene.add_child(TextNode(text=badge(count), x=FOLDER_X + 120, y=FOLDER_Y - 90, font_size=28, color=WINDOW, align="center").add_effect("bounceIn", 0.4, delay + 0.3))


def _file(scene: Scene, index: int, delay: float, effect: str = "zoomIn") -> RectNode:
    name, color = FILES[index]
    x, y = _file_position(index)
    icon = RectNode(x=x, y=y, width=110, height=140, radius=8, color=color).add_effect(effect, 0.3, delay)
    scene.add_child(icon)
    scene.add_child(TextNode(text=name, x=x, y=y + 100, font_size=22, color=WINDOW, align="center").add_effect("fadeIn", 0.3, delay))
    return icon


def _intro_scene() -> Scene:
    scene = Scene(id="desktop", bg_color=WALLPAPER, duration=5.0)
    _desktop(scene)
    # Browser with the work tab open and the distractions waiting
    scene.add_child(RectNode(x=WIDTH / 2, y=900, width=900, height=700, radius=10, color=CHROME).add_effect("zoomIn", 0.5, 0.4))
    for i, tab in enumerate(TABS):
        scene.add_child(TextNode(text=tab, x=190 + i * 175, y=590, font_size=20, color=CHROME if i == 0 else TITLE_BAR, align="center", background_color=WINDOW if i == 0 else TAB, padding=(10, 6)).add_effect("fadeIn", 0.3, 0.8 + i * 0.15))
    add_centered_text(scene, "PROCRASTINATION", 260, 84, WINDOW, "fadeInDown", 0.5, 1.6)
    add_centered_text(scene, "A Visual Journey", 360, 40, TITLE_BAR, "fadeIn", 0.5, 2.0)
    add_centered_text(scene, "9:00 AM - Monday", 1400, 40, WARNING, "fadeIn", 0.5, 2.6)
    return scene.set_transition("fade", 0.5)


def _pile_scene() -> Scene:
    scene = Scene(id="pile-up", bg_color=WALLPAPER, duration=5.0)
    _desktop(scene)
    for i in range(len(FILES)):
        _file(scene, i, 0.3 + i * 0.3, "bounceIn")
    _folder(scene, delay=2.8)
    add_centered_text(scene, "So much to do...", 250, 52, WINDOW, "fadeIn", 0.5, 3.2)
    return scene.set_transition("directionalwarp", 0.4)


def _drag_scene() -> Scene:
    scene = Scene(id="drag", bg_color=WALLPAPER, duration=6.0)
    _desktop(scene)
    _folder(scene)
    for i in range(len(FILES)):
        delay = 0.6 + i * 0.5
        icon = _file(scene, i, 0.0, "fadeIn")
        icon.add_animate(x=FOLDER_X, y=FOLDER_Y, duration=0.4, delay=delay).add_effect("fadeOut", 0.2, delay + 0.3)
    add_centered_text(scene, "Later...", 250, 52, WINDOW, "fadeIn", 0.4, 0.4)
    add_centered_text(scene, "I'll do it tomorrow", 1700, 44, FOLDER, "fadeIn", 0.4, 4.6)
    return scene.set_transition("windowslice", 0.5)


def _overload_scene() -> Scene:
    scene = Scene(id="overload", bg_color=DESKTOP_GRAY, duration=5.0)
    _desktop(scene)
    _folder(scene, 240)
    for i in range(3):
        scene.add_child(
            TextNode(text="Tomorrow (full)", x=WIDTH / 2, y=500 + i * 160, font_size=32, color=CHROME, align="center",
                     background_color=WARNING, padding=(24, 16))
            .add_effect("bounceIn", 0.3, 0.8 + i * 0.5)
        )
    add_centered_text(scene, "OH NO...", 1050, 90, CLOSE, "zoomIn", 0.4, 2.8)
    return scene.set_transition("crosswarp", 0.5)


def _crash_scene(number: int) -> Scene:
    scene = Scene(id="crash", bg_color=TASKBAR, duration=6.0)
    # Files fly off in every direction
    for i in range(len(FILES)):
        x, y = _file_position(i)
        icon = RectNode(x=x, y=y, width=110, height=140, radius=8, color=FILES[i][1])
        scene.add_child(icon.add_animate(x=x + (x - WIDTH / 2) * 3, y=y - 900 + (i % 3) * 600, duration=0.8, delay=0.3))
    add_centered_text(scene, "SYSTEM OVERLOAD", 700, 80, WINDOW, "zoomIn", 0.4, 1.0)
    add_centered_text(scene, "Procrastination.exe has stopped working", 820, 34, TITLE_BAR, "fadeIn", 0.4, 1.6)
    add_centered_text(scene, "Do it today, not tomorrow!", 1200, 52, FOLDER, "fadeInUp", 0.5, 2.6,
                      background_color="rgba(0,0,0,0.4)", padding=(24, 12))
    add_series_footer(scene, number, TITLE_BAR, 3.6)
    return scene


@register_story(27)
def build() -> Manifest:
    story = get_story(27)
    scenes = [_intro_scene(), _pile_scene(), _drag_scene(), _overload_scene(), _crash_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
