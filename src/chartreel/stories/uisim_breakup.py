"""Story 8: a breakup told entirely through a phone screen."""

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

SCREEN = "#000000"
BAR = "#1c1c1e"
BLUE = "#007aff"
RED = "#ff3b30"
GRAY = "#8e8e93"
BUBBLE_GRAY = "#3a3a3c"
GLASS = "rgba(255,255,255,0.1)"
LIGHT = "#ebebf5"

CONTACT = "Alex"
DRAFT = "I miss you"


def _header(scene: Scene, back: str, title: str) -> None:
    scene.add_child(RectNode(x=WIDTH / 2, y=120, width=WIDTH, height=240, color=BAR))
    scene.add_child(TextNode(text=f"< {back}", x=40, y=160, font_size=36, color=BLUE))
    scene.add_child(TextNode(text=title, x=WIDTH / 2, y=160, font_size=40, color="#ffffff", align="center"))


def _bubble(scene: Scene, text: str, y: float, mine: bool, delay: float) -> None:
    width = max(200, len(text) * 26 + 80)
    x = WIDTH - 60 - width / 2 if mine else 60 + width / 2
    scene.add_child(
        RectNode(x=x, y=y, width=width, height=100, color=BLUE if mine else BUBBLE_GRAY, radius=40)
        .add_effect("zoomIn", 0.3, delay)
    )
    scene.add_child(
        TextNode(text=text, x=x, y=y, font_size=38, color="#ffffff", align="center").add_effect("fadeIn", 0.2, delay + 0.1)
    )


def typing_stages(word: str):
    """The draft typed out letter by letter, then deleted the same way."""
    typed = [word[:i] for i in range(1, len(word) + 1)]
    return typed + typed[-2::-1]


def _lock_scene() -> Scene:
    scene = Scene(id="lock-screen", bg_color=SCREEN, duration=4.5)
    add_centered_text(scene, "2:47", 420, 200, "#ffffff", "fadeIn", 0.8)
    add_centered_text(scene, "Saturday, November 23", 580, 40, LIGHT, "fadeIn", 0.8, 0.2)
    scene.add_child(RectNode(x=WIDTH / 2, y=900, width=960, height=200, color=GLASS, radius=36).add_effect("fadeInDown", 0.5, 1.2))
    scene.add_child(TextNode(text="MESSAGES", x=100, y=850, font_size=28, color=GRAY).add_effect("fadeIn", 0.4, 1.4))
    scene.add_child(TextNode(text="now", x=WIDTH - 100, y=850, font_size=28, color=GRAY, align="right").add_effect("fadeIn", 0.4, 1.4))
    scene.add_child(TextNode(text=CONTACT, x=100, y=910, font_size=40, color="#ffffff").add_effect("fadeIn", 0.4, 1.5))
    scene.add_child(TextNode(text="Can we talk?", x=100, y=960, font_size=36, color=LIGHT).add_effect("fadeIn", 0.4, 1.6))
    add_centered_text(scene, "Swipe up to open", HEIGHT - 160, 32, GRAY, "fadeInUp", 0.6, 2.5)
    return scene.set_transition("fade", 0.5)


def _typing_scene() -> Scene:
    scene = Scene(id="typing", bg_color=SCREEN, duration=6.0)
    _header(scene, "Messages", CONTACT)
    _bubble(scene, "Can we talk?", 420, False, 0.2)
    scene.add_child(TextNode(text="2:47 AM", x=WIDTH / 2, y=330, font_size=26, color=GRAY, align="center"))
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT - 160, width=960, height=100, color=BAR, radius=50))
    stages = typing_stages(DRAFT)
    for i, draft in enumerate(stages):
        node = TextNode(text=draft, x=100, y=HEIGHT - 160, font_size=38, color="#ffffff")
        node.add_effect("fadeIn", 0.05, 1.0 + i * 0.25)
        if i + 1 < len(stages):
            node.add_effect("fadeOut", 0.05, 1.25 + i * 0.25)
        scene.add_child(node)
    return scene.set_transition("fade", 0.5)


def _photos_scene() -> Scene:
    scene = Scene(id="photos", bg_color=SCREEN, duration=5.0)
    _header(scene, "Albums", CONTACT)
    scene.add_child(TextNode(text="47 Photos", x=WIDTH / 2, y=300, font_size=30, color=GRAY, align="center"))
    tones = ["#ff9f43", "#feca57", "#ff6b6b", "#48dbfb", "#1dd1a1", "#5f27cd", "#ff9ff3", "#54a0ff", "#c8d6e5"]
    for i, tone in enumerate(tones):
        scene.add_child(
            RectNode(x=190 + (i % 3) * 350, y=520 + (i // 3) * 350, width=330, height=330, color=tone)
            .add_effect("zoomIn", 0.3, 0.3 + i * 0.12)
        )
    add_centered_text(scene, "Memories with Alex", HEIGHT - 440, 48, "#ffffff", "fadeInUp", 0.5, 2.0)
    add_centered_text(scene, "June 2023 - October 2024", HEIGHT - 370, 32, GRAY, "fadeIn", 0.5, 2.3)
    return scene.set_transition("fade", 0.5)


def _delete_scene() -> Scene:
    scene = Scene(id="delete", bg_color=SCREEN, duration=5.0)
    scene.add_child(RectNode(x=WIDTH / 2, y=420, width=240, height=240, radius=120, color=GRAY).add_effect("zoomIn", 0.5))
    add_centered_text(scene, "A", 420, 120, "#ffffff", "fadeIn", 0.4, 0.2)
    add_centered_text(scene, CONTACT, 640, 64, "#ffffff", "fadeIn", 0.4, 0.4)
    add_centered_text(scene, "+1 (555) 123-4567", 720, 36, GRAY, "fadeIn", 0.4, 0.6)
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2 + 200, width=780, height=420, color="#2c2c2e", radius=30).add_effect("zoomIn", 0.4, 1.6))
    add_centered_text(scene, "Delete Contact?", HEIGHT / 2 + 80, 44, "#ffffff", "fadeIn", 0.3, 1.8)
    add_centered_text(scene, "This cannot be undone.", HEIGHT / 2 + 150, 32, GRAY, "fadeIn", 0.3, 1.9)
    scene.add_child(TextNode(text="Cancel", x=WIDTH / 2 - 190, y=HEIGHT / 2 + 320, font_size=40, color=BLUE, align="center").add_effect("fadeIn", 0.3, 2.0))
    scene.add_child(TextNode(text="Delete", x=WIDTH / 2 + 190, y=HEIGHT / 2 + 320, font_size=40, color=RED, align="center").add_effect("fadeIn", 0.3, 2.0))
    # Thumb hovering over Cancel
    scene.add_child(RectNode(x=WIDTH / 2 - 190, y=HEIGHT / 2 + 320, width=90, height=90, radius=45, color="rgba(255,255,255,0.3)").add_effect("zoomIn", 0.3, 3.5))
    return scene.set_transition("fade", 0.5)


def _reply_scene(number: int) -> Scene:
    scene = Scene(id="reply", bg_color=SCREEN, duration=5.5)
    _header(scene, "Messages", CONTACT)
    _bubble(scene, "Can we talk?", 420, False, 0.0)
    _bubble(scene, "Yes.", 560, True, 0.8)
    scene.add_child(TextNode(text="Delivered", x=WIDTH - 60, y=640, font_size=26, color=GRAY, align="right").add_effect("fadeIn", 0.3, 1.3))
    add_centered_text(scene, "Some things", HEIGHT / 2 + 200, 56, "#ffffff", "fadeIn", 0.8, 2.2)
    add_centered_text(scene, "can't be deleted.", HEIGHT / 2 + 280, 56, "#ffffff", "fadeIn", 0.8, 2.8)
    add_series_footer(scene, number, GRAY, 3.5)
    return scene


@register_story(8)
def build() -> Manifest:
    story = get_story(8)
    scenes = [_lock_scene(), _typing_scene(), _photos_scene(), _delete_scene(), _reply_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
