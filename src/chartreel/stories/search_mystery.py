"""Story 19: a search box whose auto-complete turns sinister."""

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

LOGO_COLORS = ["#4285f4", "#ea4335", "#fbbc04", "#4285f4", "#34a853", "#ea4335"]
WHITE = "#ffffff"
BLACK = "#000000"
TEXT = "#202124"
MUTED = "#70757a"
BORDER = "#dfe1e5"
DANGER = "#d93025"

QUERY = "why am i being watched"
SUGGESTIONS = [
    "why am i being watched",
    "why am i being watched right now",
    "why am i being watched through my phone",
    "why am i being watched by someone in this room",
]
RESULTS = [
    ("Someone is watching you right now", "Don't turn around. They know you're reading this."),
    ("How to tell if you're being followed", "Step 1: Check behind you. Step 2: It's too late."),
    ("Your camera light is off. That means nothing.", "Indicator lights can be disabled remotely."),
]

BAR_Y = 700
BAR_LEFT = 120


def _search_bar(scene: Scene, text: str = "", delay: float = 0.0) -> None:
    scene.add_child(
        RectNode(x=WIDTH / 2, y=BAR_Y + 3, width=WIDTH - 152, height=116, color=BORDER, radius=58)
        .add_effect("fadeIn", 0.4, delay)
    )
    scene.add_child(
        RectNode(x=WIDTH / 2, y=BAR_Y, width=WIDTH - 160, height=110, color=WHITE, radius=55)
        .add_effect("fadeIn", 0.4, delay)
    )
    if text:
        scene.add_child(TextNode(text=text, x=BAR_LEFT + 60, y=BAR_Y, font_size=40, color=TEXT))


def _logo(scene: Scene, y: float) -> None:
    letters = "Search"
    size = 120
    start = WIDTH / 2 - len(letters) * size * 0.3
    for i, (letter, color) in enumerate(zip(letters, LOGO_COLORS)):
        scene.add_child(
            TextNode(text=letter, x=start + i * size * 0.6, y=y, font_size=size, color=color, align="center")
            .add_effect("bounceIn", 0.6, i * 0.1)
        )


def _home_scene() -> Scene:
    scene = Scene(id="home", bg_color=WHITE, duration=3.5)
    _logo(scene, 460)
    _search_bar(scene, delay=0.6)
    # Typed one word at a time
    words = QUERY.split()
    for i in range(len(words)):
        typed = TextNode(text=" ".join(words[: i + 1]), x=BAR_LEFT + 60, y=BAR_Y, font_size=40, color=TEXT)
        typed.add_effect("fadeIn", 0.05, 1.0 + i * 0.4)
        if i + 1 < len(words):
            typed.add_effect("fadeOut", 0.05, 1.4 + i * 0.4)
        scene.add_child(typed)
    return scene.set_transition("fade", 0.4)


def _suggestions_scene() -> Scene:
    scene = Scene(id="suggestions", bg_color=WHITE, duration=3.5)
    _search_bar(scene, QUERY)
    scene.add_child(
        RectNode(x=WIDTH / 2, y=BAR_Y + 300, width=WIDTH - 160, height=440, color=WHITE, radius=20)
        .add_effect("fadeIn", 0.3)
    )
    for i, suggestion in enumerate(SUGGESTIONS):
        color = DANGER if i == len(SUGGESTIONS) - 1 else TEXT
        scene.add_child(
            TextNode(text=suggestion, x=BAR_LEFT + 60, y=BAR_Y + 140 + i * 100, font_size=34, color=color)
            .add_effect("fadeInDown", 0.3, 0.4 + i * 0.5)
        )
    return scene.set_transition("directionalwarp", 0.5)


def _results_scene() -> Scene:
    scene = Scene(id="results", bg_color=WHITE, duration=4.5)
    _search_bar(scene, QUERY)
    scene.add_child(TextNode(text="About 1 result (0.00 seconds)", x=BAR_LEFT, y=BAR_Y + 120, font_size=26, color=MUTED))
    for i, (title, snippet) in enumerate(RESULTS):
        y = BAR_Y + 260 + i * 260
        delay = 0.5 + i * 0.9
        scene.add_child(
            TextNode(text=title, x=BAR_LEFT, y=y, font_size=38, color="#1a0dab").add_effect("fadeInUp", 0.4, delay)
        )
        scene.add_child(
            TextNode(text=snippet, x=BAR_LEFT, y=y + 70, font_size=28, color=MUTED).add_effect("fadeIn", 0.4, delay + 0.2)
        )
    return scene.set_transition("crosswarp", 0.5)


def _lost_scene() -> Scene:
    scene = Scene(id="connection-lost", bg_color="#202124", duration=3.0)
    add_centered_text(scene, "CONNECTION LOST", HEIGHT / 2 - 80, 90, DANGER, "zoomIn", 0.3)
    add_centered_text(scene, "They found you", HEIGHT / 2 + 60, 48, "#9aa0a6", "fadeIn", 0.6, 1.0)
    return scene.set_transition("zoomIn", 0.5)


def _finale_scene(number: int) -> Scene:
    scene = Scene(id="finale", bg_color=BLACK, duration=5.0)
    add_centered_text(scene, "YOU SEARCHED", HEIGHT / 2 - 260, 80, WHITE, "fadeIn", 0.8)
    add_centered_text(scene, "NOW WE FOUND YOU", HEIGHT / 2 - 120, 80, DANGER, "fadeIn", 0.8, 1.0)
    add_centered_text(scene, "CLOSE THE APP", HEIGHT / 2 + 80, 56, "#9aa0a6", "fadeIn", 0.6, 2.2)
    add_centered_text(scene, "THE END...?", HEIGHT / 2 + 260, 64, WHITE, "blurIn", 1.0, 3.0)
    add_series_footer(scene, number, "#444444", 3.5)
    return scene


@register_story(19)
def build() -> Manifest:
    story = get_story(19)
    scenes = [
        _home_scene(),
        _suggestions_scene(),
        _results_scene(),
        _lost_scene(),
        _finale_scene(story.number),
    ]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
