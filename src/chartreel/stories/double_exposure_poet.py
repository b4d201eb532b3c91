"""Story 14: an ocean poem with waves crashing inside a silhouette."""

from ..models import Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

BLACK = "#000000"
DEEP_BLACK = "#0a0a0a"
DARK_GRAY = "#1a1a1a"
SILVER = "#a0a0a0"
OFF_WHITE = "#e0e0e0"
OCEAN = "#0a1520"
SEAFOAM = "rgba(100,150,180,0.3)"
SILHOUETTE = "#050505"

# Couplets with the emphasised word
POEM = [
    ("I am the ocean", "Vast and deep", "OCEAN"),
    ("Waves crash within me", "Secrets I keep", "CRASH"),
    ("Tides of emotion", "Rise and fall", "EMOTION"),
    ("In the silence", "I hear it all", "ALL"),
]


def _silhouette(scene: Scene, delay: float = 0.0) -> None:
    """Head, neck and shoulders in near black, with waves rolling inside."""
    x, y = WIDTH / 2, HEIGHT / 2 + 200
    for width, height, dy, radius in ((300, 340, -520, 150), (130, 120, -310, 0), (760, 620, 60, 180)):
        scene.add_child(RectNode(x=x, y=y + dy, width=width, height=height, radius=radius, color=SILHOUETTE).add_effect("fadeIn", 1.0, delay))
    for i in range(5):
        wave = RectNode(x=x - 500, y=y - 100 + i * 90, width=520, height=26, radius=13, color=SEAFOAM)
        wave.add_effect("fadeIn", 0.8, delay + 0.6 + i * 0.3).add_animate(x=x + 120, duration=3.0, delay=delay + 0.6 + i * 0.3)
        scene.add_child(wave)


def _intro_scene() -> Scene:
    scene = Scene(id="intro", bg_color=BLACK, duration=5.0)
    _silhouette(scene, 0.3)
    add_centered_text(scene, "DOUBLE", 300, 110, OFF_WHITE, "blurIn", 1.2, 0.5)
    add_centered_text(scene, "EXPOSURE", 430, 110, OFF_WHITE, "blurIn", 1.2, 1.0)
    add_centered_text(scene, "A Visual Poem", HEIGHT - 240, 44, SILVER, "fadeIn", 1.0, 2.2)
    return scene.set_transition("fade", 0.8)


def _verse_scene(index: int, bg: str) -> Scene:
    first, second, word = POEM[index]
    scene = Scene(id=f"verse-{index + 1}", bg_color=BLACK, duration=6.0)
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=WIDTH, height=HEIGHT, color=bg).add_effect("fadeIn", 0.5))
    _silhouette(scene)
    add_centered_text(scene, word, HEIGHT / 2 + 160, 160, "rgba(255,255,255,0.15)", "blurIn", 1.5, 0.8)
    add_centered_text(scene, first, 260, 60, OFF_WHITE, "fadeIn", 1.0, 1.0)
    add_centered_text(scene, second, 350, 60, OFF_WHITE, "fadeIn", 1.0, 2.2)
    return scene.set_transition(["crosswarp", "dreamy", "fade"][index], 0.8)


def _finale_scene(number: int) -> Scene:
    first, second, word = POEM[-1]
    scene = Scene(id="finale", bg_color=BLACK, duration=6.0)
    add_centered_text(scene, first, HEIGHT / 2 - 320, 56, SILVER, "fadeIn", 1.0, 0.2)
    add_centered_text(scene, second, HEIGHT / 2 - 230, 56, OFF_WHITE, "fadeIn", 1.0, 1.0)
    add_centered_text(scene, word, HEIGHT / 2 - 40, 180, "#ffffff", "blurIn", 1.5, 1.8)
    add_centered_text(scene, "DOUBLE EXPOSURE POET", HEIGHT / 2 + 200, 44, SILVER, "fadeIn", 0.8, 3.0)
    add_centered_text(scene, "Follow for more visual poetry", HEIGHT / 2 + 280, 32, SILVER, "fadeIn", 0.8, 3.4)
    add_series_footer(scene, number, "#555555", 3.8)
    return scene


@register_story(14)
def build() -> Manifest:
    story = get_story(14)
    scenes = [
        _intro_scene(),
        _verse_scene(0, DEEP_BLACK),
        _verse_scene(1, OCEAN),
        _verse_scene(2, DARK_GRAY),
        _finale_scene(story.number),
    ]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
