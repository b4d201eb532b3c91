"""Story 7: a golden hour poem in letter-spaced serif over warm light leaks."""

from ..models import Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

CREAM_GLOW = "#fff8e7"
APRICOT = "#ffdab9"
GOLDEN = "#ffd89b"
SUNSET = "#f5a962"
PEACH = "#ffcba4"
PURE = "#fffef5"
SOFT_BROWN = "#8b7355"
WARM_GRAY = "#a09080"

# (background, first line, second line)
VERSES = [
    (APRICOT, "THE SUN DIPS LOW", "PAINTING THE WORLD"),
    (GOLDEN, "IN HONEY", "AND LIGHT"),
    (SUNSET, "EVERYTHING GLOWS", "SOFTLY FADING"),
]


def spaced(text: str) -> str:
    """Letter-space text: one space between letters, three between words."""
    return "   ".join(" ".join(word) for word in text.split())


def _light_leaks(scene: Scene) -> None:
    """Overexposed blobs drifting across the frame."""
    for i, (x, y, size, color) in enumerate([
        (200, 400, 700, "rgba(255,254,245,0.35)"),
        (900, 1300, 800, "rgba(255,216,155,0.3)"),
        (500, 1700, 600, "rgba(255,196,196,0.25)"),
    ]):
        leak = RectNode(x=x, y=y, width=size, height=size, radius=size // 2, color=color)
        leak.add_effect("fadeIn", 1.5, i * 0.4).add_animate(x + 160 * (-1) ** i, y - 120, 5.0, 0.5)
        scene.add_child(leak)


def _title_scene() -> Scene:
    scene = Scene(id="title", bg_color=CREAM_GLOW, duration=6.0)
    _light_leaks(scene)
    add_centered_text(scene, spaced("GOLDEN"), HEIGHT / 2 - 140, 96, SOFT_BROWN, "blurIn", 1.5, 0.3, style="minimal")
    add_centered_text(scene, spaced("HOUR"), HEIGHT / 2 - 10, 96, SOFT_BROWN, "blurIn", 1.5, 1.0, style="minimal")
    add_centered_text(scene, spaced("a visual poem"), HEIGHT / 2 + 160, 36, WARM_GRAY, "fadeIn", 1.2, 2.0, style="minimal")
    add_centered_text(scene, spaced("6:47 pm"), HEIGHT - 300, 32, WARM_GRAY, "fadeIn", 1.2, 2.8, style="minimal")
    return scene.set_transition("fade", 1.2)


def _verse_scene(index: int) -> Scene:
    bg, first, second = VERSES[index]
    scene = Scene(id=f"verse-{index + 1}", bg_color=bg, duration=6.0)
    _light_leaks(scene)
    add_centered_text(scene, spaced(first), HEIGHT / 2 - 80, 64, PURE, "blurIn", 1.5, 0.4, style="minimal")
    add_centered_text(scene, spaced(second), HEIGHT / 2 + 60, 64, PURE, "blurIn", 1.5, 1.6, style="minimal")
    return scene.set_transition("fade", 1.2)


def _finale_scene(number: int) -> Scene:
    scene = Scene(id="finale", bg_color=PEACH, duration=6.0)
    _light_leaks(scene)
    add_centered_text(scene, spaced("INTO"), HEIGHT / 2 - 240, 64, PURE, "blurIn", 1.2, 0.3, style="minimal")
    add_centered_text(scene, spaced("GOLD"), HEIGHT / 2 - 100, 120, PURE, "blurIn", 1.5, 0.9, style="minimal")
    add_centered_text(scene, spaced("LUMA-FADE"), HEIGHT / 2 + 120, 44, SOFT_BROWN, "fadeIn", 1.0, 2.2, style="minimal")
    add_centered_text(scene, spaced("DREAMSCAPE"), HEIGHT / 2 + 190, 44, SOFT_BROWN, "fadeIn", 1.0, 2.5, style="minimal")
    add_centered_text(scene, spaced("follow for more"), HEIGHT - 360, 30, WARM_GRAY, "fadeIn", 1.0, 3.2, style="minimal")
    add_series_footer(scene, number, WARM_GRAY, 3.8)
    return scene


@register_story(7)
def build() -> Manifest:
    story = get_story(7)
    scenes = [_title_scene(), *(_verse_scene(i) for i in range(len(VERSES))), _finale_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
