"""Story 13: three book recommendations in a clean, white-space heavy style."""

from ..models import Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import (
    FPS,
    HEIGHT,
    WIDTH,
    add_centered_text,
    add_lower_third,
    add_progress_indicator,
    add_series_footer,
    add_shadow_card,
)

COLORS = {
    "off_white": "#fafafa",
    "white": "#ffffff",
    "dark_text": "#1d1d1f",
    "light_text": "#86868b",
    "accent_blue": "#0071e3",
    "soft_gray": "#d2d2d7",
}

BOOKS = [
    ("Atomic Habits", "James Clear", "Small habits, remarkable results"),
    ("Thinking, Fast and Slow", "Daniel Kahneman", "Understand your two minds"),
    ("The Psychology of Money", "Morgan Housel", "Wealth is what you don't see"),
]


def _intro_scene() -> Scene:
    scene = Scene(id="intro", bg_color=COLORS["off_white"], duration=3.5)
    add_centered_text(scene, "3 BOOKS", HEIGHT / 2 - 140, 120, COLORS["dark_text"], "fadeInUp", 0.8)
    add_centered_text(scene, "THAT WILL CHANGE", HEIGHT / 2, 56, COLORS["light_text"], "fadeIn", 0.8, 0.5)
    add_centered_text(scene, "YOUR MINDSET", HEIGHT / 2 + 100, 72, COLORS["accent_blue"], "fadeInUp", 0.8, 0.9)
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT / 2 + 200, width=120, height=4, color=COLORS["accent_blue"])
        .add_effect("zoomIn", 0.6, 1.4)
    )
    return scene.set_transition("fade", 0.6)


def _book_scene(index: int, title: str, author: str, tagline: str) -> Scene:
    scene = Scene(id=f"book-{index + 1}", bg_color=COLORS["off_white"], duration=4.5)
    add_centered_text(scene, f"{index + 1:02d}", 260, 96, COLORS["soft_gray"], "fadeInDown", 0.6)

    # Book cover
    add_shadow_card(scene, WIDTH / 2, HEIGHT / 2 - 180, 520, 760, delay=0.3, color=COLORS["white"])
    add_centered_text(
        scene, title.replace(", ", ",\n").replace(" of ", "\nof "), HEIGHT / 2 - 300, 48,
        COLORS["dark_text"], "fadeIn", 0.6, 0.8,
    )
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT / 2 - 130, width=80, height=4, color=COLORS["accent_blue"])
        .add_effect("fadeIn", 0.4, 1.0)
    )
    add_centered_text(scene, author, HEIGHT / 2 - 60, 32, COLORS["light_text"], "fadeIn", 0.6, 1.1)

    add_lower_third(
        scene, title, tagline, delay=1.6,
        title_color=COLORS["dark_text"], subtitle_color=COLORS["light_text"], box_color=COLORS["white"],
    )
    add_progress_indicator(
        scene, index + 1, len(BOOKS), delay=0.5,
        active=COLORS["accent_blue"], inactive=COLORS["soft_gray"],
    )
    return scene.set_transition("moveright", 0.5)


def _summary_scene(number: int) -> Scene:
    scene = Scene(id="reading-list", bg_color=COLORS["white"], duration=4.0)
    add_centered_text(scene, "YOUR READING LIST", 420, 64, COLORS["dark_text"], "fadeInDown", 0.6)
    for i, (title, author, _) in enumerate(BOOKS):
        y = 640 + i * 220
        add_centered_text(scene, f"{i + 1:02d}  {title}", y, 44, COLORS["dark_text"], "fadeInLeft", 0.6, 0.4 + i * 0.3)
        add_centered_text(scene, author, y + 60, 30, COLORS["light_text"], "fadeIn", 0.6, 0.6 + i * 0.3)
    add_centered_text(scene, "SAVE FOR LATER", HEIGHT - 420, 40, COLORS["accent_blue"], "bounceIn", 0.8, 1.8)
    add_series_footer(scene, number, COLORS["light_text"], 2.2)
    return scene


@register_story(13)
def build() -> Manifest:
    story = get_story(13)
    scenes = [_intro_scene()]
    scenes.extend(_book_scene(i, *book) for i, book in enumerate(BOOKS))
    scenes[-1].set_transition("fade", 0.6)
    scenes.append(_summary_scene(story.number))
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
