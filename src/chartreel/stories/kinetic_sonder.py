"""Story 2: kinetic typography explaining the word "sonder"."""

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

COLORS = {
    "black": "#000000",
    "pure_black": "#0a0a0a",
    "electric_blue": "#00d4ff",
    "hot_pink": "#ff0080",
    "neon_yellow": "#ffff00",
    "lime_green": "#00ff66",
    "deep_purple": "#9d00ff",
    "fire_orange": "#ff6600",
    "white": "#ffffff",
    "gray": "#666666",
}


def _title_scene() -> Scene:
    scene = Scene(id="title", bg_color=COLORS["black"], duration=3.0)
    add_centered_text(scene, "SONDER", HEIGHT / 2 - 60, 180, COLORS["electric_blue"], "bounceIn", 1.0)
    add_centered_text(scene, "/ˈsändər/", HEIGHT / 2 + 100, 48, COLORS["gray"], "fadeIn", 0.6, 0.8)
    add_centered_text(scene, "noun", HEIGHT / 2 + 180, 36, COLORS["hot_pink"], "fadeInUp", 0.6, 1.2)
    return scene.set_transition("directionalwarp", 0.5)


def _stacked_words(scene_id: str, words, colors, bg: str, duration: float, font_size: int = 140) -> Scene:
    """One word per line, each slamming in after the last."""
    scene = Scene(id=scene_id, bg_color=bg, duration=duration)
    top = HEIGHT / 2 - (len(words) - 1) * font_size * 0.6
    for i, (word, color) in enumerate(zip(words, colors)):
        effect = "fadeInLeftBig" if i % 2 == 0 else "fadeInRightBig"
        add_centered_text(scene, word, top + i * font_size * 1.2, font_size, color, effect, 0.5, i * 0.4)
    return scene


def _vivid_scene() -> Scene:
    scene = Scene(id="vivid", bg_color=COLORS["deep_purple"], duration=3.0)
    add_centered_text(scene, "AS VIVID", HEIGHT / 2 - 160, 130, COLORS["white"], "zoomIn", 0.6)
    add_centered_text(scene, "AND", HEIGHT / 2, 80, COLORS["neon_yellow"], "fadeIn", 0.4, 0.6)
    add_centered_text(scene, "COMPLEX", HEIGHT / 2 + 160, 150, COLORS["white"], "zoomIn", 0.6, 1.0)
    return scene


def _crowd_scene() -> Scene:
    scene = Scene(id="crowd", bg_color=COLORS["pure_black"], duration=3.0)
    # A grid of dim "people" with one lit up
    for row in range(6):
        for col in range(5):
            lit = (row, col) == (3, 2)
            dot = RectNode(
                x=WIDTH / 2 + (col - 2) * 160,
                y=HEIGHT / 2 - 400 + row * 160,
                width=60,
                height=60,
                radius=30,
                color=COLORS["neon_yellow"] if lit else "#222222",
            )
            dot.add_effect("zoomIn", 0.4, (row + col) * 0.05)
            scene.add_child(dot)
    add_centered_text(scene, "IN A CROWD", HEIGHT / 2 + 600, 110, COLORS["white"], "fadeInUp", 0.6, 1.0)
    return scene.set_transition("windowshades", 0.5)


def _story_scene() -> Scene:
    scene = Scene(id="story", bg_color=COLORS["hot_pink"], duration=2.5)
    add_centered_text(scene, "HAS THEIR OWN", HEIGHT / 2 - 160, 72, COLORS["black"], "fadeInDown", 0.5)
    add_centered_text(scene, "STORY", HEIGHT / 2 + 40, 220, COLORS["white"], "bounceIn", 0.8, 0.5)
    return scene.set_transition("directionalwarp", 0.5)


def _definition_scene() -> Scene:
    scene = Scene(id="definition", bg_color=COLORS["black"], duration=4.0)
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=900, height=760, color=COLORS["white"], radius=12)
        .add_effect("zoomIn", 0.6)
    )
    add_centered_text(scene, "SONDER", HEIGHT / 2 - 220, 140, COLORS["black"], "fadeIn", 0.6, 0.4)
    lines = [
        "the profound feeling",
        "of realizing that everyone",
        "has a life as vivid and",
        "complex as your own",
    ]
    for i, line in enumerate(lines):
        add_centered_text(scene, line, HEIGHT / 2 - 40 + i * 70, 44, COLORS["gray"], "fadeInUp", 0.5, 0.8 + i * 0.25)
    return scene.set_transition("fade", 0.6)


def _outro_scene(number: int) -> Scene:
    scene = Scene(id="outro", bg_color=COLORS["pure_black"], duration=3.0)
    add_centered_text(scene, "KINETIC", HEIGHT / 2 - 80, 96, COLORS["electric_blue"], "fadeInLeft", 0.6)
    add_centered_text(scene, "DICTIONARY", HEIGHT / 2 + 40, 96, COLORS["hot_pink"], "fadeInRight", 0.6, 0.3)
    add_series_footer(scene, number, COLORS["gray"])
    return scene


@register_story(2)
def build() -> Manifest:
    story = get_story(2)
    scenes = [
        _title_scene(),
        _stacked_words(
            "realization", ["THE", "REALIZATION", "THAT"],
            [COLORS["white"], COLORS["neon_yellow"], COLORS["white"]],
            COLORS["pure_black"], 2.5, font_size=120,
        ).set_transition("windowslice", 0.5),
        _stacked_words(
            "passerby", ["EVERY", "RANDOM", "PASSERBY"],
            [COLORS["lime_green"], COLORS["white"], COLORS["fire_orange"]],
            COLORS["black"], 2.5, font_size=130,
        ).set_transition("crosswarp", 0.5),
        _vivid_scene().set_transition("dreamy", 0.6),
        _stacked_words(
            "inner-life", ["DREAMS", "FEARS", "SECRETS", "STORIES"],
            [COLORS["electric_blue"], COLORS["hot_pink"], COLORS["neon_yellow"], COLORS["lime_green"]],
            COLORS["pure_black"], 3.0, font_size=120,
        ).set_transition("colorphase", 0.6),
        _crowd_scene(),
        _story_scene(),
        _definition_scene(),
        _outro_scene(story.number),
    ]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
