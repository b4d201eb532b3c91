"""Story 20: "flow state" explained with nothing but drifting liquid shapes."""

import random

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

PURPLE = "#8b5cf6"
BLUE = "#3b82f6"
CYAN = "#06b6d4"
TEAL = "#14b8a6"
GREEN = "#10b981"
PINK = "#ec4899"
ORANGE = "#f97316"
YELLOW = "#fbbf24"
LIGHT_PURPLE = "#c4b5fd"
LIGHT_CYAN = "#67e8f9"
DARK_BG = "#0f172a"
DEEP_BG = "#1e1b4b"
LIGHT_TEXT = "#f1f5f9"

PALETTE = [PURPLE, BLUE, CYAN, TEAL, GREEN, PINK, ORANGE, YELLOW]

ZONE = ["Clear Goals", "Instant Feedback", "Effortless Action", "Time Distortion"]
BENEFITS = [("5X", "Productivity", PURPLE), ("500%", "Creativity", PINK), ("MAX", "Focus", CYAN), ("100%", "Presence", GREEN)]


def _blobs(scene: Scene, seed: int, count: int = 7) -> None:
    """Soft translucent blobs drifting across the frame."""
    rng = random.Random(seed)
    for i in range(count):
        size = rng.randint(260, 520)
        x, y = rng.randint(0, WIDTH), rng.randint(0, HEIGHT)
        color = PALETTE[(seed + i) % len(PALETTE)]
        blob = RectNode(x=x, y=y, width=size, height=int(size * rng.uniform(0.7, 1.2)), radius=size // 2, color=color, opacity=0.35)
        blob.add_effect("zoomIn", 1.2, i * 0.2).add_animate(x=x + rng.randint(-200, 200), y=y + rng.randint(-300, 300), duration=6.0)
        scene.add_child(blob)


def _wave(scene: Scene, y: float, color: str, delay: float) -> None:
    for i in range(10):
        height = 40 + (i % 5) * 18
        scene.add_child(
            RectNode(x=60 + i * 108, y=y, width=80, height=height, radius=40, color=color)
            .add_effect("fadeInUp", 0.5, delay + i * 0.1)
        )


def _intro_scene() -> Scene:
    scene = Scene(id="emergence", bg_color=DARK_BG, duration=6.0)
    _blobs(scene, 1)
    _wave(scene, 1100, PURPLE, 0.5)
    add_centered_text(scene, "FLOW", 1350, 120, "#ffffff", "fadeInUp", 0.6, 1.8)
    add_centered_text(scene, "STATE", 1480, 100, LIGHT_PURPLE, "fadeInUp", 0.6, 2.3)
    add_centered_text(scene, "A Journey Into Focus", 1650, 36, LIGHT_TEXT, "fadeIn", 0.6, 3.0)
    return scene.set_transition("fade", 0.6)


def _definition_scene() -> Scene:
    scene = Scene(id="definition", bg_color=DEEP_BG, duration=6.0)
    _blobs(scene, 2, 5)
    add_centered_text(scene, "WHAT IS", 800, 50, LIGHT_CYAN, "fadeInUp", 0.5, 0.5)
    add_centered_text(scene, "FLOW STATE?", 900, 70, "#ffffff", "fadeInUp", 0.5, 0.9)
    scene.add_child(RectNode(x=WIDTH / 2, y=1160, width=860, height=360, radius=40, color="rgba(255,255,255,0.08)").add_effect("fadeIn", 0.5, 1.5))
    for i, line in enumerate(["Complete immersion", "in an activity", "Time disappears", "Peak performance"]):
        add_centered_text(scene, line, 1050 + i * 70, 42, LIGHT_TEXT, "fadeIn", 0.5, 2.0 + i * 0.5)
    return scene.set_transition("dreamy", 0.7)


def _zone_scene() -> Scene:
    scene = Scene(id="zone", bg_color=DARK_BG, duration=6.0)
    _blobs(scene, 3, 5)
    add_centered_text(scene, "ENTERING", 400, 60, "#ffffff", "fadeInDown", 0.5, 0.4)
    add_centered_text(scene, "THE ZONE", 500, 90, LIGHT_CYAN, "fadeInDown", 0.5, 0.8)
    for i, label in enumerate(ZONE):
        y = 760 + i * 220
        color = PALETTE[i * 2]
        scene.add_child(RectNode(x=WIDTH / 2, y=y, width=800, height=150, radius=75, color=color, opacity=0.8).add_effect("fadeInLeft" if i % 2 else "fadeInRight", 0.5, 1.4 + i * 0.5))
        scene.add_child(TextNode(text=label, x=WIDTH / 2, y=y, font_size=48, color="#ffffff", align="center").add_effect("fadeIn", 0.4, 1.7 + i * 0.5))
    return scene.set_transition("crosswarp", 0.6)


def _benefits_scene() -> Scene:
    scene = Scene(id="benefits", bg_color=DEEP_BG, duration=6.0)
    add_centered_text(scene, "THE BENEFITS", 250, 65, "#ffffff", "fadeInDown", 0.5, 0.3)
    for i, (value, label, color) in enumerate(BENEFITS):
        x = WIDTH / 4 if i % 2 == 0 else WIDTH * 3 / 4
        y = 620 + (i // 2) * 420
        scene.add_child(RectNode(x=x, y=y, width=340, height=340, radius=170, color=color, opacity=0.85).add_effect("zoomIn", 0.6, 0.8 + i * 0.4))
        scene.add_child(TextNode(text=value, x=x, y=y - 30, font_size=80, color="#ffffff", align="center").add_effect("bounceIn", 0.5, 1.1 + i * 0.4))
        scene.add_child(TextNode(text=label, x=x, y=y + 60, font_size=32, color="#ffffff", align="center").add_effect("fadeIn", 0.4, 1.3 + i * 0.4))
    add_centered_text(scene, "Peak Performance", 1560, 50, LIGHT_CYAN, "fadeInUp", 0.5, 3.2)
    add_centered_text(scene, "Unlocked", 1640, 45, LIGHT_TEXT, "fadeInUp", 0.5, 3.5)
    return scene.set_transition("colorphase", 0.7)


def _outro_scene(number: int) -> Scene:
    scene = Scene(id="outro", bg_color=DARK_BG, duration=6.0)
    _blobs(scene, 5)
    add_centered_text(scene, "FIND YOUR", HEIGHT / 2 - 120, 60, LIGHT_CYAN, "fadeInUp", 0.6, 1.0)
    add_centered_text(scene, "FLOW", HEIGHT / 2 - 20, 120, "#ffffff", "zoomIn", 0.6, 1.5)
    add_centered_text(scene, "STATE", HEIGHT / 2 + 90, 100, LIGHT_PURPLE, "zoomIn", 0.6, 2.0)
    add_series_footer(scene, number, LIGHT_TEXT, 3.0)
    return scene


@register_story(20)
def build() -> Manifest:
    story = get_story(20)
    scenes = [_intro_scene(), _definition_scene(), _zone_scene(), _benefits_scene(), _outro_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
