"""Story 1: a morning routine that glitches into a simulation."""

import random

from ..models import Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

DARK = "#0a0a0f"
COLD = "#1a1a2e"
TEAL = "#16213e"
CYAN = "#00ffff"
MAGENTA = "#ff00ff"
RED = "#ff0040"
YELLOW = "#ffff00"
MATRIX = "#00ff41"
DIM = "#a0a0a0"

ERRORS = [
    ("ERROR: SIMULATION_FAILURE", "#e74c3c"),
    ("WARNING: REALITY_BUFFER_OVERFLOW", "#ff6b35"),
    ("CRITICAL: CONSCIOUSNESS_LEAK", MAGENTA),
    ("FATAL: MATRIX_DESTABILIZED", RED),
    ("ALERT: PERCEPTION_ERROR", YELLOW),
    ("SYSTEM: NEURAL_SYNC_LOST", CYAN),
]


def _glitch_bar(scene: Scene, y: float, height: float, color: str, at: float) -> None:
    """A full-width bar that flashes on for half a second."""
    scene.add_child(
        RectNode(x=WIDTH / 2, y=y, width=WIDTH, height=height, color=color)
        .add_effect("fadeIn", 0.2, at)
        .add_effect("fadeOut", 0.2, at + 0.5)
    )


def _boot_scene() -> Scene:
    scene = Scene(id="boot", bg_color=DARK, duration=3.0)
    add_centered_text(scene, "INITIALIZING...", HEIGHT / 2 - 100, 48, MATRIX, "fadeIn", 0.5, 0.2)
    add_centered_text(scene, "REALITY.EXE", HEIGHT / 2, 72, "#ffffff", "zoomIn", 0.8, 0.5)
    add_centered_text(scene, "[LOADING SIMULATION]", HEIGHT / 2 + 100, 36, DIM, "fadeIn", 0.5, 1.0)
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT / 2 + 200, width=600, height=20, color="#2c2c2c").add_effect("fadeIn", 0.3, 1.2)
    )
    fill = RectNode(x=WIDTH / 2 - 290, y=HEIGHT / 2 + 200, width=20, height=20, color=MATRIX)
    fill.add_effect("fadeIn", 0.2, 1.3).add_animate(WIDTH / 2 + 290, HEIGHT / 2 + 200, 1.4, 1.3)
    scene.add_child(fill)
    return scene.set_transition("shake", 0.5)


def _routine_scene() -> Scene:
    scene = Scene(id="routine", bg_color=TEAL, duration=6.0)
    add_centered_text(scene, "A man pours coffee...", 400, 52, "#ffffff", "fadeInLeft", 0.6, 0.3)
    add_centered_text(scene, "But as the liquid", 550, 48, DIM, "fadeInRight", 0.6, 1.0)
    add_centered_text(scene, "hits the cup...", 630, 48, DIM, "fadeInRight", 0.6, 1.5)
    scene.add_child(RectNode(x=WIDTH / 2, y=850, width=800, height=150, color=MAGENTA).add_effect("zoomIn", 0.5, 2.2))
    add_centered_text(scene, "IT TURNS INTO", 820, 44, "#ffffff", "bounceIn", 0.5, 2.5)
    add_centered_text(scene, "DIGITAL PIXELS", 880, 54, "#ffffff", "bounceIn", 0.6, 2.8)
    # Scattered pixels; fixed seed so every build matches
    rng = random.Random(1)
    for i in range(24):
        scene.add_child(
            RectNode(
                x=rng.randint(100, WIDTH - 100), y=rng.randint(1000, 1300),
                width=24, height=24, color=rng.choice([CYAN, MAGENTA, MATRIX, YELLOW]),
            ).add_effect("zoomIn", 0.3, 3.2 + i * 0.05)
        )
    add_centered_text(scene, "FRAGMENT", HEIGHT - 230, 68, RED, "bounceIn", 0.6, 4.3)
    _glitch_bar(scene, 600, 8, MAGENTA, 2.0)
    _glitch_bar(scene, 1500, 12, RED, 4.0)
    return scene.set_transition("windowshades", 0.7)


def _wireframe_scene() -> Scene:
    scene = Scene(id="wireframe", bg_color=DARK, duration=6.0)
    scene.add_child(RectNode(x=400, y=750, width=350, height=350, color="rgba(0,255,255,0.3)").add_effect("fadeIn", 0.5, 0.5))
    add_centered_text(scene, "[ WIREFRAME DETECTED ]", 540, 28, CYAN, "fadeIn", 0.3, 1.0)
    scene.add_child(RectNode(x=WIDTH / 2, y=1400, width=950, height=300, color="rgba(0,0,0,0.9)").add_effect("fadeInUp", 0.5, 1.5))
    add_centered_text(scene, "He touches his face...", 1300, 46, DIM, "fadeIn", 0.5, 1.8)
    add_centered_text(scene, "His hand", 1400, 52, "#ffffff", "fadeInLeft", 0.5, 2.4)
    add_centered_text(scene, '"GLITCHES"', 1480, 72, CYAN, "bounceIn", 0.8, 2.9)
    add_centered_text(scene, "into a WIREFRAME", 1570, 48, "#ffffff", "fadeInRight", 0.5, 3.6)
    for i in range(5):
        _glitch_bar(scene, 300 + i * 250, 4, CYAN, 4.0 + i * 0.2)
    return scene.set_transition("shake", 0.6)


def _cascade_scene() -> Scene:
    scene = Scene(id="cascade", bg_color="#050510", duration=6.0)
    for i, (text, color) in enumerate(ERRORS):
        y = 300 + i * 120
        delay = 0.3 + i * 0.3
        scene.add_child(RectNode(x=WIDTH / 2, y=y, width=900, height=80, color="rgba(0,0,0,0.85)").add_effect("fadeInLeft", 0.4, delay))
        add_centered_text(scene, text, y, 32, color, "fadeIn", 0.3, delay + 0.2)
    scene.add_child(RectNode(x=WIDTH / 2, y=1150, width=800, height=200, color=MAGENTA).add_effect("zoomIn", 0.6, 2.5))
    add_centered_text(scene, "IS THIS", 1100, 56, "#ffffff", "bounceIn", 0.5, 2.8)
    add_centered_text(scene, "REALITY?", 1180, 80, "#ffffff", "bounceIn", 0.6, 3.1)
    return scene.set_transition("circlecrop", 0.6)


def _end_scene(number: int) -> Scene:
    scene = Scene(id="end", bg_color="#000000", duration=5.0)
    add_centered_text(scene, "WHAT IF", HEIGHT / 2 - 200, 64, DIM, "fadeIn", 0.6, 0.3)
    add_centered_text(scene, "EVERYTHING YOU KNOW", HEIGHT / 2 - 80, 60, "#ffffff", "fadeInUp", 0.6, 0.9)
    add_centered_text(scene, "IS A SIMULATION?", HEIGHT / 2 + 20, 72, CYAN, "zoomIn", 0.8, 1.5)
    add_centered_text(scene, "[ END OF TRANSMISSION ]", HEIGHT / 2 + 200, 32, MATRIX, "fadeIn", 0.5, 2.6)
    add_series_footer(scene, number, "#444444", 3.0)
    return scene


@register_story(1)
def build() -> Manifest:
    story = get_story(1)
    scenes = [_boot_scene(), _routine_scene(), _wireframe_scene(), _cascade_scene(), _end_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
