"""Story 10: found VHS footage of a door standing alone in the woods."""

import random

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

VHS_BLACK = "#0a0a0a"
STATIC = "#404040"
FOREST = "#0d1f0d"
EERIE = "#1a3a1a"
WOOD = "#3d2817"
REC = "#ff0000"
STAMP = "#e0e0e0"
DIM = "#b0b0b0"
CHROMA_RED = "#ff0040"
CHROMA_CYAN = "#00ffff"

TIMESTAMP = "SEPT 12 1994  11:47 PM"


def _overlay(scene: Scene, seed: int) -> None:
    """Camcorder chrome: REC light, timestamp, scanlines and a few static flecks."""
    scene.add_child(RectNode(x=140, y=280, width=28, height=28, radius=14, color=REC).add_effect("fadeIn", 0.2))
    scene.add_child(TextNode(text="REC", x=170, y=280, font_size=32, color=REC))
    scene.add_child(TextNode(text=TIMESTAMP, x=120, y=HEIGHT - 280, font_size=28, color=STAMP))
    for i in range(0, HEIGHT, 120):
        scene.add_child(RectNode(x=WIDTH / 2, y=i, width=WIDTH, height=4, color="rgba(0,0,0,0.3)"))
    rng = random.Random(seed)
    for _ in range(18):
        fleck = RectNode(x=rng.randint(0, WIDTH), y=rng.randint(0, HEIGHT), width=rng.randint(20, 120), height=3, color=STATIC)
        at = rng.uniform(0.2, 3.0)
        scene.add_child(fleck.add_effect("fadeIn", 0.1, at).add_effect("fadeOut", 0.1, at + 0.2))


def _tracking_glitch(scene: Scene, at: float) -> None:
    """Red and cyan bands offset like a tracking error."""
    for color, offset in ((CHROMA_RED, -8), (CHROMA_CYAN, 8)):
        scene.add_child(
            RectNode(x=WIDTH / 2 + offset, y=HEIGHT / 2, width=WIDTH, height=60, color=color)
            .add_effect("fadeIn", 0.1, at).add_effect("fadeOut", 0.1, at + 0.25)
        )


def _tape_scene() -> Scene:
    scene = Scene(id="tape", bg_color=VHS_BLACK, duration=5.0)
    _overlay(scene, 10)
    scene.add_child(TextNode(text="PLAY", x=WIDTH - 120, y=280, font_size=32, color=STAMP, align="right").add_effect("fadeIn", 0.3, 0.5))
    add_centered_text(scene, "SEPT 12 1994", HEIGHT / 2, 60, STAMP, "fadeIn", 0.4, 1.0)
    add_centered_text(scene, "11:47:23 PM", HEIGHT / 2 + 80, 48, STAMP, "fadeIn", 0.4, 1.3)
    add_centered_text(scene, "FOUND FOOTAGE", HEIGHT / 2 + 250, 44, REC, "fadeIn", 0.4, 2.2)
    add_centered_text(scene, "EVIDENCE FILE #1994-0912", HEIGHT / 2 + 380, 28, DIM, "fadeIn", 0.4, 2.8)
    return scene.set_transition("fastswitch", 0.3)


def _woods_scene() -> Scene:
    scene = Scene(id="woods", bg_color=FOREST, duration=6.0)
    # Tree trunks sway past the camera
    for i, x in enumerate([120, 330, 610, 860, 1010]):
        trunk = RectNode(x=x, y=HEIGHT / 2, width=60 + (i % 2) * 40, height=HEIGHT, color=EERIE)
        trunk.add_effect("fadeIn", 0.8, 0.1 * i).add_animate(x=x - 60, duration=6.0)
        scene.add_child(trunk)
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=WIDTH, height=HEIGHT, color="rgba(200,200,200,0.15)").add_effect("fadeIn", 2.0, 0.5))
    _overlay(scene, 20)
    add_centered_text(scene, '"I found something', 470, 38, STAMP, "fadeIn", 0.3, 2.2)
    add_centered_text(scene, 'in the woods..."', 530, 38, STAMP, "fadeIn", 0.3, 2.8)
    _tracking_glitch(scene, 4.5)
    return scene.set_transition("shake", 0.4)


def _door_scene() -> Scene:
    scene = Scene(id="door", bg_color=VHS_BLACK, duration=6.0)
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2 + 40, width=360, height=720, color=WOOD).add_effect("zoomIn", 1.5, 0.5))
    scene.add_child(RectNode(x=WIDTH / 2 + 120, y=HEIGHT / 2 + 60, width=30, height=30, radius=15, color="#c9a227").add_effect("fadeIn", 0.5, 1.8))
    _overlay(scene, 30)
    add_centered_text(scene, '"What... is this?"', 350, 42, STAMP, "fadeIn", 0.4, 1.2)
    for i in range(3):
        scene.add_child(TextNode(text="?", x=300 + i * 240, y=550, font_size=60, color=DIM, align="center").add_effect("bounceIn", 0.4, 2.0 + i * 0.3))
    add_centered_text(scene, "A DOOR TO NOWHERE", HEIGHT / 2 + 500, 32, REC, "fadeIn", 0.4, 3.2)
    return scene.set_transition("fastswitch", 0.3)


def _opening_scene() -> Scene:
    scene = Scene(id="opening", bg_color=VHS_BLACK, duration=5.0)
    door = RectNode(x=WIDTH / 2, y=HEIGHT / 2 + 40, width=360, height=720, color=WOOD)
    # The door swings open onto pure light
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2 + 40, width=340, height=700, color="#ffffff").add_effect("fadeIn", 1.0, 1.5))
    scene.add_child(door.add_animate(x=WIDTH / 2 - 300, duration=1.2, delay=1.2))
    _overlay(scene, 40)
    add_centered_text(scene, "\"I'm going in...\"", 350, 44, STAMP, "fadeIn", 0.4, 0.4)
    _tracking_glitch(scene, 2.8)
    _tracking_glitch(scene, 3.3)
    add_centered_text(scene, "SIGNAL LOST", HEIGHT / 2 + 560, 40, REC, "fadeIn", 0.2, 3.6)
    return scene.set_transition("shake", 0.5)


def _end_scene(number: int) -> Scene:
    scene = Scene(id="end", bg_color=VHS_BLACK, duration=5.0)
    add_centered_text(scene, "[ TAPE ENDS ]", 400, 48, DIM, "fadeIn", 0.5)
    add_centered_text(scene, "WHAT WAS BEHIND", 610, 42, STAMP, "fadeIn", 0.5, 0.8)
    add_centered_text(scene, "THE DOOR?", 680, 56, REC, "fadeIn", 0.5, 1.2)
    add_centered_text(scene, "VHS INVESTIGATION", 950, 42, STAMP, "fadeIn", 0.5, 2.0)
    add_centered_text(scene, "FOLLOW FOR PART 2", 1320, 36, STAMP, "fadeIn", 0.5, 2.6)
    add_series_footer(scene, number, "#555555", 3.0)
    return scene


@register_story(10)
def build() -> Manifest:
    story = get_story(10)
    scenes = [_tape_scene(), _woods_scene(), _door_scene(), _opening_scene(), _end_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
