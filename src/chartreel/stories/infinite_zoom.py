"""Story 29: into an eye, out to a galaxy, down to a planet and back into the same eye."""

import random

from ..models import Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

DEEP_SPACE = "#000000"
SPACE_BLUE = "#0a0e27"
SPACE_PURPLE = "#1a0f2e"
NEBULA_PINK = "#ff006e"
NEBULA_PURPLE = "#8338ec"
NEBULA_BLUE = "#3a86ff"
EYE_WHITE = "#f8f8f8"
IRIS_BLUE = "#4a90e2"
IRIS_BROWN = "#8b6f47"
PLANET_BLUE = "#1e88e5"
PLANET_GREEN = "#43a047"
GALAXY_PINK = "#e91e63"
SKIN = "#e0b896"

CX, CY = WIDTH / 2, HEIGHT / 2


def _stars(scene: Scene, seed: int, count: int = 40) -> None:
    rng = random.Random(seed)
    for _ in range(count):
        size = rng.choice((4, 6, 8))
        star = RectNode(x=rng.randint(0, WIDTH), y=rng.randint(0, HEIGHT), width=size, height=size, radius=size // 2, color="#ffffff")
        scene.add_child(star.add_effect("fadeIn", 0.5, rng.uniform(0, 1.5)))


def _eye(scene: Scene, scale: float, delay: float) -> None:
    """Eye white, iris ring and pupil, centred on the frame."""
    def disc(size: float, color: str, at: float) -> None:
        s = int(size * scale)
        scene.add_child(RectNode(x=CX, y=CY, width=s, height=s, radius=s // 2, color=color).add_effect("zoomIn", 0.8, at))

    scene.add_child(RectNode(x=CX, y=CY, width=int(900 * scale), height=int(460 * scale), radius=int(230 * scale), color=EYE_WHITE).add_effect("fadeIn", 0.8, delay))
    disc(400, IRIS_BROWN, delay + 0.3)
    disc(320, IRIS_BLUE, delay + 0.5)
    disc(160, DEEP_SPACE, delay + 0.7)


def _plunge(scene: Scene, delay: float) -> None:
    """Pupil swelling to fill the frame, the hand-off into the next scale."""
    scene.add_child(
        RectNode(x=CX, y=CY, width=2240, height=2240, radius=1120, color=DEEP_SPACE)
        .add_effect("zoomIn", 1.2, delay)
    )


def _eye_scene() -> Scene:
    scene = Scene(id="eye", bg_color=SKIN, duration=5.0)
    _eye(scene, 1.0, 0.2)
    add_centered_text(scene, "LOOK CLOSER", 300, 64, DEEP_SPACE, "fadeIn", 0.6, 1.4)
    _plunge(scene, 3.6)
    return scene.set_transition("zoomin", 0.5)


def _space_scene() -> Scene:
    scene = Scene(id="space", bg_color=DEEP_SPACE, duration=5.0)
    _stars(scene, 1)
    for i, (color, size) in enumerate(((NEBULA_PURPLE, 900), (NEBULA_BLUE, 640), (NEBULA_PINK, 380))):
        scene.add_child(RectNode(x=CX, y=CY, width=size, height=size, radius=size // 2, color=color, opacity=0.35).add_effect("zoomIn", 1.5, 0.3 + i * 0.5))
    add_centered_text(scene, "DEEPER", HEIGHT - 300, 56, "#ffffff", "fadeIn", 0.6, 2.2)
    return scene.set_transition("crosswarp", 0.5)


def _galaxy_scene() -> Scene:
    scene = Scene(id="galaxy", bg_color=SPACE_PURPLE, duration=5.0)
    _stars(scene, 2, 60)
    # Spiral arms as rotated bands around a bright core
    for i, color in enumerate((NEBULA_PURPLE, GALAXY_PINK, NEBULA_BLUE, NEBULA_PURPLE)):
        band = RectNode(x=CX, y=CY, width=900 - i * 140, height=90, radius=45, color=color, opacity=0.6)
        scene.add_child(band.add_effect("rotateIn", 1.5, 0.2 + i * 0.3))
    scene.add_child(RectNode(x=CX, y=CY, width=160, height=160, radius=80, color="#ffffff").add_effect("zoomIn", 1.0, 0.4))
    add_centered_text(scene, "100 BILLION STARS", HEIGHT - 300, 48, "#ffffff", "fadeIn", 0.6, 2.0)
    return scene.set_transition("zoomin", 0.6)


def _planet_scene() -> Scene:
    scene = Scene(id="planet", bg_color=SPACE_BLUE, duration=5.0)
    _stars(scene, 3)
    scene.add_child(RectNode(x=CX, y=CY, width=760, height=760, radius=380, color=PLANET_BLUE).add_effect("zoomIn", 1.2, 0.2))
    for x, y, w, h in ((CX - 150, CY - 120, 260, 180), (CX + 140, CY + 100, 220, 260), (CX - 60, CY + 230, 160, 100)):
        scene.add_child(RectNode(x=x, y=y, width=w, height=h, radius=60, color=PLANET_GREEN).add_effect("fadeIn", 0.8, 1.0))
    add_centered_text(scene, "ONE PLANET", HEIGHT - 300, 56, "#ffffff", "fadeIn", 0.6, 1.8)
    _plunge(scene, 3.6)
    return scene.set_transition("zoomin", 0.7)


def _loop_scene(number: int) -> Scene:
    scene = Scene(id="loop", bg_color=SKIN, duration=6.0)
    _eye(scene, 1.0, 0.3)
    add_centered_text(scene, "...AND BACK AGAIN", 300, 56, DEEP_SPACE, "fadeIn", 0.6, 1.6)
    add_centered_text(scene, "INFINITE", HEIGHT - 520, 96, DEEP_SPACE, "zoomIn", 0.6, 2.4)
    add_centered_text(scene, "ZOOM", HEIGHT - 400, 96, IRIS_BLUE, "zoomIn", 0.6, 2.8)
    add_series_footer(scene, number, DEEP_SPACE, 3.6)
    return scene


@register_story(29)
def build() -> Manifest:
    story = get_story(29)
    scenes = [_eye_scene(), _space_scene(), _galaxy_scene(), _planet_scene(), _loop_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
