"""Story 26: an indie single teaser with a candle and a waveform that reacts to the bass."""

import math
import random
from typing import List

from ..models import ChartNode, Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

BLACK = "#000000"
VOID = "#0a0a0a"
CHARCOAL = "#1a1a1a"
FLAME_ORANGE = "#ff6600"
FLAME_YELLOW = "#ffaa00"
FLAME_WHITE = "#fff5e6"
CANDLE = "#f5e6d3"
WAVE_BLUE = "#00d4ff"
WAVE_PURPLE = "#9d00ff"
WAVE_PINK = "#ff00ff"
LIGHT_GRAY = "#cccccc"

TITLE = "MIDNIGHT ECHOES"
ARTIST = "by The Indie Collective"

RING_BARS = 36
SPECTRUM_BARS = 16


def waveform(rng: random.Random, bars: int, energy: float) -> List[int]:
    """Bar heights for one beat: ``energy`` in 0..1 scales a 5..100 range."""
    peak = 5 + 95 * max(0.0, min(1.0, energy))
    return [int(rng.uniform(5, peak)) for _ in range(bars)]


def _candle(scene: Scene, delay: float = 0.0) -> None:
    cx, cy = WIDTH / 2, HEIGHT / 2 + 60
    scene.add_child(RectNode(x=cx, y=cy + 160, width=140, height=320, radius=10, color=CANDLE).add_effect("fadeInUp", 0.8, delay))
    scene.add_child(RectNode(x=cx, y=cy - 40, width=260, height=260, radius=130, color="rgba(255,136,51,0.2)").add_effect("fadeIn", 1.2, delay + 0.4))
    scene.add_child(RectNode(x=cx, y=cy - 50, width=60, height=110, radius=30, color=FLAME_ORANGE).add_effect("zoomIn", 0.6, delay + 0.6))
    scene.add_child(RectNode(x=cx, y=cy - 35, width=30, height=60, radius=15, color=FLAME_WHITE).add_effect("zoomIn", 0.6, delay + 0.7))


def _ring(scene: Scene, heights: List[int], color: str, radius: float, delay: float) -> None:
    """Bars radiating from a circle around the candle."""
    cx, cy = WIDTH / 2, HEIGHT / 2 + 20
    for i, h in enumerate(heights):
        angle = 2 * math.pi * i / len(heights)
        r = radius + h * 1.2
        scene.add_child(
            RectNode(x=cx + math.cos(angle) * r, y=cy + math.sin(angle) * r, width=14, height=14, radius=7, color=color)
            .add_effect("zoomIn", 0.3, delay + i * 0.02)
        )


def _spectrum(rng: random.Random, energy: float, color: str) -> ChartNode:
    """Equaliser bars along the bottom, redrawn on every beat."""
    option = {
        "backgroundColor": "transparent",
        "xAxis": {"type": "category", "show": False, "data": [str(i) for i in range(SPECTRUM_BARS)]},
        "yAxis": {"type": "value", "show": False, "min": 0, "max": 100},
        "series": [{"type": "bar", "data": waveform(rng, SPECTRUM_BARS, energy), "itemStyle": {"color": color}, "barWidth": "60%"}],
        "animationDuration": 400,
    }

    def beat(previous, step):
        previous["series"][0]["data"] = waveform(rng, SPECTRUM_BARS, energy)

    return ChartNode(x=WIDTH / 2, y=HEIGHT - 330, width=960, height=360, option=option).update(beat, 0.5)


def _intro_scene() -> Scene:
    scene = Scene(id="intro", bg_color=BLACK, duration=5.0)
    add_centered_text(scene, "NEW RELEASE", HEIGHT / 2 - 260, 40, LIGHT_GRAY, "fadeIn", 1.0, 0.3)
    add_centered_text(scene, TITLE, HEIGHT / 2 - 120, 90, "#ffffff", "blurIn", 1.2, 0.8)
    add_centered_text(scene, ARTIST, HEIGHT / 2 - 20, 40, FLAME_YELLOW, "fadeIn", 1.0, 1.6)
    add_centered_text(scene, "Turn up the volume", HEIGHT / 2 + 300, 36, LIGHT_GRAY, "fadeIn", 0.8, 2.6)
    return scene.set_transition("fade", 0.5)


def _candle_scene(rng: random.Random) -> Scene:
    scene = Scene(id="candle", bg_color=VOID, duration=6.0)
    _candle(scene)
    _ring(scene, waveform(rng, RING_BARS, 0.3), WAVE_BLUE, 300, 1.2)
    scene.add_child(_spectrum(rng, 0.3, WAVE_BLUE).add_effect("fadeIn", 0.6, 1.0))
    add_centered_text(scene, "Listen...", 300, 56, FLAME_WHITE, "fadeIn", 1.0, 0.6)
    return scene.set_transition("crosswarp", 0.4)


def _drop_scene(rng: random.Random) -> Scene:
    scene = Scene(id="bass-drop", bg_color=BLACK, duration=6.0)
    _candle(scene)
    _ring(scene, waveform(rng, RING_BARS, 1.0), WAVE_PURPLE, 280, 0.2)
    _ring(scene, waveform(rng, RING_BARS, 0.7), WAVE_PINK, 260, 0.6)
    scene.add_child(_spectrum(rng, 1.0, WAVE_PURPLE).update_now().add_effect("zoomIn", 0.3))
    add_centered_text(scene, "FEEL THE BEAT", 300, 80, "#ffffff", "zoomIn", 0.3, 0.4, stroke_color=WAVE_PURPLE, stroke_width=4)
    return scene.set_transition("windowslice", 0.5)


def _breakdown_scene(rng: random.Random) -> Scene:
    scene = Scene(id="breakdown", bg_color=CHARCOAL, duration=5.0)
    _candle(scene)
    for i, color in enumerate((WAVE_BLUE, WAVE_PURPLE, FLAME_ORANGE)):
        _ring(scene, waveform(rng, RING_BARS, 0.5 + i * 0.2), color, 240 + i * 60, 0.4 + i * 0.8)
    scene.add_child(_spectrum(rng, 0.8, FLAME_ORANGE).add_effect("fadeIn", 0.5, 0.2))
    add_centered_text(scene, "ENERGY RISING", 300, 72, FLAME_YELLOW, "fadeInUp", 0.5, 0.8)
    return scene.set_transition("directionalwarp", 0.5)


def _outro_scene(number: int) -> Scene:
    scene = Scene(id="outro", bg_color=BLACK, duration=5.0)
    _candle(scene, 0.3)
    add_centered_text(scene, TITLE, 360, 84, "#ffffff", "fadeIn", 1.0, 0.6)
    add_centered_text(scene, ARTIST, 460, 36, FLAME_YELLOW, "fadeIn", 0.8, 1.2)
    add_centered_text(scene, "Available Now", HEIGHT - 420, 56, WAVE_BLUE, "zoomIn", 0.6, 2.0)
    add_series_footer(scene, number, "#555555", 3.0)
    return scene


@register_story(26)
def build() -> Manifest:
    story = get_story(26)
    rng = random.Random(26)
    scenes = [_intro_scene(), _candle_scene(rng), _drop_scene(rng), _breakdown_scene(rng), _outro_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
