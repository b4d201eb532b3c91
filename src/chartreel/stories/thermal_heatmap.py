"""Story 24: commuter stress levels through a thermal camera, morning to peak hour."""

import random
from typing import Any, Dict, List

from ..models import ChartNode, Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

BLACK = "#000000"
DARK = "#0a0a0a"
SCAN = "#00ff00"
ALERT = "#ff0000"
WARN = "#ffff00"
UI_GRAY = "#808080"

# Ironbow ramp, coolest first
THERMAL = ["#4a0080", "#0040ff", "#00ffff", "#00ff00", "#ffff00", "#ff8000", "#ff0000", "#ffffff"]
SCALE = ["CALM", "LOW", "MILD", "MODERATE", "ELEVATED", "HIGH", "EXTREME", "CRITICAL"]

COLUMNS = 8
ROWS = 12

# (scene id, clock, headline, detail, base stress, transition)
PHASES = [
    ("morning", "MORNING COMMUTE - 7:00 AM", "ANALYSIS: LOW STRESS", "Calm environment detected", 20, "directionalwarp"),
    ("rush-hour", "RUSH HOUR - 8:30 AM", "ANALYSIS: MODERATE STRESS", "Elevated heart rates detected", 50, "crosswarp"),
    ("peak", "PEAK HOUR - 9:00 AM", "CRITICAL STRESS LEVELS", "Multiple subjects in distress", 78, "slice"),
]
DISTRIBUTION = [("LOW", 12, THERMAL[1]), ("MODERATE", 18, THERMAL[4]), ("HIGH", 9, THERMAL[5]), ("CRITICAL", 8, THERMAL[6])]
READOUTS = [
    ("SUBJECTS SCANNED:", "47", "#ffffff"),
    ("AVG STRESS LEVEL:", "62%", WARN),
    ("AVG HEART RATE:", "95 BPM", THERMAL[5]),
    ("CRITICAL CASES:", "8", ALERT),
]


def stress_grid(rng: random.Random, base: int, spread: int = 20) -> List[List[int]]:
    """Heatmap cells ``[column, row, stress]`` around ``base``, clamped to 0..100."""
    return [
        [column, row, max(0, min(100, base + rng.randint(-spread, spread)))]
        for row in range(ROWS)
        for column in range(COLUMNS)
    ]


def thermal_option(cells: List[List[int]]) -> Dict[str, Any]:
    """Borderless heatmap on the thermal ramp with hidden axes."""
    hidden = {"show": False, "data": [str(i) for i in range(COLUMNS)]}
    return {
        "backgroundColor": "transparent",
        "xAxis": {**hidden, "type": "category"},
        "yAxis": {"show": False, "type": "category", "data": [str(i) for i in range(ROWS)]},
        "visualMap": {"show": False, "min": 0, "max": 100, "inRange": {"color": THERMAL}},
        "series": [{"type": "heatmap", "data": cells}],
    }


def _scale_bar(scene: Scene) -> None:
    """Colour legend down the right edge, hottest at the top."""
    for i, (label, color) in enumerate(zip(reversed(SCALE), reversed(THERMAL))):
        y = 500 + i * 100
        scene.add_child(RectNode(x=WIDTH - 60, y=y, width=40, height=100, color=color))
        scene.add_child(TextNode(text=label, x=WIDTH - 100, y=y, font_size=20, color=UI_GRAY, align="right"))


def _crosshair(scene: Scene) -> None:
    scene.add_child(RectNode(x=WIDTH / 2, y=960, width=120, height=3, color=SCAN))
    scene.add_child(RectNode(x=WIDTH / 2, y=960, width=3, height=120, color=SCAN))


def _intro_scene() -> Scene:
    scene = Scene(id="intro", bg_color=BLACK, duration=5.0)
    add_centered_text(scene, "THERMAL IMAGING SYSTEM", 520, 40, SCAN, "fadeIn", 0.4, 0.2)
    add_centered_text(scene, "INITIALIZING...", 590, 32, UI_GRAY, "fadeIn", 0.4, 0.6)
    for i, color in enumerate(THERMAL):
        scene.add_child(RectNode(x=120 + i * 120, y=760, width=110, height=40, color=color).add_effect("fadeInLeft", 0.2, 1.0 + i * 0.1))
    add_centered_text(scene, "[ SYSTEM ONLINE ]", 860, 32, SCAN, "fadeIn", 0.3, 2.0)
    add_centered_text(scene, "STRESS LEVEL", HEIGHT / 2 + 100, 90, "#ffffff", "zoomIn", 0.5, 2.4)
    add_centered_text(scene, "DETECTION", HEIGHT / 2 + 210, 90, ALERT, "zoomIn", 0.5, 2.8)
    add_centered_text(scene, "LOCATION: SUBWAY STATION", HEIGHT - 360, 34, UI_GRAY, "fadeIn", 0.4, 3.4)
    return scene.set_transition("fade", 0.5)


def _phase_scene(index: int, rng: random.Random) -> Scene:
    scene_id, clock, headline, detail, base, transition = PHASES[index]
    scene = Scene(id=scene_id, bg_color=DARK, duration=6.0)
    camera = ChartNode(x=WIDTH / 2 - 40, y=960, width=880, height=1100, option=thermal_option(stress_grid(rng, base)))
    # Crowds shift between camera frames
    camera.update(lambda option, step: {**option, "series": [{"type": "heatmap", "data": stress_grid(rng, base + step * 2)}]}, 1.5)
    scene.add_child(camera.add_effect("fadeIn", 0.6))
    _scale_bar(scene)
    _crosshair(scene)
    critical = base >= 70
    add_centered_text(scene, clock, 220, 40, ALERT if critical else "#ffffff", "fadeInDown", 0.4, 0.3)
    add_centered_text(scene, headline, HEIGHT - 300, 44, ALERT if critical else SCAN, "fadeInUp", 0.4, 2.0,
                      background_color="rgba(0,0,0,0.75)", padding=(20, 10))
    add_centered_text(scene, detail, HEIGHT - 220, 32, "#ffffff", "fadeIn", 0.4, 2.6)
    if critical:
        add_centered_text(scene, "Recommend intervention", HEIGHT - 160, 30, WARN, "fadeIn", 0.4, 3.4)
    return scene.set_transition(transition, 0.5)


def _summary_scene(number: int) -> Scene:
    scene = Scene(id="summary", bg_color=BLACK, duration=6.0)
    add_centered_text(scene, "STRESS ANALYSIS COMPLETE", 260, 48, SCAN, "fadeInDown", 0.4, 0.2)
    for i, (label, value, color) in enumerate(READOUTS):
        scene.add_child(TextNode(text=label, x=120, y=450 + i * 100, font_size=36, color=UI_GRAY).add_effect("fadeInLeft", 0.3, 0.8 + i * 0.3))
        scene.add_child(TextNode(text=value, x=WIDTH - 120, y=450 + i * 100, font_size=44, color=color, align="right").add_effect("fadeInRight", 0.3, 0.9 + i * 0.3))
    chart = ChartNode(
        x=WIDTH / 2, y=1250, width=900, height=560,
        option={
            "backgroundColor": "transparent",
            "title": {"text": "STRESS DISTRIBUTION", "left": "center", "textStyle": {"color": "#fff", "fontSize": 28}},
            "xAxis": {"type": "category", "data": [level for level, _, _ in DISTRIBUTION], "axisLabel": {"color": "#fff"}},
            "yAxis": {"type": "value", "axisLabel": {"color": UI_GRAY}},
            "series": [{
                "type": "bar",
                "data": [{"value": count, "itemStyle": {"color": color}} for _, count, color in DISTRIBUTION],
                "label": {"show": True, "position": "top", "color": "#fff"},
            }],
            "animationDuration": 1500,
        },
    )
    scene.add_child(chart.add_effect("fadeInUp", 0.5, 2.0))
    add_series_footer(scene, number, UI_GRAY, 3.6)
    return scene


@register_story(24)
def build() -> Manifest:
    story = get_story(24)
    rng = random.Random(24)
    scenes = [_intro_scene(), *(_phase_scene(i, rng) for i in range(len(PHASES))), _summary_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
