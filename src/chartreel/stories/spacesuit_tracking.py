"""Story 22: HUD tracking lines and call-outs over a next generation spacesuit."""

from typing import List, Tuple

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

SPACE = "#0a0e1a"
DEEP_SPACE = "#050810"
INDUSTRIAL = "#1a1f2e"
NASA_BLUE = "#0b3d91"
NASA_RED = "#fc3d21"
CYAN = "#00d9ff"
GREEN = "#00ff88"
GRAY = "#a0a0a0"
HUD_DARK = "#2d3748"
WARNING = "#ff9500"

SUIT_X = WIDTH / 2

# (title, part, call-outs as (label, target x offset, target y), readouts, transition)
SECTIONS: List[Tuple[str, str, List[Tuple[str, float, float]], List[str], str]] = [
    ("HELMET ANALYSIS", "helmet",
     [("GOLD-COATED VISOR", 0, 620), ("COMM SYSTEM", -150, 520), ("O2 SUPPLY PORT", 150, 760)],
     ["Weight: 3.4 kg", "Pressure: 4.3 psi", "Temperature: -156C to 121C"], "directionalwarp"),
    ("TORSO UNIT ANALYSIS", "torso",
     [("PLSS BACKPACK", 220, 950), ("BATTERY PACK", -200, 1050), ("COOLING SYSTEM", 0, 1150)],
     ["O2 Tank: 1.2 kg capacity", "Water: 3.8 liters", "Total Weight: 57 kg"], "crosswarp"),
    ("GLOVE ANALYSIS", "gloves",
     [("SILICONE TIPS", -300, 1300), ("HEATING ELEMENTS", 300, 1300), ("PRESSURE SEAL", -300, 1180)],
     ["NEXT: BOOTS"], "slice"),
]
SYSTEMS = ["Radiation Protection", "Thermal Control", "Pressurized System", "8-Hour Mission"]


def _suit(scene: Scene, delay: float = 0.0) -> None:
    """Helmet, visor, torso, arms and gloves."""
    parts = [
        (SUIT_X, 640, 300, 300, 150, "#e8e8e8"),   # helmet
        (SUIT_X, 650, 220, 180, 90, "#c9a227"),    # visor
        (SUIT_X, 1050, 440, 460, 60, "#f0f0f0"),   # torso
        (SUIT_X - 300, 1060, 120, 380, 50, "#e0e0e0"),
        (SUIT_X + 300, 1060, 120, 380, 50, "#e0e0e0"),
        (SUIT_X - 300, 1300, 130, 110, 50, "#ffffff"),
        (SUIT_X + 300, 1300, 130, 110, 50, "#ffffff"),
    ]
    for i, (x, y, w, h, radius, color) in enumerate(parts):
        scene.add_child(RectNode(x=x, y=y, width=w, height=h, radius=radius, color=color).add_effect("fadeIn", 0.5, delay + i * 0.08))
    scene.add_child(RectNode(x=SUIT_X - 120, y=900, width=60, height=40, color=NASA_RED).add_effect("fadeIn", 0.4, delay + 0.6))
    scene.add_child(RectNode(x=SUIT_X + 120, y=900, width=60, height=40, color=NASA_BLUE).add_effect("fadeIn", 0.4, delay + 0.6))


def _callout(scene: Scene, label: str, dx: float, y: float, index: int, delay: float) -> None:
    """Tracking reticle on the target with a leader line to a floating label."""
    x = SUIT_X + dx
    scene.add_child(RectNode(x=x, y=y, width=60, height=60, radius=30, color="rgba(0,217,255,0.4)").add_effect("zoomIn", 0.3, delay))
    scene.add_child(RectNode(x=x, y=y, width=16, height=16, radius=8, color=CYAN).add_effect("zoomIn", 0.3, delay + 0.1))
    side = -1 if index % 2 == 0 else 1
    label_x = WIDTH / 2 + side * 330
    label_y = 420 + index * 80 if y < 900 else 1480 + index * 80
    line = RectNode(x=(x + label_x) / 2, y=label_y, width=abs(label_x - x) or 4, height=3, color=CYAN)
    scene.add_child(line.add_effect("fadeInLeft" if side > 0 else "fadeInRight", 0.3, delay + 0.2))
    scene.add_child(
        TextNode(text=label, x=label_x, y=label_y - 30, font_size=28, color="#ffffff", align="center",
                 background_color="rgba(0,0,0,0.7)", padding=(12, 6))
        .add_effect("fadeIn", 0.3, delay + 0.4)
    )


def _boot_scene() -> Scene:
    scene = Scene(id="boot", bg_color=DEEP_SPACE, duration=5.0)
    add_centered_text(scene, "INITIALIZING ANALYSIS SYSTEM", 560, 34, CYAN, "fadeIn", 0.4, 0.2)
    add_centered_text(scene, "[ SYSTEM READY ]", 640, 30, GREEN, "fadeIn", 0.4, 1.2)
    add_centered_text(scene, "NASA", HEIGHT / 2 - 60, 140, NASA_RED, "zoomIn", 0.6, 1.6)
    add_centered_text(scene, "SPACESUIT", HEIGHT / 2 + 80, 90, "#ffffff", "fadeInUp", 0.5, 2.1)
    add_centered_text(scene, "ANALYSIS", HEIGHT / 2 + 180, 60, CYAN, "fadeInUp", 0.5, 2.5)
    add_centered_text(scene, "Next Generation EVA Technology", HEIGHT / 2 + 320, 36, GRAY, "fadeIn", 0.5, 3.0)
    return scene.set_transition("fade", 0.5)


def _section_scene(index: int) -> Scene:
    title, part, callouts, readouts, transition = SECTIONS[index]
    scene = Scene(id=part, bg_color=SPACE, duration=6.0)
    _suit(scene)
    add_centered_text(scene, title, 200, 52, CYAN, "fadeInDown", 0.5, 0.2)
    for i, (label, dx, y) in enumerate(callouts):
        _callout(scene, label, dx, y, i, 1.0 + i * 0.8)
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT - 180, width=WIDTH - 120, height=80 * len(readouts) + 20, radius=12, color=HUD_DARK).add_effect("fadeInUp", 0.4, 3.4))
    for i, line in enumerate(readouts):
        y = HEIGHT - 180 - 40 * (len(readouts) - 1) + i * 80
        add_centered_text(scene, line, y, 32, WARNING if line.startswith("NEXT") else "#ffffff", "fadeIn", 0.3, 3.6 + i * 0.2)
    return scene.set_transition(transition, 0.5)


def _summary_scene(number: int) -> Scene:
    scene = Scene(id="summary", bg_color=DEEP_SPACE, duration=6.0)
    _suit(scene)
    add_centered_text(scene, "COMPLETE SYSTEM", 260, 64, GREEN, "fadeInDown", 0.5, 0.3)
    for i, system in enumerate(SYSTEMS):
        x = 240 if i % 2 == 0 else WIDTH - 240
        y = 1540 + (i // 2) * 90
        scene.add_child(
            TextNode(text=system, x=x, y=y, font_size=30, color=CYAN, align="center",
                     background_color=INDUSTRIAL, padding=(16, 10))
            .add_effect("fadeInUp", 0.4, 1.4 + i * 0.3)
        )
    add_centered_text(scene, "SPACE TECH", 380, 40, "#ffffff", "fadeIn", 0.5, 1.0)
    add_series_footer(scene, number, GRAY, 3.2)
    return scene


@register_story(22)
def build() -> Manifest:
    story = get_story(22)
    scenes = [_boot_scene(), *(_section_scene(i) for i in range(len(SECTIONS))), _summary_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
