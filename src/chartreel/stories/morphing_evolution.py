"""Story 15: a century of car design, morphing era by era along a timeline slider."""

from typing import List, NamedTuple

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

STUDIO = "#0a0a0a"
PLATFORM = "#3a3a3a"
TRACK = "#333333"
ACTIVE = "#00d4ff"
DIM = "#a0a0a0"
GOLD = "#ffd700"


class Era(NamedTuple):
    year: str
    name: str
    style: str
    color: str
    features: List[str]


ERAS = [
    Era("1920", "MODEL T", "THE VINTAGE ERA", "#8b7355",
        ["Hand-Cranked Engine", "20 HP Power", "45 MPH Top Speed", "Mass Production Pioneer"]),
    Era("1950", "CLASSIC", "THE CHROME AGE", "#b22222",
        ["V8 Engine Power", "Chrome Everything", "Tail Fins Design", "American Dream Icon"]),
    Era("1980", "SPORTS", "THE AERODYNAMIC ERA", "#4a90d9",
        ["Turbo Charged", "Pop-Up Headlights", "Digital Dashboard", "150+ MPH Speed"]),
    Era("2020", "ELECTRIC", "THE SUSTAINABLE ERA", "#f5f5f5",
        ["Zero Emissions", "300+ Mile Range", "Autopilot Ready", "Over-Air Updates"]),
    Era("2050", "FLYING", "THE AUTONOMOUS ERA", "#7b68ee",
        ["Vertical Takeoff", "AI Pilot System", "500 MPH Cruise", "Zero Traffic"]),
]

TRANSITIONS = ["crosswarp", "crosswarp", "crosswarp", "dreamy", "fade"]


def _timeline(scene: Scene, active: int) -> None:
    """Era slider along the bottom with the active stop highlighted."""
    y = HEIGHT - 300
    left, right = 140, WIDTH - 140
    step = (right - left) / (len(ERAS) - 1)
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=right - left, height=6, color=TRACK, radius=3))
    done = step * active
    if done:
        scene.add_child(RectNode(x=left + done / 2, y=y, width=done, height=6, color=ACTIVE, radius=3).add_effect("fadeInLeft", 0.6, 0.2))
    for i, era in enumerate(ERAS):
        x = left + i * step
        size = 34 if i == active else 20
        scene.add_child(RectNode(x=x, y=y, width=size, height=size, radius=size // 2, color=ACTIVE if i <= active else "#ffffff"))
        scene.add_child(TextNode(text=era.year, x=x, y=y + 50, font_size=24, color="#ffffff" if i == active else DIM, align="center"))


def _car(scene: Scene, color: str, flying: bool = False) -> None:
    """Body, cabin and wheels (or hover pads) on a turntable."""
    cy = 900
    scene.add_child(RectNode(x=WIDTH / 2, y=cy + 170, width=760, height=60, radius=30, color=PLATFORM).add_effect("fadeIn", 0.5))
    scene.add_child(RectNode(x=WIDTH / 2, y=cy, width=620, height=150, radius=40, color=color).add_effect("zoomIn", 0.7, 0.3))
    scene.add_child(RectNode(x=WIDTH / 2 - 20, y=cy - 110, width=320, height=100, radius=30, color=color).add_effect("zoomIn", 0.7, 0.4))
    for dx in (-200, 200):
        wheel = RectNode(x=WIDTH / 2 + dx, y=cy + 80, width=110, height=110 if not flying else 30, radius=55 if not flying else 15, color="#111111" if not flying else ACTIVE)
        scene.add_child(wheel.add_effect("bounceIn", 0.5, 0.8))


def _intro_scene() -> Scene:
    scene = Scene(id="intro", bg_color=STUDIO, duration=5.0)
    add_centered_text(scene, "MORPHING", HEIGHT / 2 - 260, 120, "#ffffff", "backInDown", 0.7, 0.2)
    add_centered_text(scene, "EVOLUTION", HEIGHT / 2 - 130, 120, ACTIVE, "backInDown", 0.7, 0.5)
    add_centered_text(scene, "100 YEARS OF AUTOMOTIVE DESIGN", HEIGHT / 2 + 20, 40, DIM, "fadeIn", 0.6, 1.2)
    add_centered_text(scene, "1920 - 2050", HEIGHT / 2 + 200, 72, GOLD, "zoomIn", 0.6, 1.8)
    return scene.set_transition("directionalwarp", 0.6)


def _era_scene(index: int) -> Scene:
    era = ERAS[index]
    last = index == len(ERAS) - 1
    scene = Scene(id=f"era-{era.year}", bg_color=STUDIO, duration=6.0)
    add_centered_text(scene, era.year, 220, 140, era.color, "zoomIn", 0.5)
    add_centered_text(scene, era.name, 370, 72, "#ffffff", "fadeInUp", 0.5, 0.3)
    add_centered_text(scene, era.style, 450, 36, DIM, "fadeIn", 0.5, 0.6)
    _car(scene, era.color, flying=last)
    for i, feature in enumerate(era.features):
        scene.add_child(
            TextNode(text=f"- {feature}", x=160, y=1180 + i * 64, font_size=36, color="#ffffff")
            .add_effect("fadeInLeft", 0.4, 1.4 + i * 0.3)
        )
    _timeline(scene, index)
    if last:
        add_centered_text(scene, "EVOLUTION COMPLETE", HEIGHT - 160, 40, ACTIVE, "bounceIn", 0.5, 4.2)
    else:
        label = "FINAL EVOLUTION..." if index == len(ERAS) - 2 else "MORPHING..."
        add_centered_text(scene, label, HEIGHT - 160, 36, ACTIVE, "fadeIn", 0.4, 4.5)
    return scene.set_transition(TRANSITIONS[index], 0.5)


def _finale_scene(number: int) -> Scene:
    scene = Scene(id="finale", bg_color=STUDIO, duration=5.0)
    add_centered_text(scene, "MORPHING", 520, 110, "#ffffff", "fadeInDown", 0.6)
    add_centered_text(scene, "EVOLUTION", 650, 110, ACTIVE, "fadeInDown", 0.6, 0.3)
    add_centered_text(scene, "100+ YEARS", 860, 80, GOLD, "zoomIn", 0.6, 1.0)
    add_centered_text(scene, "OF AUTOMOTIVE INNOVATION", 960, 40, DIM, "fadeIn", 0.6, 1.4)
    for i, era in enumerate(ERAS):
        scene.add_child(
            RectNode(x=180 + i * 180, y=1200, width=120, height=60, radius=20, color=era.color)
            .add_effect("bounceIn", 0.4, 1.8 + i * 0.2)
        )
    add_centered_text(scene, "EVOLUTION STORIES", 1400, 40, "#ffffff", "fadeIn", 0.5, 3.0)
    add_series_footer(scene, number, DIM, 3.4)
    return scene


@register_story(15)
def build() -> Manifest:
    story = get_story(15)
    scenes = [_intro_scene(), *(_era_scene(i) for i in range(len(ERAS))), _finale_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
