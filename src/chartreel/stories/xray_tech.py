"""Story 11: an X-ray beam sweeps a luxury watch and reveals the movement."""

from ..models import ChartNode, Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

DARK = "#0a0a0f"
METAL = "#2a2a3a"
METAL_LIGHT = "#3a3a4a"
XRAY = "#00a8ff"
CYAN = "#00ffff"
XRAY_LIGHT = "#80d4ff"
GRID = "#003366"
GOLD = "#ffd700"
SILVER = "#c0c0c0"
COPPER = "#b87333"

# (name, role, color, share of the 312 parts)
COMPONENTS = [
    ("MAINSPRING", "Power source", GOLD, 4),
    ("GEAR TRAIN", "Energy transfer", SILVER, 96),
    ("ESCAPEMENT", "Regulates time", COPPER, 38),
    ("BALANCE WHEEL", "Oscillator", XRAY, 22),
]
TOTAL_PARTS = 312

DIAL_Y = 820


def _grid(scene: Scene) -> None:
    for i in range(10):
        scene.add_child(RectNode(x=i * 120, y=HEIGHT / 2, width=2, height=HEIGHT, color=GRID))
    for i in range(17):
        scene.add_child(RectNode(x=WIDTH / 2, y=i * 120, width=WIDTH, height=2, color=GRID))


def _watch(scene: Scene, case_color: str, delay: float = 0.0) -> None:
    scene.add_child(RectNode(x=WIDTH / 2, y=DIAL_Y - 380, width=220, height=260, color=METAL, radius=20).add_effect("fadeInDown", 0.6, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=DIAL_Y + 380, width=220, height=260, color=METAL, radius=20).add_effect("fadeInUp", 0.6, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=DIAL_Y, width=520, height=520, radius=260, color=case_color).add_effect("zoomIn", 0.8, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=DIAL_Y, width=460, height=460, radius=230, color="#111118").add_effect("zoomIn", 0.8, delay + 0.1))


def _boot_scene() -> Scene:
    scene = Scene(id="boot", bg_color=DARK, duration=5.0)
    _grid(scene)
    add_centered_text(scene, "INITIALIZING X-RAY SYSTEM", 600, 36, XRAY_LIGHT, "fadeIn", 0.5, 0.2)
    bar = RectNode(x=WIDTH / 2 - 380, y=680, width=40, height=16, color=CYAN)
    scene.add_child(bar.add_effect("fadeIn", 0.2, 0.6).add_animate(x=WIDTH / 2 + 380, duration=1.4, delay=0.6))
    add_centered_text(scene, "[ SYSTEM READY ]", 760, 32, "#00ff88", "fadeIn", 0.4, 2.1)
    add_centered_text(scene, "X-RAY", HEIGHT / 2 + 40, 160, CYAN, "zoomIn", 0.7, 2.4)
    add_centered_text(scene, "TECH BREAKDOWN", HEIGHT / 2 + 200, 64, "#ffffff", "fadeInUp", 0.6, 2.9)
    add_centered_text(scene, "LUXURY TIMEPIECE", HEIGHT / 2 + 320, 40, GOLD, "fadeIn", 0.5, 3.4)
    return scene.set_transition("fade", 0.5)


def _external_scene() -> Scene:
    scene = Scene(id="external", bg_color=DARK, duration=5.0)
    add_centered_text(scene, "EXTERNAL VIEW", 200, 48, SILVER, "fadeInDown", 0.5)
    _watch(scene, GOLD, 0.3)
    for i, spec in enumerate(["CASE: 18K GOLD", "DIAMETER: 42MM", "WATER RESISTANT: 100M"]):
        add_centered_text(scene, spec, 1400 + i * 80, 36, "#ffffff", "fadeInLeft", 0.4, 1.4 + i * 0.3)
    add_centered_text(scene, "[ INITIATING X-RAY SCAN ]", HEIGHT - 200, 32, CYAN, "fadeIn", 0.4, 3.2)
    return scene.set_transition("directionalwarp", 0.5)


def _scan_scene() -> Scene:
    scene = Scene(id="scan", bg_color=DARK, duration=6.0)
    add_centered_text(scene, "X-RAY VIEW", 200, 48, CYAN, "fadeInDown", 0.5)
    _watch(scene, "rgba(0,168,255,0.3)")
    # Gears: concentric rings in the movement colors
    for i, (name, _, color, _) in enumerate(COMPONENTS):
        x = WIDTH / 2 + (-110 if i % 2 == 0 else 110)
        y = DIAL_Y + (-110 if i < 2 else 110)
        size = 150 - i * 15
        scene.add_child(RectNode(x=x, y=y, width=size, height=size, radius=size // 2, color=color).add_effect("zoomIn", 0.4, 1.2 + i * 0.6))
        scene.add_child(TextNode(text=name, x=x, y=y + size / 2 + 30, font_size=24, color=color, align="center").add_effect("fadeIn", 0.3, 1.4 + i * 0.6))
    beam = RectNode(x=WIDTH / 2, y=DIAL_Y - 300, width=WIDTH, height=10, color=CYAN)
    scene.add_child(beam.add_effect("fadeIn", 0.2, 0.5).add_animate(y=DIAL_Y + 300, duration=3.0, delay=0.6))
    add_centered_text(scene, "SCAN COMPLETE", 1450, 48, "#00ff88", "bounceIn", 0.5, 4.0)
    return scene.set_transition("slice", 0.5)


def _breakdown_scene() -> Scene:
    scene = Scene(id="breakdown", bg_color=DARK, duration=6.0)
    add_centered_text(scene, "COMPONENT BREAKDOWN", 200, 52, CYAN, "fadeInDown", 0.5)
    chart = ChartNode(
        x=WIDTH / 2, y=760, width=900, height=800,
        option={
            "backgroundColor": "transparent",
            "legend": {"bottom": 0, "textStyle": {"color": "#fff", "fontSize": 22}},
            "series": [{
                "type": "pie",
                "radius": ["35%", "65%"],
                "label": {"show": True, "color": "#fff", "fontSize": 22, "formatter": "{b}\n{c}"},
                "data": [
                    {"name": name, "value": parts, "itemStyle": {"color": color}}
                    for name, _, color, parts in COMPONENTS
                ] + [{"name": "OTHER", "value": TOTAL_PARTS - sum(c[3] for c in COMPONENTS), "itemStyle": {"color": METAL_LIGHT}}],
            }],
            "animationDuration": 1800,
        },
    )
    scene.add_child(chart.add_effect("fadeIn", 0.5, 0.4))
    for i, (name, role, color, _) in enumerate(COMPONENTS):
        scene.add_child(TextNode(text=f"{name}: {role}", x=120, y=1260 + i * 70, font_size=32, color=color).add_effect("fadeInLeft", 0.4, 2.0 + i * 0.3))
    add_centered_text(scene, f"TOTAL COMPONENTS: {TOTAL_PARTS}", 1600, 40, "#ffffff", "fadeIn", 0.5, 3.4)
    add_centered_text(scene, "PRECISION: 0.001mm TOLERANCE", 1670, 32, XRAY_LIGHT, "fadeIn", 0.5, 3.8)
    return scene.set_transition("crosswarp", 0.5)


def _end_scene(number: int) -> Scene:
    scene = Scene(id="end", bg_color=DARK, duration=5.0)
    add_centered_text(scene, "X-RAY", HEIGHT / 2 - 200, 140, CYAN, "zoomIn", 0.6)
    add_centered_text(scene, "TECH BREAKDOWN", HEIGHT / 2 - 40, 64, "#ffffff", "fadeInUp", 0.5, 0.5)
    add_centered_text(scene, "See beyond the surface", HEIGHT / 2 + 80, 40, XRAY_LIGHT, "fadeIn", 0.5, 1.0)
    add_centered_text(scene, "NEXT: SMARTPHONE INTERNALS", HEIGHT / 2 + 300, 36, GOLD, "fadeIn", 0.5, 2.0)
    add_series_footer(scene, number, "#555555", 2.6)
    return scene


@register_story(11)
def build() -> Manifest:
    story = get_story(11)
    scenes = [_boot_scene(), _external_scene(), _scan_scene(), _breakdown_scene(), _end_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
