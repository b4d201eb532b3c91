"""Story 12: a ramen bowl in 60 seconds, with speed ramps and a running clock."""

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

DARK = "#1a0a0a"
WARM_BLACK = "#0f0805"
RAMEN = "#ff6b35"
EGG = "#ffd93d"
NORI = "#2d5a27"
CHASHU = "#e8a0a0"
BROTH = "#c9a227"
SCALLION = "#7cb342"
SPEED = "#ff1744"
TIMER = "#ff3d00"
PROGRESS = "#00e676"

TOTAL_STEPS = 10

# (title, steps covered, clock at the start, speed label, items)
STAGES = [
    ("PREP", (1, 3), 0, "2X SPEED", [("NOODLES", RAMEN), ("EGG", EGG), ("CHASHU", CHASHU), ("SCALLION", SCALLION)]),
    ("COOK", (4, 6), 15, "4X SPEED", [("HEAT BROTH", BROTH), ("BOIL NOODLES", RAMEN), ("SOFT BOIL EGG", EGG)]),
    ("ASSEMBLE", (7, 10), 38, "REAL TIME", [("NOODLES", RAMEN), ("CHASHU", CHASHU), ("EGG", EGG), ("TOPPINGS", SCALLION)]),
]
FINISH_SECONDS = 58


def _hud(scene: Scene, step: int, seconds: int) -> None:
    """Step counter, progress bar and elapsed clock along the top."""
    scene.add_child(RectNode(x=WIDTH / 2, y=110, width=WIDTH, height=220, color="rgba(0,0,0,0.6)"))
    scene.add_child(TextNode(text=f"{step}/{TOTAL_STEPS}", x=60, y=110, font_size=48, color="#ffffff"))
    scene.add_child(TextNode(text=f"{seconds}s", x=WIDTH - 60, y=110, font_size=56, color=TIMER, align="right"))
    scene.add_child(RectNode(x=WIDTH / 2, y=200, width=WIDTH - 120, height=12, color="#333333", radius=6))
    done = (WIDTH - 120) * step / TOTAL_STEPS
    scene.add_child(RectNode(x=60 + done / 2, y=200, width=max(done, 12), height=12, color=PROGRESS, radius=6))


def _intro_scene() -> Scene:
    scene = Scene(id="intro", bg_color=DARK, duration=4.0)
    add_centered_text(scene, "RAMEN", HEIGHT / 2 - 200, 150, RAMEN, "zoomIn", 0.4)
    add_centered_text(scene, "IN 60 SECONDS", HEIGHT / 2 - 40, 80, "#ffffff", "fadeInUp", 0.4, 0.4)
    add_centered_text(scene, "SPEED CHALLENGE", HEIGHT / 2 + 120, 52, EGG, "bounceIn", 0.5, 0.9)
    # Impact lines
    for i in range(8):
        scene.add_child(
            RectNode(x=WIDTH / 2, y=300 + i * 180, width=WIDTH, height=6, color=SPEED)
            .add_effect("fadeInLeftBig", 0.2, 1.6 + i * 0.05).add_effect("fadeOut", 0.2, 2.1 + i * 0.05)
        )
    return scene.set_transition("fastswitch", 0.3)


def _stage_scene(index: int) -> Scene:
    title, (first, last), clock, speed, items = STAGES[index]
    scene = Scene(id=title.lower(), bg_color=WARM_BLACK, duration=5.0)
    _hud(scene, first, clock)
    add_centered_text(scene, f"STEP {first}-{last}: {title}", 380, 60, "#ffffff", "fadeInDown", 0.3)
    # The bowl
    scene.add_child(RectNode(x=WIDTH / 2, y=1000, width=700, height=380, radius=190, color="#fafafa").add_effect("zoomIn", 0.4, 0.2))
    scene.add_child(RectNode(x=WIDTH / 2, y=930, width=620, height=160, radius=80, color=BROTH).add_effect("fadeIn", 0.4, 0.4))
    for i, (label, color) in enumerate(items):
        delay = 0.6 + i * 0.7
        x = WIDTH / 2 - 210 + i * (420 / max(len(items) - 1, 1))
        scene.add_child(RectNode(x=x, y=600, width=120, height=120, radius=60, color=color).add_effect("fadeInDownBig", 0.3, delay).add_animate(y=920, duration=0.3, delay=delay + 0.4))
        scene.add_child(TextNode(text=label, x=WIDTH / 2, y=1330 + i * 70, font_size=36, color=color, align="center").add_effect("fadeInLeft", 0.3, delay + 0.2))
    add_centered_text(scene, speed, HEIGHT - 200, 72, SPEED, "zoomIn", 0.3, 1.0,
                      background_color="rgba(0,0,0,0.7)", padding=(24, 10))
    return scene.set_transition("shake" if index != 1 else "directionalwarp", 0.3)


def _finale_scene(number: int) -> Scene:
    scene = Scene(id="finale", bg_color=DARK, duration=5.0)
    _hud(scene, TOTAL_STEPS, FINISH_SECONDS)
    add_centered_text(scene, "COMPLETE!", HEIGHT / 2 - 260, 110, PROGRESS, "bounceIn", 0.6)
    add_centered_text(scene, f"{FINISH_SECONDS} SECONDS", HEIGHT / 2 - 100, 72, TIMER, "zoomIn", 0.5, 0.6)
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2 + 200, width=560, height=300, radius=150, color=RAMEN).add_effect("zoomIn", 0.5, 1.0))
    scene.add_child(RectNode(x=WIDTH / 2 - 100, y=HEIGHT / 2 + 170, width=120, height=120, radius=60, color=EGG).add_effect("zoomIn", 0.4, 1.3))
    scene.add_child(RectNode(x=WIDTH / 2 + 110, y=HEIGHT / 2 + 170, width=140, height=90, radius=20, color=CHASHU).add_effect("zoomIn", 0.4, 1.5))
    scene.add_child(RectNode(x=WIDTH / 2, y=HEIGHT / 2 + 80, width=60, height=160, color=NORI).add_effect("zoomIn", 0.4, 1.7))
    add_centered_text(scene, "SPEED-RAMP COOK", HEIGHT - 420, 56, "#ffffff", "fadeInUp", 0.5, 2.2)
    add_series_footer(scene, number, "#777777", 2.8)
    return scene


@register_story(12)
def build() -> Manifest:
    story = get_story(12)
    scenes = [_intro_scene(), *(_stage_scene(i) for i in range(len(STAGES))), _finale_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
