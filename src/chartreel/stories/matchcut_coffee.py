"""Story 4: one sip of coffee that cuts from rainy London to sunny Santorini."""

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

BOARD = "#0a0a0a"
BOARD_YELLOW = "#f4d03f"
BOARD_GRAY = "#2c2c2c"

LONDON = {"bg": "#1a2634", "accent": "#c0392b", "text": "#d5dbdb", "muted": "#85929e", "rain": "#5d6d7e"}
SANTORINI = {"bg": "#5dade2", "accent": "#f39c12", "text": "#fdfefe", "muted": "#2980b9", "sun": "#f1c40f"}

# (code, city, status)
FLIGHT = [("LHR", "LONDON", ""), ("JTR", "SANTORINI", "NOW")]


def _cup(scene: Scene, y: float, color: str, delay: float) -> None:
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=220, height=240, color=color, radius=24).add_effect("zoomIn", 0.6, delay))
    scene.add_child(RectNode(x=WIDTH / 2 + 140, y=y, width=70, height=110, color=color, radius=35).add_effect("zoomIn", 0.6, delay))
    scene.add_child(RectNode(x=WIDTH / 2, y=y + 150, width=320, height=20, color=color, radius=10).add_effect("zoomIn", 0.6, delay))


def _board_row(scene: Scene, y: float, code: str, city: str, status: str, delay: float) -> None:
    scene.add_child(RectNode(x=WIDTH / 2, y=y, width=960, height=120, color=BOARD_GRAY, radius=8).add_effect("fadeIn", 0.3, delay))
    scene.add_child(TextNode(text=code, x=110, y=y, font_size=56, color=BOARD_YELLOW).add_effect("fadeInDown", 0.3, delay + 0.1))
    scene.add_child(TextNode(text=city, x=300, y=y, font_size=48, color="#ffffff").add_effect("fadeInDown", 0.3, delay + 0.2))
    if status:
        scene.add_child(
            TextNode(text=status, x=WIDTH - 110, y=y, font_size=40, color="#2ecc71", align="right")
            .add_effect("fadeIn", 0.3, delay + 0.3)
        )


def _departures_scene() -> Scene:
    scene = Scene(id="departures", bg_color=BOARD, duration=4.0)
    add_centered_text(scene, "DEPARTURES", 420, 64, BOARD_YELLOW, "fadeInDown", 0.5)
    for i, (code, city, status) in enumerate(FLIGHT):
        _board_row(scene, 620 + i * 150, code, city, status, 0.4 + i * 0.4)
    add_centered_text(scene, "MATCH-CUT", 1150, 110, "#ffffff", "zoomIn", 0.6, 1.6)
    add_centered_text(scene, "COFFEE", 1280, 110, BOARD_YELLOW, "zoomIn", 0.6, 2.0)
    return scene.set_transition("fade", 0.6)


def _city_scene(scene_id: str, palette, place: str, weather: str, line1: str, line2: str, clock: str) -> Scene:
    scene = Scene(id=scene_id, bg_color=palette["bg"], duration=5.0)
    add_centered_text(scene, place, 260, 56, palette["text"], "fadeInDown", 0.5)
    add_centered_text(scene, weather, 340, 40, palette["muted"], "fadeIn", 0.5, 0.3)
    _cup(scene, HEIGHT / 2, palette["accent"], 0.5)
    add_centered_text(scene, line1, HEIGHT - 420, 48, palette["text"], "fadeInUp", 0.5, 1.4)
    add_centered_text(scene, line2, HEIGHT - 350, 48, palette["text"], "fadeInUp", 0.5, 1.7)
    add_centered_text(scene, clock, HEIGHT - 220, 40, palette["muted"], "fadeIn", 0.5, 2.2)
    return scene


def _sip_scene() -> Scene:
    scene = Scene(id="sip", bg_color=LONDON["bg"], duration=3.5)
    add_centered_text(scene, "ONE", HEIGHT / 2 - 260, 140, LONDON["text"], "zoomIn", 0.5)
    add_centered_text(scene, "SIP", HEIGHT / 2 - 100, 180, LONDON["accent"], "zoomIn", 0.5, 0.4)
    add_centered_text(scene, "0.5x SPEED", HEIGHT / 2 + 100, 40, LONDON["muted"], "fadeIn", 0.5, 1.0)
    add_centered_text(scene, "MATCH CUT IN...", HEIGHT / 2 + 220, 48, "#ffffff", "fadeIn", 0.5, 1.6)
    add_centered_text(scene, "3...2...1", HEIGHT / 2 + 320, 64, BOARD_YELLOW, "bounceIn", 0.5, 2.2)
    return scene.set_transition("windowslice", 0.4)


def _same_cup_scene(number: int) -> Scene:
    scene = Scene(id="same-cup", bg_color=BOARD, duration=5.5)
    # Split screen, London on the left and Santorini on the right
    scene.add_child(RectNode(x=WIDTH / 4, y=HEIGHT / 2, width=WIDTH / 2, height=HEIGHT, color=LONDON["bg"]).add_effect("fadeInLeft", 0.6))
    scene.add_child(RectNode(x=WIDTH * 3 / 4, y=HEIGHT / 2, width=WIDTH / 2, height=HEIGHT, color=SANTORINI["bg"]).add_effect("fadeInRight", 0.6))
    scene.add_child(TextNode(text="LONDON", x=WIDTH / 4, y=500, font_size=48, color=LONDON["text"], align="center").add_effect("fadeIn", 0.5, 0.5))
    scene.add_child(TextNode(text="12°C", x=WIDTH / 4, y=580, font_size=40, color=LONDON["muted"], align="center").add_effect("fadeIn", 0.5, 0.7))
    scene.add_child(TextNode(text="SANTORINI", x=WIDTH * 3 / 4, y=500, font_size=48, color=SANTORINI["text"], align="center").add_effect("fadeIn", 0.5, 0.5))
    scene.add_child(TextNode(text="28°C", x=WIDTH * 3 / 4, y=580, font_size=40, color=SANTORINI["sun"], align="center").add_effect("fadeIn", 0.5, 0.7))
    add_centered_text(scene, "SAME CUP", HEIGHT / 2, 96, "#ffffff", "zoomIn", 0.6, 1.2, stroke_color="#000000", stroke_width=3)
    add_centered_text(scene, "DIFFERENT WORLD", HEIGHT / 2 + 120, 72, BOARD_YELLOW, "zoomIn", 0.6, 1.6, stroke_color="#000000", stroke_width=3)
    add_centered_text(scene, "WHERE WILL YOUR NEXT SIP TAKE YOU?", HEIGHT - 320, 36, "#ffffff", "fadeInUp", 0.6, 2.6,
                      background_color="rgba(0,0,0,0.6)", padding=(24, 12))
    add_series_footer(scene, number, "#ffffff", 3.2)
    return scene


@register_story(4)
def build() -> Manifest:
    story = get_story(4)
    scenes = [
        _departures_scene(),
        _city_scene("london", LONDON, "LONDON, UK", "12°C, rain", "A RAINY MORNING", "IN A LONDON CAFE", "8:47 AM")
        .set_transition("directionalwarp", 0.5),
        _sip_scene(),
        _city_scene("santorini", SANTORINI, "SANTORINI, GR", "28°C, sun", "A SUNNY AFTERNOON", "ON A GREEK BALCONY", "4:23 PM")
        .set_transition("crosswarp", 0.5),
        _same_cup_scene(story.number),
    ]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
