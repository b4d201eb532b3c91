"""Story 16: the most expensive cities as rising cash pillars."""

from ..models import ChartNode, Manifest, RectNode, Scene, TextNode
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

SKY_BLUE = "#87ceeb"
NIGHT = "#0d1b2a"
GROUND = "#cfd8dc"
GRID = "#b0bec5"
DARK = "#263238"

# (city, country, monthly cost, pillar color, pillar height)
CITIES = [
    ("NEW YORK", "USA", 5842, "#f44336", 500),
    ("SINGAPORE", "SGP", 5634, "#ff9800", 480),
    ("HONG KONG", "CHN", 5516, "#ffeb3b", 460),
    ("LONDON", "UK", 5321, "#4caf50", 440),
    ("TOKYO", "JPN", 5108, "#ffd700", 420),
]

BREAKDOWN = [("Rent", 3500), ("Food", 800), ("Transport", 150), ("Other", 1392)]


def average_cost() -> int:
    return round(sum(cost for _, _, cost, _, _ in CITIES) / len(CITIES))


def _add_grid(scene: Scene, base_y: float) -> None:
    """Flat ground with a miniature street grid."""
    scene.add_child(
        RectNode(x=WIDTH / 2, y=base_y + 200, width=WIDTH, height=400, color=GROUND).add_effect("fadeIn", 0.6)
    )
    for i in range(6):
        scene.add_child(
            RectNode(x=WIDTH / 2, y=base_y + 40 + i * 60, width=WIDTH, height=3, color=GRID)
            .add_effect("fadeIn", 0.4, 0.1 * i)
        )
    for i in range(7):
        scene.add_child(
            RectNode(x=90 + i * 150, y=base_y + 200, width=3, height=400, color=GRID)
            .add_effect("fadeIn", 0.4, 0.1 * i)
        )


def _title_scene() -> Scene:
    scene = Scene(id="title", bg_color=SKY_BLUE, duration=3.5)
    add_centered_text(scene, "MOST EXPENSIVE", HEIGHT / 2 - 200, 96, DARK, "fadeInDown", 0.8)
    add_centered_text(scene, "CITIES TO LIVE", HEIGHT / 2 - 80, 96, DARK, "fadeInDown", 0.8, 0.3)
    add_centered_text(
        scene, "2024 GLOBAL RANKING", HEIGHT / 2 + 80, 48, "#ffffff", "zoomIn", 0.6, 0.9,
        background_color=DARK, padding=(30, 14),
    )
    _add_grid(scene, HEIGHT - 500)
    return scene.set_transition("fade", 0.5)


def _pillars_scene() -> Scene:
    scene = Scene(id="pillars", bg_color=SKY_BLUE, duration=5.0)
    base_y = HEIGHT - 560
    _add_grid(scene, base_y)
    spacing = WIDTH / (len(CITIES) + 1)
    for i, (city, country, cost, color, height) in enumerate(CITIES):
        x = spacing * (i + 1)
        delay = 0.4 + i * 0.3
        scene.add_child(
            RectNode(x=x, y=base_y - height / 2, width=130, height=height, color=color, radius=8)
            .add_effect("fadeInUpBig", 0.9, delay)
        )
        scene.add_child(
            RectNode(x=x + 12, y=base_y - height / 2 + 12, width=130, height=height, color="rgba(0,0,0,0.15)", radius=8)
            .add_effect("fadeIn", 0.9, delay)
        )
        label = f"${cost:,}"
        scene.add_child(
            _label(label, x, base_y - height - 50, 34, DARK).add_effect("fadeInUp", 0.5, delay + 0.8)
        )
        scene.add_child(_label(city, x, base_y + 60, 22, DARK).add_effect("fadeIn", 0.5, delay + 0.4))
        scene.add_child(_label(country, x, base_y + 95, 20, "#546e7a").add_effect("fadeIn", 0.5, delay + 0.5))
    add_centered_text(scene, "MONTHLY COST OF LIVING", 260, 56, DARK, "fadeInDown", 0.6)
    return scene.set_transition("windowslice", 0.5)


def _label(text: str, x: float, y: float, size: int, color: str) -> TextNode:
    return TextNode(text=text, x=x, y=y, font_size=size, color=color, align="center")


def _chart_scene() -> Scene:
    scene = Scene(id="ranking", bg_color=NIGHT, duration=5.0)
    add_centered_text(scene, "THE RANKING", 240, 72, "#ffffff", "fadeInDown", 0.6)
    chart = ChartNode(
        x=WIDTH / 2,
        y=HEIGHT / 2,
        width=980,
        height=1100,
        option={
            "backgroundColor": "transparent",
            "xAxis": {"type": "category", "data": [city.title() for city, *_ in CITIES]},
            "yAxis": {"type": "value", "min": 4500},
            "series": [{
                "type": "bar",
                "data": [{"value": cost, "itemStyle": {"color": color}} for _, _, cost, color, _ in CITIES],
                "label": {"show": True, "position": "top", "formatter": "${c}"},
                "barWidth": "55%",
            }],
            "animationDuration": 1800,
        },
    )
    chart.add_effect("fadeIn", 0.5, 0.2)
    scene.add_child(chart)
    return scene.set_transition("fade", 0.5)


def _breakdown_scene() -> Scene:
    scene = Scene(id="breakdown", bg_color=SKY_BLUE, duration=4.5)
    add_centered_text(scene, "WHERE IT GOES", 300, 72, DARK, "fadeInDown", 0.6)
    for i, (item, cost) in enumerate(BREAKDOWN):
        y = 560 + i * 190
        delay = 0.4 + i * 0.3
        scene.add_child(
            RectNode(x=WIDTH / 2, y=y, width=820, height=150, color="#ffffff", radius=20)
            .add_effect("fadeInLeft", 0.5, delay)
        )
        scene.add_child(
            _label(item.upper(), 260, y, 44, DARK).add_effect("fadeIn", 0.5, delay + 0.2)
        )
        scene.add_child(
            _label(f"${cost:,}", WIDTH - 260, y, 52, CITIES[0][3]).add_effect("zoomIn", 0.5, delay + 0.3)
        )
    return scene.set_transition("fade", 0.6)


def _average_scene(number: int) -> Scene:
    scene = Scene(id="average", bg_color=NIGHT, duration=4.0)
    add_centered_text(scene, "TOP 5 AVERAGE", HEIGHT / 2 - 220, 56, "#b0bec5", "fadeIn", 0.6)
    add_centered_text(scene, f"${average_cost():,}/month", HEIGHT / 2 - 60, 110, "#ffd700", "bounceIn", 0.8, 0.5)
    add_centered_text(scene, "3x Global Average", HEIGHT / 2 + 120, 64, "#ffffff", "fadeInUp", 0.6, 1.3)
    add_series_footer(scene, number, "#78909c", 2.0)
    return scene


@register_story(16)
def build() -> Manifest:
    story = get_story(16)
    scenes = [_title_scene(), _pillars_scene(), _chart_scene(), _breakdown_scene(), _average_scene(story.number)]
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
