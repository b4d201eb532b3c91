"""Story 5: what everyday prices mean to you versus a $200B fortune."""

from ..models import ChartNode, Manifest, RectNode, Scene
from .catalog import get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text, add_series_footer

COLORS = {
    "charcoal": "#1a1a1a",
    "receipt": "#f5f5f0",
    "money_green": "#2e7d32",
    "gold": "#ffc107",
    "alert_red": "#d32f2f",
    "corporate_blue": "#1976d2",
    "ink": "#222222",
}

NET_WORTH = 200_000_000_000

# (item, price, what it means to you, what it means to him)
ITEMS = [
    ("COFFEE", 5, "A NICE TREAT", "NOTHING"),
    ("iPHONE", 1_200, "BIG PURCHASE", "INVISIBLE"),
    ("A HOUSE", 400_000, "LIFE GOAL", "ROUNDING ERROR"),
    ("PRIVATE JET", 65_000_000, "IMPOSSIBLE", "TUESDAY"),
    ("ROCKET LAUNCH", 500_000_000, "FANTASY", "HOBBY"),
]


def share_of_fortune(price: float) -> str:
    """Price as a percentage of the fortune, without scientific notation."""
    text = f"{price / NET_WORTH * 100:.10f}".rstrip("0").rstrip(".")
    return f"{text}%"


def _intro_scene() -> Scene:
    scene = Scene(id="intro", bg_color=COLORS["charcoal"], duration=4.0)
    add_centered_text(scene, "WHAT DOES $1\nMEAN TO YOU?", HEIGHT / 2 - 300, 90, COLORS["receipt"], "fadeInDown", 0.8)
    add_centered_text(scene, "VS", HEIGHT / 2, 120, COLORS["gold"], "zoomIn", 0.5, 1.0)
    add_centered_text(scene, "JEFF BEZOS\nNET WORTH", HEIGHT / 2 + 220, 72, COLORS["receipt"], "fadeInUp", 0.6, 1.5)
    add_centered_text(scene, "$200,000,000,000", HEIGHT / 2 + 420, 80, COLORS["money_green"], "bounceIn", 0.8, 2.0)
    return scene.set_transition("fade", 0.5)


def _receipt_scene(index: int, item: str, price: int, yours: str, his: str) -> Scene:
    scene = Scene(id=f"item-{index + 1}", bg_color=COLORS["charcoal"], duration=3.5)
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=820, height=1300, color=COLORS["receipt"], radius=6)
        .add_effect("slideInUp", 0.6)
    )
    add_centered_text(scene, item, HEIGHT / 2 - 480, 84, COLORS["ink"], "fadeIn", 0.5, 0.4)
    add_centered_text(scene, f"${price:,}", HEIGHT / 2 - 340, 110, COLORS["money_green"], "zoomIn", 0.6, 0.7)
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT / 2 - 220, width=700, height=4, color="#bbbbbb")
        .add_effect("fadeIn", 0.4, 0.9)
    )
    add_centered_text(scene, "TO YOU", HEIGHT / 2 - 120, 40, "#777777", "fadeIn", 0.4, 1.1)
    add_centered_text(scene, yours, HEIGHT / 2 - 40, 64, COLORS["corporate_blue"], "fadeInLeft", 0.5, 1.3)
    add_centered_text(scene, "TO HIM", HEIGHT / 2 + 120, 40, "#777777", "fadeIn", 0.4, 1.8)
    add_centered_text(scene, his, HEIGHT / 2 + 200, 64, COLORS["alert_red"], "fadeInRight", 0.5, 2.0)
    add_centered_text(scene, share_of_fortune(price), HEIGHT / 2 + 360, 48, COLORS["ink"], "fadeInUp", 0.5, 2.4)
    return scene.set_transition("windowslice", 0.4)


def _scale_scene() -> Scene:
    """Bar chart of every price next to a $1M day of spending."""
    scene = Scene(id="scale", bg_color=COLORS["charcoal"], duration=4.0)
    add_centered_text(scene, "ON THE SAME SCALE", 240, 72, COLORS["gold"], "fadeInDown", 0.6)
    chart = ChartNode(
        x=WIDTH / 2,
        y=HEIGHT / 2 + 60,
        width=960,
        height=1200,
        option={
            "backgroundColor": "transparent",
            "xAxis": {"type": "value"},
            "yAxis": {"type": "category", "data": [name for name, *_ in ITEMS] + ["HIS DAY"]},
            "series": [{
                "type": "bar",
                "data": [price for _, price, *_ in ITEMS] + [1_000_000],
                "itemStyle": {"color": COLORS["money_green"]},
                "label": {"show": True, "position": "right", "formatter": "${c}"},
            }],
            "animationDuration": 1500,
        },
    )
    chart.add_effect("fadeIn", 0.5, 0.3)
    scene.add_child(chart)
    return scene.set_transition("fade", 0.5)


def _total_scene() -> Scene:
    scene = Scene(id="total", bg_color=COLORS["money_green"], duration=4.0)
    add_centered_text(scene, "$200 BILLION", HEIGHT / 2 - 300, 110, COLORS["receipt"], "zoomIn", 0.6)
    add_centered_text(scene, "IF YOU SPENT", HEIGHT / 2 - 100, 56, COLORS["receipt"], "fadeIn", 0.5, 0.8)
    add_centered_text(scene, "$1 MILLION / DAY", HEIGHT / 2, 80, COLORS["gold"], "fadeInUp", 0.6, 1.2)
    add_centered_text(scene, "IT WOULD TAKE", HEIGHT / 2 + 120, 56, COLORS["receipt"], "fadeIn", 0.5, 1.8)
    add_centered_text(scene, "548 YEARS", HEIGHT / 2 + 260, 140, COLORS["receipt"], "bounceIn", 0.8, 2.3)
    return scene.set_transition("fade", 0.6)


def _finale_scene(number: int) -> Scene:
    scene = Scene(id="finale", bg_color=COLORS["charcoal"], duration=4.0)
    add_centered_text(scene, "THE WEALTH GAP", HEIGHT / 2 - 200, 90, COLORS["receipt"], "fadeIn", 0.8)
    add_centered_text(scene, "IS NOT A GAP", HEIGHT / 2 - 60, 72, COLORS["receipt"], "fadeIn", 0.8, 0.8)
    add_centered_text(scene, "IT'S A CHASM", HEIGHT / 2 + 120, 120, COLORS["alert_red"], "zoomIn", 0.8, 1.6)
    add_series_footer(scene, number, "#888888", 2.4)
    return scene


@register_story(5)
def build() -> Manifest:
    story = get_story(5)
    scenes = [_intro_scene()]
    scenes.extend(_receipt_scene(i, *item) for i, item in enumerate(ITEMS))
    scenes.extend([_scale_scene(), _total_scene(), _finale_scene(story.number)])
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
