"""Story 30: a montage of the challenge and a scrolling credit roll."""

from ..models import Manifest, RectNode, Scene, TextNode
from .catalog import STORIES, get_story, register_story
from .helpers import FPS, HEIGHT, WIDTH, add_centered_text

COLORS = {
    "deep_black": "#000000",
    "rich_black": "#0a0a0a",
    "gold": "#ffd700",
    "silver": "#c0c0c0",
    "charcoal": "#2a2a2a",
    "white": "#ffffff",
}

MONTAGE = [
    ("DAYS 1-10", "THE BEGINNING"),
    ("DAYS 11-20", "FINDING THE RHYTHM"),
    ("HALFWAY THERE!", "15 DOWN, 15 TO GO"),
    ("DAY 30 COMPLETE!", "30 STORIES. 30 STYLES."),
]

ROLES = ["CREATED BY", "DIRECTED BY", "PRODUCED BY", "EDITED BY", "CINEMATOGRAPHY"]
ROLL_DURATION = 8.0


def _montage_scene(index: int, headline: str, caption: str) -> Scene:
    scene = Scene(id=f"montage-{index + 1}", bg_color=COLORS["rich_black"], duration=2.0)
    # Camera flash
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=WIDTH, height=HEIGHT, color=COLORS["white"])
        .set_opacity(0.8)
        .add_effect("fadeIn", 0.1)
        .add_effect("fadeOut", 0.3, 0.1)
    )
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT / 2, width=860, height=560, color=COLORS["charcoal"], radius=12)
        .add_effect("zoomIn", 0.4)
    )
    add_centered_text(scene, headline, HEIGHT / 2 - 60, 84, COLORS["gold"], "fadeInUp", 0.4, 0.2)
    add_centered_text(scene, caption, HEIGHT / 2 + 60, 40, COLORS["silver"], "fadeIn", 0.4, 0.5)
    return scene.set_transition("windowslice" if index % 2 else "fade", 0.3)


def credit_lines():
    """(text, font size, color) rows of the credit roll, top to bottom."""
    rows = []
    for role in ROLES:
        rows.append((role, 30, COLORS["silver"]))
        rows.append(("Your Name", 52, COLORS["white"]))
    rows.append(("THE 30 STORIES", 30, COLORS["silver"]))
    rows.extend((story.title, 30, COLORS["gold"]) for story in STORIES.values())
    return rows


def _credits_scene() -> Scene:
    scene = Scene(id="credits", bg_color=COLORS["deep_black"], duration=ROLL_DURATION + 1.0)
    y = HEIGHT + 100
    nodes = []
    for text, size, color in credit_lines():
        nodes.append(TextNode(text=text, x=WIDTH / 2, y=y, font_size=size, color=color, align="center"))
        y += size * 1.8 + (24 if color == COLORS["white"] else 0)

    # Scroll until the last row has left the top of the frame
    distance = y + 100
    for node in nodes:
        node.add_animate(y=node.y - distance, duration=ROLL_DURATION, delay=0.5)
        scene.add_child(node)
    # Letterbox bars keep the roll inside the frame
    for bar_y in (60, HEIGHT - 60):
        scene.add_child(RectNode(x=WIDTH / 2, y=bar_y, width=WIDTH, height=120, color=COLORS["deep_black"]))
    return scene.set_transition("zoomIn", 0.5)


def _thanks_scene() -> Scene:
    scene = Scene(id="thanks", bg_color=COLORS["rich_black"], duration=5.0)
    add_centered_text(scene, "THANK YOU", HEIGHT / 2 - 200, 130, COLORS["gold"], "zoomIn", 0.8)
    add_centered_text(scene, "FOR WATCHING", HEIGHT / 2 - 60, 72, COLORS["white"], "fadeInUp", 0.6, 0.6)
    add_centered_text(scene, "@YourHandle", HEIGHT / 2 + 120, 52, COLORS["silver"], "fadeIn", 0.6, 1.4)
    add_centered_text(
        scene, "#30DayChallenge #Complete", HEIGHT / 2 + 220, 40, COLORS["gold"], "fadeIn", 0.6, 2.0,
    )
    scene.add_child(
        RectNode(x=WIDTH / 2, y=HEIGHT / 2 + 20, width=400, height=4, color=COLORS["gold"])
        .add_effect("zoomIn", 0.6, 1.0)
    )
    return scene


@register_story(30)
def build() -> Manifest:
    story = get_story(30)
    scenes = [_montage_scene(i, *frame) for i, frame in enumerate(MONTAGE)]
    scenes[-1].set_transition("fade", 0.5)
    scenes.extend([_credits_scene(), _thanks_scene()])
    return Manifest(name=story.slug, width=WIDTH, height=HEIGHT, fps=FPS, output=story.output, scenes=scenes)
