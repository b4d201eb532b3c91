"""Live chart demos: six chart types whose data refreshes while they play.

Both videos share one layout: an intro, six 8 second chart scenes each
driven by a seeded updater, and an outro.
"""

import random
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ..creator import Creator
from ..models import ChartNode, Scene, TextNode
from .showcase import AXIS, VALUE_AXIS, WIDTH, HEIGHT, _creator

Updater = Callable[[Dict[str, Any], int], Any]


def random_data(rng: random.Random, count: int, low: int, high: int) -> List[int]:
    """``count`` random integers in ``[low, high]``."""
    return [rng.randint(low, high) for _ in range(count)]


def random_points(rng: random.Random, count: int, x_range, y_range) -> List[List[int]]:
    return [[rng.randint(x_range[0], x_range[1] - 1), rng.randint(y_range[0], y_range[1] - 1)] for _ in range(count)]


def _legend(names: List[str]) -> Dict[str, Any]:
    return {"data": names, "bottom": 5, "textStyle": {"color": "#fff"}}


def live_scene(
    title: str,
    option: Dict[str, Any],
    refresh: Updater,
    interval: float = 1.0,
    bg_color: str = "#1a1a2e",
    transition: Optional[str] = None,
    title_color: str = "#ffffff",
    duration: float = 8,
) -> Scene:
    """A titled scene around one chart refreshed every ``interval`` seconds."""
    scene = Scene(bg_color=bg_color, duration=duration)
    if transition:
        scene.set_transition(transition, 0.5)
    scene.add_child(
        TextNode(text=title, x=WIDTH / 2, y=30, font_size=22, color=title_color)
        .align_center().add_effect("fadeInDown", 0.5, 0)
    )
    option.setdefault("backgroundColor", "transparent")
    option.setdefault("animationDurationUpdate", int(interval * 800))
    chart = ChartNode(option=option, x=WIDTH / 2, y=HEIGHT / 2 + 25, width=WIDTH - 100, height=HEIGHT - 120)
    chart.update(refresh, interval=interval).update_now()
    scene.add_child(chart.add_effect("fadeIn", 0.8, 0.2))
    return scene


def _title_scene(lines, bg_color: str, transition: Optional[str] = None, duration: float = 3) -> Scene:
    """Centered text lines given as ``(text, y offset, size, color, effect, delay)``."""
    scene = Scene(bg_color=bg_color, duration=duration)
    if transition:
        scene.set_transition(transition, 0.5)
    for text, offset, size, color, effect, delay in lines:
        scene.add_child(
            TextNode(text=text, x=WIDTH / 2, y=HEIGHT / 2 + offset, font_size=size, color=color)
            .align_center().add_effect(effect, 1, delay)
        )
    return scene


# ---------------------------------------------------------------------------
# Dynamic charts demo
# ---------------------------------------------------------------------------


def _dynamic_scenes(rng: random.Random) -> List[Scene]:
    def bars(option, step):
        option["series"][0]["data"] = random_data(rng, 7, 50, 300)

    bar = {
        "xAxis": dict(AXIS, type="category", data=["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]),
        "yAxis": dict(VALUE_AXIS, max=350),
        "series": [{
            "type": "bar",
            "data": random_data(rng, 7, 50, 300),
            "itemStyle": {"color": {"type": "linear", "colorStops": [
                {"offset": 0, "color": "#00d4ff"}, {"offset": 1, "color": "#0066ff"},
            ]}},
            "label": {"show": True, "position": "top", "color": "#fff"},
        }],
    }

    def walk(option, step):
        for series in option["series"]:
            series["data"] = [min(650, max(100, v + rng.randint(-40, 40))) for v in series["data"]]

    line = {
        "legend": _legend(["AAPL", "GOOGL"]),
        "xAxis": dict(AXIS, type="category", data=["9:00", "10:00", "11:00", "12:00", "13:00", "14:00", "15:00"]),
        "yAxis": dict(VALUE_AXIS, max=700),
        "series": [
            {"name": "AAPL", "type": "line", "data": [320, 332, 301, 334, 390, 330, 320],
             "lineStyle": {"width": 3, "color": "#00ff88"}, "itemStyle": {"color": "#00ff88"}},
            {"name": "GOOGL", "type": "line", "data": [420, 432, 401, 454, 490, 530, 510],
             "lineStyle": {"width": 3, "color": "#ff6b6b"}, "itemStyle": {"color": "#ff6b6b"}},
        ],
    }

    browsers = [("Chrome", "#4285F4"), ("Safari", "#34A853"), ("Firefox", "#FF7139"), ("Edge", "#0078D4"), ("Others", "#9E9E9E")]

    def shares(option, step):
        raw = random_data(rng, len(browsers), 5, 40)
        total = sum(raw)
        for item, value in zip(option["series"][0]["data"], raw):
            item["value"] = round(value / total * 100)

    pie = {
        "legend": {"orient": "horizontal", "bottom": 5, "textStyle": {"color": "#fff"}},
        "series": [{
            "type": "pie",
            "radius": ["30%", "60%"],
            "center": ["50%", "50%"],
            "label": {"show": True, "color": "#fff", "formatter": "{b}: {d}%"},
            "data": [{"name": name, "value": 20, "itemStyle": {"color": color}} for name, color in browsers],
        }],
    }

    ranges = [(80, 180), (150, 280), (100, 250)]

    def traffic(option, step):
        for series, (low, high) in zip(option["series"], ranges):
            series["data"] = random_data(rng, 7, low, high)

    area = {
        "legend": _legend(["Download", "Upload", "Streaming"]),
        "xAxis": dict(AXIS, type="category", boundaryGap=False, data=["00:00", "04:00", "08:00", "12:00", "16:00", "20:00", "24:00"]),
        "yAxis": dict(VALUE_AXIS, max=500),
        "series": [
            {"name": name, "type": "line", "stack": "Total", "data": random_data(rng, 7, low, high),
             "areaStyle": {"opacity": 0.6, "color": color}, "lineStyle": {"color": color}, "itemStyle": {"color": color}}
            for name, (low, high), color in zip(("Download", "Upload", "Streaming"), ranges, ("#00d4ff", "#ff6b6b", "#ffd93d"))
        ],
    }

    def skills(option, step):
        first, second = option["series"][0]["data"]
        first["value"] = random_data(rng, 6, 60, 100)
        second["value"] = random_data(rng, 6, 55, 95)

    radar = {
        "legend": _legend(["Team A", "Team B"]),
        "radar": {
            "indicator": [{"name": name, "max": 100} for name in ("Speed", "Accuracy", "Reliability", "Efficiency", "Innovation", "Teamwork")],
            "axisName": {"color": "#fff"},
        },
        "series": [{
            "type": "radar",
            "data": [
                {"name": "Team A", "value": [80, 90, 70, 85, 75, 88], "areaStyle": {"opacity": 0.4, "color": "#00d4ff"}, "lineStyle": {"color": "#00d4ff"}},
                {"name": "Team B", "value": [70, 75, 90, 65, 85, 80], "areaStyle": {"opacity": 0.4, "color": "#ff6b6b"}, "lineStyle": {"color": "#ff6b6b"}},
            ],
        }],
    }

    clusters = [("Cluster A", 15, "#00d4ff"), ("Cluster B", 12, "#ff6b6b"), ("Cluster C", 10, "#ffd93d")]

    def scatter_points(option, step):
        for series, (_, count, _) in zip(option["series"], clusters):
            series["data"] = random_points(rng, count, (0, 100), (0, 100))

    scatter = {
        "legend": _legend([name for name, _, _ in clusters]),
        "xAxis": dict(VALUE_AXIS, max=100),
        "yAxis": dict(VALUE_AXIS, max=100),
        "series": [
            {"name": name, "type": "scatter", "symbolSize": 14, "data": random_points(rng, count, (0, 100), (0, 100)), "itemStyle": {"color": color}}
            for name, count, color in clusters
        ],
    }

    return [
        live_scene("Dynamic Bar Chart - Live Sales", bar, bars, 1.0, "#1a1a2e", "fadeIn"),
        live_scene("Dynamic Line Chart - Stock Prices", line, walk, 1.0, "#16213e", "slideLeft"),
        live_scene("Dynamic Pie Chart - Market Share", pie, shares, 1.2, "#0f3460", "fadeIn"),
        live_scene("Dynamic Area Chart - Network Traffic", area, traffic, 1.0, "#1a1a2e", "slideUp"),
        live_scene("Dynamic Radar Chart - Performance Metrics", radar, skills, 1.2, "#16213e", "fadeIn"),
        live_scene("Dynamic Scatter Chart - Data Points", scatter, scatter_points, 1.0, "#0f3460", "slideLeft"),
    ]


def build_dynamic_all_charts_video(
    seed: Optional[int] = None,
    output_dir: Optional[Path] = None,
    cache_dir: Optional[Path] = None
) -> Creator:
    """Six live charts (bar, line, pie, area, radar, scatter) between an intro and an outro."""
    rng = random.Random(seed)
    creator = _creator("dynamic-all-charts.mp4", output_dir, cache_dir)
    creator.add_child(_title_scene([
        ("Dynamic Charts Demo", -30, 42, "#00d4ff", "fadeInUp", 0),
        ("Real-time Animated Data Visualization", 30, 20, "#aaaaaa", "fadeIn", 0.8),
    ], "#0a0a1a", transition="fadeIn"))
    for scene in _dynamic_scenes(rng):
        creator.add_child(scene)
    creator.add_child(_title_scene([
        ("FFCreator Dynamic Charts", -20, 36, "#00d4ff", "zoomIn", 0),
        ("Real-time Data Visualization Made Easy", 30, 18, "#aaaaaa", "fadeIn", 0.6),
    ], "#0a0a1a"))
    return creator


# ---------------------------------------------------------------------------
# Bad decisions demo
# ---------------------------------------------------------------------------


def _bad_decision_scenes(rng: random.Random, name: str) -> List[Scene]:
    def categories(option, step):
        option["series"][0]["data"] = [min(110, v + rng.randint(0, 19)) for v in option["series"][0]["data"]]

    bar = {
        "xAxis": dict(AXIS, type="category", data=["Money", "Dating", "Career", "Food", "Sleep", "Friends"]),
        "yAxis": dict(VALUE_AXIS, max=120, name="Bad Decision Score", nameTextStyle={"color": "#ff6b6b"}),
        "series": [{
            "type": "bar",
            "data": [85, 92, 78, 95, 88, 70],
            "itemStyle": {"color": {"type": "linear", "colorStops": [
                {"offset": 0, "color": "#ff6b6b"}, {"offset": 1, "color": "#8b0000"},
            ]}},
            "label": {"show": True, "position": "top", "color": "#fff", "formatter": "{c}%"},
        }],
    }

    def growth(option, step):
        bad, good = option["series"]
        bad["data"] = [min(190, v + rng.randint(0, 14)) for v in bad["data"]]
        good["data"] = [max(5, v - rng.randint(0, 9)) for v in good["data"]]

    line = {
        "legend": _legend(["Bad Decisions", "Good Decisions"]),
        "xAxis": dict(AXIS, type="category", data=["2020", "2021", "2022", "2023", "2024", "2025"]),
        "yAxis": dict(VALUE_AXIS, max=200),
        "series": [
            {"name": "Bad Decisions", "type": "line", "data": [10, 25, 45, 70, 95, 150],
             "lineStyle": {"width": 4, "color": "#ff3333"}, "itemStyle": {"color": "#ff3333"}},
            {"name": "Good Decisions", "type": "line", "data": [100, 90, 75, 60, 40, 20],
             "lineStyle": {"width": 4, "color": "#00ff88"}, "itemStyle": {"color": "#00ff88"}},
        ],
    }

    # (start, cap, most added per step); the last one only ever shrinks
    methods = [
        ("Random Guess", 45, 55, 5, "#ff6b6b"),
        ("Based on Food", 25, 35, 3, "#ffd93d"),
        ("Half Asleep", 15, 25, 3, "#9b59b6"),
        ("Gaming Logic", 10, 20, 2, "#3498db"),
    ]

    def habits(option, step):
        data = option["series"][0]["data"]
        for item, (_, _, cap, most, _) in zip(data, methods):
            item["value"] = min(cap, item["value"] + rng.randint(0, most - 1))
        data[-1]["value"] = max(1, data[-1]["value"] - rng.randint(0, 1))

    pie = {
        "legend": {"orient": "horizontal", "bottom": 5, "textStyle": {"color": "#fff", "fontSize": 11}},
        "series": [{
            "type": "pie",
            "radius": ["25%", "55%"],
            "center": ["50%", "50%"],
            "label": {"show": True, "color": "#fff", "formatter": "{d}%", "fontSize": 14},
            "data": [{"name": label, "value": value, "itemStyle": {"color": color}} for label, value, _, _, color in methods]
            + [{"name": "Actual Thinking", "value": 5, "itemStyle": {"color": "#00ff88"}}],
        }],
    }

    moods = [("Regret", (60, 140), "#ff6b6b"), ("Denial", (40, 100), "#ffd93d"), ("Acceptance", (10, 50), "#00ff88")]

    def regret(option, step):
        for series, (_, (low, high), _) in zip(option["series"], moods):
            series["data"] = random_data(rng, 7, low, high)

    area = {
        "legend": _legend([label for label, _, _ in moods]),
        "xAxis": dict(AXIS, type="category", boundaryGap=False, data=["6AM", "9AM", "12PM", "3PM", "6PM", "9PM", "12AM"]),
        "yAxis": dict(VALUE_AXIS, max=200),
        "series": [
            {"name": label, "type": "line", "stack": "Total", "data": data,
             "areaStyle": {"opacity": 0.7, "color": color}, "lineStyle": {"color": color}}
            for (label, _, color), data in zip(moods, ([20, 35, 50, 80, 95, 110, 130], [10, 25, 40, 60, 75, 85, 90], [5, 10, 15, 20, 25, 30, 35]))
        ],
    }

    def assessment(option, step):
        bad, good = option["series"][0]["data"]
        bad["value"] = random_data(rng, 6, 80, 100)
        good["value"] = random_data(rng, 6, 5, 25)

    radar = {
        "legend": _legend(["Bad Decision Skills", "Good Decision Skills"]),
        "radar": {
            "indicator": [{"name": skill, "max": 100} for skill in ("Impulse", "YOLO", "Procrastination", "Overthinking", "Food Cravings", "Sleep Deprivation")],
            "axisName": {"color": "#fff", "fontSize": 11},
        },
        "series": [{
            "type": "radar",
            "data": [
                {"name": "Bad Decision Skills", "value": [95, 90, 88, 92, 85, 98],
                 "areaStyle": {"opacity": 0.5, "color": "#ff3333"}, "lineStyle": {"color": "#ff3333", "width": 2}},
                {"name": "Good Decision Skills", "value": [15, 20, 25, 10, 18, 5],
                 "areaStyle": {"opacity": 0.5, "color": "#00ff88"}, "lineStyle": {"color": "#00ff88", "width": 2}},
            ],
        }],
    }

    groups = [
        ("Disasters", 12, ((60, 100), (60, 100)), ((55, 100), (55, 100)), "#ff3333"),
        ("Rare Wins", 5, ((10, 40), (10, 40)), ((5, 35), (5, 35)), "#00ff88"),
        ("Got Lucky", 8, ((50, 90), (20, 50)), ((45, 95), (15, 55)), "#ffd93d"),
    ]

    def consequences(option, step):
        for series, (_, count, _, spread, _) in zip(option["series"], groups):
            series["data"] = random_points(rng, count, *spread)

    scatter = {
        "legend": _legend([label for label, *_ in groups]),
        "xAxis": dict(VALUE_AXIS, max=100, name="Bad Decision Level", nameTextStyle={"color": "#ff6b6b"}),
        "yAxis": dict(VALUE_AXIS, max=100, name="Consequence Severity", nameTextStyle={"color": "#ff6b6b"}),
        "series": [
            {"name": label, "type": "scatter", "symbolSize": 18, "data": random_points(rng, count, *start), "itemStyle": {"color": color}}
            for label, count, start, _, color in groups
        ],
    }

    return [
        live_scene(f"{name} Bad Decisions by Category", bar, categories, 1.0, "#1a1a2e", "slideLeft", "#ff6b6b"),
        live_scene(f"{name} Bad Decisions Growth (2020-2025)", line, growth, 1.0, "#16213e", "fadeIn", "#ff6b6b"),
        live_scene(f"How {name} Makes Decisions", pie, habits, 1.2, "#0f3460", "slideUp", "#ffd93d"),
        live_scene(f"{name} Regret Levels Throughout the Day", area, regret, 1.0, "#1a1a2e", "fadeIn", "#ff6b6b"),
        live_scene(f"{name} Skill Assessment", radar, assessment, 1.2, "#16213e", "slideLeft", "#ff6b6b"),
        live_scene("Bad Decisions vs Consequences Matrix", scatter, consequences, 1.0, "#0f3460", "fadeIn", "#ff6b6b"),
    ]


def build_bad_decisions_video(
    seed: Optional[int] = None,
    output_dir: Optional[Path] = None,
    cache_dir: Optional[Path] = None,
    name: str = "Faris"
) -> Creator:
    """The tongue-in-cheek "great at making bad decisions" live chart video."""
    rng = random.Random(seed)
    creator = _creator("faris-dynamic-charts.mp4" if name == "Faris" else f"{name.lower()}-dynamic-charts.mp4", output_dir, cache_dir)
    creator.add_child(_title_scene([
        (f"{name} is great...", -20, 52, "#00ff88", "fadeInUp", 0),
        ("(or not?)", 50, 24, "#888888", "fadeIn", 1),
    ], "#0a0a1a"))
    creator.add_child(_title_scene([
        ("...at making", -40, 36, "#ffffff", "fadeIn", 0),
        ("BAD DECISIONS!", 30, 48, "#ff3333", "zoomIn", 0.5),
    ], "#1a0a0a", transition="fadeIn"))
    for scene in _bad_decision_scenes(rng, name):
        creator.add_child(scene)
    creator.add_child(_title_scene([
        ("Conclusion:", -60, 32, "#ffd93d", "fadeInDown", 0),
        (f"{name} is consistently GREAT", 0, 28, "#00ff88", "fadeIn", 0.8),
        ("at making BAD DECISIONS!", 50, 36, "#ff3333", "zoomIn", 1.6),
        ("(The data doesn't lie)", 110, 18, "#888888", "fadeIn", 2.6),
    ], "#0a0a1a", duration=4))
    return creator
