"""Chart galleries: one chart per scene, each title with its own entrance.

``build_new_animations_video`` walks the six basic chart types with the
directional entrances and the newer transitions. ``build_chart_types_video``
covers the wider catalogue: gauge, funnel, horizontal and stacked bars,
doughnut, mixed bar and line, polar bar, treemap, candlestick, heatmap,
Nightingale rose and boxplot.
"""

import random
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..creator import Creator
from ..models import ChartNode, Scene, TextNode
from .showcase import WIDTH, HEIGHT, _creator

WHITE_AXIS = {"axisLabel": {"color": "#fff"}, "axisLine": {"lineStyle": {"color": "#555"}}}


def _value_axis(**extra) -> Dict[str, Any]:
    axis = {"type": "value", "axisLabel": {"color": "#fff"}, "splitLine": {"lineStyle": {"color": "#333"}}}
    axis.update(extra)
    return axis


def _legend(names: Optional[List[str]] = None) -> Dict[str, Any]:
    legend = {"bottom": 10, "textStyle": {"color": "#fff"}}
    if names:
        legend["data"] = names
    return legend


def gallery_scene(
    title: Tuple[str, str, str],
    subtitle: Tuple[str, str],
    option: Dict[str, Any],
    bg_color: str,
    transition: Tuple[str, float],
    effect_duration: float = 0.8,
    chart_size: Tuple[int, int] = (100, 150),
    duration: float = 5,
) -> Scene:
    """A chart scene with a title and subtitle.

    Args:
        title: ``(text, color, effect)`` at the top.
        subtitle: ``(text, effect)`` below it, in grey.
        option: Chart option.
        bg_color: Scene background.
        transition: ``(name, seconds)`` into the next scene.
        effect_duration: Length of both text entrances.
        chart_size: Width and height margins taken off the canvas.
        duration: Scene length in seconds.
    """
    text, color, effect = title
    scene = Scene(bg_color=bg_color, duration=duration).set_transition(*transition)
    scene.add_child(
        TextNode(text=text, x=WIDTH / 2, y=35, font_size=28, color=color)
        .align_center().add_effect(effect, effect_duration, 0)
    )
    scene.add_child(
        TextNode(text=subtitle[0], x=WIDTH / 2, y=70, font_size=16, color="#aaaaaa")
        .align_center().add_effect(subtitle[1], effect_duration, 0.3)
    )
    option.setdefault("backgroundColor", "transparent")
    option.setdefault("animationDuration", 2000)
    scene.add_child(ChartNode(
        option=option,
        x=WIDTH / 2, y=HEIGHT / 2 + 30,
        width=WIDTH - chart_size[0], height=HEIGHT - chart_size[1],
    ))
    return scene


def _text_scene(lines, bg_color: str, transition: Optional[Tuple[str, float]] = None) -> Scene:
    """Centered lines as ``(text, y offset, size, color, effect, duration, delay)``."""
    scene = Scene(bg_color=bg_color, duration=3)
    if transition:
        scene.set_transition(*transition)
    for text, offset, size, color, effect, length, delay in lines:
        scene.add_child(
            TextNode(text=text, x=WIDTH / 2, y=HEIGHT / 2 + offset, font_size=size, color=color)
            .align_center().add_effect(effect, length, delay)
        )
    return scene


# ---------------------------------------------------------------------------
# New animations
# ---------------------------------------------------------------------------


def new_animation_scenes() -> List[Scene]:
    revenue = {
        "xAxis": dict(WHITE_AXIS, type="category", data=["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]),
        "yAxis": _value_axis(),
        "series": [{
            "type": "bar",
            "data": [95, 120, 145, 160, 180, 220],
            "itemStyle": {"color": {"type": "linear", "colorStops": [
                {"offset": 0, "color": "#a55eea"}, {"offset": 1, "color": "#8854d0"},
            ]}},
            "label": {"show": True, "position": "top", "color": "#fff", "formatter": "${c}K"},
        }],
    }
    growth = {
        "legend": _legend(["Users", "Sessions"]),
        "xAxis": dict(WHITE_AXIS, type="category", data=[f"Week {i}" for i in range(1, 7)]),
        "yAxis": _value_axis(),
        "series": [
            {"name": "Users", "type": "line", "data": [500, 800, 1200, 1800, 2500, 3200], "symbol": "diamond", "symbolSize": 10,
             "lineStyle": {"width": 4, "color": "#00d9ff"}, "itemStyle": {"color": "#00d9ff"}},
            {"name": "Sessions", "type": "line", "data": [1000, 1600, 2400, 3600, 5000, 6400], "symbol": "diamond", "symbolSize": 10,
             "lineStyle": {"width": 4, "color": "#ff6348"}, "itemStyle": {"color": "#ff6348"}},
        ],
    }
    share = {
        "legend": _legend(),
        "series": [{
            "type": "pie",
            "radius": ["35%", "65%"],
            "center": ["50%", "52%"],
            "label": {"show": True, "color": "#fff", "formatter": "{b}\n{d}%", "fontSize": 12},
            "data": [
                {"name": name, "value": value, "itemStyle": {"color": color}}
                for name, value, color in (("Tech", 40, "#ff6b6b"), ("Finance", 28, "#feca57"), ("Retail", 18, "#48dbfb"), ("Health", 14, "#1dd1a1"))
            ],
        }],
    }
    traffic = {
        "legend": _legend(["Inbound", "Outbound"]),
        "xAxis": dict(WHITE_AXIS, type="category", boundaryGap=False, data=["0h", "4h", "8h", "12h", "16h", "20h", "24h"]),
        "yAxis": _value_axis(axisLabel={"color": "#fff", "formatter": "{value} GB"}, splitLine={"lineStyle": {"color": "#444"}}),
        "series": [
            {"name": "Inbound", "type": "line", "data": [10, 25, 60, 85, 70, 45, 15],
             "areaStyle": {"opacity": 0.7, "color": "#a29bfe"}, "lineStyle": {"color": "#a29bfe", "width": 3}},
            {"name": "Outbound", "type": "line", "data": [8, 20, 50, 75, 60, 40, 12],
             "areaStyle": {"opacity": 0.7, "color": "#74b9ff"}, "lineStyle": {"color": "#74b9ff", "width": 3}},
        ],
    }
    skills = {
        "legend": _legend(["Team A", "Team B"]),
        "radar": {
            "indicator": [{"name": name, "max": 100} for name in ("Coding", "Design", "Communication", "Leadership", "Problem Solving")],
            "axisName": {"color": "#fff"},
        },
        "series": [{
            "type": "radar",
            "data": [
                {"name": "Team A", "value": [90, 75, 85, 70, 95], "areaStyle": {"opacity": 0.5, "color": "#00d8d6"}, "lineStyle": {"color": "#00d8d6", "width": 3}},
                {"name": "Team B", "value": [70, 95, 80, 90, 75], "areaStyle": {"opacity": 0.5, "color": "#ff9ff3"}, "lineStyle": {"color": "#ff9ff3", "width": 3}},
            ],
        }],
    }
    risk = {
        "legend": _legend(["Low Risk", "Medium Risk", "High Risk"]),
        "xAxis": _value_axis(name="Investment ($K)", nameTextStyle={"color": "#fff"}),
        "yAxis": _value_axis(name="ROI (%)", nameTextStyle={"color": "#fff"}),
        "series": [
            {"name": name, "type": "scatter", "symbolSize": 18, "data": points, "itemStyle": {"color": color}}
            for name, points, color in (
                ("Low Risk", [[50, 8], [80, 12], [100, 15], [70, 10], [90, 14]], "#1dd1a1"),
                ("Medium Risk", [[150, 25], [200, 35], [180, 30], [220, 40], [170, 28]], "#f9ca24"),
                ("High Risk", [[300, 60], [350, 80], [400, 100], [320, 70], [380, 90]], "#ee5253"),
            )
        ],
    }

    return [
        gallery_scene(("Revenue Analysis", "#a55eea", "backInLeft"), ("Q4 2025 Performance", "bounceInRight"), revenue, "#2d1b4e", ("moveleft", 0.8)),
        gallery_scene(("Growth Trend", "#00d9ff", "zoomInLeft"), ("User Acquisition Rate", "rollIn"), growth, "#1e3a5f", ("stretch", 0.8)),
        gallery_scene(("Market Share", "#feca57", "bounceInDown"), ("Industry Distribution 2025", "backInUp"), share, "#1a2f4a", ("slice", 0.8)),
        gallery_scene(("Traffic Flow", "#a29bfe", "rotateInUpLeft"), ("24-Hour Network Analysis", "zoomInRight"), traffic, "#2c2c54", ("fat", 0.8)),
        gallery_scene(("Skill Matrix", "#00d8d6", "backInDown"), ("Team Competency Assessment", "bounceInUp"), skills, "#1e272e", ("fluidly", 0.8)),
        gallery_scene(("Correlation Map", "#f9ca24", "zoomInUp"), ("Investment vs Returns", "rotateInDownRight"), risk, "#192a56", ("shake", 0.8)),
    ]


def build_new_animations_video(output_dir: Optional[Path] = None, cache_dir: Optional[Path] = None) -> Creator:
    """Six charts introduced with bounce, back, zoom, rotate and roll entrances."""
    creator = _creator("charts-new-animations.mp4", output_dir, cache_dir)
    creator.add_child(_text_scene([
        ("Data Analytics", -40, 52, "#ffffff", "bounceIn", 1.2, 0),
        ("Dynamic Visualizations", 30, 24, "#a55eea", "zoomIn", 0.8, 0.4),
        ("2025 Edition", 80, 16, "#888888", "rotateIn", 1, 0.8),
    ], "#1a0a2e", ("fade", 0.8)))
    for scene in new_animation_scenes():
        creator.add_child(scene)
    creator.add_child(_text_scene([
        ("Thank You!", -30, 48, "#ffffff", "backIn", 1, 0),
        ("Built with FFCreator", 30, 22, "#a55eea", "bounceIn", 0.8, 0.4),
        ("Dynamic Charts - New Animations", 75, 14, "#888888", "zoomInDown", 0.8, 0.7),
    ], "#1a0a2e", ("zoomright", 0.8)))
    return creator


# ---------------------------------------------------------------------------
# Chart types
# ---------------------------------------------------------------------------

HOURS = ["12a", "2a", "4a", "6a", "8a", "10a", "12p", "2p", "4p", "6p", "8p", "10p"]
DAYS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def _gradient(start: str, end: str) -> Dict[str, Any]:
    return {"type": "linear", "colorStops": [{"offset": 0, "color": start}, {"offset": 1, "color": end}]}


def chart_type_options(rng: random.Random) -> List[Dict[str, Any]]:
    """The twelve chart options, in scene order. The heatmap cells come from ``rng``."""
    gauge = {"series": [{
        "type": "gauge",
        "center": ["50%", "60%"],
        "radius": "75%",
        "startAngle": 200,
        "endAngle": -20,
        "min": 0,
        "max": 100,
        "splitNumber": 10,
        "itemStyle": {"color": _gradient("#ff2e63", "#00ff88")},
        "progress": {"show": True, "width": 20},
        "pointer": {"show": True, "length": "60%", "width": 8, "itemStyle": {"color": "#fff"}},
        "axisLine": {"lineStyle": {"width": 20, "color": [[1, "#333"]]}},
        "splitLine": {"length": 15, "lineStyle": {"color": "#555", "width": 2}},
        "axisLabel": {"distance": 30, "color": "#ddd", "fontSize": 14},
        "detail": {"formatter": "{value}%", "color": "#fff", "fontSize": 36, "offsetCenter": [0, "40%"]},
        "data": [{"value": 78}],
    }], "animationDuration": 2500}

    funnel = {"legend": _legend(), "series": [{
        "type": "funnel",
        "left": "15%", "top": 80, "bottom": 60, "width": "70%",
        "min": 0, "max": 100,
        "sort": "descending",
        "gap": 4,
        "label": {"show": True, "position": "inside", "formatter": "{b}: {c}%", "color": "#fff", "fontSize": 14},
        "itemStyle": {"borderColor": "#1a1a3e", "borderWidth": 2},
        "data": [
            {"name": name, "value": value, "itemStyle": {"color": color}}
            for name, value, color in (
                ("Visitors", 100, "#5470c6"), ("Leads", 75, "#91cc75"), ("Prospects", 50, "#fac858"),
                ("Negotiations", 30, "#ee6666"), ("Closed Deals", 15, "#73c0de"),
            )
        ],
    }]}

    products = {
        "xAxis": _value_axis(axisLabel={"color": "#fff", "formatter": "${value}K"}),
        "yAxis": dict(WHITE_AXIS, type="category", data=["Laptops", "Phones", "Tablets", "Watches", "Cameras"]),
        "series": [{
            "type": "bar",
            "data": [
                {"value": value, "itemStyle": {"color": _gradient(start, end)}}
                for value, start, end in (
                    (320, "#667eea", "#764ba2"), (280, "#f093fb", "#f5576c"), (220, "#4facfe", "#00f2fe"),
                    (180, "#43e97b", "#38f9d7"), (150, "#fa709a", "#fee140"),
                )
            ],
            "label": {"show": True, "position": "right", "color": "#fff", "formatter": "${c}K"},
        }],
    }

    budget = {
        "legend": {"orient": "vertical", "right": 20, "top": "center", "textStyle": {"color": "#fff"}},
        "series": [{
            "type": "pie",
            "radius": ["45%", "70%"],
            "center": ["40%", "55%"],
            "itemStyle": {"borderColor": "#1f1c2c", "borderWidth": 3},
            "label": {"show": True, "position": "center", "formatter": "Total\n$2.5M", "fontSize": 18, "color": "#fff"},
            "data": [
                {"name": name, "value": value, "itemStyle": {"color": color}}
                for name, value, color in (
                    ("R&D", 35, "#667eea"), ("Marketing", 25, "#f093fb"), ("Operations", 20, "#4facfe"),
                    ("HR", 12, "#43e97b"), ("Admin", 8, "#fa709a"),
                )
            ],
        }],
    }

    quarterly = {
        "legend": _legend(["Revenue", "Expenses", "Profit"]),
        "xAxis": dict(WHITE_AXIS, type="category", data=["Q1", "Q2", "Q3", "Q4"]),
        "yAxis": _value_axis(axisLabel={"color": "#fff", "formatter": "${value}K"}),
        "series": [
            {"name": name, "type": "bar", "stack": "total", "data": data, "itemStyle": {"color": color}, "label": {"show": True, "color": "#fff"}}
            for name, data, color in (
                ("Revenue", [120, 150, 180, 220], "#11998e"),
                ("Expenses", [80, 90, 100, 110], "#fc5c65"),
                ("Profit", [40, 60, 80, 110], "#fed330"),
            )
        ],
    }

    mixed = {
        "legend": _legend(["Sales", "Growth %"]),
        "xAxis": dict(WHITE_AXIS, type="category", data=["Jan", "Feb", "Mar", "Apr", "May", "Jun"]),
        "yAxis": [
            _value_axis(name="Sales", axisLabel={"color": "#fff", "formatter": "{value}K"}),
            _value_axis(name="Growth", axisLabel={"color": "#fff", "formatter": "{value}%"}, splitLine={"show": False}),
        ],
        "series": [
            {"name": "Sales", "type": "bar", "data": [80, 95, 110, 130, 155, 180], "itemStyle": {"color": _gradient("#667eea", "#764ba2")}},
            {"name": "Growth %", "type": "line", "yAxisIndex": 1, "data": [10, 18, 16, 22, 19, 28], "symbol": "circle", "symbolSize": 12,
             "lineStyle": {"width": 4, "color": "#fad390"}, "itemStyle": {"color": "#fad390"}, "areaStyle": {"opacity": 0.2, "color": "#fad390"}},
        ],
    }

    activity = {
        "angleAxis": {"max": 100, "startAngle": 90},
        "radiusAxis": {"type": "category", "data": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]},
        "polar": {"radius": ["20%", "70%"]},
        "series": [{
            "type": "bar",
            "coordinateSystem": "polar",
            "data": [85, 70, 90, 65, 80, 95, 60],
            "itemStyle": {"color": _gradient("#e056fd", "#f78fb3")},
            "label": {"show": True, "color": "#fff"},
        }],
    }

    storage = {"series": [{
        "type": "treemap",
        "top": 90, "bottom": 30, "left": 30, "right": 30,
        "label": {"show": True, "formatter": "{b}\n{c} GB", "fontSize": 14, "color": "#fff"},
        "itemStyle": {"borderColor": "#0a192f", "borderWidth": 2, "gapWidth": 2},
        "data": [
            {"name": name, "value": value, "itemStyle": {"color": color}}
            for name, value, color in (
                ("Videos", 450, "#64ffda"), ("Photos", 280, "#7c4dff"), ("Documents", 150, "#ff6e40"),
                ("Music", 120, "#ffd740"), ("Apps", 200, "#69f0ae"), ("System", 100, "#ff4081"),
            )
        ],
    }]}

    stock = {
        "xAxis": dict(WHITE_AXIS, type="category", data=["Mon", "Tue", "Wed", "Thu", "Fri"]),
        "yAxis": _value_axis(min=90, max=130, axisLabel={"color": "#fff", "formatter": "${value}"}),
        "series": [{
            "type": "candlestick",
            "data": [[100, 115, 98, 118], [115, 108, 105, 120], [108, 122, 106, 125], [122, 118, 115, 128], [118, 125, 112, 130]],
            "itemStyle": {"color": "#00e676", "color0": "#ff5252", "borderColor": "#00e676", "borderColor0": "#ff5252"},
        }],
    }

    engagement = {
        "xAxis": {"type": "category", "data": HOURS, "axisLabel": {"color": "#fff", "fontSize": 10}, "axisLine": {"lineStyle": {"color": "#555"}}},
        "yAxis": {"type": "category", "data": DAYS, "axisLabel": {"color": "#fff"}, "axisLine": {"lineStyle": {"color": "#555"}}},
        "visualMap": {
            "min": 0, "max": 100, "orient": "horizontal",
            "textStyle": {"color": "#fff"},
            "inRange": {"color": ["#1a1a2e", "#3d1a78", "#7c3aed", "#ff6b6b", "#feca57"]},
        },
        "series": [{
            "type": "heatmap",
            "data": [[hour, day, rng.randint(0, 99)] for day in range(len(DAYS)) for hour in range(len(HOURS))],
        }],
    }

    regions = {"legend": _legend(), "series": [{
        "type": "pie",
        "radius": ["15%", "70%"],
        "center": ["50%", "55%"],
        "roseType": "area",
        "itemStyle": {"borderColor": "#16213e", "borderWidth": 2},
        "label": {"show": True, "color": "#fff", "formatter": "{b}\n{d}%"},
        "data": [
            {"name": name, "value": value, "itemStyle": {"color": color}}
            for name, value, color in (
                ("Americas", 45, "#ff6b6b"), ("Europe", 35, "#feca57"), ("Asia", 28, "#48dbfb"),
                ("Africa", 18, "#1dd1a1"), ("Oceania", 12, "#a55eea"),
            )
        ],
    }]}

    teams = {
        "xAxis": dict(WHITE_AXIS, type="category", data=["Team A", "Team B", "Team C", "Team D"]),
        "yAxis": _value_axis(),
        "series": [{
            "type": "boxplot",
            "data": [[655, 850, 940, 980, 1070], [760, 800, 845, 885, 960], [780, 840, 855, 880, 940], [720, 767, 815, 865, 920]],
            "itemStyle": {"color": "#00cec9", "borderColor": "#00cec9"},
        }],
    }

    return [gauge, funnel, products, budget, quarterly, mixed, activity, storage, stock, engagement, regions, teams]


# (title, color, title effect), (subtitle, effect), background, transition, chart margins
CHART_TYPE_SCENES = [
    (("Performance Score", "#08d9d6", "slideInLeft"), ("Real-time KPI Dashboard", "slideInRight"), "#190a28", ("fastswitch", 0.5), (80, 120)),
    (("Sales Funnel", "#fac858", "fadeInLeftBig"), ("Conversion Pipeline Analysis", "fadeInRightBig"), "#1a1a3e", ("backoff", 0.6), (80, 120)),
    (("Top Products", "#4facfe", "fadeInUpBig"), ("Revenue by Category", "fadeInDownBig"), "#0f2027", ("fadeIn", 0.6), (100, 150)),
    (("Budget Allocation", "#f093fb", "rotateInDownLeft"), ("Department Spending 2025", "rotateInUpRight"), "#1f1c2c", ("fluidly", 0.6), (60, 120)),
    (("Quarterly Results", "#fed330", "zoomInDown"), ("Revenue vs Expenses vs Profit", "zoomInUp"), "#16222a", ("shake", 0.6), (100, 150)),
    (("Combined Analysis", "#fad390", "bounceInLeft"), ("Sales Volume & Growth Rate", "bounceInRight"), "#141e30", ("zoomright", 0.6), (100, 150)),
    (("Activity Breakdown", "#e056fd", "rollIn"), ("Weekly Time Distribution", "blurIn"), "#1a1a2e", ("moveleft", 0.6), (80, 130)),
    (("Storage Usage", "#64ffda", "backInUp"), ("Disk Space by Category", "backInDown"), "#0a192f", ("stretch", 0.6), (60, 120)),
    (("Stock Analysis", "#00e676", "zoomInLeft"), ("Weekly Price Movement", "zoomInRight"), "#151515", ("backoff", 0.6), (100, 150)),
    (("Activity Heatmap", "#ff6b6b", "fadeInLeftBig"), ("Hourly User Engagement", "fadeInRightBig"), "#1a1a2e", ("fastswitch", 0.6), (80, 140)),
    (("Market Segments", "#feca57", "rotateIn"), ("Revenue by Region", "bounceIn"), "#16213e", ("fadeIn", 0.6), (60, 120)),
    (("Statistical Analysis", "#00cec9", "slideInDown"), ("Performance Distribution", "slideInUp"), "#1e272e", ("fluidly", 0.6), (100, 150)),
]


def build_chart_types_video(
    seed: Optional[int] = None,
    output_dir: Optional[Path] = None,
    cache_dir: Optional[Path] = None
) -> Creator:
    """Twelve chart types, one 5 second scene each, between an intro and an outro."""
    rng = random.Random(seed)
    creator = _creator("charts-dynamic.mp4", output_dir, cache_dir)
    creator.add_child(_text_scene([
        ("DYNAMIC", -60, 64, "#08d9d6", "slideInDown", 0.6, 0),
        ("DATA VISUALS", 10, 42, "#ff2e63", "slideInUp", 0.6, 0.2),
        ("Interactive Charts", 70, 18, "#aaaaaa", "blurIn", 0.8, 0.5),
    ], "#0d0221", ("fade", 0.5)))

    for option, (title, subtitle, bg_color, transition, margins) in zip(chart_type_options(rng), CHART_TYPE_SCENES):
        creator.add_child(gallery_scene(title, subtitle, option, bg_color, transition, chart_size=margins))

    creator.add_child(_text_scene([
        ("AMAZING!", -50, 56, "#feca57", "bounceIn", 0.8, 0),
        ("Dynamic Data Visualization", 20, 24, "#ffffff", "slideInLeft", 0.6, 0.3),
        ("FFCreator + ECharts", 60, 18, "#08d9d6", "slideInRight", 0.6, 0.5),
        ("12 Chart Types - 24 Animations", 100, 14, "#888888", "blurIn", 0.6, 0.7),
    ], "#0d0221", ("quicksand", 0.6)))
    return creator
