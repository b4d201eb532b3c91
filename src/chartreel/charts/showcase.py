"""The chart demo: six fixed charts, single chart videos and a live chart."""

import copy
import random
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..creator import Creator
from ..models import ChartNode, Scene, TextNode

WIDTH = 800
HEIGHT = 600

AXIS = {"axisLabel": {"color": "#fff"}, "axisLine": {"lineStyle": {"color": "#555"}}}
VALUE_AXIS = {"type": "value", "axisLabel": {"color": "#fff"}, "splitLine": {"lineStyle": {"color": "#333"}}}


def _title(text: str) -> Dict[str, Any]:
    return {"text": text, "left": "center", "textStyle": {"color": "#fff", "fontSize": 22}}


def _legend(names: List[str]) -> Dict[str, Any]:
    return {"data": names, "bottom": 10, "textStyle": {"color": "#fff"}}


BAR_OPTION = {
    "backgroundColor": "transparent",
    "title": _title("Weekly Sales Report"),
    "xAxis": {
        "type": "category",
        "data": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
        "axisLabel": {"color": "#fff", "fontSize": 14},
        "axisLine": {"lineStyle": {"color": "#555"}},
    },
    "yAxis": {"type": "value", "axisLabel": {"color": "#fff", "fontSize": 14}, "splitLine": {"lineStyle": {"color": "#333"}}},
    "series": [{
        "type": "bar",
        "data": [120, 200, 150, 80, 70, 110, 130],
        "itemStyle": {"color": {"type": "linear", "colorStops": [
            {"offset": 0, "color": "#83bff6"}, {"offset": 1, "color": "#188df0"},
        ]}},
        "barWidth": "50%",
    }],
    "animationDuration": 1500,
}

LINE_OPTION = {
    "backgroundColor": "transparent",
    "title": _title("Monthly Revenue Trends"),
    "legend": _legend(["Product A", "Product B", "Product C"]),
    "xAxis": dict(AXIS, type="category", data=["Jan", "Feb", "Mar", "Apr", "May", "Jun"]),
    "yAxis": VALUE_AXIS,
    "series": [
        {"name": name, "type": "line", "smooth": True, "data": data,
         "lineStyle": {"width": 3, "color": color}, "itemStyle": {"color": color}}
        for name, data, color in (
            ("Product A", [150, 230, 224, 218, 335, 447], "#5470C6"),
            ("Product B", [50, 130, 184, 290, 390, 310], "#91CC75"),
            ("Product C", [80, 90, 120, 160, 200, 280], "#FAC858"),
        )
    ],
    "animationDuration": 2000,
}

PIE_OPTION = {
    "backgroundColor": "transparent",
    "title": _title("Market Share Distribution"),
    "legend": {"orient": "horizontal", "bottom": 10, "textStyle": {"color": "#fff"}},
    "series": [{
        "name": "Share",
        "type": "pie",
        "radius": ["35%", "65%"],
        "center": ["50%", "55%"],
        "itemStyle": {"borderRadius": 8, "borderColor": "#1a1a2e", "borderWidth": 2},
        "label": {"show": True, "color": "#fff", "formatter": "{b}: {d}%"},
        "data": [
            {"value": value, "name": name, "itemStyle": {"color": color}}
            for value, name, color in (
                (1048, "Chrome", "#4285F4"),
                (735, "Safari", "#34A853"),
                (580, "Firefox", "#FF7139"),
                (484, "Edge", "#0078D4"),
                (300, "Others", "#9E9E9E"),
            )
        ],
    }],
    "animationDuration": 1500,
}

AREA_OPTION = {
    "backgroundColor": "transparent",
    "title": _title("Website Traffic Analysis"),
    "legend": _legend(["Mobile", "Desktop", "Tablet"]),
    "xAxis": dict(AXIS, type="category", boundaryGap=False, data=["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]),
    "yAxis": VALUE_AXIS,
    "series": [
        {"name": name, "type": "line", "stack": "Total", "data": data,
         "areaStyle": {"opacity": 0.7, "color": color}, "lineStyle": {"color": color}, "itemStyle": {"color": color}}
        for name, data, color in (
            ("Mobile", [120, 132, 101, 134, 90, 230, 210], "#5470C6"),
            ("Desktop", [220, 182, 191, 234, 290, 330, 310], "#91CC75"),
            ("Tablet", [150, 232, 201, 154, 190, 330, 410], "#FAC858"),
        )
    ],
    "animationDuration": 2000,
}

RADAR_OPTION = {
    "backgroundColor": "transparent",
    "title": _title("Product Comparison"),
    "legend": _legend(["Product A", "Product B"]),
    "radar": {
        "indicator": [
            {"name": "Sales", "max": 6500},
            {"name": "Admin", "max": 16000},
            {"name": "Tech", "max": 30000},
            {"name": "Support", "max": 38000},
            {"name": "Dev", "max": 52000},
            {"name": "Marketing", "max": 25000},
        ],
        "axisName": {"color": "#fff"},
    },
    "series": [{
        "name": "Comparison",
        "type": "radar",
        "data": [
            {"value": [4200, 12000, 20000, 35000, 50000, 18000], "name": "Product A",
             "areaStyle": {"opacity": 0.3, "color": "#5470C6"}, "lineStyle": {"color": "#5470C6"}, "itemStyle": {"color": "#5470C6"}},
            {"value": [5000, 14000, 28000, 26000, 42000, 21000], "name": "Product B",
             "areaStyle": {"opacity": 0.3, "color": "#91CC75"}, "lineStyle": {"color": "#91CC75"}, "itemStyle": {"color": "#91CC75"}},
        ],
    }],
    "animationDuration": 1500,
}

_DASHED = {"lineStyle": {"type": "dashed", "color": "#333"}}

SCATTER_OPTION = {
    "backgroundColor": "transparent",
    "title": _title("Performance Analysis"),
    "legend": _legend(["Tech", "Finance", "Retail"]),
    "xAxis": {"name": "Revenue ($M)", "nameTextStyle": {"color": "#fff"}, "axisLabel": {"color": "#fff"}, "splitLine": _DASHED},
    "yAxis": {"name": "Profit ($M)", "nameTextStyle": {"color": "#fff"}, "axisLabel": {"color": "#fff"}, "splitLine": _DASHED},
    "series": [
        {"name": name, "type": "scatter", "symbolSize": 20, "data": data, "itemStyle": {"color": color}}
        for name, data, color in (
            ("Tech", [[100, 40], [150, 60], [200, 90], [80, 25]], "#5470C6"),
            ("Finance", [[120, 50], [180, 75], [90, 30]], "#91CC75"),
            ("Retail", [[60, 15], [110, 35], [140, 45]], "#FAC858"),
        )
    ],
    "animationDuration": 1500,
}

DEMO_CHARTS = [
    {"name": "Bar Chart", "option": BAR_OPTION, "bg_color": "#1a1a2e"},
    {"name": "Line Chart", "option": LINE_OPTION, "bg_color": "#16213e"},
    {"name": "Pie Chart", "option": PIE_OPTION, "bg_color": "#0f3460"},
    {"name": "Area Chart", "option": AREA_OPTION, "bg_color": "#1a1a2e"},
    {"name": "Radar Chart", "option": RADAR_OPTION, "bg_color": "#16213e"},
    {"name": "Scatter Chart", "option": SCATTER_OPTION, "bg_color": "#0f3460"},
]


def _creator(output: str, output_dir: Optional[Path], cache_dir: Optional[Path]) -> Creator:
    return Creator(width=WIDTH, height=HEIGHT, fps=30, output=output, output_dir=output_dir, cache_dir=cache_dir)


def build_all_charts_video(output_dir: Optional[Path] = None, cache_dir: Optional[Path] = None) -> Creator:
    """All six demo charts, one 5 second scene each."""
    creator = _creator("chart-demo-all.mp4", output_dir, cache_dir)

    for index, chart in enumerate(DEMO_CHARTS):
        scene = Scene(bg_color=chart["bg_color"], duration=5)
        if index < len(DEMO_CHARTS) - 1:
            scene.set_transition("fadeIn", 0.5)

        scene.add_child(
            TextNode(text=f"Demo {index + 1}: {chart['name']}", x=WIDTH / 2, y=30, font_size=20)
            .align_center().add_effect("fadeInDown", 0.8, 0)
        )
        scene.add_child(
            ChartNode(
                option=copy.deepcopy(chart["option"]),
                x=WIDTH / 2, y=HEIGHT / 2 + 20,
                width=WIDTH - 100, height=HEIGHT - 140,
            ).add_effect("fadeIn", 1, 0.3)
        )
        creator.add_child(scene)

    return creator


def build_single_chart_video(
    number: int,
    output_dir: Optional[Path] = None,
    cache_dir: Optional[Path] = None
) -> Creator:
    """One demo chart (numbered 1-6) in a 6 second scene.

    Raises:
        ValueError: If ``number`` is outside 1..6.
    """
    if not 1 <= number <= len(DEMO_CHARTS):
        raise ValueError(f"Invalid index. Use 1-{len(DEMO_CHARTS)}")

    chart = DEMO_CHARTS[number - 1]
    slug = chart["name"].lower().replace(" ", "-")
    creator = _creator(f"chart-{number}-{slug}.mp4", output_dir, cache_dir)

    scene = Scene(bg_color=chart["bg_color"], duration=6)
    scene.add_child(
        TextNode(text=chart["name"], x=WIDTH / 2, y=35, font_size=28)
        .align_center().add_effect("fadeInDown", 0.8, 0)
    )
    scene.add_child(
        ChartNode(
            option=copy.deepcopy(chart["option"]),
            x=WIDTH / 2, y=HEIGHT / 2 + 20,
            width=WIDTH - 80, height=HEIGHT - 100,
        ).add_effect("zoomIn", 1.2, 0.3)
    )
    creator.add_child(scene)
    return creator


def build_dynamic_chart_video(
    seed: Optional[int] = None,
    output_dir: Optional[Path] = None,
    cache_dir: Optional[Path] = None
) -> Creator:
    """A 10 second live bar chart refreshed with random data every second."""
    rng = random.Random(seed)
    option = {
        "backgroundColor": "transparent",
        "title": {"text": "Live Sales Dashboard", "left": "center", "textStyle": {"color": "#fff", "fontSize": 24}},
        "xAxis": dict(AXIS, type="category", data=["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]),
        "yAxis": dict(VALUE_AXIS, max=350),
        "series": [{
            "type": "bar",
            "data": [120, 200, 150, 80, 70, 110, 130],
            "itemStyle": {"color": {"type": "linear", "colorStops": [
                {"offset": 0, "color": "#00d2ff"}, {"offset": 1, "color": "#3a7bd5"},
            ]}},
        }],
        "animationDuration": 800,
        "animationDurationUpdate": 800,
    }

    def refresh(current: Dict[str, Any], step: int) -> Dict[str, Any]:
        current["series"][0]["data"] = [rng.randint(50, 299) for _ in current["series"][0]["data"]]
        return current

    chart = ChartNode(option=option, x=WIDTH / 2, y=HEIGHT / 2 + 20, width=WIDTH - 80, height=HEIGHT - 120)
    chart.update(refresh, interval=1.0).update_now()

    creator = _creator("dynamic-chart.mp4", output_dir, cache_dir)
    creator.add_child(Scene(bg_color="#1a1a2e", duration=10).add_child(chart))
    return creator
