"""Preconfigured chart options, one per chart type.

Each template turns a small data dict into a full chart option. Any key
left out falls back to sample data so a template renders on its own.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

Option = Dict[str, Any]

AXIS_LABEL = {"color": "#fff"}
AXIS_LINE = {"lineStyle": {"color": "#555"}}
SPLIT_LINE = {"lineStyle": {"color": "#333"}}
LEGEND_TEXT = {"color": "#fff"}

BACKGROUNDS = {
    "bar": "#1a1a2e",
    "line": "#16213e",
    "pie": "#0f3460",
    "area": "#1a1a2e",
    "radar": "#16213e",
    "scatter": "#0f3460",
}


@dataclass(frozen=True)
class ChartTemplate:
    """A named chart option builder."""

    name: str
    color: str
    build: Callable[[Dict[str, Any]], Option]

    def get_option(self, data: Optional[Dict[str, Any]] = None) -> Option:
        return self.build(data or {})


def _pick(colors: List[str], series: Dict[str, Any], index: int) -> str:
    return series.get("color") or colors[index % len(colors)]


def _legend(data: Dict[str, Any], default: List[str]) -> Dict[str, Any]:
    names = [s.get("name") for s in data["series"]] if data.get("series") else default
    return {"data": names, "bottom": 10, "textStyle": dict(LEGEND_TEXT)}


def bar_option(data: Dict[str, Any]) -> Option:
    return {
        "backgroundColor": "transparent",
        "xAxis": {
            "type": "category",
            "data": data.get("labels") or ["A", "B", "C", "D", "E"],
            "axisLabel": {"color": "#fff", "fontSize": 13},
            "axisLine": AXIS_LINE,
        },
        "yAxis": {"type": "value", "axisLabel": dict(AXIS_LABEL), "splitLine": SPLIT_LINE},
        "series": [{
            "type": "bar",
            "data": data.get("values") or [120, 200, 150, 180, 230],
            "itemStyle": {
                "color": {
                    "type": "linear", "x": 0, "y": 0, "x2": 0, "y2": 1,
                    "colorStops": [
                        {"offset": 0, "color": data.get("color") or "#00d4ff"},
                        {"offset": 1, "color": data.get("colorEnd") or "#0066ff"},
                    ],
                },
            },
            "label": {"show": True, "position": "top", "color": "#fff"},
        }],
        "animationDuration": 1500,
    }


LINE_COLORS = ["#00ff88", "#ffd93d"]
LINE_DEFAULTS = [
    {"name": "Series A", "values": [820, 932, 901, 1034, 1290, 1330, 1120]},
    {"name": "Series B", "values": [1200, 1400, 1300, 1600, 1900, 2100, 1800]},
]


def line_option(data: Dict[str, Any]) -> Option:
    series = data.get("series") or LINE_DEFAULTS
    return {
        "backgroundColor": "transparent",
        "legend": _legend(data, [s["name"] for s in LINE_DEFAULTS]),
        "xAxis": {
            "type": "category",
            "data": data.get("labels") or ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
            "axisLabel": dict(AXIS_LABEL),
            "axisLine": AXIS_LINE,
        },
        "yAxis": {"type": "value", "axisLabel": dict(AXIS_LABEL), "splitLine": SPLIT_LINE},
        "series": [
            {
                "name": s.get("name"),
                "type": "line",
                "smooth": True,
                "data": s.get("values") or [],
                "lineStyle": {"width": 3, "color": _pick(LINE_COLORS, s, i)},
                "itemStyle": {"color": _pick(LINE_COLORS, s, i)},
                "symbol": "circle",
                "symbolSize": 8,
            }
            for i, s in enumerate(series)
        ],
        "animationDuration": 1500,
    }


PIE_DEFAULTS = [
    {"value": 35, "name": "Category A", "itemStyle": {"color": "#5470C6"}},
    {"value": 25, "name": "Category B", "itemStyle": {"color": "#91CC75"}},
    {"value": 20, "name": "Category C", "itemStyle": {"color": "#FAC858"}},
    {"value": 12, "name": "Category D", "itemStyle": {"color": "#EE6666"}},
    {"value": 8, "name": "Category E", "itemStyle": {"color": "#73C0DE"}},
]


def pie_option(data: Dict[str, Any]) -> Option:
    return {
        "backgroundColor": "transparent",
        "legend": {"orient": "horizontal", "bottom": 10, "textStyle": dict(LEGEND_TEXT)},
        "series": [{
            "type": "pie",
            "radius": ["30%", "60%"],
            "center": ["50%", "55%"],
            "itemStyle": {"borderRadius": 8, "borderColor": "#0f3460", "borderWidth": 2},
            "label": {"show": True, "color": "#fff", "formatter": "{b}: {d}%"},
            "data": data.get("items") or [dict(item) for item in PIE_DEFAULTS],
        }],
        "animationDuration": 1500,
    }


AREA_COLORS = ["#5470C6", "#91CC75", "#FAC858"]
AREA_DEFAULTS = [
    {"name": "CPU", "values": [15, 25, 45, 60, 55, 40, 20]},
    {"name": "Memory", "values": [20, 30, 35, 45, 50, 45, 30]},
    {"name": "Disk", "values": [10, 12, 15, 18, 20, 22, 18]},
]


def area_option(data: Dict[str, Any]) -> Option:
    series = data.get("series") or AREA_DEFAULTS
    return {
        "backgroundColor": "transparent",
        "legend": _legend(data, [s["name"] for s in AREA_DEFAULTS]),
        "xAxis": {
            "type": "category",
            "boundaryGap": False,
            "data": data.get("labels") or ["00:00", "04:00", "08:00", "12:00", "16:00", "20:00", "24:00"],
            "axisLabel": dict(AXIS_LABEL),
            "axisLine": AXIS_LINE,
        },
        "yAxis": {
            "type": "value",
            "max": data.get("max") or 100,
            "axisLabel": {"color": "#fff", "formatter": "{value}%"},
            "splitLine": SPLIT_LINE,
        },
        "series": [
            {
                "name": s.get("name"),
                "type": "line",
                "stack": "Total",
                "areaStyle": {"opacity": 0.6, "color": _pick(AREA_COLORS, s, i)},
                "lineStyle": {"color": _pick(AREA_COLORS, s, i)},
                "data": s.get("values") or [],
            }
            for i, s in enumerate(series)
        ],
        "animationDuration": 1500,
    }


RADAR_COLORS = ["#00d4ff", "#ff6b6b"]
RADAR_INDICATORS = [
    {"name": name, "max": 100}
    for name in ("Quality", "Price", "Support", "Features", "Performance", "Design")
]
RADAR_DEFAULTS = [
    {"name": "Product A", "values": [85, 70, 90, 80, 95, 88]},
    {"name": "Product B", "values": [75, 90, 70, 85, 80, 92]},
]


def radar_option(data: Dict[str, Any]) -> Option:
    series = data.get("series") or RADAR_DEFAULTS
    return {
        "backgroundColor": "transparent",
        "legend": _legend(data, [s["name"] for s in RADAR_DEFAULTS]),
        "radar": {
            "indicator": data.get("indicators") or [dict(i) for i in RADAR_INDICATORS],
            "axisName": {"color": "#fff", "fontSize": 12},
            "splitArea": {"areaStyle": {"color": ["#333", "#222"]}},
        },
        "series": [{
            "type": "radar",
            "data": [
                {
                    "value": s.get("values") or [],
                    "name": s.get("name"),
                    "areaStyle": {"opacity": 0.4, "color": _pick(RADAR_COLORS, s, i)},
                    "lineStyle": {"color": _pick(RADAR_COLORS, s, i), "width": 2},
                    "itemStyle": {"color": _pick(RADAR_COLORS, s, i)},
                }
                for i, s in enumerate(series)
            ],
        }],
        "animationDuration": 1500,
    }


SCATTER_COLORS = ["#91CC75", "#FAC858", "#EE6666"]
SCATTER_DEFAULTS = [
    {"name": "Group A", "points": [[100, 40], [150, 55], [200, 60]]},
    {"name": "Group B", "points": [[350, 70], [400, 75], [450, 80]]},
    {"name": "Group C", "points": [[600, 85], [700, 90], [800, 95]]},
]


def scatter_option(data: Dict[str, Any]) -> Option:
    series = data.get("series") or SCATTER_DEFAULTS

    def axis(name: str) -> Dict[str, Any]:
        return {
            "type": "value",
            "name": name,
            "nameLocation": "middle",
            "nameTextStyle": {"color": "#fff"},
            "axisLabel": dict(AXIS_LABEL),
            "splitLine": SPLIT_LINE,
        }

    return {
        "backgroundColor": "transparent",
        "legend": _legend(data, [s["name"] for s in SCATTER_DEFAULTS]),
        "xAxis": axis(data.get("xAxisName") or "X Axis"),
        "yAxis": axis(data.get("yAxisName") or "Y Axis"),
        "series": [
            {
                "name": s.get("name"),
                "type": "scatter",
                "symbolSize": 15,
                "data": s.get("points") or [],
                "itemStyle": {"color": _pick(SCATTER_COLORS, s, i)},
            }
            for i, s in enumerate(series)
        ],
        "animationDuration": 1500,
    }


CHART_TEMPLATES: Dict[str, ChartTemplate] = {
    "bar": ChartTemplate("Bar Chart", "#00d4ff", bar_option),
    "line": ChartTemplate("Line Chart", "#00ff88", line_option),
    "pie": ChartTemplate("Pie Chart", "#ffd93d", pie_option),
    "area": ChartTemplate("Area Chart", "#e056fd", area_option),
    "radar": ChartTemplate("Radar Chart", "#ff6b6b", radar_option),
    "scatter": ChartTemplate("Scatter Chart", "#ff9f43", scatter_option),
}


def get_template(chart_type: str) -> ChartTemplate:
    """Get a chart template by type.

    Raises:
        ValueError: If the chart type is unknown.
    """
    if chart_type not in CHART_TEMPLATES:
        raise ValueError(f"Unknown chart type: {chart_type}. Available: {list(CHART_TEMPLATES.keys())}")
    return CHART_TEMPLATES[chart_type]
