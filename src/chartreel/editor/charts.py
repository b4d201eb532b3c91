"""Chart rendering for chart nodes.

Chart options use the ECharts layout (``xAxis``, ``yAxis``, ``series``,
``legend``, ``title``, ``radar``, ``visualMap``) and are drawn with
matplotlib on the headless Agg backend. Cartesian charts (bar, line, area,
scatter, candlestick, boxplot), pie and rose, radar, gauge, funnel, treemap,
heatmap and polar bars are supported.
"""

import copy
import logging
import math
from collections import OrderedDict
from typing import Any, Dict, List, Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Patch, Polygon, Rectangle, Wedge
from matplotlib.ticker import FuncFormatter
from PIL import Image

from ..models import ChartNode
from .colors import to_mpl

logger = logging.getLogger(__name__)

DPI = 100
DEFAULT_ANIMATION_MS = 1000
DEFAULT_UPDATE_MS = 300
GROWTH_STEPS = 12
PALETTE = [
    "#5470c6", "#91cc75", "#fac858", "#ee6666", "#73c0de",
    "#3ba272", "#fc8452", "#9a60b4", "#ea7ccc",
]
THEMES = {
    "dark": {"text": "#ffffff", "axis": "#555555", "grid": "#333333"},
    "light": {"text": "#333333", "axis": "#999999", "grid": "#dddddd"},
}


def _pt(px: float) -> float:
    """Convert a CSS pixel size to matplotlib points."""
    return px * 72.0 / DPI


def _as_list(value) -> List[Dict[str, Any]]:
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    return list(value)


def _first(value) -> Dict[str, Any]:
    items = _as_list(value)
    return items[0] if items else {}


def _color_value(value) -> Optional[str]:
    """Resolve a plain color or a gradient (first stop) to a color string."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        stops = value.get("colorStops") or []
        if stops:
            return stops[0].get("color")
    return None


def series_color(series: Dict[str, Any], index: int) -> str:
    """Color of a series: item style, then line style, then palette."""
    for key in ("itemStyle", "lineStyle", "areaStyle"):
        color = _color_value((series.get(key) or {}).get("color"))
        if color:
            return color
    return PALETTE[index % len(PALETTE)]


def item_color(item) -> Optional[str]:
    """Color set on a single data item, if any."""
    if isinstance(item, dict):
        return _color_value((item.get("itemStyle") or {}).get("color"))
    return None


def item_value(item) -> float:
    """Numeric value of a data item (number or ``{value: ...}``)."""
    if isinstance(item, dict):
        item = item.get("value", 0)
    if item is None:
        return 0.0
    return float(item)


def format_label(template: Optional[str], name: str = "", value: Any = "", percent: float = 0.0) -> str:
    """Expand ECharts label placeholders: {b} name, {c}/{value} value, {d} percent."""
    if not template:
        return f"{value}"
    return (
        template.replace("{b}", str(name))
        .replace("{c}", _number(value))
        .replace("{value}", _number(value))
        .replace("{d}", f"{percent:.1f}")
    )


def _number(value) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return f"{value:.1f}"
    return str(value)


def quantize(progress: float, steps: int = GROWTH_STEPS) -> float:
    """Snap a 0..1 progress value to ``steps`` levels so frames can be cached."""
    progress = min(1.0, max(0.0, progress))
    return math.ceil(progress * steps) / steps


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------


SERIES_TYPES = (
    "bar", "line", "scatter", "candlestick", "boxplot",
    "pie", "radar", "gauge", "funnel", "treemap", "heatmap",
)
MARKERS = {"circle": "o", "emptyCircle": "o", "rect": "s", "roundRect": "s", "triangle": "^", "diamond": "D", "pin": "v"}


def check_series(option: Dict[str, Any]) -> None:
    """Raise ``ValueError`` when an option uses a series type that cannot be drawn."""
    kinds = [s.get("type", "line") for s in _as_list(option.get("series"))]
    unknown = sorted({k for k in kinds if k not in SERIES_TYPES}, key=str)
    if unknown:
        raise ValueError(
            f"Unsupported series type: {', '.join(map(str, unknown))}. "
            f"Supported: {', '.join(SERIES_TYPES)}"
        )


def value_limits(values, axis_option: Dict[str, Any], margin: float = 0.05) -> Tuple[float, float]:
    """Value axis range for the fully grown data.

    Explicit numeric ``min``/``max`` win. Otherwise the range covers the data
    and zero (unless ``scale`` is set) with a small headroom.
    """
    values = [float(v) for v in values if np.isfinite(v)]
    scale = bool(axis_option.get("scale"))
    lo = min(values, default=0.0)
    hi = max(values, default=1.0)
    if not scale:
        lo, hi = min(lo, 0.0), max(hi, 0.0)

    explicit_lo, explicit_hi = axis_option.get("min"), axis_option.get("max")
    if isinstance(explicit_lo, (int, float)):
        lo = float(explicit_lo)
    if isinstance(explicit_hi, (int, float)):
        hi = float(explicit_hi)
    span = (hi - lo) or 1.0
    if not isinstance(explicit_lo, (int, float)) and (lo < 0 or scale):
        lo -= span * margin
    if not isinstance(explicit_hi, (int, float)):
        hi += span * margin
    if hi <= lo:
        hi = lo + 1.0
    return lo, hi


def grow_towards(values, floor: float, progress: float):
    """Move values out of ``floor`` by ``progress``; the floor is where bars start."""
    return floor + (np.asarray(values, dtype=float) - floor) * progress


def _floor(limits: Tuple[float, float]) -> float:
    lo, hi = limits
    return min(max(lo, 0.0), hi)


def _style_axis(ax, axis_option: Dict[str, Any], which: str, palette: Dict[str, str]) -> None:
    label = axis_option.get("axisLabel") or {}
    line = (axis_option.get("axisLine") or {}).get("lineStyle") or {}
    split_line = axis_option.get("splitLine") or {}
    split = split_line.get("lineStyle") or {}

    text_color = to_mpl(label.get("color", palette["text"]))
    ax.tick_params(axis=which, colors=text_color, labelsize=_pt(label.get("fontSize", 12)))
    if label.get("rotate"):
        ax.tick_params(axis=which, labelrotation=float(label["rotate"]))

    spines = ("bottom", "top") if which == "x" else ("left", "right")
    for name in spines:
        ax.spines[name].set_color(to_mpl(line.get("color", palette["axis"])))
    if axis_option.get("show") is False:
        (ax.xaxis if which == "x" else ax.yaxis).set_visible(False)
        for name in spines:
            ax.spines[name].set_visible(False)
        return

    if axis_option.get("type", "value") == "value":
        if split_line.get("show", True):
            linestyle = "--" if split.get("type") == "dashed" else "-"
            ax.grid(True, axis=which, color=to_mpl(split.get("color", palette["grid"])), linestyle=linestyle)
        formatter = label.get("formatter")
        if isinstance(formatter, str):
            axis = ax.xaxis if which == "x" else ax.yaxis
            axis.set_major_formatter(FuncFormatter(lambda v, _pos: format_label(formatter, value=float(v))))

    name = axis_option.get("name")
    if name:
        name_style = axis_option.get("nameTextStyle") or {}
        setter = ax.set_xlabel if which == "x" else ax.set_ylabel
        setter(name, color=to_mpl(name_style.get("color", palette["text"])), fontsize=_pt(name_style.get("fontSize", 12)))


def _rows(data, width: int) -> np.ndarray:
    """Fixed-width numeric rows (candlestick or boxplot items)."""
    rows = [row.get("value", []) if isinstance(row, dict) else row for row in data]
    return np.array([[item_value(v) for v in row[:width]] for row in rows if len(row) >= width], dtype=float).reshape(-1, width)


def _draw_cartesian(fig: Figure, option: Dict[str, Any], progress: float, palette: Dict[str, str]):
    ax = fig.add_subplot(111)
    ax.set_facecolor((0, 0, 0, 0))
    for name in ("top", "right"):
        ax.spines[name].set_visible(False)

    x_axis = _first(option.get("xAxis"))
    y_axes = _as_list(option.get("yAxis")) or [{}]
    horizontal = y_axes[0].get("type") == "category"
    category_axis = y_axes[0] if horizontal else x_axis
    categories = list(category_axis.get("data") or [])
    series_list = _as_list(option.get("series"))

    if not categories:
        longest = max((len(s.get("data") or []) for s in series_list if s.get("type") != "scatter"), default=0)
        categories = [str(i + 1) for i in range(longest)]
    positions = np.arange(len(categories), dtype=float)

    bar_groups: List[str] = []
    for i, series in enumerate(series_list):
        if series.get("type") == "bar":
            group = series.get("stack") or f"__bar{i}"
            if group not in bar_groups:
                bar_groups.append(group)
    group_width = 0.8 / max(len(bar_groups), 1)

    # A second value axis on the right for series with yAxisIndex 1
    layers = {0: ax}
    if not horizontal and len(y_axes) > 1 and any(s.get("yAxisIndex") == 1 for s in series_list):
        layers[1] = ax.twinx()
        layers[1].set_facecolor((0, 0, 0, 0))
        layers[1].spines["top"].set_visible(False)

    # Full-size data first: the axes are fixed by it so growth is visible
    stacks: Dict[Tuple[int, str], np.ndarray] = {}
    extents: Dict[int, List[float]] = {index: [] for index in layers}
    x_extent: List[float] = []
    prepared = []
    for series in series_list:
        kind = series.get("type", "line")
        layer = series.get("yAxisIndex", 0) if series.get("yAxisIndex", 0) in layers else 0
        data = series.get("data") or []
        if kind == "scatter":
            pairs = [p.get("value", [0, 0]) if isinstance(p, dict) else p for p in data]
            points = np.array([[item_value(p[0]), item_value(p[1])] for p in pairs], dtype=float).reshape(-1, 2)
            x_extent.extend(points[:, 0])
            extents[layer].extend(points[:, 1])
            prepared.append((layer, points, None))
        elif kind in ("candlestick", "boxplot"):
            rows = _rows(data, 4 if kind == "candlestick" else 5)[: len(positions)]
            extents[layer].extend(rows.ravel())
            prepared.append((layer, rows, None))
        else:
            values = np.array([item_value(v) for v in data], dtype=float)[: len(positions)]
            base = np.zeros(len(values))
            stack_key = series.get("stack")
            if stack_key:
                running = stacks.setdefault((layer, stack_key), np.zeros(len(positions)))
                base = running[: len(values)].copy()
                running[: len(values)] += values
            extents[layer].extend(base)
            extents[layer].extend(base + values)
            prepared.append((layer, values, base))

    limits = {
        layer: value_limits(extents[layer], x_axis if horizontal else (y_axes[layer] if layer < len(y_axes) else {}))
        for layer in layers
    }

    handles, labels = [], []
    for i, (series, (layer, data, base)) in enumerate(zip(series_list, prepared)):
        target = layers[layer]
        floor = _floor(limits[layer])
        kind = series.get("type", "line")
        color = to_mpl(series_color(series, i))
        name = series.get("name", "")
        style = series.get("itemStyle") or {}
        label_option = series.get("label") or {}

        if kind == "scatter":
            size = float(series.get("symbolSize", 10)) ** 2 * progress
            marker = MARKERS.get(series.get("symbol", "circle"), "o")
            handle = target.scatter(data[:, 0], data[:, 1], s=size, color=color, marker=marker, label=name)

        elif kind == "candlestick":
            up = to_mpl(_color_value(style.get("color")) or "#eb5454")
            down = to_mpl(_color_value(style.get("color0")) or "#47b262")
            up_border = to_mpl(style.get("borderColor") or _color_value(style.get("color")) or "#eb5454")
            down_border = to_mpl(style.get("borderColor0") or _color_value(style.get("color0")) or "#47b262")
            for x, (open_, close, low, high) in zip(positions, data):
                rising = close >= open_
                wick_low, wick_high, body_low, body_high = grow_towards([low, high, min(open_, close), max(open_, close)], floor, progress)
                target.vlines(x, wick_low, wick_high, color=up_border if rising else down_border, linewidth=1.5)
                target.add_patch(Rectangle(
                    (x - 0.3, body_low), 0.6, max(body_high - body_low, 1e-9),
                    facecolor=up if rising else down,
                    edgecolor=up_border if rising else down_border,
                    linewidth=1,
                ))
            handle = Patch(facecolor=up, edgecolor=up_border)

        elif kind == "boxplot":
            fill = to_mpl(_color_value(style.get("color")) or color)
            border = to_mpl(style.get("borderColor") or _color_value(style.get("color")) or color)
            width = float(style.get("borderWidth", 2))
            for x, row in zip(positions, data):
                low, q1, median, q3, high = grow_towards(row, floor, progress)
                target.vlines(x, low, q1, color=border, linewidth=_pt(width))
                target.vlines(x, q3, high, color=border, linewidth=_pt(width))
                target.hlines([low, high], x - 0.15, x + 0.15, color=border, linewidth=_pt(width))
                target.add_patch(Rectangle((x - 0.25, q1), 0.5, q3 - q1, facecolor=fill, edgecolor=border, linewidth=_pt(width), alpha=0.9))
                target.hlines(median, x - 0.25, x + 0.25, color=border, linewidth=_pt(width) * 1.5)
            handle = Patch(facecolor=fill, edgecolor=border)

        elif kind == "bar":
            xs = positions[: len(data)]
            group = series.get("stack") or f"__bar{i}"
            item_colors = [item_color(v) for v in (series.get("data") or [])[: len(data)]]
            if any(item_colors):
                color = [to_mpl(c) if c else color for c in item_colors]
            offset = (bar_groups.index(group) - (len(bar_groups) - 1) / 2) * group_width
            bottom = grow_towards(base, floor, progress)
            top = grow_towards(base + data, floor, progress)
            if horizontal:
                handle = target.barh(xs + offset, top - bottom, height=group_width, left=bottom, color=color, label=name)
            else:
                handle = target.bar(xs + offset, top - bottom, width=group_width, bottom=bottom, color=color, label=name)
            if label_option.get("show") and progress >= 1.0:
                target.bar_label(
                    handle,
                    labels=[format_label(label_option.get("formatter"), value=v) for v in data],
                    color=to_mpl(label_option.get("color", palette["text"])),
                    fontsize=_pt(label_option.get("fontSize", 12)),
                )

        else:
            xs = positions[: len(data)]
            line_style = series.get("lineStyle") or {}
            lows = grow_towards(base, floor, progress)
            ys = grow_towards(base + data, floor, progress)
            if horizontal:
                (handle,) = target.plot(ys, xs, color=color, linewidth=line_style.get("width", 2), label=name)
            else:
                (handle,) = target.plot(xs, ys, color=color, linewidth=line_style.get("width", 2), label=name)
            symbol = series.get("symbol", "emptyCircle")
            if symbol != "none":
                points = (ys, xs) if horizontal else (xs, ys)
                target.scatter(*points, s=float(series.get("symbolSize", 4)) ** 2, color=color, marker=MARKERS.get(symbol, "o"), zorder=3)
            area = series.get("areaStyle")
            if area is not None and not horizontal:
                target.fill_between(xs, lows, ys, color=color, alpha=float(area.get("opacity", 0.7)), linewidth=0)

        handles.append(handle)
        labels.append(name)

    if horizontal:
        ax.set_yticks(positions, categories)
    elif categories and not x_extent:
        ax.set_xticks(positions, categories)
    _style_axis(ax, x_axis, "x", palette)
    _style_axis(ax, y_axes[0], "y", palette)
    if 1 in layers:
        _style_axis(layers[1], y_axes[1], "y", palette)
        layers[1].grid(False)

    for layer, target in layers.items():
        if horizontal:
            target.set_xlim(*limits[layer])
        else:
            target.set_ylim(*limits[layer])
    if x_extent:
        ax.set_xlim(*value_limits(x_extent, x_axis))
    elif horizontal:
        ax.set_ylim(-0.5, len(positions) - 0.5)
    elif x_axis.get("boundaryGap") is False and len(positions) > 1:
        ax.set_xlim(positions[0], positions[-1])
    elif len(positions):
        ax.set_xlim(-0.5, len(positions) - 0.5)
    return handles, labels


def _radius(value, default: float) -> float:
    """ECharts radius (percent of half the shorter side) as a 0..1 fraction."""
    if isinstance(value, str) and value.endswith("%"):
        return float(value[:-1]) / 100.0
    if isinstance(value, (int, float)):
        return float(value) / 100.0 if value > 1 else float(value)
    return default


def _size(value, total: float, default: float) -> float:
    """ECharts length: pixels, or a percentage string of ``total``."""
    if isinstance(value, str) and value.endswith("%"):
        return float(value[:-1]) / 100.0 * total
    if isinstance(value, (int, float)):
        return float(value)
    return default


def _canvas_axes(fig: Figure):
    """Axes spanning the figure in pixel units, origin bottom left."""
    width, height = (float(v) for v in fig.get_size_inches() * DPI)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, width)
    ax.set_ylim(0, height)
    ax.axis("off")
    return ax, width, height


def _region(series: Dict[str, Any], width: float, height: float, margin: Tuple[float, float] = (80, 60)):
    """Box of a series from its left/top/right/bottom/width/height, as (x, y, w, h) with y up."""
    left = _size(series.get("left"), width, margin[0])
    right = _size(series.get("right"), width, margin[0])
    top = _size(series.get("top"), height, margin[1])
    bottom = _size(series.get("bottom"), height, margin[1])
    box_width = _size(series.get("width"), width, width - left - right)
    box_height = _size(series.get("height"), height, height - top - bottom)
    return left, height - top - box_height, max(box_width, 0.0), max(box_height, 0.0)


def _draw_pie(fig: Figure, option: Dict[str, Any], progress: float, palette: Dict[str, str]):
    ax = fig.add_subplot(111)
    ax.set_aspect("equal")
    ax.set_xlim(-1, 1)
    ax.set_ylim(-1, 1)
    ax.axis("off")

    series = next(s for s in _as_list(option.get("series")) if s.get("type") == "pie")
    items = series.get("data") or []
    values = np.array([item_value(item) for item in items], dtype=float)
    total = values.sum() or 1.0
    names = [item.get("name", "") if isinstance(item, dict) else "" for item in items]
    colors = [
        to_mpl(item_color(item) or PALETTE[i % len(PALETTE)])
        for i, item in enumerate(items)
    ]

    radius = series.get("radius", "75%")
    if isinstance(radius, (list, tuple)):
        inner, outer = _radius(radius[0], 0.0), _radius(radius[1], 0.75)
    else:
        inner, outer = 0.0, _radius(radius, 0.75)

    center = series.get("center") or ["50%", "50%"]
    cx = _radius(center[0], 0.5) * 2.0 - 1.0
    cy = 1.0 - _radius(center[1], 0.5) * 2.0

    item_style = series.get("itemStyle") or {}
    wedge_props = {"width": outer - inner} if inner > 0 else {}
    if item_style.get("borderColor"):
        wedge_props["edgecolor"] = to_mpl(item_style["borderColor"])
        wedge_props["linewidth"] = item_style.get("borderWidth", 1)

    label_option = series.get("label") or {}
    text_props = {"color": to_mpl(label_option.get("color", palette["text"])), "fontsize": _pt(label_option.get("fontSize", 12))}
    show_labels = label_option.get("show", True) and progress >= 1.0
    centered = label_option.get("position") == "center"
    label_texts = [
        format_label(label_option.get("formatter", "{b}"), name=n, value=v, percent=v / total * 100.0)
        for n, v in zip(names, values)
    ]

    if series.get("roseType"):
        wedges = _draw_rose(ax, series, values, colors, (cx, cy), inner, outer, progress, wedge_props)
        if show_labels and not centered:
            for wedge, text in zip(wedges, label_texts):
                middle = math.radians((wedge.theta1 + wedge.theta2) / 2)
                reach = wedge.r + 0.08
                ax.text(cx + reach * math.cos(middle), cy + reach * math.sin(middle), text, ha="center", va="center", **text_props)
    else:
        wedges, *_ = ax.pie(
            values / total * progress,
            normalize=False,
            radius=outer,
            center=(cx, cy),
            colors=colors,
            startangle=90,
            counterclock=False,
            wedgeprops=wedge_props,
            labels=label_texts if show_labels and not centered else None,
            textprops=text_props,
        )
    if show_labels and centered:
        # ECharts stacks every centre label on the same spot; draw it once
        text = label_option.get("formatter") if isinstance(label_option.get("formatter"), str) else ""
        if "{" in text and label_texts:
            text = label_texts[0]
        ax.text(cx, cy, text, ha="center", va="center", fontweight="bold", **text_props)
    return list(wedges), names


def _draw_rose(ax, series, values, colors, center, inner, outer, progress, wedge_props):
    """Nightingale rose: radius follows the value; ``area`` keeps equal angles."""
    count = len(values)
    if count == 0:
        return []
    peak = values.max() or 1.0
    total = values.sum() or 1.0
    equal = series.get("roseType") == "area"
    base = max(inner, 0.1 * outer)
    props = {k: v for k, v in wedge_props.items() if k != "width"}
    wedges = []
    angle = 90.0
    for value, color in zip(values, colors):
        sweep = (360.0 / count if equal else 360.0 * value / total) * progress
        reach = base + (outer - base) * (value / peak) * progress
        wedge = Wedge(center, reach, angle - sweep, angle, width=reach - inner if inner > 0 else None, facecolor=color, **props)
        ax.add_patch(wedge)
        wedges.append(wedge)
        angle -= sweep
    return wedges


def _draw_radar(fig: Figure, option: Dict[str, Any], progress: float, palette: Dict[str, str]):
    radar = _first(option.get("radar"))
    indicators = radar.get("indicator") or []
    count = len(indicators)
    angles = np.linspace(0, 2 * np.pi, count, endpoint=False)
    maxima = np.array([float(ind.get("max", 100)) or 1.0 for ind in indicators])

    ax = fig.add_subplot(111, projection="polar")
    ax.set_facecolor((0, 0, 0, 0))
    ax.set_theta_offset(np.pi / 2)
    ax.set_theta_direction(-1)
    ax.set_ylim(0, 1)
    ax.set_yticklabels([])
    ax.grid(color=to_mpl(palette["grid"]))
    ax.spines["polar"].set_color(to_mpl(palette["axis"]))
    if count == 0:
        return [], []

    name_style = radar.get("axisName") or {}
    ax.set_xticks(angles, [ind.get("name", "") for ind in indicators])
    ax.tick_params(axis="x", colors=to_mpl(name_style.get("color", palette["text"])), labelsize=_pt(name_style.get("fontSize", 12)))

    handles, labels = [], []
    index = 0
    for series in _as_list(option.get("series")):
        if series.get("type") != "radar":
            continue
        for item in series.get("data") or []:
            raw = item.get("value", []) if isinstance(item, dict) else item
            values = np.array([float(v) for v in raw][:count])
            if not len(values):
                continue
            values = values / maxima[: len(values)] * progress
            closed_angles = np.append(angles[: len(values)], angles[0])
            closed_values = np.append(values, values[0])
            color = to_mpl(series_color(item if isinstance(item, dict) else {}, index))
            line_style = (item.get("lineStyle") if isinstance(item, dict) else None) or {}
            (handle,) = ax.plot(closed_angles, closed_values, color=color, linewidth=line_style.get("width", 2))
            area = (item.get("areaStyle") if isinstance(item, dict) else None) or series.get("areaStyle")
            if area is not None:
                ax.fill(closed_angles, closed_values, color=color, alpha=float(area.get("opacity", 0.3)))
            handles.append(handle)
            labels.append(item.get("name", "") if isinstance(item, dict) else "")
            index += 1
    return handles, labels


def _draw_gauge(fig: Figure, option: Dict[str, Any], progress: float, palette: Dict[str, str]):
    """Arc gauges: the axis band, an optional progress arc, ticks, pointer and readout."""
    ax, width, height = _canvas_axes(fig)
    handles, labels = [], []
    gauges = [s for s in _as_list(option.get("series")) if s.get("type") == "gauge"]
    for index, series in enumerate(gauges):
        half = min(width, height) / 2.0
        center = series.get("center") or ["50%", "50%"]
        cx = _size(center[0], width, width / 2.0)
        cy = height - _size(center[1], height, height / 2.0)
        radius = _size(series.get("radius", "75%"), half, half * 0.75)
        start = float(series.get("startAngle", 225))
        end = float(series.get("endAngle", -45))
        lo = float(series.get("min", 0))
        hi = float(series.get("max", 100))
        span = (hi - lo) or 1.0

        def angle(value: float) -> float:
            return start - (start - end) * (min(max(value, lo), hi) - lo) / span

        def arc(a0: float, a1: float, band: float, color) -> None:
            ax.add_patch(Wedge((cx, cy), radius, min(a0, a1), max(a0, a1), width=band, facecolor=color, linewidth=0))

        line_style = (series.get("axisLine") or {}).get("lineStyle") or {}
        band = float(line_style.get("width", 10))
        previous = 0.0
        for stop, segment in line_style.get("color") or [[1, palette["grid"]]]:
            arc(start - (start - end) * previous, start - (start - end) * float(stop), band, to_mpl(segment))
            previous = float(stop)

        data = _as_list(series.get("data"))
        item = data[0] if data else {}
        if not isinstance(item, dict):
            item = {"value": item}
        value = item_value(item) if "value" in item else lo
        shown = lo + (value - lo) * progress
        color = to_mpl(series_color(series, index))
        progress_style = series.get("progress") or {}
        if progress_style.get("show"):
            arc(start, angle(shown), float(progress_style.get("width", band)), color)

        split = series.get("splitLine") or {}
        split_style = split.get("lineStyle") or {}
        label_style = series.get("axisLabel") or {}
        splits = int(series.get("splitNumber", 10))
        for k in range(splits + 1):
            tick = lo + span * k / max(splits, 1)
            theta = math.radians(angle(tick))
            ux, uy = math.cos(theta), math.sin(theta)
            outer = radius - band - 2
            inner = outer - _size(split.get("length", 10), radius, 10)
            if split.get("show", True):
                ax.plot(
                    [cx + ux * inner, cx + ux * outer], [cy + uy * inner, cy + uy * outer],
                    color=to_mpl(split_style.get("color", palette["axis"])),
                    linewidth=_pt(split_style.get("width", 2)),
                )
            if label_style.get("show", True):
                reach = inner - float(label_style.get("distance", 15))
                ax.text(
                    cx + ux * reach, cy + uy * reach,
                    format_label(label_style.get("formatter") if isinstance(label_style.get("formatter"), str) else "{value}", value=float(tick)),
                    ha="center", va="center",
                    color=to_mpl(label_style.get("color", palette["text"])),
                    fontsize=_pt(label_style.get("fontSize", 12)),
                )

        pointer = series.get("pointer") or {}
        if pointer.get("show", True):
            length = _size(pointer.get("length", "60%"), radius, radius * 0.6)
            theta = math.radians(angle(shown))
            pointer_color = to_mpl(_color_value((pointer.get("itemStyle") or {}).get("color")) or color)
            thickness = float(pointer.get("width", 6))
            ax.plot([cx, cx + math.cos(theta) * length], [cy, cy + math.sin(theta) * length], color=pointer_color, linewidth=_pt(thickness), solid_capstyle="round")
            ax.add_patch(Circle((cx, cy), thickness, facecolor=pointer_color))

        title = series.get("title") or {}
        if item.get("name") and title.get("show", True):
            offset = title.get("offsetCenter") or [0, "20%"]
            ax.text(
                cx + _size(offset[0], radius, 0.0), cy - _size(offset[1], radius, radius * 0.2), item["name"],
                ha="center", va="center",
                color=to_mpl(title.get("color", palette["text"])),
                fontsize=_pt(title.get("fontSize", 16)),
            )

        detail = series.get("detail") or {}
        if detail.get("show", True):
            offset = detail.get("offsetCenter") or [0, "40%"]
            formatter = detail.get("formatter") if isinstance(detail.get("formatter"), str) else "{value}"
            ax.text(
                cx + _size(offset[0], radius, 0.0), cy - _size(offset[1], radius, radius * 0.4),
                format_label(formatter, name=item.get("name", ""), value=float(round(shown, 1))),
                ha="center", va="center", fontweight="bold",
                color=to_mpl(detail.get("color", palette["text"])),
                fontsize=_pt(detail.get("fontSize", 30)),
            )
        handles.append(Patch(facecolor=color))
        labels.append(item.get("name", series.get("name", "")))
    return handles, labels


def _draw_funnel(fig: Figure, option: Dict[str, Any], progress: float, palette: Dict[str, str]):
    ax, width, height = _canvas_axes(fig)
    series = next(s for s in _as_list(option.get("series")) if s.get("type") == "funnel")
    left, bottom, region_width, region_height = _region(series, width, height)

    items = list(series.get("data") or [])
    order = series.get("sort", "descending")
    if order in ("descending", "ascending"):
        items.sort(key=item_value, reverse=order == "descending")
    if not items:
        return [], []
    values = [item_value(item) for item in items]
    lo = float(series.get("min", 0))
    hi = float(series.get("max", 100))
    min_size = _size(series.get("minSize", "0%"), region_width, 0.0)
    max_size = _size(series.get("maxSize", "100%"), region_width, region_width)

    def size(value: float) -> float:
        share = (min(max(value, lo), hi) - lo) / ((hi - lo) or 1.0)
        return (min_size + (max_size - min_size) * share) * progress

    gap = float(series.get("gap", 0))
    step = (region_height - gap * (len(items) - 1)) / len(items)
    cx = left + region_width / 2.0
    style = series.get("itemStyle") or {}
    label_option = series.get("label") or {}
    inside = label_option.get("position", "outside") in ("inside", "inner", "center")

    handles, labels = [], []
    for i, (item, value) in enumerate(zip(items, values)):
        name = item.get("name", "") if isinstance(item, dict) else ""
        upper = size(value)
        lower = size(values[i + 1]) if i + 1 < len(values) else min_size * progress
        y_top = bottom + region_height - i * (step + gap)
        y_bottom = y_top - step
        polygon = Polygon(
            [(cx - upper / 2, y_top), (cx + upper / 2, y_top), (cx + lower / 2, y_bottom), (cx - lower / 2, y_bottom)],
            closed=True,
            facecolor=to_mpl(item_color(item) or PALETTE[i % len(PALETTE)]),
            edgecolor=to_mpl(style.get("borderColor", "transparent")),
            linewidth=_pt(style.get("borderWidth", 0)),
        )
        ax.add_patch(polygon)
        if label_option.get("show", True) and progress >= 1.0:
            ax.text(
                cx if inside else cx + max(upper, lower) / 2 + 10, (y_top + y_bottom) / 2,
                format_label(label_option.get("formatter", "{b}"), name=name, value=value),
                ha="center" if inside else "left", va="center",
                color=to_mpl(label_option.get("color", palette["text"])),
                fontsize=_pt(label_option.get("fontSize", 12)),
            )
        handles.append(polygon)
        labels.append(name)
    return handles, labels


def _node_value(item) -> float:
    children = item.get("children") if isinstance(item, dict) else None
    if children and (not isinstance(item, dict) or item.get("value") is None):
        return sum(_node_value(child) for child in children)
    return item_value(item)


def _worst(row: List[float], length: float) -> float:
    total = sum(row)
    if total <= 0 or length <= 0:
        return float("inf")
    return max((max(length ** 2 * r / total ** 2, total ** 2 / (length ** 2 * r)) for r in row if r > 0), default=float("inf"))


def squarify(values: Sequence[float], x: float, y: float, width: float, height: float) -> List[Tuple[float, float, float, float]]:
    """Squarified treemap layout.

    Args:
        values: Item sizes, laid out in the given order (largest first gives the squarest cells).
        x, y, width, height: Box to fill.

    Returns:
        One ``(x, y, w, h)`` rectangle per value.
    """
    total = float(sum(values))
    if total <= 0:
        return [(x, y, 0.0, 0.0) for _ in values]
    remaining = [v * width * height / total for v in values]
    rects = []
    while remaining:
        short = min(width, height)
        row = [remaining.pop(0)]
        while remaining and _worst(row + [remaining[0]], short) <= _worst(row, short):
            row.append(remaining.pop(0))
        row_area = sum(row)
        if width >= height:
            column = row_area / height if height else 0.0
            offset = y
            for area in row:
                cell = area / column if column else 0.0
                rects.append((x, offset, column, cell))
                offset += cell
            x, width = x + column, width - column
        else:
            band = row_area / width if width else 0.0
            offset = x
            for area in row:
                cell = area / band if band else 0.0
                rects.append((offset, y, cell, band))
                offset += cell
            y, height = y + band, height - band
    return rects


def _draw_treemap(fig: Figure, option: Dict[str, Any], progress: float, palette: Dict[str, str]):
    ax, width, height = _canvas_axes(fig)
    series = next(s for s in _as_list(option.get("series")) if s.get("type") == "treemap")
    items = list(series.get("data") or [])
    values = [_node_value(item) for item in items]
    order = sorted(range(len(items)), key=lambda i: values[i], reverse=True)
    x, y, box_width, box_height = _region(series, width, height, margin=(10, 10))
    cells = squarify([values[i] for i in order], x, y, box_width, box_height)

    style = series.get("itemStyle") or {}
    gap = float(style.get("gapWidth", style.get("borderWidth", 0)))
    label_option = series.get("label") or {}
    handles, labels = [None] * len(items), [""] * len(items)
    for i, (cell_x, cell_y, cell_width, cell_height) in zip(order, cells):
        item = items[i] if isinstance(items[i], dict) else {"value": items[i]}
        grown_width = max(cell_width - gap, 0.0) * progress
        grown_height = max(cell_height - gap, 0.0) * progress
        center_x, center_y = cell_x + cell_width / 2, cell_y + cell_height / 2
        rect = Rectangle(
            (center_x - grown_width / 2, center_y - grown_height / 2), grown_width, grown_height,
            facecolor=to_mpl(item_color(item) or PALETTE[i % len(PALETTE)]),
            edgecolor=to_mpl(style.get("borderColor", "transparent")),
            linewidth=_pt(style.get("borderWidth", 0)),
        )
        ax.add_patch(rect)
        if label_option.get("show", True) and progress >= 1.0 and cell_width > 40 and cell_height > 24:
            ax.text(
                center_x, center_y,
                format_label(label_option.get("formatter", "{b}"), name=item.get("name", ""), value=values[i]),
                ha="center", va="center", multialignment="center",
                color=to_mpl(label_option.get("color", palette["text"])),
                fontsize=_pt(label_option.get("fontSize", 12)),
            )
        handles[i] = rect
        labels[i] = item.get("name", "")
    return handles, labels


def _draw_heatmap(fig: Figure, option: Dict[str, Any], progress: float, palette: Dict[str, str]):
    ax = fig.add_subplot(111)
    ax.set_facecolor((0, 0, 0, 0))
    for name in ("top", "right"):
        ax.spines[name].set_visible(False)

    x_axis = _first(option.get("xAxis"))
    y_axis = _first(option.get("yAxis"))
    series = next(s for s in _as_list(option.get("series")) if s.get("type") == "heatmap")
    points = [p.get("value", []) if isinstance(p, dict) else p for p in series.get("data") or []]
    points = [p for p in points if len(p) >= 3]

    columns = len(x_axis.get("data") or []) or 1 + max((int(p[0]) for p in points), default=0)
    rows = len(y_axis.get("data") or []) or 1 + max((int(p[1]) for p in points), default=0)
    grid = np.full((rows, columns), np.nan)
    for p in points:
        column, row = int(round(item_value(p[0]))), int(round(item_value(p[1])))
        if 0 <= column < columns and 0 <= row < rows:
            grid[row, column] = item_value(p[2])

    visual = _first(option.get("visualMap"))
    finite = grid[np.isfinite(grid)]
    vmin = float(visual.get("min", finite.min() if finite.size else 0.0))
    vmax = float(visual.get("max", finite.max() if finite.size else 1.0))
    if vmax <= vmin:
        vmax = vmin + 1.0
    colors = (visual.get("inRange") or {}).get("color") or ["#f6efa6", "#d88273", "#bf444c"]
    cmap = LinearSegmentedColormap.from_list("visualMap", [to_mpl(c) for c in _as_list(colors)])

    mesh = ax.pcolormesh(
        np.arange(columns + 1) - 0.5, np.arange(rows + 1) - 0.5, grid,
        cmap=cmap, vmin=vmin, vmax=vmax, alpha=max(progress, 0.0),
        edgecolors=to_mpl(option.get("backgroundColor") if isinstance(option.get("backgroundColor"), str) else "transparent"),
        linewidth=0.5,
    )
    ax.set_xticks(range(columns), list(x_axis.get("data") or [str(i) for i in range(columns)]))
    ax.set_yticks(range(rows), list(y_axis.get("data") or [str(i) for i in range(rows)]))
    _style_axis(ax, x_axis, "x", palette)
    _style_axis(ax, y_axis, "y", palette)

    label_option = series.get("label") or {}
    if label_option.get("show") and progress >= 1.0:
        for row in range(rows):
            for column in range(columns):
                if np.isfinite(grid[row, column]):
                    ax.text(
                        column, row, format_label(label_option.get("formatter"), value=float(grid[row, column])),
                        ha="center", va="center",
                        color=to_mpl(label_option.get("color", palette["text"])),
                        fontsize=_pt(label_option.get("fontSize", 10)),
                    )

    if visual and visual.get("show", True):
        bar = fig.colorbar(mesh, ax=ax, orientation=visual.get("orient", "vertical"), fraction=0.05, pad=0.1)
        text_color = to_mpl((visual.get("textStyle") or {}).get("color", palette["text"]))
        bar.ax.tick_params(colors=text_color, labelsize=_pt(10))
        bar.outline.set_edgecolor(to_mpl(palette["axis"]))
    return [], []


def _draw_polar_bar(fig: Figure, option: Dict[str, Any], progress: float, palette: Dict[str, str]):
    """Bars on a polar grid: categories on the radius, values swept around the angle axis."""
    ax = fig.add_subplot(111, projection="polar")
    ax.set_facecolor((0, 0, 0, 0))
    angle_axis = _first(option.get("angleAxis"))
    radius_axis = _first(option.get("radiusAxis"))
    polar = _first(option.get("polar"))
    series_list = [s for s in _as_list(option.get("series")) if s.get("coordinateSystem") == "polar"]

    categories = list(radius_axis.get("data") or [])
    if not categories:
        categories = [str(i + 1) for i in range(max((len(s.get("data") or []) for s in series_list), default=0))]
    count = max(len(categories), 1)
    values = [np.array([item_value(v) for v in s.get("data") or []], dtype=float)[:count] for s in series_list]
    peak = float(angle_axis.get("max", max((v.max() for v in values if v.size), default=1.0)) or 1.0)

    ax.set_theta_offset(math.radians(float(angle_axis.get("startAngle", 90))))
    ax.set_theta_direction(-1 if angle_axis.get("clockwise", True) else 1)
    radius = polar.get("radius") or ["0%", "75%"]
    inner, outer = (_radius(radius[0], 0.0), _radius(radius[1], 0.75)) if isinstance(radius, (list, tuple)) else (0.0, _radius(radius, 0.75))
    ax.set_ylim(0, count)
    if outer > inner:
        ax.set_rorigin(-count * inner / (outer - inner))

    ticks = np.linspace(0, 2 * np.pi, 8, endpoint=False)
    ax.set_xticks(ticks, [_number(float(round(peak * i / 8, 1))) for i in range(8)])
    ax.set_yticks(np.arange(count) + 0.5, categories)
    ax.tick_params(colors=to_mpl(palette["text"]), labelsize=_pt(12))
    ax.grid(color=to_mpl(palette["grid"]))
    ax.spines["polar"].set_color(to_mpl(palette["axis"]))

    handles, labels = [], []
    band = 0.7 / max(len(series_list), 1)
    for i, (series, data) in enumerate(zip(series_list, values)):
        color = to_mpl(series_color(series, i))
        item_colors = [item_color(v) for v in (series.get("data") or [])[: len(data)]]
        if any(item_colors):
            color = [to_mpl(c) if c else color for c in item_colors]
        rows = np.arange(len(data)) + 0.5 + (i - (len(series_list) - 1) / 2) * band
        sweep = data / peak * 2 * np.pi * progress
        handle = ax.barh(rows, sweep, height=band, left=0, color=color)
        label_option = series.get("label") or {}
        if label_option.get("show") and progress >= 1.0:
            for row, theta, value in zip(rows, sweep, data):
                ax.text(theta, row, " " + format_label(label_option.get("formatter"), value=value), ha="left", va="center",
                        color=to_mpl(label_option.get("color", palette["text"])), fontsize=_pt(label_option.get("fontSize", 12)))
        handles.append(handle)
        labels.append(series.get("name", ""))
    return handles, labels


def _draw_title(fig: Figure, option: Dict[str, Any], palette: Dict[str, str]) -> bool:
    title = _first(option.get("title"))
    text = title.get("text")
    if not text:
        return False
    style = title.get("textStyle") or {}
    align = title.get("left", "center")
    x = {"left": 0.02, "right": 0.98}.get(align, 0.5)
    fig.suptitle(
        text,
        x=x,
        ha={"left": "left", "right": "right"}.get(align, "center"),
        color=to_mpl(style.get("color", palette["text"])),
        fontsize=_pt(style.get("fontSize", 18)),
        fontweight="bold",
    )
    return True


def _draw_legend(fig: Figure, option: Dict[str, Any], handles, labels, palette: Dict[str, str]) -> bool:
    legend = option.get("legend")
    if legend is None or legend.get("show") is False:
        return False
    wanted = legend.get("data")
    pairs = [(h, l) for h, l in zip(handles, labels) if h is not None and l and (not wanted or l in wanted)]
    if not pairs:
        return False
    style = legend.get("textStyle") or {}
    vertical = legend.get("orient", "horizontal") == "vertical"
    if vertical and "left" in legend and legend.get("left") not in ("center", "50%"):
        loc = "center left"
    elif vertical and "right" in legend:
        loc = "center right"
    else:
        loc = "upper center" if "top" in legend and "bottom" not in legend else "lower center"
    fig.legend(
        [h for h, _ in pairs],
        [l for _, l in pairs],
        loc=loc,
        ncol=1 if vertical else len(pairs),
        frameon=False,
        labelcolor=to_mpl(style.get("color", palette["text"])),
        fontsize=_pt(style.get("fontSize", 12)),
    )
    return True


_DRAWERS = OrderedDict([
    ("pie", _draw_pie),
    ("radar", _draw_radar),
    ("gauge", _draw_gauge),
    ("funnel", _draw_funnel),
    ("treemap", _draw_treemap),
    ("heatmap", _draw_heatmap),
])
_FREE_LAYOUT = {"pie", "gauge", "funnel", "treemap"}


def render_chart(
    option: Dict[str, Any],
    width: int,
    height: int,
    theme: str = "dark",
    progress: float = 1.0
) -> Image.Image:
    """Render a chart option to an RGBA sprite.

    Args:
        option: ECharts-shaped chart option.
        width: Sprite width in pixels.
        height: Sprite height in pixels.
        theme: "dark" or "light" default text/axis colors.
        progress: Build-in animation progress. Values grow out of the axis
            floor while the axes stay fixed at their final range.

    Returns:
        RGBA image of exactly ``width`` x ``height`` pixels.

    Raises:
        ValueError: If a series type is not one of ``SERIES_TYPES``.
    """
    check_series(option)
    palette = THEMES.get(theme, THEMES["dark"])
    fig = Figure(figsize=(width / DPI, height / DPI), dpi=DPI)
    canvas = FigureCanvasAgg(fig)

    background = option.get("backgroundColor", "transparent")
    fig.patch.set_facecolor(to_mpl(_color_value(background) or "transparent"))

    series_list = _as_list(option.get("series"))
    kinds = {s.get("type", "line") for s in series_list}
    kind = next((k for k in _DRAWERS if k in kinds), "cartesian")
    if any(s.get("coordinateSystem") == "polar" for s in series_list):
        kind = "polar"
        handles, labels = _draw_polar_bar(fig, option, progress, palette)
    else:
        handles, labels = _DRAWERS.get(kind, _draw_cartesian)(fig, option, progress, palette)

    has_title = _draw_title(fig, option, palette)
    has_legend = _draw_legend(fig, option, handles, labels, palette)
    if kind not in _FREE_LAYOUT:
        fig.subplots_adjust(
            left=0.12,
            right=0.88 if len(_as_list(option.get("yAxis"))) > 1 else 0.95,
            top=0.86 if has_title else 0.94,
            bottom=0.2 if has_legend else 0.1,
        )

    canvas.draw()
    buffer = np.asarray(canvas.buffer_rgba())
    sprite = Image.fromarray(buffer.copy(), "RGBA")
    if sprite.size != (width, height):
        sprite = sprite.resize((width, height), Image.BILINEAR)
    return sprite


# ---------------------------------------------------------------------------
# Animation
# ---------------------------------------------------------------------------


def interpolate_option(previous: Dict[str, Any], current: Dict[str, Any], fraction: float) -> Dict[str, Any]:
    """Blend numeric series data from ``previous`` towards ``current``."""
    if fraction >= 1.0:
        return current
    blended = copy.deepcopy(current)
    old_series = _as_list(previous.get("series"))
    for index, series in enumerate(_as_list(blended.get("series"))):
        if index >= len(old_series):
            break
        old_data = old_series[index].get("data") or []
        new_data = series.get("data") or []
        for j, item in enumerate(new_data):
            if j >= len(old_data):
                break
            new_data[j] = _blend_item(old_data[j], item, fraction)
    return blended


def _blend_item(old, new, fraction: float):
    if isinstance(new, (int, float)) and isinstance(old, (int, float, dict)):
        start = item_value(old)
        return start + (float(new) - start) * fraction
    if isinstance(new, dict) and "value" in new:
        result = dict(new)
        old_value = old.get("value") if isinstance(old, dict) else old
        result["value"] = _blend_item(old_value if old_value is not None else 0, new["value"], fraction)
        return result
    if isinstance(new, (list, tuple)) and isinstance(old, (list, tuple)) and len(old) == len(new):
        return [_blend_item(o, n, fraction) for o, n in zip(old, new)]
    return new


class ChartAnimator:
    """Produces chart sprites for a chart node over scene time.

    Values grow out of the axis floor over ``animationDuration`` ms. When the node has
    an updater it is applied every ``update_interval`` seconds, each new
    option derived from the previous one, and the series data moves to the
    new values over ``animationDurationUpdate`` ms.
    """

    def __init__(self, node: ChartNode, cache_size: int = 64) -> None:
        self._node = node
        self._options: List[Dict[str, Any]] = [copy.deepcopy(node.option)]
        self._cache: "OrderedDict[Tuple[int, float, float], Image.Image]" = OrderedDict()
        self._cache_size = cache_size

        self._grow = float(node.option.get("animationDuration", DEFAULT_ANIMATION_MS)) / 1000.0
        self._blend = float(node.option.get("animationDurationUpdate", DEFAULT_UPDATE_MS)) / 1000.0
        if node.option.get("animation") is False:
            self._grow = self._blend = 0.0

    def step_at(self, t: float) -> int:
        """Number of updater applications in effect at scene time ``t``."""
        if self._node.updater is None:
            return 0
        steps = int(math.floor(max(0.0, t) / self._node.update_interval + 1e-9))
        return steps + (1 if self._node.updates_immediately else 0)

    def option_for_step(self, step: int) -> Dict[str, Any]:
        """Option after ``step`` updates, computed in order and cached."""
        while len(self._options) <= step:
            previous = self._options[-1]
            candidate = copy.deepcopy(previous)
            result = self._node.updater(candidate, len(self._options))
            self._options.append(result if isinstance(result, dict) else candidate)
        return self._options[step]

    def state_at(self, t: float) -> Tuple[int, float, float]:
        """(step, update blend fraction, growth progress) at time ``t``."""
        step = self.step_at(t)
        growth = quantize(t / self._grow) if self._grow > 0 else 1.0

        fraction = 1.0
        initial = 1 if self._node.updates_immediately and self._node.updater else 0
        if step > initial and self._blend > 0:
            step_start = (step - initial) * self._node.update_interval
            fraction = quantize((t - step_start) / self._blend)
        return step, fraction, growth

    def option_at(self, t: float) -> Dict[str, Any]:
        step, fraction, _ = self.state_at(t)
        current = self.option_for_step(step)
        if fraction < 1.0 and step > 0:
            return interpolate_option(self.option_for_step(step - 1), current, fraction)
        return current

    def render(self, t: float) -> Image.Image:
        """Chart sprite at scene time ``t``."""
        key = self.state_at(t)
        if key in self._cache:
            self._cache.move_to_end(key)
            return self._cache[key]

        node = self._node
        sprite = render_chart(self.option_at(t), node.width, node.height, node.theme, progress=key[2])
        self._cache[key] = sprite
        if len(self._cache) > self._cache_size:
            self._cache.popitem(last=False)
        return sprite
