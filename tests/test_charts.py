"""Tests for chart rendering, chart animation and chart templates."""

import numpy as np
import pytest
from pydantic import ValidationError

from chartreel.charts import CHART_TEMPLATES, get_template
from chartreel.editor.charts import (
    ChartAnimator,
    format_label,
    interpolate_option,
    item_color,
    item_value,
    quantize,
    render_chart,
    squarify,
    value_limits,
)
from chartreel.models import ChartNode

BAR = {
    "backgroundColor": "transparent",
    "title": {"text": "Sales"},
    "legend": {"data": ["2024"]},
    "xAxis": {"type": "category", "data": ["A", "B", "C"]},
    "yAxis": {"type": "value"},
    "series": [{"name": "2024", "type": "bar", "data": [10, 20, 30], "label": {"show": True}}],
}


class TestHelpers:
    def test_item_value(self):
        assert item_value(3) == 3.0
        assert item_value({"value": 4, "name": "x"}) == 4.0
        assert item_value(None) == 0.0

    def test_item_color(self):
        assert item_color({"value": 1, "itemStyle": {"color": "#ff0000"}}) == "#ff0000"
        assert item_color(5) is None

    def test_format_label(self):
        assert format_label("{b}: {c} ({d}%)", name="Web", value=12.0, percent=40) == "Web: 12 (40.0%)"
        assert format_label(None, value=7) == "7"

    def test_quantize(self):
        assert quantize(0.0) == 0.0
        assert quantize(1.5) == 1.0
        assert quantize(0.01, steps=4) == 0.25


class TestRenderChart:
    @pytest.mark.parametrize("chart_type", sorted(CHART_TEMPLATES))
    def test_every_template_renders_at_requested_size(self, chart_type):
        option = get_template(chart_type).get_option()
        sprite = render_chart(option, 320, 240)
        assert sprite.size == (320, 240)
        assert sprite.mode == "RGBA"

    def test_transparent_background_keeps_corners_clear(self):
        sprite = render_chart(BAR, 200, 150)
        assert sprite.getpixel((0, 0))[3] == 0

    def test_solid_background(self):
        sprite = render_chart(dict(BAR, backgroundColor="#102030"), 200, 150)
        r, g, b, a = sprite.getpixel((2, 75))
        assert a == 255
        assert max(abs(r - 16), abs(g - 32), abs(b - 48)) <= 2

    def test_horizontal_bars_with_item_colors(self):
        option = {
            "yAxis": {"type": "category", "data": ["x", "y"]},
            "xAxis": {"type": "value"},
            "series": [{"type": "bar", "data": [{"value": 3, "itemStyle": {"color": "#ff0000"}}, 5]}],
        }
        assert render_chart(option, 200, 150, theme="light").size == (200, 150)

    def test_zero_progress(self):
        assert render_chart(BAR, 120, 90, progress=0.0).size == (120, 90)

    def test_unsupported_series_type(self):
        with pytest.raises(ValueError, match="Unsupported series type: sankey"):
            render_chart({"series": [{"type": "sankey", "data": []}]}, 100, 100)

    def test_chart_node_rejects_unsupported_series_type(self):
        with pytest.raises(ValidationError, match="Supported: bar, line"):
            ChartNode(option={"series": [{"type": "wordCloud"}]})

    def test_radar_without_indicators(self):
        option = {"radar": {"indicator": []}, "series": [{"type": "radar", "data": [{"value": [], "name": "A"}]}]}
        assert render_chart(option, 160, 120).size == (160, 120)


def _red_mask(sprite):
    pixels = np.asarray(sprite).astype(int)
    r, g, b, a = pixels[..., 0], pixels[..., 1], pixels[..., 2], pixels[..., 3]
    return (r > 200) & (g < 60) & (b < 60) & (a > 200)


def _blue_mask(sprite):
    pixels = np.asarray(sprite).astype(int)
    r, g, b, a = pixels[..., 0], pixels[..., 1], pixels[..., 2], pixels[..., 3]
    return (b > 200) & (r < 60) & (g < 60) & (a > 200)


def _red_rows(sprite) -> int:
    return int(_red_mask(sprite).any(axis=1).sum())


RED_BAR = {
    "xAxis": {"type": "category", "data": ["a"]},
    "yAxis": {"type": "value"},
    "series": [{"type": "bar", "data": [100], "itemStyle": {"color": "#ff0000"}}],
}


class TestGrowth:
    def test_bar_height_follows_progress(self):
        quarter, half, full = (_red_rows(render_chart(RED_BAR, 200, 300, progress=p)) for p in (0.25, 0.5, 1.0))
        assert 0 < quarter < half < full
        assert abs(2 * half - full) <= 4

    def test_bar_is_hidden_at_zero_progress(self):
        assert _red_rows(render_chart(RED_BAR, 200, 300, progress=0.0)) == 0

    def test_explicit_axis_min_grows_from_the_axis_floor(self):
        option = dict(RED_BAR, yAxis={"type": "value", "min": 4500}, series=[dict(RED_BAR["series"][0], data=[5000])])
        half = _red_rows(render_chart(option, 200, 300, progress=0.5))
        full = _red_rows(render_chart(option, 200, 300, progress=1.0))
        assert 0 < half < full
        assert abs(2 * half - full) <= 4

    def test_horizontal_bar_width_follows_progress(self):
        option = {
            "yAxis": {"type": "category", "data": ["a"]},
            "xAxis": {"type": "value"},
            "series": [{"type": "bar", "data": [50], "itemStyle": {"color": "#ff0000"}}],
        }
        widths = [int(_red_mask(render_chart(option, 300, 200, progress=p)).any(axis=0).sum()) for p in (0.5, 1.0)]
        assert 0 < widths[0] < widths[1]

    def test_stacked_top_series_grows_with_its_base(self):
        option = {
            "xAxis": {"type": "category", "data": ["a"]},
            "yAxis": {"type": "value"},
            "series": [
                {"type": "bar", "stack": "s", "data": [50], "itemStyle": {"color": "#0000ff"}},
                {"type": "bar", "stack": "s", "data": [50], "itemStyle": {"color": "#ff0000"}},
            ],
        }
        half = render_chart(option, 200, 300, progress=0.5)
        full = render_chart(option, 200, 300, progress=1.0)
        assert 0 < _red_rows(half) < _red_rows(full)
        # the top segment sits above the bottom one at every step
        assert np.nonzero(_red_mask(half).any(axis=1))[0].max() < np.nonzero(_blue_mask(half).any(axis=1))[0].min() + 2

    def test_line_points_rise_with_progress(self):
        option = {
            "xAxis": {"type": "category", "data": ["a", "b"]},
            "yAxis": {"type": "value"},
            "series": [{"type": "line", "data": [80, 80], "symbol": "none", "lineStyle": {"color": "#ff0000", "width": 4}}],
        }
        half = np.nonzero(_red_mask(render_chart(option, 200, 300, progress=0.5)).any(axis=1))[0].mean()
        full = np.nonzero(_red_mask(render_chart(option, 200, 300, progress=1.0)).any(axis=1))[0].mean()
        assert full < half

    def test_value_limits(self):
        assert value_limits([0, 100], {}) == (0.0, pytest.approx(105.0))
        assert value_limits([5000], {"min": 4500}) == (4500.0, pytest.approx(5025.0))
        assert value_limits([10, 20], {"min": 0, "max": 350}) == (0.0, 350.0)
        lo, hi = value_limits([100, 120], {"scale": True})
        assert 90 < lo < 100 and 120 < hi < 130
        assert value_limits([], {}) == (0.0, pytest.approx(1.05))


class TestChartTypes:
    def test_gauge_progress_arc_grows(self):
        option = {
            "series": [{
                "type": "gauge",
                "progress": {"show": True, "width": 20},
                "itemStyle": {"color": "#ff0000"},
                "axisLine": {"lineStyle": {"width": 20, "color": [[1, "#333333"]]}},
                "detail": {"formatter": "{value}%"},
                "data": [{"value": 78, "name": "Score"}],
            }],
        }
        half = int(_red_mask(render_chart(option, 300, 300, progress=0.5)).sum())
        full = int(_red_mask(render_chart(option, 300, 300, progress=1.0)).sum())
        assert 0 < half < full

    def test_gauge_accepts_plain_number_data(self):
        option = {"series": [{"type": "gauge", "data": [40], "min": 0, "max": 50}]}
        assert render_chart(option, 200, 200).size == (200, 200)

    def test_funnel_sorts_widest_layer_to_the_top(self):
        option = {
            "legend": {"data": ["Visits", "Orders"]},
            "series": [{
                "type": "funnel",
                "gap": 4,
                "label": {"show": True, "position": "inside", "formatter": "{b}: {c}%"},
                "data": [
                    {"name": "Orders", "value": 20, "itemStyle": {"color": "#0000ff"}},
                    {"name": "Visits", "value": 100, "itemStyle": {"color": "#ff0000"}},
                ],
            }],
        }
        sprite = render_chart(option, 300, 300)
        red_rows = np.nonzero(_red_mask(sprite).any(axis=1))[0]
        blue_rows = np.nonzero(_blue_mask(sprite).any(axis=1))[0]
        assert red_rows.mean() < blue_rows.mean()

    def test_treemap_renders(self):
        option = {
            "series": [{
                "type": "treemap",
                "label": {"show": True, "formatter": "{b}\n{c} GB"},
                "itemStyle": {"borderColor": "#000000", "borderWidth": 2},
                "data": [{"name": "Videos", "value": 450}, {"name": "Photos", "value": 280}, {"name": "Docs", "value": 150}],
            }],
        }
        assert render_chart(option, 300, 200).size == (300, 200)

    def test_squarify_fills_the_box(self):
        cells = squarify([6, 6, 4, 3, 2, 2, 1], 0, 0, 6, 4)
        assert len(cells) == 7
        areas = [w * h for _, _, w, h in cells]
        assert sum(areas) == pytest.approx(24.0)
        assert areas[0] == pytest.approx(6.0)
        for x, y, w, h in cells:
            assert x >= -1e-9 and y >= -1e-9
            assert x + w <= 6 + 1e-9 and y + h <= 4 + 1e-9

    def test_squarify_all_zero(self):
        assert squarify([0, 0], 0, 0, 10, 10) == [(0, 0, 0.0, 0.0), (0, 0, 0.0, 0.0)]

    def test_heatmap_with_visual_map(self):
        option = {
            "xAxis": {"type": "category", "data": ["9a", "10a", "11a"]},
            "yAxis": {"type": "category", "data": ["Mon", "Tue"]},
            "visualMap": {"min": 0, "max": 10, "inRange": {"color": ["#000033", "#ff0000"]}},
            "series": [{"type": "heatmap", "data": [[0, 0, 1], [1, 0, 10], [2, 1, 5]], "label": {"show": True}}],
        }
        hidden = int(_red_mask(render_chart(option, 300, 200, progress=0.0)).sum())
        shown = int(_red_mask(render_chart(option, 300, 200, progress=1.0)).sum())
        assert hidden < shown

    def test_hidden_axes_draw_no_labels(self):
        def option(show):
            white = {"axisLabel": {"color": "#ffffff"}, "axisLine": {"lineStyle": {"color": "#ffffff"}}}
            return {
                "backgroundColor": "transparent",
                "xAxis": {"type": "category", "show": show, "data": ["a", "b"], **white},
                "yAxis": {"type": "category", "show": show, "data": ["c", "d"], **white},
                "visualMap": {"show": False, "min": 0, "max": 1, "inRange": {"color": ["#000033", "#330000"]}},
                "series": [{"type": "heatmap", "data": [[0, 0, 0], [1, 1, 1]]}],
            }

        def white(image):
            pixels = np.asarray(image.convert("RGBA")).astype(int)
            return int(((pixels[..., :3] > 200).all(axis=-1) & (pixels[..., 3] > 128)).sum())

        assert white(render_chart(option(False), 300, 200)) < white(render_chart(option(True), 300, 200))

    def test_candlestick_and_boxplot(self):
        candles = {
            "xAxis": {"type": "category", "data": ["Mon", "Tue"]},
            "yAxis": {"type": "value", "min": 90, "max": 130},
            "series": [{"type": "candlestick", "data": [[100, 110, 95, 115], [110, 105, 100, 120]]}],
        }
        boxes = {
            "xAxis": {"type": "category", "data": ["A", "B"]},
            "yAxis": {"type": "value"},
            "series": [{"type": "boxplot", "data": [[50, 60, 70, 80, 95], [40, 55, 65, 75, 90]]}],
        }
        for option in (candles, boxes):
            assert render_chart(option, 240, 180, progress=0.5).size == (240, 180)

    def test_rising_candle_uses_up_color(self):
        option = {
            "xAxis": {"type": "category", "data": ["Mon"]},
            "yAxis": {"type": "value", "min": 90, "max": 130},
            "series": [{"type": "candlestick", "itemStyle": {"color": "#ff0000", "color0": "#0000ff"}, "data": [[100, 120, 95, 125]]}],
        }
        sprite = render_chart(option, 200, 200)
        assert _red_mask(sprite).sum() > 0
        assert _blue_mask(sprite).sum() == 0

    def test_rose_pie_and_centre_label(self):
        rose = {"series": [{"type": "pie", "roseType": "area", "data": [{"name": "A", "value": 45}, {"name": "B", "value": 12}]}]}
        donut = {"series": [{
            "type": "pie",
            "radius": ["40%", "70%"],
            "label": {"show": True, "position": "center", "formatter": "Total\n$2.5M"},
            "data": [{"name": "A", "value": 1}, {"name": "B", "value": 2}],
        }]}
        for option in (rose, donut):
            assert render_chart(option, 200, 200).size == (200, 200)

    def test_polar_bar(self):
        option = {
            "polar": {"radius": ["20%", "70%"]},
            "angleAxis": {"max": 100},
            "radiusAxis": {"type": "category", "data": ["Q1", "Q2", "Q3"]},
            "series": [{"type": "bar", "coordinateSystem": "polar", "data": [80, 65, 90], "label": {"show": True}}],
        }
        assert render_chart(option, 240, 240).size == (240, 240)

    def test_second_value_axis(self):
        option = {
            "legend": {"data": ["Revenue", "Growth"]},
            "xAxis": {"type": "category", "data": ["Q1", "Q2"]},
            "yAxis": [{"type": "value", "name": "Revenue"}, {"type": "value", "name": "Growth", "axisLabel": {"formatter": "{value}%"}}],
            "series": [
                {"name": "Revenue", "type": "bar", "data": [100, 150]},
                {"name": "Growth", "type": "line", "yAxisIndex": 1, "data": [5, 12]},
            ],
        }
        assert render_chart(option, 300, 200).size == (300, 200)


class TestInterpolateOption:
    def test_blends_numbers_and_value_items(self):
        old = {"series": [{"data": [0, {"value": 10}]}]}
        new = {"series": [{"data": [100, {"value": 20}]}]}
        mid = interpolate_option(old, new, 0.5)
        assert mid["series"][0]["data"] == [50.0, {"value": 15.0}]
        assert new["series"][0]["data"] == [100, {"value": 20}]

    def test_full_fraction_returns_current(self):
        new = {"series": [{"data": [1]}]}
        assert interpolate_option({"series": [{"data": [0]}]}, new, 1.0) is new


def _counter(option, step):
    option["series"][0]["data"] = [step * 10]


class TestChartAnimator:
    def _node(self, **option):
        base = {"series": [{"type": "bar", "data": [0]}], "animationDuration": 1000, "animationDurationUpdate": 500}
        base.update(option)
        return ChartNode(option=base, width=80, height=60)

    def test_growth_without_updates(self):
        animator = ChartAnimator(self._node())
        assert animator.state_at(0.0) == (0, 1.0, 0.0)
        assert animator.state_at(0.5)[2] == 0.5
        assert animator.state_at(2.0) == (0, 1.0, 1.0)

    def test_animation_disabled(self):
        animator = ChartAnimator(self._node(animation=False))
        assert animator.state_at(0.0)[2] == 1.0

    def test_updates_step_each_interval(self):
        node = self._node().update(_counter, interval=1.0)
        animator = ChartAnimator(node)
        assert animator.step_at(0.5) == 0
        assert animator.step_at(1.0) == 1
        assert animator.step_at(3.2) == 3
        assert animator.option_for_step(3)["series"][0]["data"] == [30]

    def test_update_now_applies_first_step_at_start(self):
        node = self._node().update(_counter, interval=1.0).update_now()
        animator = ChartAnimator(node)
        assert animator.step_at(0.0) == 1
        assert animator.state_at(0.2)[1] == 1.0
        assert animator.option_at(0.0)["series"][0]["data"] == [10]

    def test_update_blends_towards_new_values(self):
        node = self._node().update(_counter, interval=1.0)
        animator = ChartAnimator(node)
        step, fraction, _ = animator.state_at(1.25)
        assert step == 1
        assert fraction == pytest.approx(0.5)
        assert animator.option_at(1.25)["series"][0]["data"] == [pytest.approx(5.0)]

    def test_updater_may_return_new_option(self):
        def replace(option, step):
            return {"series": [{"type": "bar", "data": [step]}]}

        animator = ChartAnimator(self._node().update(replace, interval=1.0))
        assert animator.option_for_step(2)["series"][0]["data"] == [2]

    def test_updates_derive_from_previous_option(self):
        def grow(option, step):
            option["series"][0]["data"] = [option["series"][0]["data"][0] + 1]

        animator = ChartAnimator(self._node().update(grow, interval=1.0))
        assert animator.option_for_step(4)["series"][0]["data"] == [4]

    def test_render_is_cached(self):
        animator = ChartAnimator(self._node(animationDuration=0))
        first = animator.render(0.0)
        assert animator.render(0.3) is first
        assert first.size == (80, 60)


class TestTemplates:
    def test_unknown_type(self):
        with pytest.raises(ValueError):
            get_template("donut")

    def test_bar_uses_supplied_data(self):
        option = get_template("bar").get_option({"labels": ["x", "y"], "values": [1, 2]})
        assert option["xAxis"]["data"] == ["x", "y"]
        assert option["series"][0]["data"] == [1, 2]

    def test_defaults_fill_missing_data(self):
        for template in CHART_TEMPLATES.values():
            option = template.get_option()
            assert option["series"]
