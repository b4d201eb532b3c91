"""Tests for the chart video generator and the chart demo builders."""

import pytest

from chartreel.charts import (
    DEMO_CHARTS,
    ChartGenerator,
    build_ai_shorts_video,
    build_all_charts_video,
    build_bad_decisions_video,
    build_chart_types_video,
    build_dynamic_all_charts_video,
    build_dynamic_chart_video,
    build_new_animations_video,
    build_single_chart_video,
)
from chartreel.editor import ChartAnimator, Timeline
from chartreel.models import ChartNode, TextNode


@pytest.fixture
def generator(dirs):
    output_dir, cache_dir = dirs
    return ChartGenerator(output_dir=output_dir, cache_dir=cache_dir, width=240, height=200, fps=2)


class TestChartGenerator:
    def test_creates_directories(self, generator, dirs):
        assert dirs[0].is_dir()
        assert dirs[1].is_dir()

    def test_chart_scene(self, generator):
        scene = generator.chart_scene("line", {"title": "Growth", "subtitle": "per month"})
        assert scene.duration == 5
        assert [type(n) for n in scene.children] == [TextNode, TextNode, ChartNode]
        assert scene.children[0].text == "Growth"

    def test_single_chart_creator(self, generator):
        creator = generator.single_chart_creator("pie")
        assert creator.output == "pie-chart.mp4"
        assert len(creator.scenes) == 1
        title = creator.scenes[0].children[0]
        assert title.text == "Pie Chart"
        assert title.effects[0].name == "fadeIn"

    def test_unknown_chart_type(self, generator):
        with pytest.raises(ValueError):
            generator.single_chart_creator("donut")

    def test_all_charts_creator(self, generator):
        creator = generator.all_charts_creator({"introTitle": "Quarterly"})
        assert creator.output == "all-charts.mp4"
        assert len(creator.scenes) == 8
        assert creator.scenes[0].children[0].text == "Quarterly"
        assert all(scene.transition for scene in creator.scenes[1:7])

    def test_audio_from_data(self, generator):
        creator = generator.single_chart_creator("bar", {"audio": "music.mp3"})
        assert creator.audio.path == "music.mp3"
        assert creator.audio.volume == 0.5

    def test_invalid_data_document(self, generator):
        with pytest.raises(ValueError):
            generator.create_from_data({"type": "gallery"})

    def test_create_single_chart_renders(self, generator, dirs, fake_export):
        events = []
        generator.on("complete", events.append)
        path = generator.create_from_data({"type": "single", "chart": "bar", "output": "sales.mp4"})
        assert path == dirs[0] / "sales.mp4"
        assert path.exists()
        assert len(events) == 1


class TestShowcase:
    def test_all_charts(self, dirs):
        creator = build_all_charts_video(*dirs)
        assert creator.output == "chart-demo-all.mp4"
        assert len(creator.scenes) == len(DEMO_CHARTS)
        assert creator.scenes[-1].transition is None

    def test_single_chart(self, dirs):
        creator = build_single_chart_video(3, *dirs)
        assert creator.output == "chart-3-pie-chart.mp4"
        assert creator.scenes[0].duration == 6

    @pytest.mark.parametrize("number", [0, 7])
    def test_single_chart_out_of_range(self, number, dirs):
        with pytest.raises(ValueError):
            build_single_chart_video(number, *dirs)

    def test_demo_options_are_not_shared(self, dirs):
        first = build_single_chart_video(1, *dirs).scenes[0].children[1]
        first.option["series"][0]["data"][0] = -1
        second = build_single_chart_video(1, *dirs).scenes[0].children[1]
        assert second.option["series"][0]["data"][0] != -1

    def test_dynamic_chart_is_seeded(self, dirs):
        def data_at(creator, t):
            animator = ChartAnimator(creator.scenes[0].children[0])
            return animator.option_for_step(animator.step_at(t))["series"][0]["data"]

        first = build_dynamic_chart_video(7, *dirs)
        second = build_dynamic_chart_video(7, *dirs)
        assert first.output == "dynamic-chart.mp4"
        assert first.duration == 10
        assert data_at(first, 3.5) == data_at(second, 3.5)

    def test_dynamic_chart_updates_immediately(self, dirs):
        chart = build_dynamic_chart_video(1, *dirs).scenes[0].children[0]
        assert chart.updates_immediately
        assert chart.update_interval == 1.0
        assert ChartAnimator(chart).step_at(0.0) == 1


def _charts(creator):
    return [child for scene in creator.scenes for child in scene.children if isinstance(child, ChartNode)]


def _series_at(chart, step, index=0):
    return ChartAnimator(chart).option_for_step(step)["series"][index]


class TestLiveDemos:
    def test_dynamic_all_charts(self, dirs):
        creator = build_dynamic_all_charts_video(3, *dirs)
        assert creator.output == "dynamic-all-charts.mp4"
        assert len(creator.scenes) == 8
        assert creator.duration == pytest.approx(3 + 6 * 8 + 3 - 7 * 0.5)
        charts = _charts(creator)
        assert [chart.option["series"][0]["type"] for chart in charts] == ["bar", "line", "pie", "line", "radar", "scatter"]
        assert all(chart.updater and chart.updates_immediately for chart in charts)

    def test_dynamic_all_charts_is_seeded(self, dirs):
        first = _charts(build_dynamic_all_charts_video(11, *dirs))
        second = _charts(build_dynamic_all_charts_video(11, *dirs))
        for a, b in zip(first, second):
            assert ChartAnimator(a).option_for_step(4) == ChartAnimator(b).option_for_step(4)

    def test_bar_updates_stay_in_range(self, dirs):
        bar = _charts(build_dynamic_all_charts_video(5, *dirs))[0]
        for step in range(1, 8):
            assert all(50 <= value <= 300 for value in _series_at(bar, step)["data"])

    def test_pie_shares_add_up(self, dirs):
        pie = _charts(build_dynamic_all_charts_video(5, *dirs))[2]
        values = [item["value"] for item in _series_at(pie, 3)["data"]]
        assert 97 <= sum(values) <= 103

    def test_bad_decisions(self, dirs):
        creator = build_bad_decisions_video(2, *dirs)
        assert creator.output == "faris-dynamic-charts.mp4"
        assert len(creator.scenes) == 9
        assert creator.scenes[0].children[0].text == "Faris is great..."

    def test_bad_decisions_for_someone_else(self, dirs):
        creator = build_bad_decisions_video(2, *dirs, name="Sam")
        assert creator.output == "sam-dynamic-charts.mp4"
        assert "Sam is consistently GREAT" in [child.text for child in creator.scenes[-1].children]

    def test_bad_decision_scores_are_capped(self, dirs):
        bar, line = _charts(build_bad_decisions_video(9, *dirs))[:2]
        assert all(value <= 110 for value in _series_at(bar, 12)["data"])
        assert all(value >= 5 for value in _series_at(line, 12, 1)["data"])
        assert all(value <= 190 for value in _series_at(line, 12, 0)["data"])

    def test_actual_thinking_only_shrinks(self, dirs):
        pie = _charts(build_bad_decisions_video(9, *dirs))[2]
        thinking = [_series_at(pie, step)["data"][-1]["value"] for step in range(6)]
        assert thinking == sorted(thinking, reverse=True)
        assert thinking[-1] >= 1


class TestGallery:
    def test_new_animations(self, dirs):
        creator = build_new_animations_video(*dirs)
        assert creator.output == "charts-new-animations.mp4"
        assert len(creator.scenes) == 8
        assert [scene.transition.name for scene in creator.scenes[1:7]] == [
            "moveleft", "stretch", "slice", "fat", "fluidly", "shake",
        ]
        title = creator.scenes[1].children[0]
        assert title.text == "Revenue Analysis"
        assert title.effects[0].name == "backInLeft"

    def test_chart_types(self, dirs):
        creator = build_chart_types_video(1, *dirs)
        assert creator.output == "charts-dynamic.mp4"
        assert len(creator.scenes) == 14
        kinds = [chart.option["series"][0]["type"] for chart in _charts(creator)]
        assert kinds == [
            "gauge", "funnel", "bar", "pie", "bar", "bar",
            "bar", "treemap", "candlestick", "heatmap", "pie", "boxplot",
        ]

    def test_heatmap_is_seeded(self, dirs):
        def cells(seed):
            return _charts(build_chart_types_video(seed, *dirs))[9].option["series"][0]["data"]

        assert cells(4) == cells(4)
        assert len(cells(4)) == 7 * 12
        assert all(0 <= value <= 99 for _, _, value in cells(4))

    def test_chart_type_scenes_render(self, dirs):
        creator = build_chart_types_video(1, *dirs)
        for scene in creator.scenes[1:-1]:
            timeline = Timeline([scene], 800, 600, 10)
            assert timeline.frame(2.5).shape == (600, 800, 3)


class TestAiShorts:
    def test_vertical_canvas(self, dirs):
        creator = build_ai_shorts_video(*dirs)
        assert creator.output == "ai-concepts-shorts.mp4"
        assert (creator.width, creator.height) == (1080, 1920)
        assert [scene.id for scene in creator.scenes] == [
            "hook", "llms", "agents", "rag", "multimodal", "fine-tuning", "outro",
        ]
        assert creator.scenes[-1].transition is None

    def test_concept_charts(self, dirs):
        charts = _charts(build_ai_shorts_video(*dirs))
        assert [chart.option["series"][0]["type"] for chart in charts] == ["bar", "radar", "bar"]
        after = charts[-1].option["series"][1]
        assert after["name"] == "After"
        assert after["data"] == [95, 88, 92, 85]
