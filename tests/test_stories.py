"""Tests for the story catalog and the built story manifests."""

import random

import pytest

from chartreel.editor import ChartAnimator, Timeline, node_position
from chartreel.editor.charts import render_chart
from chartreel.stories import (
    STORIES,
    StoryNotFoundError,
    available,
    build_story,
    built_stories,
    get_story,
    progress,
    register_story,
)
from chartreel.stories import catalog
from chartreel.stories.billionaire_pulse import share_of_fortune
from chartreel.stories.city_stats import average_cost
from chartreel.stories.credits_finale import ROLL_DURATION
from chartreel.stories.desktop_chaos import badge
from chartreel.stories.lumafade_dreamscape import spaced
from chartreel.stories.retro_gaming import health_color
from chartreel.stories.sketch_to_life import tower_strokes
from chartreel.stories.sound_reactive_waveform import waveform
from chartreel.stories.thermal_heatmap import COLUMNS, ROWS, stress_grid, thermal_option
from chartreel.stories.uisim_breakup import typing_stages

BUILT = list(range(1, 31))


class TestCatalog:
    def test_thirty_stories(self):
        assert sorted(STORIES) == list(range(1, 31))
        assert len({story.slug for story in STORIES.values()}) == 30

    def test_story_metadata(self):
        story = get_story(2)
        assert story.title == "Kinetic Dictionary: SONDER"
        assert story.output == "story-02-kinetic-sonder.mp4"
        assert "#Sonder" in story.tags

    def test_unknown_story(self):
        with pytest.raises(StoryNotFoundError, match="Story 31 not found"):
            get_story(31)

    def test_unbuilt_story(self, monkeypatch):
        monkeypatch.delitem(catalog._BUILDERS, 1)
        assert not available(1)
        with pytest.raises(StoryNotFoundError, match="not been built"):
            build_story(1)

    def test_register_unknown_number(self):
        with pytest.raises(StoryNotFoundError):
            register_story(0)

    def test_progress(self):
        assert built_stories() == BUILT
        assert progress() == (len(BUILT), 30)


@pytest.mark.parametrize("number", BUILT)
class TestBuiltStories:
    def test_manifest_shape(self, number):
        manifest = build_story(number)
        assert (manifest.width, manifest.height, manifest.fps) == (1080, 1920, 30)
        assert manifest.output == get_story(number).output
        assert manifest.scenes
        assert manifest.scenes[-1].transition is None
        assert 10 < manifest.total_duration < 60

    def test_first_frame_renders(self, number):
        manifest = build_story(number)
        timeline = Timeline(manifest.scenes[:1], manifest.width, manifest.height, manifest.fps)
        frame = timeline.frame(timeline.duration - 0.1)
        assert frame.shape == (1920, 1080, 3)

    def test_builds_are_independent(self, number):
        first = build_story(number)
        first.scenes[0].children.clear()
        assert build_story(number).scenes[0].children


class TestStoryDetails:
    def test_share_of_fortune(self):
        assert share_of_fortune(5) == "0.0000000025%"
        assert share_of_fortune(1_200) == "0.0000006%"
        assert share_of_fortune(65_000_000) == "0.0325%"
        assert share_of_fortune(500_000_000) == "0.25%"

    def test_city_average(self):
        assert average_cost() == 5484

    def test_city_story_has_chart(self):
        scenes = build_story(16).scenes
        assert any(child.type == "chart" for scene in scenes for child in scene.children)

    def test_credits_scroll_off_screen(self):
        credits = next(scene for scene in build_story(30).scenes if scene.id == "credits")
        rolling = [node for node in credits.children if node.motions]
        assert rolling
        assert all(node.y > 1920 for node in rolling)
        assert all(node_position(node, ROLL_DURATION + 0.5)[1] < 0 for node in rolling)

    def test_spaced_title(self):
        assert spaced("golden hour") == "g o l d e n   h o u r"

    def test_typing_stages(self):
        stages = typing_stages("I miss you")
        assert len(stages) == 19
        assert stages[0] == stages[-1] == "I"
        assert stages[9] == "I miss you"

    def test_badge_caps_at_99(self):
        assert badge(5) == "5"
        assert badge(99) == "99"
        assert badge(240) == "99+"

    def test_health_color_thresholds(self):
        assert health_color(100) == "#00ff00"
        assert health_color(60) == "#ffff00"
        assert health_color(31) == "#ffff00"
        assert health_color(30) == "#ff0040"

    def test_tower_narrows_to_tip(self):
        strokes = tower_strokes()
        widths = [w for _, _, w, _ in strokes]
        assert widths == sorted(widths, reverse=True)
        x, y, _, h = strokes[0]
        assert (x, y + h / 2) == (540, 1500)

    def test_waveform_scales_with_energy(self):
        rng = random.Random(1)
        quiet = waveform(rng, 16, 0.3)
        assert len(quiet) == 16
        assert all(5 <= value <= 33.5 for value in quiet)
        assert waveform(rng, 8, 0.0) == [5] * 8
        assert all(value <= 100 for value in waveform(rng, 32, 2.0))

    def test_stress_grid_clamped(self):
        cells = stress_grid(random.Random(1), 95)
        assert len(cells) == COLUMNS * ROWS
        assert all(75 <= stress <= 100 for _, _, stress in cells)
        assert {(c, r) for c, r, _ in cells} == {(c, r) for c in range(COLUMNS) for r in range(ROWS)}

    def test_thermal_chart_renders(self):
        option = thermal_option(stress_grid(random.Random(2), 40))
        assert render_chart(option, 200, 300).size == (200, 300)

    def test_thermal_camera_heats_up(self):
        charts = [
            child
            for scene in build_story(24).scenes
            for child in scene.children
            if child.type == "chart" and child.updater is not None
        ]
        assert charts
        animator = ChartAnimator(charts[0])
        first = animator.option_for_step(0)["series"][0]["data"]
        later = animator.option_for_step(3)["series"][0]["data"]
        assert len(later) == COLUMNS * ROWS
        assert later != first

    def test_spectrum_redraws_on_beat(self):
        scene = next(scene for scene in build_story(26).scenes if scene.id == "bass-drop")
        spectrum = next(child for child in scene.children if child.type == "chart")
        assert spectrum.update_interval == 0.5
        animator = ChartAnimator(spectrum)
        assert animator.step_at(0.0) == 1
        assert animator.option_for_step(2)["series"][0]["data"] != animator.option_for_step(1)["series"][0]["data"]
