"""Tests for scene rendering and the scene timeline."""

import numpy as np
import pytest

from chartreel.editor import SceneRenderer, Timeline, build_video
from chartreel.models import ChartNode, RectNode, Scene, TextNode

RED = (255, 0, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)


def pixel(frame, x, y):
    return tuple(int(c) for c in frame[y, x])


class TestSceneRenderer:
    def test_background_and_node(self, small_scene):
        frame = SceneRenderer(small_scene(), 16, 16).frame(0.0)
        assert frame.shape == (16, 16, 3)
        assert pixel(frame, 0, 0) == RED
        assert pixel(frame, 8, 8) == WHITE

    def test_transparent_background_renders_black(self):
        frame = SceneRenderer(Scene(bg_color="transparent"), 8, 8).frame(0.0)
        assert pixel(frame, 4, 4) == (0, 0, 0)

    def test_entrance_hides_node_until_delay(self):
        scene = Scene(bg_color="#000000", duration=3)
        scene.add_child(RectNode(x=8, y=8, width=6, height=6).add_effect("fadeIn", 0.5, 1.0))
        renderer = SceneRenderer(scene, 16, 16)
        assert pixel(renderer.frame(0.5), 8, 8) == (0, 0, 0)
        assert pixel(renderer.frame(2.0), 8, 8) == WHITE

    def test_motion_moves_node(self):
        scene = Scene(bg_color="#000000", duration=2)
        scene.add_child(RectNode(x=4, y=8, width=4, height=4).add_animate(x=12, duration=1.0))
        renderer = SceneRenderer(scene, 16, 16)
        assert pixel(renderer.frame(0.0), 4, 8) == WHITE
        end = renderer.frame(1.5)
        assert pixel(end, 4, 8) == (0, 0, 0)
        assert pixel(end, 12, 8) == WHITE

    def test_node_outside_canvas_is_clipped(self):
        scene = Scene(duration=1)
        scene.add_child(RectNode(x=-100, y=-100, width=10, height=10))
        scene.add_child(TextNode(text="off screen", x=500, y=8, font_size=12))
        frame = SceneRenderer(scene, 16, 16).frame(0.0)
        assert frame.max() == 0

    def test_chart_node_renders(self):
        scene = Scene(duration=1)
        scene.add_child(ChartNode(
            option={"backgroundColor": "#00ff00", "series": [{"type": "bar", "data": [1, 2]}], "animation": False},
            x=32, y=32, width=64, height=64,
        ))
        frame = SceneRenderer(scene, 64, 64).frame(0.5)
        assert pixel(frame, 1, 32)[1] > 200


class TestTimeline:
    def test_requires_scenes(self):
        with pytest.raises(ValueError):
            Timeline([], 16, 16)

    def test_duration_and_frames(self, small_scene):
        timeline = Timeline([small_scene(transition="fade"), small_scene()], 16, 16, fps=10)
        assert timeline.duration == pytest.approx(1.5)
        assert timeline.total_frames == 15

    def test_scene_index(self, small_scene):
        timeline = Timeline([small_scene(transition="fade"), small_scene()], 16, 16)
        assert timeline.scene_index(0.2) == 0
        assert timeline.scene_index(0.7) == 0
        assert timeline.scene_index(1.2) == 1
        assert timeline.scene_index(99) == 1

    def test_transition_blends_scenes(self, small_scene):
        timeline = Timeline([small_scene(color="#ff0000", transition="fade"), small_scene(color="#0000ff")], 16, 16)
        assert pixel(timeline.frame(0.25), 0, 0) == RED
        r, g, b = pixel(timeline.frame(0.75), 0, 0)
        assert 100 < r < 160 and 100 < b < 160
        assert pixel(timeline.frame(1.4), 0, 0) == BLUE

    def test_hard_cut_without_transition(self, small_scene):
        timeline = Timeline([small_scene(color="#ff0000"), small_scene(color="#0000ff")], 16, 16)
        assert pixel(timeline.frame(0.99), 0, 0) == RED
        assert pixel(timeline.frame(1.0), 0, 0) == BLUE

    def test_time_is_clamped(self, small_scene):
        timeline = Timeline([small_scene()], 16, 16)
        assert pixel(timeline.frame(-1), 0, 0) == RED
        assert pixel(timeline.frame(10), 0, 0) == RED


class TestBuildVideo:
    def test_clip_wraps_timeline(self, small_scene):
        timeline = Timeline([small_scene(duration=2)], 16, 16)
        seen = []
        clip = build_video(timeline, frame_hook=seen.append)
        assert clip.duration == pytest.approx(2.0)
        frame = clip.get_frame(0.5)
        assert isinstance(frame, np.ndarray)
        assert frame.shape == (16, 16, 3)
        assert 0.5 in seen
