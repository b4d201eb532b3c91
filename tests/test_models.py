"""Tests for the scene, node and manifest models."""

import json

import pytest
from pydantic import ValidationError

from chartreel.models import (
    AudioTrack,
    ChartNode,
    Effect,
    Manifest,
    RectNode,
    Scene,
    TextNode,
    Transition,
    layout_scenes,
)


class TestEffect:
    def test_defaults(self):
        effect = Effect(name="fadeIn")
        assert effect.duration == 1.0
        assert effect.delay == 0.0

    def test_unknown_name_rejected(self):
        with pytest.raises(ValidationError):
            Effect(name="explode")

    def test_names_are_case_sensitive(self):
        with pytest.raises(ValidationError):
            Effect(name="fadein")

    def test_duration_must_be_positive(self):
        with pytest.raises(ValidationError):
            Effect(name="fadeIn", duration=0)

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            Effect(name="fadeIn", delay=-1)


class TestTransition:
    def test_names_are_case_insensitive(self):
        assert Transition(name="CrossWarp").name == "CrossWarp"
        assert Transition(name="zoomIn").duration == 0.5

    def test_unknown_name_rejected(self):
        with pytest.raises(ValidationError):
            Transition(name="spin-the-world")


class TestNodes:
    def test_add_effect_chains(self):
        node = TextNode(text="Hi").add_effect("fadeIn", 0.5, 0.2).add_effect("fadeOut", 1, 3)
        assert [e.name for e in node.effects] == ["fadeIn", "fadeOut"]
        assert node.effects[0].delay == 0.2

    def test_add_animate_keeps_missing_coordinate(self):
        node = RectNode(width=10, height=10).add_animate(y=-100, duration=2)
        assert node.motions[0].x is None
        assert node.motions[0].y == -100

    def test_set_opacity_validates_range(self):
        node = RectNode(width=10, height=10)
        assert node.set_opacity(0.25).opacity == 0.25
        with pytest.raises(ValueError):
            node.set_opacity(1.5)

    def test_text_helpers(self):
        node = TextNode(text="Hi").set_color("#ff0000").align_center()
        assert node.color == "#ff0000"
        assert node.align == "center"

    def test_chart_update_requires_positive_interval(self):
        chart = ChartNode(option={})
        with pytest.raises(ValueError):
            chart.update(lambda option, step: None, interval=0)

    def test_chart_update_settings(self):
        chart = ChartNode(option={}).update(lambda option, step: None, interval=2).update_now()
        assert chart.updater is not None
        assert chart.update_interval == 2
        assert chart.updates_immediately

    def test_chart_without_updater(self):
        chart = ChartNode(option={})
        assert chart.updater is None
        assert not chart.updates_immediately


class TestScene:
    def test_defaults(self):
        scene = Scene()
        assert scene.bg_color == "#000000"
        assert scene.duration == 5.0
        assert scene.transition is None
        assert scene.children == []

    def test_setters_chain(self):
        scene = Scene().set_bg_color("#123456").set_duration(3).set_transition("fade", 1.0)
        assert scene.bg_color == "#123456"
        assert scene.duration == 3
        assert scene.transition.name == "fade"

    def test_invalid_color_rejected(self):
        with pytest.raises(ValueError):
            Scene().set_bg_color("not-a-color")
        with pytest.raises(ValidationError):
            Scene(bg_color="not-a-color")

    def test_non_positive_duration_rejected(self):
        with pytest.raises(ValueError):
            Scene().set_duration(0)

    def test_children_parse_by_type(self):
        scene = Scene(children=[
            {"type": "text", "text": "Hi"},
            {"type": "rect", "width": 10, "height": 5},
        ])
        assert isinstance(scene.children[0], TextNode)
        assert isinstance(scene.children[1], RectNode)


class TestLayoutScenes:
    def test_no_transitions(self):
        starts, overlaps, total = layout_scenes([Scene(duration=2), Scene(duration=3)])
        assert starts == [0.0, 2.0]
        assert overlaps == [0.0, 0.0]
        assert total == 5.0

    def test_transition_overlaps_next_scene(self):
        scenes = [Scene(duration=2).set_transition("fade", 0.5), Scene(duration=3)]
        starts, overlaps, total = layout_scenes(scenes)
        assert starts == [0.0, 1.5]
        assert overlaps == [0.5, 0.0]
        assert total == 4.5

    def test_last_transition_ignored(self):
        scenes = [Scene(duration=2), Scene(duration=3).set_transition("fade", 1.0)]
        assert layout_scenes(scenes)[2] == 5.0

    def test_overlap_clamped_to_shorter_scene(self):
        scenes = [Scene(duration=2).set_transition("fade", 5.0), Scene(duration=1)]
        starts, overlaps, total = layout_scenes(scenes)
        assert overlaps[0] == 1.0
        assert total == 2.0

    def test_overlap_leaves_room_for_incoming_transition(self):
        scenes = [
            Scene(duration=2).set_transition("fade", 1.0),
            Scene(duration=1.5).set_transition("fade", 1.0),
            Scene(duration=2),
        ]
        _, overlaps, _ = layout_scenes(scenes)
        assert overlaps == [1.0, 0.5, 0.0]

    def test_empty(self):
        assert layout_scenes([]) == ([], [], 0.0)


class TestManifest:
    def test_total_duration(self):
        manifest = Manifest(scenes=[Scene(duration=2).set_transition("fade", 0.5), Scene(duration=2)])
        assert manifest.total_duration == 3.5

    def test_yaml_round_trip_keeps_nodes(self, tmp_path):
        scene = Scene(id="intro", duration=2).set_transition("crosswarp", 0.4)
        scene.add_child(TextNode(text="Hello", x=10, y=20).add_effect("fadeIn", 0.5))
        scene.add_child(ChartNode(option={"series": [{"type": "bar", "data": [1, 2]}]}))
        manifest = Manifest(name="demo", scenes=[scene], audio=AudioTrack(path="music.mp3"))

        path = tmp_path / "demo.yaml"
        manifest.to_yaml(path)
        loaded = Manifest.from_file(path)

        assert loaded.name == "demo"
        assert loaded.scenes[0].transition.name == "crosswarp"
        assert isinstance(loaded.scenes[0].children[1], ChartNode)
        assert loaded.scenes[0].children[0].effects[0].name == "fadeIn"
        assert loaded.audio.volume == 0.5

    def test_from_json(self, tmp_path):
        path = tmp_path / "video.json"
        path.write_text(json.dumps({
            "name": "json-video",
            "width": 640,
            "height": 360,
            "scenes": [{"duration": 1, "children": [{"type": "rect", "width": 5, "height": 5}]}],
        }))
        manifest = Manifest.from_file(path)
        assert manifest.width == 640
        assert isinstance(manifest.scenes[0].children[0], RectNode)
