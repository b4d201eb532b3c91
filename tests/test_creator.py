"""Tests for the render lifecycle."""

import pytest

from chartreel.creator import Creator, ProgressTracker, RenderError
from chartreel.models import Manifest, Scene


def make_creator(dirs, **kwargs):
    output_dir, cache_dir = dirs
    kwargs.setdefault("output", "clip.mp4")
    return Creator(width=16, height=16, fps=10, output_dir=output_dir, cache_dir=cache_dir, **kwargs)


def record(creator):
    events = []
    for name in ("start", "progress", "complete", "error"):
        creator.on(name, lambda e, name=name: events.append((name, e)))
    return events


class TestProgressTracker:
    def test_counts_distinct_frames(self):
        emitted = []
        tracker = ProgressTracker(10, 10, emitted.append, step=0.05)
        for t in (0.0, 0.0, 0.1, 0.1, 0.2):
            tracker(t)
        assert [e.frame for e in emitted] == [1, 2, 3]
        assert tracker.percent == pytest.approx(0.3)

    def test_finish_reports_completion_once(self):
        emitted = []
        tracker = ProgressTracker(4, 10, emitted.append)
        tracker(0.0)
        tracker.finish()
        tracker.finish()
        assert emitted[-1].percent == 1.0
        assert sum(1 for e in emitted if e.percent == 1.0) == 1


class TestCreator:
    def test_add_child_requires_scene(self, dirs):
        with pytest.raises(TypeError):
            make_creator(dirs).add_child("scene")

    def test_unknown_event(self, dirs):
        with pytest.raises(ValueError):
            make_creator(dirs).on("finished", print)

    def test_output_path(self, dirs, tmp_path):
        assert make_creator(dirs).output_path == dirs[0] / "clip.mp4"
        absolute = tmp_path / "elsewhere.mp4"
        assert make_creator(dirs, output=str(absolute)).output_path == absolute

    def test_duration(self, dirs, small_scene):
        creator = make_creator(dirs).add_child(small_scene(transition="fade")).add_scene(small_scene())
        assert creator.duration == pytest.approx(1.5)

    def test_start_emits_lifecycle_events(self, dirs, small_scene, fake_export):
        creator = make_creator(dirs)
        creator.add_child(small_scene(transition="fade")).add_child(small_scene())
        events = record(creator)

        path = creator.start()

        assert path == dirs[0] / "clip.mp4"
        assert path.exists()
        names = [name for name, _ in events]
        assert names[0] == "start"
        assert names[-1] == "complete"
        assert "error" not in names

        start = events[0][1]
        assert start.total_frames == 15
        assert start.duration == pytest.approx(1.5)

        percents = [e.percent for name, e in events if name == "progress"]
        assert percents == sorted(percents)
        assert percents[-1] == 1.0
        assert events[-1][1].output == path

    def test_export_receives_settings(self, dirs, small_scene, fake_export):
        creator = make_creator(dirs, preset="ultrafast", bitrate="1000k")
        creator.add_child(small_scene())
        creator.start()
        call = fake_export[0]
        assert call["fps"] == 10
        assert call["preset"] == "ultrafast"
        assert call["bitrate"] == "1000k"
        assert call["temp_dir"] == dirs[1]
        assert dirs[1].is_dir()

    def test_no_scenes(self, dirs, fake_export):
        creator = make_creator(dirs)
        events = record(creator)
        with pytest.raises(RenderError):
            creator.start()
        assert [name for name, _ in events] == ["error"]
        assert fake_export == []

    def test_encoder_failure_is_wrapped(self, dirs, small_scene, monkeypatch):
        def broken(*args, **kwargs):
            raise OSError("ffmpeg exploded")

        monkeypatch.setattr("chartreel.creator.export", broken)
        creator = make_creator(dirs).add_child(small_scene())
        events = record(creator)

        with pytest.raises(RenderError) as info:
            creator.start()

        assert isinstance(info.value.__cause__, OSError)
        names = [name for name, _ in events]
        assert names[0] == "start"
        assert names[-1] == "error"
        assert "complete" not in names
        assert isinstance(events[-1][1].error, OSError)

    def test_missing_audio_fails_render(self, dirs, small_scene, fake_export, tmp_path):
        creator = make_creator(dirs).add_child(small_scene())
        creator.add_audio(str(tmp_path / "missing.mp3"))
        with pytest.raises(RenderError) as info:
            creator.start()
        assert isinstance(info.value.__cause__, FileNotFoundError)

    def test_build_without_scenes(self, dirs):
        with pytest.raises(RenderError):
            make_creator(dirs).build()


class TestManifestConversion:
    def test_from_manifest(self, dirs, small_scene):
        manifest = Manifest(name="promo", width=32, height=24, fps=12, scenes=[small_scene()])
        creator = Creator.from_manifest(manifest, output_dir=dirs[0], cache_dir=dirs[1])
        assert (creator.width, creator.height, creator.fps) == (32, 24, 12)
        assert creator.output == "promo.mp4"
        assert len(creator.scenes) == 1

    def test_to_manifest(self, dirs, small_scene):
        creator = make_creator(dirs).add_child(small_scene()).add_audio("song.mp3", volume=0.8)
        manifest = creator.to_manifest("clip")
        assert manifest.name == "clip"
        assert manifest.output == "clip.mp4"
        assert manifest.audio.volume == 0.8
        assert isinstance(manifest.scenes[0], Scene)
