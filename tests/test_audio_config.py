"""Tests for audio helpers and configuration."""

from pathlib import Path

import numpy as np
import pytest
from moviepy import AudioClip, ColorClip

from chartreel.config import Config
from chartreel.editor import attach_audio, fit_audio, load_audio, loop_audio
from chartreel.models import AudioTrack


def tone(duration: float = 1.0) -> AudioClip:
    return AudioClip(lambda t: np.sin(2 * np.pi * 440 * t), duration=duration, fps=8000)


class TestAudio:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_audio(tmp_path / "missing.mp3")

    def test_attach_missing_track(self, tmp_path):
        video = ColorClip((16, 16), color=(0, 0, 0), duration=1.0)
        with pytest.raises(FileNotFoundError):
            attach_audio(video, AudioTrack(path=str(tmp_path / "missing.mp3")))

    def test_loop_to_longer_duration(self):
        assert loop_audio(tone(1.0), 2.5).duration == pytest.approx(2.5)

    def test_loop_trims_longer_track(self):
        assert loop_audio(tone(3.0), 1.0).duration == pytest.approx(1.0)

    def test_fit_loops_short_track(self):
        assert fit_audio(tone(1.0), 2.5).duration == pytest.approx(2.5)

    def test_fit_without_loop_ends_early(self):
        assert fit_audio(tone(1.0), 2.5, loop=False).duration == pytest.approx(1.0)

    def test_fit_trims_long_track(self):
        assert fit_audio(tone(4.0), 2.0, loop=False).duration == pytest.approx(2.0)

    def test_volume_and_fade_keep_duration(self):
        clip = fit_audio(tone(2.0), 2.0, volume=0.5, fade_out=5.0)
        assert clip.duration == pytest.approx(2.0)

    def test_fit_without_changes_is_noop(self):
        clip = tone(2.0)
        assert fit_audio(clip, 2.0) is clip


class TestConfig:
    def test_defaults(self, monkeypatch):
        for name in ("CHARTREEL_OUTPUT_DIR", "CHARTREEL_CACHE_DIR", "CHARTREEL_FPS", "CHARTREEL_PRESET"):
            monkeypatch.delenv(name, raising=False)
        config = Config()
        assert config.output_dir == Path("./output")
        assert config.fps == 30
        assert config.preset == "medium"

    def test_environment_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CHARTREEL_OUTPUT_DIR", str(tmp_path / "videos"))
        monkeypatch.setenv("CHARTREEL_CACHE_DIR", str(tmp_path / "scratch"))
        monkeypatch.setenv("CHARTREEL_FPS", "24")
        config = Config()
        assert config.fps == 24
        config.ensure_dirs()
        assert (tmp_path / "videos").is_dir()
        assert (tmp_path / "scratch").is_dir()
