"""Shared fixtures for chartreel tests."""

from pathlib import Path

import pytest

from chartreel.models import RectNode, Scene, TextNode


@pytest.fixture
def dirs(tmp_path):
    """Isolated output and cache directories."""
    output_dir = tmp_path / "output"
    cache_dir = tmp_path / "cache"
    return output_dir, cache_dir


@pytest.fixture
def small_scene():
    """A 1 second red scene with one white square in the middle."""
    def make(duration: float = 1.0, color: str = "#ff0000", transition=None) -> Scene:
        scene = Scene(bg_color=color, duration=duration)
        scene.add_child(RectNode(x=8, y=8, width=4, height=4, color="#ffffff"))
        if transition:
            scene.set_transition(transition, 0.5)
        return scene

    return make


@pytest.fixture
def fake_export(monkeypatch):
    """Replace video encoding with a loop that draws every frame.

    The encoder is the only part that needs ffmpeg. The fake pulls frames
    the same way moviepy does, so progress events still fire, and writes
    an empty file where the video would be.
    """
    calls = []

    def export(video, output_path, fps=30, **kwargs):
        frames = int(round(video.duration * fps))
        for i in range(frames):
            video.get_frame(i / fps)
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(b"")
        calls.append({"path": output_path, "fps": fps, "frames": frames, **kwargs})
        return output_path

    monkeypatch.setattr("chartreel.creator.export", export)
    return calls


@pytest.fixture
def title_node():
    return TextNode(text="Hello", x=50, y=50, font_size=16)
