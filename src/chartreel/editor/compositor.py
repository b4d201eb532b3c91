"""Frame compositor for scenes and the scene timeline."""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np
from moviepy import VideoClip
from PIL import Image

from ..models import ChartNode, Scene, layout_scenes
from .charts import ChartAnimator
from .colors import parse_color
from .effects import node_position, node_state
from .overlays import anchor_offset, apply_state, paste_centered, render_node
from .transitions import transition_frame

logger = logging.getLogger(__name__)


class SceneRenderer:
    """Draws one scene at scene-local times.

    Static sprites are rendered once per node and chart sprites are cached
    by the chart animator, so only the per-frame transforms are recomputed.
    """

    def __init__(self, scene: Scene, width: int, height: int) -> None:
        self.scene = scene
        self.width = width
        self.height = height

        r, g, b, a = parse_color(scene.bg_color)
        self._background = (r, g, b, 255) if a else (0, 0, 0, 255)
        self._sprites: Dict[int, Image.Image] = {}
        self._animators: Dict[int, ChartAnimator] = {}

    def _sprite(self, node, t: float) -> Image.Image:
        key = id(node)
        if isinstance(node, ChartNode):
            if key not in self._animators:
                self._animators[key] = ChartAnimator(node)
            return self._animators[key].render(t)
        if key not in self._sprites:
            self._sprites[key] = render_node(node)
        return self._sprites[key]

    def frame(self, t: float) -> np.ndarray:
        """Render the scene at local time ``t`` as an RGB array."""
        canvas = Image.new("RGBA", (self.width, self.height), self._background)

        for node in self.scene.children:
            state = node_state(node, t)
            if not state.visible:
                continue
            sprite = self._sprite(node, t)
            left, top = anchor_offset(node, sprite.size)
            x, y = node_position(node, t)
            cx = left + sprite.width / 2 + state.dx + x - node.x
            cy = top + sprite.height / 2 + state.dy + y - node.y
            paste_centered(canvas, apply_state(sprite, state), cx, cy)

        return np.asarray(canvas.convert("RGB"))


class Timeline:
    """Sequence of scenes with transition overlaps.

    Raises:
        ValueError: If no scenes are given.
    """

    def __init__(self, scenes: Sequence[Scene], width: int, height: int, fps: int = 30) -> None:
        if not scenes:
            raise ValueError("No scenes provided")

        self.scenes: List[Scene] = list(scenes)
        self.width = width
        self.height = height
        self.fps = fps
        self.starts, self.overlaps, self.duration = layout_scenes(self.scenes)
        self._renderers = [SceneRenderer(scene, width, height) for scene in self.scenes]
        logger.debug(f"Timeline: {len(self.scenes)} scenes, {self.duration:.2f}s at {width}x{height}")

    @property
    def total_frames(self) -> int:
        return max(1, int(round(self.duration * self.fps)))

    def scene_index(self, t: float) -> int:
        """Index of the scene that owns time ``t`` (the outgoing one during a transition)."""
        for i, scene in enumerate(self.scenes):
            if t < self.starts[i] + scene.duration:
                return i
        return len(self.scenes) - 1

    def frame(self, t: float) -> np.ndarray:
        """Composed RGB frame at global time ``t``."""
        t = min(max(0.0, t), self.duration)
        i = self.scene_index(t)
        scene = self.scenes[i]
        local = min(t - self.starts[i], scene.duration)
        current = self._renderers[i].frame(local)

        if i + 1 < len(self.scenes) and self.overlaps[i] > 0 and t >= self.starts[i + 1]:
            incoming = self._renderers[i + 1].frame(t - self.starts[i + 1])
            progress = (t - self.starts[i + 1]) / self.overlaps[i]
            return transition_frame(scene.transition.name, current, incoming, progress, seed=i)

        return current


def build_video(timeline: Timeline, frame_hook: Optional[Callable[[float], None]] = None) -> VideoClip:
    """Wrap a timeline in a moviepy clip.

    Args:
        timeline: Timeline to draw frames from.
        frame_hook: Called with the time of every frame drawn.

    Returns:
        VideoClip lasting the whole timeline.
    """

    def draw(t: float) -> np.ndarray:
        if frame_hook is not None:
            frame_hook(t)
        return timeline.frame(t)

    return VideoClip(draw, duration=timeline.duration)


def export(
    video: VideoClip,
    output_path: Path,
    fps: int = 30,
    codec: str = "libx264",
    audio_codec: str = "aac",
    bitrate: Optional[str] = None,
    preset: str = "medium",
    temp_dir: Optional[Path] = None,
    progress_bar: Optional[str] = None
) -> Path:
    """Export video to file with proper encoding.

    Args:
        video: Video clip to export.
        output_path: Path for output file.
        fps: Frames per second (default 30).
        codec: Video codec (default libx264).
        audio_codec: Audio codec (default aac).
        bitrate: Video bitrate (e.g., "5000k"). None for auto.
        preset: Encoding preset (ultrafast, fast, medium, slow, slower).
        temp_dir: Directory for the temporary audio file.
        progress_bar: moviepy progress logger ("bar" or None).

    Returns:
        Path to the exported video file.
    """
    # Ensure output directory exists
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Build export parameters
    export_params = {
        "fps": fps,
        "codec": codec,
        "audio_codec": audio_codec,
        "preset": preset,
        "logger": progress_bar,
    }

    if bitrate:
        export_params["bitrate"] = bitrate

    if temp_dir is not None:
        temp_dir.mkdir(parents=True, exist_ok=True)
        export_params["temp_audiofile_path"] = str(temp_dir)

    video.write_videofile(str(output_path), **export_params)

    return output_path
