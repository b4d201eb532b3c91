"""Render lifecycle: scenes in, MP4 out, with progress events."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from moviepy import VideoClip

from .config import config
from .editor.audio import attach_audio
from .editor.compositor import Timeline, build_video, export
from .models import AudioTrack, Manifest, Scene, layout_scenes

logger = logging.getLogger(__name__)

EVENTS = ("start", "progress", "complete", "error")


class RenderError(Exception):
    """Raised when a video cannot be rendered."""


@dataclass
class StartEvent:
    output: Path
    total_frames: int
    duration: float


@dataclass
class ProgressEvent:
    """Render progress; ``percent`` runs from 0 to 1."""

    percent: float
    frame: int
    total_frames: int


@dataclass
class CompleteEvent:
    output: Path
    duration: float


@dataclass
class ErrorEvent:
    error: BaseException


class ProgressTracker:
    """Turns frame draws into monotonic progress events.

    Every distinct frame index counts once, so re-reads of the same frame
    by the encoder do not move progress. Events are emitted in steps of at
    least ``step``.
    """

    def __init__(
        self,
        total_frames: int,
        fps: int,
        emit: Callable[[ProgressEvent], None],
        step: float = 0.01
    ) -> None:
        self.total_frames = total_frames
        self.fps = fps
        self._emit = emit
        self._step = step
        self._seen = set()
        self._last = 0.0

    @property
    def percent(self) -> float:
        return self._last

    def __call__(self, t: float) -> None:
        self._seen.add(int(round(t * self.fps)))
        percent = min(1.0, len(self._seen) / self.total_frames)
        if percent - self._last >= self._step or (percent >= 1.0 > self._last):
            self._last = percent
            self._emit(ProgressEvent(percent, len(self._seen), self.total_frames))

    def finish(self) -> None:
        """Report completion if the encoder stopped short of the last frame."""
        if self._last < 1.0:
            self._last = 1.0
            self._emit(ProgressEvent(1.0, self.total_frames, self.total_frames))


class Creator:
    """Collects scenes and renders them to a video file.

    Example:
        creator = Creator(width=1080, height=1920, output="story.mp4")
        creator.add_child(scene)
        creator.on("complete", lambda e: print(e.output))
        creator.start()
    """

    def __init__(
        self,
        width: int = 1080,
        height: int = 1920,
        fps: Optional[int] = None,
        output: str = "output.mp4",
        output_dir: Optional[Path] = None,
        cache_dir: Optional[Path] = None,
        preset: Optional[str] = None,
        bitrate: Optional[str] = None,
    ) -> None:
        """Initialize the creator.

        Args:
            width: Canvas width in pixels.
            height: Canvas height in pixels.
            fps: Frame rate. Defaults to config.fps.
            output: Output file. Relative paths land in ``output_dir``.
            output_dir: Defaults to config.output_dir.
            cache_dir: Scratch directory. Defaults to config.cache_dir.
            preset: x264 preset. Defaults to config.preset.
            bitrate: Video bitrate such as "5000k". None for auto.
        """
        self.width = width
        self.height = height
        self.fps = fps or config.fps
        self.output = output
        self.output_dir = Path(output_dir) if output_dir else config.output_dir
        self.cache_dir = Path(cache_dir) if cache_dir else config.cache_dir
        self.preset = preset or config.preset
        self.bitrate = bitrate

        self.scenes: List[Scene] = []
        self.audio: Optional[AudioTrack] = None
        self._listeners: Dict[str, List[Callable[[Any], None]]] = {name: [] for name in EVENTS}

    def add_child(self, scene: Scene) -> "Creator":
        """Append a scene.

        Raises:
            TypeError: If ``scene`` is not a Scene.
        """
        if not isinstance(scene, Scene):
            raise TypeError(f"Creator children must be scenes, got {type(scene).__name__}")
        self.scenes.append(scene)
        return self

    add_scene = add_child

    def add_audio(
        self,
        path: str,
        loop: bool = True,
        volume: float = 0.5,
        fade_out: float = 0.0
    ) -> "Creator":
        """Set the background audio track."""
        self.audio = AudioTrack(path=str(path), loop=loop, volume=volume, fade_out=fade_out)
        return self

    def on(self, event: str, callback: Callable[[Any], None]) -> "Creator":
        """Register a listener for start, progress, complete or error.

        Raises:
            ValueError: If the event name is unknown.
        """
        if event not in self._listeners:
            raise ValueError(f"Unknown event: {event}. Available: {list(EVENTS)}")
        self._listeners[event].append(callback)
        return self

    def _emit(self, event: str, payload: Any) -> None:
        for callback in self._listeners[event]:
            callback(payload)

    @property
    def output_path(self) -> Path:
        path = Path(self.output)
        if path.is_absolute():
            return path
        return self.output_dir / path

    @property
    def duration(self) -> float:
        return layout_scenes(self.scenes)[2]

    def build(self, timeline: Optional[Timeline] = None, frame_hook=None) -> VideoClip:
        """Assemble the moviepy clip without encoding it.

        Raises:
            RenderError: If there are no scenes.
            FileNotFoundError: If the audio file doesn't exist.
        """
        if not self.scenes:
            raise RenderError("No scenes to render")

        timeline = timeline or Timeline(self.scenes, self.width, self.height, self.fps)
        video = build_video(timeline, frame_hook)

        if self.audio:
            video = attach_audio(video, self.audio)
        return video

    def start(self) -> Path:
        """Render the video synchronously.

        Emits ``start``, then ``progress`` events, then ``complete``. On any
        failure emits ``error`` and raises.

        Returns:
            Path to the rendered file.

        Raises:
            RenderError: If rendering fails for any reason.
        """
        output_path = self.output_path
        video = None
        try:
            if not self.scenes:
                raise RenderError("No scenes to render")

            self.output_dir.mkdir(parents=True, exist_ok=True)
            self.cache_dir.mkdir(parents=True, exist_ok=True)

            timeline = Timeline(self.scenes, self.width, self.height, self.fps)
            tracker = ProgressTracker(
                timeline.total_frames,
                self.fps,
                lambda event: self._emit("progress", event),
            )

            logger.info(f"Rendering {len(self.scenes)} scenes ({timeline.duration:.1f}s) to {output_path}")
            self._emit("start", StartEvent(output_path, timeline.total_frames, timeline.duration))

            video = self.build(timeline, tracker)
            export(
                video,
                output_path,
                fps=self.fps,
                bitrate=self.bitrate,
                preset=self.preset,
                temp_dir=self.cache_dir,
            )
            tracker.finish()
        except Exception as e:
            logger.error(f"Render failed: {e}")
            self._emit("error", ErrorEvent(e))
            if isinstance(e, RenderError):
                raise
            raise RenderError(f"Render failed: {e}") from e
        finally:
            if video is not None:
                video.close()

        self._emit("complete", CompleteEvent(output_path, timeline.duration))
        return output_path

    @classmethod
    def from_manifest(
        cls,
        manifest: Manifest,
        output_dir: Optional[Path] = None,
        cache_dir: Optional[Path] = None
    ) -> "Creator":
        """Create a creator from a manifest."""
        creator = cls(
            width=manifest.width,
            height=manifest.height,
            fps=manifest.fps,
            output=manifest.output or f"{manifest.name}.mp4",
            output_dir=output_dir,
            cache_dir=cache_dir,
        )
        for scene in manifest.scenes:
            creator.add_child(scene)
        creator.audio = manifest.audio
        return creator

    def to_manifest(self, name: str = "untitled") -> Manifest:
        """Describe the current scenes as a manifest."""
        return Manifest(
            name=name,
            width=self.width,
            height=self.height,
            fps=self.fps,
            output=self.output,
            scenes=list(self.scenes),
            audio=self.audio,
        )
