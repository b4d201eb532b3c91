"""Background audio for rendered videos."""

import logging
from pathlib import Path

from moviepy import AudioFileClip, VideoClip, CompositeAudioClip
from moviepy.audio.fx import AudioFadeOut

from ..models import AudioTrack

logger = logging.getLogger(__name__)


def load_audio(audio_path: Path) -> AudioFileClip:
    """Load an audio file.

    Raises:
        FileNotFoundError: If audio file doesn't exist.
    """
    if not audio_path.exists():
        raise FileNotFoundError(f"Audio file not found: {audio_path}")

    return AudioFileClip(str(audio_path))


def fit_audio(audio, duration: float, loop: bool = True, volume: float = 1.0, fade_out: float = 0.0):
    """Shape a track to a video of ``duration`` seconds.

    Args:
        audio: Audio clip to shape.
        duration: Video duration in seconds.
        loop: Repeat a shorter track up to the video length. Otherwise it
            simply ends early.
        volume: Volume multiplier (1.0 = original).
        fade_out: Fade out over the last seconds of the track.

    Returns:
        Audio clip no longer than ``duration``.
    """
    if audio.duration < duration and loop:
        audio = loop_audio(audio, duration)
    elif audio.duration > duration:
        audio = audio.subclipped(0, duration)

    if volume != 1.0:
        audio = audio.with_volume_scaled(volume)

    if fade_out > 0:
        audio = audio.with_effects([AudioFadeOut(min(fade_out, audio.duration))])
    return audio


def attach_audio(video: VideoClip, track: AudioTrack) -> VideoClip:
    """Add a manifest audio track to a video, fitted to its duration."""
    path = Path(track.path)
    audio = fit_audio(load_audio(path), video.duration, track.loop, track.volume, track.fade_out)
    logger.debug(f"Audio {path.name}: {audio.duration:.2f}s, volume {track.volume}")
    return video.with_audio(audio)


def loop_audio(
    audio: AudioFileClip,
    target_duration: float
) -> CompositeAudioClip:
    """Loop audio to match a target duration.

    Args:
        audio: Audio clip to loop.
        target_duration: Target duration in seconds.

    Returns:
        Audio clip looped to target duration.
    """
    if audio.duration >= target_duration:
        return audio.subclipped(0, target_duration)

    loops_needed = int(target_duration / audio.duration) + 1
    clips = [audio.with_start(i * audio.duration) for i in range(loops_needed)]

    # Composite and trim to exact duration
    composite = CompositeAudioClip(clips)
    return composite.subclipped(0, target_duration)
