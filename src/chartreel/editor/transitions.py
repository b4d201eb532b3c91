"""Scene-to-scene transitions.

A transition blends the outgoing frame ``a`` into the incoming frame ``b``
for a progress value in 0..1. Frames are ``(height, width, 3)`` uint8 arrays
of the same shape.
"""

import math
from typing import Callable, Dict

import numpy as np
from PIL import Image

TransitionFn = Callable[[np.ndarray, np.ndarray, float, int], np.ndarray]


def _blend(a: np.ndarray, b: np.ndarray, mask) -> np.ndarray:
    """Mix ``b`` over ``a`` with a scalar or per-pixel weight."""
    if isinstance(mask, np.ndarray) and mask.ndim == 2:
        mask = mask[:, :, None]
    out = a.astype(np.float32) * (1.0 - mask) + b.astype(np.float32) * mask
    return np.clip(out, 0, 255).astype(np.uint8)


def _grid(frame: np.ndarray):
    h, w = frame.shape[:2]
    ys, xs = np.mgrid[0:h, 0:w].astype(np.float32)
    return xs / max(w - 1, 1), ys / max(h - 1, 1)


def _zoomed(frame: np.ndarray, factor: float) -> np.ndarray:
    """Scale a frame about its centre, cropping back to the original size."""
    if factor <= 1.0:
        return frame
    h, w = frame.shape[:2]
    cw, ch = max(1, int(w / factor)), max(1, int(h / factor))
    left, top = (w - cw) // 2, (h - ch) // 2
    crop = Image.fromarray(frame).crop((left, top, left + cw, top + ch))
    return np.asarray(crop.resize((w, h), Image.BILINEAR))


def crossfade(a, b, p, seed=0):
    return _blend(a, b, p)


def cut(a, b, p, seed=0):
    return a.copy() if p < 0.5 else b.copy()


def _push(dx: int, dy: int) -> TransitionFn:
    """Incoming frame pushes the outgoing one off screen along (dx, dy)."""

    def transition(a, b, p, seed=0):
        h, w = a.shape[:2]
        out = np.empty_like(a)
        if dx:
            off = int(round(p * w))
            if dx < 0:
                out[:, :w - off] = a[:, off:]
                out[:, w - off:] = b[:, :off]
            else:
                out[:, off:] = a[:, :w - off]
                out[:, :off] = b[:, w - off:]
        else:
            off = int(round(p * h))
            if dy < 0:
                out[:h - off] = a[off:]
                out[h - off:] = b[:off]
            else:
                out[off:] = a[:h - off]
                out[:off] = b[h - off:]
        return out

    return transition


def zoom(a, b, p, seed=0):
    return _blend(_zoomed(a, 1.0 + p), b, p)


def backoff(a, b, p, seed=0):
    return _blend(a, _zoomed(b, 2.0 - p), p)


def _wipe(direction_x: float, direction_y: float, softness: float = 0.15) -> TransitionFn:
    def transition(a, b, p, seed=0):
        xs, ys = _grid(a)
        norm = abs(direction_x) + abs(direction_y)
        # Normalise so the wipe starts at 0 and ends at 1
        lowest = (min(direction_x, 0.0) + min(direction_y, 0.0)) / norm
        coord = (xs * direction_x + ys * direction_y) / norm - lowest
        edge = p * (1.0 + softness)
        mask = np.clip((edge - coord) / softness, 0.0, 1.0)
        return _blend(a, b, mask)

    return transition


def _slices(count: int, vertical: bool, stagger: float) -> TransitionFn:
    def transition(a, b, p, seed=0):
        xs, ys = _grid(a)
        axis = xs if vertical else ys
        position = axis * count
        index = np.floor(position)
        local = position - index
        delay = index / max(count - 1, 1) * stagger
        slice_progress = np.clip((p - delay) / max(1.0 - stagger, 1e-6), 0.0, 1.0)
        mask = (local < slice_progress).astype(np.float32)
        return _blend(a, b, mask)

    return transition


def iris(a, b, p, seed=0):
    xs, ys = _grid(a)
    h, w = a.shape[:2]
    aspect = w / max(h, 1)
    dist = np.sqrt(((xs - 0.5) * aspect) ** 2 + (ys - 0.5) ** 2)
    radius = p * math.sqrt(aspect ** 2 + 1.0) / 2.0
    return _blend(a, b, (dist <= radius).astype(np.float32))


def shake(a, b, p, seed=0):
    h, w = a.shape[:2]
    amplitude = 0.03 * w * (1.0 - abs(2.0 * p - 1.0))
    phase = (seed % 7) * 0.9
    off_x = int(round(amplitude * math.sin(p * math.pi * 10 + phase)))
    off_y = int(round(amplitude * 0.5 * math.cos(p * math.pi * 14 + phase)))
    moved = np.roll(_blend(a, b, p), (off_y, off_x), axis=(0, 1))
    return moved


def stretch(a, b, p, seed=0):
    h, w = a.shape[:2]
    out = a.copy()
    new_w = max(1, int(round(w * p)))
    squeezed = np.asarray(Image.fromarray(b).resize((new_w, h), Image.BILINEAR))
    left = (w - new_w) // 2
    out[:, left:left + new_w] = squeezed
    return out


TRANSITIONS: Dict[str, TransitionFn] = {
    "fade": crossfade,
    "fadein": crossfade,
    "dreamy": crossfade,
    "colorphase": crossfade,
    "fluidly": crossfade,
    "quicksand": crossfade,
    "slideleft": _push(-1, 0),
    "moveleft": _push(-1, 0),
    "slideright": _push(1, 0),
    "moveright": _push(1, 0),
    "slideup": _push(0, -1),
    "slidedown": _push(0, 1),
    "zoomin": zoom,
    "zoomright": zoom,
    "fat": zoom,
    "backoff": backoff,
    "crosswarp": _wipe(1.0, 0.0),
    "directionalwarp": _wipe(-1.0, 1.0),
    "windowslice": _slices(10, vertical=True, stagger=0.5),
    "slice": _slices(6, vertical=True, stagger=0.0),
    "windowshades": _slices(8, vertical=False, stagger=0.0),
    "circlecrop": iris,
    "radiation": iris,
    "fastswitch": cut,
    "shake": shake,
    "stretch": stretch,
}


def transition_frame(
    name: str,
    a: np.ndarray,
    b: np.ndarray,
    progress: float,
    seed: int = 0
) -> np.ndarray:
    """Blend two frames with a named transition.

    Args:
        name: Transition name (case-insensitive).
        a: Outgoing frame.
        b: Incoming frame.
        progress: 0 shows ``a``, 1 shows ``b``.
        seed: Varies randomised transitions between scene pairs.

    Raises:
        ValueError: If the transition is unknown.
    """
    key = name.lower()
    if key not in TRANSITIONS:
        raise ValueError(f"Unknown transition: {name}. Available: {sorted(TRANSITIONS)}")
    progress = min(1.0, max(0.0, progress))
    if progress <= 0.0:
        return a.copy()
    if progress >= 1.0:
        return b.copy()
    return TRANSITIONS[key](a, b, progress, seed)
