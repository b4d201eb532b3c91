"""Entrance and exit animations for scene nodes.

Each animation maps its progress (0..1) to an :class:`EffectState`. The
renderer combines the states of every effect on a node and applies the
result to the node's sprite.
"""

from dataclasses import dataclass
from functools import reduce
from typing import Callable, Dict, Sequence, Tuple

import numpy as np

# Travel distances in pixels
NEAR = 100.0
BOUNCE = 600.0
SLIDE = 1200.0
BIG = 2000.0

_DIRECTIONS = {
    # Entrances arrive from the opposite side of the direction of motion
    "Up": (0.0, 1.0),
    "Down": (0.0, -1.0),
    "Left": (-1.0, 0.0),
    "Right": (1.0, 0.0),
}

# Exits move towards the named side
_EXIT_DIRECTIONS = {
    "Up": (0.0, -1.0),
    "Down": (0.0, 1.0),
    "Left": (-1.0, 0.0),
    "Right": (1.0, 0.0),
}


@dataclass(frozen=True)
class EffectState:
    """Transform applied to a node sprite at one instant."""

    opacity: float = 1.0
    dx: float = 0.0
    dy: float = 0.0
    scale: float = 1.0
    angle: float = 0.0
    blur: float = 0.0

    def combine(self, other: "EffectState") -> "EffectState":
        """Stack two states: opacity and scale multiply, the rest add."""
        return EffectState(
            opacity=self.opacity * other.opacity,
            dx=self.dx + other.dx,
            dy=self.dy + other.dy,
            scale=self.scale * other.scale,
            angle=self.angle + other.angle,
            blur=self.blur + other.blur,
        )

    @property
    def visible(self) -> bool:
        return self.opacity > 1e-3 and self.scale > 1e-3


IDENTITY = EffectState()

Keyframe = Callable[[float], EffectState]


@dataclass(frozen=True)
class EffectSpec:
    """A named animation."""

    name: str
    keyframe: Keyframe
    exit: bool = False


def ease_out(p: float) -> float:
    return 1.0 - (1.0 - p) ** 3


def ease_in(p: float) -> float:
    return p ** 3


def _track(points: Sequence[Tuple[float, float]], p: float) -> float:
    xs, ys = zip(*points)
    return float(np.interp(p, xs, ys))


def _fade_in(distance: float = 0.0, direction: str = "") -> Keyframe:
    ux, uy = _DIRECTIONS.get(direction, (0.0, 0.0))

    def keyframe(p: float) -> EffectState:
        e = ease_out(p)
        rest = (1.0 - e) * distance
        return EffectState(opacity=e, dx=ux * rest, dy=uy * rest)

    return keyframe


def _fade_out(distance: float = 0.0, direction: str = "") -> Keyframe:
    ux, uy = _EXIT_DIRECTIONS.get(direction, (0.0, 0.0))

    def keyframe(p: float) -> EffectState:
        e = ease_in(p)
        return EffectState(opacity=1.0 - e, dx=ux * e * distance, dy=uy * e * distance)

    return keyframe


def _zoom_in(direction: str = "") -> Keyframe:
    ux, uy = _DIRECTIONS.get(direction, (0.0, 0.0))

    def keyframe(p: float) -> EffectState:
        e = ease_out(p)
        rest = (1.0 - e) * BOUNCE
        return EffectState(
            opacity=min(1.0, p * 2.0),
            scale=0.3 + 0.7 * e if not direction else 0.1 + 0.9 * e,
            dx=ux * rest,
            dy=uy * rest,
        )

    return keyframe


def _zoom_out(p: float) -> EffectState:
    e = ease_in(p)
    return EffectState(opacity=1.0 - e, scale=1.0 - 0.7 * e)


_BOUNCE_SCALE = [(0.0, 0.3), (0.2, 1.1), (0.4, 0.9), (0.6, 1.03), (0.8, 0.97), (1.0, 1.0)]
_BOUNCE_TRAVEL = [(0.0, 1.0), (0.6, -0.04), (0.75, 0.02), (0.9, -0.008), (1.0, 0.0)]


def _bounce_in(direction: str = "") -> Keyframe:
    ux, uy = _DIRECTIONS.get(direction, (0.0, 0.0))

    def keyframe(p: float) -> EffectState:
        opacity = min(1.0, p / 0.6)
        if not direction:
            return EffectState(opacity=opacity, scale=_track(_BOUNCE_SCALE, p))
        travel = _track(_BOUNCE_TRAVEL, p) * BOUNCE
        return EffectState(opacity=opacity, dx=ux * travel, dy=uy * travel)

    return keyframe


def _back_in(direction: str = "") -> Keyframe:
    ux, uy = _DIRECTIONS.get(direction, (0.0, 0.0))

    def keyframe(p: float) -> EffectState:
        travel = (1.0 - ease_out(min(1.0, p / 0.8))) * SLIDE if direction else 0.0
        scale = 0.7 if p < 0.8 else 0.7 + 0.3 * ease_out((p - 0.8) / 0.2)
        opacity = 0.7 + 0.3 * (1.0 if p >= 0.8 else p / 0.8)
        return EffectState(opacity=opacity, scale=scale, dx=ux * travel, dy=uy * travel)

    return keyframe


def _rotate_in(start_angle: float) -> Keyframe:
    def keyframe(p: float) -> EffectState:
        e = ease_out(p)
        return EffectState(opacity=e, angle=(1.0 - e) * start_angle)

    return keyframe


def _slide_in(direction: str) -> Keyframe:
    ux, uy = _DIRECTIONS[direction]

    def keyframe(p: float) -> EffectState:
        rest = (1.0 - ease_out(p)) * SLIDE
        return EffectState(dx=ux * rest, dy=uy * rest)

    return keyframe


def _slide_out(direction: str) -> Keyframe:
    ux, uy = _EXIT_DIRECTIONS[direction]

    def keyframe(p: float) -> EffectState:
        e = ease_in(p)
        return EffectState(
            opacity=0.0 if p >= 1.0 else 1.0,
            dx=ux * e * SLIDE,
            dy=uy * e * SLIDE,
        )

    return keyframe


def _roll_in(p: float) -> EffectState:
    e = ease_out(p)
    return EffectState(opacity=e, dx=-(1.0 - e) * BOUNCE, angle=(1.0 - e) * 120.0)


def _blur_in(p: float) -> EffectState:
    e = ease_out(p)
    return EffectState(opacity=e, blur=(1.0 - e) * 20.0)


def _build_registry() -> Dict[str, EffectSpec]:
    specs = [
        EffectSpec("fadeIn", _fade_in()),
        EffectSpec("fadeOut", _fade_out(), exit=True),
        EffectSpec("zoomIn", _zoom_in()),
        EffectSpec("zoomOut", _zoom_out, exit=True),
        EffectSpec("bounceIn", _bounce_in()),
        EffectSpec("backIn", _back_in()),
        EffectSpec("rotateIn", _rotate_in(200.0)),
        EffectSpec("rotateInDownLeft", _rotate_in(45.0)),
        EffectSpec("rotateInDownRight", _rotate_in(-45.0)),
        EffectSpec("rotateInUpLeft", _rotate_in(-45.0)),
        EffectSpec("rotateInUpRight", _rotate_in(90.0)),
        EffectSpec("rollIn", _roll_in),
        EffectSpec("blurIn", _blur_in),
    ]
    for direction in _DIRECTIONS:
        specs.extend([
            EffectSpec(f"fadeIn{direction}", _fade_in(NEAR, direction)),
            EffectSpec(f"fadeIn{direction}Big", _fade_in(BIG, direction)),
            EffectSpec(f"fadeOut{direction}", _fade_out(NEAR, direction), exit=True),
            EffectSpec(f"zoomIn{direction}", _zoom_in(direction)),
            EffectSpec(f"bounceIn{direction}", _bounce_in(direction)),
            EffectSpec(f"backIn{direction}", _back_in(direction)),
            EffectSpec(f"slideIn{direction}", _slide_in(direction)),
            EffectSpec(f"slideOut{direction}", _slide_out(direction), exit=True),
        ])
    return {spec.name: spec for spec in specs}


EFFECTS: Dict[str, EffectSpec] = _build_registry()


def get_effect(name: str) -> EffectSpec:
    """Get an animation by name.

    Raises:
        ValueError: If the animation is not registered.
    """
    if name not in EFFECTS:
        raise ValueError(f"Unknown effect: {name}. Available: {sorted(EFFECTS)}")
    return EFFECTS[name]


def effect_state(effect, t: float) -> EffectState:
    """State of one effect at scene-local time ``t``.

    Before its delay an effect holds its first keyframe and after it ends
    it holds its last, so entrances start hidden and exits end hidden.
    """
    spec = get_effect(effect.name)
    progress = (t - effect.delay) / effect.duration
    return spec.keyframe(min(1.0, max(0.0, progress)))


def node_position(node, t: float) -> Tuple[float, float]:
    """Anchor position of a node at scene-local time ``t`` after its motions."""
    x, y = node.x, node.y
    for motion in node.motions:
        target_x = x if motion.x is None else motion.x
        target_y = y if motion.y is None else motion.y
        if t <= motion.delay:
            break
        p = min(1.0, (t - motion.delay) / motion.duration)
        x, y = x + (target_x - x) * p, y + (target_y - y) * p
        if p < 1.0:
            break
    return x, y


def node_state(node, t: float) -> EffectState:
    """Combined state of all effects on a node at scene-local time ``t``."""
    state = reduce(
        EffectState.combine,
        (effect_state(effect, t) for effect in node.effects),
        IDENTITY,
    )
    return state.combine(EffectState(opacity=node.opacity))
