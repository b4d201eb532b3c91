"""Scene data model."""

from typing import List, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, field_validator

from .effect import Transition
from .nodes import AnyNode


class Scene(BaseModel):
    """Represents a single timed segment of the video."""

    id: Optional[str] = Field(None, description="Scene identifier")
    bg_color: str = Field(default="#000000", description="Background color")
    duration: float = Field(default=5.0, description="Scene duration in seconds", gt=0)
    transition: Optional[Transition] = Field(None, description="Transition into the next scene")
    children: List[AnyNode] = Field(default_factory=list, description="Nodes in draw order")

    class Config:
        """Pydantic config."""
        frozen = False

    @field_validator("bg_color")
    @classmethod
    def _valid_color(cls, value: str) -> str:
        from ..editor.colors import parse_color

        parse_color(value)
        return value

    def set_bg_color(self, color: str) -> "Scene":
        from ..editor.colors import parse_color

        parse_color(color)
        self.bg_color = color
        return self

    def set_duration(self, duration: float) -> "Scene":
        if duration <= 0:
            raise ValueError(f"Scene duration must be positive, got {duration}")
        self.duration = duration
        return self

    def set_transition(self, name: str, duration: float = 0.5) -> "Scene":
        self.transition = Transition(name=name, duration=duration)
        return self

    def add_child(self, node: AnyNode) -> "Scene":
        self.children.append(node)
        return self


def layout_scenes(scenes: Sequence[Scene]) -> Tuple[List[float], List[float], float]:
    """Place scenes on a timeline.

    A scene's transition overlaps its tail with the head of the next scene.
    The overlap is clamped so that at most two scenes are visible at once.
    The last scene's transition has nothing to blend into and is ignored.

    Returns:
        Tuple of (start times, overlap after each scene, total duration).
    """
    starts: List[float] = []
    overlaps: List[float] = []
    cursor = 0.0
    incoming = 0.0

    for i, scene in enumerate(scenes):
        starts.append(cursor)
        overlap = 0.0
        if scene.transition is not None and i < len(scenes) - 1:
            overlap = min(
                scene.transition.duration,
                scene.duration - incoming,
                scenes[i + 1].duration,
            )
        overlaps.append(overlap)
        cursor += scene.duration - overlap
        incoming = overlap

    total = starts[-1] + scenes[-1].duration if scenes else 0.0
    return starts, overlaps, total
