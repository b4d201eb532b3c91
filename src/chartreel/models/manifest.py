"""Manifest data model."""

import json
from typing import List, Optional
from pathlib import Path
from pydantic import BaseModel, Field
import yaml

from .scene import Scene, layout_scenes


class AudioTrack(BaseModel):
    """Background audio for a video."""

    path: str = Field(..., description="Path to the audio file")
    loop: bool = Field(default=True, description="Loop audio to the video length")
    volume: float = Field(default=0.5, description="Volume multiplier", ge=0)
    fade_out: float = Field(default=0.0, description="Fade out at the end (seconds)", ge=0)


class Manifest(BaseModel):
    """Complete declarative description of one video."""

    name: str = Field(default="untitled", description="Video name")
    width: int = Field(default=1080, description="Canvas width in pixels", gt=0)
    height: int = Field(default=1920, description="Canvas height in pixels", gt=0)
    fps: int = Field(default=30, description="Frames per second", gt=0)
    output: Optional[str] = Field(None, description="Output file name or path")
    scenes: List[Scene] = Field(default_factory=list, description="Ordered scenes")
    audio: Optional[AudioTrack] = Field(None, description="Background audio")

    class Config:
        """Pydantic config."""
        frozen = False

    @property
    def total_duration(self) -> float:
        """Rendered length in seconds, transition overlaps included."""
        return layout_scenes(self.scenes)[2]

    @classmethod
    def from_yaml(cls, path: Path) -> "Manifest":
        """Load manifest from YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f)
        return cls(**data)

    @classmethod
    def from_json(cls, path: Path) -> "Manifest":
        """Load manifest from JSON file."""
        with open(path, "r") as f:
            data = json.load(f)
        return cls(**data)

    @classmethod
    def from_file(cls, path: Path) -> "Manifest":
        """Load manifest from a YAML or JSON file, chosen by suffix."""
        if path.suffix.lower() == ".json":
            return cls.from_json(path)
        return cls.from_yaml(path)

    def to_yaml(self, path: Path) -> None:
        """Save manifest to YAML file."""
        with open(path, "w") as f:
            yaml.safe_dump(
                self.model_dump(mode="json", exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
