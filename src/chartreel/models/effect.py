"""Animation and transition data models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Effect(BaseModel):
    """Entrance or exit animation attached to a node."""

    name: str = Field(..., description="Animation name, e.g. 'fadeIn' or 'bounceIn'")
    duration: float = Field(default=1.0, description="Animation length in seconds", gt=0)
    delay: float = Field(default=0.0, description="Start offset inside the scene", ge=0)

    class Config:
        """Pydantic config."""
        frozen = False

    @field_validator("name")
    @classmethod
    def _known_effect(cls, value: str) -> str:
        from ..editor.effects import EFFECTS

        if value not in EFFECTS:
            raise ValueError(f"Unknown effect: {value}. Available: {sorted(EFFECTS)}")
        return value


class Transition(BaseModel):
    """Visual effect played from the end of one scene into the next."""

    name: str = Field(..., description="Transition name, e.g. 'fade' or 'crosswarp'")
    duration: float = Field(default=0.5, description="Overlap length in seconds", gt=0)

    class Config:
        """Pydantic config."""
        frozen = False

    @field_validator("name")
    @classmethod
    def _known_transition(cls, value: str) -> str:
        from ..editor.transitions import TRANSITIONS

        if value.lower() not in TRANSITIONS:
            raise ValueError(
                f"Unknown transition: {value}. Available: {sorted(TRANSITIONS)}"
            )
        return value


class Motion(BaseModel):
    """Linear move of a node towards a target position.

    Motions on a node run in order, each starting where the previous one
    ended. An omitted coordinate stays where it is.
    """

    x: Optional[float] = Field(None, description="Target x in pixels")
    y: Optional[float] = Field(None, description="Target y in pixels")
    duration: float = Field(default=1.0, description="Move length in seconds", gt=0)
    delay: float = Field(default=0.0, description="Start offset inside the scene", ge=0)

    class Config:
        """Pydantic config."""
        frozen = False
