"""Visual node data models.

Every node is positioned by ``x``/``y`` in canvas pixels. ``y`` is the
vertical centre of the node. ``x`` is the horizontal centre, except for text
nodes where it is the left edge, centre or right edge depending on ``align``.
"""

from typing import Annotated, Any, Callable, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from .effect import Effect, Motion

ChartUpdater = Callable[[Dict[str, Any], int], Optional[Dict[str, Any]]]


class Node(BaseModel):
    """Common fields for all visual nodes."""

    x: float = Field(default=0.0, description="Horizontal anchor in pixels")
    y: float = Field(default=0.0, description="Vertical centre in pixels")
    opacity: float = Field(default=1.0, description="Base opacity", ge=0, le=1)
    effects: List[Effect] = Field(default_factory=list, description="Animations")
    motions: List[Motion] = Field(default_factory=list, description="Keyframed moves")

    class Config:
        """Pydantic config."""
        frozen = False

    def add_effect(self, name: str, duration: float = 1.0, delay: float = 0.0):
        """Append an animation and return the node for chaining."""
        self.effects.append(Effect(name=name, duration=duration, delay=delay))
        return self

    def add_animate(
        self,
        x: Optional[float] = None,
        y: Optional[float] = None,
        duration: float = 1.0,
        delay: float = 0.0
    ):
        """Append a linear move to (x, y) and return the node for chaining."""
        self.motions.append(Motion(x=x, y=y, duration=duration, delay=delay))
        return self

    def set_opacity(self, opacity: float):
        if not 0.0 <= opacity <= 1.0:
            raise ValueError(f"Opacity must be between 0 and 1, got {opacity}")
        self.opacity = opacity
        return self


class TextNode(Node):
    """Single or multi-line text."""

    type: Literal["text"] = "text"
    text: str = Field(..., description="Text content, '\\n' separates lines")
    font_size: int = Field(default=32, description="Font size in pixels", gt=0)
    color: str = Field(default="#ffffff", description="Fill color")
    font: Optional[str] = Field(None, description="Font file path or family name")
    align: Literal["left", "center", "right"] = Field(default="left")
    style: Optional[str] = Field(None, description="Text style preset name")
    stroke_color: Optional[str] = Field(None, description="Outline color")
    stroke_width: int = Field(default=0, ge=0)
    background_color: Optional[str] = Field(None, description="Box color behind the text")
    padding: Tuple[int, int] = Field(default=(0, 0), description="Box padding (x, y)")
    line_spacing: float = Field(default=1.2, gt=0)

    def set_color(self, color: str) -> "TextNode":
        self.color = color
        return self

    def align_center(self) -> "TextNode":
        self.align = "center"
        return self


class RectNode(Node):
    """Solid (optionally rounded) rectangle."""

    type: Literal["rect"] = "rect"
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    color: str = Field(default="#ffffff")
    radius: int = Field(default=0, ge=0, description="Corner radius in pixels")


class ImageNode(Node):
    """Bitmap loaded from disk."""

    type: Literal["image"] = "image"
    path: str = Field(..., description="Path to the image file")
    width: Optional[int] = Field(None, gt=0)
    height: Optional[int] = Field(None, gt=0)


class ChartNode(Node):
    """Chart drawn from an ECharts-shaped option dict."""

    type: Literal["chart"] = "chart"
    option: Dict[str, Any] = Field(default_factory=dict, description="Chart option")
    width: int = Field(default=700, gt=0)
    height: int = Field(default=450, gt=0)
    theme: Literal["dark", "light"] = Field(default="dark")

    _updater: Optional[ChartUpdater] = PrivateAttr(default=None)
    _interval: float = PrivateAttr(default=1.0)
    _update_now: bool = PrivateAttr(default=False)

    @field_validator("option")
    @classmethod
    def _drawable(cls, value: Dict[str, Any]) -> Dict[str, Any]:
        from ..editor.charts import check_series

        check_series(value)
        return value

    def update(self, updater: ChartUpdater, interval: float = 1.0) -> "ChartNode":
        """Refresh the option every ``interval`` seconds of scene time.

        ``updater`` receives a copy of the previous option and the step
        number. It may mutate the copy in place or return a new dict.
        """
        if interval <= 0:
            raise ValueError(f"Update interval must be positive, got {interval}")
        self._updater = updater
        self._interval = interval
        return self

    def update_now(self) -> "ChartNode":
        """Apply the updater once at the start of the scene."""
        self._update_now = True
        return self

    @property
    def updater(self) -> Optional[ChartUpdater]:
        return self._updater

    @property
    def update_interval(self) -> float:
        return self._interval

    @property
    def updates_immediately(self) -> bool:
        return self._update_now


AnyNode = Annotated[
    Union[TextNode, RectNode, ImageNode, ChartNode],
    Field(discriminator="type"),
]
