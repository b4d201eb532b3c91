"""Chart video generator: single chart videos and the all-charts showcase."""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..config import config
from ..creator import Creator
from ..models import ChartNode, Scene, TextNode
from .templates import BACKGROUNDS, CHART_TEMPLATES, ChartTemplate, get_template

logger = logging.getLogger(__name__)

SHOWCASE_ORDER = ["bar", "line", "pie", "area", "radar", "scatter"]
SHOWCASE_TRANSITIONS = ["fadeIn", "slideLeft", "fadeIn", "slideUp", "fadeIn", "slideLeft"]
INTRO_BG = "#0a0a1a"
ACCENT = "#00d4ff"
MUTED = "#888888"


class ChartGenerator:
    """Builds and renders chart videos from chart templates.

    Example:
        generator = ChartGenerator(output_dir=Path("output"))
        generator.create_single_chart("bar", {"values": [5, 3, 8]})
    """

    def __init__(
        self,
        output_dir: Optional[Path] = None,
        cache_dir: Optional[Path] = None,
        width: int = 800,
        height: int = 600,
        fps: int = 30,
        audio: Optional[str] = None,
    ) -> None:
        self.output_dir = Path(output_dir) if output_dir else config.output_dir
        self.cache_dir = Path(cache_dir) if cache_dir else config.cache_dir
        self.width = width
        self.height = height
        self.fps = fps
        self.audio_path = audio
        self._listeners: List[Tuple[str, Callable[[Any], None]]] = []

        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.cache_dir.mkdir(parents=True, exist_ok=True)

    def on(self, event: str, callback: Callable[[Any], None]) -> "ChartGenerator":
        """Forward a creator event listener to every render."""
        self._listeners.append((event, callback))
        return self

    def _creator(self, filename: str) -> Creator:
        return Creator(
            width=self.width,
            height=self.height,
            fps=self.fps,
            output=filename,
            output_dir=self.output_dir,
            cache_dir=self.cache_dir,
        )

    def _title(self, text: str, color: str) -> TextNode:
        return TextNode(text=text, x=self.width / 2, y=35, font_size=28).set_color(color).align_center()

    def _subtitle(self, text: str) -> TextNode:
        return TextNode(text=text, x=self.width / 2, y=70, font_size=16).set_color(MUTED).align_center()

    def _chart(self, template: ChartTemplate, data: Dict[str, Any]) -> ChartNode:
        return ChartNode(
            option=template.get_option(data),
            theme="dark",
            x=self.width / 2,
            y=self.height / 2 + 30,
            width=self.width - 100,
            height=self.height - 150,
        )

    def chart_scene(self, chart_type: str, data: Optional[Dict[str, Any]] = None) -> Scene:
        """One 5 second scene with a title, optional subtitle and chart.

        Raises:
            ValueError: If the chart type is unknown.
        """
        template = get_template(chart_type)
        data = data or {}

        scene = Scene(bg_color=BACKGROUNDS[chart_type], duration=5)
        scene.add_child(self._title(data.get("title") or template.name, template.color))
        if data.get("subtitle"):
            scene.add_child(self._subtitle(data["subtitle"]))
        scene.add_child(self._chart(template, data))
        return scene

    def _add_audio(self, creator: Creator, data: Dict[str, Any]) -> None:
        audio = data.get("audio") or self.audio_path
        if audio:
            creator.add_audio(audio, loop=True, volume=0.5)

    def single_chart_creator(
        self,
        chart_type: str,
        data: Optional[Dict[str, Any]] = None,
        output_name: Optional[str] = None
    ) -> Creator:
        """Creator for a single chart video, ready to start.

        Raises:
            ValueError: If the chart type is unknown.
        """
        if chart_type not in CHART_TEMPLATES:
            raise ValueError(
                f"Unknown chart type: {chart_type}. Available: {', '.join(CHART_TEMPLATES)}"
            )
        data = data or {}

        creator = self._creator(output_name or f"{chart_type}-chart.mp4")
        scene = self.chart_scene(chart_type, data)
        scene.children[0].add_effect("fadeIn", 0.5, 0)
        creator.add_child(scene)
        self._add_audio(creator, data)
        return creator

    def all_charts_creator(self, data: Optional[Dict[str, Any]] = None) -> Creator:
        """Creator for the intro, six chart scenes and outro."""
        data = data or {}
        creator = self._creator("all-charts.mp4")
        cx, cy = self.width / 2, self.height / 2

        intro = Scene(bg_color=INTRO_BG, duration=3)
        intro.add_child(
            TextNode(text=data.get("introTitle") or "Chart Visualization", x=cx, y=cy - 30, font_size=48)
            .set_color(ACCENT).align_center().add_effect("fadeInUp", 1, 0)
        )
        intro.add_child(
            TextNode(text=data.get("introSubtitle") or "Data Visualization with chartreel", x=cx, y=cy + 40, font_size=22)
            .set_color(MUTED).align_center().add_effect("fadeIn", 1, 0.5)
        )
        creator.add_child(intro)

        for chart_type, transition in zip(SHOWCASE_ORDER, SHOWCASE_TRANSITIONS):
            scene = self.chart_scene(chart_type, data.get(chart_type) or {})
            scene.set_transition(transition, 0.5)
            creator.add_child(scene)
            logger.debug(f"Added {CHART_TEMPLATES[chart_type].name}")

        outro = Scene(bg_color=INTRO_BG, duration=3).set_transition("fadeIn", 0.5)
        outro.add_child(
            TextNode(text=data.get("outroTitle") or "chartreel Charts", x=cx, y=cy - 20, font_size=42)
            .set_color(ACCENT).align_center().add_effect("fadeIn", 1, 0)
        )
        outro.add_child(
            TextNode(text=data.get("outroSubtitle") or "Data Visualization Made Simple", x=cx, y=cy + 35, font_size=20)
            .set_color(MUTED).align_center().add_effect("fadeIn", 1, 0.5)
        )
        creator.add_child(outro)

        self._add_audio(creator, data)
        return creator

    def _render(self, creator: Creator) -> Path:
        for event, callback in self._listeners:
            creator.on(event, callback)
        return creator.start()

    def create_single_chart(
        self,
        chart_type: str,
        data: Optional[Dict[str, Any]] = None,
        output_name: Optional[str] = None
    ) -> Path:
        """Render a single chart video.

        Returns:
            Path to the rendered video.

        Raises:
            ValueError: If the chart type is unknown.
            RenderError: If rendering fails.
        """
        logger.info(f"Creating {chart_type} chart video")
        return self._render(self.single_chart_creator(chart_type, data, output_name))

    def create_all_charts(self, data: Optional[Dict[str, Any]] = None) -> Path:
        """Render the all-charts showcase video."""
        logger.info("Creating all charts showcase")
        return self._render(self.all_charts_creator(data))

    def create_from_data(self, data: Dict[str, Any]) -> Path:
        """Render from a data document.

        ``{"type": "single", "chart": "bar", "data": {...}, "output": "x.mp4"}``
        renders one chart, ``{"type": "showcase", ...}`` the showcase.

        Raises:
            ValueError: If the document type is not single or showcase.
        """
        kind = data.get("type")
        if kind == "single" and data.get("chart"):
            return self.create_single_chart(data["chart"], data.get("data") or {}, data.get("output"))
        if kind == "showcase":
            return self.create_all_charts(data)
        raise ValueError('Invalid data format. Use type: "single" or "showcase"')
