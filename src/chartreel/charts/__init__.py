"""Chart templates, the chart video generator and the chart demos."""

from .templates import BACKGROUNDS, CHART_TEMPLATES, ChartTemplate, get_template
from .generator import ChartGenerator
from .showcase import (
    DEMO_CHARTS,
    build_all_charts_video,
    build_single_chart_video,
    build_dynamic_chart_video,
)
from .live import build_dynamic_all_charts_video, build_bad_decisions_video
from .gallery import build_new_animations_video, build_chart_types_video
from .shorts import build_ai_shorts_video

__all__ = [
    "BACKGROUNDS",
    "CHART_TEMPLATES",
    "ChartTemplate",
    "get_template",
    "ChartGenerator",
    "DEMO_CHARTS",
    "build_all_charts_video",
    "build_single_chart_video",
    "build_dynamic_chart_video",
    "build_dynamic_all_charts_video",
    "build_bad_decisions_video",
    "build_new_animations_video",
    "build_chart_types_video",
    "build_ai_shorts_video",
]
