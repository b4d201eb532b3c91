"""Vertical explainer short: five AI concepts with a chart or diagram each."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..creator import Creator
from ..models import ChartNode, RectNode, Scene, TextNode

SHORT_WIDTH = 1080
SHORT_HEIGHT = 1920

INK = "#0f0f23"
ACCENT = "#00d9ff"
HOT = "#ff2e63"
GOLD = "#feca57"


def _text(scene: Scene, text: str, y: float, size: int, color: str = "#ffffff",
          effect: str = "fadeInUp", delay: float = 0.0, x: float = SHORT_WIDTH / 2, **fields) -> TextNode:
    node = TextNode(text=text, x=x, y=y, font_size=size, color=color, align="center", **fields)
    node.add_effect(effect, 0.7, delay)
    scene.add_child(node)
    return node


def _box(scene: Scene, x: float, y: float, width: float, height: float, color: str,
         effect: str = "zoomIn", delay: float = 0.0) -> RectNode:
    node = RectNode(x=x, y=y, width=width, height=height, color=color, radius=20)
    node.add_effect(effect, 0.6, delay)
    scene.add_child(node)
    return node


def _concept_header(scene: Scene, number: int, title: str, tagline: str, color: str) -> None:
    """Numbered badge, concept title and a one-line tagline."""
    _box(scene, 150, 200, 120, 120, color, "bounceIn")
    _text(scene, str(number), 200, 72, INK, "bounceIn", 0.1, x=150)
    _text(scene, title, 200, 72, "#ffffff", "fadeInRight", 0.3, x=SHORT_WIDTH / 2 + 80)
    _text(scene, tagline, 330, 36, "#aaaaaa", "fadeIn", 0.6)


def _flow(scene: Scene, labels: Sequence[str], colors: Sequence[str], y: float, delay: float = 0.8) -> List[RectNode]:
    """Labelled boxes stacked down the frame with short connectors between them."""
    boxes = []
    for i, (label, color) in enumerate(zip(labels, colors)):
        top = y + i * 230
        start = delay + i * 0.5
        boxes.append(_box(scene, SHORT_WIDTH / 2, top, 700, 150, color, "fadeInUp", start))
        _text(scene, label, top, 48, INK, "fadeIn", start + 0.2)
        if i < len(labels) - 1:
            _box(scene, SHORT_WIDTH / 2, top + 115, 8, 70, "#555555", "fadeIn", start + 0.3)
    return boxes


def _facts(scene: Scene, lines: Sequence[str], y: float, delay: float) -> None:
    for i, line in enumerate(lines):
        _text(scene, line, y + i * 70, 34, "#dddddd", "fadeInLeft", delay + i * 0.3)


def _bar_option(title: str, categories: List[str], series: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "backgroundColor": "transparent",
        "title": {"text": title, "left": "center", "textStyle": {"color": "#fff", "fontSize": 28}},
        "legend": {"bottom": 0, "textStyle": {"color": "#fff", "fontSize": 20}},
        "xAxis": {"type": "category", "data": categories, "axisLabel": {"color": "#fff", "fontSize": 20}},
        "yAxis": {"type": "value", "max": 100, "axisLabel": {"color": "#fff"}, "splitLine": {"lineStyle": {"color": "#333"}}},
        "series": series,
        "animationDuration": 2000,
    }


def hook_scene() -> Scene:
    scene = Scene(id="hook", bg_color=INK, duration=5)
    _box(scene, SHORT_WIDTH / 2, 560, 16, 400, HOT, "fadeInDown")
    _text(scene, "AI in 2025", 760, 110, "#ffffff", "zoomIn", 0.2)
    _text(scene, "Changed EVERYTHING", 900, 72, HOT, "bounceIn", 0.8)
    _text(scene, "5 Concepts You MUST Know", 1100, 52, ACCENT, "fadeInUp", 1.5)
    _text(scene, "Watch till end!", 1500, 40, GOLD, "fadeIn", 2.5)
    return scene.set_transition("circlecrop", 0.8)


def llm_scene() -> Scene:
    scene = Scene(id="llms", bg_color="#1a1a2e", duration=10)
    _concept_header(scene, 1, "LLMs", "Large Language Models", ACCENT)
    for i, model in enumerate(["GPT-4o", "Claude 3.5", "Gemini 3", "Llama 3.2", "Mistral"]):
        x = 220 + (i % 3) * 320
        y = 480 + (i // 3) * 140
        _box(scene, x, y, 280, 100, "#2d2d5a", "zoomIn", 0.8 + i * 0.2)
        _text(scene, model, y, 34, "#ffffff", "fadeIn", 1.0 + i * 0.2, x=x)
    chart = ChartNode(
        x=SHORT_WIDTH / 2, y=1120, width=950, height=480,
        option=_bar_option("2025 Model Benchmark Scores", ["Reasoning", "Coding", "Math"], [
            {"name": "GPT-4o", "type": "bar", "data": [88, 90, 76], "itemStyle": {"color": "#10a37f"}},
            {"name": "Claude 3.5", "type": "bar", "data": [90, 92, 78], "itemStyle": {"color": "#d97757"}},
            {"name": "Gemini", "type": "bar", "data": [86, 85, 80], "itemStyle": {"color": "#4285f4"}},
        ]),
    )
    scene.add_child(chart.add_effect("fadeIn", 0.8, 2.0))
    _facts(scene, ["Trained on trillions of words", "Predict the next token", "Power every chatbot"], 1480, 4.0)
    return scene.set_transition("moveleft", 0.8)


def agents_scene() -> Scene:
    scene = Scene(id="agents", bg_color="#16213e", duration=10)
    _concept_header(scene, 2, "AI Agents", "AI that takes action", HOT)
    for i, (step, color) in enumerate([("Plan", ACCENT), ("Execute", GOLD), ("Learn", "#1dd1a1")]):
        x = 200 + i * 340
        _box(scene, x, 500, 280, 140, color, "bounceIn", 0.8 + i * 0.4)
        _text(scene, step, 500, 44, INK, "fadeIn", 1.0 + i * 0.4, x=x)
    chart = ChartNode(
        x=SHORT_WIDTH / 2, y=1050, width=900, height=650,
        option={
            "backgroundColor": "transparent",
            "radar": {
                "indicator": [{"name": name, "max": 100} for name in ("Planning", "Coding", "Research", "Analysis", "Writing")],
                "axisName": {"color": "#fff", "fontSize": 22},
            },
            "series": [{
                "type": "radar",
                "data": [{"name": "Agent", "value": [90, 85, 95, 88, 92],
                          "areaStyle": {"opacity": 0.4, "color": HOT}, "lineStyle": {"color": HOT, "width": 3}}],
            }],
            "animationDuration": 2000,
        },
    )
    scene.add_child(chart.add_effect("zoomIn", 0.8, 2.0))
    _facts(scene, ["Book flights, write code, browse the web"], 1500, 4.5)
    return scene.set_transition("windowshades", 0.8)


def rag_scene() -> Scene:
    scene = Scene(id="rag", bg_color="#0f2027", duration=10)
    _concept_header(scene, 3, "RAG", "Retrieval-Augmented Generation", "#1dd1a1")
    _flow(scene, ["Question", "Search DB", "AI + Context", "Accurate Answer"],
          [ACCENT, GOLD, "#a29bfe", "#1dd1a1"], 560)
    _text(scene, "No more made-up facts!", 1560, 44, GOLD, "bounceIn", 3.5)
    return scene.set_transition("stretch", 0.8)


def multimodal_scene() -> Scene:
    scene = Scene(id="multimodal", bg_color="#1f1c2c", duration=10)
    _concept_header(scene, 4, "Multimodal", "One model, every format", "#a29bfe")
    center_y = 900
    _box(scene, SHORT_WIDTH / 2, center_y, 240, 240, HOT, "zoomIn", 0.6)
    _text(scene, "AI", center_y, 80, "#ffffff", "bounceIn", 0.8)
    corners = [("Text", -300, -320, ACCENT), ("Image", 300, -320, GOLD), ("Audio", -300, 320, "#1dd1a1"), ("Video", 300, 320, "#a29bfe")]
    for i, (label, dx, dy, color) in enumerate(corners):
        x, y = SHORT_WIDTH / 2 + dx, center_y + dy
        _box(scene, x, y, 200, 200, color, "backIn", 1.2 + i * 0.3)
        _text(scene, label, y, 38, INK, "fadeIn", 1.4 + i * 0.3, x=x)
    _facts(scene, ["See, hear and speak", "in a single conversation"], 1450, 3.5)
    return scene.set_transition("circlecrop", 0.8)


def fine_tuning_scene() -> Scene:
    scene = Scene(id="fine-tuning", bg_color="#141e30", duration=10)
    _concept_header(scene, 5, "Fine-Tuning", "Teach AI your expertise", GOLD)
    _box(scene, 260, 500, 360, 140, "#555555", "fadeInLeft", 0.8)
    _text(scene, "Base Model", 500, 38, "#ffffff", "fadeIn", 1.0, x=260)
    _text(scene, "->", 500, 60, GOLD, "zoomIn", 1.3)
    _box(scene, SHORT_WIDTH - 260, 500, 360, 140, GOLD, "fadeInRight", 1.5)
    _text(scene, "Custom Model", 500, 38, INK, "fadeIn", 1.7, x=SHORT_WIDTH - 260)
    chart = ChartNode(
        x=SHORT_WIDTH / 2, y=1050, width=950, height=600,
        option=_bar_option("Accuracy on Your Tasks", ["Legal", "Medical", "Support", "Code"], [
            {"name": "Before", "type": "bar", "data": [60, 70, 55, 40], "itemStyle": {"color": "#636e72"}},
            {"name": "After", "type": "bar", "data": [95, 88, 92, 85], "itemStyle": {"color": GOLD},
             "label": {"show": True, "position": "top", "color": "#fff"}},
        ]),
    )
    scene.add_child(chart.add_effect("fadeIn", 0.8, 2.2))
    return scene.set_transition("radiation", 0.8)


def outro_scene() -> Scene:
    scene = Scene(id="outro", bg_color=INK, duration=6)
    _text(scene, "Recap", 500, 80, "#ffffff", "fadeInDown")
    for i, concept in enumerate(["LLMs", "AI Agents", "RAG", "Multimodal", "Fine-Tuning"]):
        _text(scene, f"{i + 1}. {concept}", 680 + i * 100, 48, ACCENT, "fadeInLeft", 0.4 + i * 0.3)
    _text(scene, "Follow for more!", 1350, 60, HOT, "bounceIn", 2.4)
    _text(scene, "AI Simplified", 1600, 36, "#888888", "fadeIn", 3.0)
    return scene


def ai_shorts_scenes() -> List[Scene]:
    return [hook_scene(), llm_scene(), agents_scene(), rag_scene(), multimodal_scene(), fine_tuning_scene(), outro_scene()]


def build_ai_shorts_video(output_dir: Optional[Path] = None, cache_dir: Optional[Path] = None) -> Creator:
    """A 1080x1920 short explaining five AI concepts."""
    creator = Creator(
        width=SHORT_WIDTH, height=SHORT_HEIGHT, fps=30,
        output="ai-concepts-shorts.mp4", output_dir=output_dir, cache_dir=cache_dir,
    )
    for scene in ai_shorts_scenes():
        creator.add_child(scene)
    return creator
