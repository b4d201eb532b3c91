"""Data models for the video creator."""

from .effect import Effect, Motion, Transition
from .nodes import Node, TextNode, RectNode, ImageNode, ChartNode, AnyNode
from .scene import Scene, layout_scenes
from .manifest import AudioTrack, Manifest

__all__ = [
    "Effect",
    "Transition",
    "Motion",
    "Node",
    "TextNode",
    "RectNode",
    "ImageNode",
    "ChartNode",
    "AnyNode",
    "Scene",
    "layout_scenes",
    "AudioTrack",
    "Manifest",
]
