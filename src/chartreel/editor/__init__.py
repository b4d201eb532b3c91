"""Composition engine: node sprites, animations, transitions and export."""

from .colors import parse_color, to_hex, to_mpl
from .effects import EFFECTS, EffectState, get_effect, effect_state, node_position, node_state
from .transitions import TRANSITIONS, transition_frame
from .overlays import (
    TextStyle,
    STYLES,
    get_style,
    register_style,
    load_font,
    render_text,
    render_rect,
    render_image,
    render_node,
)
from .charts import ChartAnimator, render_chart
from .compositor import SceneRenderer, Timeline, build_video, export
from .audio import load_audio, fit_audio, attach_audio, loop_audio

__all__ = [
    # Colors
    "parse_color",
    "to_hex",
    "to_mpl",
    # Effects
    "EFFECTS",
    "EffectState",
    "get_effect",
    "effect_state",
    "node_position",
    "node_state",
    # Transitions
    "TRANSITIONS",
    "transition_frame",
    # Overlays
    "TextStyle",
    "STYLES",
    "get_style",
    "register_style",
    "load_font",
    "render_text",
    "render_rect",
    "render_image",
    "render_node",
    # Charts
    "ChartAnimator",
    "render_chart",
    # Compositor
    "SceneRenderer",
    "Timeline",
    "build_video",
    "export",
    # Audio
    "load_audio",
    "fit_audio",
    "attach_audio",
    "loop_audio",
]
