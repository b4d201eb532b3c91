"""Tests for colors, node animations, motions and transitions."""

import numpy as np
import pytest

from chartreel.editor import (
    EFFECTS,
    TRANSITIONS,
    effect_state,
    get_effect,
    node_position,
    node_state,
    parse_color,
    to_hex,
    to_mpl,
    transition_frame,
)
from chartreel.models import Effect, RectNode


class TestColors:
    @pytest.mark.parametrize("value, expected", [
        ("#ff0000", (255, 0, 0, 255)),
        ("#0f0", (0, 255, 0, 255)),
        ("rgba(0,0,0,0.5)", (0, 0, 0, 128)),
        ("rgb(10, 20, 30)", (10, 20, 30, 255)),
        ("transparent", (0, 0, 0, 0)),
        ("white", (255, 255, 255, 255)),
    ])
    def test_parse(self, value, expected):
        assert parse_color(value) == expected

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_color("#zzzzzz")
        with pytest.raises(ValueError):
            parse_color("")

    def test_conversions(self):
        assert to_hex("rgb(255, 128, 0)") == "#ff8000"
        assert to_mpl("#ff0000") == (1.0, 0.0, 0.0, 1.0)


class TestEffects:
    def test_registry_has_directional_variants(self):
        for name in ("fadeIn", "fadeInUp", "fadeInLeftBig", "slideOutRight", "backInDown", "rotateInUpLeft"):
            assert name in EFFECTS

    def test_unknown_effect(self):
        with pytest.raises(ValueError):
            get_effect("wobble")

    def test_entrance_hidden_before_delay_and_visible_after(self):
        effect = Effect(name="fadeIn", duration=1.0, delay=1.0)
        assert effect_state(effect, 0.5).opacity == 0.0
        assert effect_state(effect, 2.5).opacity == pytest.approx(1.0)

    def test_exit_hidden_after_end(self):
        effect = Effect(name="fadeOut", duration=0.5, delay=1.0)
        assert effect_state(effect, 0.0).opacity == pytest.approx(1.0)
        assert not effect_state(effect, 2.0).visible

    def test_directional_entrance_starts_offset(self):
        start = effect_state(Effect(name="fadeInUp"), 0.0)
        end = effect_state(Effect(name="fadeInUp"), 1.0)
        assert start.dy > 0
        assert end.dy == pytest.approx(0.0)

    def test_slide_out_moves_towards_named_side(self):
        state = effect_state(Effect(name="slideOutLeft"), 0.9)
        assert state.dx < 0

    def test_zoom_in_grows(self):
        assert effect_state(Effect(name="zoomIn"), 0.0).scale < 1.0
        assert effect_state(Effect(name="zoomIn"), 1.0).scale == pytest.approx(1.0)

    def test_node_state_combines_effects_and_base_opacity(self):
        node = RectNode(width=4, height=4, opacity=0.5).add_effect("fadeIn", 1.0).add_effect("fadeOut", 1.0, 2.0)
        assert node_state(node, 1.5).opacity == pytest.approx(0.5)
        assert not node_state(node, 3.5).visible

    def test_node_without_effects_is_static(self):
        state = node_state(RectNode(width=4, height=4), 10.0)
        assert state.opacity == 1.0
        assert (state.dx, state.dy, state.scale) == (0.0, 0.0, 1.0)


class TestNodePosition:
    def test_no_motions(self):
        assert node_position(RectNode(x=5, y=7, width=1, height=1), 3.0) == (5, 7)

    def test_linear_move(self):
        node = RectNode(x=0, y=100, width=1, height=1).add_animate(y=0, duration=2.0, delay=1.0)
        assert node_position(node, 0.5) == (0, 100)
        assert node_position(node, 2.0) == pytest.approx((0, 50))
        assert node_position(node, 5.0) == pytest.approx((0, 0))

    def test_motions_chain(self):
        node = (
            RectNode(x=0, y=0, width=1, height=1)
            .add_animate(x=100, duration=1.0)
            .add_animate(y=100, duration=1.0, delay=1.0)
        )
        assert node_position(node, 1.5) == pytest.approx((100, 50))
        assert node_position(node, 3.0) == pytest.approx((100, 100))


def _frames(shape=(8, 8, 3)):
    a = np.zeros(shape, dtype=np.uint8)
    b = np.full(shape, 255, dtype=np.uint8)
    return a, b


class TestTransitions:
    @pytest.mark.parametrize("name", sorted(TRANSITIONS))
    def test_endpoints_and_shape(self, name):
        a, b = _frames()
        assert np.array_equal(transition_frame(name, a, b, 0.0), a)
        assert np.array_equal(transition_frame(name, a, b, 1.0), b)
        middle = transition_frame(name, a, b, 0.5, seed=3)
        assert middle.shape == a.shape
        assert middle.dtype == np.uint8

    def test_crossfade_midpoint(self):
        a, b = _frames()
        middle = transition_frame("fade", a, b, 0.5)
        assert 120 <= int(middle.mean()) <= 135

    def test_case_insensitive(self):
        a, b = _frames()
        transition_frame("CrossWarp", a, b, 0.5)

    def test_unknown(self):
        a, b = _frames()
        with pytest.raises(ValueError):
            transition_frame("bogus", a, b, 0.5)
