"""Tests for node sprites and text style presets."""

import pytest
from PIL import Image

from chartreel.editor import STYLES, TextStyle, get_style, register_style, render_node, render_text
from chartreel.editor.overlays import anchor_offset, resolve_text_style
from chartreel.models import ChartNode, ImageNode, RectNode, TextNode


class TestTextStyles:
    def test_presets(self):
        assert get_style("title").font_size == 72
        with pytest.raises(ValueError):
            get_style("fancy")

    def test_register_style(self, monkeypatch):
        monkeypatch.setattr("chartreel.editor.overlays.STYLES", dict(STYLES))
        register_style("shout", TextStyle(font_size=90, stroke_color="red", stroke_width=4))
        assert get_style("shout").stroke_width == 4

    def test_node_settings_win_over_preset(self):
        style = resolve_text_style(TextNode(text="x", style="caption", font_size=20, color="#00ff00"))
        assert style.font_size == 20
        assert style.color == "#00ff00"
        assert style.background_color == "rgba(0,0,0,0.7)"

    def test_plain_text_has_no_stroke(self):
        style = resolve_text_style(TextNode(text="x"))
        assert style.stroke_color is None
        assert style.background_padding == (0, 0)


class TestSprites:
    def test_text_grows_with_lines(self):
        one = render_text(TextNode(text="Hello", font_size=20))
        two = render_text(TextNode(text="Hello\nWorld", font_size=20))
        assert one.mode == "RGBA"
        assert two.height > one.height

    def test_text_background_fills_sprite(self):
        sprite = render_text(TextNode(text="Hi", font_size=20, background_color="#0000ff", padding=(6, 4)))
        assert sprite.getpixel((0, 0)) == (0, 0, 255, 255)

    def test_rect(self):
        sprite = render_node(RectNode(width=10, height=6, color="#ff0000"))
        assert sprite.size == (10, 6)
        assert sprite.getpixel((5, 3)) == (255, 0, 0, 255)

    def test_rounded_rect_has_clear_corners(self):
        sprite = render_node(RectNode(width=40, height=40, radius=15))
        assert sprite.getpixel((0, 0))[3] == 0
        assert sprite.getpixel((20, 20))[3] == 255

    def test_image_keeps_aspect_ratio(self, tmp_path):
        path = tmp_path / "pic.png"
        Image.new("RGB", (40, 20), "green").save(path)
        assert render_node(ImageNode(path=str(path), width=20)).size == (20, 10)
        assert render_node(ImageNode(path=str(path), width=8, height=8)).size == (8, 8)

    def test_missing_image(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            render_node(ImageNode(path=str(tmp_path / "none.png")))

    def test_chart_has_no_static_sprite(self):
        with pytest.raises(TypeError):
            render_node(ChartNode())


class TestAnchorOffset:
    @pytest.mark.parametrize("align, left", [("left", 100), ("center", 80), ("right", 60)])
    def test_text_alignment(self, align, left):
        node = TextNode(text="x", x=100, y=50, align=align)
        assert anchor_offset(node, (40, 20)) == (left, 40)

    def test_shapes_are_centred(self):
        assert anchor_offset(RectNode(x=100, y=50, width=40, height=20), (40, 20)) == (80, 40)
