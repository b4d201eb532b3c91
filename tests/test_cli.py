"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from chartreel import __version__
from chartreel.cli import app
from chartreel.models import Manifest, RectNode, Scene
from chartreel.stories import catalog

runner = CliRunner()


@pytest.fixture
def manifest_file(tmp_path):
    scene = Scene(id="only", bg_color="#336699", duration=1).set_transition("fade", 0.5)
    scene.add_child(RectNode(x=8, y=8, width=4, height=4))
    manifest = Manifest(name="tiny", width=16, height=16, fps=5, scenes=[scene, Scene(duration=1)])
    path = tmp_path / "tiny.yaml"
    manifest.to_yaml(path)
    return path


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestStatus:
    def test_status(self, manifest_file):
        result = runner.invoke(app, ["status", str(manifest_file)])
        assert result.exit_code == 0
        assert "tiny" in result.output
        assert "Scenes: 2" in result.output
        assert "Total duration: 1.5s" in result.output
        assert "fade" in result.output

    def test_missing_manifest(self, tmp_path):
        result = runner.invoke(app, ["status", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "No manifest found" in result.output


class TestRender:
    def test_render(self, manifest_file, dirs, fake_export):
        output_dir, cache_dir = dirs
        result = runner.invoke(app, [
            "render", str(manifest_file), "--output-dir", str(output_dir), "--cache-dir", str(cache_dir),
        ])
        assert result.exit_code == 0, result.output
        assert "Video created" in result.output
        assert (output_dir / "tiny.mp4").exists()

    def test_render_failure_exits_nonzero(self, manifest_file, dirs, monkeypatch):
        def broken(*args, **kwargs):
            raise OSError("no encoder")

        monkeypatch.setattr("chartreel.creator.export", broken)
        result = runner.invoke(app, [
            "render", str(manifest_file), "--output-dir", str(dirs[0]), "--cache-dir", str(dirs[1]),
        ])
        assert result.exit_code == 1
        assert "Render failed" in result.output


class TestStory:
    def test_list(self):
        result = runner.invoke(app, ["story", "list"])
        assert result.exit_code == 0
        assert "✓ Story  2" in result.output
        assert "✓ Story  1" in result.output
        assert "✗" not in result.output
        assert "Progress: 30/30" in result.output

    def test_unknown_story(self):
        result = runner.invoke(app, ["story", "99"])
        assert result.exit_code == 1
        assert "Story 99 not found!" in result.output

    def test_unbuilt_story(self, monkeypatch):
        monkeypatch.delitem(catalog._BUILDERS, 1)
        result = runner.invoke(app, ["story", "1"])
        assert result.exit_code == 1
        assert "not been built" in result.output

    def test_invalid_command(self):
        result = runner.invoke(app, ["story", "everything"])
        assert result.exit_code == 1
        assert "Invalid command" in result.output

    def test_save_manifest(self, tmp_path):
        path = tmp_path / "sonder.yaml"
        result = runner.invoke(app, ["story", "2", "--save-manifest", str(path)])
        assert result.exit_code == 0, result.output
        manifest = Manifest.from_file(path)
        assert manifest.output == "story-02-kinetic-sonder.mp4"
        assert manifest.scenes[0].children[0].text == "SONDER"


class TestDemoAndCharts:
    def test_demo_out_of_range(self, dirs):
        result = runner.invoke(app, ["demo", "9", "--output-dir", str(dirs[0])])
        assert result.exit_code == 1
        assert "Invalid index" in result.output

    def test_demo_invalid(self):
        result = runner.invoke(app, ["demo", "sparkles"])
        assert result.exit_code == 1
        assert "chart-types" in result.output

    @pytest.mark.parametrize("target, output", [
        ("dynamic-all", "dynamic-all-charts.mp4"),
        ("animations", "charts-new-animations.mp4"),
        ("chart-types", "charts-dynamic.mp4"),
        ("ai-shorts", "ai-concepts-shorts.mp4"),
        ("bad-decisions", "faris-dynamic-charts.mp4"),
    ])
    def test_demo_targets(self, target, output, dirs, monkeypatch):
        rendered = []
        monkeypatch.setattr("chartreel.cli.run", rendered.append)
        result = runner.invoke(app, ["demo", target, "--seed", "3", "--output-dir", str(dirs[0])])
        assert result.exit_code == 0, result.output
        assert rendered[0].output == output
        assert rendered[0].output_dir == dirs[0]

    def test_demo_bad_decisions_name(self, dirs, monkeypatch):
        rendered = []
        monkeypatch.setattr("chartreel.cli.run", rendered.append)
        result = runner.invoke(app, ["demo", "bad-decisions", "--name", "Sam", "--output-dir", str(dirs[0])])
        assert result.exit_code == 0, result.output
        assert rendered[0].output == "sam-dynamic-charts.mp4"

    def test_charts_unknown_type(self, dirs):
        output_dir, cache_dir = dirs
        result = runner.invoke(app, [
            "charts", "--chart", "donut", "--output-dir", str(output_dir), "--cache-dir", str(cache_dir),
        ])
        assert result.exit_code == 1
        assert "Unknown chart type" in result.output

    def test_charts_missing_audio(self, dirs, tmp_path):
        result = runner.invoke(app, ["charts", "--audio", str(tmp_path / "none.mp3")])
        assert result.exit_code == 1
        assert "Audio file not found" in result.output
