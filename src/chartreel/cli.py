"""CLI entry point for chartreel."""

import json
import logging
import typer
from pathlib import Path
from typing import Any, Dict, Optional

from . import __version__
from .creator import Creator, RenderError
from .models import Manifest

app = typer.Typer(
    name="chartreel",
    help="Render animated chart and story videos",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"chartreel version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """chartreel - Scene-based videos with animated charts."""
    pass


def watch(target) -> None:
    """Print render events of a Creator or ChartGenerator."""
    target.on("start", lambda e: typer.secho(
        f"🎬 Rendering {e.output.name} ({e.duration:.1f}s, {e.total_frames} frames)", fg=typer.colors.CYAN
    ))
    target.on("progress", lambda e: typer.echo(f"\r   Progress: {e.percent * 100:3.0f}%", nl=False))
    target.on("complete", lambda e: typer.secho(f"\n✅ Video created: {e.output}", fg=typer.colors.GREEN))
    target.on("error", lambda e: typer.secho(f"\n❌ Render failed: {e.error}", fg=typer.colors.RED))


def run(creator: Creator) -> Path:
    """Render with progress output, exiting with status 1 on failure."""
    watch(creator)
    try:
        return creator.start()
    except RenderError:
        raise typer.Exit(1)


@app.command()
def status(
    manifest_path: Path = typer.Argument(
        ...,
        help="Path to manifest YAML or JSON file",
        exists=False,
        file_okay=True,
        dir_okay=False
    )
) -> None:
    """Show a manifest's scenes and timing."""
    if not manifest_path.exists():
        typer.echo(f"❌ No manifest found at {manifest_path}")
        raise typer.Exit(1)

    try:
        manifest = Manifest.from_file(manifest_path)
    except Exception as e:
        typer.echo(f"❌ Error loading manifest: {e}")
        raise typer.Exit(1)

    typer.echo(f"📁 Video: {manifest.name}")
    typer.echo(f"   Size: {manifest.width}x{manifest.height} @ {manifest.fps}fps")
    typer.echo(f"   Scenes: {len(manifest.scenes)}")
    if manifest.audio:
        typer.echo(f"   Audio: {manifest.audio.path}")
    typer.echo(f"   Total duration: {manifest.total_duration:.1f}s")

    typer.echo("\n📽️  Scenes:")
    for i, scene in enumerate(manifest.scenes):
        transition = f" → {scene.transition.name} ({scene.transition.duration}s)" if scene.transition else ""
        typer.echo(f"   {scene.id or i + 1}: {scene.duration}s, {len(scene.children)} nodes{transition}")


@app.command()
def render(
    manifest_path: Path = typer.Argument(
        ...,
        help="Path to manifest YAML or JSON file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Output directory"),
    cache_dir: Optional[Path] = typer.Option(None, "--cache-dir", help="Cache directory"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging")
) -> None:
    """Render a video from a manifest file."""
    setup_logging(verbose)

    try:
        manifest = Manifest.from_file(manifest_path)
    except Exception as e:
        typer.echo(f"❌ Error loading manifest: {e}")
        raise typer.Exit(1)

    if not manifest.scenes:
        typer.echo("❌ Manifest has no scenes")
        raise typer.Exit(1)

    run(Creator.from_manifest(manifest, output_dir=output_dir, cache_dir=cache_dir))


@app.command()
def story(
    target: str = typer.Argument(
        "list",
        help="Story number (1-30), 'list' or 'all'"
    ),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Output directory"),
    cache_dir: Optional[Path] = typer.Option(None, "--cache-dir", help="Cache directory"),
    save_manifest: Optional[Path] = typer.Option(
        None,
        "--save-manifest",
        help="Write the story's manifest to this YAML file instead of rendering"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging")
) -> None:
    """List, render, or export the story videos."""
    from .stories import STORIES, StoryNotFoundError, available, build_story, built_stories, progress

    setup_logging(verbose)

    if target == "list":
        typer.echo("📚 Stories:\n")
        for number, info in STORIES.items():
            mark = "✓" if available(number) else "✗"
            typer.echo(f"   {mark} Story {number:2d}: {info.title}")
            typer.echo(f"      {info.theme}")
        built, total = progress()
        typer.echo(f"\n   Progress: {built}/{total} stories created")
        return

    if target == "all":
        failed = []
        for number in built_stories():
            creator = Creator.from_manifest(build_story(number), output_dir=output_dir, cache_dir=cache_dir)
            watch(creator)
            try:
                creator.start()
            except RenderError:
                failed.append(number)
        if failed:
            typer.echo(f"❌ {len(failed)} stories failed: {', '.join(map(str, failed))}")
            raise typer.Exit(1)
        typer.echo(f"✅ Rendered {len(built_stories())} stories")
        return

    if not target.isdigit():
        typer.echo(f"❌ Invalid command: {target}. Use a story number, 'list' or 'all'")
        raise typer.Exit(1)

    try:
        manifest = build_story(int(target))
    except StoryNotFoundError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    if save_manifest:
        manifest.to_yaml(save_manifest)
        typer.echo(f"📝 Manifest saved: {save_manifest}")
        return

    run(Creator.from_manifest(manifest, output_dir=output_dir, cache_dir=cache_dir))


@app.command()
def charts(
    chart: Optional[str] = typer.Option(
        None,
        "--chart",
        "-c",
        help="Render one chart type (bar, line, pie, area, radar, scatter)"
    ),
    custom: Optional[Path] = typer.Option(
        None,
        "--custom",
        help="JSON data document to render",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    audio: Optional[Path] = typer.Option(None, "--audio", "-a", help="Background music file"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Output directory"),
    cache_dir: Optional[Path] = typer.Option(None, "--cache-dir", help="Cache directory"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging")
) -> None:
    """Render chart template videos (all six by default)."""
    from .charts import ChartGenerator

    setup_logging(verbose)

    if audio and not audio.exists():
        typer.echo(f"❌ Audio file not found: {audio}")
        raise typer.Exit(1)

    data: Dict[str, Any] = {}
    if custom:
        try:
            data = json.loads(custom.read_text())
        except json.JSONDecodeError as e:
            typer.echo(f"❌ Error reading {custom}: {e}")
            raise typer.Exit(1)

    generator = ChartGenerator(
        output_dir=output_dir,
        cache_dir=cache_dir,
        audio=str(audio) if audio else None,
    )
    watch(generator)

    try:
        if custom:
            generator.create_from_data(data)
        elif chart and chart != "all":
            generator.create_single_chart(chart)
        else:
            generator.create_all_charts()
    except ValueError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)
    except RenderError:
        raise typer.Exit(1)


DEMOS = "'all', 'dynamic', 'dynamic-all', 'animations', 'chart-types', 'ai-shorts', 'bad-decisions' or 1-6"


@app.command()
def demo(
    target: str = typer.Argument(
        "all",
        help=DEMOS
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the live demos"),
    name: str = typer.Option("Faris", "--name", help="Subject of the bad-decisions demo"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Output directory"),
    cache_dir: Optional[Path] = typer.Option(None, "--cache-dir", help="Cache directory"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging")
) -> None:
    """Render the chart demo videos."""
    from .charts import (
        build_ai_shorts_video,
        build_all_charts_video,
        build_bad_decisions_video,
        build_chart_types_video,
        build_dynamic_all_charts_video,
        build_dynamic_chart_video,
        build_new_animations_video,
        build_single_chart_video,
    )

    setup_logging(verbose)

    builders = {
        "all": lambda: build_all_charts_video(output_dir, cache_dir),
        "dynamic": lambda: build_dynamic_chart_video(seed, output_dir, cache_dir),
        "dynamic-all": lambda: build_dynamic_all_charts_video(seed, output_dir, cache_dir),
        "animations": lambda: build_new_animations_video(output_dir, cache_dir),
        "chart-types": lambda: build_chart_types_video(seed, output_dir, cache_dir),
        "ai-shorts": lambda: build_ai_shorts_video(output_dir, cache_dir),
        "bad-decisions": lambda: build_bad_decisions_video(seed, output_dir, cache_dir, name),
    }

    if target in builders:
        creator = builders[target]()
    elif target.isdigit():
        try:
            creator = build_single_chart_video(int(target), output_dir, cache_dir)
        except ValueError as e:
            typer.echo(f"❌ {e}")
            raise typer.Exit(1)
    else:
        typer.echo(f"❌ Invalid demo: {target}. Use {DEMOS}")
        raise typer.Exit(1)

    run(creator)


if __name__ == "__main__":
    app()
