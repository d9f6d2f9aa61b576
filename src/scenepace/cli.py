"""CLI entry point for the scene pacing analyzer."""

import logging
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .arcs import ARCS, get_arc
from .config import config
from .exceptions import InvalidParameter
from .models import Storyboard
from .reorder import DropPosition
from .store import SequenceStore

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="scene-pacer",
    help="Emotional pacing analytics for scene sequences",
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
        typer.echo(f"scene-pacer version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Scene Pacer - Reorder scenes and watch the emotional pacing change."""
    pass


def _load_store(storyboard: Path, smoothing: Optional[int]) -> tuple[Storyboard, SequenceStore]:
    """Load a storyboard and build a store, exiting on failure."""
    try:
        config.validate_ranges()
    except ValueError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    try:
        board = Storyboard.from_yaml(storyboard)
    except Exception as e:
        typer.echo(f"❌ Error loading storyboard: {e}")
        raise typer.Exit(1)

    factor = board.smoothing_factor if smoothing is None else smoothing
    try:
        store = SequenceStore(board.scenes, smoothing_factor=factor)
    except InvalidParameter as e:
        logger.warning(f"Rejected smoothing factor: {e}")
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    return board, store


def _format_number(value: Optional[float]) -> str:
    return "-" if value is None else f"{value:.1f}"


@app.command()
def analyze(
    storyboard: Path = typer.Option(
        Path("storyboard.yaml"),
        "--storyboard",
        "-s",
        help="Path to storyboard YAML file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    smoothing: Optional[int] = typer.Option(
        None,
        "--smoothing",
        "-f",
        help="Smoothing factor (overrides the storyboard)"
    ),
    arc: Optional[str] = typer.Option(
        None,
        "--arc",
        "-a",
        help="Narrative arc to label positions with"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Show pacing score, statistics and the smoothed appeal curve."""
    setup_logging(verbose)
    board, store = _load_store(storyboard, smoothing)

    arc_name = arc or board.arc or config.default_arc
    try:
        narrative_arc = get_arc(arc_name)
    except ValueError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    metrics = store.get_derived_metrics()
    typer.echo(f"📁 Storyboard: {board.title}")
    typer.echo(f"   Scenes: {len(store.get_order())}")
    typer.echo(f"   Smoothing factor: {store.smoothing_factor}")
    typer.echo(f"   Arc: {narrative_arc.name}")

    typer.echo(f"\n📊 Metrics:")
    typer.echo(f"   Pacing score: {metrics.pacing_score:.1f}")
    typer.echo(f"   Min appeal: {_format_number(metrics.min)}")
    typer.echo(f"   Max appeal: {_format_number(metrics.max)}")
    typer.echo(f"   Range: {_format_number(metrics.range)}")
    typer.echo(f"   Average appeal: {_format_number(metrics.average)}")

    typer.echo(f"\n📽️  Scenes:")
    for point in store.chart_points(narrative_arc):
        line = f"   {point.label}: EAI {point.appeal:g} (smoothed {point.smoothed:.2f})"
        if point.arc_segment:
            line += f" [{point.arc_segment}]"
        typer.echo(line)


@app.command()
def move(
    scene_id: str = typer.Argument(
        ...,
        help="Id of the scene to move"
    ),
    index: int = typer.Argument(
        ...,
        help="0-based position of the scene to drop onto"
    ),
    after: bool = typer.Option(
        False,
        "--after",
        help="Drop after the target scene instead of before it"
    ),
    storyboard: Path = typer.Option(
        Path("storyboard.yaml"),
        "--storyboard",
        "-s",
        help="Path to storyboard YAML file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    smoothing: Optional[int] = typer.Option(
        None,
        "--smoothing",
        "-f",
        help="Smoothing factor (overrides the storyboard)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Preview dragging a scene to a new position. Nothing is saved."""
    setup_logging(verbose)
    _, store = _load_store(storyboard, smoothing)

    before_score = store.get_derived_metrics().pacing_score
    position = DropPosition.AFTER if after else DropPosition.BEFORE

    store.begin_drag(scene_id)
    if not store.drag_state.is_dragging:
        typer.echo(f"❌ Unknown scene: {scene_id}")
        raise typer.Exit(1)

    store.update_drag_target(index, position)
    if store.drag_state.insertion_index is None:
        store.cancel_drag()
        typer.echo(f"❌ Position {index} is outside the sequence")
        raise typer.Exit(1)

    moved = store.drop()
    after_score = store.get_derived_metrics().pacing_score

    if not moved:
        typer.echo(f"ℹ️  {scene_id} is already at that position")
    else:
        typer.echo(f"✅ Moved {scene_id}")

    typer.echo(f"\n📽️  Order:")
    for i, scene in enumerate(store.get_order(), start=1):
        marker = "→" if scene.id == scene_id else " "
        typer.echo(f"   {marker} {i}. {scene.name or scene.id}")

    typer.echo(f"\n📊 Pacing score: {before_score:.1f} → {after_score:.1f}")


@app.command()
def arcs() -> None:
    """List the available narrative arcs."""
    for arc in ARCS.values():
        typer.echo(f"• {arc.name}")
        for segment in arc.segments:
            span = str(segment.start) if segment.start == segment.end else f"{segment.start}-{segment.end}"
            typer.echo(f"   {span}: {segment.label}")


if __name__ == "__main__":
    app()
