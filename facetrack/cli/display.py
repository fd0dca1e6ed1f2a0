"""Display and UI utilities for the facetrack CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from ..config import TrackerConfig
    from ..engine import CycleResult
    from ..types import Track

console = Console()


def config_table(config: TrackerConfig, title: str = "Tracker Configuration") -> Table:
    """Flatten a TrackerConfig into a key/value table."""
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="green")
    for section, values in config.to_dict().items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", str(value))
    return table


def cycle_table(rows: Iterable[tuple[CycleResult, int]]) -> Table:
    """One row per replayed cycle."""
    table = Table(
        title="[bold cyan]Replay[/bold cyan]",
        box=box.SIMPLE_HEAVY,
        show_header=True,
        header_style="bold magenta",
    )
    for name in ("t", "detections", "matched", "created", "expired", "pruned", "conflicts", "faces"):
        table.add_column(name, justify="right")
    for result, faces in rows:
        table.add_row(
            f"{result.cycle_time:g}",
            str(result.num_detections),
            str(len(result.matched)),
            str(len(result.created)),
            str(len(result.expired)),
            str(len(result.pruned)),
            str(result.conflicts),
            str(faces),
        )
    return table


def faces_table(tracks: List[Track]) -> Table:
    """Reportable faces with their identity color swatch."""
    table = Table(title="[bold cyan]Visible Faces[/bold cyan]", box=box.ROUNDED)
    table.add_column("Track", justify="right")
    table.add_column("Color")
    table.add_column("Centroid")
    table.add_column("Area", justify="right")
    table.add_column("Direction")
    table.add_column("Matches", justify="right")
    for track in tracks:
        c = track.centroid
        d = track.direction
        table.add_row(
            str(track.track_id),
            Text(f"■ {track.color.hex}", style=track.color.hex),
            f"({c.x:.1f}, {c.y:.1f})",
            f"{track.current_rect.area:.0f}",
            f"({d.x:+.1f}, {d.y:+.1f})",
            str(track.match_count),
        )
    return table
