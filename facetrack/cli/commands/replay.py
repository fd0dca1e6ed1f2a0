"""Replay command - run the tracker over a recorded detection log."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from ...colors import ColorAllocationError
from ...config import ConfigError
from ...face_logger import FaceLogger
from ...file_io import DetectionLogError, load_detection_log
from ..display import cycle_table, faces_table
from ..utils import resolve_config

console = Console()
logger = logging.getLogger(__name__)


def handle_replay(args: argparse.Namespace) -> int:
    """Feed every logged cycle to a FaceLogger and report the outcome."""
    try:
        config = resolve_config(args)
        cycles = load_detection_log(Path(args.log))
        face_logger = FaceLogger(config)
    except (ConfigError, DetectionLogError, ColorAllocationError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        return 1

    logger.info(f"Replaying {len(cycles)} cycles from {args.log}")

    rows = []
    try:
        for cycle in cycles:
            result = face_logger.tick(cycle.rects, timestamp=cycle.t)
            rows.append((result, face_logger.count_faces()))
            if args.verbose:
                face_logger.log_tracks()
    except (ColorAllocationError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        return 1

    if not args.quiet:
        console.print(cycle_table(rows))
    console.print(faces_table(face_logger.reportable_tracks()))

    stats = face_logger.get_statistics()
    console.print(
        f"[green]✓ {stats['cycle_count']} cycles, {stats['total_tracks']} tracks created, "
        f"{stats['active_tracks']} active, {stats['face_count']} counted[/green]"
    )
    return 0
