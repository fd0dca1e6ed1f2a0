"""Main CLI entry point for facetrack."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..config import PRESETS
from .commands import handle_config, handle_replay
from .utils import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all commands and options."""
    parser = argparse.ArgumentParser(
        prog="facetrack",
        description="Greedy multi-face tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  facetrack replay detections.jsonl                 # Track a recorded detection log
  facetrack replay detections.jsonl --preset stable # Longer identity memory
  facetrack config show --config tracker.json       # Inspect a config file
  facetrack config init tracker.json                # Write defaults to a file
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ═══════════════════════════════════════════════════════════
    # REPLAY COMMAND
    # ═══════════════════════════════════════════════════════════
    replay_parser = subparsers.add_parser("replay", help="Run the tracker over a JSONL detection log")
    replay_parser.add_argument("log", help="Path to detection log (one {t, rects} object per line)")
    replay_parser.add_argument("--config", help="Tracker config JSON (overrides --preset)")
    replay_parser.add_argument("--preset", choices=sorted(PRESETS), default="default", help="Config preset")
    replay_parser.add_argument("-q", "--quiet", action="store_true", help="Skip the per-cycle table")
    replay_parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    # ═══════════════════════════════════════════════════════════
    # CONFIG COMMAND
    # ═══════════════════════════════════════════════════════════
    config_parser = subparsers.add_parser("config", help="Inspect or write tracker configuration")
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config actions")

    show_parser = config_subparsers.add_parser("show", help="Show effective configuration")
    show_parser.add_argument("--config", help="Tracker config JSON (overrides --preset)")
    show_parser.add_argument("--preset", choices=sorted(PRESETS), default="default", help="Config preset")

    init_parser = config_subparsers.add_parser("init", help="Write a configuration file")
    init_parser.add_argument("path", help="Destination JSON file")
    init_parser.add_argument("--preset", choices=sorted(PRESETS), default="default", help="Config preset")
    init_parser.add_argument("--force", action="store_true", help="Overwrite an existing file")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(args, "verbose", False))

    if args.command == "replay":
        status = handle_replay(args)
    elif args.command == "config":
        status = handle_config(args)
    else:
        parser.print_help()
        status = 0

    return status


if __name__ == "__main__":
    sys.exit(main())
