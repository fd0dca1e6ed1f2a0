"""Shared helpers for CLI commands."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ..config import TrackerConfig, get_preset, load_config


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def resolve_config(args: argparse.Namespace) -> TrackerConfig:
    """A --config file wins over --preset."""
    config_path = getattr(args, "config", None)
    if config_path:
        return load_config(Path(config_path))
    return get_preset(getattr(args, "preset", None) or "default")
