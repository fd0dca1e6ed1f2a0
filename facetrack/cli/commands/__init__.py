"""CLI command handlers."""

from .config import handle_config
from .replay import handle_replay

__all__ = [
    "handle_config",
    "handle_replay",
]
