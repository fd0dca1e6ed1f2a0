"""Command-line interface for facetrack."""

from .main import main

__all__ = ["main"]
