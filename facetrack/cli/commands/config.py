"""Config command - inspect and write tracker configuration."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console

from ...config import ConfigError, get_preset, save_config
from ..display import config_table
from ..utils import resolve_config

console = Console()


def handle_config(args: argparse.Namespace) -> int:
    subcommand = getattr(args, "config_command", None)
    if subcommand is None:
        console.print("[red]No configuration subcommand provided. Use 'facetrack config --help'.[/red]")
        return 1

    if subcommand == "show":
        try:
            config = resolve_config(args)
        except (ConfigError, ValueError) as exc:
            console.print(f"[red]{exc}[/red]")
            return 1
        console.print(config_table(config))
        return 0

    if subcommand == "init":
        try:
            config = get_preset(args.preset or "default")
        except ValueError as exc:
            console.print(f"[red]{exc}[/red]")
            return 1
        path = Path(args.path)
        if path.exists() and not args.force:
            console.print(f"[yellow]⚠ {path} already exists. Use --force to overwrite.[/yellow]")
            return 1
        save_config(config, path)
        console.print(f"[green]Wrote {args.preset or 'default'} configuration to {path}.[/green]")
        return 0

    console.print(f"[red]Unknown config subcommand: {subcommand}[/red]")
    return 1
