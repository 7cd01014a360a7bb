"""Branding and banner display for ExtrapFit UI."""

from __future__ import annotations

import platform
import sys
from datetime import datetime
from pathlib import Path

from rich import box
from rich.panel import Panel

from extrapfit.ui.console import VERSION, console


def show_banner(verbose: bool = False) -> None:
    """Show the run information panel when verbose."""
    if not verbose:
        return

    info_text = (
        f"[key]Version:[/key] {VERSION}\n"
        f"[key]Started:[/key] {datetime.now():%Y-%m-%d %H:%M:%S}\n"
        f"[key]Working directory:[/key] {Path.cwd()}\n"
        f"[key]Python:[/key] {sys.version.split()[0]} | "
        f"[key]Platform:[/key] {platform.system()} {platform.machine()}"
    )
    console.print(
        Panel(
            info_text,
            title="ExtrapFit",
            border_style="panel.border",
            box=box.ROUNDED,
            padding=(0, 2),
            expand=False,
        )
    )


def show_version() -> None:
    """Show version information (for --version flag)."""
    console.print(f"[header]ExtrapFit[/header] [dim]v{VERSION}[/dim]")


__all__ = ["show_banner", "show_version"]
