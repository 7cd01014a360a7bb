"""Console configuration and theme for ExtrapFit UI.

This module provides the central console instance and theme used throughout
the application for consistent styling.
"""

import os
import sys

from rich.console import Console
from rich.theme import Theme

from extrapfit import __version__

EXTRAPFIT_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        # --- UI Structure ---
        "header": "bold cyan",
        "subheader": "bold white",
        "panel.border": "blue",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "number": "green",
        "path": "blue underline",
        "code": "bold magenta",
        "dim": "dim",
    }
)

# Single console instance for entire application
console = Console(theme=EXTRAPFIT_THEME)

VERSION = __version__

__all__ = [
    "EXTRAPFIT_THEME",
    "VERSION",
    "console",
    "icon",
]


_ASCII_ONLY = os.getenv("EXTRAPFIT_ASCII", "").lower() in {"1", "true", "yes"}


def _supports_unicode() -> bool:
    if _ASCII_ONLY:
        return False
    enc = getattr(console, "encoding", None) or sys.getdefaultencoding()
    return enc is None or "utf" in enc.lower()


def icon(name: str) -> str:
    """Return a status symbol, falling back to ASCII on limited terminals.

    Names: check, warn, error, info, bullet
    """
    unicode = _supports_unicode()
    mapping = {
        "check": "✓" if unicode else "+",
        "warn": "⚠" if unicode else "!",
        "error": "✗" if unicode else "x",
        "info": "▸" if unicode else ">",
        "bullet": "•" if unicode else "-",
    }
    return mapping.get(name, mapping["bullet"])
