"""Info command implementation."""

from __future__ import annotations

import sys

from extrapfit.ui import console


def info_command() -> None:
    """Show version information and the available models."""
    import numpy as np
    import scipy

    from extrapfit import __version__
    from extrapfit.core.models import create_model, list_models

    console.print("[header]ExtrapFit System Information[/header]\n")
    console.print(f"[key]ExtrapFit version:[/key] {__version__}")
    console.print(f"[key]Python version:[/key] {sys.version.split()[0]}")
    console.print(f"[key]NumPy version:[/key] {np.__version__}")
    console.print(f"[key]SciPy version:[/key] {scipy.__version__}")

    console.print("\n[header]Models[/header]")
    seen: set[type] = set()
    for name in list_models():
        model = create_model(name)
        aliases = "" if type(model) not in seen else " (alias)"
        seen.add(type(model))
        console.print(f"  [metric]{name}[/metric]{aliases}: {model.formula()}")
