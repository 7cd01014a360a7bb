"""CLI command modules for ExtrapFit.

Each module exports a command function with its Typer annotations; the main
app.py imports and registers them.
"""

from extrapfit.cli.commands.fit import fit_command
from extrapfit.cli.commands.info import info_command
from extrapfit.cli.commands.init import init_command
from extrapfit.cli.commands.sweep import sweep_command

__all__ = [
    "fit_command",
    "info_command",
    "init_command",
    "sweep_command",
]
