"""Init command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from extrapfit.io.config import generate_default_config
from extrapfit.ui import console, error, info, print_next_steps, success


def init_command(
    path: Annotated[
        Path,
        typer.Argument(
            help="Path for new configuration file",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = Path("extrapfit.toml"),
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite existing file",
        ),
    ] = False,
) -> None:
    """Generate a default configuration file.

    Examples
    --------
      Create default config:
        $ extrapfit init

      Overwrite existing config:
        $ extrapfit init my_run.toml --force
    """
    if path.exists() and not force:
        error(f"File already exists: [path]{path}[/path]")
        info("Use [code]--force[/code] to overwrite")
        raise typer.Exit(1)

    path.write_text(generate_default_config())
    success(f"Created configuration file: [path]{path}[/path]")

    console.print("\n[header]Configuration includes:[/header]")
    console.print("  - [value]Fitting[/value] (models, exponent, solver)")
    console.print("  - [value]Sweep[/value] (omitted samples, direction, tolerance)")
    console.print("  - [value]Input and output[/value] (rescaling, formats, directory)")

    print_next_steps([
        f"Review and customize: [cyan]{path}[/]",
        f"Run: [cyan]extrapfit sweep samples.csv --config {path}[/]",
    ])
