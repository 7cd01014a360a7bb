"""Main Typer application for ExtrapFit."""

from typing import Annotated

import typer

from extrapfit.cli.callbacks import version_callback
from extrapfit.cli.commands import fit_command, info_command, init_command, sweep_command

app = typer.Typer(
    name="extrapfit",
    help="ExtrapFit - Extrapolate converging calculations to the x -> 0 limit",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """ExtrapFit - Extrapolate converging calculations to the x -> 0 limit.

    Fit linear and asymptotically corrected models to (x, y) samples and
    check how stable the extrapolated limit is.
    """


app.command(name="fit")(fit_command)
app.command(name="sweep")(sweep_command)
app.command(name="init")(init_command)
app.command(name="info")(info_command)
