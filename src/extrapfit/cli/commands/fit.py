"""Fit command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer

from extrapfit.cli.commands.shared import ERRORS_SHOWN, build_config, log_settings, write_outputs


def fit_command(
    data: Annotated[
        pathlib.Path,
        typer.Argument(
            help="Path to sample file with x, y columns (.csv, .dat, .txt)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    models: Annotated[
        list[str] | None,
        typer.Option(
            "--model",
            "-m",
            help="Model(s) to fit: linear, asymptotic, power. Can be specified multiple times.",
        ),
    ] = None,
    exponent: Annotated[
        float | None,
        typer.Option(
            "--exponent",
            "-p",
            help="Exponent of the power term (default: 5/3 for asymptotic, 3/2 for power)",
            min=0.0,
        ),
    ] = None,
    solver: Annotated[
        str | None,
        typer.Option(
            "--solver",
            help="Least-squares solver: linear (direct) or nonlinear (iterative)",
        ),
    ] = None,
    rescale: Annotated[
        bool | None,
        typer.Option(
            "--rescale/--no-rescale",
            help="Divide x by its maximum before fitting (default: on)",
        ),
    ] = None,
    delimiter: Annotated[
        str | None,
        typer.Option(
            "--delimiter",
            "-d",
            help="Column delimiter (default: from file suffix)",
        ),
    ] = None,
    config: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to TOML configuration file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    output: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for result files (nothing is written without it)",
            file_okay=False,
            resolve_path=True,
        ),
    ] = None,
    formats: Annotated[
        list[str] | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format(s): json, csv, txt. Can be specified multiple times.",
        ),
    ] = None,
    log_file: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--log-file",
            help="Write a session log (JSON if the suffix is .json)",
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Show banner and debug output",
        ),
    ] = False,
) -> None:
    """Fit extrapolation models and report the limit at x = 0.

    Examples
    --------
    Linear and asymptotically corrected fits (default):
        $ extrapfit fit gw_gap.csv

    Only the corrected model, with another exponent:
        $ extrapfit fit gw_gap.csv -m asymptotic -p 1.5

    Save results:
        $ extrapfit fit gw_gap.csv --output results --format json
    """
    from extrapfit.services import ExtrapolationService
    from extrapfit.ui import (
        ConsoleReporter,
        close_logging,
        print_fit_table,
        setup_logging,
        show_banner,
        show_error_with_details,
    )

    show_banner(verbose)

    try:
        fit_config = build_config(
            config,
            models=models,
            exponent=exponent,
            solver=solver,
            rescale=rescale,
            delimiter=delimiter,
            output=output,
            formats=formats,
        )
    except ERRORS_SHOWN as e:
        show_error_with_details("Configuration", e)
        raise typer.Exit(code=1) from e

    setup_logging(log_file, verbose=verbose, log_format=fit_config.output.log_format)

    # Sweeps belong to the sweep command
    fit_config.sweep.max_omit = 0
    log_settings(fit_config)

    service = ExtrapolationService(reporter=ConsoleReporter())
    try:
        report = service.extrapolate(data, fit_config)
        print_fit_table(report.fits)
        if output is not None or config is not None:
            write_outputs(report, fit_config)
    except ERRORS_SHOWN as e:
        show_error_with_details("Extrapolation", e)
        raise typer.Exit(code=1) from e
    finally:
        close_logging()
