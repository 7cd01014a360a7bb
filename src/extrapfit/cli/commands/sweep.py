"""Sweep command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer

from extrapfit.cli.commands.shared import (
    ERRORS_SHOWN,
    build_config,
    log_settings,
    validate_choices,
    write_outputs,
)

OMIT_DIRECTIONS = ("largest", "smallest")


def sweep_command(
    data: Annotated[
        pathlib.Path,
        typer.Argument(
            help="Path to sample file with x, y columns (.csv, .dat, .txt)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    max_omit: Annotated[
        int | None,
        typer.Option(
            "--max-omit",
            "-k",
            help="Largest number of omitted samples (default: from config, else 1)",
            min=0,
        ),
    ] = None,
    omit: Annotated[
        str | None,
        typer.Option(
            "--omit",
            help="Drop the largest-x (coarse) or smallest-x (expensive) samples first",
        ),
    ] = None,
    tolerance: Annotated[
        float | None,
        typer.Option(
            "--tolerance",
            "-t",
            help="Maximum spread of limiting values for a stable sweep",
            min=0.0,
        ),
    ] = None,
    models: Annotated[
        list[str] | None,
        typer.Option(
            "--model",
            "-m",
            help="Model(s) to sweep: linear, asymptotic, power. Can be specified multiple times.",
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
        typer.Option("--solver", help="Least-squares solver: linear or nonlinear"),
    ] = None,
    rescale: Annotated[
        bool | None,
        typer.Option("--rescale/--no-rescale", help="Divide x by its maximum before fitting"),
    ] = None,
    delimiter: Annotated[
        str | None,
        typer.Option("--delimiter", "-d", help="Column delimiter (default: from file suffix)"),
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
        typer.Option("--format", "-f", help="Output format(s): json, csv, txt"),
    ] = None,
    log_file: Annotated[
        pathlib.Path | None,
        typer.Option("--log-file", help="Write a session log", dir_okay=False, resolve_path=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show banner and debug output"),
    ] = False,
) -> None:
    """Refit over nested subsets to check how stable the limit is.

    Entry k of the sweep omits k samples. A good model gives a limit that
    barely moves as samples are dropped.

    Examples
    --------
    Drop up to three of the most expensive samples:
        $ extrapfit sweep gw_gap.csv -k 3 --omit smallest

    Compare only the corrected model against a tolerance:
        $ extrapfit sweep gw_gap.csv -k 3 -m asymptotic -t 0.002
    """
    from extrapfit.services import ExtrapolationService
    from extrapfit.ui import (
        ConsoleReporter,
        close_logging,
        info,
        print_fit_table,
        print_summary,
        print_sweep_table,
        setup_logging,
        show_banner,
        show_error_with_details,
    )

    show_banner(verbose)
    if omit is not None:
        validate_choices([omit], OMIT_DIRECTIONS, "omission direction")

    try:
        sweep_config = build_config(
            config,
            models=models,
            exponent=exponent,
            solver=solver,
            rescale=rescale,
            delimiter=delimiter,
            output=output,
            formats=formats,
        )
        if max_omit is not None:
            sweep_config.sweep.max_omit = max_omit
        elif config is None:
            sweep_config.sweep.max_omit = 1
        if omit is not None:
            sweep_config.sweep.omit = omit  # type: ignore[assignment]
        if tolerance is not None:
            sweep_config.sweep.stability_tolerance = tolerance
        sweep_config = type(sweep_config).model_validate(sweep_config.model_dump())
    except ERRORS_SHOWN as e:
        show_error_with_details("Configuration", e)
        raise typer.Exit(code=1) from e

    setup_logging(log_file, verbose=verbose, log_format=sweep_config.output.log_format)
    log_settings(sweep_config)

    service = ExtrapolationService(reporter=ConsoleReporter())
    try:
        report = service.extrapolate(data, sweep_config)
        print_fit_table(report.fits)
        print_summary(
            {
                "Samples": len(report.samples),
                "Omitted": f"0..{sweep_config.sweep.max_omit} ({sweep_config.sweep.omit} x first)",
                "Tolerance": f"{sweep_config.sweep.stability_tolerance:g}",
            },
            title="Sensitivity sweep",
        )
        for sensitivity in report.sweeps.values():
            print_sweep_table(sensitivity, sweep_config.sweep.stability_tolerance)
        best = report.most_stable()
        if best is not None and len(report.sweeps) > 1:
            info(f"Most stable model: [metric]{best}[/metric]")
        if output is not None or config is not None:
            write_outputs(report, sweep_config)
    except ERRORS_SHOWN as e:
        show_error_with_details("Sensitivity sweep", e)
        raise typer.Exit(code=1) from e
    finally:
        close_logging()
