"""UI tables for fit results and sensitivity sweeps."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich import box
from rich.table import Table

from extrapfit.io.writers.base import format_float, format_uncertainty
from extrapfit.ui.console import console, icon

if TYPE_CHECKING:
    from extrapfit.core.fitting.results import FitResult, SensitivitySweep

__all__ = [
    "create_table",
    "print_fit_table",
    "print_summary",
    "print_sweep_table",
]


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling."""
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table."""
    table = create_table(title, show_header=False)
    table.add_column("Item", style="metric")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, str(value))

    console.print(table)


def print_fit_table(results: dict[str, FitResult], precision: int = 8) -> None:
    """Print fitted parameters and limiting values, one row per model."""
    table = create_table("Fit results")
    table.add_column("Model", style="metric")
    table.add_column("Formula")
    table.add_column("Points", justify="right")
    table.add_column("Parameters")
    table.add_column("Limit (x → 0)", style="value", justify="right")
    table.add_column("RMS residual", justify="right")

    for name, result in results.items():
        stderr = result.stderr
        params = "\n".join(
            f"{param} = {format_uncertainty(value, None if stderr is None else float(stderr[i]), precision)}"
            for i, (param, value) in enumerate(result.parameters().items())
        )
        table.add_row(
            name,
            result.model.formula(),
            str(result.n_points),
            params,
            format_uncertainty(result.limiting_value, result.limiting_stderr, precision),
            format_float(result.rms, 3),
        )

    console.print(table)


def print_sweep_table(
    sensitivity: SensitivitySweep,
    tolerance: float | None = None,
    precision: int = 8,
) -> None:
    """Print limiting values for each omission count of a sweep."""
    table = create_table(f"Sensitivity sweep: {sensitivity.model_name} (omit {sensitivity.omit} x)")
    table.add_column("k", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Limit", style="value", justify="right")
    table.add_column("Δ vs k=0", justify="right")

    for row in sensitivity.rows():
        table.add_row(
            str(row["k"]),
            str(row["n_points"]),
            format_float(row["limiting_value"], precision),
            format_float(row["delta"], 3),
        )

    console.print(table)

    spread = format_float(sensitivity.spread, 3)
    if tolerance is None:
        console.print(f"  Spread: [number]{spread}[/number]")
    elif sensitivity.is_stable(tolerance):
        console.print(f"  [success]{icon('check')}[/success] Spread {spread} < {tolerance:g}")
    else:
        console.print(f"  [warning]{icon('warn')}[/warning]  Spread {spread} ≥ {tolerance:g}")
