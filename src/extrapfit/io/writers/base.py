"""Base writer interface and configuration."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from extrapfit.core.fitting.report import ExtrapolationReport


@dataclass
class WriterConfig:
    """Configuration for output writers.

    Attributes
    ----------
        precision: Significant digits for floating point values
        include_comments: Include ``#`` header comments in text outputs
    """

    precision: int = 10
    include_comments: bool = True

    # Format-specific options
    csv_delimiter: str = ","
    json_indent: int = 2


@runtime_checkable
class OutputWriter(Protocol):
    """Protocol for output writers."""

    def write(self, report: ExtrapolationReport, directory: Path) -> list[Path]:
        """Write the report into ``directory`` and return the created files."""
        ...


def format_float(value: float | None, precision: int = 10) -> str:
    """Format a float with ``precision`` significant digits.

    ``None`` is written as an empty string so missing standard errors leave
    an empty cell rather than a fake number.
    """
    if value is None:
        return ""
    if math.isinf(value) or math.isnan(value):
        return str(value)
    return f"{value:.{precision}g}"


def format_uncertainty(value: float, error: float | None, precision: int = 10) -> str:
    """Format a value with its uncertainty, e.g. "2.6619 ± 0.0004"."""
    if error is None:
        return format_float(value, precision)
    return f"{format_float(value, precision)} ± {format_float(error, precision=3)}"
