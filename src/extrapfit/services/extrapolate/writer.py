"""Result writing for extrapolation runs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from extrapfit.core.shared.exceptions import DataIOError
from extrapfit.io.writers import WRITERS, WriterConfig

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from extrapfit.core.domain.config import OutputFormat
    from extrapfit.core.fitting.report import ExtrapolationReport

__all__ = ["write_report"]


def write_report(
    report: ExtrapolationReport,
    directory: Path,
    formats: Sequence[OutputFormat],
    precision: int = 10,
) -> list[Path]:
    """Write ``report`` into ``directory`` in every format of ``formats``.

    Raises
    ------
        DataIOError: Unknown format, or the files cannot be written
    """
    unknown = [fmt for fmt in formats if fmt not in WRITERS]
    if unknown:
        msg = f"Unknown output format(s): {', '.join(unknown)}. Valid: {', '.join(WRITERS)}"
        raise DataIOError(msg)

    writer_config = WriterConfig(precision=precision)
    written: list[Path] = []
    try:
        directory.mkdir(parents=True, exist_ok=True)
        for fmt in dict.fromkeys(formats):
            written.extend(WRITERS[fmt](writer_config).write(report, directory))
    except OSError as e:
        msg = f"Could not write results to {directory}: {e}"
        raise DataIOError(msg) from e
    return written
