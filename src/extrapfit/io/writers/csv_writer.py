"""CSV writer for ExtrapFit results.

Long-format tables, one row per parameter or per sweep entry, for easy
import into pandas, spreadsheets or plotting scripts.
"""

from __future__ import annotations

import csv
from typing import TYPE_CHECKING

from extrapfit.io.writers.base import WriterConfig, format_float

if TYPE_CHECKING:
    from pathlib import Path

    from extrapfit.core.fitting.report import ExtrapolationReport

PARAMETERS_FILE = "parameters.csv"
SWEEP_FILE = "sweep.csv"


class CSVWriter:
    """Writer for CSV format outputs."""

    def __init__(self, config: WriterConfig | None = None) -> None:
        self.config = config or WriterConfig()

    def write(self, report: ExtrapolationReport, directory: Path) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        written = [self.write_parameters(report, directory / PARAMETERS_FILE)]
        if report.sweeps:
            written.append(self.write_sweeps(report, directory / SWEEP_FILE))
        return written

    def write_parameters(self, report: ExtrapolationReport, path: Path) -> Path:
        """Write fitted parameters, one row per model parameter."""
        precision = self.config.precision
        with path.open("w", newline="") as f:
            if self.config.include_comments:
                f.write("# ExtrapFit fitted parameters\n")
                f.write(f"# Generated: {report.metadata.timestamp.isoformat()}\n")
                f.write(f"# x_scale: {format_float(report.samples.x_scale, precision)}\n")
            writer = csv.writer(f, delimiter=self.config.csv_delimiter)
            writer.writerow(["model", "parameter", "value", "stderr", "is_limit"])
            for name, result in report.fits.items():
                stderr = result.stderr
                for i, (param, value) in enumerate(result.parameters().items()):
                    writer.writerow(
                        [
                            name,
                            param,
                            format_float(value, precision),
                            format_float(None if stderr is None else float(stderr[i]), precision),
                            i == result.model.limiting_index,
                        ]
                    )
        return path

    def write_sweeps(self, report: ExtrapolationReport, path: Path) -> Path:
        """Write the sensitivity sweeps, one row per model and omission count."""
        precision = self.config.precision
        with path.open("w", newline="") as f:
            if self.config.include_comments:
                f.write("# ExtrapFit sensitivity sweep\n")
                f.write(f"# Generated: {report.metadata.timestamp.isoformat()}\n")
            writer = csv.writer(f, delimiter=self.config.csv_delimiter)
            writer.writerow(["model", "omit", "k", "n_points", "limiting_value", "stderr", "delta"])
            for name, sensitivity in report.sweeps.items():
                for row in sensitivity.rows():
                    writer.writerow(
                        [
                            name,
                            sensitivity.omit,
                            row["k"],
                            row["n_points"],
                            format_float(row["limiting_value"], precision),
                            format_float(row["limiting_stderr"], precision),
                            format_float(row["delta"], precision),
                        ]
                    )
        return path
