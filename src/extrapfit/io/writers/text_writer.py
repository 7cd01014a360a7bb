"""Plain-text summary writer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from extrapfit.io.writers.base import WriterConfig, format_float, format_uncertainty

if TYPE_CHECKING:
    from pathlib import Path

    from extrapfit.core.fitting.report import ExtrapolationReport

SUMMARY_FILE = "summary.txt"


class TextWriter:
    """Writer for the human-readable ``summary.txt``."""

    def __init__(self, config: WriterConfig | None = None) -> None:
        self.config = config or WriterConfig()

    def write(self, report: ExtrapolationReport, directory: Path) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / SUMMARY_FILE
        path.write_text(self.render(report))
        return [path]

    def render(self, report: ExtrapolationReport) -> str:
        precision = self.config.precision
        meta = report.metadata
        lines = [
            f"# ExtrapFit {meta.version} - {meta.timestamp:%Y-%m-%d %H:%M:%S}",
            f"# Input: {meta.input_file if meta.input_file is not None else '-'}",
            f"# Samples: {len(report.samples)} (x_scale = {format_float(report.samples.x_scale, precision)})",
            "",
        ]

        for name, result in report.fits.items():
            lines.append(f"[{name}] {result.model.formula()}")
            stderr = result.stderr
            for i, (param, value) in enumerate(result.parameters().items()):
                error = None if stderr is None else float(stderr[i])
                lines.append(f"  {param:<3s} = {format_uncertainty(value, error, precision)}")
            lines.append(f"  limit = {format_float(result.limiting_value, precision)}")
            redchi = result.redchi
            lines.append(f"  rms residual = {format_float(result.rms, 4)}")
            if redchi is not None:
                lines.append(f"  reduced chi2 = {format_float(redchi, 4)}")
            lines.append("")

        for name, sensitivity in report.sweeps.items():
            lines.append(f"[{name}] sweep, omitting {sensitivity.omit}-x samples first")
            lines.append(f"  {'k':>3s} {'points':>6s} {'limit':>20s} {'delta':>14s}")
            for row in sensitivity.rows():
                lines.append(
                    f"  {row['k']:>3d} {row['n_points']:>6d} "
                    f"{format_float(row['limiting_value'], precision):>20s} "
                    f"{format_float(row['delta'], 4):>14s}"
                )
            status = ""
            if report.stability_tolerance is not None:
                stable = sensitivity.is_stable(report.stability_tolerance)
                status = " (stable)" if stable else " (NOT stable)"
            lines.append(f"  spread = {format_float(sensitivity.spread, 4)}{status}")
            lines.append("")

        return "\n".join(lines)
