"""JSON output writer for ExtrapFit results.

Produces one machine-readable file with run metadata, fits and sweeps.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import numpy as np

from extrapfit.io.writers.base import WriterConfig

if TYPE_CHECKING:
    from extrapfit.core.fitting.report import ExtrapolationReport, RunMetadata
    from extrapfit.core.fitting.results import SensitivitySweep

RESULTS_FILE = "extrapolation.json"
SCHEMA_VERSION = "1.0.0"


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy types, datetimes and Path objects."""

    def default(self, o: Any) -> Any:
        if isinstance(o, np.integer):
            return int(o)
        if isinstance(o, np.floating):
            return float(o)
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Path):
            return str(o)
        return super().default(o)


class JSONWriter:
    """Writer for JSON output files."""

    def __init__(self, config: WriterConfig | None = None) -> None:
        self.config = config or WriterConfig()

    def write(self, report: ExtrapolationReport, directory: Path) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / RESULTS_FILE
        self.write_results(report, path)
        return [path]

    def write_results(self, report: ExtrapolationReport, path: Path) -> None:
        output: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "metadata": self._serialize_metadata(report.metadata),
            "samples": {
                "n_points": len(report.samples),
                "x_scale": report.samples.x_scale,
                "x": report.samples.x,
                "y": report.samples.y,
            },
            "fits": {name: result.summary() for name, result in report.fits.items()},
            "sweeps": {name: self._serialize_sweep(s) for name, s in report.sweeps.items()},
        }
        if report.sweeps:
            output["most_stable_model"] = report.most_stable()
        self._write_json(output, path)

    def _serialize_metadata(self, metadata: RunMetadata) -> dict[str, Any]:
        return {
            "version": metadata.version,
            "timestamp": metadata.timestamp,
            "input_file": metadata.input_file,
            "settings": metadata.settings,
        }

    def _serialize_sweep(self, sensitivity: SensitivitySweep) -> dict[str, Any]:
        return {
            "omit": sensitivity.omit,
            "max_omit": sensitivity.max_omit,
            "spread": sensitivity.spread,
            "entries": sensitivity.rows(),
        }

    def _write_json(self, data: dict[str, Any], path: Path) -> None:
        with path.open("w") as f:
            json.dump(data, f, indent=self.config.json_indent, cls=NumpyEncoder)
            f.write("\n")
