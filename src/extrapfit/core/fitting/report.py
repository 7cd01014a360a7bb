"""Collected results of one extrapolation run."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

    from extrapfit.core.domain.samples import SampleSet
    from extrapfit.core.fitting.results import FitResult, SensitivitySweep


@dataclass
class RunMetadata:
    """Reproducibility information for a run."""

    version: str
    input_file: Path | None
    settings: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ExtrapolationReport:
    """Fits and sweeps for every configured model, keyed by model name."""

    samples: SampleSet
    metadata: RunMetadata
    fits: dict[str, FitResult] = field(default_factory=dict)
    sweeps: dict[str, SensitivitySweep] = field(default_factory=dict)
    stability_tolerance: float | None = None

    @property
    def model_names(self) -> list[str]:
        return list(self.fits)

    def limiting_values(self) -> dict[str, float]:
        return {name: result.limiting_value for name, result in self.fits.items()}

    def most_stable(self) -> str | None:
        """Name of the model whose sweep has the smallest spread."""
        if not self.sweeps:
            return None
        return min(self.sweeps, key=lambda name: self.sweeps[name].spread)
