"""Fit and sweep result classes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from extrapfit.core.fitting.statistics import (
    compute_chi_squared,
    compute_degrees_of_freedom,
    compute_reduced_chi_squared,
    compute_rms,
)

if TYPE_CHECKING:
    from extrapfit.core.models.base import Model
    from extrapfit.core.shared.typing import FloatArray, OmitDirection


@dataclass(frozen=True, eq=False)
class FitResult:
    """Result of fitting one model to one sample set.

    ``params`` are the coefficients on the (possibly rescaled) x axis the fit
    was performed on; ``x_scale`` maps back to the original axis. The limiting
    value does not depend on the scale.
    """

    model: Model
    params: FloatArray
    residual: FloatArray
    covariance: FloatArray
    solver: str
    x_scale: float = 1.0
    nfev: int = 0

    @property
    def model_name(self) -> str:
        return self.model.name

    @property
    def parameter_names(self) -> tuple[str, ...]:
        return self.model.parameter_names

    @property
    def limiting_value(self) -> float:
        """Fitted value at x = 0."""
        return float(self.params[self.model.limiting_index])

    @property
    def n_points(self) -> int:
        return int(self.residual.size)

    @property
    def dof(self) -> int:
        return compute_degrees_of_freedom(self.n_points, self.model.parameter_count)

    @property
    def chisqr(self) -> float:
        return compute_chi_squared(self.residual)

    @property
    def redchi(self) -> float | None:
        return compute_reduced_chi_squared(self.chisqr, self.n_points, self.model.parameter_count)

    @property
    def rms(self) -> float:
        return compute_rms(self.residual)

    @property
    def stderr(self) -> FloatArray | None:
        """Standard errors of the parameters, None without residual freedom."""
        redchi = self.redchi
        if redchi is None:
            return None
        return np.sqrt(np.clip(np.diag(self.covariance), 0.0, None) * redchi)

    @property
    def limiting_stderr(self) -> float | None:
        stderr = self.stderr
        return None if stderr is None else float(stderr[self.model.limiting_index])

    def parameters(self) -> dict[str, float]:
        """Fitted parameters keyed by name."""
        return {name: float(value) for name, value in zip(self.parameter_names, self.params, strict=True)}

    def predict(self, x: FloatArray | float) -> FloatArray:
        """Evaluate the fitted model at original (unscaled) x values."""
        x_arr = np.atleast_1d(np.asarray(x, dtype=np.float64))
        return self.model.evaluate(x_arr / self.x_scale, self.params)

    def summary(self) -> dict[str, Any]:
        """Flat dictionary used by writers and tables."""
        stderr = self.stderr
        return {
            "model": self.model_name,
            "formula": self.model.formula(),
            "solver": self.solver,
            "n_points": self.n_points,
            "x_scale": self.x_scale,
            "limiting_value": self.limiting_value,
            "limiting_stderr": self.limiting_stderr,
            "parameters": self.parameters(),
            "stderr": None if stderr is None else dict(zip(self.parameter_names, stderr.tolist(), strict=True)),
            "chisqr": self.chisqr,
            "redchi": self.redchi,
            "rms": self.rms,
        }


@dataclass(frozen=True, eq=False)
class SensitivitySweep:
    """Fits over nested subsets, entry k omitting k samples."""

    model: Model
    omit: OmitDirection
    results: tuple[FitResult, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[FitResult]:
        return iter(self.results)

    def __getitem__(self, k: int) -> FitResult:
        return self.results[k]

    @property
    def model_name(self) -> str:
        return self.model.name

    @property
    def max_omit(self) -> int:
        return len(self.results) - 1

    @property
    def limiting_values(self) -> FloatArray:
        return np.array([result.limiting_value for result in self.results])

    @property
    def n_points(self) -> list[int]:
        return [result.n_points for result in self.results]

    @property
    def drift(self) -> FloatArray:
        """Change of the limiting value from entry k-1 to entry k."""
        return np.diff(self.limiting_values)

    @property
    def spread(self) -> float:
        """Largest minus smallest limiting value over the sweep."""
        values = self.limiting_values
        if values.size == 0:
            return 0.0
        return float(np.max(values) - np.min(values))

    def is_stable(self, tolerance: float) -> bool:
        """Whether every limiting value lies within ``tolerance`` of the others."""
        return self.spread < tolerance

    def rows(self) -> list[dict[str, Any]]:
        """One row per omission count, for writers and tables."""
        values = self.limiting_values
        rows = []
        for k, result in enumerate(self.results):
            rows.append(
                {
                    "k": k,
                    "n_points": result.n_points,
                    "limiting_value": result.limiting_value,
                    "limiting_stderr": result.limiting_stderr,
                    "delta": float(values[k] - values[0]),
                    "redchi": result.redchi,
                }
            )
        return rows
