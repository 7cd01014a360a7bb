"""Least-squares extrapolation: fitting, sensitivity sweeps and results."""

from extrapfit.core.fitting.extrapolator import SOLVERS, Extrapolator, fit, sweep
from extrapfit.core.fitting.results import FitResult, SensitivitySweep

__all__ = [
    "SOLVERS",
    "Extrapolator",
    "FitResult",
    "SensitivitySweep",
    "fit",
    "sweep",
]
