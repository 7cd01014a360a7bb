"""Shared infrastructure: exceptions, typing aliases and reporting."""

from extrapfit.core.shared.exceptions import (
    ConfigError,
    DataIOError,
    ExtrapFitError,
    FitConvergenceError,
    FitError,
    InsufficientDataError,
    SingularFitError,
)
from extrapfit.core.shared.reporter import NullReporter, Reporter

__all__ = [
    "ConfigError",
    "DataIOError",
    "ExtrapFitError",
    "FitConvergenceError",
    "FitError",
    "InsufficientDataError",
    "NullReporter",
    "Reporter",
    "SingularFitError",
]
