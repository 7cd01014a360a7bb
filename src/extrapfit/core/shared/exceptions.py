"""Exception taxonomy for ExtrapFit.

This module defines a small, coherent hierarchy of exceptions so that callers
can tell bad input apart from numerical failures and handle each precisely.
"""

from __future__ import annotations


class ExtrapFitError(Exception):
    """Base class for all ExtrapFit-specific exceptions."""


class ConfigError(ExtrapFitError):
    """Configuration-related errors (invalid/missing options, unknown models)."""


class DataIOError(ExtrapFitError):
    """Data loading/saving errors (files, formats, permissions)."""


class FitError(ExtrapFitError):
    """Base class for errors raised by a single fit call."""


class InsufficientDataError(FitError):
    """Fewer samples than the free parameters of the chosen model."""


class SingularFitError(FitError):
    """Degenerate design matrix (e.g. too few distinct x values)."""


class FitConvergenceError(FitError):
    """The iterative least-squares solver did not converge."""


__all__ = [
    "ConfigError",
    "DataIOError",
    "ExtrapFitError",
    "FitConvergenceError",
    "FitError",
    "InsufficientDataError",
    "SingularFitError",
]
