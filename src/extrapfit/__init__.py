"""ExtrapFit - Extrapolation of converging numerical results to x -> 0.

Public API:
    - fit, sweep, Extrapolator: Core least-squares extrapolation
    - ExtrapolationService: File-based runs with reporting and writers

Models:
    - Linear, AsymptoticCorrected, PowerLaw, create_model

Data:
    - SampleSet, read_samples
"""

import contextlib
from importlib import metadata

__version__ = "0.1.0"

with contextlib.suppress(metadata.PackageNotFoundError):
    __version__ = metadata.version(__name__)

from extrapfit.core.domain.config import ExtrapFitConfig
from extrapfit.core.domain.samples import Sample, SampleSet
from extrapfit.core.fitting import Extrapolator, FitResult, SensitivitySweep, fit, sweep
from extrapfit.core.models import AsymptoticCorrected, Linear, PowerLaw, create_model
from extrapfit.core.shared.exceptions import (
    ConfigError,
    DataIOError,
    ExtrapFitError,
    FitConvergenceError,
    InsufficientDataError,
    SingularFitError,
)
from extrapfit.io.samples import read_samples
from extrapfit.services import ExtrapolationReport, ExtrapolationService

__all__ = [
    # Version
    "__version__",
    # Core
    "Extrapolator",
    "FitResult",
    "SensitivitySweep",
    "fit",
    "sweep",
    # Models
    "AsymptoticCorrected",
    "Linear",
    "PowerLaw",
    "create_model",
    # Data
    "Sample",
    "SampleSet",
    "read_samples",
    # Services
    "ExtrapolationReport",
    "ExtrapolationService",
    # Configuration
    "ExtrapFitConfig",
    # Errors
    "ConfigError",
    "DataIOError",
    "ExtrapFitError",
    "FitConvergenceError",
    "InsufficientDataError",
    "SingularFitError",
]
