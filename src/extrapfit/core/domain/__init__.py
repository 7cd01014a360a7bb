"""Domain objects: samples and configuration."""

from extrapfit.core.domain.config import (
    ExtrapFitConfig,
    FitConfig,
    InputConfig,
    OutputConfig,
    SweepConfig,
)
from extrapfit.core.domain.samples import Sample, SampleSet

__all__ = [
    "ExtrapFitConfig",
    "FitConfig",
    "InputConfig",
    "OutputConfig",
    "Sample",
    "SampleSet",
    "SweepConfig",
]
