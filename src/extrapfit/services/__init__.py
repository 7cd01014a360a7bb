"""Service layer for ExtrapFit.

Services wrap the core logic for use by the CLI and other adapters.
"""

from extrapfit.core.fitting.report import ExtrapolationReport
from extrapfit.services.extrapolate import ExtrapolationService

__all__ = ["ExtrapolationReport", "ExtrapolationService"]
