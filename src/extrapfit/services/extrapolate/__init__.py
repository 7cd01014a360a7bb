"""Extrapolation service."""

from extrapfit.services.extrapolate.service import ExtrapolationService
from extrapfit.services.extrapolate.writer import write_report

__all__ = ["ExtrapolationService", "write_report"]
