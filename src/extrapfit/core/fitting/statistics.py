"""Goodness-of-fit statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from extrapfit.core.shared.typing import FloatArray


def compute_chi_squared(residuals: FloatArray) -> float:
    """Sum of squared residuals."""
    return float(np.sum(np.asarray(residuals) ** 2))


def compute_degrees_of_freedom(n_data: int, n_params: int) -> int:
    """Residual degrees of freedom, possibly zero for an exactly determined fit."""
    return max(0, n_data - n_params)


def compute_reduced_chi_squared(chi_squared: float, n_data: int, n_params: int) -> float | None:
    """Chi-squared per degree of freedom.

    Returns
    -------
        Reduced chi-squared, or None when there are no residual degrees of
        freedom (as many points as parameters)
    """
    dof = compute_degrees_of_freedom(n_data, n_params)
    if dof == 0:
        return None
    return chi_squared / dof


def compute_rms(residuals: FloatArray) -> float:
    """Root-mean-square of the residuals."""
    residuals = np.asarray(residuals)
    if residuals.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(residuals**2)))
