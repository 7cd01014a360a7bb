"""Linear algebra utilities for least-squares extrapolation.

All models are linear in their coefficients, so a fit reduces to solving an
over-determined system ``A @ params ≈ y``. The columns of ``A`` can differ by
many orders of magnitude (x ~ 1e-4 next to a constant column), so they are
normalised before the rank check and the QR solve.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.linalg import solve_triangular

from extrapfit.core.shared.exceptions import SingularFitError

if TYPE_CHECKING:
    from extrapfit.core.shared.typing import FloatArray


class LinearAlgebraHelper:
    """Helper class for the linear least-squares solve."""

    @staticmethod
    def column_norms(design: FloatArray) -> FloatArray:
        """Euclidean norm of each column of the design matrix.

        Raises
        ------
            SingularFitError: If any column is identically zero
        """
        norms = np.linalg.norm(design, axis=0)
        if np.any(norms == 0.0) or not np.all(np.isfinite(norms)):
            msg = "Design matrix has an empty or non-finite column"
            raise SingularFitError(msg)
        return cast("FloatArray", norms)

    @staticmethod
    def check_rank(design: FloatArray) -> None:
        """Raise ``SingularFitError`` if ``design`` is column-rank deficient."""
        n_params = design.shape[1]
        if design.shape[0] < n_params:
            msg = f"Design matrix has {design.shape[0]} rows for {n_params} parameters"
            raise SingularFitError(msg)
        scaled = design / LinearAlgebraHelper.column_norms(design)
        rank = int(np.linalg.matrix_rank(scaled))
        if rank < n_params:
            msg = f"Design matrix is rank deficient (rank {rank} < {n_params} parameters)"
            raise SingularFitError(msg)

    @staticmethod
    def qr_decomposition(design: FloatArray) -> tuple[FloatArray, FloatArray]:
        """Reduced QR decomposition, Q is (n_points, n_params)."""
        q, r = np.linalg.qr(design, mode="reduced")
        return cast("FloatArray", q), cast("FloatArray", r)

    @staticmethod
    def solve(design: FloatArray, y: FloatArray) -> tuple[FloatArray, FloatArray]:
        """Solve the least-squares problem and return (params, unscaled covariance).

        The covariance is ``(A^T A)^-1``; multiply by the reduced chi-squared
        to obtain parameter variances.
        """
        LinearAlgebraHelper.check_rank(design)
        norms = LinearAlgebraHelper.column_norms(design)
        q, r = LinearAlgebraHelper.qr_decomposition(design / norms)

        scaled_params = solve_triangular(r, q.T @ y, check_finite=False)
        params = scaled_params / norms

        r_inv = solve_triangular(r, np.eye(r.shape[0]), check_finite=False)
        covariance = (r_inv @ r_inv.T) / np.outer(norms, norms)

        if not (np.all(np.isfinite(params)) and np.all(np.isfinite(covariance))):
            msg = "Least-squares solution is not finite"
            raise SingularFitError(msg)
        return cast("FloatArray", params), cast("FloatArray", covariance)

    @staticmethod
    def covariance(design: FloatArray) -> FloatArray:
        """Unscaled covariance ``(A^T A)^-1`` of a full-rank design matrix."""
        norms = LinearAlgebraHelper.column_norms(design)
        _, r = LinearAlgebraHelper.qr_decomposition(design / norms)
        r_inv = solve_triangular(r, np.eye(r.shape[0]), check_finite=False)
        return cast("FloatArray", (r_inv @ r_inv.T) / np.outer(norms, norms))
