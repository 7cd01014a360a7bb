"""Least-squares extrapolation to x = 0.

``fit`` fits one model to one sample set; ``sweep`` repeats the fit over
nested subsets to show how much the limiting value depends on the samples
that are least (or most) converged.

Two solvers are available. Both reach the same minimum because every model
is linear in its coefficients:

    - ``linear``: direct QR solve of the design matrix
    - ``nonlinear``: scipy.optimize.least_squares with the analytic Jacobian,
      useful as an independent check and when a starting point is supplied
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.optimize import least_squares

from extrapfit.core.fitting.linear_algebra import LinearAlgebraHelper
from extrapfit.core.fitting.results import FitResult, SensitivitySweep
from extrapfit.core.shared.exceptions import (
    FitConvergenceError,
    InsufficientDataError,
    SingularFitError,
)

if TYPE_CHECKING:
    from extrapfit.core.domain.samples import SampleSet
    from extrapfit.core.models.base import Model
    from extrapfit.core.shared.typing import FloatArray, OmitDirection, SolverName

logger = logging.getLogger(__name__)

SOLVERS = ("linear", "nonlinear")
DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_TOLERANCE = 1e-12


def _check_fit_inputs(samples: SampleSet, model: Model) -> None:
    if len(samples) < model.parameter_count:
        msg = (
            f"Model '{model.name}' needs at least {model.parameter_count} samples, "
            f"got {len(samples)}"
        )
        raise InsufficientDataError(msg)
    if samples.n_distinct_x < model.parameter_count:
        msg = (
            f"Model '{model.name}' needs {model.parameter_count} distinct x values, "
            f"got {samples.n_distinct_x}"
        )
        raise SingularFitError(msg)


def _solve_linear(design: FloatArray, y: FloatArray) -> tuple[FloatArray, FloatArray, int]:
    params, covariance = LinearAlgebraHelper.solve(design, y)
    return params, covariance, 0


def _solve_nonlinear(
    model: Model,
    x: FloatArray,
    y: FloatArray,
    design: FloatArray,
    initial: FloatArray | None,
    max_iterations: int,
    tolerance: float,
) -> tuple[FloatArray, FloatArray, int]:
    LinearAlgebraHelper.check_rank(design)
    x0 = model.initial_guess(x, y) if initial is None else np.asarray(initial, dtype=np.float64)
    if x0.shape != (model.parameter_count,):
        msg = f"Initial guess must have {model.parameter_count} values, got shape {x0.shape}"
        raise ValueError(msg)

    def residuals(params: FloatArray) -> FloatArray:
        return model.evaluate(x, params) - y

    def jacobian(params: FloatArray) -> FloatArray:
        return design

    result = least_squares(
        residuals,
        x0,
        jac=jacobian,
        method="trf",
        x_scale="jac",
        ftol=tolerance,
        xtol=tolerance,
        gtol=tolerance,
        max_nfev=max_iterations,
    )
    if not result.success:
        msg = f"Least-squares solver did not converge for model '{model.name}': {result.message}"
        raise FitConvergenceError(msg)
    if not np.all(np.isfinite(result.x)):
        msg = f"Least-squares solver returned non-finite parameters for model '{model.name}'"
        raise FitConvergenceError(msg)

    return result.x, LinearAlgebraHelper.covariance(design), int(result.nfev)


def fit(
    samples: SampleSet,
    model: Model,
    solver: SolverName = "linear",
    *,
    initial: FloatArray | None = None,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> FitResult:
    """Fit ``model`` to ``samples`` by least squares.

    Args:
        samples: Samples to fit
        model: Model variant
        solver: ``"linear"`` (direct solve) or ``"nonlinear"`` (iterative)
        initial: Starting parameters for the nonlinear solver
        max_iterations: Function evaluation budget of the nonlinear solver
        tolerance: Convergence tolerance of the nonlinear solver

    Returns
    -------
        FitResult with the limiting value at x = 0

    Raises
    ------
        InsufficientDataError: Fewer samples than model parameters
        SingularFitError: Degenerate design matrix
        FitConvergenceError: The nonlinear solver did not converge
    """
    _check_fit_inputs(samples, model)

    x = np.asarray(samples.x)
    y = np.asarray(samples.y)
    design = model.design_matrix(x)

    if solver == "linear":
        params, covariance, nfev = _solve_linear(design, y)
    elif solver == "nonlinear":
        params, covariance, nfev = _solve_nonlinear(
            model, x, y, design, initial, max_iterations, tolerance
        )
    else:
        msg = f"Unknown solver '{solver}'. Available: {', '.join(SOLVERS)}"
        raise ValueError(msg)

    residual = y - design @ params
    result = FitResult(
        model=model,
        params=params,
        residual=residual,
        covariance=covariance,
        solver=solver,
        x_scale=samples.x_scale,
        nfev=nfev,
    )
    logger.debug(
        "Fitted %s to %d samples (%s): limit=%.10g",
        model.name,
        len(samples),
        solver,
        result.limiting_value,
    )
    return result


def sweep(
    samples: SampleSet,
    model: Model,
    max_omit: int,
    omit: OmitDirection = "largest",
    solver: SolverName = "linear",
    *,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = DEFAULT_TOLERANCE,
) -> SensitivitySweep:
    """Fit ``model`` to nested subsets omitting 0..max_omit samples.

    Args:
        samples: Full sample set
        model: Model variant
        max_omit: Largest number of omitted samples K; the sweep has K+1 entries
        omit: ``"largest"`` drops the coarsest (largest-x) samples first,
            ``"smallest"`` drops the most expensive (smallest-x) ones first
        solver: Solver used for every fit

    Raises
    ------
        ValueError: If max_omit is negative
        InsufficientDataError: If max_omit >= len(samples) - parameter_count
    """
    if max_omit < 0:
        msg = f"max_omit must be >= 0, got {max_omit}"
        raise ValueError(msg)
    limit = len(samples) - model.parameter_count
    if max_omit >= limit:
        msg = (
            f"max_omit must be < {max(limit, 0)} for model '{model.name}' "
            f"with {len(samples)} samples, got {max_omit}"
        )
        raise InsufficientDataError(msg)

    results = tuple(
        fit(
            samples.omit(k, omit),
            model,
            solver,
            max_iterations=max_iterations,
            tolerance=tolerance,
        )
        for k in range(max_omit + 1)
    )
    sensitivity = SensitivitySweep(model=model, omit=omit, results=results)
    logger.debug(
        "Swept %s over k=0..%d (omit %s): spread=%.3g",
        model.name,
        max_omit,
        omit,
        sensitivity.spread,
    )
    return sensitivity


@dataclass(frozen=True)
class Extrapolator:
    """Solver settings bound to ``fit`` and ``sweep``.

    Example:
        extrapolator = Extrapolator(solver="nonlinear")
        result = extrapolator.fit(samples, AsymptoticCorrected())
        print(result.limiting_value)
    """

    solver: SolverName = "linear"
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    tolerance: float = DEFAULT_TOLERANCE

    def fit(self, samples: SampleSet, model: Model, *, initial: FloatArray | None = None) -> FitResult:
        return fit(
            samples,
            model,
            self.solver,
            initial=initial,
            max_iterations=self.max_iterations,
            tolerance=self.tolerance,
        )

    def sweep(
        self,
        samples: SampleSet,
        model: Model,
        max_omit: int,
        omit: OmitDirection = "largest",
    ) -> SensitivitySweep:
        return sweep(
            samples,
            model,
            max_omit,
            omit,
            self.solver,
            max_iterations=self.max_iterations,
            tolerance=self.tolerance,
        )
