"""Base classes for extrapolation models.

Every model is linear in its coefficients: it is a weighted sum of fixed basis
functions of x. The coefficient of the constant basis function is the
limiting value at x = 0.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from extrapfit.core.shared.typing import FloatArray


@runtime_checkable
class Model(Protocol):
    """Protocol for extrapolation models."""

    name: str
    parameter_names: tuple[str, ...]

    @property
    def parameter_count(self) -> int: ...
    @property
    def limiting_index(self) -> int: ...
    def design_matrix(self, x: FloatArray) -> FloatArray: ...
    def evaluate(self, x: FloatArray, params: FloatArray) -> FloatArray: ...
    def initial_guess(self, x: FloatArray, y: FloatArray) -> FloatArray: ...
    def formula(self) -> str: ...


class BaseModel:
    """Base class for all extrapolation models.

    Subclasses set ``name``, ``parameter_names`` and implement ``_basis``,
    which returns one column per parameter in ``parameter_names`` order.
    The last parameter is always the constant term.
    """

    name: str = ""
    parameter_names: tuple[str, ...] = ()
    has_exponent: bool = False

    @property
    def parameter_count(self) -> int:
        return len(self.parameter_names)

    @property
    def limiting_index(self) -> int:
        return self.parameter_count - 1

    def _basis(self, x: FloatArray) -> list[FloatArray]:
        raise NotImplementedError

    def design_matrix(self, x: FloatArray) -> FloatArray:
        """Return the (n_points, n_params) matrix of basis functions."""
        x_arr = np.asarray(x, dtype=np.float64)
        return np.column_stack(self._basis(x_arr))

    def evaluate(self, x: FloatArray, params: FloatArray) -> FloatArray:
        """Evaluate the model at ``x`` for the coefficient vector ``params``."""
        params_arr = np.asarray(params, dtype=np.float64)
        if params_arr.shape != (self.parameter_count,):
            msg = (
                f"Model '{self.name}' takes {self.parameter_count} parameters, "
                f"got shape {params_arr.shape}"
            )
            raise ValueError(msg)
        x_arr = np.atleast_1d(np.asarray(x, dtype=np.float64))
        return self.design_matrix(x_arr) @ params_arr

    def initial_guess(self, x: FloatArray, y: FloatArray) -> FloatArray:
        """Starting point for iterative solvers.

        Uses a straight line through the first and last samples for the
        leading term and the constant, leaving higher-order terms at zero.
        """
        x_arr = np.asarray(x, dtype=np.float64)
        y_arr = np.asarray(y, dtype=np.float64)
        guess = np.zeros(self.parameter_count)
        i_max, i_min = int(np.argmax(x_arr)), int(np.argmin(x_arr))
        dx = x_arr[i_max] - x_arr[i_min]
        slope = (y_arr[i_max] - y_arr[i_min]) / dx if dx > 0 else 0.0
        guess[0] = slope
        guess[self.limiting_index] = y_arr[i_min] - slope * x_arr[i_min]
        return guess

    def formula(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.formula()})"
