"""Single power-law extrapolation model."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from extrapfit.core.models.base import BaseModel
from extrapfit.core.models.registry import register_model
from extrapfit.core.shared.exceptions import ConfigError

if TYPE_CHECKING:
    from extrapfit.core.shared.typing import FloatArray

DEFAULT_EXPONENT = 1.5


@register_model("power")
class PowerLaw(BaseModel):
    """y = a·x^p + c, limiting value c.

    With x = 1/E_cut and p = 3/2 this is the usual plane-wave cutoff
    extrapolation of correlation energies.
    """

    name = "power"
    parameter_names = ("a", "c")
    has_exponent = True

    def __init__(self, exponent: float = DEFAULT_EXPONENT) -> None:
        if not (np.isfinite(exponent) and exponent > 0.0):
            msg = f"Exponent must be a positive number, got {exponent}"
            raise ConfigError(msg)
        self.exponent = float(exponent)

    def _basis(self, x: FloatArray) -> list[FloatArray]:
        return [np.power(x, self.exponent), np.ones_like(x)]

    def initial_guess(self, x: FloatArray, y: FloatArray) -> FloatArray:
        return super().initial_guess(np.power(np.asarray(x, dtype=np.float64), self.exponent), y)

    def formula(self) -> str:
        return f"a*x^{self.exponent:.4g} + c"
