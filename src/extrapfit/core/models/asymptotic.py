"""Linear model with a fixed fractional-power correction term."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from extrapfit.core.models.base import BaseModel
from extrapfit.core.models.registry import register_model
from extrapfit.core.shared.exceptions import ConfigError

if TYPE_CHECKING:
    from extrapfit.core.shared.typing import FloatArray

DEFAULT_EXPONENT = 5.0 / 3.0


@register_model(["asymptotic", "asymptotic_corrected"])
class AsymptoticCorrected(BaseModel):
    """y = a·x + b·x^p + c, limiting value c.

    The x^p term captures the next order of the asymptotic series, so that
    coarser samples can still be used without biasing the limit.
    """

    name = "asymptotic"
    parameter_names = ("a", "b", "c")
    has_exponent = True

    def __init__(self, exponent: float = DEFAULT_EXPONENT) -> None:
        if not (np.isfinite(exponent) and exponent > 0.0):
            msg = f"Exponent must be a positive number, got {exponent}"
            raise ConfigError(msg)
        if np.isclose(exponent, 1.0):
            msg = "Exponent 1 duplicates the linear term"
            raise ConfigError(msg)
        self.exponent = float(exponent)

    def _basis(self, x: FloatArray) -> list[FloatArray]:
        return [x, np.power(x, self.exponent), np.ones_like(x)]

    def formula(self) -> str:
        return f"a*x + b*x^{self.exponent:.4g} + c"
