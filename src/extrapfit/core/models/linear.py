"""Linear extrapolation model."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from extrapfit.core.models.base import BaseModel
from extrapfit.core.models.registry import register_model

if TYPE_CHECKING:
    from extrapfit.core.shared.typing import FloatArray


@register_model("linear")
class Linear(BaseModel):
    """y = a·x + b, limiting value b."""

    name = "linear"
    parameter_names = ("a", "b")

    def _basis(self, x: FloatArray) -> list[FloatArray]:
        return [x, np.ones_like(x)]

    def formula(self) -> str:
        return "a*x + b"
