"""Shared typing aliases used across ExtrapFit."""

from typing import Literal

import numpy as np
import numpy.typing as npt

FloatArray = npt.NDArray[np.float64]

OmitDirection = Literal["largest", "smallest"]
SolverName = Literal["linear", "nonlinear"]
