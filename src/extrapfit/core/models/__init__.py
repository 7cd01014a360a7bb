"""Extrapolation models.

Available models (fixed set):
    - linear:      y = a*x + b
    - asymptotic:  y = a*x + b*x^p + c   (p = 5/3 by default)
    - power:       y = a*x^p + c         (p = 3/2 by default)
"""

# Import modules so the models register themselves
from extrapfit.core.models import asymptotic, linear, power  # noqa: F401
from extrapfit.core.models.asymptotic import AsymptoticCorrected
from extrapfit.core.models.base import BaseModel, Model
from extrapfit.core.models.factory import create_model, supports_exponent
from extrapfit.core.models.linear import Linear
from extrapfit.core.models.power import PowerLaw
from extrapfit.core.models.registry import get_model_class, list_models, register_model

__all__ = [
    "AsymptoticCorrected",
    "BaseModel",
    "Linear",
    "Model",
    "PowerLaw",
    "create_model",
    "get_model_class",
    "list_models",
    "register_model",
    "supports_exponent",
]
