"""Model construction from configuration names."""

from __future__ import annotations

from extrapfit.core.models.base import Model
from extrapfit.core.models.registry import get_model_class, list_models
from extrapfit.core.shared.exceptions import ConfigError


def _model_class(name: str) -> type[Model]:
    try:
        return get_model_class(name)
    except KeyError:
        msg = f"Unknown model '{name}'. Available: {', '.join(list_models())}"
        raise ConfigError(msg) from None


def supports_exponent(name: str) -> bool:
    """Whether the named model has a configurable power-term exponent."""
    return bool(getattr(_model_class(name), "has_exponent", False))


def create_model(name: str, exponent: float | None = None) -> Model:
    """Create a model instance by registered name.

    Args:
        name: Registered model name (see ``list_models()``)
        exponent: Exponent of the power term. ``None`` keeps the model default.

    Raises
    ------
        ConfigError: If the name is unknown, or an exponent is given for a
            model without a power term
    """
    model_class = _model_class(name)
    if exponent is None:
        return model_class()
    if not supports_exponent(name):
        msg = f"Model '{name}' has no exponent"
        raise ConfigError(msg)
    return model_class(exponent=exponent)  # type: ignore[call-arg]
