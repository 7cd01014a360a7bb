"""Model registry.

The set of asymptotic forms is fixed: every variant is defined in this
package and registered at import time. The registry only maps names used in
configuration files and on the command line to those classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from extrapfit.core.models.base import Model

MODELS: dict[str, type[Model]] = {}


def register_model(
    model_names: str | Iterable[str],
) -> Callable[[type[Model]], type[Model]]:
    """Register a model class under one or more names.

    Example:
        @register_model("linear")
        class Linear(BaseModel):
            ...

        @register_model(["asymptotic", "asymptotic_corrected"])
        class AsymptoticCorrected(BaseModel):
            ...
    """
    if isinstance(model_names, str):
        model_names = [model_names]

    def decorator(model_class: type[Model]) -> type[Model]:
        for name in model_names:
            MODELS[name] = model_class
        return model_class

    return decorator


def get_model_class(name: str) -> type[Model]:
    """Get a model class by name.

    Raises
    ------
        KeyError: If the name is not registered
    """
    return MODELS[name]


def list_models() -> list[str]:
    """List all registered model names."""
    return list(MODELS.keys())
