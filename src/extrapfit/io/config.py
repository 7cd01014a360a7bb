"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from extrapfit.core.domain.config import ExtrapFitConfig
from extrapfit.core.shared.exceptions import ConfigError


def load_config(path: Path) -> ExtrapFitConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        ExtrapFitConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ConfigError: If the configuration values are invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    try:
        return ExtrapFitConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration in {path}:\n{e}"
        raise ConfigError(msg) from e


def save_config(config: ExtrapFitConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: Configuration object to save.
        path: Path where to save the TOML file.
    """
    data = config.model_dump(mode="json", exclude_none=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return """# ExtrapFit Configuration File
# Generated automatically - edit as needed

[fitting]
models = ["linear", "asymptotic"]  # linear, asymptotic, power
# exponent = 1.5                   # Uncomment to override every power-term exponent
                                   # (defaults: 5/3 for asymptotic, 3/2 for power)
solver = "linear"                  # linear (direct solve) or nonlinear (iterative)
max_iterations = 1000
tolerance = 1e-12

[sweep]
max_omit = 0                # number of samples to drop in the sensitivity sweep
omit = "largest"            # largest (coarse samples first) or smallest (expensive first)
stability_tolerance = 0.001

[input]
rescale = true              # divide x by its maximum before fitting
# delimiter = ","           # Uncomment to force a column delimiter

[output]
directory = "Extrapolation"
formats = ["json", "csv", "txt"]
precision = 10
log_format = "text"         # text or json
"""
