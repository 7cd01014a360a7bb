"""Configuration models for ExtrapFit."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from extrapfit.core.models import get_model_class, list_models
from extrapfit.core.shared.typing import OmitDirection, SolverName


OutputFormat = Literal["csv", "json", "txt"]
LogFormat = Literal["text", "json"]


class FitConfig(BaseModel):
    """Configuration for the model fits.

    Example:
        [fitting]
        models = ["linear", "asymptotic"]
        solver = "linear"
    """

    model_config = ConfigDict(extra="forbid")

    models: list[str] = Field(
        default_factory=lambda: ["linear", "asymptotic"],
        min_length=1,
        description="Models to fit, in reporting order.",
    )
    exponent: Annotated[float, Field(gt=0)] | None = Field(
        default=None,
        description="Exponent of the power term for models that have one. "
        "None keeps each model's own default (5/3 for asymptotic, 3/2 for power).",
    )
    solver: SolverName = Field(
        default="linear",
        description="Least-squares solver: direct linear solve or iterative.",
    )
    max_iterations: Annotated[int, Field(gt=0)] = Field(
        default=1000,
        description="Function evaluation budget of the iterative solver.",
    )
    tolerance: Annotated[float, Field(gt=0)] = Field(
        default=1e-12,
        description="Convergence tolerance of the iterative solver.",
    )

    @field_validator("models")
    @classmethod
    def _known_models(cls, value: list[str]) -> list[str]:
        available = list_models()
        unknown = [name for name in value if name not in available]
        if unknown:
            msg = f"Unknown model(s): {', '.join(unknown)}. Available: {', '.join(available)}"
            raise ValueError(msg)
        # Results are keyed by model, so aliases of one model may appear once
        seen: dict[type, str] = {}
        for name in value:
            model_class = get_model_class(name)
            if model_class in seen:
                msg = f"Models '{seen[model_class]}' and '{name}' are the same model"
                raise ValueError(msg)
            seen[model_class] = name
        return value


class SweepConfig(BaseModel):
    """Configuration for the sensitivity sweep."""

    model_config = ConfigDict(extra="forbid")

    max_omit: Annotated[int, Field(ge=0)] = Field(
        default=0,
        description="Largest number of omitted samples (0 disables the sweep).",
    )
    omit: OmitDirection = Field(
        default="largest",
        description="Which samples to drop first: largest x (coarse) or smallest x (expensive).",
    )
    stability_tolerance: Annotated[float, Field(gt=0)] = Field(
        default=1e-3,
        description="Maximum spread of limiting values for a sweep to count as stable.",
    )


class InputConfig(BaseModel):
    """Configuration for reading sample files."""

    model_config = ConfigDict(extra="forbid")

    delimiter: str | None = Field(
        default=None,
        description="Column delimiter. None picks one from the file suffix.",
    )
    rescale: bool = Field(
        default=True,
        description="Divide x by its maximum before fitting.",
    )


class OutputConfig(BaseModel):
    """Configuration for output file generation."""

    model_config = ConfigDict(extra="forbid")

    directory: Path = Field(default=Path("Extrapolation"), description="Output directory.")
    formats: list[OutputFormat] = Field(
        default=["json", "csv", "txt"],
        description="Output formats for results.",
    )
    precision: Annotated[int, Field(ge=1, le=17)] = Field(
        default=10,
        description="Significant digits written for floating point values.",
    )
    log_format: LogFormat = Field(
        default="text",
        description="Format for log file: text (human-readable) or json (structured).",
    )


class ExtrapFitConfig(BaseModel):
    """Top-level ExtrapFit configuration.

    Example TOML configuration:
        [fitting]
        models = ["linear", "asymptotic"]

        [sweep]
        max_omit = 3
        omit = "smallest"

        [input]
        rescale = true

        [output]
        directory = "Extrapolation"
        formats = ["json", "csv"]
    """

    model_config = ConfigDict(extra="forbid")

    fitting: FitConfig = Field(default_factory=FitConfig)
    sweep: SweepConfig = Field(default_factory=SweepConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
