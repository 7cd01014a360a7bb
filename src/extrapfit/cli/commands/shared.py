"""Option handling shared by the fit and sweep commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, get_args

import typer

from extrapfit.core.domain.config import ExtrapFitConfig, OutputFormat
from extrapfit.core.fitting.extrapolator import SOLVERS
from extrapfit.core.models import list_models
from extrapfit.core.shared.exceptions import ExtrapFitError
from extrapfit.io.config import load_config

if TYPE_CHECKING:
    from pathlib import Path

    from extrapfit.core.fitting.report import ExtrapolationReport

VALID_OUTPUT_FORMATS = get_args(OutputFormat)  # ("csv", "json", "txt")
# Errors reported as a message panel rather than a traceback
ERRORS_SHOWN = (ExtrapFitError, ValueError, OSError)


def validate_choices(values: list[str] | None, valid: tuple[str, ...] | list[str], what: str) -> None:
    """Raise ``typer.BadParameter`` if any value is not in ``valid``."""
    if not values:
        return
    invalid = [v for v in values if v not in valid]
    if invalid:
        msg = f"Invalid {what}(s): {', '.join(invalid)}. Valid {what}s: {', '.join(valid)}"
        raise typer.BadParameter(msg)


def build_config(
    config_path: Path | None,
    *,
    models: list[str] | None,
    exponent: float | None,
    solver: str | None,
    rescale: bool | None,
    delimiter: str | None,
    output: Path | None,
    formats: list[str] | None,
) -> ExtrapFitConfig:
    """Load the configuration file (if any) and apply explicit CLI overrides."""
    validate_choices(models, list_models(), "model")
    validate_choices(formats, VALID_OUTPUT_FORMATS, "format")
    if solver is not None:
        validate_choices([solver], SOLVERS, "solver")

    config = load_config(config_path) if config_path is not None else ExtrapFitConfig()

    updates: dict[str, dict[str, object]] = {"fitting": {}, "input": {}, "output": {}}
    if models:
        updates["fitting"]["models"] = models
    if exponent is not None:
        updates["fitting"]["exponent"] = exponent
    if solver is not None:
        updates["fitting"]["solver"] = solver
    if rescale is not None:
        updates["input"]["rescale"] = rescale
    if delimiter is not None:
        updates["input"]["delimiter"] = delimiter
    if output is not None:
        updates["output"]["directory"] = output
    if formats:
        updates["output"]["formats"] = formats

    data = config.model_dump()
    for section, values in updates.items():
        data[section].update(values)
    return ExtrapFitConfig.model_validate(data)


def write_outputs(report: ExtrapolationReport, config: ExtrapFitConfig) -> list[Path]:
    """Write the report with the output settings of ``config``."""
    from extrapfit.services import ExtrapolationService
    from extrapfit.ui import ConsoleReporter, info

    service = ExtrapolationService(reporter=ConsoleReporter())
    written = service.write(
        report,
        config.output.directory,
        config.output.formats,
        config.output.precision,
    )
    for path in written:
        info(f"[path]{path}[/path]", indent=1)
    return written


def log_settings(config: ExtrapFitConfig) -> None:
    """Record the effective settings in the session log."""
    from extrapfit.ui import log_dict, log_section

    log_section("Configuration")
    for section, values in config.model_dump(mode="json", exclude_none=True).items():
        log_dict({f"{section}.{key}": value for key, value in values.items()})
