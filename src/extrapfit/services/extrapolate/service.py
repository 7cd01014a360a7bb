"""High-level extrapolation service facade.

This service provides the primary API for extrapolation runs.
CLI and other adapters should import only from this module.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from extrapfit.core.domain.config import ExtrapFitConfig
from extrapfit.core.fitting.extrapolator import Extrapolator
from extrapfit.core.fitting.report import ExtrapolationReport, RunMetadata
from extrapfit.core.models import create_model, supports_exponent
from extrapfit.core.shared.reporter import NullReporter, Reporter
from extrapfit.io.samples import read_samples
from extrapfit.services.extrapolate.writer import write_report

if TYPE_CHECKING:
    from collections.abc import Sequence

    from extrapfit.core.domain.config import OutputFormat
    from extrapfit.core.domain.samples import SampleSet
    from extrapfit.core.models.base import Model


def _version() -> str:
    from extrapfit import __version__

    return __version__


class ExtrapolationService:
    """Service for extrapolation runs.

    Example:
        service = ExtrapolationService()
        report = service.extrapolate(Path("gw_gap.csv"))
        print(report.limiting_values())
    """

    def __init__(self, reporter: Reporter | None = None) -> None:
        self._reporter = reporter or NullReporter()

    def load(self, path: Path, config: ExtrapFitConfig | None = None) -> SampleSet:
        """Read a sample file using the input settings of ``config``."""
        config = config or ExtrapFitConfig()
        self._reporter.action(f"Loading samples from {path}...")
        samples = read_samples(path, config.input.delimiter, rescale=config.input.rescale)
        self._reporter.success(f"Loaded {len(samples)} samples")
        if config.input.rescale:
            self._reporter.info(f"Rescaled x by {samples.x_scale:.6g}")
        return samples

    def build_models(self, config: ExtrapFitConfig) -> list[Model]:
        """Instantiate the configured models."""
        exponent = config.fitting.exponent
        return [
            create_model(name, exponent if supports_exponent(name) else None)
            for name in config.fitting.models
        ]

    def run(
        self,
        samples: SampleSet,
        config: ExtrapFitConfig | None = None,
        input_file: Path | None = None,
    ) -> ExtrapolationReport:
        """Fit and, if configured, sweep every model over ``samples``.

        Errors from individual fits propagate; no partial report is returned.
        """
        config = config or ExtrapFitConfig()
        extrapolator = Extrapolator(
            solver=config.fitting.solver,
            max_iterations=config.fitting.max_iterations,
            tolerance=config.fitting.tolerance,
        )
        report = ExtrapolationReport(
            samples=samples,
            metadata=RunMetadata(
                version=_version(),
                input_file=input_file,
                settings=config.model_dump(mode="json", exclude={"output"}),
            ),
            stability_tolerance=config.sweep.stability_tolerance,
        )

        for model in self.build_models(config):
            self._reporter.action(f"Fitting {model.name} model: {model.formula()}")
            result = extrapolator.fit(samples, model)
            report.fits[model.name] = result
            self._reporter.success(f"{model.name}: limit = {result.limiting_value:.8g}")

            if config.sweep.max_omit > 0:
                sensitivity = extrapolator.sweep(
                    samples, model, config.sweep.max_omit, config.sweep.omit
                )
                report.sweeps[model.name] = sensitivity
                tolerance = config.sweep.stability_tolerance
                if sensitivity.is_stable(tolerance):
                    self._reporter.info(
                        f"{model.name}: sweep spread {sensitivity.spread:.3g} < {tolerance:g}"
                    )
                else:
                    self._reporter.warning(
                        f"{model.name}: sweep spread {sensitivity.spread:.3g} exceeds {tolerance:g}"
                    )

        return report

    def extrapolate(self, path: Path, config: ExtrapFitConfig | None = None) -> ExtrapolationReport:
        """Load ``path`` and run every configured fit and sweep."""
        config = config or ExtrapFitConfig()
        samples = self.load(path, config)
        return self.run(samples, config, input_file=path)

    def write(
        self,
        report: ExtrapolationReport,
        directory: Path,
        formats: Sequence[OutputFormat] = ("json", "csv", "txt"),
        precision: int = 10,
    ) -> list[Path]:
        """Write ``report`` in each requested format."""
        self._reporter.action(f"Writing results to {directory}...")
        written = write_report(report, directory, formats, precision)
        self._reporter.success(f"Wrote {len(written)} file(s)")
        return written
