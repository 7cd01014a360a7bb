"""End-to-end extrapolation of a GW band-convergence series.

The quasiparticle gap converges with the number of empty bands N roughly as
1/N, with a 1/N^(5/3) correction that matters for the coarser calculations.
"""

import json

import pytest

import numpy as np
from typer.testing import CliRunner

from extrapfit import (
    AsymptoticCorrected,
    ExtrapolationService,
    Linear,
    SampleSet,
    fit,
    sweep,
)
from extrapfit.cli.app import app
from extrapfit.io.config import load_config


class TestGWScenario:
    """Reference values for the GW gap series."""

    def test_linear_limit(self, gw_samples):
        assert fit(gw_samples, Linear()).limiting_value == pytest.approx(2.6695, abs=1e-3)

    def test_asymptotic_limit(self, gw_samples):
        assert fit(gw_samples, AsymptoticCorrected()).limiting_value == pytest.approx(2.6619, abs=1e-3)

    def test_corrected_limit_is_lower(self, gw_samples):
        """The correction term pulls the limit below the straight-line estimate."""
        linear = fit(gw_samples, Linear()).limiting_value
        corrected = fit(gw_samples, AsymptoticCorrected()).limiting_value
        assert corrected < linear

    def test_corrected_model_is_stable(self, gw_samples):
        """Dropping the most expensive samples barely moves the corrected limit."""
        corrected = sweep(gw_samples, AsymptoticCorrected(), 3, omit="smallest")
        linear = sweep(gw_samples, Linear(), 3, omit="smallest")
        assert corrected.n_points == [7, 6, 5, 4]
        assert corrected.spread < 2e-3
        assert corrected.spread < linear.spread

    def test_linear_drifts_when_coarse_samples_dropped(self, gw_samples):
        """The straight line keeps moving as the curved coarse tail is removed."""
        values = sweep(gw_samples, Linear(), 3, omit="largest").limiting_values
        assert np.all(np.diff(values) < 0.0)

    def test_solvers_agree(self, gw_samples):
        direct = fit(gw_samples, AsymptoticCorrected(), "linear")
        iterative = fit(gw_samples, AsymptoticCorrected(), "nonlinear")
        assert iterative.limiting_value == pytest.approx(direct.limiting_value, abs=1e-8)

    def test_unscaled_axis(self, gw_raw_samples, gw_samples):
        """Fitting on the raw 1/N axis gives the same limit."""
        raw = fit(gw_raw_samples, AsymptoticCorrected())
        scaled = fit(gw_samples, AsymptoticCorrected())
        assert raw.limiting_value == pytest.approx(scaled.limiting_value, abs=1e-8)
        np.testing.assert_allclose(
            raw.predict(gw_raw_samples.x), scaled.predict(gw_raw_samples.x), rtol=1e-10
        )

    def test_exact_series_recovered(self):
        """A noise-free corrected series returns its limit exactly."""
        x = 1.0 / np.array([500.0, 750.0, 1000.0, 1500.0, 2000.0, 3000.0])
        samples = SampleSet.from_arrays(x, 2.662 + 30.0 * x - 900.0 * x ** (5.0 / 3.0)).rescaled()
        assert fit(samples, AsymptoticCorrected()).limiting_value == pytest.approx(2.662, abs=1e-10)


class TestWorkflow:
    """File to report to output files."""

    def test_service_round_trip(self, gw_csv_file, tmp_path):
        config_path = tmp_path / "run.toml"
        config_path.write_text(
            '[fitting]\nmodels = ["linear", "asymptotic"]\n\n'
            '[sweep]\nmax_omit = 3\nomit = "smallest"\nstability_tolerance = 0.002\n'
        )
        config = load_config(config_path)
        service = ExtrapolationService()
        report = service.extrapolate(gw_csv_file, config)
        written = service.write(report, tmp_path / "out", ["json"])

        data = json.loads(written[0].read_text())
        assert data["most_stable_model"] == "asymptotic"
        assert data["fits"]["linear"]["limiting_value"] == pytest.approx(2.6695, abs=1e-3)
        assert data["metadata"]["input_file"] == str(gw_csv_file)

    def test_cli_sweep(self, gw_csv_file, tmp_path):
        out_dir = tmp_path / "results"
        result = CliRunner().invoke(
            app,
            ["sweep", str(gw_csv_file), "-k", "3", "--omit", "smallest", "-t", "0.002", "-o", str(out_dir)],
        )
        assert result.exit_code == 0, result.stdout
        summary = (out_dir / "summary.txt").read_text()
        assert "[asymptotic] sweep" in summary
        assert {p.name for p in out_dir.iterdir()} == {
            "extrapolation.json",
            "parameters.csv",
            "sweep.csv",
            "summary.txt",
        }
