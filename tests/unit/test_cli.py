"""Test CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from extrapfit.cli.app import app

runner = CliRunner()


class TestCLIHelp:
    """Tests for CLI help messages."""

    def test_main_help(self):
        """Main command should show help."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "ExtrapFit" in result.stdout
        assert "fit" in result.stdout
        assert "sweep" in result.stdout
        assert "init" in result.stdout

    def test_fit_help(self):
        """Fit command should show help."""
        result = runner.invoke(app, ["fit", "--help"])
        assert result.exit_code == 0
        assert "--model" in result.stdout
        assert "--output" in result.stdout

    def test_sweep_help(self):
        """Sweep command should show help."""
        result = runner.invoke(app, ["sweep", "--help"])
        assert result.exit_code == 0
        assert "--max-omit" in result.stdout
        assert "--omit" in result.stdout

    def test_version(self):
        """--version should print the version and exit."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "ExtrapFit" in result.stdout


class TestInitCommand:
    """Tests for init command."""

    def test_init_creates_file(self, tmp_path):
        """Init should create config file."""
        config_path = tmp_path / "test_config.toml"
        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 0
        assert config_path.exists()
        assert "Created" in result.stdout

    def test_init_valid_toml(self, tmp_path):
        """Init should create a file with every section."""
        config_path = tmp_path / "test_config.toml"
        runner.invoke(app, ["init", str(config_path)])

        content = config_path.read_text()
        for section in ("[fitting]", "[sweep]", "[input]", "[output]"):
            assert section in content

    def test_init_no_overwrite_without_force(self, tmp_path):
        """Init should not overwrite existing file without --force."""
        config_path = tmp_path / "existing.toml"
        config_path.write_text("# existing content")

        result = runner.invoke(app, ["init", str(config_path)])
        assert result.exit_code == 1
        assert "already exists" in result.stdout
        assert config_path.read_text() == "# existing content"

    def test_init_force_overwrites(self, tmp_path):
        config_path = tmp_path / "existing.toml"
        config_path.write_text("# existing content")

        result = runner.invoke(app, ["init", str(config_path), "--force"])
        assert result.exit_code == 0
        assert "[fitting]" in config_path.read_text()


class TestFitCommand:
    """Tests for fit command."""

    def test_fit_default_models(self, gw_csv_file):
        result = runner.invoke(app, ["fit", str(gw_csv_file)])
        assert result.exit_code == 0, result.stdout
        assert "linear" in result.stdout
        assert "asymptotic" in result.stdout

    def test_fit_writes_outputs(self, gw_csv_file, tmp_path):
        out_dir = tmp_path / "results"
        result = runner.invoke(
            app,
            ["fit", str(gw_csv_file), "-m", "asymptotic", "--output", str(out_dir), "-f", "json"],
        )
        assert result.exit_code == 0, result.stdout
        assert (out_dir / "extrapolation.json").exists()
        assert not (out_dir / "parameters.csv").exists()

    def test_fit_no_outputs_by_default(self, gw_csv_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["fit", str(gw_csv_file)])
        assert result.exit_code == 0
        assert not (tmp_path / "Extrapolation").exists()

    def test_fit_with_config(self, gw_csv_file, sample_config_file, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(app, ["fit", str(gw_csv_file), "--config", str(sample_config_file)])
        assert result.exit_code == 0, result.stdout
        assert (tmp_path / "Results" / "parameters.csv").exists()
        assert (tmp_path / "Results" / "summary.txt").exists()
        # fit never sweeps, even when the configuration asks for it
        assert not (tmp_path / "Results" / "sweep.csv").exists()

    def test_fit_invalid_model(self, gw_csv_file):
        result = runner.invoke(app, ["fit", str(gw_csv_file), "-m", "cubic"])
        assert result.exit_code != 0

    def test_fit_missing_file(self, tmp_path):
        result = runner.invoke(app, ["fit", str(tmp_path / "missing.csv")])
        assert result.exit_code != 0

    def test_fit_too_few_samples(self, tmp_path):
        path = tmp_path / "short.csv"
        path.write_text("0.5,2.1\n0.25,2.2\n")
        result = runner.invoke(app, ["fit", str(path), "-m", "asymptotic"])
        assert result.exit_code == 1

    def test_fit_exponent_for_linear_only(self, gw_csv_file):
        """The exponent is ignored by models without a power term."""
        result = runner.invoke(app, ["fit", str(gw_csv_file), "-m", "linear", "-p", "1.5"])
        assert result.exit_code == 0, result.stdout

    def test_fit_power_keeps_its_own_exponent(self, tmp_path):
        """Without -p the power model fits x^1.5, not the asymptotic 5/3."""
        path = tmp_path / "power.csv"
        xs = [1.0, 0.5, 0.25, 0.125]
        path.write_text("".join(f"{x!r},{-0.8 * x**1.5 + 4.2!r}\n" for x in xs))
        out_dir = tmp_path / "results"

        result = runner.invoke(app, ["fit", str(path), "-m", "power", "-o", str(out_dir), "-f", "json"])
        assert result.exit_code == 0, result.stdout

        fit = json.loads((out_dir / "extrapolation.json").read_text())["fits"]["power"]
        assert "x^1.5" in fit["formula"]
        assert fit["limiting_value"] == pytest.approx(4.2, abs=1e-9)

    def test_fit_aliases_of_one_model(self, gw_csv_file):
        result = runner.invoke(app, ["fit", str(gw_csv_file), "-m", "asymptotic", "-m", "asymptotic_corrected"])
        assert result.exit_code == 1

    def test_fit_error_panel_has_no_links(self, tmp_path):
        path = tmp_path / "short.csv"
        path.write_text("0.5,2.1\n0.25,2.2\n")
        result = runner.invoke(app, ["fit", str(path), "-m", "asymptotic"])
        assert result.exit_code == 1
        assert "http" not in result.stdout

    def test_fit_log_file_records_fits(self, gw_csv_file, tmp_path):
        """The session log keeps the settings and the per-fit debug records."""
        log_path = tmp_path / "run.log"
        result = runner.invoke(app, ["fit", str(gw_csv_file), "--log-file", str(log_path)])
        assert result.exit_code == 0, result.stdout

        content = log_path.read_text()
        assert "=== CONFIGURATION ===" in content
        assert "fitting.models" in content
        assert "Fitted linear" in content
        assert "Fitted asymptotic" in content


class TestSweepCommand:
    """Tests for sweep command."""

    def test_sweep(self, gw_csv_file):
        result = runner.invoke(app, ["sweep", str(gw_csv_file), "-k", "3", "--omit", "smallest"])
        assert result.exit_code == 0, result.stdout
        assert "Most stable model" in result.stdout

    def test_sweep_writes_sweep_csv(self, gw_csv_file, tmp_path):
        out_dir = tmp_path / "results"
        result = runner.invoke(
            app, ["sweep", str(gw_csv_file), "-k", "2", "-o", str(out_dir), "-f", "csv"]
        )
        assert result.exit_code == 0, result.stdout
        assert (out_dir / "sweep.csv").exists()

    def test_sweep_invalid_direction(self, gw_csv_file):
        result = runner.invoke(app, ["sweep", str(gw_csv_file), "--omit", "middle"])
        assert result.exit_code != 0

    def test_sweep_too_many_omitted(self, gw_csv_file):
        result = runner.invoke(app, ["sweep", str(gw_csv_file), "-k", "6"])
        assert result.exit_code == 1


class TestInfoCommand:
    """Tests for info command."""

    def test_info_lists_models(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "power" in result.stdout
        assert "asymptotic" in result.stdout
