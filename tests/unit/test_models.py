"""Test extrapolation models and the model factory."""

import pytest

import numpy as np

from extrapfit.core.models import (
    AsymptoticCorrected,
    Linear,
    Model,
    PowerLaw,
    create_model,
    list_models,
    supports_exponent,
)
from extrapfit.core.shared.exceptions import ConfigError


class TestLinear:
    """Tests for the linear model."""

    def test_parameters(self):
        model = Linear()
        assert model.parameter_names == ("a", "b")
        assert model.parameter_count == 2
        assert model.limiting_index == 1

    def test_design_matrix(self):
        x = np.array([1.0, 0.5])
        np.testing.assert_array_equal(Linear().design_matrix(x), [[1.0, 1.0], [0.5, 1.0]])

    def test_evaluate(self):
        np.testing.assert_allclose(Linear().evaluate(np.array([0.0, 2.0]), np.array([3.0, 1.0])), [1.0, 7.0])

    def test_evaluate_scalar(self):
        """Scalars are evaluated as one-element arrays."""
        assert Linear().evaluate(0.5, np.array([2.0, 1.0]))[0] == pytest.approx(2.0)

    def test_evaluate_wrong_parameter_count(self):
        with pytest.raises(ValueError, match="2 parameters"):
            Linear().evaluate(np.array([1.0]), np.array([1.0, 2.0, 3.0]))

    def test_initial_guess_exact_for_line(self):
        """For exactly linear data the guess is the line itself."""
        x = np.array([1.0, 0.6, 0.2])
        guess = Linear().initial_guess(x, 4.0 * x + 1.5)
        np.testing.assert_allclose(guess, [4.0, 1.5])

    def test_satisfies_protocol(self):
        assert isinstance(Linear(), Model)


class TestAsymptoticCorrected:
    """Tests for the asymptotically corrected model."""

    def test_default_exponent(self):
        assert AsymptoticCorrected().exponent == pytest.approx(5.0 / 3.0)

    def test_parameters(self):
        model = AsymptoticCorrected()
        assert model.parameter_count == 3
        assert model.limiting_index == 2

    def test_design_matrix_columns(self):
        x = np.array([1.0, 0.125])
        design = AsymptoticCorrected(exponent=2.0).design_matrix(x)
        np.testing.assert_allclose(design, [[1.0, 1.0, 1.0], [0.125, 0.015625, 1.0]])

    def test_value_at_zero_is_constant(self):
        params = np.array([0.3, -1.2, 2.66])
        assert AsymptoticCorrected().evaluate(np.array([0.0]), params)[0] == pytest.approx(2.66)

    def test_initial_guess_has_zero_correction(self):
        x = np.array([1.0, 0.5])
        guess = AsymptoticCorrected().initial_guess(x, np.array([2.0, 3.0]))
        assert guess[1] == 0.0
        assert guess[0] == pytest.approx(-2.0)
        assert guess[2] == pytest.approx(4.0)

    @pytest.mark.parametrize("exponent", [0.0, -1.0, np.inf, np.nan])
    def test_invalid_exponent(self, exponent):
        with pytest.raises(ConfigError):
            AsymptoticCorrected(exponent=exponent)

    def test_exponent_one_rejected(self):
        """p = 1 would duplicate the linear column."""
        with pytest.raises(ConfigError, match="linear"):
            AsymptoticCorrected(exponent=1.0)

    def test_formula_mentions_exponent(self):
        assert "x^1.5" in AsymptoticCorrected(exponent=1.5).formula()


class TestPowerLaw:
    """Tests for the single power-law model."""

    def test_default_exponent(self):
        assert PowerLaw().exponent == 1.5

    def test_limit_is_last_parameter(self):
        model = PowerLaw()
        assert model.parameter_names == ("a", "c")
        assert model.limiting_index == 1

    def test_initial_guess_exact_for_power_law(self):
        x = np.array([1.0, 0.5, 0.25])
        y = -3.0 * x**1.5 + 7.0
        np.testing.assert_allclose(PowerLaw().initial_guess(x, y), [-3.0, 7.0])


class TestFactory:
    """Tests for create_model and the registry."""

    def test_list_models(self):
        names = list_models()
        assert {"linear", "asymptotic", "power"} <= set(names)

    def test_create_by_name(self):
        assert isinstance(create_model("linear"), Linear)
        assert isinstance(create_model("asymptotic"), AsymptoticCorrected)
        assert isinstance(create_model("asymptotic_corrected"), AsymptoticCorrected)
        assert isinstance(create_model("power"), PowerLaw)

    def test_create_with_exponent(self):
        model = create_model("asymptotic", exponent=1.25)
        assert model.exponent == 1.25  # type: ignore[attr-defined]

    def test_unknown_model(self):
        with pytest.raises(ConfigError, match="Unknown model"):
            create_model("cubic")

    def test_exponent_for_linear_rejected(self):
        with pytest.raises(ConfigError, match="no exponent"):
            create_model("linear", exponent=2.0)

    def test_supports_exponent(self):
        assert not supports_exponent("linear")
        assert supports_exponent("asymptotic")
        assert supports_exponent("power")

    def test_instances_are_independent(self):
        """Models are stateless values; each call builds a new one."""
        assert create_model("linear") is not create_model("linear")
