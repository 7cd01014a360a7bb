"""Pytest fixtures for ExtrapFit tests."""

import pytest

import numpy as np

from extrapfit.core.domain.samples import SampleSet

# GW quasiparticle gap (eV) against the reciprocal number of bands, most
# expensive calculation first.
GW_X = [
    0.0001823736780258519,
    0.00021245593419506455,
    0.00025569917743830783,
    0.00031774383078730884,
    0.0003948296122209166,
    0.0005236192714453587,
    0.0007210340775558165,
]
GW_Y = [
    2.6465870307167236,
    2.6436860068259387,
    2.6392491467576793,
    2.6331058020477816,
    2.6237201365187715,
    2.608873720136519,
    2.58259385665529,
]


@pytest.fixture
def gw_samples():
    """GW convergence data, x rescaled by its maximum."""
    return SampleSet.from_arrays(GW_X, GW_Y).rescaled()


@pytest.fixture
def gw_csv_file(tmp_path):
    """GW convergence data as a headerless CSV file."""
    path = tmp_path / "gw_gap.csv"
    path.write_text("".join(f"{x!r},{y!r}\n" for x, y in zip(GW_X, GW_Y, strict=True)))
    return path


@pytest.fixture
def linear_samples():
    """Noise-free samples of y = 2.5 x - 1.25."""
    x = np.array([1.0, 0.8, 0.5, 0.3, 0.1])
    return SampleSet.from_arrays(x, 2.5 * x - 1.25)


@pytest.fixture
def asymptotic_samples():
    """Noise-free samples of y = 0.4 x - 0.7 x^(5/3) + 3.1."""
    x = np.linspace(0.15, 1.0, 8)
    return SampleSet.from_arrays(x, 0.4 * x - 0.7 * x ** (5.0 / 3.0) + 3.1)


@pytest.fixture
def sample_config_file(tmp_path):
    """Create a sample TOML configuration file."""
    config_path = tmp_path / "extrapfit.toml"
    content = """
[fitting]
models = ["asymptotic"]
exponent = 1.5
solver = "nonlinear"

[sweep]
max_omit = 2
omit = "smallest"

[input]
rescale = false

[output]
directory = "Results"
formats = ["csv", "txt"]
"""
    config_path.write_text(content)
    return config_path


@pytest.fixture
def gw_raw_samples():
    """GW convergence data on the original 1/N_bands axis."""
    return SampleSet.from_arrays(GW_X, GW_Y)
