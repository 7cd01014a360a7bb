"""Test sample file reading and writing."""

import pytest

import numpy as np

from extrapfit.core.domain.samples import SampleSet
from extrapfit.core.shared.exceptions import DataIOError, InsufficientDataError
from extrapfit.io.samples import READERS, read_samples, write_samples


class TestReaders:
    """Tests for suffix-based readers."""

    def test_registered_suffixes(self):
        assert {"csv", "dat", "txt", "out"} <= set(READERS)

    def test_read_csv(self, gw_csv_file, gw_raw_samples):
        samples = read_samples(gw_csv_file)
        assert len(samples) == 7
        assert samples.x_scale == 1.0
        np.testing.assert_array_equal(samples.x, gw_raw_samples.x)
        np.testing.assert_array_equal(samples.y, gw_raw_samples.y)

    def test_read_csv_rescaled(self, gw_csv_file, gw_raw_samples):
        samples = read_samples(gw_csv_file, rescale=True)
        assert samples.x[0] == 1.0
        assert samples.x_scale == gw_raw_samples.x[0]

    def test_read_whitespace_with_comments(self, tmp_path):
        path = tmp_path / "gap.dat"
        path.write_text(
            "# 1/N   gap   walltime\n"
            "0.5  2.10  12.0\n"
            "\n"
            "0.25 2.20  40.0\n"
            "# trailing comment\n"
            "0.125\t2.25\t150.0\n"
        )
        samples = read_samples(path)
        np.testing.assert_allclose(samples.x, [0.5, 0.25, 0.125])
        np.testing.assert_allclose(samples.y, [2.10, 2.20, 2.25])

    def test_explicit_delimiter_for_unknown_suffix(self, tmp_path):
        path = tmp_path / "gap.samples"
        path.write_text("0.5;2.1\n0.25;2.2\n")
        samples = read_samples(path, delimiter=";")
        assert len(samples) == 2

    def test_full_precision_preserved(self, tmp_path):
        """Values written with 17 significant digits read back bit for bit."""
        path = tmp_path / "precise.dat"
        path.write_text("0.0007210340775558165 2.58259385665529\n0.0001823736780258519 2.6465870307167236\n")
        samples = read_samples(path)
        assert samples.x[0] == 0.0007210340775558165
        assert samples.x[1] == 0.0001823736780258519
        assert samples.y[1] == 2.6465870307167236

    def test_unsorted_input_is_sorted(self, tmp_path):
        path = tmp_path / "gap.csv"
        path.write_text("0.1,3.0\n0.4,1.0\n0.2,2.0\n")
        samples = read_samples(path)
        np.testing.assert_allclose(samples.x, [0.4, 0.2, 0.1])
        np.testing.assert_allclose(samples.y, [1.0, 2.0, 3.0])


class TestReaderErrors:
    """Malformed files raise typed errors."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DataIOError, match="not found"):
            read_samples(tmp_path / "missing.csv")

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "gap.xlsx"
        path.write_text("0.5,2.1\n0.25,2.2\n")
        with pytest.raises(DataIOError, match="Unsupported"):
            read_samples(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(InsufficientDataError):
            read_samples(path)

    def test_single_sample(self, tmp_path):
        path = tmp_path / "one.csv"
        path.write_text("0.5,2.1\n")
        with pytest.raises(InsufficientDataError):
            read_samples(path)

    def test_single_column(self, tmp_path):
        path = tmp_path / "column.csv"
        path.write_text("0.5\n0.25\n")
        with pytest.raises(DataIOError, match="two columns"):
            read_samples(path)

    def test_non_numeric_value(self, tmp_path):
        path = tmp_path / "text.csv"
        path.write_text("0.5,2.1\n0.25,abc\n")
        with pytest.raises(DataIOError, match="row 2"):
            read_samples(path)

    def test_non_positive_x(self, tmp_path):
        path = tmp_path / "negative.csv"
        path.write_text("0.5,2.1\n-0.25,2.2\n")
        with pytest.raises(DataIOError, match="positive"):
            read_samples(path)


class TestWriteSamples:
    """Tests for write_samples."""

    def test_round_trip(self, tmp_path, gw_raw_samples):
        path = tmp_path / "out" / "gw.csv"
        write_samples(gw_raw_samples, path)
        samples = read_samples(path)
        np.testing.assert_array_equal(samples.x, gw_raw_samples.x)
        np.testing.assert_array_equal(samples.y, gw_raw_samples.y)

    def test_rescaled_written_on_original_axis(self, tmp_path):
        samples = SampleSet.from_arrays([4.0, 2.0], [1.0, 2.0]).rescaled()
        path = tmp_path / "scaled.dat"
        write_samples(samples, path, delimiter=" ")
        np.testing.assert_allclose(read_samples(path).x, [4.0, 2.0])
