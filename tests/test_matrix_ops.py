"""Tests for the pairwise difference matrix."""
import numpy as np
import pytest

from edivisive.methods.base import InvalidSeriesError
from edivisive.methods.edivisive.matrix_ops import calc_diff_matrix


class TestDiffMatrix:
    def test_small_series(self):
        diff = calc_diff_matrix([1.0, 2.0, 3.0])
        expected = np.array([[0.0, 1.0, 2.0], [1.0, 0.0, 1.0], [2.0, 1.0, 0.0]])
        np.testing.assert_array_equal(diff, expected)

    def test_symmetric_zero_diagonal(self):
        np.random.seed(42)
        for n in (1, 2, 7, 40):
            diff = calc_diff_matrix(np.random.randn(n))
            assert diff.shape == (n, n)
            np.testing.assert_array_equal(diff, diff.T)
            np.testing.assert_array_equal(np.diagonal(diff), np.zeros(n))
            assert np.all(diff >= 0)

    def test_row_is_distance_to_value(self):
        diff = calc_diff_matrix([1.0, 2.0, 3.0, 4.0, 5.0])
        np.testing.assert_array_equal(diff[2], [2.0, 1.0, 0.0, 1.0, 2.0])

    def test_input_not_mutated(self):
        series = [3.0, 1.0, 2.0]
        calc_diff_matrix(series)
        assert series == [3.0, 1.0, 2.0]

    @pytest.mark.parametrize("bad", [None, [], [1.0, float('nan')], [[1.0, 2.0], [3.0, 4.0]]])
    def test_invalid_series(self, bad):
        with pytest.raises(InvalidSeriesError):
            calc_diff_matrix(bad)

    def test_invalid_series_is_value_error(self):
        with pytest.raises(ValueError):
            calc_diff_matrix([])

