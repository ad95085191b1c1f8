"""Tests for the divergence statistic Q(tau)."""
import numpy as np
import pytest

from edivisive.methods.edivisive.matrix_ops import calc_diff_matrix
from edivisive.methods.edivisive.qhat import calc_q, qhat_values, get_qhat_values


def direct_qhat(series):
    """Q(tau) by summing every term from scratch for each tau."""
    x = np.asarray(series, dtype=float)
    n = len(x)
    out = []
    for tau in range(n):
        cross = sum(abs(x[i] - x[j]) for i in range(tau) for j in range(tau, n))
        within_x = sum(abs(x[i] - x[j]) for i in range(tau) for j in range(i + 1, tau))
        within_y = sum(abs(x[i] - x[j]) for i in range(tau, n) for j in range(i + 1, n))
        nx, ny = tau, n - tau
        cross_reg = 2.0 * cross / (nx * ny) if nx >= 1 and ny >= 1 else 0.0
        x_reg = 2.0 * within_x / (nx * (nx - 1)) if nx >= 2 else 0.0
        y_reg = 2.0 * within_y / (ny * (ny - 1)) if ny >= 2 else 0.0
        out.append(nx * ny / n * (cross_reg - x_reg - y_reg))
    return np.array(out)


class TestCalcQ:
    def test_single_pair(self):
        # X = [a], Y = [b]: factor 1/2, cross term 2|a-b|
        assert float(calc_q(5.0, 0.0, 0.0, 1, 1)) == pytest.approx(5.0)

    def test_empty_side_is_zero(self):
        assert float(calc_q(3.0, 7.0, 9.0, 0, 4)) == 0.0
        assert float(calc_q(3.0, 7.0, 9.0, 4, 0)) == 0.0

    def test_vectorised(self):
        q = calc_q([0.0, 4.0], [0.0, 0.0], [6.0, 1.0], [0, 1], [3, 2])
        assert q.shape == (2,)
        assert q[0] == 0.0
        # X=[.], Y=[., .]: factor 2/3 * (2*4/2 - 2*1/2)
        assert q[1] == pytest.approx(2.0 / 3.0 * 3.0)


class TestQhatValues:
    def test_matches_direct_summation(self):
        rng = np.random.default_rng(2024)
        for n in range(3, 51):
            series = rng.normal(size=n) * rng.uniform(0.1, 10.0)
            np.testing.assert_allclose(get_qhat_values(series), direct_qhat(series),
                                       rtol=1e-9, atol=1e-9)

    def test_matches_direct_summation_with_ties(self):
        series = [1, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 3]
        np.testing.assert_allclose(get_qhat_values(series), direct_qhat(series), atol=1e-12)

    def test_first_score_is_zero(self):
        rng = np.random.default_rng(0)
        for n in (1, 2, 5, 30):
            assert get_qhat_values(rng.normal(size=n))[0] == 0.0

    def test_length_matches_block(self):
        assert len(get_qhat_values(np.arange(17.0))) == 17

    def test_flat_series_scores_zero(self):
        np.testing.assert_array_equal(get_qhat_values([1.0, 1.0, 1.0, 1.0]), np.zeros(4))

    def test_step_peaks_at_shift(self):
        q = get_qhat_values([0.0] * 5 + [1.0] * 5)
        assert int(np.argmax(q)) == 5
        assert q[5] == pytest.approx(5.0)

    def test_block_view_matches_own_matrix(self):
        rng = np.random.default_rng(5)
        series = rng.normal(size=30)
        diff = calc_diff_matrix(series)
        np.testing.assert_allclose(qhat_values(diff[8:21, 8:21]), get_qhat_values(series[8:21]))

    def test_block_not_mutated(self):
        diff = calc_diff_matrix(np.arange(6.0))
        before = diff.copy()
        qhat_values(diff[1:5, 1:5])
        np.testing.assert_array_equal(diff, before)
