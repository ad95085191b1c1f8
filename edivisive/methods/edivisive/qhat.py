"""
Divergence statistic Q(tau) of the E-Divisive procedure.

A segment of length L is split at tau into
    X = {x_i : 0 <= i < tau},  Y = {x_j : tau <= j < L}
and scored with

    Q(tau) = |X||Y| / (|X| + |Y|) * ( 2/(|X||Y|)       * sum_{i<tau<=j} |x_i - x_j|
                                     - 2/(|X|(|X|-1))  * sum_{i<j<tau}  |x_i - x_j|
                                     - 2/(|Y|(|Y|-1))  * sum_{tau<=i<j} |x_i - x_j| )

Each ratio term is zero when its denominator is not positive, so Q(0) = 0.
Scores for every tau come from one pass over the difference block in
O(L^2) rather than O(L^3).
"""

import numpy as np

from .matrix_ops import calc_diff_matrix


def calc_q(cross_term, x_term, y_term, x_len, y_len):
    """
    Regularised divergence for given partial sums; works on scalars or arrays.
    """
    cross_term = np.asarray(cross_term, dtype=np.float64)
    x_term = np.asarray(x_term, dtype=np.float64)
    y_term = np.asarray(y_term, dtype=np.float64)
    x_len = np.asarray(x_len, dtype=np.float64)
    y_len = np.asarray(y_len, dtype=np.float64)

    with np.errstate(divide='ignore', invalid='ignore'):
        cross_term_reg = np.where((x_len < 1.0) | (y_len < 1.0), 0.0,
                                  cross_term * (2.0 / (x_len * y_len)))
        x_term_reg = np.where(x_len < 2.0, 0.0,
                              x_term * (2.0 / (x_len * (x_len - 1.0))))
        y_term_reg = np.where(y_len < 2.0, 0.0,
                              y_term * (2.0 / (y_len * (y_len - 1.0))))
        factor = np.where(x_len + y_len > 0.0, (x_len * y_len) / (x_len + y_len), 0.0)

    return factor * (cross_term_reg - x_term_reg - y_term_reg)


def qhat_values(diff_matrix: np.ndarray) -> np.ndarray:
    """
    Q(tau) for tau = 0..L-1 of a square difference block.

    Moving element tau from Y to X changes the partial sums by
        column_delta = sum(D[:tau, tau])   joins x_term, leaves cross_term
        row_delta    = sum(D[tau, tau:])   leaves y_term, joins cross_term
    so the sums at every tau are cumulative sums of the deltas.
    """
    series_len = diff_matrix.shape[0]
    if series_len == 0:
        return np.zeros(0)

    upper = np.triu(diff_matrix)
    column_delta = upper.sum(axis=0) - np.diagonal(diff_matrix)
    row_delta = upper.sum(axis=1)

    # sums before the move at tau, i.e. shifted by one
    x_term = np.concatenate(([0.0], np.cumsum(column_delta)[:-1]))
    removed = np.concatenate(([0.0], np.cumsum(row_delta)[:-1]))
    cross_term = removed - x_term
    y_term = row_delta.sum() - removed

    tau = np.arange(series_len)
    return calc_q(cross_term, x_term, y_term, tau, series_len - tau)


def get_qhat_values(series) -> np.ndarray:
    """Q(tau) for a raw series, building its own difference matrix."""
    return qhat_values(calc_diff_matrix(series))
