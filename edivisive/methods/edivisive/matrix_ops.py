"""
Pairwise absolute-difference matrix of a series.
"""

import numpy as np

from ..base.utils import validate_input_series


def calc_diff_matrix(series) -> np.ndarray:
    """
    Build D with D[i, j] = |series[i] - series[j]|.

    The matrix is symmetric with a zero diagonal. It is computed once per
    detection so segment scores can be read off sub-blocks instead of being
    recomputed from the raw values.

    Raises:
        InvalidSeriesError: If the series is None, empty or non-finite
    """
    x = validate_input_series(series)
    return np.abs(x[:, None] - x[None, :])

