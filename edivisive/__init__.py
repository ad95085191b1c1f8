"""
E-Divisive Change-Point Detection Package

Detects points where the distribution of a univariate series shifts, using
the non-parametric E-Divisive procedure with a permutation significance test.
"""

from .methods import EDivisiveMethod, BaseMethod
from .methods.base import CommonConfig, InvalidSeriesError, validate_input_series
from .methods.edivisive import (
    ChangePoint, detect_change_points, calc_diff_matrix, qhat_values,
    get_qhat_values, get_windows, get_best_change_point, is_significant
)

__version__ = "1.0.0"
__description__ = "Non-parametric E-Divisive change-point detection"


def quick_setup(**kwargs) -> dict:
    """
    Quick setup for change-point detection.

    Args:
        **kwargs: Overrides (significance_threshold, permutation_count, seed, ...)

    Returns:
        Configuration dictionary
    """
    config = CommonConfig.get_default_config()
    config.update(kwargs)
    config['method'] = 'edivisive'
    return config


def run_batch(input_path: str, out_path: str, **kwargs):
    """
    Run batch detection over a table of series.

    Args:
        input_path: Input parquet/CSV file path
        out_path: Output file path
        **kwargs: n_jobs, verbose, and E-Divisive configuration keys

    Returns:
        Result DataFrame indexed by series id
    """
    from .batch_processor import run_batch as _run_batch
    n_jobs = kwargs.pop('n_jobs', None)
    verbose = kwargs.pop('verbose', True)
    return _run_batch(input_path, out_path, config=kwargs, n_jobs=n_jobs, verbose=verbose)


__all__ = [
    'EDivisiveMethod', 'BaseMethod', 'CommonConfig', 'InvalidSeriesError',
    'validate_input_series', 'ChangePoint', 'detect_change_points',
    'calc_diff_matrix', 'qhat_values', 'get_qhat_values', 'get_windows',
    'get_best_change_point', 'is_significant', 'quick_setup', 'run_batch'
]
