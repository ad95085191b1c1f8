"""
E-Divisive method for change-point detection.

Non-parametric divisive segmentation based on pairwise absolute differences
with a permutation significance test.
"""

from .edivisive_method import EDivisiveMethod, detect_change_points, validate_test_parameters
from .config import PVALUE, PERMUTATIONS, EPSILON, SEED, N_JOBS, validate_config
from .matrix_ops import calc_diff_matrix
from .qhat import calc_q, qhat_values, get_qhat_values
from .windowing import get_windows, iter_segments
from .candidate_search import ChangePoint, segment_candidates, get_best_change_point
from .significance import (
    as_generator, spawn_generators, permutation_test, permutation_pvalue,
    significance_test, is_significant
)

__all__ = [
    'EDivisiveMethod', 'detect_change_points', 'validate_test_parameters',
    'PVALUE', 'PERMUTATIONS', 'EPSILON', 'SEED', 'N_JOBS', 'validate_config',
    'calc_diff_matrix',
    'calc_q', 'qhat_values', 'get_qhat_values',
    'get_windows', 'iter_segments',
    'ChangePoint', 'segment_candidates', 'get_best_change_point',
    'as_generator', 'spawn_generators', 'permutation_test', 'permutation_pvalue',
    'significance_test', 'is_significant'
]
