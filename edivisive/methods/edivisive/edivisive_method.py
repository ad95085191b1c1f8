"""
E-Divisive method implementation for change-point detection.

Greedy divisive segmentation: repeatedly pick the best split over all current
segments and keep it while a permutation test finds it significant.
"""

import logging
import numbers
import time
from typing import Dict, Any, List, Optional, Tuple

import numpy as np

from ..base import BaseMethod, CommonConfig, validate_input_series
from .candidate_search import ChangePoint, get_best_change_point
from .config import PVALUE, PERMUTATIONS, EPSILON, SEED, N_JOBS
from .matrix_ops import calc_diff_matrix
from .significance import RandomSource, as_generator, significance_test
from .windowing import get_windows

logger = logging.getLogger(__name__)


class EDivisiveMethod(BaseMethod):
    """
    E-Divisive method for change-point detection.

    Non-parametric: candidate splits are scored with a divergence built from
    pairwise absolute differences and accepted through a permutation test.
    """

    version = "1.0.0"

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize E-Divisive method.

        Args:
            config: Method-specific configuration dictionary. Recognised keys are
                significance_threshold, permutation_count, seed, n_jobs, epsilon.
        """
        super().__init__(config)

        self.pvalue = self.config.get('significance_threshold', PVALUE)
        self.permutations = self.config.get('permutation_count', PERMUTATIONS)
        self.seed = self.config.get('seed', SEED)
        self.n_jobs = self.config.get('n_jobs', N_JOBS)
        self.epsilon = self.config.get('epsilon', EPSILON)

    def detect(self, values: np.ndarray, rng: RandomSource = None,
               **kwargs) -> Tuple[List[int], Dict[str, Any]]:
        """
        Detect change points in a single series.

        Args:
            values: Time series values
            rng: Random source for the permutations; defaults to a generator
                seeded with the configured seed
            **kwargs: Per-call overrides of significance_threshold and permutation_count

        Returns:
            Tuple of (change point indices in acceptance order, metadata_dict)

        Raises:
            InvalidSeriesError: If the series is empty or not finite
            ValueError: If the configuration or an override is invalid
        """
        start_time = time.time()

        self.validate_config()
        pvalue = kwargs.get('significance_threshold', self.pvalue)
        permutations = kwargs.get('permutation_count', self.permutations)
        validate_test_parameters(pvalue, permutations)
        series = self.preprocess_data(validate_input_series(values))
        rng = as_generator(self.seed if rng is None else rng)
        series_len = len(series)

        diff_matrix = calc_diff_matrix(series)
        change_points: List[ChangePoint] = []
        pvalues: List[float] = []
        iterations = 0

        windows = get_windows([], series_len)
        while True:
            iterations += 1
            best_candidate = get_best_change_point(diff_matrix, [cp.index for cp in change_points])
            if best_candidate in change_points:
                termination = 'duplicate'
                break

            significant, probability = significance_test(
                best_candidate, series, windows, permutations, pvalue,
                rng=rng, n_jobs=self.n_jobs, epsilon=self.epsilon
            )
            if not significant:
                termination = 'degenerate' if best_candidate.score < self.epsilon else 'rejected'
                break

            change_points.append(best_candidate)
            pvalues.append(probability)
            windows = get_windows([cp.index for cp in change_points], series_len)
            logger.debug(f"Accepted change point {best_candidate.index} "
                         f"(score={best_candidate.score:.6g}, p={probability:.4f})")

        processing_time = time.time() - start_time
        metadata = {
            'method': 'edivisive',
            'processing_time': processing_time,
            'status': 'success',
            'n_observations': series_len,
            'significance_threshold': pvalue,
            'permutation_count': permutations,
            'seed': self.seed,
            'scores': [cp.score for cp in change_points],
            'pvalues': pvalues,
            'n_iterations': iterations,
            'termination': termination
        }
        logger.debug(f"E-Divisive found {len(change_points)} change points in "
                     f"{iterations} iterations ({termination})")

        return [cp.index for cp in change_points], metadata

    def validate_config(self) -> None:
        """
        Validate E-Divisive configuration parameters.

        Raises:
            ValueError: If configuration is invalid
        """
        validate_test_parameters(self.pvalue, self.permutations)

        CommonConfig.validate_common_config({
            'seed': self.seed,
            'n_jobs': self.n_jobs,
            'epsilon': self.epsilon
        })

    def get_method_info(self) -> Dict[str, str]:
        """
        Get information about the E-Divisive method.

        Returns:
            Dictionary with method information
        """
        info = super().get_method_info()
        info.update({
            'paper': 'Matteson & James 2014 - A nonparametric approach for multiple change point analysis',
            'approach': 'Divisive segmentation with a permutation significance test',
            'significance_threshold': str(self.pvalue),
            'permutation_count': str(self.permutations)
        })
        return info


def validate_test_parameters(pvalue, permutations) -> None:
    """
    Check a significance threshold and permutation count.

    Raises:
        ValueError: If pvalue is outside (0, 1] or permutations is not a positive integer
    """
    if isinstance(pvalue, bool) or not isinstance(pvalue, numbers.Real) or not 0 < pvalue <= 1:
        raise ValueError(f"significance_threshold must be in (0, 1], got {pvalue!r}")

    if isinstance(permutations, bool) or not isinstance(permutations, numbers.Integral) or permutations <= 0:
        raise ValueError(f"permutation_count must be a positive integer, got {permutations!r}")

def detect_change_points(series, config: Optional[Dict[str, Any]] = None) -> List[int]:
    """
    Change-point indices of a series, in the order they were accepted.

    Args:
        series: Ordered sequence of finite real numbers
        config: Optional dict with significance_threshold and permutation_count
            (plus seed, n_jobs, epsilon)

    Returns:
        List of indices in [1, len(series) - 1]
    """
    method = EDivisiveMethod(config)
    method.validate_config()
    return method.get_change_points(series)
