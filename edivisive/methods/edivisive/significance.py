"""
Permutation test for a candidate change point.

Under the null hypothesis every segment of the current partition is
exchangeable, so shuffling each segment independently and taking the best
in-segment score gives one draw of the statistic's null distribution.
"""

import logging
from typing import List, Tuple, Union

import numpy as np
from joblib import Parallel, delayed

from .candidate_search import ChangePoint
from .config import EPSILON
from .qhat import get_qhat_values
from .windowing import iter_segments

logger = logging.getLogger(__name__)

RandomSource = Union[None, int, np.random.Generator]


def as_generator(rng: RandomSource = None) -> np.random.Generator:
    """Accept a Generator, an int seed or None (fresh entropy)."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def spawn_generators(rng: RandomSource, n: int) -> List[np.random.Generator]:
    """Independent child generators, one per permutation trial."""
    parent = as_generator(rng)
    seed_seq = np.random.SeedSequence(int(parent.integers(0, 2**63 - 1)))
    return [np.random.default_rng(child) for child in seed_seq.spawn(n)]


def permutation_test(series: np.ndarray, windows: List[int], rng: RandomSource = None) -> float:
    """
    One permutation trial: max over segments of the best score of the shuffled segment.
    """
    rng = as_generator(rng)
    permuted_qhat_values = []

    for a, b in iter_segments(windows):
        window = rng.permutation(series[a:b])
        q_list = get_qhat_values(window)
        permuted_qhat_values.append(float(q_list.max()) if len(q_list) else 0.0)

    return max(permuted_qhat_values) if permuted_qhat_values else 0.0


def permutation_pvalue(candidate_score: float, series: np.ndarray, windows: List[int],
                       permutations: int, rng: RandomSource = None, n_jobs: int = 1) -> float:
    """
    Fraction of trials whose statistic strictly exceeds candidate_score.

    The count is divided by permutations + 1, so estimates lie on the
    lattice {0, 1/(permutations + 1), ..., permutations/(permutations + 1)}.
    """
    generators = spawn_generators(rng, permutations)

    if n_jobs == 1:
        stats = [permutation_test(series, windows, g) for g in generators]
    else:
        stats = Parallel(n_jobs=n_jobs)(
            delayed(permutation_test)(series, windows, g) for g in generators
        )

    permutes_with_higher = sum(1 for s in stats if s > candidate_score)
    return permutes_with_higher / (permutations + 1)


def significance_test(candidate: ChangePoint, series: np.ndarray, windows: List[int],
                      permutations: int, pvalue: float, rng: RandomSource = None,
                      n_jobs: int = 1, epsilon: float = EPSILON) -> Tuple[bool, float]:
    """
    Returns (is_significant, estimated p-value).

    Near-zero candidates are rejected with p = 1.0 and no permutations run.
    """
    if candidate.score < epsilon:
        logger.debug(f"Candidate {candidate.index} score {candidate.score:.3g} below epsilon, rejected")
        return False, 1.0

    probability = permutation_pvalue(candidate.score, series, windows, permutations, rng, n_jobs)
    logger.debug(f"Candidate {candidate.index} score {candidate.score:.6g} p-value {probability:.4f}")
    return probability <= pvalue, probability


def is_significant(candidate: ChangePoint, series: np.ndarray, windows: List[int],
                   permutations: int, pvalue: float, rng: RandomSource = None,
                   n_jobs: int = 1, epsilon: float = EPSILON) -> bool:
    significant, _ = significance_test(candidate, series, windows, permutations,
                                       pvalue, rng, n_jobs, epsilon)
    return significant
