"""
Best split candidate across the segments of the current partition.
"""

from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..base.utils import argmax
from .qhat import qhat_values
from .windowing import get_windows, iter_segments


@dataclass(frozen=True)
class ChangePoint:
    """
    A candidate or accepted split.

    Attributes:
        index: Absolute index in the series; X ends just before it.
        score: Divergence Q at that split.
    """

    index: int
    score: float


def segment_candidates(diff_matrix: np.ndarray, change_points: Sequence[int]) -> List[ChangePoint]:
    """Best split inside every segment, in left-to-right segment order."""
    series_len = diff_matrix.shape[0]
    candidates: List[ChangePoint] = []

    for a, b in iter_segments(get_windows(change_points, series_len)):
        # slice is a view of the full matrix
        qhats = qhat_values(diff_matrix[a:b, a:b])
        max_idx = int(np.argmax(qhats))
        candidates.append(ChangePoint(index=max_idx + a, score=float(qhats[max_idx])))

    return candidates


def get_best_change_point(diff_matrix: np.ndarray, change_points: Sequence[int]) -> ChangePoint:
    """
    Highest scoring candidate over all segments.

    Ties go to the leftmost segment, then the leftmost index within it.
    """
    candidates = segment_candidates(diff_matrix, change_points)
    return candidates[argmax([cp.score for cp in candidates])]
