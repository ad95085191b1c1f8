"""Tests for the best-candidate search across segments."""
import numpy as np
import pytest

from edivisive.methods.edivisive.candidate_search import (
    ChangePoint, get_best_change_point, segment_candidates
)
from edivisive.methods.edivisive.matrix_ops import calc_diff_matrix


@pytest.fixture
def three_level():
    return np.array([1, 1, 1, 1, 2, 2, 2, 2, 2, 3, 3, 3], dtype=float)


class TestChangePoint:
    def test_equality_uses_index_and_score(self):
        assert ChangePoint(4, 2.5) == ChangePoint(4, 2.5)
        assert ChangePoint(4, 2.5) != ChangePoint(4, 0.0)
        assert ChangePoint(4, 2.5) != ChangePoint(5, 2.5)

    def test_frozen(self):
        cp = ChangePoint(1, 1.0)
        with pytest.raises(AttributeError):
            cp.index = 2


class TestSegmentCandidates:
    def test_one_candidate_per_segment(self, three_level):
        diff = calc_diff_matrix(three_level)
        assert len(segment_candidates(diff, [])) == 1
        assert len(segment_candidates(diff, [4, 9])) == 3

    def test_indices_are_absolute(self, three_level):
        diff = calc_diff_matrix(three_level)
        candidates = segment_candidates(diff, [4])
        assert candidates[0] == ChangePoint(0, 0.0)
        assert candidates[1].index == 9
        assert candidates[1].score > 0

    def test_flat_segments_score_zero(self, three_level):
        diff = calc_diff_matrix(three_level)
        for cp, start in zip(segment_candidates(diff, [4, 9]), (0, 4, 9)):
            assert cp.score == 0.0
            assert cp.index == start


class TestBestChangePoint:
    def test_step(self):
        diff = calc_diff_matrix([0.0] * 5 + [1.0] * 5)
        best = get_best_change_point(diff, [])
        assert best.index == 5
        assert best.score == pytest.approx(5.0)

    def test_three_level_first_split(self, three_level):
        best = get_best_change_point(calc_diff_matrix(three_level), [])
        assert best.index == 4

    def test_three_level_second_split(self, three_level):
        best = get_best_change_point(calc_diff_matrix(three_level), [4])
        assert best.index == 9

    def test_constant_series(self):
        best = get_best_change_point(calc_diff_matrix(np.full(8, 3.0)), [])
        assert best == ChangePoint(0, 0.0)

    def test_tie_goes_to_leftmost_segment(self):
        # both segments have identical difference blocks
        series = np.array([0.0, 0.0, 1.0, 1.0, 5.0, 5.0, 6.0, 6.0])
        best = get_best_change_point(calc_diff_matrix(series), [4])
        assert best.index == 2

    def test_single_element_series(self):
        best = get_best_change_point(calc_diff_matrix([7.0]), [])
        assert best == ChangePoint(0, 0.0)
