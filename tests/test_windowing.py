"""Tests for segment boundaries and the max helpers."""
from edivisive.methods.base.utils import argmax, maximum
from edivisive.methods.edivisive.windowing import get_windows, iter_segments


class TestGetWindows:
    def test_no_change_points(self):
        assert get_windows([], 1) == [0, 1]
        assert get_windows([], 12) == [0, 12]

    def test_sorted_change_points(self):
        assert get_windows([3, 6, 9], 12) == [0, 3, 6, 9, 12]

    def test_unsorted_change_points(self):
        assert get_windows([7, 2, 9], 15) == [0, 2, 7, 9, 15]

    def test_tail_not_duplicated(self):
        assert get_windows([12], 12) == [0, 12]

    def test_input_not_reordered(self):
        cps = [7, 2, 9]
        get_windows(cps, 15)
        assert cps == [7, 2, 9]


class TestIterSegments:
    def test_pairs(self):
        assert list(iter_segments([0, 2, 7, 9, 15])) == [(0, 2), (2, 7), (7, 9), (9, 15)]

    def test_single_segment(self):
        assert list(iter_segments([0, 5])) == [(0, 5)]


class TestMaximum:
    def test_argmax(self):
        assert argmax([1.0, 2.0, 3.0, 4.0]) == 3
        assert argmax([4.0, 3.0, 2.0, 1.0]) == 0
        assert argmax([1.0, 1.0, 8.0, 1.0]) == 2

    def test_first_occurrence_wins(self):
        assert maximum([1.0, 8.0, 8.0, 2.0]) == (1, 8.0)
        assert argmax([0.0, 0.0, 0.0]) == 0

    def test_negative_values(self):
        assert maximum([-3.0, -1.0, -2.0]) == (1, -1.0)

    def test_empty(self):
        assert maximum([]) == (0, 0.0)
