"""
Segment boundaries for the current set of accepted change points.
"""

from typing import Iterable, Iterator, List, Tuple


def get_windows(change_points: Iterable[int], series_len: int) -> List[int]:
    """
    Boundaries [0, *sorted(change_points), series_len].

    series_len is only appended when it is not already the last boundary.
    Interior duplicates are not removed; accepted change points are unique.
    """
    boundaries = [0]
    boundaries.extend(sorted(int(cp) for cp in change_points))
    if boundaries[-1] != series_len:
        boundaries.append(series_len)
    return boundaries


def iter_segments(windows: List[int]) -> Iterator[Tuple[int, int]]:
    """Consecutive (start, end) pairs of a boundary list, end exclusive."""
    return zip(windows[:-1], windows[1:])
