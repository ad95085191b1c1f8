"""
Common utility functions for change-point detection methods.
"""

import numpy as np
from typing import Dict, Any, List, Optional, Sequence, Tuple


class InvalidSeriesError(ValueError):
    """Raised when a series cannot be used for detection."""


def validate_input_series(values) -> np.ndarray:
    """
    Validate a series and return it as a 1D float array.

    Args:
        values: Time series values

    Returns:
        Validated float64 array

    Raises:
        InvalidSeriesError: If data is invalid
    """
    if values is None:
        raise InvalidSeriesError("Series must not be None")

    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidSeriesError(f"Series must be one-dimensional, got shape {arr.shape}")

    if len(arr) < 1:
        raise InvalidSeriesError("Series must have at least 1 observation")

    if not np.all(np.isfinite(arr)):
        raise InvalidSeriesError("Values must be finite")

    return arr


def maximum(values: Sequence[float]) -> Tuple[int, float]:
    """Return (index, value) of the maximum; the first occurrence wins ties."""
    idx_max, val_max = 0, float('-inf')
    for idx, val in enumerate(values):
        if val > val_max:
            idx_max, val_max = idx, float(val)
    if val_max == float('-inf'):
        return 0, 0.0
    return idx_max, val_max


def argmax(values: Sequence[float]) -> int:
    max_idx, _ = maximum(values)
    return max_idx


def standardize_output(change_points: List[int], metadata: Dict[str, Any],
                       series_id: Optional[str] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Standardize output format across methods.

    Args:
        change_points: Detected change-point indices, in acceptance order
        metadata: Raw metadata dictionary
        series_id: Optional series identifier

    Returns:
        Tuple of (result_row, standardized_metadata)
    """
    row = {
        'n_change_points': len(change_points),
        'change_points': [int(cp) for cp in change_points],
    }

    # Add series ID if provided
    if series_id is not None:
        row['id'] = series_id
        metadata['id'] = series_id

    # Ensure metadata has standard fields
    if 'method' not in metadata:
        metadata['method'] = 'unknown'

    if 'status' not in metadata:
        metadata['status'] = 'success'

    return row, metadata


def create_empty_metadata(series_id: Optional[str] = None, method: str = 'unknown') -> Dict[str, Any]:
    """
    Create empty metadata dictionary with default values.

    Args:
        series_id: Optional series identifier
        method: Method name

    Returns:
        Dictionary with default metadata values
    """
    metadata = {
        'method': method,
        'n_observations': 0,
        'processing_time': 0.0,
        'status': 'failed'
    }

    if series_id is not None:
        metadata['id'] = series_id

    return metadata
