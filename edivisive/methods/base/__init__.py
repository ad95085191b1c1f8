"""
Base classes and common utilities for change-point detection methods.
"""

from .base_method import BaseMethod
from .common_config import CommonConfig
from .utils import (
    InvalidSeriesError, validate_input_series, maximum, argmax,
    standardize_output, create_empty_metadata
)

__all__ = [
    'BaseMethod', 'CommonConfig', 'InvalidSeriesError', 'validate_input_series',
    'maximum', 'argmax', 'standardize_output', 'create_empty_metadata'
]
