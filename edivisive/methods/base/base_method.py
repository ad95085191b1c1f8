"""
Abstract base class for change-point detection methods.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, List, Tuple, Optional
import numpy as np


class BaseMethod(ABC):
    """
    Abstract base class for change-point detection methods.

    All methods must implement the core interface methods to ensure
    compatibility with the batch processing pipeline.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the method with optional configuration.

        Args:
            config: Method-specific configuration dictionary
        """
        self.config = config or {}
        self.method_name = self.__class__.__name__

    @abstractmethod
    def detect(self, values: np.ndarray, **kwargs) -> Tuple[List[int], Dict[str, Any]]:
        """
        Detect change points in a single time series.

        Args:
            values: Time series values
            **kwargs: Additional method-specific parameters

        Returns:
            Tuple of (change_point_indices, metadata_dict)
        """
        pass

    @abstractmethod
    def validate_config(self) -> None:
        """
        Validate method-specific configuration parameters.

        Raises:
            ValueError: If configuration is invalid
        """
        pass

    def get_change_points(self, values: np.ndarray, **kwargs) -> List[int]:
        """Detect change points and drop the metadata."""
        change_points, _ = self.detect(values, **kwargs)
        return change_points

    def get_method_info(self) -> Dict[str, str]:
        """
        Get information about the method.

        Returns:
            Dictionary with method information
        """
        return {
            'name': self.method_name,
            'description': self.__doc__ or 'No description available',
            'version': getattr(self, 'version', '1.0.0')
        }

    def preprocess_data(self, values: np.ndarray) -> np.ndarray:
        """
        Preprocess input data (can be overridden by subclasses).

        Args:
            values: Raw time series values

        Returns:
            Processed values
        """
        # Default: no preprocessing
        return values
