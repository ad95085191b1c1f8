"""
Common configuration parameters shared across all methods.
"""

import os
from typing import Final, Dict, Any


class CommonConfig:
    """
    Common configuration parameters for all change-point detection methods.
    """

    # Random seed for reproducibility
    SEED: Final[int] = 42

    # Parallel processing
    N_JOBS: Final[int] = max(1, (os.cpu_count() or 1) - 1)

    # File paths (can be overridden)
    DEFAULT_INPUT_PATH: Final[str] = 'input.parquet'
    DEFAULT_OUTPUT_PATH: Final[str] = 'change_points.parquet'

    # Scores below this are treated as exactly zero
    EPSILON: Final[float] = 1e-9

    @classmethod
    def get_default_config(cls) -> Dict[str, Any]:
        """
        Get default configuration dictionary.

        Returns:
            Dictionary with default configuration values
        """
        return {
            'seed': cls.SEED,
            'n_jobs': cls.N_JOBS,
            'epsilon': cls.EPSILON,
            'input_path': cls.DEFAULT_INPUT_PATH,
            'output_path': cls.DEFAULT_OUTPUT_PATH
        }

    @classmethod
    def validate_common_config(cls, config: Dict[str, Any]) -> None:
        """
        Validate common configuration parameters.

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValueError: If configuration is invalid
        """
        if config.get('seed') is not None and config['seed'] < 0:
            raise ValueError("Seed must be non-negative")

        # joblib accepts negative n_jobs (-1 = all cores), never 0
        if 'n_jobs' in config and config['n_jobs'] == 0:
            raise ValueError("Number of jobs must be non-zero")

        if 'epsilon' in config and config['epsilon'] <= 0:
            raise ValueError("Epsilon must be positive")
