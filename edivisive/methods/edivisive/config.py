"""
Configuration for E-Divisive change-point detection.

Defaults for the permutation significance test that decides whether a
candidate split is accepted.
"""

from typing import Final

from ..base.common_config import CommonConfig

# Significance test parameters
PVALUE: Final[float] = 0.05  # accept a candidate iff p-value <= PVALUE
PERMUTATIONS: Final[int] = 100  # permutation trials per candidate; p resolution is 1/(PERMUTATIONS+1)

# Candidates scoring below EPSILON are rejected without permutations
EPSILON: Final[float] = 1e-9

# Random seed for reproducibility (None draws fresh entropy)
SEED: Final[int] = CommonConfig.SEED

# Parallel permutation trials; 1 keeps everything in-process
N_JOBS: Final[int] = 1


def validate_config() -> None:
    """Validate E-Divisive configuration parameters."""
    if PVALUE <= 0 or PVALUE > 1:
        raise ValueError("PVALUE must be in (0, 1]")
    if PERMUTATIONS <= 0:
        raise ValueError("PERMUTATIONS must be positive")
    if EPSILON <= 0:
        raise ValueError("EPSILON must be positive")
    if SEED < 0:
        raise ValueError("SEED must be non-negative")
    if N_JOBS == 0:
        raise ValueError("N_JOBS must be non-zero")

# Validate configuration on import
validate_config()
