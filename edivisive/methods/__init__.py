"""
Methods package for change-point detection.

- edivisive: non-parametric divisive segmentation (Matteson & James 2014)
  with a permutation significance test
"""

from .base import BaseMethod
from .edivisive import EDivisiveMethod

__all__ = ['BaseMethod', 'EDivisiveMethod']
