"""Similarity module for lcs_linkage.

This module provides the longest common substring comparator and bulk
scoring helpers built on top of it.
"""

from .lcs import (
    DEFAULT_MIN_LENGTH,
    LCSConfig,
    LongestCommonSubstring,
    directional_score,
    longest_common_substring,
)
from .scoring import score_matrix, score_pairs
from .types import Comparator, PairScore

__all__ = [
    "DEFAULT_MIN_LENGTH",
    "Comparator",
    "LCSConfig",
    "LongestCommonSubstring",
    "PairScore",
    "directional_score",
    "longest_common_substring",
    "score_matrix",
    "score_pairs",
]
