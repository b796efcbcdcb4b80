"""Repeated longest common substring similarity for record linkage."""

from lcs_linkage.similarity import LCSConfig, LongestCommonSubstring

__version__ = "1.0.0"

__all__ = ["LCSConfig", "LongestCommonSubstring", "__version__"]
