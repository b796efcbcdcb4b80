"""Shared utilities for lcs_linkage."""
