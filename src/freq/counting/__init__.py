"""Sparse counting over integer keys."""

from freq.counting.table import SparseCountTable

__all__ = ["SparseCountTable"]
