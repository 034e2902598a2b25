"""Pagination, fork-tree layout, validator labels and page data for a beacon chain explorer."""

__version__ = "0.1.0"