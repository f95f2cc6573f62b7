"""Exclude Categories — per-listing category exclusion for content queries."""

__version__ = "1.0.1"
