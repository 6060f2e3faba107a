"""Civic Map - adaptive map region and viewport visibility for citizen problem reports."""

__version__ = "0.1.0"
