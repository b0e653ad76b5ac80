"""Geometric validation and load metrics for cargo placed in a truck."""

__version__ = "0.1.0"
