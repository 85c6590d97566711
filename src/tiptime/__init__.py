"""Tip Time: a single-window tip calculator."""

__version__ = "0.1.0"
