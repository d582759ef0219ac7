"""Trim a chosen set of characters from both ends of a string; see stringplus.trim."""

__version__ = "0.1.0"