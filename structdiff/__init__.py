"""Diffs between map-like collections, with bounded-chunk and rope sequence containers."""

__version__ = "0.7.3"