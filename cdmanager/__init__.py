"""Burn-list, CD-TEXT language, capacity, progress and drive-status helpers for audio CDs."""

__version__ = "0.1.0"