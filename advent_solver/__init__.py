"""Solvers for days 1 to 19 of a series of daily programming puzzles."""

__version__ = "0.1.0"