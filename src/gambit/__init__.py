"""Gambit — a two-player chess board with a pseudo-legal move engine."""

__version__ = "0.1.0"
