"""Chaos game: iterative fractal rendering with pygame."""

__version__ = "0.1.0"
