"""Hexagonal marble-pushing board game engine with a heuristic AI."""

__version__ = "0.1.0"
