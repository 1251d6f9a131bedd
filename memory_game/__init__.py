"""Memory matching game."""

__version__ = "0.1.0"
