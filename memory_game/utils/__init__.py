"""Utilities."""

from .logger import GameDisplay, setup_logging

__all__ = [
    "GameDisplay",
    "setup_logging",
]
