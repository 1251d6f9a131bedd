"""Best score persistence."""

from .base import BestScoreStorage
from .json_file import JsonFileStorage
from .memory import InMemoryStorage

__all__ = [
    "BestScoreStorage",
    "InMemoryStorage",
    "JsonFileStorage",
]
