"""Game logic."""

from .engine import GameEngine
from .scheduler import AsyncioScheduler, ManualScheduler, ScheduledTask, Scheduler

__all__ = [
    "GameEngine",
    "Scheduler",
    "ScheduledTask",
    "ManualScheduler",
    "AsyncioScheduler",
]
