"""Delayed task scheduling.

The engine never sleeps. Anything that has to happen later (flipping a
mismatched pair back, showing the win screen) is handed to a Scheduler,
which returns a ScheduledTask that can be cancelled.
"""

import asyncio
import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from typing import Callable

logger = logging.getLogger(__name__)


class ScheduledTask:
    """Handle for a delayed callback."""

    def __init__(
        self,
        callback: Callable[[], None],
        due_ms: int,
        on_cancel: Callable[[], None] | None = None,
    ):
        self.callback = callback
        self.due_ms = due_ms
        self.cancelled = False
        self.done = False
        self.on_cancel = on_cancel

    @property
    def pending(self) -> bool:
        """Check if the task will still run."""
        return not (self.cancelled or self.done)

    def cancel(self) -> None:
        """Prevent the callback from running."""
        if not self.pending:
            return
        self.cancelled = True
        if self.on_cancel:
            self.on_cancel()

    def run(self) -> None:
        """Run the callback once unless cancelled."""
        if not self.pending:
            return
        self.done = True
        self.callback()

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "done" if self.done else "pending"
        return f"ScheduledTask(due_ms={self.due_ms}, {state})"


class Scheduler(ABC):
    """Abstract base class for delayed callbacks.

    All callbacks run on the caller's thread of control.
    """

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Schedule callback to run after delay_ms milliseconds.

        Args:
            delay_ms: Delay in milliseconds (0 or more)
            callback: Function with no arguments

        Returns:
            Handle that can cancel the callback
        """
        pass


class ManualScheduler(Scheduler):
    """Scheduler driven by a virtual clock.

    Time only moves when advance() is called, which makes delays
    deterministic in tests and lets a blocking shell decide when to wait.
    """

    def __init__(self):
        self.now_ms = 0
        self._queue: list[tuple[int, int, ScheduledTask]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(callback, self.now_ms + max(0, delay_ms))
        heapq.heappush(self._queue, (task.due_ms, next(self._seq), task))
        return task

    def pending_count(self) -> int:
        """Get number of tasks that have not run or been cancelled."""
        return sum(1 for _, _, t in self._queue if t.pending)

    def time_until_next(self) -> int | None:
        """Get milliseconds until the next pending task, or None if idle."""
        due = [t.due_ms for _, _, t in self._queue if t.pending]
        if not due:
            return None
        return max(0, min(due) - self.now_ms)

    def advance(self, ms: int) -> int:
        """Move the clock forward and run every task that became due.

        Tasks scheduled by a running task are also run if they fall due
        inside the window.

        Args:
            ms: Milliseconds to advance

        Returns:
            Number of callbacks that ran
        """
        target = self.now_ms + ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due_ms, _, task = heapq.heappop(self._queue)
            self.now_ms = max(self.now_ms, due_ms)
            if task.pending:
                task.run()
                ran += 1
        self.now_ms = target
        return ran

    def run_all(self) -> int:
        """Advance until no pending tasks remain.

        Returns:
            Number of callbacks that ran
        """
        ran = 0
        while True:
            wait = self.time_until_next()
            if wait is None:
                return ran
            ran += self.advance(wait)


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None):
        """Initialize scheduler.

        Args:
            loop: Event loop to use (running loop if not provided)
        """
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        loop = self.loop
        delay_ms = max(0, delay_ms)
        task = ScheduledTask(callback, int(loop.time() * 1000) + delay_ms)
        handle = loop.call_later(delay_ms / 1000, task.run)
        task.on_cancel = handle.cancel
        logger.debug(f"Scheduled {task!r}")
        return task
