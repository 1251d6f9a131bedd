"""In-process best score storage."""

from .base import BestScoreStorage


class InMemoryStorage(BestScoreStorage):
    """Keeps the best score for the lifetime of the process."""

    def __init__(self, best_score: int | None = None):
        self._best_score = best_score

    def get_best_score(self) -> int | None:
        return self._best_score

    def set_best_score(self, score: int) -> None:
        self._best_score = score

    def __repr__(self) -> str:
        return f"InMemoryStorage(best_score={self._best_score!r})"
