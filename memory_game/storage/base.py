"""Base storage class for the persisted best score."""

from abc import ABC, abstractmethod


class BestScoreStorage(ABC):
    """Abstract base class for best score persistence.

    Implementations must return what was last written within a session
    and keep the value across sessions where the backend allows it.
    """

    @abstractmethod
    def get_best_score(self) -> int | None:
        """Get the stored best score.

        Returns:
            Best score, or None if no score has been stored
        """
        pass

    @abstractmethod
    def set_best_score(self, score: int) -> None:
        """Store a new best score.

        Args:
            score: Score to store (lower is better)
        """
        pass
