"""Game state models."""

from enum import Enum

from pydantic import BaseModel, Field

from .card import Card


class GamePhase(str, Enum):
    """Phase of the game state machine."""

    IDLE = "idle"  # Not started yet
    PLAYING = "playing"  # Accepting card selections
    RESOLVING = "resolving"  # Mismatch on display, waiting to flip back
    WON = "won"  # All pairs found


class Selection(BaseModel):
    """Currently flipped, unresolved cards (at most two)."""

    first: Card | None = None
    second: Card | None = None

    def is_empty(self) -> bool:
        """Check if nothing is selected."""
        return self.first is None

    def is_full(self) -> bool:
        """Check if two cards are selected."""
        return self.second is not None

    def clear(self) -> None:
        """Drop both selected cards."""
        self.first = None
        self.second = None


class GameState(BaseModel):
    """Overall game state for one engine instance."""

    phase: GamePhase = GamePhase.IDLE
    score: int = 0  # Valid flips this session
    pairs_found: int = 0

    # Bumped on every start/reset so stale timers can be detected
    generation: int = 0

    selection: Selection = Field(default_factory=Selection)

    def reset_for_new_game(self) -> None:
        """Reset state for a new session."""
        self.phase = GamePhase.PLAYING
        self.score = 0
        self.pairs_found = 0
        self.generation += 1
        self.selection.clear()

    def __str__(self) -> str:
        return (
            f"Game #{self.generation} [{self.phase.value}] "
            f"score={self.score} pairs={self.pairs_found}"
        )
