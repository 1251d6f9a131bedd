"""Game models."""

from .card import DEFAULT_SYMBOLS, Card, Deck, build_deck, fisher_yates_shuffle
from .events import (
    BestScoreChanged,
    BoardCleared,
    CardClicked,
    CardFlipped,
    CardHidden,
    CardRendered,
    Command,
    GameWon,
    RenderEvent,
    Reset,
    ScoreChanged,
    Start,
)
from .game_state import GamePhase, GameState, Selection

__all__ = [
    "DEFAULT_SYMBOLS",
    "Card",
    "Deck",
    "build_deck",
    "fisher_yates_shuffle",
    "GamePhase",
    "GameState",
    "Selection",
    "RenderEvent",
    "CardRendered",
    "CardFlipped",
    "CardHidden",
    "ScoreChanged",
    "GameWon",
    "BestScoreChanged",
    "BoardCleared",
    "Command",
    "Start",
    "CardClicked",
    "Reset",
]
