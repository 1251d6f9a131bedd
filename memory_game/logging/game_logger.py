"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from pydantic import BaseModel

from memory_game.models.card import Card, Deck

from .formatters import format_board, format_card, format_deck


class GameLogConfig(BaseModel):
    """Configuration for game logging."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of a session.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_session_start(self, number_of_pairs: int, best_score: int | None) -> None:
        """Log session start.

        Args:
            number_of_pairs: Pairs on the board.
            best_score: Stored best score before play, if any.
        """
        self._write({
            "type": "session_start",
            "timestamp": datetime.now().isoformat(),
            "pairs": number_of_pairs,
            "best_score": best_score,
        })

    def log_game_start(self, game_num: int, deck: Deck) -> None:
        """Log game start with the dealt layout.

        Args:
            game_num: Game number (engine generation).
            deck: Freshly shuffled deck.
        """
        self._write({
            "type": "game_start",
            "game": game_num,
            "deck": format_deck(deck),
        })

    def log_flip(self, game_num: int, card: Card, score: int) -> None:
        """Log a valid card flip.

        Args:
            game_num: Game number.
            card: Card that was turned face up.
            score: Score after the flip.
        """
        self._write({
            "type": "flip",
            "game": game_num,
            "card": format_card(card),
            "score": score,
        })

    def log_resolution(
        self,
        game_num: int,
        first: Card,
        second: Card,
        matched: bool,
        pairs_found: int,
    ) -> None:
        """Log the comparison of two flipped cards.

        Args:
            game_num: Game number.
            first: First selected card.
            second: Second selected card.
            matched: Whether the symbols were equal.
            pairs_found: Pairs found after this comparison.
        """
        self._write({
            "type": "match" if matched else "mismatch",
            "game": game_num,
            "cards": [format_card(first), format_card(second)],
            "pairs_found": pairs_found,
        })

    def log_hide(self, game_num: int, deck: Deck) -> None:
        """Log a mismatched pair being turned back face down.

        Args:
            game_num: Game number.
            deck: Deck after hiding.
        """
        self._write({
            "type": "hide",
            "game": game_num,
            "board": format_board(deck),
            "matched": deck.matched_count(),
        })

    def log_game_end(
        self,
        game_num: int,
        score: int,
        best_score: int | None,
        new_best: bool,
    ) -> None:
        """Log game end with results.

        Args:
            game_num: Game number.
            score: Final score.
            best_score: Best score after this game.
            new_best: Whether this game set the best score.
        """
        self._write({
            "type": "game_end",
            "game": game_num,
            "score": score,
            "best_score": best_score,
            "new_best": new_best,
        })
