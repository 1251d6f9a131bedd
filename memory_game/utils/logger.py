"""Logging utilities and terminal game display."""

import logging
import sys
from typing import TextIO

from memory_game.models.events import (
    BestScoreChanged,
    BoardCleared,
    CardFlipped,
    CardHidden,
    CardRendered,
    GameWon,
    RenderEvent,
    ScoreChanged,
)

TITLE = "The Stanley Kubrick Memory Game!"
HIDDEN = "?"


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


class GameDisplay:
    """Render engine events as text.

    Keeps its own view of the board built purely from render events,
    the same way a browser page would.
    """

    def __init__(self, columns: int = 5, stream: TextIO | None = None):
        """Initialize display.

        Args:
            columns: Cards per row
            stream: Output stream (stdout if not provided)
        """
        self.columns = columns
        self.stream = stream or sys.stdout

        self.positions: dict[int, int] = {}  # position -> card id
        self.faces: dict[int, str] = {}  # card id -> visible symbol
        self.score = 0
        self.best_score: int | None = None
        self.won = False

    def _print(self, text: str = "") -> None:
        print(text, file=self.stream)

    def print_message(self, text: str) -> None:
        """Print a free-form line."""
        self._print(text)

    def handle(self, event: RenderEvent) -> None:
        """Update the view from a render event."""
        if isinstance(event, CardRendered):
            if not self.positions:
                self.won = False
            self.positions[event.position] = event.id
            self.faces.pop(event.id, None)
        elif isinstance(event, CardFlipped):
            self.faces[event.id] = event.symbol
        elif isinstance(event, CardHidden):
            self.faces.pop(event.id, None)
        elif isinstance(event, ScoreChanged):
            self.score = event.value
        elif isinstance(event, GameWon):
            self.won = True
            self.print_won(event.final_score)
        elif isinstance(event, BoardCleared):
            self.positions.clear()
            self.faces.clear()
        elif isinstance(event, BestScoreChanged):
            self.best_score = event.value
            self.print_best_score()

    def print_separator(self) -> None:
        """Print a separator line."""
        self._print("=" * 60)

    def print_title(self) -> None:
        """Print the title and the best score line."""
        self.print_separator()
        self._print(TITLE)
        self.print_separator()
        self.print_best_score()

    def print_best_score(self) -> None:
        """Print the best score, or a blank line marker if there is none."""
        value = "___" if self.best_score is None else str(self.best_score)
        self._print(f"Best score: {value}")

    def render_board(self) -> str:
        """Get the board as text, one row per line.

        Each cell shows the card id and either its symbol or "?".
        """
        cells = []
        for position in sorted(self.positions):
            card_id = self.positions[position]
            face = self.faces.get(card_id, HIDDEN)
            cells.append(f"{card_id:>2}: {face:<20}")

        rows = [
            "".join(cells[i:i + self.columns]).rstrip()
            for i in range(0, len(cells), self.columns)
        ]
        return "\n".join(rows)

    def print_board(self) -> None:
        """Print the score and the board."""
        self._print(f"\nYour score: {self.score}")
        board = self.render_board()
        if board:
            self._print(board)

    def print_won(self, final_score: int) -> None:
        """Print the win message."""
        self.print_separator()
        self._print("You Won!")
        self._print(f"Final score: {final_score}")
        self.print_separator()
