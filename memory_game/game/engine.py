"""Game engine for the memory matching game."""

from __future__ import annotations

import logging
import random
from typing import Callable

from memory_game.config import Config
from memory_game.logging import GameLogger
from memory_game.models.card import Card, Deck, build_deck
from memory_game.models.events import (
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
from memory_game.models.game_state import GamePhase, GameState
from memory_game.storage import BestScoreStorage, InMemoryStorage

from .scheduler import ManualScheduler, ScheduledTask, Scheduler

logger = logging.getLogger(__name__)

Listener = Callable[[RenderEvent], None]


class GameEngine:
    """State machine for one memory game board.

    Phases: IDLE -> PLAYING -> RESOLVING -> PLAYING ... -> WON.
    Invalid operations are ignored rather than raised; every public
    operation returns whether it had any effect.
    """

    def __init__(
        self,
        config: Config | None = None,
        storage: BestScoreStorage | None = None,
        scheduler: Scheduler | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            storage: Best score storage (in-memory if not provided)
            scheduler: Runs delayed transitions (manual clock if not provided)
            game_logger: GameLogger instance for detailed logging
            rng: Random source for shuffling (seeded from config if not provided)
        """
        self.config = config or Config()
        self.rules = self.config.game
        self.storage = storage or InMemoryStorage()
        self.scheduler = scheduler or ManualScheduler()
        self.game_logger = game_logger
        self.rng = rng or random.Random(self.rules.seed)

        self.state = GameState()
        self.deck = Deck()

        self._listeners: list[Listener] = []
        self._pending: ScheduledTask | None = None
        self._ended = False

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def pairs_found(self) -> int:
        return self.state.pairs_found

    @property
    def number_of_pairs(self) -> int:
        return self.rules.number_of_pairs

    @property
    def best_score(self) -> int | None:
        """Get best score from storage."""
        return self.storage.get_best_score()

    def subscribe(self, listener: Listener) -> None:
        """Register a render event listener."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a render event listener."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: RenderEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    def handle(self, command: Command) -> bool:
        """Dispatch a command from the UI layer.

        Args:
            command: Start, CardClicked or Reset

        Returns:
            True if the command changed the game
        """
        if isinstance(command, Start):
            return self.start()
        if isinstance(command, CardClicked):
            return self.select_card(command.id)
        if isinstance(command, Reset):
            self.reset()
            return True
        logger.warning(f"Unknown command: {command!r}")
        return False

    def start(self) -> bool:
        """Deal the first session.

        Returns:
            True if started, False if the game was not idle
        """
        if self.state.phase != GamePhase.IDLE:
            logger.debug(f"Ignoring start in phase {self.state.phase.value}")
            return False

        if self.game_logger:
            self.game_logger.log_session_start(self.number_of_pairs, self.best_score)

        self._deal()
        return True

    def reset(self) -> None:
        """Throw away the current session and deal again.

        Allowed from any phase. A pending delayed transition is cancelled
        and, being from an older generation, would be ignored anyway.
        """
        if self.state.phase == GamePhase.IDLE and self.game_logger:
            self.game_logger.log_session_start(self.number_of_pairs, self.best_score)
        self._cancel_pending()
        self._deal()

    def _deal(self) -> None:
        """Shuffle, zero counters and render a fresh board."""
        self.deck = build_deck(self.rules.symbols, self.rng, shuffle=self.rules.shuffle)
        self.state.reset_for_new_game()
        self._ended = False

        logger.info(
            f"Game {self.state.generation} started with {self.deck.number_of_pairs} pairs"
        )
        logger.debug(f"Layout: {self.deck.symbols()}")

        if self.game_logger:
            self.game_logger.log_game_start(self.state.generation, self.deck)

        self._emit(ScoreChanged(value=0))
        for position, card in enumerate(self.deck):
            self._emit(CardRendered(id=card.id, position=position))

    def select_card(self, card_id: int) -> bool:
        """Flip a card.

        Args:
            card_id: Id of the clicked card

        Returns:
            True if the card was flipped, False if the click was ignored
        """
        if self.state.phase != GamePhase.PLAYING:
            logger.debug(f"Ignoring card {card_id}: phase is {self.state.phase.value}")
            return False

        card = self.deck.get(card_id)
        if card is None:
            logger.debug(f"Ignoring unknown card {card_id}")
            return False
        if not card.is_selectable:
            logger.debug(f"Ignoring card {card_id}: already face up or matched")
            return False

        selection = self.state.selection
        if selection.is_full():
            logger.debug(f"Ignoring card {card_id}: two cards already selected")
            return False

        self._flip(card)

        first = selection.first
        if first is None:
            selection.first = card
        else:
            selection.second = card
            self._compare(first, card)
        return True

    def _flip(self, card: Card) -> None:
        """Turn a card face up and count the move."""
        card.face_up = True
        self.state.score += 1

        if self.game_logger:
            self.game_logger.log_flip(self.state.generation, card, self.state.score)

        self._emit(CardFlipped(id=card.id, symbol=card.symbol))
        self._emit(ScoreChanged(value=self.state.score))

    def _compare(self, first: Card, second: Card) -> None:
        """Evaluate the two selected cards."""
        selection = self.state.selection

        matched = first.symbol == second.symbol
        if matched:
            first.matched = True
            second.matched = True
            self.state.pairs_found += 1
            selection.clear()
            logger.debug(
                f"Match: {first.id} and {second.id} ({first.symbol}), "
                f"{self.state.pairs_found}/{self.number_of_pairs} pairs"
            )
        else:
            self.state.phase = GamePhase.RESOLVING
            logger.debug(
                f"Mismatch: {first.id} ({first.symbol}) and {second.id} ({second.symbol})"
            )

        if self.game_logger:
            self.game_logger.log_resolution(
                self.state.generation, first, second, matched, self.state.pairs_found
            )

        if not matched:
            self._schedule(self.rules.mismatch_delay_ms, self._hide_mismatch)
        elif self.state.pairs_found == self.number_of_pairs:
            self.state.phase = GamePhase.WON
            if self.rules.win_delay_ms > 0:
                self._schedule(self.rules.win_delay_ms, self.end_game)
            else:
                self.end_game()

    def _hide_mismatch(self) -> None:
        """Turn the mismatched pair face down and accept clicks again."""
        selection = self.state.selection
        for card in (selection.first, selection.second):
            if card is not None:
                card.face_up = False
                self._emit(CardHidden(id=card.id))
        selection.clear()
        self.state.phase = GamePhase.PLAYING

        if self.game_logger:
            self.game_logger.log_hide(self.state.generation, self.deck)

    def end_game(self) -> bool:
        """Announce the win and update the best score.

        Returns:
            True if this call finished the game, False if the game is not
            won yet or was already finished
        """
        if self.state.phase != GamePhase.WON or self._ended:
            return False
        self._ended = True

        final_score = self.state.score
        logger.info(f"Game {self.state.generation} won with score {final_score}")
        self._emit(GameWon(final_score=final_score))
        self._emit(BoardCleared())

        # Lower is better; only None counts as "no best score yet"
        best = self.storage.get_best_score()
        new_best = best is None or final_score < best
        if new_best:
            self.storage.set_best_score(final_score)
            best = final_score
            logger.info(f"New best score: {final_score}")
            self._emit(BestScoreChanged(value=final_score))

        if self.game_logger:
            self.game_logger.log_game_end(self.state.generation, final_score, best, new_best)
        return True

    def _schedule(self, delay_ms: int, callback: Callable[[], object]) -> None:
        """Run callback later unless a newer session has started by then."""
        generation = self.state.generation

        def run() -> None:
            if generation != self.state.generation:
                logger.debug(
                    f"Ignoring stale timer from game {generation} "
                    f"(current game {self.state.generation})"
                )
                return
            self._pending = None
            callback()

        self._pending = self.scheduler.call_later(delay_ms, run)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
