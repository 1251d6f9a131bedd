"""Main entry point for the terminal memory game."""

import argparse
import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Callable

from memory_game.config import Config, StorageConfig, load_config
from memory_game.game.engine import GameEngine
from memory_game.game.scheduler import ManualScheduler
from memory_game.logging import GameLogConfig, GameLogger
from memory_game.models.events import CardClicked, Reset, Start
from memory_game.models.game_state import GamePhase
from memory_game.storage import BestScoreStorage, InMemoryStorage, JsonFileStorage
from memory_game.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

PROMPT = "Card id (r = reset, q = quit): "


def generate_log_filename(log_dir: str) -> str:
    """Generate log filename with timestamp.

    Format: {ISO timestamp}_memory.jsonl

    Args:
        log_dir: Directory for log files.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_memory.jsonl")


def create_storage(config: StorageConfig) -> BestScoreStorage:
    """Create the best score storage named in config."""
    if config.backend == "memory":
        return InMemoryStorage()
    return JsonFileStorage(config.path, key=config.key)


def wait_for_timers(
    scheduler: ManualScheduler,
    display: GameDisplay,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Block until every delayed transition has run.

    The board is shown before each wait so the player can see a
    mismatched pair before it is turned back.
    """
    wait = scheduler.time_until_next()
    while wait is not None:
        display.print_board()
        sleep(wait / 1000)
        scheduler.advance(wait)
        wait = scheduler.time_until_next()


def play(
    engine: GameEngine,
    scheduler: ManualScheduler,
    display: GameDisplay,
    read: Callable[[str], str] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run the interactive loop until the player quits.

    Args:
        engine: Engine wired to scheduler and display
        scheduler: Scheduler the engine uses
        display: Display subscribed to the engine
        read: Prompt function (input if not provided)
        sleep: Sleep function (seconds)

    Returns:
        Number of games won
    """
    read = read or input
    display.best_score = engine.best_score
    display.print_title()
    engine.handle(Start())
    wins = 0

    while True:
        if engine.phase == GamePhase.WON:
            wins += 1
            try:
                answer = read("Play Again? [y/N]: ").strip().lower()
            except EOFError:
                break
            if answer not in ("y", "yes"):
                break
            display.print_title()
            engine.handle(Reset())
            continue

        display.print_board()
        try:
            raw = read(PROMPT).strip().lower()
        except EOFError:
            break

        if raw in ("q", "quit"):
            break
        if raw in ("r", "reset"):
            engine.handle(Reset())
            continue

        try:
            card_id = int(raw)
        except ValueError:
            display.print_message(f"Not a card id: {raw!r}")
            continue

        if not engine.handle(CardClicked(id=card_id)):
            logger.debug(f"Click on card {card_id} ignored")
        wait_for_timers(scheduler, display, sleep)

    return wins


def build_engine(
    config: Config,
    storage: BestScoreStorage,
    game_logger: GameLogger | None = None,
) -> tuple[GameEngine, ManualScheduler, GameDisplay]:
    """Wire an engine to a manual scheduler and a terminal display."""
    scheduler = ManualScheduler()
    engine = GameEngine(config, storage, scheduler, game_logger)
    display = GameDisplay(columns=config.game.columns)
    engine.subscribe(display.handle)
    return engine, scheduler, display


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(description="Memory matching card game")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for shuffling (overrides config)",
    )
    parser.add_argument(
        "--pairs",
        type=int,
        help="Use only the first N symbols (overrides config)",
    )
    parser.add_argument(
        "--best-score-file",
        type=Path,
        help="JSON file holding the best score (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args(argv)

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.pairs is not None:
        if not 0 < args.pairs <= len(config.game.symbols):
            parser.error(f"--pairs must be between 1 and {len(config.game.symbols)}")
        config.game.symbols = config.game.symbols[: args.pairs]
    if args.best_score_file:
        config.storage.backend = "json"
        config.storage.path = str(args.best_score_file)
    if args.verbose:
        config.logging.level = "DEBUG"

    # Setup logging
    setup_logging(config.logging.level)

    # Game log: CLI directory overrides config file
    if args.game_log is not None:
        game_log_config = GameLogConfig(
            enabled=True, output_path=generate_log_filename(str(args.game_log))
        )
    else:
        game_log_config = config.game_log

    try:
        storage = create_storage(config.storage)
        with GameLogger(game_log_config) as game_logger:
            engine, scheduler, display = build_engine(config, storage, game_logger)
            wins = play(engine, scheduler, display)
            logger.info(f"Session finished, {wins} game(s) won")
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
