"""Tests for the JSONL game logger."""

import json

import pytest

from memory_game.config import Config, GameConfig
from memory_game.game.engine import GameEngine
from memory_game.game.scheduler import ManualScheduler
from memory_game.logging import GameLogConfig, GameLogger, format_board, format_card
from memory_game.models.card import build_deck


def read_events(path):
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "logs" / "game.jsonl"


class TestFormatters:
    """Tests for log formatters."""

    def test_format_card(self):
        deck = build_deck(["A", "B"], shuffle=False)
        assert format_card(deck.get(3)) == "3:B"

    def test_format_board(self):
        deck = build_deck(["A", "B"], shuffle=False)
        deck.get(0).face_up = True
        deck.get(1).matched = True
        assert format_board(deck) == "A [B] ? ?"


class TestGameLogger:
    """Tests for GameLogger class."""

    def test_disabled_writes_nothing(self, log_path):
        """Test that a disabled logger creates no file."""
        with GameLogger(GameLogConfig(enabled=False, output_path=str(log_path))) as game_logger:
            game_logger.log_session_start(2, None)
        assert not log_path.exists()

    def test_full_session(self, log_path):
        """Test the events written for a game with one mismatch."""
        config = Config(game=GameConfig(symbols=["A", "B"], shuffle=False))
        scheduler = ManualScheduler()

        with GameLogger(GameLogConfig(enabled=True, output_path=str(log_path))) as game_logger:
            engine = GameEngine(config, scheduler=scheduler, game_logger=game_logger)
            engine.start()
            engine.select_card(0)
            engine.select_card(1)
            scheduler.advance(1000)
            for card_id in (0, 2, 1, 3):
                engine.select_card(card_id)

        events = read_events(log_path)
        types = [e["type"] for e in events]
        assert types == [
            "session_start",
            "game_start",
            "flip",
            "flip",
            "mismatch",
            "hide",
            "flip",
            "flip",
            "match",
            "flip",
            "flip",
            "match",
            "game_end",
        ]

        assert events[0]["pairs"] == 2
        assert events[0]["best_score"] is None
        assert events[1]["deck"] == ["A", "B", "A", "B"]
        assert events[4]["cards"] == ["0:A", "1:B"]
        assert events[5]["board"] == "? ? ? ?"
        assert events[5]["matched"] == 0
        assert events[-1] == {
            "type": "game_end",
            "game": 1,
            "score": 6,
            "best_score": 6,
            "new_best": True,
        }

    def test_appends(self, log_path):
        """Test that a second session is appended."""
        log_config = GameLogConfig(enabled=True, output_path=str(log_path))
        with GameLogger(log_config) as game_logger:
            game_logger.log_session_start(5, None)
        with GameLogger(log_config) as game_logger:
            game_logger.log_session_start(5, 12)

        events = read_events(log_path)
        assert [e["best_score"] for e in events] == [None, 12]

    def test_reset_before_start_logs_session(self, log_path):
        """Test that dealing through reset still opens the session."""
        config = Config(game=GameConfig(symbols=["A", "B"], shuffle=False))

        with GameLogger(GameLogConfig(enabled=True, output_path=str(log_path))) as game_logger:
            engine = GameEngine(config, game_logger=game_logger)
            engine.reset()
            engine.reset()

        types = [e["type"] for e in read_events(log_path)]
        assert types == ["session_start", "game_start", "game_start"]
