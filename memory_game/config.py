"""Configuration management."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from memory_game.logging import GameLogConfig
from memory_game.models.card import DEFAULT_SYMBOLS


class GameConfig(BaseModel):
    """Game configuration."""

    symbols: list[str] = Field(default_factory=lambda: list(DEFAULT_SYMBOLS))
    shuffle: bool = True
    seed: int | None = None

    # Delays in milliseconds
    mismatch_delay_ms: int = 1000
    win_delay_ms: int = 0

    # Cards per row in the terminal display
    columns: int = 5

    @field_validator("symbols")
    @classmethod
    def check_symbols(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one symbol is required")
        if len(set(v)) != len(v):
            raise ValueError("symbols must be unique")
        return v

    @field_validator("mismatch_delay_ms", "win_delay_ms")
    @classmethod
    def check_delay(cls, v: int) -> int:
        if v < 0:
            raise ValueError("delay must not be negative")
        return v

    @field_validator("columns")
    @classmethod
    def check_columns(cls, v: int) -> int:
        if v < 1:
            raise ValueError("columns must be positive")
        return v

    @property
    def number_of_pairs(self) -> int:
        return len(self.symbols)


class StorageConfig(BaseModel):
    """Best score storage configuration."""

    backend: Literal["memory", "json"] = "json"
    path: str = "best_score.json"
    key: str = "bestScore"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    storage: StorageConfig = StorageConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
