"""Best score storage backed by a JSON key/value file.

The file holds a flat object of string values, the same shape a browser's
localStorage would give, e.g. {"bestScore": "12"}. Other keys in the file
are preserved on write.
"""

import json
import logging
from pathlib import Path

from .base import BestScoreStorage

logger = logging.getLogger(__name__)

DEFAULT_KEY = "bestScore"


class JsonFileStorage(BestScoreStorage):
    """Persist the best score in a JSON file."""

    def __init__(self, path: Path | str, key: str = DEFAULT_KEY):
        """Initialize storage.

        Args:
            path: JSON file path (created on first write)
            key: Key the score is stored under
        """
        self.path = Path(path)
        self.key = key

    def _load(self) -> dict[str, str]:
        """Read the whole key/value object.

        Returns:
            Stored items, or an empty dict if the file is missing or malformed
        """
        if not self.path.exists():
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring malformed storage file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring storage file {self.path}: not an object")
            return {}
        return data

    def get_best_score(self) -> int | None:
        raw = self._load().get(self.key)
        if raw is None:
            return None
        if isinstance(raw, int) and not isinstance(raw, bool):
            return raw
        if isinstance(raw, str):
            try:
                return int(raw)
            except ValueError:
                pass
        logger.warning(f"Ignoring non-integer best score {raw!r} in {self.path}")
        return None

    def set_best_score(self, score: int) -> None:
        data = self._load()
        data[self.key] = str(score)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        logger.debug(f"Best score {score} written to {self.path}")

    def __repr__(self) -> str:
        return f"JsonFileStorage(path={str(self.path)!r}, key={self.key!r})"
