"""
Best-score persistence.

Each game owns a ``BestScore`` bridge bound to its ``GameId``. The bridge
reads the stored best once, keeps it in memory, and only ever raises it.
Store failures are logged and never reach the game loop: the in-memory best
is updated before the durable write is attempted.

Scores are kept in a small YAML mapping on disk, one key per game using the
``best_score_<game>`` naming convention.
"""

from __future__ import annotations

import enum
import logging
import pathlib
from typing import Protocol

import yaml

logger = logging.getLogger(__name__)


class GameId(str, enum.Enum):
    """Identifier of each game; the value is its storage identifier."""
    SNAKE = "snake"
    SHOOTER = "shooter"
    BOUNCE = "bounce"
    PUZZLE = "puzzle"

    @property
    def storage_key(self) -> str:
        return f"best_score_{self.value}"


class ScoreStore(Protocol):
    """Key-value store holding one integer per game."""

    def get(self, game_id: GameId) -> int: ...

    def put(self, game_id: GameId, score: int) -> None: ...


class MemoryScoreStore:
    """Process-local score store, used in tests and when no file is configured."""

    def __init__(self, initial: dict[GameId, int] | None = None) -> None:
        self._scores: dict[GameId, int] = dict(initial or {})

    def get(self, game_id: GameId) -> int:
        return self._scores.get(game_id, 0)

    def put(self, game_id: GameId, score: int) -> None:
        self._scores[game_id] = score


class YamlScoreStore:
    """Score store backed by a YAML file.

    The file holds a flat mapping such as ``{best_score_snake: 120}``. A
    missing file reads as an empty mapping. Errors while reading or writing
    are raised to the caller; ``BestScore`` decides how to degrade.

    Attributes:
        path: Location of the YAML file.
    """

    def __init__(self, path: str | pathlib.Path) -> None:
        self.path = pathlib.Path(path)

    def get(self, game_id: GameId) -> int:
        value = self._read().get(game_id.storage_key, 0)
        return int(value)

    def put(self, game_id: GameId, score: int) -> None:
        data = self._read()
        data[game_id.storage_key] = int(score)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            yaml.safe_dump(data, f, sort_keys=True)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, "r") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Score file {self.path} does not hold a mapping")
        return data


class BestScore:
    """One-way ratchet over a game's persisted best score.

    Attributes:
        game_id: Game whose score this bridge tracks.
        best: Best score known in memory.
    """

    def __init__(self, game_id: GameId, store: ScoreStore | None = None) -> None:
        self.game_id = game_id
        self._store: ScoreStore = store if store is not None else MemoryScoreStore()
        self.best: int = 0

    def load_best(self) -> int:
        """Read the stored best score, falling back to 0 when unreadable."""
        try:
            stored = int(self._store.get(self.game_id))
        except Exception:
            logger.warning("Could not load best score for %s", self.game_id.value, exc_info=True)
            stored = 0
        self.best = max(stored, 0)
        return self.best

    def save_best(self, candidate: int) -> bool:
        """Offer a finished round's score as the new best.

        Args:
            candidate: Final score of the round.

        Returns:
            True if the candidate became the new best (even if the durable
            write then failed), False if it did not beat the known best.
        """
        if candidate <= self.best:
            return False
        self.best = candidate
        logger.info("New best score for %s: %d", self.game_id.value, candidate)
        try:
            self._store.put(self.game_id, candidate)
        except Exception:
            logger.warning("Could not save best score for %s", self.game_id.value, exc_info=True)
        return True
