"""
Lifecycle and score bookkeeping shared by the four games.

A game is created IDLE, toggles between IDLE and PLAYING, and ends as WON or
LOST. ``reset()`` is the only way back from an ended round (``toggle_play``
on an ended round resets it). Commands issued while not PLAYING are no-ops.
"""

from __future__ import annotations

import enum
import logging
import random
from typing import Any

from arcade.scores import BestScore, GameId, ScoreStore

logger = logging.getLogger(__name__)


class Lifecycle(enum.Enum):
    """Lifecycle state of a game instance."""
    IDLE = "idle"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def ended(self) -> bool:
        return self in (Lifecycle.WON, Lifecycle.LOST)


class ArcadeGame:
    """Base class for a fixed-tick arcade simulation.

    Subclasses set ``GAME_ID`` and ``TIMERS`` and implement ``_reset_state``
    and ``_snapshot``. Each entry of ``TIMERS`` maps the name of a no-argument
    method to the period, in milliseconds, at which the tick clock calls it.

    Attributes:
        score: Score of the current round.
        lifecycle: Current lifecycle state.
        scores: Best-score bridge for this game.
    """

    GAME_ID: GameId
    TIMERS: dict[str, int] = {}

    def __init__(self, store: ScoreStore | None = None, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.scores = BestScore(self.GAME_ID, store)
        self.scores.load_best()
        self.score: int = 0
        self.lifecycle: Lifecycle = Lifecycle.IDLE
        self._reset_state()

    @property
    def best_score(self) -> int:
        return self.scores.best

    @property
    def is_playing(self) -> bool:
        return self.lifecycle is Lifecycle.PLAYING

    def toggle_play(self) -> None:
        """Start or pause the round; on an ended round, reset instead."""
        if self.lifecycle.ended:
            self.reset()
        elif self.lifecycle is Lifecycle.PLAYING:
            self.lifecycle = Lifecycle.IDLE
        else:
            self.lifecycle = Lifecycle.PLAYING
            self._on_start()

    def reset(self) -> dict[str, Any]:
        """Return to IDLE with every entity, the board and the score reinitialised.

        Returns:
            The fresh state snapshot.
        """
        self.score = 0
        self.lifecycle = Lifecycle.IDLE
        self._reset_state()
        return self.get_state()

    def tick(self, event: str) -> None:
        """Run the timer event ``event`` (a key of ``TIMERS``)."""
        if event not in self.TIMERS:
            raise KeyError(f"{type(self).__name__} has no timer event {event!r}")
        getattr(self, event)()

    def get_state(self) -> dict[str, Any]:
        """Return a read-only snapshot of the game for rendering."""
        state = self._snapshot()
        state.update(
            game_id=self.GAME_ID,
            score=self.score,
            best_score=self.best_score,
            lifecycle=self.lifecycle,
        )
        return state

    def _finish(self, outcome: Lifecycle) -> None:
        """End the round and offer the final score to the best-score bridge."""
        self.lifecycle = outcome
        logger.info("%s round %s with score %d", self.GAME_ID.value, outcome.value, self.score)
        self.scores.save_best(self.score)

    def _on_start(self) -> None:
        """Hook run when the round enters PLAYING."""

    def _reset_state(self) -> None:
        raise NotImplementedError

    def _snapshot(self) -> dict[str, Any]:
        raise NotImplementedError
