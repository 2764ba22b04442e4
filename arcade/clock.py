"""
Fixed-period tick clock.

Turns the wall time elapsed between rendered frames into timer events for a
game, one accumulator per entry of the game's ``TIMERS``. The play loop
drains input first and then advances the clock, so commands and ticks run
one after another on the same thread and a tick is never interrupted.
"""

from __future__ import annotations

import logging

from arcade.game.base import ArcadeGame

logger = logging.getLogger(__name__)

# Cap on fires delivered per timer in one advance, so a long frame stall
# does not replay seconds of simulation in a single burst.
MAX_CATCH_UP = 5


class FixedTimer:
    """Accumulator that fires once per elapsed period.

    Attributes:
        period_ms: Milliseconds between fires.
    """

    def __init__(self, period_ms: int) -> None:
        if period_ms <= 0:
            raise ValueError(f"Timer period must be positive, got {period_ms}")
        self.period_ms = period_ms
        self._elapsed_ms: float = 0.0

    def advance(self, elapsed_ms: float, max_fires: int = MAX_CATCH_UP) -> int:
        """Add elapsed time and return how many periods completed.

        Args:
            elapsed_ms: Milliseconds since the previous advance.
            max_fires: Upper bound on the returned count; surplus time is dropped.

        Returns:
            Number of times the timer fired.
        """
        self._elapsed_ms += elapsed_ms
        fires = int(self._elapsed_ms // self.period_ms)
        if fires > max_fires:
            fires = max_fires
            self._elapsed_ms = 0.0
        else:
            self._elapsed_ms -= fires * self.period_ms
        return fires

    def reset(self) -> None:
        self._elapsed_ms = 0.0


class GameClock:
    """Drives a game's timer events from elapsed wall time.

    Timers only accumulate while the game is PLAYING. Pausing, resetting or
    ending the round discards any partial period, and a batch of fires stops
    as soon as the game leaves PLAYING.

    Attributes:
        game: The game being driven.
        timers: Event name -> FixedTimer, in the game's declaration order.
    """

    def __init__(self, game: ArcadeGame, periods: dict[str, int] | None = None) -> None:
        """Create one timer per game event.

        Args:
            game: The game to drive.
            periods: Optional overrides of the game's default periods (ms).
        """
        self.game = game
        periods = periods or {}
        unknown = set(periods) - set(game.TIMERS)
        if unknown:
            raise KeyError(f"Unknown timer events for {game.GAME_ID.value}: {sorted(unknown)}")
        self.timers: dict[str, FixedTimer] = {
            event: FixedTimer(periods.get(event, default))
            for event, default in game.TIMERS.items()
        }

    def advance(self, elapsed_ms: float) -> int:
        """Deliver every timer event that came due in ``elapsed_ms``.

        Returns:
            Number of events delivered to the game.
        """
        if not self.game.is_playing:
            self.reset()
            return 0

        delivered = 0
        for event, timer in self.timers.items():
            for _ in range(timer.advance(elapsed_ms)):
                if not self.game.is_playing:
                    self.reset()
                    return delivered
                self.game.tick(event)
                delivered += 1
        return delivered

    def reset(self) -> None:
        for timer in self.timers.values():
            timer.reset()
