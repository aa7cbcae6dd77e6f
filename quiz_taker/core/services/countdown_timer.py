"""Countdown for quizzes with a time limit.

The timer does not own a clock. Whoever hosts it (a ``QTimer`` in the UI, a
test in the suite) calls :meth:`CountdownTimer.tick` once per second.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from quiz_taker.constants.quiz_constants import LOW_TIME_WARNING_SECONDS
from quiz_taker.core.models import has_time_limit

logger = logging.getLogger(__name__)


class CountdownTimer:
    """Counts whole seconds down to zero and reports expiry exactly once."""

    def __init__(self, total_seconds: int, on_expired: Callable[[], None]) -> None:
        if total_seconds <= 0:
            raise ValueError("Countdown needs a positive number of seconds.")
        self._total_seconds = total_seconds
        self._remaining_seconds = total_seconds
        self._on_expired = on_expired
        self._running = False
        self._cancelled = False
        self._expired = False

    @classmethod
    def from_time_limit(
        cls,
        time_limit_minutes: int,
        on_expired: Callable[[], None],
    ) -> CountdownTimer | None:
        """Build a timer for a quiz limit, or ``None`` when the quiz is unlimited."""
        if not has_time_limit(time_limit_minutes):
            return None
        return cls(time_limit_minutes * 60, on_expired)

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    def is_running(self) -> bool:
        return self._running

    def has_expired(self) -> bool:
        return self._expired

    def start(self) -> None:
        if self._cancelled or self._expired:
            return
        self._running = True

    def stop(self) -> None:
        self._running = False

    def cancel(self) -> None:
        """Stop for good. Later ticks and starts are ignored."""
        self._running = False
        self._cancelled = True

    def tick(self) -> None:
        if not self._running:
            return
        self._remaining_seconds = max(0, self._remaining_seconds - 1)
        if self._remaining_seconds == 0:
            self._running = False
            self._expired = True
            logger.info("Quiz time limit of %ss reached", self._total_seconds)
            self._on_expired()

    def remaining_fraction(self) -> float:
        return self._remaining_seconds / self._total_seconds

    def is_low_on_time(self) -> bool:
        return self._remaining_seconds < LOW_TIME_WARNING_SECONDS

    def format_remaining(self) -> str:
        minutes, seconds = divmod(self._remaining_seconds, 60)
        return f"{minutes}:{seconds:02d}"
