"""Countdown for the quiz time limit."""

from __future__ import annotations

from typing import Callable, Protocol


class Ticker(Protocol):
    """Calls a callback once per second until stopped."""

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class Countdown:
    """Seconds remaining in the attempt. Expires exactly once."""

    def __init__(self, total_seconds: int) -> None:
        if total_seconds < 0:
            raise ValueError("Countdown must not be negative.")
        self._total_seconds = total_seconds
        self._remaining_seconds = total_seconds
        self._expired = False

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def expired(self) -> bool:
        return self._expired

    def tick(self) -> bool:
        """Consume one second. Returns True only on the tick that reaches zero."""
        if self._expired:
            return False
        if self._remaining_seconds > 0:
            self._remaining_seconds -= 1
        if self._remaining_seconds == 0:
            self._expired = True
            return True
        return False


def format_time(seconds: int) -> str:
    """Format seconds as ``M:SS``."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes}:{secs:02d}"
