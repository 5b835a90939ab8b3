"""Service that turns surface signals into a single disqualification."""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum, auto
import logging
from typing import Callable, Iterator, Protocol

logger = logging.getLogger(__name__)


class IntegritySignal(Enum):
    """Ways a candidate can leave the monitored surface."""

    FOCUS_LOST = auto()
    WINDOW_DEACTIVATED = auto()
    PAGE_HIDDEN = auto()
    FULLSCREEN_EXITED = auto()
    UNLOAD_ATTEMPTED = auto()


class SurfaceWatcher(Protocol):
    """Registers focus/visibility/fullscreen/close listeners on the quiz surface."""

    def start(self, report: Callable[[IntegritySignal], None]) -> None: ...

    def stop(self) -> None: ...


class IntegrityMonitor:
    """Forwards the first violation seen while armed, then goes quiet for good."""

    def __init__(
        self,
        watcher: SurfaceWatcher,
        on_violation: Callable[[IntegritySignal], None],
    ) -> None:
        self._watcher = watcher
        self._on_violation = on_violation
        self._armed: bool = False
        self._paused: bool = False
        self._tripped: bool = False
        self._held: IntegritySignal | None = None

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def tripped(self) -> bool:
        return self._tripped

    def arm(self) -> None:
        if self._armed or self._tripped:
            return
        self._armed = True
        self._watcher.start(self.report)
        logger.info("Integrity monitor armed")

    def disarm(self) -> None:
        if not self._armed:
            return
        self._armed = False
        self._watcher.stop()
        logger.info("Integrity monitor disarmed")

    @contextmanager
    def paused(self) -> Iterator[None]:
        """Hold signals while the app's own prompt has focus.

        The window deactivation the prompt causes is dropped. The first other
        signal is kept and reported once the pause ends.
        """
        self._paused = True
        try:
            yield
        finally:
            self._paused = False
            held, self._held = self._held, None
            if held is not None:
                logger.info("Replaying %s seen during a paused prompt", held.name)
                self.report(held)

    def report(self, signal: IntegritySignal) -> None:
        if not self._armed or self._tripped:
            return
        if self._paused:
            if signal is not IntegritySignal.WINDOW_DEACTIVATED and self._held is None:
                self._held = signal
            return
        self._tripped = True
        logger.warning("Integrity violation: %s", signal.name)
        self.disarm()
        self._on_violation(signal)
