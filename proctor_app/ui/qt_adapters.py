"""Qt implementations of the ticker, notifier and router used by the quiz session."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtWidgets import QWidget

from proctor_app.constants.quiz_constants import TICK_INTERVAL_MS
from proctor_app.ui.dialog_helpers import show_error, show_info

logger = logging.getLogger(__name__)


class QtTicker:
    """One-second ``QTimer`` feeding the quiz countdown."""

    def __init__(self, parent: QObject, interval_ms: int = TICK_INTERVAL_MS) -> None:
        self._timer = QTimer(parent)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._fire)
        self._callback: Callable[[], None] | None = None

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        self._callback = None

    def _fire(self) -> None:
        if self._callback is not None:
            self._callback()


class DialogNotifier:
    """Shows notices as dialogs once control returns to the event loop."""

    def __init__(self, parent: QWidget) -> None:
        self._parent = parent

    def notify(self, title: str, description: str, variant: str = "default") -> None:
        if variant == "destructive":
            logger.warning("%s: %s", title, description)
            QTimer.singleShot(0, lambda: show_error(self._parent, title, description))
        else:
            logger.info("%s: %s", title, description)
            QTimer.singleShot(0, lambda: show_info(self._parent, title, description))


class QtRouter(QObject):
    """Tracks the window's current route and announces navigation."""

    navigated = Signal(str)

    def __init__(self, initial_path: str = "", parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._history: list[str] = [initial_path] if initial_path else []

    @property
    def current_path(self) -> str:
        return self._history[-1] if self._history else ""

    def navigate(self, path: str, replace: bool = False) -> None:
        if replace and self._history:
            self._history[-1] = path
        else:
            self._history.append(path)
        logger.info("Navigated to %s", _redact(path))
        self.navigated.emit(path)


def _redact(path: str) -> str:
    parts = path.split("/")
    if len(parts) == 4 and parts[1] == "quiz":
        parts[3] = parts[3][:8] + "…"
    return "/".join(parts)
