"""Qt event filter that reports when the candidate leaves the quiz window.

The filter is installed only while the quiz is active and removed again as
soon as the integrity monitor disarms, so no signal can fire after the
session has ended.
"""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QWidget

from proctor_app.core.services.integrity_monitor import IntegritySignal

logger = logging.getLogger(__name__)


class QtSurfaceWatcher(QObject):
    """Maps window focus, visibility and fullscreen changes to integrity signals."""

    def __init__(self, window: QWidget) -> None:
        super().__init__(window)
        self._window = window
        self._report: Callable[[IntegritySignal], None] | None = None

    def start(self, report: Callable[[IntegritySignal], None]) -> None:
        if self._report is not None:
            return
        self._report = report
        self._window.installEventFilter(self)
        app = QGuiApplication.instance()
        if app is not None:
            app.applicationStateChanged.connect(self._on_application_state_changed)
        logger.debug("Surface listeners registered")

    def stop(self) -> None:
        if self._report is None:
            return
        self._report = None
        self._window.removeEventFilter(self)
        app = QGuiApplication.instance()
        if app is not None:
            app.applicationStateChanged.disconnect(self._on_application_state_changed)
        logger.debug("Surface listeners removed")

    def check_surface(self) -> None:
        """Report a fullscreen exit or focus loss that no event was observed for."""
        if not self._window.isFullScreen():
            self._emit(IntegritySignal.FULLSCREEN_EXITED)
        elif QGuiApplication.applicationState() != Qt.ApplicationState.ApplicationActive:
            self._emit(IntegritySignal.FOCUS_LOST)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        if watched is self._window and self._report is not None:
            event_type = event.type()
            if event_type == QEvent.Type.WindowDeactivate:
                self._emit(IntegritySignal.WINDOW_DEACTIVATED)
            elif event_type == QEvent.Type.Hide:
                self._emit(IntegritySignal.PAGE_HIDDEN)
            elif event_type == QEvent.Type.WindowStateChange:
                state = self._window.windowState()
                if state & Qt.WindowState.WindowMinimized:
                    self._emit(IntegritySignal.PAGE_HIDDEN)
                elif not state & Qt.WindowState.WindowFullScreen:
                    self._emit(IntegritySignal.FULLSCREEN_EXITED)
        return super().eventFilter(watched, event)

    def _on_application_state_changed(self, state: Qt.ApplicationState) -> None:
        if state in (Qt.ApplicationState.ApplicationHidden, Qt.ApplicationState.ApplicationSuspended):
            self._emit(IntegritySignal.PAGE_HIDDEN)
        elif state == Qt.ApplicationState.ApplicationInactive:
            self._emit(IntegritySignal.FOCUS_LOST)

    def _emit(self, signal: IntegritySignal) -> None:
        report = self._report
        if report is not None:
            report(signal)
