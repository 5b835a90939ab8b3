"""Qt main window hosting one proctored quiz attempt."""

from __future__ import annotations

import logging
from enum import Enum, auto

from PySide6.QtCore import QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from proctor_app.constants.quiz_constants import REFERRALS_ROUTE
from proctor_app.constants.ui_constants import HISTORY_FAILED_TITLE, WINDOW_TITLE
from proctor_app.core.api_client import ApiError
from proctor_app.core.models import AuthenticatedUser, SessionPhase
from proctor_app.core.quiz_session import QuizBackend, QuizSession
from proctor_app.core.services.integrity_monitor import IntegritySignal
from proctor_app.core.services.session_guard import InMemoryTabStore, QuizRoute, TabSessionStore
from proctor_app.styling.styles import Styles
from proctor_app.ui.components.question_panel import QuestionPanel
from proctor_app.ui.components.results_panel import ResultsPanel
from proctor_app.ui.components.rules_panel import RulesPanel
from proctor_app.ui.components.status_panel import StatusPanel
from proctor_app.ui.dialog_helpers import confirm_leave_quiz, show_error
from proctor_app.ui.history_dialog import HistoryDialog
from proctor_app.ui.qt_adapters import DialogNotifier, QtRouter, QtTicker
from proctor_app.ui.surface_watcher import QtSurfaceWatcher

logger = logging.getLogger(__name__)


class WindowPage(Enum):
    """Pages of the window's stacked widget."""

    STATUS = auto()
    RULES = auto()
    QUESTION = auto()
    RESULTS = auto()


class QuizWindow(QMainWindow):
    """Main window for one attempt. Also acts as the session's presentation port."""

    def __init__(
        self,
        api: QuizBackend,
        user: AuthenticatedUser | None,
        route: QuizRoute,
        store: TabSessionStore | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self._initial_route = route
        self._left_quiz = False

        self.router = QtRouter(route.path, self)
        self.router.navigated.connect(self._handle_navigated)
        self.watcher = QtSurfaceWatcher(self)
        self.session = QuizSession(
            api=api,
            user=user,
            store=store or InMemoryTabStore(),
            presentation=self,
            watcher=self.watcher,
            ticker=QtTicker(self),
            router=self.router,
            notifier=DialogNotifier(self),
        )
        self.session.add_listener(self._refresh)

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self._refresh()

    def _build_ui(self) -> None:
        self.page_stack = QStackedWidget(self)
        self.setCentralWidget(self.page_stack)

        self.status_panel = StatusPanel(
            on_retry=self.session.retry,
            on_back=self._go_to_referrals,
            on_close=self.close,
            parent=self,
        )
        self.rules_panel = RulesPanel(
            on_consent_changed=self.session.set_rules_accepted,
            on_start=self._handle_start,
            parent=self,
        )
        self.question_panel = QuestionPanel(
            on_select=self.session.select_current_answer,
            on_previous=self.session.previous,
            on_next=self.session.next,
            on_submit=self.session.submit,
            parent=self,
        )
        self.results_panel = ResultsPanel(
            on_back=self._go_to_referrals,
            on_history=self._handle_history,
            parent=self,
        )

        self._pages = {
            WindowPage.STATUS: self.status_panel,
            WindowPage.RULES: self.rules_panel,
            WindowPage.QUESTION: self.question_panel,
            WindowPage.RESULTS: self.results_panel,
        }
        for panel in self._pages.values():
            self.page_stack.addWidget(panel)

    def open_route(self) -> None:
        """Validate the launch route and load its quiz once the event loop runs."""
        QTimer.singleShot(0, lambda: self.session.mount(self._initial_route))

    # --- Presentation port ---

    def request_fullscreen(self) -> None:
        self.showFullScreen()

    def exit_fullscreen(self) -> None:
        self.showNormal()

    def is_fullscreen(self) -> bool:
        return self.isFullScreen()

    # --- Rendering ---

    def _show_page(self, page: WindowPage) -> None:
        self.page_stack.setCurrentWidget(self._pages[page])

    def _refresh(self) -> None:
        session = self.session
        phase = session.phase

        if self._left_quiz:
            self.status_panel.show_left_quiz()
            self._show_page(WindowPage.STATUS)
        elif phase is SessionPhase.LOADING:
            self.status_panel.show_loading()
            self._show_page(WindowPage.STATUS)
        elif phase is SessionPhase.LOAD_FAILED:
            self.status_panel.show_load_error(session.load_error or "")
            self._show_page(WindowPage.STATUS)
        elif phase is SessionPhase.NO_QUIZ:
            self.status_panel.show_no_quiz()
            self._show_page(WindowPage.STATUS)
        elif phase is SessionPhase.RULES_REVIEW and session.quiz is not None:
            self.rules_panel.show_quiz(session.quiz, session.rules_accepted, session.can_start)
            self._show_page(WindowPage.RULES)
        elif phase is SessionPhase.SUBMITTED and session.outcome is not None and session.quiz is not None:
            self.results_panel.show_summary(session.result_summary(), session.quiz.passing_score_percent)
            self._show_page(WindowPage.RESULTS)
        elif session.quiz is not None and session.tracker is not None:
            # Active, or terminating while the result is being sent.
            self.question_panel.show_question(session.quiz, session.tracker, session.is_submitting)
            self.question_panel.show_time_left(session.time_left_seconds)
            self._show_page(WindowPage.QUESTION)

    # --- Actions ---

    def _handle_start(self) -> None:
        self.session.start()

    def _handle_history(self) -> None:
        try:
            records = self.session.fetch_history()
        except ApiError as exc:
            show_error(self, HISTORY_FAILED_TITLE, str(exc))
            return
        HistoryDialog(self, records).exec()

    def _go_to_referrals(self) -> None:
        self.router.navigate(REFERRALS_ROUTE)

    def _handle_navigated(self, path: str) -> None:
        if path == REFERRALS_ROUTE:
            self._left_quiz = True
            self._refresh()

    # --- Window lifecycle ---

    def closeEvent(self, event: QCloseEvent) -> None:
        if self.session.phase is SessionPhase.ACTIVE:
            with self.session.pause_monitoring():
                leave = confirm_leave_quiz(self)
            if not leave:
                event.ignore()
                self.watcher.check_surface()
                return
            logger.warning("Candidate closed the window during an active quiz")
            self.session.report_violation(IntegritySignal.UNLOAD_ATTEMPTED)
        self.session.remove_listener(self._refresh)
        self.session.close()
        event.accept()
