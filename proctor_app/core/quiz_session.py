"""State machine for one proctored quiz attempt.

``QuizSession`` is the facade the UI talks to. It owns the phase and delegates
to the loader, the session guard, the answer tracker, the countdown, the
integrity monitor and the result submitter. Surface concerns (fullscreen,
focus listeners, the one-second ticker, navigation, notices) arrive as small
injected ports so the whole flow runs without a display.

Phases::

    LOADING -> RULES_REVIEW -> ACTIVE -> SUBMITTED | DISQUALIFIED
    LOADING -> NO_QUIZ
    LOADING -> LOAD_FAILED -> (retry) LOADING

Manual submission, timer expiry and integrity violations all end in
``_terminate``, which runs at most once per session.
"""

from __future__ import annotations

import logging
from typing import Callable, ContextManager, Protocol

from proctor_app.constants.quiz_constants import REFERRALS_ROUTE
from proctor_app.constants.ui_constants import (
    DISQUALIFIED_MESSAGE,
    DISQUALIFIED_TITLE,
    SUBMISSION_FAILED_TITLE,
)
from proctor_app.core.api_client import ApiError
from proctor_app.core.models import (
    AuthenticatedUser,
    Quiz,
    QuizResultRecord,
    ResultSummary,
    SessionPhase,
    SubmissionPayload,
    SubmissionStatus,
)
from proctor_app.core.quiz_loader import (
    NoQuizAvailableError,
    QuizLoadError,
    QuizSource,
    load_quiz,
)
from proctor_app.core.services.answer_tracker import AnswerTracker
from proctor_app.core.services.countdown import Countdown, Ticker
from proctor_app.core.services.integrity_monitor import (
    IntegrityMonitor,
    IntegritySignal,
    SurfaceWatcher,
)
from proctor_app.core.services.result_submitter import (
    Presentation,
    ResultSubmitter,
    SubmissionOutcome,
    build_payload,
)
from proctor_app.core.services.session_guard import (
    Notifier,
    QuizRoute,
    Router,
    SessionGuard,
    TabSessionStore,
)

logger = logging.getLogger(__name__)


class SessionTransitionError(Exception):
    """Raised when an operation is not allowed in the current phase."""


class QuizBackend(QuizSource, Protocol):
    def submit_result(self, payload: SubmissionPayload, user: AuthenticatedUser) -> None: ...

    def fetch_results_for_user(self, user: AuthenticatedUser) -> list[QuizResultRecord]: ...


class QuizSession:
    """One attempt at one job's quiz, from loading to the submitted result."""

    def __init__(
        self,
        *,
        api: QuizBackend,
        user: AuthenticatedUser | None,
        store: TabSessionStore,
        presentation: Presentation,
        watcher: SurfaceWatcher,
        ticker: Ticker,
        router: Router,
        notifier: Notifier,
    ) -> None:
        self._api = api
        self._user = user
        self._presentation = presentation
        self._ticker = ticker
        self._router = router
        self._notifier = notifier

        self._guard = SessionGuard(store)
        self._monitor = IntegrityMonitor(watcher, self._handle_violation)
        self._submitter = ResultSubmitter(
            api, user or AuthenticatedUser(id="", token=None), self._guard, presentation
        )

        self._phase: SessionPhase = SessionPhase.LOADING
        self._route: QuizRoute | None = None
        self._quiz: Quiz | None = None
        self._tracker: AnswerTracker | None = None
        self._countdown: Countdown | None = None
        self._load_error: str | None = None
        self._rules_accepted: bool = False
        self._terminating: bool = False
        self._is_submitting: bool = False
        self._termination_reason: str | None = None
        self._outcome: SubmissionOutcome | None = None
        self._listeners: list[Callable[[], None]] = []

    # --- Observation ---

    def add_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener()

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def route(self) -> QuizRoute | None:
        return self._route

    @property
    def quiz(self) -> Quiz | None:
        return self._quiz

    @property
    def tracker(self) -> AnswerTracker | None:
        return self._tracker

    @property
    def load_error(self) -> str | None:
        return self._load_error

    @property
    def rules_accepted(self) -> bool:
        return self._rules_accepted

    @property
    def can_start(self) -> bool:
        return self._phase is SessionPhase.RULES_REVIEW and self._rules_accepted

    @property
    def is_submitting(self) -> bool:
        return self._is_submitting

    @property
    def time_left_seconds(self) -> int:
        return self._countdown.remaining_seconds if self._countdown else 0

    @property
    def monitor_armed(self) -> bool:
        return self._monitor.armed

    @property
    def termination_reason(self) -> str | None:
        return self._termination_reason

    @property
    def outcome(self) -> SubmissionOutcome | None:
        return self._outcome

    def result_summary(self) -> ResultSummary:
        if self._phase is not SessionPhase.SUBMITTED or self._tracker is None:
            raise SessionTransitionError("Results are only available after submission.")
        return self._tracker.summary()

    # --- Loading ---

    def mount(self, route: QuizRoute) -> bool:
        """Validate ``route`` against this window's token and load the quiz."""
        self._route = route
        if not self._guard.enforce(route, self._router, self._notifier):
            return False
        if self._quiz is None:
            self.load()
        return True

    def load(self) -> None:
        if self._phase not in (SessionPhase.LOADING, SessionPhase.LOAD_FAILED):
            raise SessionTransitionError(f"Cannot load a quiz while {self._phase.name}.")
        if self._route is None:
            raise SessionTransitionError("Mount a quiz route before loading.")

        self._set_phase(SessionPhase.LOADING)
        self._load_error = None
        try:
            quiz = load_quiz(self._api, self._route.job_id, self._user)
        except NoQuizAvailableError as exc:
            logger.info("No quiz for job %s: %s", self._route.job_id, exc)
            self._load_error = str(exc)
            self._set_phase(SessionPhase.NO_QUIZ)
            return
        except QuizLoadError as exc:
            logger.error("Loading quiz for job %s failed: %s", self._route.job_id, exc)
            self._load_error = str(exc)
            self._set_phase(SessionPhase.LOAD_FAILED)
            return

        self._quiz = quiz
        self._tracker = AnswerTracker(quiz)
        self._countdown = Countdown(quiz.time_limit_seconds)
        self._set_phase(SessionPhase.RULES_REVIEW)

    def retry(self) -> None:
        if self._phase is not SessionPhase.LOAD_FAILED:
            raise SessionTransitionError("Retry is only possible after a failed load.")
        self.load()

    # --- Rules review ---

    def set_rules_accepted(self, accepted: bool) -> None:
        if self._phase is not SessionPhase.RULES_REVIEW:
            raise SessionTransitionError("Rules can only be accepted before the quiz starts.")
        self._rules_accepted = accepted
        self._emit()

    def start(self) -> str:
        """Enter the active phase and return the minted session token."""
        if self._phase is not SessionPhase.RULES_REVIEW:
            raise SessionTransitionError(f"Cannot start a quiz while {self._phase.name}.")
        if not self._rules_accepted:
            raise SessionTransitionError("The quiz rules must be accepted before starting.")
        assert self._route is not None

        self._presentation.request_fullscreen()
        token = self._guard.mint_token()
        self._route = self._route.with_session(token)
        self._router.navigate(self._route.path, replace=True)

        self._set_phase(SessionPhase.ACTIVE)
        self._monitor.arm()
        self._ticker.start(self.tick)
        return token

    # --- Active quiz ---

    def select_answer(self, question_id: str, option_index: int) -> bool:
        if self._phase is not SessionPhase.ACTIVE or self._tracker is None:
            return False
        self._tracker.select_answer(question_id, option_index)
        self._emit()
        return True

    def select_current_answer(self, option_index: int) -> bool:
        if self._tracker is None:
            return False
        return self.select_answer(self._tracker.current_question.id, option_index)

    def next(self) -> bool:
        if self._phase is not SessionPhase.ACTIVE or self._tracker is None:
            return False
        moved = self._tracker.next()
        self._emit()
        return moved

    def previous(self) -> bool:
        if self._phase is not SessionPhase.ACTIVE or self._tracker is None:
            return False
        moved = self._tracker.previous()
        self._emit()
        return moved

    def tick(self) -> None:
        if self._phase is not SessionPhase.ACTIVE or self._countdown is None:
            return
        if self._countdown.tick():
            logger.info("Time limit reached; submitting automatically")
            self._terminate(SubmissionStatus.SUBMITTED, "time limit reached")
        else:
            self._emit()

    def report_violation(self, signal: IntegritySignal) -> None:
        self._monitor.report(signal)

    def pause_monitoring(self) -> ContextManager[None]:
        """Context manager holding violations while the app shows its own prompt."""
        return self._monitor.paused()

    def submit(self) -> SubmissionOutcome | None:
        if self._terminating or self._phase.is_terminal:
            return None
        if self._phase is not SessionPhase.ACTIVE:
            raise SessionTransitionError(f"Cannot submit a quiz while {self._phase.name}.")
        return self._terminate(SubmissionStatus.SUBMITTED, "submitted by candidate")

    def close(self) -> None:
        """Release the ticker and surface listeners when the window goes away."""
        self._monitor.disarm()
        self._ticker.stop()

    # --- History ---

    def fetch_history(self) -> list[QuizResultRecord]:
        if self._user is None:
            raise ApiError("Authentication required.")
        return self._api.fetch_results_for_user(self._user)

    # --- Termination ---

    def _handle_violation(self, signal: IntegritySignal) -> None:
        self._terminate(SubmissionStatus.DISQUALIFIED, signal.name.lower())

    def _terminate(self, status: SubmissionStatus, reason: str) -> SubmissionOutcome | None:
        if self._terminating:
            return None
        self._terminating = True
        assert self._quiz is not None and self._tracker is not None and self._user is not None

        self._monitor.disarm()
        self._ticker.stop()
        self._termination_reason = reason
        disqualified = status is SubmissionStatus.DISQUALIFIED
        self._set_phase(SessionPhase.DISQUALIFIED if disqualified else SessionPhase.SUBMITTED)
        logger.info("Quiz for job %s ended: %s (%s)", self._quiz.id, status.value, reason)

        if self._presentation.is_fullscreen():
            self._presentation.exit_fullscreen()
        if disqualified:
            self._notifier.notify(DISQUALIFIED_TITLE, DISQUALIFIED_MESSAGE, "destructive")

        payload = build_payload(self._quiz, self._user, self._tracker, status)
        self._is_submitting = True
        self._emit()
        try:
            outcome = self._submitter.submit(payload)
        finally:
            self._is_submitting = False
        self._outcome = outcome

        if not outcome.succeeded:
            self._notifier.notify(
                SUBMISSION_FAILED_TITLE,
                outcome.error_message or "An unexpected error occurred.",
                "destructive",
            )
            self._router.navigate(REFERRALS_ROUTE, replace=True)
        elif disqualified:
            self._router.navigate(REFERRALS_ROUTE, replace=True)
        self._emit()
        return outcome

    def _set_phase(self, phase: SessionPhase) -> None:
        if phase is self._phase:
            self._emit()
            return
        logger.info("Quiz phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase
        self._emit()
