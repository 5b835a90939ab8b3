"""Service that packages the attempt outcome and sends it exactly once."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Protocol

from proctor_app.core.api_client import ApiError
from proctor_app.core.models import (
    AuthenticatedUser,
    Quiz,
    SubmissionPayload,
    SubmissionStatus,
)
from proctor_app.core.services.answer_tracker import AnswerTracker
from proctor_app.core.services.session_guard import SessionGuard

logger = logging.getLogger(__name__)


class ResultSink(Protocol):
    def submit_result(self, payload: SubmissionPayload, user: AuthenticatedUser) -> None: ...


class Presentation(Protocol):
    """Fullscreen control of the quiz surface."""

    def request_fullscreen(self) -> None: ...

    def exit_fullscreen(self) -> None: ...

    def is_fullscreen(self) -> bool: ...


@dataclass(slots=True, frozen=True)
class SubmissionOutcome:
    payload: SubmissionPayload
    succeeded: bool
    error_message: str | None = None


def build_payload(
    quiz: Quiz,
    user: AuthenticatedUser,
    tracker: AnswerTracker,
    status: SubmissionStatus,
) -> SubmissionPayload:
    """Disqualification forfeits all credit regardless of the answers given."""
    if status is SubmissionStatus.DISQUALIFIED:
        score = 0
        passed = False
        answers: dict[str, int] = {}
    else:
        score = tracker.rounded_score()
        passed = score >= quiz.passing_score_percent
        answers = tracker.answers

    return SubmissionPayload(
        user_id=user.id,
        job_id=quiz.id,
        quiz_id=quiz.category,
        score=score,
        passed=passed,
        user_answers=answers,
        status=status,
    )


class ResultSubmitter:
    """Sends one payload, then tears the session down whether or not it landed."""

    def __init__(
        self,
        sink: ResultSink,
        user: AuthenticatedUser,
        guard: SessionGuard,
        presentation: Presentation,
    ) -> None:
        self._sink = sink
        self._user = user
        self._guard = guard
        self._presentation = presentation
        self._sent: bool = False

    def submit(self, payload: SubmissionPayload) -> SubmissionOutcome:
        if self._sent:
            raise RuntimeError("Quiz result has already been submitted for this session.")
        self._sent = True

        try:
            self._sink.submit_result(payload, self._user)
        except ApiError as exc:
            logger.error("Quiz result for job %s was not stored: %s", payload.job_id, exc)
            outcome = SubmissionOutcome(payload=payload, succeeded=False, error_message=str(exc))
        except Exception as exc:
            logger.exception("Unexpected error storing quiz result for job %s", payload.job_id)
            outcome = SubmissionOutcome(payload=payload, succeeded=False, error_message=str(exc) or None)
        else:
            logger.info(
                "Quiz result stored for job %s: %s, score %d",
                payload.job_id,
                payload.status.value,
                payload.score,
            )
            outcome = SubmissionOutcome(payload=payload, succeeded=True)
        finally:
            self._release_session()
        return outcome

    def _release_session(self) -> None:
        self._guard.clear()
        if self._presentation.is_fullscreen():
            self._presentation.exit_fullscreen()
