"""Domain models for the proctored quiz client."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
import math

from proctor_app.constants.quiz_constants import (
    MINUTES_PER_QUESTION,
    PASSING_SCORE_PERCENT,
    QUIZ_CATEGORY,
    QUIZ_DESCRIPTION,
)


class SessionPhase(Enum):
    """Phases of one quiz attempt."""

    LOADING = auto()
    LOAD_FAILED = auto()
    NO_QUIZ = auto()
    RULES_REVIEW = auto()
    ACTIVE = auto()
    SUBMITTED = auto()
    DISQUALIFIED = auto()

    @property
    def is_terminal(self) -> bool:
        return self in (SessionPhase.SUBMITTED, SessionPhase.DISQUALIFIED)


class SubmissionStatus(str, Enum):
    """Status tag sent with a quiz result."""

    SUBMITTED = "SUBMITTED"
    DISQUALIFIED = "DISQUALIFIED"


@dataclass(slots=True, frozen=True)
class AuthenticatedUser:
    """The learner taking the quiz, as handed over by the auth layer."""

    id: str
    token: str | None


@dataclass(slots=True, frozen=True)
class Question:
    """Multiple-choice question with exactly four options."""

    id: str
    text: str
    options: list[str]
    correct_option_index: int
    difficulty: str | None = None
    category: str | None = None
    explanation: str | None = None


@dataclass(slots=True, frozen=True)
class Quiz:
    """Quiz assembled from a job post. Immutable once loaded."""

    id: str
    title: str
    questions: list[Question]
    description: str = QUIZ_DESCRIPTION
    passing_score_percent: int = PASSING_SCORE_PERCENT
    category: str = QUIZ_CATEGORY
    job_title: str | None = None
    job_skills: list[str] = field(default_factory=list)

    @property
    def question_count(self) -> int:
        return len(self.questions)

    @property
    def time_limit_minutes(self) -> int:
        return math.ceil(self.question_count * MINUTES_PER_QUESTION)

    @property
    def time_limit_seconds(self) -> int:
        return self.time_limit_minutes * 60


@dataclass(slots=True, frozen=True)
class SubmissionPayload:
    """Outcome of one attempt, built once at termination."""

    user_id: str
    job_id: str
    quiz_id: str
    score: int
    passed: bool
    user_answers: dict[str, int]
    status: SubmissionStatus

    def to_wire(self) -> dict[str, object]:
        """Return the JSON body expected by the results endpoint."""
        return {
            "userId": self.user_id,
            "jobId": self.job_id,
            "quizId": self.quiz_id,
            "score": self.score,
            "passed": self.passed,
            "userAnswers": dict(self.user_answers),
            "status": self.status.value,
        }


@dataclass(slots=True, frozen=True)
class ResultSummary:
    """Counts shown on the results screen."""

    correct: int
    incorrect: int
    skipped: int
    score_percent: float
    passed: bool


@dataclass(slots=True, frozen=True)
class QuizResultRecord:
    """A result previously stored by the backend."""

    job_id: str
    quiz_id: str
    score: int
    passed: bool
    status: SubmissionStatus
    submitted_at: datetime | None = None
