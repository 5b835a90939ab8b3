"""Resolve a job post into a quiz.

A job either carries its own fixed question set (``quizEnabled`` with
``quizQuestions``), or declares required skills, in which case questions are
sampled from the bank by category. Anything else means no quiz is available.
"""

from __future__ import annotations

import logging
from typing import Protocol
from uuid import uuid4

from proctor_app.constants.quiz_constants import BANK_SAMPLE_LIMIT, OPTIONS_PER_QUESTION
from proctor_app.core.api_client import ApiError
from proctor_app.core.models import AuthenticatedUser, Question, Quiz
from proctor_app.core.schemas import BankQuestion, JobPost

logger = logging.getLogger(__name__)


class QuizLoadError(Exception):
    """Raised when a quiz cannot be built for a job."""


class NoQuizAvailableError(QuizLoadError):
    """Raised when the job has no questions to offer. Not a hard failure."""


class QuizSource(Protocol):
    def fetch_job_post(self, job_id: str, user: AuthenticatedUser) -> JobPost: ...

    def fetch_bank_questions(
        self, categories: list[str], user: AuthenticatedUser, limit: int = ...
    ) -> list[BankQuestion]: ...


def load_quiz(source: QuizSource, job_id: str, user: AuthenticatedUser | None) -> Quiz:
    if user is None or not user.token or not job_id:
        raise QuizLoadError("Authentication required to take the quiz.")

    try:
        job = source.fetch_job_post(job_id, user)
        raw_questions = _select_questions(source, job, user)
    except ApiError as exc:
        raise QuizLoadError(str(exc)) from exc

    if not raw_questions:
        skills = ", ".join(job.skills or [])
        raise NoQuizAvailableError(
            f"No quiz questions found for skills: {skills}. Please contact support."
        )

    questions = [_to_question(raw) for raw in raw_questions]
    quiz = Quiz(
        id=job_id,
        title=f"Assessment for {job.title}",
        questions=questions,
        job_title=job.title,
        job_skills=list(job.skills or []),
    )
    logger.info(
        "Loaded quiz for job %s: %d questions, %d minute(s)",
        job_id,
        quiz.question_count,
        quiz.time_limit_minutes,
    )
    return quiz


def _select_questions(
    source: QuizSource, job: JobPost, user: AuthenticatedUser
) -> list[BankQuestion]:
    if job.quiz_enabled and job.quiz_questions:
        return list(job.quiz_questions)
    if not job.quiz_enabled and job.skills:
        categories = [skill.lower() for skill in job.skills]
        return source.fetch_bank_questions(categories, user, limit=BANK_SAMPLE_LIMIT)
    raise NoQuizAvailableError("No quiz questions or relevant skills found for this job.")


def _to_question(raw: BankQuestion) -> Question:
    text = raw.question.strip()
    if not text:
        raise QuizLoadError("Question text must not be empty.")
    if len(raw.options) != OPTIONS_PER_QUESTION:
        raise QuizLoadError(
            f"Question '{text[:40]}' must have exactly {OPTIONS_PER_QUESTION} options."
        )
    if not 0 <= raw.correct_answer_index < OPTIONS_PER_QUESTION:
        raise QuizLoadError(f"Question '{text[:40]}' has an invalid correct answer index.")

    return Question(
        id=raw.id or uuid4().hex,
        text=text,
        options=list(raw.options),
        correct_option_index=raw.correct_answer_index,
        difficulty=raw.difficulty,
        category=raw.category,
        explanation=raw.explanation,
    )
