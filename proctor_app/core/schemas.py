"""Wire schemas shared by the API client and the sandbox backend.

The backend speaks camelCase JSON; the models expose snake_case attributes and
accept either spelling on input.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from proctor_app.core.models import SubmissionStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BankQuestion(_CamelModel):
    """Question as stored on a job post or in the question bank."""

    id: str | None = None
    question: str
    options: list[str]
    correct_answer_index: int
    difficulty: str | None = None
    category: str | None = None
    explanation: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        if value is None or value == "":
            return None
        return str(value)


class JobPost(_CamelModel):
    """The subset of a job post the quiz needs."""

    id: str | None = None
    title: str = ""
    skills: list[str] | None = None
    quiz_enabled: bool = False
    quiz_questions: list[BankQuestion] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        return None if value is None else str(value)


class SubmitResultRequest(_CamelModel):
    """Body of ``POST /api/quizzes/submit-result``."""

    user_id: str
    job_id: str
    quiz_id: str
    score: int = Field(ge=0, le=100)
    passed: bool
    user_answers: dict[str, int]
    status: SubmissionStatus


class QuizResultOut(_CamelModel):
    """A stored result as returned by the results endpoints."""

    id: str | None = None
    user_id: str
    job_id: str
    quiz_id: str
    score: int
    passed: bool
    status: SubmissionStatus
    submitted_at: datetime | None = None
