"""HTTP client for the job, question-bank and quiz-result endpoints."""

from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from proctor_app.constants.network_constants import (
    API_TIMEOUT_SECONDS,
    JOB_POSTS_PATH,
    QUIZZES_PATH,
)
from proctor_app.constants.quiz_constants import BANK_SAMPLE_LIMIT
from proctor_app.core.models import (
    AuthenticatedUser,
    QuizResultRecord,
    SubmissionPayload,
)
from proctor_app.core.schemas import BankQuestion, JobPost, QuizResultOut

logger = logging.getLogger(__name__)

_BANK_QUESTIONS = TypeAdapter(list[BankQuestion])
_RESULTS = TypeAdapter(list[QuizResultOut])


class ApiError(Exception):
    """Raised when a backend call fails or returns an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProctorApiClient:
    """Thin wrapper over an ``httpx.Client`` bound to the backend base URL."""

    def __init__(self, http_client: httpx.Client) -> None:
        self._http = http_client

    @classmethod
    def from_base_url(cls, base_url: str, timeout: float = API_TIMEOUT_SECONDS) -> ProctorApiClient:
        return cls(httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout))

    def close(self) -> None:
        self._http.close()

    def fetch_job_post(self, job_id: str, user: AuthenticatedUser) -> JobPost:
        response = self._request(
            "GET", f"{JOB_POSTS_PATH}/{job_id}", user, action="fetch job details"
        )
        try:
            return JobPost.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ApiError(f"Job post {job_id} has an unexpected format: {exc}") from exc

    def fetch_bank_questions(
        self,
        categories: list[str],
        user: AuthenticatedUser,
        limit: int = BANK_SAMPLE_LIMIT,
    ) -> list[BankQuestion]:
        params: list[tuple[str, str | int]] = [("categories", c) for c in categories]
        params.append(("limit", limit))
        response = self._request(
            "GET",
            f"{QUIZZES_PATH}/questions",
            user,
            action="fetch quiz questions from database",
            params=params,
        )
        try:
            return _BANK_QUESTIONS.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise ApiError(f"Question bank returned an unexpected format: {exc}") from exc

    def submit_result(self, payload: SubmissionPayload, user: AuthenticatedUser) -> None:
        self._request(
            "POST",
            f"{QUIZZES_PATH}/submit-result",
            user,
            action="submit quiz result",
            json=payload.to_wire(),
        )

    def fetch_results_for_user(self, user: AuthenticatedUser) -> list[QuizResultRecord]:
        response = self._request(
            "GET",
            f"{QUIZZES_PATH}/results/user/{user.id}",
            user,
            action="fetch assessment history",
        )
        try:
            rows = _RESULTS.validate_python(response.json())
        except (ValueError, ValidationError) as exc:
            raise ApiError(f"Assessment history has an unexpected format: {exc}") from exc
        return [
            QuizResultRecord(
                job_id=row.job_id,
                quiz_id=row.quiz_id,
                score=row.score,
                passed=row.passed,
                status=row.status,
                submitted_at=row.submitted_at,
            )
            for row in rows
        ]

    def _request(
        self,
        method: str,
        path: str,
        user: AuthenticatedUser,
        *,
        action: str,
        **kwargs: object,
    ) -> httpx.Response:
        if not user.token:
            raise ApiError("Authentication required.")
        headers = {"Authorization": f"Bearer {user.token}"}
        try:
            response = self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("Could not %s: %s", action, exc)
            raise ApiError(f"Failed to {action}: {exc}") from exc

        if response.is_error:
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise ApiError(
                f"Failed to {action}: {response.status_code} {response.text}".rstrip(),
                status_code=response.status_code,
            )
        return response
