"""In-memory FastAPI backend serving the endpoints the quiz client consumes.

Used for local runs (``app_main.py --sandbox``) and by the test-suite. It
implements just enough behaviour to exercise the client: bearer-token checks,
job lookup, category sampling from a question bank and a single-attempt lock
on stored results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
import random
from threading import Lock, Thread
import time
from uuid import uuid4

from fastapi import Depends, FastAPI, Header, HTTPException, Query
import uvicorn

from proctor_app.constants.network_constants import SANDBOX_HOST, SANDBOX_PORT
from proctor_app.constants.quiz_constants import BANK_SAMPLE_LIMIT
from proctor_app.core.schemas import (
    BankQuestion,
    JobPost,
    QuizResultOut,
    SubmitResultRequest,
)

logger = logging.getLogger(__name__)


@dataclass
class SandboxStore:
    """Job posts, the tagged question bank and recorded results."""

    job_posts: dict[str, JobPost] = field(default_factory=dict)
    question_bank: list[BankQuestion] = field(default_factory=list)
    results: list[QuizResultOut] = field(default_factory=list)
    seed: int | None = None
    _lock: Lock = field(default_factory=Lock, repr=False)

    def add_job(self, job: JobPost) -> None:
        if job.id is None:
            raise ValueError("Sandbox job posts need an id.")
        with self._lock:
            self.job_posts[job.id] = job

    def get_job(self, job_id: str) -> JobPost | None:
        with self._lock:
            return self.job_posts.get(job_id)

    def sample_questions(self, categories: list[str], limit: int) -> list[BankQuestion]:
        wanted = {category.lower() for category in categories}
        with self._lock:
            matching = [q for q in self.question_bank if (q.category or "").lower() in wanted]
        rng = random.Random(self.seed)
        rng.shuffle(matching)
        return matching[:limit]

    def record_result(self, request: SubmitResultRequest) -> QuizResultOut:
        with self._lock:
            if any(r.user_id == request.user_id and r.job_id == request.job_id for r in self.results):
                raise RuntimeError("A result for this quiz has already been recorded.")
            stored = QuizResultOut(
                id=uuid4().hex,
                submitted_at=datetime.now(timezone.utc),
                **request.model_dump(),
            )
            self.results.append(stored)
            return stored

    def results_for_user(self, user_id: str) -> list[QuizResultOut]:
        with self._lock:
            return [r for r in self.results if r.user_id == user_id]

    @classmethod
    def with_demo_data(cls) -> SandboxStore:
        store = cls()
        store.question_bank = [
            BankQuestion(
                id=f"py-{n}",
                question=text,
                options=options,
                correct_answer_index=answer,
                difficulty=difficulty,
                category="python",
            )
            for n, (text, options, answer, difficulty) in enumerate(_PYTHON_BANK, start=1)
        ]
        store.add_job(
            JobPost(
                id="job-python",
                title="Junior Python Developer",
                skills=["Python"],
                quiz_enabled=False,
            )
        )
        store.add_job(
            JobPost(
                id="job-fixed",
                title="Backend Intern",
                skills=["SQL"],
                quiz_enabled=True,
                quiz_questions=[
                    BankQuestion(
                        question="Which SQL clause filters grouped rows?",
                        options=["WHERE", "HAVING", "ORDER BY", "LIMIT"],
                        correct_answer_index=1,
                        difficulty="Medium",
                    ),
                    BankQuestion(
                        question="Which statement removes all rows but keeps the table?",
                        options=["DROP", "DELETE FROM t WHERE 0", "TRUNCATE", "ALTER"],
                        correct_answer_index=2,
                        difficulty="Easy",
                    ),
                ],
            )
        )
        store.add_job(JobPost(id="job-empty", title="Office Manager", skills=[]))
        return store


_PYTHON_BANK: list[tuple[str, list[str], int, str]] = [
    ("What does `len([1, 2, 3])` return?", ["2", "3", "4", "An error"], 1, "Easy"),
    ("Which type is immutable?", ["list", "dict", "set", "tuple"], 3, "Easy"),
    ("What keyword defines a generator?", ["return", "yield", "async", "lambda"], 1, "Easy"),
    ("What is `3 // 2`?", ["1", "1.5", "2", "0"], 0, "Easy"),
    ("Which module provides `dataclass`?", ["typing", "abc", "dataclasses", "attrs"], 2, "Medium"),
    ("What does `__slots__` restrict?", ["Methods", "Instance attributes", "Imports", "Subclasses"], 1, "Hard"),
    ("Which call returns a shallow copy of list `a`?", ["a.copy()", "a.clone()", "copy(a, deep=True)", "a[:-1]"], 0, "Medium"),
    ("What is the result of `bool('')`?", ["True", "False", "None", "An error"], 1, "Easy"),
    ("Which statement handles exceptions?", ["try/except", "catch", "rescue", "on error"], 0, "Easy"),
    ("What does `enumerate` yield?", ["Values", "Indexes", "(index, value) pairs", "Keys"], 2, "Medium"),
    ("Which operator merges two dicts in Python 3.9+?", ["+", "&", "|", "^"], 2, "Medium"),
]


def _get_store_dependency(store: SandboxStore):
    def dependency() -> SandboxStore:
        return store

    return dependency


def _require_bearer(authorization: str | None = Header(default=None)) -> str:
    if not authorization or not authorization.startswith("Bearer ") or not authorization[7:].strip():
        raise HTTPException(status_code=401, detail="Missing bearer token")
    return authorization[7:].strip()


def create_sandbox_app(store: SandboxStore) -> FastAPI:
    """Create a FastAPI application backed by ``store``."""
    app = FastAPI(title="ProctorQt Sandbox API", version="0.1.0")
    store_dep = _get_store_dependency(store)

    @app.get("/api/job-posts/{job_id}", response_model=JobPost)
    def get_job_post(
        job_id: str,
        _token: str = Depends(_require_bearer),
        sandbox: SandboxStore = Depends(store_dep),
    ) -> JobPost:
        job = sandbox.get_job(job_id)
        if job is None:
            raise HTTPException(status_code=404, detail=f"Job post {job_id} not found")
        return job

    @app.get("/api/quizzes/questions", response_model=list[BankQuestion])
    def get_questions(
        categories: list[str] | None = Query(default=None),
        limit: int = Query(default=BANK_SAMPLE_LIMIT, ge=1, le=50),
        _token: str = Depends(_require_bearer),
        sandbox: SandboxStore = Depends(store_dep),
    ) -> list[BankQuestion]:
        return sandbox.sample_questions(categories or [], limit)

    @app.post("/api/quizzes/submit-result", status_code=201, response_model=QuizResultOut)
    def submit_result(
        payload: SubmitResultRequest,
        _token: str = Depends(_require_bearer),
        sandbox: SandboxStore = Depends(store_dep),
    ) -> QuizResultOut:
        try:
            stored = sandbox.record_result(payload)
        except RuntimeError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        logger.info(
            "Recorded %s result for user %s on job %s", payload.status.value, payload.user_id, payload.job_id
        )
        return stored

    @app.get("/api/quizzes/results/user/{user_id}", response_model=list[QuizResultOut])
    def get_results_for_user(
        user_id: str,
        _token: str = Depends(_require_bearer),
        sandbox: SandboxStore = Depends(store_dep),
    ) -> list[QuizResultOut]:
        return sandbox.results_for_user(user_id)

    return app


def start_sandbox_server(
    store: SandboxStore,
    host: str = SANDBOX_HOST,
    port: int = SANDBOX_PORT,
    startup_timeout: float = 5.0,
) -> Thread:
    """Start the sandbox backend in a background daemon thread.

    Blocks until uvicorn reports it is serving, or ``startup_timeout`` passes,
    so the window's first request does not race the server.
    """
    app = create_sandbox_app(store)
    config = uvicorn.Config(app=app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)

    def run_server() -> None:
        server.run()

    thread = Thread(target=run_server, name="SandboxApiServer", daemon=True)
    thread.start()
    deadline = time.monotonic() + startup_timeout
    while not server.started and thread.is_alive() and time.monotonic() < deadline:
        time.sleep(0.05)
    if not server.started:
        logger.warning("Sandbox server did not report startup within %.1fs", startup_timeout)
    return thread
