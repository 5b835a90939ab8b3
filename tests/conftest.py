from __future__ import annotations

import pytest

from proctor_app.core.api_client import ApiError
from proctor_app.core.models import AuthenticatedUser, Question, Quiz
from proctor_app.core.quiz_session import QuizSession
from proctor_app.core.schemas import BankQuestion, JobPost
from proctor_app.core.services.session_guard import InMemoryTabStore


def make_bank_questions(count, category="python"):
    return [
        BankQuestion(
            id=f"q{n}",
            question=f"Question {n}?",
            options=["A", "B", "C", "D"],
            correct_answer_index=n % 4,
            difficulty="Easy",
            category=category,
        )
        for n in range(count)
    ]


def make_quiz(count, passing=70):
    questions = [
        Question(id=f"q{n}", text=f"Question {n}?", options=["A", "B", "C", "D"], correct_option_index=n % 4)
        for n in range(count)
    ]
    return Quiz(id="job-1", title="Assessment for Tester", questions=questions, passing_score_percent=passing)


class DummyBackend:
    def __init__(self, job=None, bank=None):
        self.job = job or JobPost(id="job-1", title="Python Dev", skills=["Python"])
        self.bank = bank if bank is not None else make_bank_questions(10)
        self.bank_requests = []
        self.submitted = []
        self.fail_load = None
        self.fail_submit = None
        self.history = []

    def fetch_job_post(self, job_id, user):
        if self.fail_load is not None:
            raise ApiError(self.fail_load, status_code=500)
        return self.job

    def fetch_bank_questions(self, categories, user, limit=10):
        self.bank_requests.append((list(categories), limit))
        return list(self.bank)

    def submit_result(self, payload, user):
        self.submitted.append(payload)
        if self.fail_submit is not None:
            raise ApiError(self.fail_submit, status_code=500)

    def fetch_results_for_user(self, user):
        return list(self.history)


class DummyPresentation:
    def __init__(self):
        self.fullscreen = False
        self.calls = []

    def request_fullscreen(self):
        self.calls.append("request")
        self.fullscreen = True

    def exit_fullscreen(self):
        self.calls.append("exit")
        self.fullscreen = False

    def is_fullscreen(self):
        return self.fullscreen


class DummyWatcher:
    def __init__(self):
        self.report = None
        self.start_count = 0
        self.stop_count = 0

    @property
    def listening(self):
        return self.report is not None

    def start(self, report):
        self.start_count += 1
        self.report = report

    def stop(self):
        self.stop_count += 1
        self.report = None

    def fire(self, signal):
        if self.report is not None:
            self.report(signal)


class DummyTicker:
    def __init__(self):
        self.callback = None

    @property
    def running(self):
        return self.callback is not None

    def start(self, callback):
        self.callback = callback

    def stop(self):
        self.callback = None

    def fire(self, times=1):
        for _ in range(times):
            if self.callback is None:
                return
            self.callback()


class DummyRouter:
    def __init__(self):
        self.paths = []

    @property
    def current_path(self):
        return self.paths[-1][0] if self.paths else None

    def navigate(self, path, replace=False):
        self.paths.append((path, replace))


class DummyNotifier:
    def __init__(self):
        self.notices = []

    def notify(self, title, description, variant="default"):
        self.notices.append((title, description, variant))


@pytest.fixture
def user():
    return AuthenticatedUser(id="user-1", token="secret-token")


@pytest.fixture
def backend():
    return DummyBackend()


@pytest.fixture
def ports():
    return {
        "store": InMemoryTabStore(),
        "presentation": DummyPresentation(),
        "watcher": DummyWatcher(),
        "ticker": DummyTicker(),
        "router": DummyRouter(),
        "notifier": DummyNotifier(),
    }


@pytest.fixture
def make_session(backend, user, ports):
    def factory(api=None, session_user=user):
        return QuizSession(api=api or backend, user=session_user, **ports)

    return factory
