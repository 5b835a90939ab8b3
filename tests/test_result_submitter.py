import pytest

from conftest import DummyBackend, DummyPresentation, make_quiz
from proctor_app.constants.quiz_constants import SESSION_TOKEN_KEY
from proctor_app.core.models import AuthenticatedUser, SubmissionStatus
from proctor_app.core.services.answer_tracker import AnswerTracker
from proctor_app.core.services.result_submitter import ResultSubmitter, build_payload
from proctor_app.core.services.session_guard import InMemoryTabStore, SessionGuard

USER = AuthenticatedUser(id="user-1", token="t")


def tracker_with_correct(quiz, count):
    tracker = AnswerTracker(quiz)
    for question in quiz.questions[:count]:
        tracker.select_answer(question.id, question.correct_option_index)
    return tracker


def test_completed_payload_carries_score_and_answers():
    quiz = make_quiz(10)
    tracker = tracker_with_correct(quiz, 7)

    payload = build_payload(quiz, USER, tracker, SubmissionStatus.SUBMITTED)

    assert payload.score == 70
    assert payload.passed is True
    assert payload.user_answers == tracker.answers
    assert payload.job_id == "job-1"
    assert payload.quiz_id == "Job Specific"


def test_sixty_nine_percent_does_not_pass():
    quiz = make_quiz(100)
    tracker = tracker_with_correct(quiz, 69)

    payload = build_payload(quiz, USER, tracker, SubmissionStatus.SUBMITTED)

    assert payload.score == 69
    assert payload.passed is False


def test_disqualified_payload_forfeits_everything():
    quiz = make_quiz(10)
    tracker = tracker_with_correct(quiz, 10)

    payload = build_payload(quiz, USER, tracker, SubmissionStatus.DISQUALIFIED)

    assert payload.score == 0
    assert payload.passed is False
    assert payload.user_answers == {}


def test_wire_format_uses_camel_case():
    quiz = make_quiz(2)
    tracker = tracker_with_correct(quiz, 1)

    wire = build_payload(quiz, USER, tracker, SubmissionStatus.SUBMITTED).to_wire()

    assert wire == {
        "userId": "user-1",
        "jobId": "job-1",
        "quizId": "Job Specific",
        "score": 50,
        "passed": False,
        "userAnswers": {"q0": 0},
        "status": "SUBMITTED",
    }


def make_submitter(backend):
    store = InMemoryTabStore()
    guard = SessionGuard(store)
    guard.mint_token()
    presentation = DummyPresentation()
    presentation.fullscreen = True
    return ResultSubmitter(backend, USER, guard, presentation), store, presentation


def test_submitter_releases_session_on_success():
    backend = DummyBackend()
    submitter, store, presentation = make_submitter(backend)
    quiz = make_quiz(2)

    outcome = submitter.submit(build_payload(quiz, USER, AnswerTracker(quiz), SubmissionStatus.SUBMITTED))

    assert outcome.succeeded is True
    assert len(backend.submitted) == 1
    assert store.get(SESSION_TOKEN_KEY) is None
    assert presentation.fullscreen is False


def test_submitter_releases_session_on_failure():
    backend = DummyBackend()
    backend.fail_submit = "503 unavailable"
    submitter, store, presentation = make_submitter(backend)
    quiz = make_quiz(2)

    outcome = submitter.submit(build_payload(quiz, USER, AnswerTracker(quiz), SubmissionStatus.SUBMITTED))

    assert outcome.succeeded is False
    assert outcome.error_message == "503 unavailable"
    assert store.get(SESSION_TOKEN_KEY) is None
    assert presentation.fullscreen is False


def test_submitter_turns_unexpected_errors_into_failed_outcome(caplog):
    class BrokenBackend(DummyBackend):
        def submit_result(self, payload, user):
            raise RuntimeError("unexpected")

    submitter, store, presentation = make_submitter(BrokenBackend())
    quiz = make_quiz(2)

    outcome = submitter.submit(build_payload(quiz, USER, AnswerTracker(quiz), SubmissionStatus.SUBMITTED))

    assert outcome.succeeded is False
    assert outcome.error_message == "unexpected"
    assert store.get(SESSION_TOKEN_KEY) is None
    assert presentation.fullscreen is False
    assert "Unexpected error storing quiz result" in caplog.text


def test_submitter_refuses_second_submission():
    backend = DummyBackend()
    submitter, _, _ = make_submitter(backend)
    quiz = make_quiz(2)
    payload = build_payload(quiz, USER, AnswerTracker(quiz), SubmissionStatus.SUBMITTED)
    submitter.submit(payload)

    with pytest.raises(RuntimeError):
        submitter.submit(payload)
    assert len(backend.submitted) == 1
