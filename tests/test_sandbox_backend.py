import pytest

from proctor_app.core.models import SubmissionStatus
from proctor_app.core.schemas import JobPost, SubmitResultRequest
from proctor_app.server.sandbox_backend import SandboxStore


def make_request(user_id="user-1", job_id="job-python"):
    return SubmitResultRequest(
        user_id=user_id,
        job_id=job_id,
        quiz_id="Job Specific",
        score=0,
        passed=False,
        user_answers={},
        status=SubmissionStatus.DISQUALIFIED,
    )


def test_demo_data_covers_each_quiz_source():
    store = SandboxStore.with_demo_data()

    assert store.get_job("job-python").quiz_enabled is False
    assert store.get_job("job-fixed").quiz_questions
    assert store.get_job("job-empty").skills == []
    assert store.get_job("nope") is None


def test_sampling_is_case_insensitive_and_seeded():
    first = SandboxStore.with_demo_data()
    second = SandboxStore.with_demo_data()
    first.seed = second.seed = 3

    picked = first.sample_questions(["PYTHON"], limit=5)

    assert len(picked) == 5
    assert [q.id for q in picked] == [q.id for q in second.sample_questions(["python"], limit=5)]


def test_results_are_single_attempt_per_user_and_job():
    store = SandboxStore.with_demo_data()
    store.record_result(make_request())
    store.record_result(make_request(user_id="user-2"))

    with pytest.raises(RuntimeError):
        store.record_result(make_request())

    assert len(store.results_for_user("user-1")) == 1


def test_jobs_need_an_id():
    with pytest.raises(ValueError):
        SandboxStore().add_job(JobPost(title="No id"))


def test_submit_request_accepts_camel_case_body():
    request = SubmitResultRequest.model_validate(
        {
            "userId": "u",
            "jobId": "j",
            "quizId": "Job Specific",
            "score": 100,
            "passed": True,
            "userAnswers": {"q1": 2},
            "status": "SUBMITTED",
        }
    )

    assert request.user_answers == {"q1": 2}
    assert request.status is SubmissionStatus.SUBMITTED
