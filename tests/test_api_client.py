from fastapi.testclient import TestClient
import pytest

from proctor_app.core.api_client import ApiError, ProctorApiClient
from proctor_app.core.models import AuthenticatedUser, SubmissionPayload, SubmissionStatus
from proctor_app.server.sandbox_backend import SandboxStore, create_sandbox_app

USER = AuthenticatedUser(id="user-1", token="secret-token")


@pytest.fixture
def store():
    store = SandboxStore.with_demo_data()
    store.seed = 7
    return store


@pytest.fixture
def client(store):
    http = TestClient(create_sandbox_app(store))
    yield ProctorApiClient(http)
    http.close()


def make_payload(job_id="job-python", status=SubmissionStatus.SUBMITTED):
    return SubmissionPayload(
        user_id=USER.id,
        job_id=job_id,
        quiz_id="Job Specific",
        score=80,
        passed=True,
        user_answers={"py-1": 1},
        status=status,
    )


def test_fetch_job_post_decodes_camel_case(client):
    job = client.fetch_job_post("job-fixed", USER)

    assert job.title == "Backend Intern"
    assert job.quiz_enabled is True
    assert len(job.quiz_questions) == 2
    assert job.quiz_questions[0].correct_answer_index == 1


def test_unknown_job_raises_api_error_with_status(client):
    with pytest.raises(ApiError) as excinfo:
        client.fetch_job_post("missing", USER)

    assert excinfo.value.status_code == 404
    assert str(excinfo.value).startswith("Failed to fetch job details: 404")


def test_bank_questions_are_capped_and_filtered(client):
    questions = client.fetch_bank_questions(["python"], USER, limit=10)

    assert len(questions) == 10
    assert {q.category for q in questions} == {"python"}


def test_bank_lookup_for_unknown_category_is_empty(client):
    assert client.fetch_bank_questions(["cobol"], USER) == []


def test_missing_token_fails_before_any_request(client):
    with pytest.raises(ApiError, match="Authentication required"):
        client.fetch_job_post("job-python", AuthenticatedUser(id="user-1", token=None))


def test_submit_and_fetch_history(client, store):
    client.submit_result(make_payload(), USER)

    records = client.fetch_results_for_user(USER)

    assert len(records) == 1
    record = records[0]
    assert record.job_id == "job-python"
    assert record.score == 80
    assert record.status is SubmissionStatus.SUBMITTED
    assert record.submitted_at is not None
    assert store.results[0].user_answers == {"py-1": 1}


def test_second_submission_for_same_job_is_rejected(client):
    client.submit_result(make_payload(), USER)

    with pytest.raises(ApiError) as excinfo:
        client.submit_result(make_payload(status=SubmissionStatus.DISQUALIFIED), USER)

    assert excinfo.value.status_code == 409


def test_backend_rejects_requests_without_bearer(store):
    http = TestClient(create_sandbox_app(store))

    response = http.get("/api/job-posts/job-python")

    assert response.status_code == 401
