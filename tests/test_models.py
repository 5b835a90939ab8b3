import pytest

from conftest import make_quiz
from proctor_app.core.models import SessionPhase


@pytest.mark.parametrize(
    "count, minutes",
    [(1, 1), (4, 1), (5, 1), (6, 2), (10, 2), (11, 3)],
)
def test_time_limit_is_a_fifth_of_a_minute_per_question_rounded_up(count, minutes):
    quiz = make_quiz(count)

    assert quiz.time_limit_minutes == minutes
    assert quiz.time_limit_seconds == minutes * 60


def test_only_submitted_and_disqualified_are_terminal():
    terminal = {phase for phase in SessionPhase if phase.is_terminal}

    assert terminal == {SessionPhase.SUBMITTED, SessionPhase.DISQUALIFIED}
