import pytest

from conftest import make_quiz
from proctor_app.core.services.answer_tracker import AnswerTracker, round_half_up


def test_empty_quiz_is_rejected():
    with pytest.raises(ValueError):
        AnswerTracker(make_quiz(0))


def test_navigation_is_clamped_to_quiz_bounds():
    tracker = AnswerTracker(make_quiz(3))

    assert tracker.previous() is False
    assert tracker.next() is True
    assert tracker.next() is True
    assert tracker.is_last_question is True
    assert tracker.next() is False
    assert tracker.current_index == 2
    assert tracker.progress_percent == pytest.approx(100.0)


def test_reselecting_replaces_previous_answer():
    tracker = AnswerTracker(make_quiz(2))

    tracker.select_current(1)
    tracker.select_current(3)

    assert tracker.answers == {"q0": 3}
    assert tracker.answered_count == 1


def test_invalid_selections_raise():
    tracker = AnswerTracker(make_quiz(2))

    with pytest.raises(ValueError):
        tracker.select_answer("q0", 4)
    with pytest.raises(ValueError):
        tracker.select_answer("missing", 0)


def test_answers_property_is_a_copy():
    tracker = AnswerTracker(make_quiz(2))
    tracker.select_current(0)

    tracker.answers["q1"] = 2

    assert tracker.selected_for("q1") is None


def test_summary_counts_correct_incorrect_and_skipped():
    quiz = make_quiz(4)
    tracker = AnswerTracker(quiz)
    tracker.select_answer("q0", 0)  # correct
    tracker.select_answer("q1", 1)  # correct
    tracker.select_answer("q2", 0)  # wrong

    summary = tracker.summary()

    assert (summary.correct, summary.incorrect, summary.skipped) == (2, 1, 1)
    assert summary.score_percent == pytest.approx(50.0)
    assert summary.passed is False


def test_scores_round_half_up():
    quiz = make_quiz(8, passing=63)
    tracker = AnswerTracker(quiz)
    for question in quiz.questions[:5]:
        tracker.select_answer(question.id, question.correct_option_index)

    assert tracker.score_percent() == pytest.approx(62.5)
    assert tracker.rounded_score() == 63
    assert tracker.summary().passed is True


@pytest.mark.parametrize("value, expected", [(0.0, 0), (12.5, 13), (69.4, 69), (69.5, 70), (100.0, 100)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
