"""Service for tracking selected answers and the current question."""

from __future__ import annotations

import math

from proctor_app.constants.quiz_constants import OPTIONS_PER_QUESTION
from proctor_app.core.models import Question, Quiz, ResultSummary


def round_half_up(value: float) -> int:
    """Round .5 up for non-negative scores (62.5 -> 63)."""
    return math.floor(value + 0.5)


class AnswerTracker:
    """Holds the candidate's answers and the question cursor for one quiz."""

    def __init__(self, quiz: Quiz) -> None:
        if not quiz.questions:
            raise ValueError("Quiz must contain at least one question.")
        self._quiz = quiz
        self._question_ids = {question.id for question in quiz.questions}
        self._answers: dict[str, int] = {}
        self._current_index: int = 0

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def question_count(self) -> int:
        return self._quiz.question_count

    @property
    def current_question(self) -> Question:
        return self._quiz.questions[self._current_index]

    @property
    def is_last_question(self) -> bool:
        return self._current_index == self.question_count - 1

    @property
    def progress(self) -> float:
        return (self._current_index + 1) / self.question_count

    @property
    def progress_percent(self) -> float:
        return self.progress * 100

    @property
    def answered_count(self) -> int:
        return len(self._answers)

    @property
    def answers(self) -> dict[str, int]:
        return dict(self._answers)

    def select_answer(self, question_id: str, option_index: int) -> None:
        if not 0 <= option_index < OPTIONS_PER_QUESTION:
            raise ValueError(f"Option index must be between 0 and {OPTIONS_PER_QUESTION - 1}.")
        if question_id not in self._question_ids:
            raise ValueError(f"Unknown question id '{question_id}'.")
        self._answers[question_id] = option_index

    def select_current(self, option_index: int) -> None:
        self.select_answer(self.current_question.id, option_index)

    def selected_for(self, question_id: str) -> int | None:
        return self._answers.get(question_id)

    def next(self) -> bool:
        """Advance one question. Returns False when already on the last one."""
        if self._current_index >= self.question_count - 1:
            return False
        self._current_index += 1
        return True

    def previous(self) -> bool:
        if self._current_index <= 0:
            return False
        self._current_index -= 1
        return True

    def correct_count(self) -> int:
        return sum(
            1
            for question in self._quiz.questions
            if self._answers.get(question.id) == question.correct_option_index
        )

    def score_percent(self) -> float:
        return self.correct_count() / self.question_count * 100

    def rounded_score(self) -> int:
        return round_half_up(self.score_percent())

    def summary(self) -> ResultSummary:
        correct = self.correct_count()
        skipped = sum(1 for q in self._quiz.questions if q.id not in self._answers)
        score = self.score_percent()
        return ResultSummary(
            correct=correct,
            incorrect=self.question_count - correct - skipped,
            skipped=skipped,
            score_percent=score,
            passed=round_half_up(score) >= self._quiz.passing_score_percent,
        )
