"""Qt UI components for the proctored quiz window."""

from .dialog_helpers import (
    confirm_leave_quiz,
    show_error,
    show_info,
)
from .question_renderer import render_question_text
from .quiz_window import QuizWindow

__all__ = [
    "QuizWindow",
    "confirm_leave_quiz",
    "show_error",
    "show_info",
    "render_question_text",
]
