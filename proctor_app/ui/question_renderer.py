"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

from proctor_app.core.markdown_math_renderer import renderer
from proctor_app.core.models import Question


def render_question_text(question: Question, number: int, font_size: int = 14) -> str:
    """Render the question text as a MathJax-enabled HTML document.

    Options are not part of the document; the window shows them as radio
    buttons so selection stays in Qt.

    Args:
        question: The question to render
        number: 1-based position of the question in the quiz
        font_size: Font size in points for the question text (default 14)

    Returns:
        HTML string ready for display in QWebEngineView
    """
    return renderer.render_full_document(
        question.text or "(No question text)",
        title=f"Question {number}",
        font_size=font_size,
    )
