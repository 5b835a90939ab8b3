"""Component for answering questions during an active attempt."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from proctor_app.constants.quiz_constants import OPTIONS_PER_QUESTION
from proctor_app.constants.ui_constants import (
    ANSWERED_TEMPLATE,
    BUTTON_NEXT,
    BUTTON_PREVIOUS,
    BUTTON_SUBMIT,
    BUTTON_SUBMITTING,
    PASSING_BADGE_TEMPLATE,
    PROGRESS_TEMPLATE,
    QUESTION_NUMBER_TEMPLATE,
)
from proctor_app.core.models import Quiz
from proctor_app.core.services.answer_tracker import AnswerTracker
from proctor_app.core.services.countdown import format_time
from proctor_app.styling.styles import Styles
from proctor_app.ui.question_renderer import render_question_text


class QuestionPanel(QWidget):
    """Question text, four options, navigation and the running timer."""

    def __init__(
        self,
        on_select: Callable[[int], None],
        on_previous: Callable[[], None],
        on_next: Callable[[], None],
        on_submit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_select = on_select
        self.on_previous = on_previous
        self.on_next = on_next
        self.on_submit = on_submit
        self._font_size: int = 14
        self._rendered_question_id: str | None = None
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Header: title, timer and passing badge
        header_row = QHBoxLayout()
        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        header_row.addWidget(self.title_label, stretch=1)

        self.timer_label = QLabel("", self)
        header_row.addWidget(self.timer_label)

        self.passing_label = QLabel("", self)
        header_row.addWidget(self.passing_label)
        layout.addLayout(header_row)

        # Progress
        progress_row = QHBoxLayout()
        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 100)
        self.progress_bar.setTextVisible(False)
        progress_row.addWidget(self.progress_bar, stretch=1)
        self.progress_label = QLabel("", self)
        progress_row.addWidget(self.progress_label)
        layout.addLayout(progress_row)

        number_row = QHBoxLayout()
        self.number_label = QLabel("", self)
        self.number_label.setStyleSheet("font-weight: bold;")
        number_row.addWidget(self.number_label)
        number_row.addStretch()
        self.difficulty_label = QLabel("", self)
        number_row.addWidget(self.difficulty_label)
        layout.addLayout(number_row)

        self.question_view = QWebEngineView(self)
        self.question_view.setMinimumHeight(160)
        layout.addWidget(self.question_view, stretch=1)

        self.option_group = QButtonGroup(self)
        self.option_group.setExclusive(True)
        self.option_buttons: list[QRadioButton] = []
        for index in range(OPTIONS_PER_QUESTION):
            button = QRadioButton("", self)
            self.option_group.addButton(button, index)
            self.option_buttons.append(button)
            layout.addWidget(button)
        self.option_group.idClicked.connect(self._handle_option_clicked)

        # Navigation
        nav_row = QHBoxLayout()
        self.previous_button = QPushButton(BUTTON_PREVIOUS, self)
        self.previous_button.clicked.connect(lambda: self.on_previous())
        nav_row.addWidget(self.previous_button)

        nav_row.addStretch()
        self.answered_label = QLabel("", self)
        nav_row.addWidget(self.answered_label)
        nav_row.addStretch()

        self.next_button = QPushButton(BUTTON_NEXT, self)
        self.next_button.setStyleSheet(Styles.get_primary_button_style())
        self.next_button.clicked.connect(lambda: self.on_next())
        nav_row.addWidget(self.next_button)

        self.submit_button = QPushButton(BUTTON_SUBMIT, self)
        self.submit_button.setStyleSheet(Styles.get_submit_button_style())
        self.submit_button.clicked.connect(lambda: self.on_submit())
        nav_row.addWidget(self.submit_button)
        layout.addLayout(nav_row)

    def _handle_option_clicked(self, option_index: int) -> None:
        self.on_select(option_index)

    def show_question(self, quiz: Quiz, tracker: AnswerTracker, is_submitting: bool) -> None:
        question = tracker.current_question
        number = tracker.current_index + 1
        total = tracker.question_count

        self.title_label.setText(quiz.title)
        self.passing_label.setText(PASSING_BADGE_TEMPLATE.format(percent=quiz.passing_score_percent))
        self.progress_bar.setValue(round(tracker.progress_percent))
        self.progress_label.setText(PROGRESS_TEMPLATE.format(current=number, total=total))
        self.number_label.setText(QUESTION_NUMBER_TEMPLATE.format(number=number))

        self.difficulty_label.setVisible(bool(question.difficulty))
        self.difficulty_label.setText(question.difficulty or "")
        self.difficulty_label.setStyleSheet(Styles.get_difficulty_badge_style(question.difficulty))

        if self._rendered_question_id != question.id:
            self.question_view.setHtml(render_question_text(question, number, self._font_size))
            self._rendered_question_id = question.id

        selected = tracker.selected_for(question.id)
        self.option_group.setExclusive(False)
        for index, button in enumerate(self.option_buttons):
            button.setText(f"{chr(ord('A') + index)}. {question.options[index]}")
            button.setChecked(index == selected)
            button.setEnabled(not is_submitting)
        self.option_group.setExclusive(True)

        self.previous_button.setEnabled(tracker.current_index > 0 and not is_submitting)
        self.next_button.setVisible(not tracker.is_last_question)
        self.next_button.setEnabled(not is_submitting)
        self.submit_button.setVisible(tracker.is_last_question)
        self.submit_button.setEnabled(not is_submitting)
        self.submit_button.setText(BUTTON_SUBMITTING if is_submitting else BUTTON_SUBMIT)
        self.answered_label.setText(ANSWERED_TEMPLATE.format(answered=tracker.answered_count, total=total))

    def show_time_left(self, seconds_left: int) -> None:
        self.timer_label.setText(format_time(seconds_left))
        self.timer_label.setStyleSheet(Styles.get_timer_badge_style(seconds_left))
