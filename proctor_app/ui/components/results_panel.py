"""Component for the results screen after a submitted attempt."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from proctor_app.constants.ui_constants import (
    BUTTON_BACK_TO_REFERRALS,
    BUTTON_HISTORY,
    RESULT_COMPLETED_TITLE,
    RESULT_COUNTS_TEMPLATE,
    RESULT_FAILED_TEMPLATE,
    RESULT_PASSED_MESSAGE,
    RESULT_PASSED_TITLE,
    RESULT_SCORE_TEMPLATE,
)
from proctor_app.core.models import ResultSummary
from proctor_app.core.services.answer_tracker import round_half_up
from proctor_app.styling.styles import Styles


class ResultsPanel(QWidget):
    """Score, pass or fail message and answer counts."""

    def __init__(
        self,
        on_back: Callable[[], None],
        on_history: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_back = on_back
        self.on_history = on_history
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.message_label)

        self.counts_label = QLabel("", self)
        self.counts_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.counts_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.history_button = QPushButton(BUTTON_HISTORY, self)
        self.history_button.clicked.connect(lambda: self.on_history())
        button_row.addWidget(self.history_button)

        self.back_button = QPushButton(BUTTON_BACK_TO_REFERRALS, self)
        self.back_button.setStyleSheet(Styles.get_primary_button_style())
        self.back_button.clicked.connect(lambda: self.on_back())
        button_row.addWidget(self.back_button)
        button_row.addStretch()
        layout.addLayout(button_row)
        layout.addStretch()

    def show_summary(self, summary: ResultSummary, passing_score_percent: int) -> None:
        self.title_label.setText(RESULT_PASSED_TITLE if summary.passed else RESULT_COMPLETED_TITLE)
        self.title_label.setStyleSheet(Styles.get_status_label_style(summary.passed))
        self.score_label.setText(RESULT_SCORE_TEMPLATE.format(score=round_half_up(summary.score_percent)))
        if summary.passed:
            self.message_label.setText(RESULT_PASSED_MESSAGE)
        else:
            self.message_label.setText(RESULT_FAILED_TEMPLATE.format(percent=passing_score_percent))
        self.counts_label.setText(
            RESULT_COUNTS_TEMPLATE.format(
                correct=summary.correct,
                incorrect=summary.incorrect,
                skipped=summary.skipped,
            )
        )
