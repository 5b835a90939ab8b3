"""Component for the pre-quiz rules review and consent."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from proctor_app.constants.ui_constants import (
    BUTTON_START,
    DETAILS_HEADING,
    DETAILS_PASSING_TEMPLATE,
    DETAILS_QUESTIONS_TEMPLATE,
    DETAILS_TIME_TEMPLATE,
    RULES,
    RULES_CONSENT_LABEL,
    RULES_HEADING,
    SKILLS_HEADING,
)
from proctor_app.core.models import Quiz
from proctor_app.styling.styles import Styles


class RulesPanel(QWidget):
    """Shows quiz details and the disqualification rules before the attempt."""

    def __init__(
        self,
        on_consent_changed: Callable[[bool], None],
        on_start: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_consent_changed = on_consent_changed
        self.on_start = on_start
        self._build_ui()

    def _build_ui(self) -> None:
        outer = QVBoxLayout()
        self.setLayout(outer)

        scroll = QScrollArea(self)
        scroll.setWidgetResizable(True)
        content = QWidget(scroll)
        layout = QVBoxLayout()
        content.setLayout(layout)
        scroll.setWidget(content)
        outer.addWidget(scroll, stretch=1)

        self.title_label = QLabel("", content)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.description_label = QLabel("", content)
        self.description_label.setWordWrap(True)
        layout.addWidget(self.description_label)

        details_group = QGroupBox(DETAILS_HEADING, content)
        details_layout = QVBoxLayout()
        details_group.setLayout(details_layout)
        self.questions_label = QLabel("", details_group)
        self.time_label = QLabel("", details_group)
        self.passing_label = QLabel("", details_group)
        for label in (self.questions_label, self.time_label, self.passing_label):
            details_layout.addWidget(label)
        layout.addWidget(details_group)

        self.skills_group = QGroupBox(SKILLS_HEADING, content)
        skills_layout = QVBoxLayout()
        self.skills_group.setLayout(skills_layout)
        self.skills_label = QLabel("", self.skills_group)
        self.skills_label.setWordWrap(True)
        skills_layout.addWidget(self.skills_label)
        layout.addWidget(self.skills_group)

        rules_group = QGroupBox(content)
        rules_layout = QVBoxLayout()
        rules_group.setLayout(rules_layout)
        heading = QLabel(RULES_HEADING, rules_group)
        heading.setStyleSheet(Styles.get_warning_heading_style())
        rules_layout.addWidget(heading)
        for rule in RULES:
            rule_label = QLabel(f"• {rule}", rules_group)
            rule_label.setTextFormat(Qt.RichText)
            rule_label.setWordWrap(True)
            rules_layout.addWidget(rule_label)
        layout.addWidget(rules_group)
        layout.addStretch()

        footer = QHBoxLayout()
        self.consent_checkbox = QCheckBox(RULES_CONSENT_LABEL, self)
        self.consent_checkbox.toggled.connect(self._handle_consent_toggled)
        footer.addWidget(self.consent_checkbox)
        footer.addStretch()

        self.start_button = QPushButton(BUTTON_START, self)
        self.start_button.setStyleSheet(Styles.get_primary_button_style())
        self.start_button.setEnabled(False)
        self.start_button.clicked.connect(lambda: self.on_start())
        footer.addWidget(self.start_button)
        outer.addLayout(footer)

    def _handle_consent_toggled(self, checked: bool) -> None:
        self.on_consent_changed(checked)

    def show_quiz(self, quiz: Quiz, consent: bool, can_start: bool) -> None:
        self.title_label.setText(quiz.title)
        self.description_label.setText(quiz.description)
        self.questions_label.setText(DETAILS_QUESTIONS_TEMPLATE.format(count=quiz.question_count))
        self.time_label.setText(DETAILS_TIME_TEMPLATE.format(minutes=quiz.time_limit_minutes))
        self.passing_label.setText(DETAILS_PASSING_TEMPLATE.format(percent=quiz.passing_score_percent))

        self.skills_group.setVisible(bool(quiz.job_skills))
        self.skills_label.setText(", ".join(quiz.job_skills))

        if self.consent_checkbox.isChecked() != consent:
            self.consent_checkbox.blockSignals(True)
            self.consent_checkbox.setChecked(consent)
            self.consent_checkbox.blockSignals(False)
        self.start_button.setEnabled(can_start)
