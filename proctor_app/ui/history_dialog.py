"""Dialog listing the candidate's previous assessment results."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QHeaderView,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from proctor_app.constants.ui_constants import (
    HISTORY_COLUMNS,
    HISTORY_DIALOG_TITLE,
    HISTORY_EMPTY_MESSAGE,
)
from proctor_app.core.models import QuizResultRecord


class HistoryDialog(QDialog):
    """Read-only table of stored results, newest first."""

    def __init__(self, parent: QWidget | None, records: list[QuizResultRecord]) -> None:
        super().__init__(parent)
        self.setWindowTitle(HISTORY_DIALOG_TITLE)
        self.setMinimumWidth(560)

        layout = QVBoxLayout()
        self.setLayout(layout)

        if not records:
            layout.addWidget(QLabel(HISTORY_EMPTY_MESSAGE, self))
        else:
            layout.addWidget(self._build_table(records))

        buttons = QDialogButtonBox(QDialogButtonBox.Close, self)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _build_table(self, records: list[QuizResultRecord]) -> QTableWidget:
        ordered = sorted(
            records,
            key=lambda record: record.submitted_at.timestamp() if record.submitted_at else 0.0,
            reverse=True,
        )
        table = QTableWidget(len(ordered), len(HISTORY_COLUMNS), self)
        table.setHorizontalHeaderLabels(list(HISTORY_COLUMNS))
        table.setEditTriggers(QTableWidget.NoEditTriggers)
        table.verticalHeader().setVisible(False)
        table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)

        for row, record in enumerate(ordered):
            submitted = record.submitted_at.strftime("%Y-%m-%d %H:%M") if record.submitted_at else "-"
            values = (
                record.job_id,
                f"{record.score}%",
                "Passed" if record.passed else "Not passed",
                record.status.value.title(),
                submitted,
            )
            for column, value in enumerate(values):
                table.setItem(row, column, QTableWidgetItem(value))
        return table
