"""Component for the loading, error, no-quiz and left-quiz screens."""

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
    BUTTON_BACK,
    BUTTON_BROWSE_REFERRALS,
    BUTTON_CLOSE,
    BUTTON_RETRY,
    LOAD_ERROR_TEMPLATE,
    LOADING_MESSAGE,
    NO_QUIZ_MESSAGE,
    NO_QUIZ_TITLE,
    REFERRALS_MESSAGE,
    REFERRALS_TITLE,
)
from proctor_app.styling.styles import Styles


class StatusPanel(QWidget):
    """Single centred message with the buttons that fit the current state."""

    def __init__(
        self,
        on_retry: Callable[[], None],
        on_back: Callable[[], None],
        on_close: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_retry = on_retry
        self.on_back = on_back
        self.on_close = on_close
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()

        self.title_label = QLabel("", self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.message_label = QLabel("", self)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.retry_button = QPushButton(BUTTON_RETRY, self)
        self.retry_button.setStyleSheet(Styles.get_primary_button_style())
        self.retry_button.clicked.connect(lambda: self.on_retry())
        button_row.addWidget(self.retry_button)

        self.back_button = QPushButton(BUTTON_BACK, self)
        self.back_button.clicked.connect(lambda: self.on_back())
        button_row.addWidget(self.back_button)

        self.close_button = QPushButton(BUTTON_CLOSE, self)
        self.close_button.clicked.connect(lambda: self.on_close())
        button_row.addWidget(self.close_button)

        button_row.addStretch()
        layout.addLayout(button_row)
        layout.addStretch()

    def _show(self, title: str, message: str, *, retry: bool, back: str | None, close: bool) -> None:
        self.title_label.setText(title)
        self.title_label.setVisible(bool(title))
        self.message_label.setText(message)
        self.retry_button.setVisible(retry)
        self.back_button.setVisible(back is not None)
        if back is not None:
            self.back_button.setText(back)
        self.close_button.setVisible(close)

    def show_loading(self) -> None:
        self._show("", LOADING_MESSAGE, retry=False, back=None, close=False)

    def show_load_error(self, message: str) -> None:
        self._show("", LOAD_ERROR_TEMPLATE.format(message=message), retry=True, back=BUTTON_BACK, close=False)

    def show_no_quiz(self) -> None:
        self._show(NO_QUIZ_TITLE, NO_QUIZ_MESSAGE, retry=False, back=BUTTON_BROWSE_REFERRALS, close=False)

    def show_left_quiz(self) -> None:
        self._show(REFERRALS_TITLE, REFERRALS_MESSAGE, retry=False, back=None, close=True)
