"""Helper functions for common dialog patterns in the quiz window."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from proctor_app.constants.ui_constants import LEAVE_CONFIRM_MESSAGE, LEAVE_CONFIRM_TITLE


def confirm_leave_quiz(parent: QWidget) -> bool:
    """Ask whether the candidate really wants to close an active quiz.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if the candidate chose to leave, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        LEAVE_CONFIRM_TITLE,
        LEAVE_CONFIRM_MESSAGE,
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget | None, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget | None, title: str, message: str) -> None:
    """Show information dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
    """
    QMessageBox.information(parent, title, message)

