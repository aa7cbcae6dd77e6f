"""Helper functions for common dialog patterns in the participant UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def confirm_leave_quiz(parent: QWidget) -> bool:
    """Ask before abandoning a quiz in progress.

    Args:
        parent: Parent widget for the dialog

    Returns:
        True if user confirmed, False otherwise
    """
    reply = QMessageBox.question(
        parent,
        "Leave Quiz",
        "Your answers have not been submitted and will be lost. Leave anyway?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def warn_missing_required(parent: QWidget, question_numbers: list[int]) -> None:
    numbers = ", ".join(f"Q{number}" for number in question_numbers)
    QMessageBox.warning(
        parent,
        "Unanswered Questions",
        f"Please answer all required questions before submitting: {numbers}",
    )


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Error message
    """
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show information dialog."""
    msg_box = QMessageBox(parent)
    msg_box.setIcon(QMessageBox.Information)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    msg_box.exec()
