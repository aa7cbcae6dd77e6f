"""Qt UI components for the participant application."""

from .dialog_helpers import (
    confirm_leave_quiz,
    show_error,
    show_info,
    warn_missing_required,
)
from .participant_main_window import ParticipantMainWindow
from .question_renderer import render_question

__all__ = [
    "ParticipantMainWindow",
    "confirm_leave_quiz",
    "show_error",
    "show_info",
    "warn_missing_required",
    "render_question",
]
