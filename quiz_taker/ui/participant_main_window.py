"""Qt main window switching between join, quiz, result and error views."""

from __future__ import annotations

import logging
from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_taker.client.api_client import ApiClient, QuizNotFoundError
from quiz_taker.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    PRACTICE_HELP_TEXT,
)
from quiz_taker.constants.ui_constants import (
    QUIZ_LOAD_FAILED_MESSAGE,
    RESULT_LOAD_FAILED_MESSAGE,
    SUBMIT_FAILED_MESSAGE,
    WINDOW_TITLE,
)
from quiz_taker.core.markdown_math_renderer import renderer
from quiz_taker.core.models import ParticipantInfo, Quiz, QuizResult, SessionState
from quiz_taker.core.quiz_session import (
    MissingRequiredAnswersError,
    QuizSession,
    SessionStateError,
    SubmitTrigger,
)
from quiz_taker.styling.color_palette import ColorPalette, Theme
from quiz_taker.styling.styles import Styles
from quiz_taker.ui.components.error_panel import ErrorPanel
from quiz_taker.ui.components.join_panel import JoinPanel
from quiz_taker.ui.components.result_panel import ResultPanel
from quiz_taker.ui.components.take_quiz_panel import TakeQuizPanel
from quiz_taker.ui.dialog_helpers import (
    confirm_leave_quiz,
    show_error,
    show_info,
    warn_missing_required,
)
from quiz_taker.ui.settings_dialog import SettingsDialog
from quiz_taker.ui.workers import run_in_background

logger = logging.getLogger(__name__)


class ClientMode(Enum):
    """High-level UI mode for the participant window."""

    JOIN = auto()
    TAKING = auto()
    RESULT = auto()
    ERROR = auto()


class ParticipantMainWindow(QMainWindow):
    """Main Qt window. Owns the current quiz session and all backend calls."""

    def __init__(self, api: ApiClient, practice_mode: bool = False) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE + (" (Practice)" if practice_mode else ""))

        self._api = api
        self._practice_mode = practice_mode
        self._session: QuizSession | None = None
        self._mode = ClientMode.JOIN

        self._ui_font_size: int = 10
        self._question_font_size: int = 14
        self._theme = Theme.LIGHT

        self._build_ui()
        self._apply_styles()
        self._refresh_quizzes()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_top_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.join_panel = JoinPanel(
            on_start_quiz=self._handle_start_quiz,
            on_preview_quiz=self._handle_preview_quiz,
            on_view_result=self._handle_view_result,
            on_refresh=self._refresh_quizzes,
            parent=self
        )
        self.take_panel = TakeQuizPanel(
            on_submit=self._submit,
            on_leave=self._handle_leave_quiz,
            parent=self
        )
        self.result_panel = ResultPanel(on_home=self._go_home, parent=self)
        self.error_panel = ErrorPanel(on_home=self._go_home, parent=self)

        self.mode_stack.addWidget(self.join_panel)
        self.mode_stack.addWidget(self.take_panel)
        self.mode_stack.addWidget(self.result_panel)
        self.mode_stack.addWidget(self.error_panel)
        root_layout.addWidget(self.mode_stack)

        self._set_mode(ClientMode.JOIN)

    def _build_top_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        self.help_button.setVisible(self._practice_mode)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: ClientMode) -> None:
        self._mode = mode
        index_map = {
            ClientMode.JOIN: 0,
            ClientMode.TAKING: 1,
            ClientMode.RESULT: 2,
            ClientMode.ERROR: 3,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    # --- Quiz list ---

    def _refresh_quizzes(self) -> None:
        self.join_panel.set_busy(True)
        run_in_background(self._api.list_quizzes, self._handle_quizzes_loaded, self._handle_quizzes_failed)

    def _handle_quizzes_loaded(self, _context: object, summaries: list) -> None:
        self.join_panel.set_busy(False)
        self.join_panel.set_quizzes(summaries)

    def _handle_quizzes_failed(self, _context: object, error: Exception) -> None:
        self.join_panel.set_busy(False)
        self.join_panel.show_status(str(error))

    # --- Starting a quiz ---

    def _handle_start_quiz(self, quiz_id: int, participant: ParticipantInfo) -> None:
        self._load_quiz(quiz_id, participant)

    def _handle_preview_quiz(self, quiz_id: int) -> None:
        self._load_quiz(quiz_id, None)

    def _load_quiz(self, quiz_id: int, participant: ParticipantInfo | None) -> None:
        """Fetch the quiz. A missing participant means a preview."""
        self.join_panel.set_busy(True)
        run_in_background(
            lambda: self._api.fetch_quiz(quiz_id),
            self._handle_quiz_loaded,
            self._handle_quiz_load_failed,
            context=participant,
        )

    def _handle_quiz_loaded(self, participant: ParticipantInfo | None, quiz: Quiz) -> None:
        self.join_panel.set_busy(False)
        try:
            session = QuizSession.create(
                quiz,
                self._api.submit_quiz,
                preview=participant is None,
                on_time_expired=self._handle_time_expired,
            )
        except ValueError as exc:
            self._show_error_page(QUIZ_LOAD_FAILED_MESSAGE, str(exc))
            return
        if participant is not None:
            session.start(participant)
        self._session = session
        self.take_panel.load_session(session)
        self._set_mode(ClientMode.TAKING)

    def _handle_quiz_load_failed(self, _participant: object, error: Exception) -> None:
        self.join_panel.set_busy(False)
        self._show_error_page(QUIZ_LOAD_FAILED_MESSAGE, str(error))

    # --- Submission ---

    def _handle_time_expired(self, session: QuizSession) -> None:
        if session is self._session:
            self._submit(SubmitTrigger.TIMER)

    def _submit(self, trigger: SubmitTrigger) -> None:
        session = self._session
        if session is None:
            return
        try:
            payload = session.begin_submit(trigger)
        except MissingRequiredAnswersError as exc:
            numbers = [
                index + 1
                for index, question in enumerate(session.quiz.questions)
                if question.id in exc.question_ids
            ]
            warn_missing_required(self, numbers)
            self.take_panel.jump_to_question(numbers[0] - 1)
            return
        except SessionStateError as exc:
            logger.warning("Submit ignored: %s", exc)
            return
        if payload is None:
            return

        self.take_panel.set_submitting(True)
        quiz_id = session.quiz.id
        run_in_background(
            lambda: self._api.submit_quiz(quiz_id, payload),
            self._handle_submit_succeeded,
            self._handle_submit_failed,
            context=session,
        )

    def _handle_submit_succeeded(self, session: QuizSession, result: QuizResult) -> None:
        if session is not self._session or session.is_closed():
            logger.info("Discarding result for quiz %s; the session was left", session.quiz.id)
            return
        session.complete_submit(result)
        self._close_session()
        self.result_panel.show_result(result)
        self._set_mode(ClientMode.RESULT)

    def _handle_submit_failed(self, session: QuizSession, error: Exception) -> None:
        if session is not self._session or session.is_closed():
            return
        session.fail_submit(error)
        self.take_panel.set_submitting(False)
        show_error(self, "Submission failed", f"{SUBMIT_FAILED_MESSAGE}\n\n{error}")

    # --- Leaving ---

    def _handle_leave_quiz(self) -> None:
        session = self._session
        if session is None:
            self._go_home()
            return
        unsent = not session.is_preview() and session.state is not SessionState.SUBMITTED
        if unsent and not confirm_leave_quiz(self):
            return
        self._go_home()

    def _close_session(self) -> None:
        self.take_panel.clear_session()
        if self._session is not None:
            self._session.teardown()
            self._session = None

    def _go_home(self) -> None:
        self._close_session()
        self._set_mode(ClientMode.JOIN)
        self._refresh_quizzes()

    # --- Results ---

    def _handle_view_result(self, session_id: str) -> None:
        self.result_panel.show_loading()
        self._set_mode(ClientMode.RESULT)
        run_in_background(
            lambda: self._api.fetch_result(session_id),
            self._handle_result_loaded,
            self._handle_result_failed,
            context=session_id,
        )

    def _handle_result_loaded(self, _session_id: str, result: QuizResult) -> None:
        if self._mode is ClientMode.RESULT:
            self.result_panel.show_result(result)

    def _handle_result_failed(self, session_id: str, error: Exception) -> None:
        if self._mode is not ClientMode.RESULT:
            return
        if isinstance(error, QuizNotFoundError):
            logger.info("No result for session %s", session_id)
            self.result_panel.show_result(None)
            return
        self._show_error_page(RESULT_LOAD_FAILED_MESSAGE, str(error))

    def _show_error_page(self, message: str, detail: str | None = None) -> None:
        self.error_panel.show_error(message, detail)
        self._set_mode(ClientMode.ERROR)

    # --- Window chrome ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", PRACTICE_HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._ui_font_size, self._question_font_size, self._theme)
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._question_font_size = dialog.get_question_font_size()
            self._theme = dialog.get_theme()
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        ui_style = f"font-size: {self._ui_font_size}pt;"
        for button in (self.about_button, self.help_button, self.settings_button):
            button.setStyleSheet(ui_style)

        renderer.background = ColorPalette.SURFACE.get(self._theme)
        renderer.foreground = ColorPalette.TEXT_PRIMARY.get(self._theme)
        self.take_panel.set_font_size(self._question_font_size)
        self.result_panel.set_font_size(self._question_font_size)

    def closeEvent(self, event) -> None:  # noqa: N802
        self._close_session()
        super().closeEvent(event)
