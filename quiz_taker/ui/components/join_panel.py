"""Component for choosing a quiz and entering participant details."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_taker.constants.ui_constants import (
    JOIN_DESCRIPTION,
    JOIN_EMAIL_LABEL,
    JOIN_NAME_LABEL,
    JOIN_NO_QUIZZES,
    JOIN_PREVIEW_BUTTON,
    JOIN_REFRESH_BUTTON,
    JOIN_RESULTS_BUTTON,
    JOIN_RESULTS_PLACEHOLDER,
    JOIN_START_BUTTON,
)
from quiz_taker.core.models import ParticipantInfo, QuizSummary
from quiz_taker.core.participant_validation import ParticipantInfoError, validate_participant
from quiz_taker.styling.styles import Styles


class JoinPanel(QWidget):
    """UI component listing quizzes and collecting the participant's name and email."""

    def __init__(
        self,
        on_start_quiz: callable,
        on_preview_quiz: callable,
        on_view_result: callable,
        on_refresh: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.on_start_quiz = on_start_quiz
        self.on_preview_quiz = on_preview_quiz
        self.on_view_result = on_view_result
        self.on_refresh = on_refresh
        self._summaries: dict[int, QuizSummary] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.description_label = QLabel(JOIN_DESCRIPTION, self)
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.description_label)

        self.quiz_list = QListWidget(self)
        self.quiz_list.currentItemChanged.connect(self._handle_selection_changed)
        layout.addWidget(self.quiz_list, stretch=1)

        self.summary_label = QLabel("", self)
        self.summary_label.setWordWrap(True)
        layout.addWidget(self.summary_label)

        self.status_label = QLabel("", self)
        self.status_label.setWordWrap(True)
        self.status_label.setStyleSheet(Styles.get_error_style())
        self.status_label.setVisible(False)
        layout.addWidget(self.status_label)

        form = QFormLayout()
        self.name_input = QLineEdit(self)
        self.name_input.setMaxLength(150)
        self.name_error = self._build_error_label()
        form.addRow(JOIN_NAME_LABEL, self.name_input)
        form.addRow("", self.name_error)

        self.email_input = QLineEdit(self)
        self.email_error = self._build_error_label()
        form.addRow(JOIN_EMAIL_LABEL, self.email_input)
        form.addRow("", self.email_error)
        layout.addLayout(form)

        button_row = QHBoxLayout()
        self.refresh_button = QPushButton(JOIN_REFRESH_BUTTON, self)
        self.refresh_button.clicked.connect(self.on_refresh)
        button_row.addWidget(self.refresh_button)
        button_row.addStretch()

        self.preview_button = QPushButton(JOIN_PREVIEW_BUTTON, self)
        self.preview_button.clicked.connect(self._handle_preview)
        button_row.addWidget(self.preview_button)

        self.start_button = QPushButton(JOIN_START_BUTTON, self)
        self.start_button.setStyleSheet(Styles.get_primary_button_style())
        self.start_button.clicked.connect(self._handle_start)
        button_row.addWidget(self.start_button)
        layout.addLayout(button_row)

        result_row = QHBoxLayout()
        self.result_input = QLineEdit(self)
        self.result_input.setPlaceholderText(JOIN_RESULTS_PLACEHOLDER)
        result_row.addWidget(self.result_input, stretch=1)
        self.result_button = QPushButton(JOIN_RESULTS_BUTTON, self)
        self.result_button.clicked.connect(self._handle_view_result)
        result_row.addWidget(self.result_button)
        layout.addLayout(result_row)

        self._update_action_buttons()

    def _build_error_label(self) -> QLabel:
        label = QLabel("", self)
        label.setStyleSheet(Styles.get_error_style())
        label.setVisible(False)
        return label

    def set_quizzes(self, summaries: list[QuizSummary]) -> None:
        selected_id = self.selected_quiz_id()
        self._summaries = {summary.id: summary for summary in summaries}
        self.quiz_list.clear()
        for summary in summaries:
            item = QListWidgetItem(summary.title)
            item.setData(Qt.UserRole, summary.id)
            self.quiz_list.addItem(item)
            if summary.id == selected_id:
                self.quiz_list.setCurrentItem(item)
        if not summaries:
            self.show_status(JOIN_NO_QUIZZES)
        else:
            self.show_status(None)
            if self.quiz_list.currentItem() is None:
                self.quiz_list.setCurrentRow(0)
        self._update_action_buttons()

    def set_busy(self, busy: bool) -> None:
        self.refresh_button.setEnabled(not busy)
        self.result_button.setEnabled(not busy)
        self._update_action_buttons(busy)

    def show_status(self, message: str | None) -> None:
        self.status_label.setText(message or "")
        self.status_label.setVisible(bool(message))

    def selected_quiz_id(self) -> int | None:
        item = self.quiz_list.currentItem()
        if item is None:
            return None
        return item.data(Qt.UserRole)

    def _handle_selection_changed(self, current: QListWidgetItem | None, _previous=None) -> None:
        summary = self._summaries.get(current.data(Qt.UserRole)) if current is not None else None
        if summary is None:
            self.summary_label.setText("")
        else:
            lines = [summary.description] if summary.description else []
            lines.append(f"{summary.total_questions} questions · Time limit: {summary.time_limit_label()}")
            self.summary_label.setText("\n".join(lines))
        self._update_action_buttons()

    def _update_action_buttons(self, busy: bool = False) -> None:
        has_selection = self.selected_quiz_id() is not None
        self.start_button.setEnabled(has_selection and not busy)
        self.preview_button.setEnabled(has_selection and not busy)

    def _handle_start(self) -> None:
        quiz_id = self.selected_quiz_id()
        if quiz_id is None:
            return
        participant = self._collect_participant()
        if participant is None:
            return
        self.on_start_quiz(quiz_id, participant)

    def _handle_preview(self) -> None:
        quiz_id = self.selected_quiz_id()
        if quiz_id is not None:
            self.on_preview_quiz(quiz_id)

    def _handle_view_result(self) -> None:
        session_id = self.result_input.text().strip()
        if session_id:
            self.on_view_result(session_id)

    def _collect_participant(self) -> ParticipantInfo | None:
        self._set_field_error(self.name_error, None)
        self._set_field_error(self.email_error, None)
        try:
            return validate_participant(self.name_input.text(), self.email_input.text())
        except ParticipantInfoError as exc:
            self._set_field_error(self.name_error, exc.errors.get("name"))
            self._set_field_error(self.email_error, exc.errors.get("email"))
            return None

    @staticmethod
    def _set_field_error(label: QLabel, message: str | None) -> None:
        label.setText(message or "")
        label.setVisible(bool(message))
