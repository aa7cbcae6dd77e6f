"""Component for answering the questions of one quiz session."""

from __future__ import annotations

import logging

from PySide6.QtCore import QTimer
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QButtonGroup,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QProgressBar,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from quiz_taker.constants.quiz_constants import TIMER_TICK_INTERVAL_MS, TRUE_FALSE_CHOICES
from quiz_taker.constants.ui_constants import (
    TAKE_ANSWERED_TEMPLATE,
    TAKE_LEAVE_BUTTON,
    TAKE_NEXT_BUTTON,
    TAKE_PREV_BUTTON,
    TAKE_PREVIEW_BADGE,
    TAKE_QUESTION_TEMPLATE,
    TAKE_SUBMIT_BUTTON,
    TAKE_SUBMITTING_BUTTON,
    TAKE_TEXT_PLACEHOLDER,
    TIME_EXPIRED_MESSAGE,
)
from quiz_taker.core.models import Question, SessionState
from quiz_taker.core.quiz_session import QuizSession, SubmitTrigger
from quiz_taker.styling.styles import Styles
from quiz_taker.ui.question_renderer import render_question

logger = logging.getLogger(__name__)


class TakeQuizPanel(QWidget):
    """UI component showing one question at a time with navigation and a countdown."""

    def __init__(
        self,
        on_submit: callable,
        on_leave: callable,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.on_submit = on_submit
        self.on_leave = on_leave
        self._session: QuizSession | None = None
        self._font_size: int = 14
        self._submitting = False
        self._option_buttons: list[QRadioButton] = []
        self._nav_buttons: list[QPushButton] = []

        self._build_ui()
        self._configure_tick_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Header: title, preview badge, countdown, leave
        header_row = QHBoxLayout()
        self.title_label = QLabel("", self)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        self.title_label.setWordWrap(True)
        header_row.addWidget(self.title_label, stretch=1)

        self.preview_badge = QLabel(TAKE_PREVIEW_BADGE, self)
        self.preview_badge.setStyleSheet(Styles.get_notice_style())
        self.preview_badge.setVisible(False)
        header_row.addWidget(self.preview_badge)

        self.timer_label = QLabel("", self)
        self.timer_label.setVisible(False)
        header_row.addWidget(self.timer_label)

        self.leave_button = QPushButton(TAKE_LEAVE_BUTTON, self)
        self.leave_button.clicked.connect(self.on_leave)
        header_row.addWidget(self.leave_button)
        layout.addLayout(header_row)

        # Progress
        progress_row = QHBoxLayout()
        self.position_label = QLabel("", self)
        progress_row.addWidget(self.position_label)
        self.progress_bar = QProgressBar(self)
        self.progress_bar.setRange(0, 1000)
        self.progress_bar.setTextVisible(False)
        progress_row.addWidget(self.progress_bar, stretch=1)
        self.answered_label = QLabel("", self)
        progress_row.addWidget(self.answered_label)
        layout.addLayout(progress_row)

        self.expired_label = QLabel(TIME_EXPIRED_MESSAGE, self)
        self.expired_label.setStyleSheet(Styles.get_notice_style())
        self.expired_label.setVisible(False)
        layout.addWidget(self.expired_label)

        self.question_view = QWebEngineView(self)
        layout.addWidget(self.question_view, stretch=2)

        # Answer area, rebuilt for every question
        self.answer_group = QGroupBox("Your answer", self)
        self.answer_layout = QVBoxLayout()
        self.answer_group.setLayout(self.answer_layout)
        self.option_group = QButtonGroup(self)
        self.option_group.setExclusive(True)
        self.option_group.idClicked.connect(self._handle_option_clicked)
        self.text_input = QPlainTextEdit(self.answer_group)
        self.text_input.setPlaceholderText(TAKE_TEXT_PLACEHOLDER)
        self.text_input.textChanged.connect(self._handle_text_changed)
        self.answer_layout.addWidget(self.text_input)
        layout.addWidget(self.answer_group, stretch=1)

        self.nav_row = QHBoxLayout()
        layout.addLayout(self.nav_row)

        button_row = QHBoxLayout()
        self.prev_button = QPushButton(TAKE_PREV_BUTTON, self)
        self.prev_button.clicked.connect(self._handle_previous)
        button_row.addWidget(self.prev_button)
        button_row.addStretch()
        self.next_button = QPushButton(TAKE_NEXT_BUTTON, self)
        self.next_button.setStyleSheet(Styles.get_primary_button_style())
        self.next_button.clicked.connect(self._handle_next)
        button_row.addWidget(self.next_button)
        self.submit_button = QPushButton(TAKE_SUBMIT_BUTTON, self)
        self.submit_button.setStyleSheet(Styles.get_submit_button_style())
        self.submit_button.clicked.connect(self._handle_submit_clicked)
        button_row.addWidget(self.submit_button)
        layout.addLayout(button_row)

    def _configure_tick_timer(self) -> None:
        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TIMER_TICK_INTERVAL_MS)
        self.tick_timer.timeout.connect(self._handle_tick)

    # --- Session lifecycle ---

    def load_session(self, session: QuizSession) -> None:
        logger.debug("Showing quiz %s (preview=%s)", session.quiz.id, session.is_preview())
        self._session = session
        self._submitting = False
        self.title_label.setText(session.quiz.title)
        self.preview_badge.setVisible(session.is_preview())
        self.expired_label.setVisible(False)
        self._rebuild_nav_buttons()
        if session.timer is not None:
            self.timer_label.setVisible(True)
            self.tick_timer.start()
        else:
            self.timer_label.setVisible(False)
        self._show_current_question()

    def clear_session(self) -> None:
        self.tick_timer.stop()
        self._session = None
        self._submitting = False

    def set_submitting(self, submitting: bool) -> None:
        self._submitting = submitting
        self.submit_button.setText(TAKE_SUBMITTING_BUTTON if submitting else TAKE_SUBMIT_BUTTON)
        self._refresh_controls()

    def set_font_size(self, font_size: int) -> None:
        self._font_size = font_size
        if self._session is not None:
            self._show_current_question()

    # --- Rendering ---

    def _show_current_question(self) -> None:
        session = self._session
        if session is None:
            return
        navigator = session.navigator
        question = session.current_question()
        self.question_view.setHtml(
            render_question(question, navigator.current_index + 1, navigator.question_count, self._font_size)
        )
        self._rebuild_answer_inputs(question)
        self._refresh_controls()

    def _rebuild_answer_inputs(self, question: Question) -> None:
        for button in self._option_buttons:
            self.option_group.removeButton(button)
            self.answer_layout.removeWidget(button)
            button.deleteLater()
        self._option_buttons = []

        answer = self._session.get_answer(question.id)
        if not question.is_selectable:
            self.text_input.setVisible(True)
            self.text_input.blockSignals(True)
            self.text_input.setPlainText((answer.text_answer or "") if answer else "")
            self.text_input.blockSignals(False)
            return

        self.text_input.setVisible(False)
        if question.uses_text_choices:
            labels = list(TRUE_FALSE_CHOICES)
            checked_index = labels.index(answer.text_answer) if answer and answer.text_answer in labels else None
        else:
            labels = [option.text for option in question.options]
            option_ids = [option.id for option in question.options]
            checked_index = (
                option_ids.index(answer.selected_option_id)
                if answer and answer.selected_option_id in option_ids
                else None
            )
        for index, label in enumerate(labels):
            button = QRadioButton(label, self.answer_group)
            self.option_group.addButton(button, index)
            self.answer_layout.insertWidget(index, button)
            button.setChecked(index == checked_index)
            self._option_buttons.append(button)

    def _rebuild_nav_buttons(self) -> None:
        while self.nav_row.count():
            item = self.nav_row.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self._nav_buttons = []
        if self._session is None:
            return
        for index in range(self._session.navigator.question_count):
            button = QPushButton(str(index + 1), self)
            button.clicked.connect(lambda _checked=False, target=index: self._handle_jump(target))
            self.nav_row.addWidget(button)
            self._nav_buttons.append(button)
        self.nav_row.addStretch()

    def _refresh_controls(self) -> None:
        session = self._session
        if session is None:
            return
        navigator = session.navigator
        total = navigator.question_count
        self.position_label.setText(
            TAKE_QUESTION_TEMPLATE.format(number=navigator.current_index + 1, total=total)
        )
        self.progress_bar.setValue(int(navigator.progress_fraction() * 1000))
        self.answered_label.setText(
            TAKE_ANSWERED_TEMPLATE.format(answered=session.count_answered(), total=total)
        )
        self.prev_button.setEnabled(not navigator.is_first())
        self.next_button.setVisible(not navigator.is_last())
        self.submit_button.setVisible(session.offers_submit())

        editable = session.accepts_edits() and not self._submitting
        self.answer_group.setEnabled(editable)
        can_submit = session.state in (SessionState.IN_PROGRESS, SessionState.TIME_EXPIRED)
        self.submit_button.setEnabled(can_submit and not self._submitting)
        self.expired_label.setVisible(session.state is SessionState.TIME_EXPIRED)

        for index, (button, question) in enumerate(zip(self._nav_buttons, session.quiz.questions)):
            answered = session.get_answer(question.id) is not None
            button.setStyleSheet(
                Styles.get_nav_button_style(current=index == navigator.current_index, answered=answered)
            )
        self._refresh_timer_label()

    def _refresh_timer_label(self) -> None:
        timer = self._session.timer if self._session is not None else None
        if timer is None:
            return
        self.timer_label.setText(timer.format_remaining())
        self.timer_label.setStyleSheet(Styles.get_timer_style(timer.is_low_on_time()))

    # --- Handlers ---

    def _handle_tick(self) -> None:
        session = self._session
        if session is None or session.is_closed():
            self.tick_timer.stop()
            return
        session.tick()
        if self._session is not session:
            # The expiry hook replaced or cleared the session
            return
        if session.timer is None or not session.timer.is_running():
            self.tick_timer.stop()
        self._refresh_controls()

    def _handle_option_clicked(self, index: int) -> None:
        session = self._session
        if session is None:
            return
        question = session.current_question()
        if question.uses_text_choices:
            session.set_answer(question.id, text=TRUE_FALSE_CHOICES[index])
        else:
            session.set_answer(question.id, option_id=question.options[index].id)
        self._refresh_controls()

    def _handle_text_changed(self) -> None:
        session = self._session
        if session is None:
            return
        question = session.current_question()
        if question.is_selectable:
            return
        session.set_answer(question.id, text=self.text_input.toPlainText())
        self._refresh_controls()

    def jump_to_question(self, index: int) -> None:
        self._handle_jump(index)

    def _handle_previous(self) -> None:
        if self._session is not None:
            self._session.navigator.previous()
            self._show_current_question()

    def _handle_next(self) -> None:
        if self._session is not None:
            self._session.navigator.next()
            self._show_current_question()

    def _handle_jump(self, index: int) -> None:
        if self._session is not None:
            self._session.navigator.jump_to(index)
            self._show_current_question()

    def _handle_submit_clicked(self) -> None:
        if self._session is not None:
            self.on_submit(SubmitTrigger.MANUAL)
