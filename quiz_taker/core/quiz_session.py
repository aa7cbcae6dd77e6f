"""One participant's attempt at one quiz, shared between UI and network layers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, auto
from threading import Lock

from quiz_taker.core.models import (
    Answer,
    ParticipantInfo,
    Question,
    Quiz,
    QuizResult,
    SessionState,
    SubmissionPayload,
)
from quiz_taker.core.services.answer_map import AnswerMap, UnknownQuestionError
from quiz_taker.core.services.countdown_timer import CountdownTimer
from quiz_taker.core.services.question_navigator import QuestionNavigator
from quiz_taker.core.services.submission_assembler import SubmissionAssembler, SubmissionError

logger = logging.getLogger(__name__)

Submitter = Callable[[int, SubmissionPayload], QuizResult]


class SubmitTrigger(Enum):
    """What asked for the submission."""

    MANUAL = auto()
    TIMER = auto()


class SessionStateError(RuntimeError):
    """Raised when an operation does not fit the session's current state."""


class MissingRequiredAnswersError(Exception):
    """Raised by a manual submit while required questions are unanswered."""

    def __init__(self, question_ids: list[int]) -> None:
        super().__init__(f"Required questions unanswered: {question_ids}")
        self.question_ids = question_ids


class QuizSession:
    """Facade over answer map, navigator, timer and submission latch.

    Build it with :meth:`create` once the quiz is fetched, hand it to the UI,
    and call :meth:`teardown` when the UI leaves the quiz. Nothing here is
    module-global, so two sessions never share state.
    """

    def __init__(
        self,
        quiz: Quiz,
        submitter: Submitter,
        *,
        preview: bool = False,
        on_time_expired: Callable[[QuizSession], None] | None = None,
    ) -> None:
        if not quiz.questions:
            raise ValueError("Quiz must contain at least one question.")
        self._lock = Lock()
        self._quiz = quiz
        self._submitter = submitter
        self._preview = preview
        self._on_time_expired = on_time_expired

        self._answers = AnswerMap(quiz.questions)
        self._navigator = QuestionNavigator(len(quiz.questions))
        self._timer: CountdownTimer | None = None
        self._assembler: SubmissionAssembler | None = None
        self._participant: ParticipantInfo | None = None
        self._time_expired = False
        self._closed = False

        if preview:
            self._state = SessionState.IN_PROGRESS
        else:
            self._state = SessionState.COLLECTING_PARTICIPANT_INFO

    @classmethod
    def create(
        cls,
        quiz: Quiz,
        submitter: Submitter,
        *,
        preview: bool = False,
        on_time_expired: Callable[[QuizSession], None] | None = None,
    ) -> QuizSession:
        session = cls(quiz, submitter, preview=preview, on_time_expired=on_time_expired)
        logger.info(
            "Created %ssession for quiz %s (%d questions, limit %s)",
            "preview " if preview else "",
            quiz.id,
            len(quiz.questions),
            quiz.time_limit_label(),
        )
        return session

    # --- Lifecycle ---

    def start(self, participant: ParticipantInfo) -> None:
        with self._lock:
            if self._closed:
                raise SessionStateError("Session has been torn down.")
            if self._state is not SessionState.COLLECTING_PARTICIPANT_INFO:
                raise SessionStateError(f"Cannot start a session in state {self._state.name}.")
            self._participant = participant
            self._assembler = SubmissionAssembler(self._answers, participant)
            self._timer = CountdownTimer.from_time_limit(
                self._quiz.time_limit_minutes, self._handle_time_expired
            )
            self._state = SessionState.IN_PROGRESS
        if self._timer is not None:
            self._timer.start()
        logger.info("Participant %s started quiz %s", participant.email, self._quiz.id)

    def teardown(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    # --- Read-only views ---

    @property
    def quiz(self) -> Quiz:
        return self._quiz

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def participant(self) -> ParticipantInfo | None:
        return self._participant

    @property
    def navigator(self) -> QuestionNavigator:
        return self._navigator

    @property
    def timer(self) -> CountdownTimer | None:
        return self._timer

    @property
    def result(self) -> QuizResult | None:
        return self._assembler.result if self._assembler else None

    def is_preview(self) -> bool:
        return self._preview

    def accepts_edits(self) -> bool:
        return not self._closed and not self._preview and self._state is SessionState.IN_PROGRESS

    def offers_submit(self) -> bool:
        """Submit replaces Next on the last question, and anywhere once time ran out."""
        if self._preview:
            return False
        return self._navigator.is_last() or self._state is SessionState.TIME_EXPIRED

    def current_question(self) -> Question:
        return self._quiz.questions[self._navigator.current_index]

    # --- Answers ---

    def set_answer(
        self,
        question_id: int,
        option_id: int | None = None,
        text: str | None = None,
    ) -> bool:
        """Record an answer. Returns False when the session does not take edits.

        An id that is not part of the quiz raises ``UnknownQuestionError`` in
        every state.
        """
        if not self._answers.has_question(question_id):
            raise UnknownQuestionError(question_id)
        if not self.accepts_edits():
            logger.debug("Ignoring answer for question %s in state %s", question_id, self._state.name)
            return False
        self._answers.set_answer(question_id, option_id=option_id, text=text)
        return True

    def get_answer(self, question_id: int) -> Answer | None:
        return self._answers.get_answer(question_id)

    def count_answered(self) -> int:
        return self._answers.count_answered()

    def unanswered_required(self) -> list[int]:
        return self._answers.unanswered_required()

    # --- Timer ---

    def tick(self) -> None:
        if self._closed or self._timer is None:
            return
        self._timer.tick()

    def _handle_time_expired(self) -> None:
        if self._closed:
            return
        with self._lock:
            self._time_expired = True
            if self._state is SessionState.IN_PROGRESS:
                self._state = SessionState.TIME_EXPIRED
        if self._on_time_expired is not None:
            self._on_time_expired(self)
            return
        try:
            self.submit(SubmitTrigger.TIMER)
        except SubmissionError:
            logger.exception("Automatic submission after time expiry failed")

    # --- Submission ---

    def begin_submit(self, trigger: SubmitTrigger = SubmitTrigger.MANUAL) -> SubmissionPayload | None:
        """Take the submit latch and return the payload to send.

        Returns ``None`` when nothing should be sent: the session is a preview,
        was torn down, or another submission holds or has consumed the latch.
        """
        if self._closed or self._preview:
            return None
        if self._assembler is None:
            raise SessionStateError("Session has not been started.")
        latch_free = not (self._assembler.is_in_flight() or self._assembler.is_completed())
        # Once time ran out, unanswered questions are simply omitted, retries included
        if trigger is SubmitTrigger.MANUAL and latch_free and not self._time_expired:
            missing = self._answers.unanswered_required()
            if missing:
                raise MissingRequiredAnswersError(missing)

        payload = self._assembler.begin()
        if payload is None:
            return None
        with self._lock:
            self._state = SessionState.SUBMITTING
        logger.info(
            "Submitting %d answers for quiz %s (%s)",
            len(payload.answers),
            self._quiz.id,
            trigger.name.lower(),
        )
        return payload

    def complete_submit(self, result: QuizResult) -> None:
        if self._assembler is None:
            raise SessionStateError("Session has not been started.")
        self._assembler.complete(result)
        if self._timer is not None:
            self._timer.cancel()
        with self._lock:
            self._state = SessionState.SUBMITTED
        logger.info("Quiz %s submitted: %.1f%%", self._quiz.id, result.percentage)

    def fail_submit(self, error: BaseException) -> None:
        if self._assembler is None:
            raise SessionStateError("Session has not been started.")
        self._assembler.fail(error)
        with self._lock:
            self._state = SessionState.TIME_EXPIRED if self._time_expired else SessionState.IN_PROGRESS

    def submit(self, trigger: SubmitTrigger = SubmitTrigger.MANUAL) -> QuizResult | None:
        """Send the answers synchronously through the session's submitter."""
        payload = self.begin_submit(trigger)
        if payload is None:
            return None
        try:
            result = self._submitter(self._quiz.id, payload)
        except Exception as exc:
            self.fail_submit(exc)
            raise SubmissionError(str(exc) or exc.__class__.__name__) from exc
        self.complete_submit(result)
        return result
