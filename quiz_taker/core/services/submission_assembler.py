"""Builds the scoring request from the answer map and sends it at most once."""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock

from quiz_taker.core.models import ParticipantInfo, QuizResult, SubmissionPayload
from quiz_taker.core.services.answer_map import AnswerMap

logger = logging.getLogger(__name__)

Sender = Callable[[SubmissionPayload], QuizResult]


class SubmissionError(Exception):
    """Raised when the scoring request failed. The latch is released first."""


class SubmissionAssembler:
    """Owns the submit latch for one session.

    The latch is taken by :meth:`begin` and is either released by :meth:`fail`
    or set for good by :meth:`complete`. A second caller arriving while the
    latch is held gets ``None`` back and must do nothing.
    """

    def __init__(self, answer_map: AnswerMap, participant: ParticipantInfo) -> None:
        self._answer_map = answer_map
        self._participant = participant
        self._lock = Lock()
        self._in_flight = False
        self._completed = False
        self._result: QuizResult | None = None

    @property
    def result(self) -> QuizResult | None:
        return self._result

    def is_in_flight(self) -> bool:
        return self._in_flight

    def is_completed(self) -> bool:
        return self._completed

    def build_payload(self) -> SubmissionPayload:
        return SubmissionPayload(
            participant=self._participant,
            answers=tuple(self._answer_map.answers()),
        )

    def begin(self) -> SubmissionPayload | None:
        with self._lock:
            if self._in_flight or self._completed:
                return None
            self._in_flight = True
        return self.build_payload()

    def complete(self, result: QuizResult) -> None:
        with self._lock:
            self._in_flight = False
            self._completed = True
            self._result = result

    def fail(self, error: BaseException) -> None:
        with self._lock:
            self._in_flight = False
        logger.warning("Quiz submission failed: %s", error)

    def submit(self, send: Sender) -> QuizResult | None:
        """Send the answers through ``send``; ``None`` when another submit holds the latch."""
        payload = self.begin()
        if payload is None:
            logger.debug("Submit ignored: a submission is already in flight or done")
            return None
        try:
            result = send(payload)
        except Exception as exc:
            self.fail(exc)
            raise SubmissionError(str(exc) or exc.__class__.__name__) from exc
        self.complete(result)
        return result
