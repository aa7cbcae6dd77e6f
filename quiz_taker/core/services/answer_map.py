"""In-memory store of the participant's answers for one quiz."""

from __future__ import annotations

from quiz_taker.core.models import Answer, Question


class UnknownQuestionError(KeyError):
    """Raised when an answer targets a question that is not part of the quiz."""


class AnswerMap:
    """Maps question ids to the participant's current answer.

    Only ids of the quiz the map was built for are accepted. Setting an answer
    replaces any earlier one; an edit without an option and without non-blank
    text clears the question instead.
    """

    def __init__(self, questions: list[Question] | tuple[Question, ...]) -> None:
        self._questions: dict[int, Question] = {question.id: question for question in questions}
        self._order: list[int] = [question.id for question in questions]
        self._answers: dict[int, Answer] = {}

    def set_answer(
        self,
        question_id: int,
        option_id: int | None = None,
        text: str | None = None,
    ) -> Answer | None:
        """Record an answer and return it, or ``None`` when the edit cleared it."""
        if question_id not in self._questions:
            raise UnknownQuestionError(question_id)

        if option_id is None and (text is None or not text.strip()):
            self._answers.pop(question_id, None)
            return None

        answer = Answer(question_id=question_id, selected_option_id=option_id, text_answer=text)
        self._answers[question_id] = answer
        return answer

    def clear_answer(self, question_id: int) -> None:
        if question_id not in self._questions:
            raise UnknownQuestionError(question_id)
        self._answers.pop(question_id, None)

    def get_answer(self, question_id: int) -> Answer | None:
        return self._answers.get(question_id)

    def is_answered(self, question_id: int) -> bool:
        return question_id in self._answers

    def count_answered(self) -> int:
        return len(self._answers)

    def unanswered_required(self) -> list[int]:
        """Return ids of required questions without an answer, in quiz order.

        Questions that cannot be answered (no options to pick) are left out so
        they never block a submission.
        """
        return [
            question_id
            for question_id in self._order
            if self._questions[question_id].is_required
            and self._questions[question_id].is_answerable
            and question_id not in self._answers
        ]

    def has_question(self, question_id: int) -> bool:
        return question_id in self._questions

    def answers(self) -> list[Answer]:
        """Return recorded answers in quiz order."""
        return [self._answers[qid] for qid in self._order if qid in self._answers]
