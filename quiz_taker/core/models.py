"""Domain models for the quiz-taking client."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto

from quiz_taker.constants.quiz_constants import UNLIMITED_TIME_LIMIT_MINUTES


def has_time_limit(minutes: int) -> bool:
    """Zero, negative and the 1440-minute sentinel all mean no limit."""
    return 0 < minutes != UNLIMITED_TIME_LIMIT_MINUTES


def format_time_limit(minutes: int) -> str:
    return f"{minutes} min" if has_time_limit(minutes) else "Unlimited"


class QuestionType(Enum):
    """Kinds of question a quiz can contain, keyed by their wire name."""

    SINGLE_SELECT = "MCQ"
    TRUE_FALSE = "TRUE_FALSE"
    TEXT = "TEXT"

    @property
    def is_selectable(self) -> bool:
        return self is not QuestionType.TEXT


class SessionState(Enum):
    """Lifecycle of one participant's attempt at a quiz."""

    COLLECTING_PARTICIPANT_INFO = auto()
    IN_PROGRESS = auto()
    TIME_EXPIRED = auto()
    SUBMITTING = auto()
    SUBMITTED = auto()


@dataclass(slots=True, frozen=True)
class Option:
    """One selectable choice of a question."""

    id: int
    text: str
    order: int = 0


@dataclass(slots=True, frozen=True)
class Question:
    """A single prompt of a quiz as seen by the participant."""

    id: int
    text: str
    question_type: QuestionType
    order: int = 0
    points: float = 1.0
    is_required: bool = True
    options: tuple[Option, ...] = ()
    notice: str | None = None  # Shown inline when the question data is degraded

    @property
    def is_selectable(self) -> bool:
        return self.question_type.is_selectable

    @property
    def is_answerable(self) -> bool:
        """False for a selectable question that arrived without any choice to pick."""
        return not self.is_selectable or bool(self.options) or self.uses_text_choices

    @property
    def uses_text_choices(self) -> bool:
        """True/false questions without options answer with the literal choice text."""
        return self.question_type is QuestionType.TRUE_FALSE and not self.options


@dataclass(slots=True, frozen=True)
class Quiz:
    """A quiz fetched for a session. Never mutated after loading."""

    id: int
    title: str
    questions: tuple[Question, ...]
    description: str = ""
    time_limit_minutes: int = 0
    passing_score: float = 0.0
    max_attempts: int = 1
    allow_retakes: bool = False
    show_results_immediately: bool = True

    @property
    def has_time_limit(self) -> bool:
        return has_time_limit(self.time_limit_minutes)

    @property
    def total_points(self) -> float:
        return sum(question.points for question in self.questions)

    @property
    def question_ids(self) -> list[int]:
        return [question.id for question in self.questions]

    def time_limit_label(self) -> str:
        return format_time_limit(self.time_limit_minutes)


@dataclass(slots=True, frozen=True)
class QuizSummary:
    """Entry of the public quiz list."""

    id: int
    title: str
    description: str = ""
    time_limit_minutes: int = 0
    total_questions: int = 0

    def time_limit_label(self) -> str:
        return format_time_limit(self.time_limit_minutes)


@dataclass(slots=True, frozen=True)
class Answer:
    """The participant's current response to one question."""

    question_id: int
    selected_option_id: int | None = None
    text_answer: str | None = None

    def to_wire(self) -> dict[str, object]:
        payload: dict[str, object] = {"question_id": self.question_id}
        if self.selected_option_id is not None:
            payload["selected_option_id"] = self.selected_option_id
        if self.text_answer is not None:
            payload["text_answer"] = self.text_answer
        return payload


@dataclass(slots=True, frozen=True)
class ParticipantInfo:
    """Who is taking the quiz. Captured once before the quiz starts."""

    name: str
    email: str


@dataclass(slots=True, frozen=True)
class SubmissionPayload:
    """Body of the scoring request."""

    participant: ParticipantInfo
    answers: tuple[Answer, ...]

    def to_wire(self) -> dict[str, object]:
        return {
            "participant_name": self.participant.name,
            "participant_email": self.participant.email,
            "answers": [answer.to_wire() for answer in self.answers],
        }


@dataclass(slots=True, frozen=True)
class QuestionResult:
    """Server verdict for one answered question."""

    question_text: str
    question_type: str = ""
    selected_option_text: str = ""
    text_answer: str = ""
    is_correct: bool = False
    points_earned: float = 0.0
    correct_option_text: str = ""
    explanation: str = ""


@dataclass(slots=True, frozen=True)
class QuizResult:
    """Server-computed outcome of a submitted session. Rendered as-is."""

    quiz_title: str
    participant_name: str
    score: float
    total_points: float
    percentage: float
    is_passed: bool
    answers: tuple[QuestionResult, ...] = field(default_factory=tuple)
    submitted_at: datetime | None = None
    attempt_number: int = 1
    correct_answers_count: int = 0
    total_questions_count: int = 0
    session_id: str | None = None
