"""Wire schemas of the quiz backend and their conversion to domain models.

The backend is not strict about shapes: responses may or may not be wrapped in
an ``{error, message, data, status_code}`` envelope, numeric fields sometimes
arrive as strings, and question types come in several spellings. Everything
is normalised here so the core only ever sees :mod:`quiz_taker.core.models`.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from quiz_taker.core.models import (
    Option,
    Question,
    QuestionResult,
    QuestionType,
    Quiz,
    QuizResult,
    QuizSummary,
)

_QUESTION_TYPE_ALIASES: dict[str, QuestionType] = {
    "mcq": QuestionType.SINGLE_SELECT,
    "multiple_choice": QuestionType.SINGLE_SELECT,
    "single_choice": QuestionType.SINGLE_SELECT,
    "true_false": QuestionType.TRUE_FALSE,
    "text": QuestionType.TEXT,
    "short_answer": QuestionType.TEXT,
}

NO_OPTIONS_NOTICE = "No options available for this question."


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class OptionSchema(_WireModel):
    id: int
    option_text: str = ""
    order: int = 0
    is_correct: bool | None = None


class QuestionSchema(_WireModel):
    id: int
    question_text: str = ""
    question_type: str = "MCQ"
    order: int = 0
    points: float = 1.0
    is_required: bool = True
    options: list[OptionSchema] = Field(default_factory=list)


class QuizDetailSchema(_WireModel):
    id: int
    title: str
    description: str | None = None
    time_limit: int = 0
    passing_score: float = 0.0
    max_attempts: int = 1
    allow_retakes: bool = False
    show_results_immediately: bool = True
    questions: list[QuestionSchema] = Field(default_factory=list)


class QuizSummarySchema(_WireModel):
    id: int
    title: str
    description: str | None = None
    time_limit: int = 0
    total_questions: int = 0


class QuizListSchema(_WireModel):
    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[QuizSummarySchema] = Field(default_factory=list)


class AnswerSubmissionSchema(_WireModel):
    question_id: int
    selected_option_id: int | None = None
    text_answer: str | None = None


class QuizSubmissionSchema(_WireModel):
    participant_name: str
    participant_email: str
    answers: list[AnswerSubmissionSchema] = Field(default_factory=list)


class AnswerResultSchema(_WireModel):
    question_text: str = ""
    question_type: str | None = None
    selected_option_text: str | None = None
    text_answer: str | None = None
    is_correct: bool = False
    points_earned: float = 0.0
    correct_option_text: str | None = None
    explanation: str | None = None


class QuizResultSchema(_WireModel):
    quiz_title: str = ""
    participant_name: str = ""
    score: float = 0.0
    total_points: float = 0.0
    percentage: float = 0.0
    is_passed: bool = False
    submitted_at: datetime | None = None
    attempt_number: int = 1
    correct_answers_count: int = 0
    total_questions_count: int = 0
    session_id: str | None = None
    answers: list[AnswerResultSchema] = Field(default_factory=list)


def unwrap_envelope(body: object) -> object:
    """Return the ``data`` member of an API envelope, or the body unchanged."""
    if isinstance(body, dict) and "data" in body and ("error" in body or "status_code" in body):
        return body["data"]
    return body


def normalize_question_type(raw_type: str | None) -> tuple[QuestionType, str | None]:
    """Map a wire question type to the domain enum plus an optional notice."""
    key = (raw_type or "").strip().lower()
    if key in _QUESTION_TYPE_ALIASES:
        return _QUESTION_TYPE_ALIASES[key], None
    return QuestionType.TEXT, f"Unsupported question type '{raw_type}'; answer in free text."


def to_question(schema: QuestionSchema) -> Question:
    question_type, notice = normalize_question_type(schema.question_type)
    options = tuple(
        Option(id=option.id, text=option.option_text, order=option.order)
        for option in sorted(schema.options, key=lambda option: option.order)
    )
    if question_type is QuestionType.SINGLE_SELECT and not options:
        notice = NO_OPTIONS_NOTICE
    if question_type is QuestionType.TEXT:
        options = ()
    return Question(
        id=schema.id,
        text=schema.question_text,
        question_type=question_type,
        order=schema.order,
        points=schema.points,
        is_required=schema.is_required,
        options=options,
        notice=notice,
    )


def to_quiz(schema: QuizDetailSchema) -> Quiz:
    questions = sorted(schema.questions, key=lambda question: question.order)
    return Quiz(
        id=schema.id,
        title=schema.title,
        description=schema.description or "",
        time_limit_minutes=schema.time_limit,
        passing_score=schema.passing_score,
        max_attempts=schema.max_attempts,
        allow_retakes=schema.allow_retakes,
        show_results_immediately=schema.show_results_immediately,
        questions=tuple(to_question(question) for question in questions),
    )


def to_quiz_result(schema: QuizResultSchema) -> QuizResult:
    return QuizResult(
        quiz_title=schema.quiz_title,
        participant_name=schema.participant_name,
        score=schema.score,
        total_points=schema.total_points,
        percentage=schema.percentage,
        is_passed=schema.is_passed,
        submitted_at=schema.submitted_at,
        attempt_number=schema.attempt_number,
        correct_answers_count=schema.correct_answers_count,
        total_questions_count=schema.total_questions_count,
        session_id=schema.session_id,
        answers=tuple(
            QuestionResult(
                question_text=answer.question_text,
                question_type=answer.question_type or "",
                selected_option_text=answer.selected_option_text or "",
                text_answer=answer.text_answer or "",
                is_correct=answer.is_correct,
                points_earned=answer.points_earned,
                correct_option_text=answer.correct_option_text or "",
                explanation=answer.explanation or "",
            )
            for answer in schema.answers
        ),
    )


def parse_quiz(body: object) -> Quiz:
    return to_quiz(QuizDetailSchema.model_validate(unwrap_envelope(body)))


def parse_quiz_list(body: object) -> list[QuizSummary]:
    data = unwrap_envelope(body)
    if isinstance(data, list):
        data = {"count": len(data), "results": data}
    listing = QuizListSchema.model_validate(data)
    return [
        QuizSummary(
            id=entry.id,
            title=entry.title,
            description=entry.description or "",
            time_limit_minutes=entry.time_limit,
            total_questions=entry.total_questions,
        )
        for entry in listing.results
    ]


def parse_quiz_result(body: object) -> QuizResult:
    return to_quiz_result(QuizResultSchema.model_validate(unwrap_envelope(body)))
