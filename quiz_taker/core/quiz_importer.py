"""Utilities for importing practice quizzes from a human-friendly text file.

A file holds one quiz. An optional header block comes first, then one block
per question. Blocks are separated by blank lines or '---'.

    TITLE: Quiz title
    DESCRIPTION: One line shown before the quiz starts   (optional)
    TIMELIMIT: minutes                                   (optional, 0 = none)
    PASSING: percentage needed to pass                    (optional)

    Q: Question text (supports markdown + LaTeX). Following lines until the
       next marker belong to the question.
    TYPE: MCQ | TRUE_FALSE | TEXT    (optional, see below)
    A: First option
    B: Second option                  (up to F)
    CORRECT: B | TRUE | expected text
    POINTS: 2                         (optional, default 1)
    EXPLANATION: Shown in the review  (optional)
    OPTIONAL                          (question may be skipped)

Without TYPE, a question with lettered options is MCQ and one without is TEXT.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from quiz_taker.constants.quiz_constants import DEFAULT_PASSING_SCORE, TRUE_FALSE_CHOICES
from quiz_taker.core.models import QuestionType


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class PracticeQuestion:
    """Question as authored, including the answer key."""

    text: str
    question_type: QuestionType
    options: list[str] = field(default_factory=list)
    correct_index: int | None = None
    correct_text: str | None = None
    points: float = 1.0
    is_required: bool = True
    explanation: str = ""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    title: str
    questions: list[PracticeQuestion]
    description: str = ""
    time_limit_minutes: int = 0
    passing_score: float = DEFAULT_PASSING_SCORE


_OPTION_ORDER = ["A", "B", "C", "D", "E", "F"]
_HEADER_KEYS = ("TITLE:", "DESCRIPTION:", "TIMELIMIT:", "PASSING:")


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    blocks = _split_blocks(text)

    header: dict[str, str] = {}
    if blocks and blocks[0].lstrip().upper().startswith(_HEADER_KEYS):
        header = _parse_header(blocks.pop(0))

    questions = [_parse_block(block) for block in blocks]
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")

    return ImportedQuiz(
        source_path=file_path,
        title=header.get("TITLE") or file_path.stem.replace("_", " ").title(),
        description=header.get("DESCRIPTION", ""),
        time_limit_minutes=_parse_number(header, "TIMELIMIT", 0, int),
        passing_score=_parse_number(header, "PASSING", DEFAULT_PASSING_SCORE, float),
        questions=questions,
    )


def _split_blocks(text: str) -> list[str]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---" or not stripped:
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        current_block.append(raw_line)
    if current_block:
        blocks.append("\n".join(current_block).strip())
    return [block for block in blocks if block]


def _parse_header(block: str) -> dict[str, str]:
    header: dict[str, str] = {}
    for raw_line in block.splitlines():
        line = raw_line.strip()
        key, separator, value = line.partition(":")
        if not separator or f"{key.upper()}:" not in _HEADER_KEYS:
            raise QuizImportError(f"Unexpected line in quiz header: '{line}'.")
        header[key.upper()] = value.strip()
    return header


def _parse_number(header: dict[str, str], key: str, default, cast):
    raw_value = header.get(key)
    if not raw_value:
        return default
    try:
        value = cast(raw_value)
    except ValueError as exc:
        raise QuizImportError(f"{key} must be a number.") from exc
    if value < 0:
        raise QuizImportError(f"{key} must not be negative.")
    return value


def _parse_block(block: str) -> PracticeQuestion:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    declared_type: QuestionType | None = None
    correct_value: str | None = None
    points = 1.0
    is_required = True
    explanation = ""
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        upper = line.upper()

        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
        elif upper.startswith("TYPE:"):
            declared_type = _parse_type(line.split(":", 1)[1].strip())
            current_section = None
        elif upper.startswith("CORRECT:"):
            correct_value = line.split(":", 1)[1].strip()
            current_section = None
        elif upper.startswith("POINTS:"):
            try:
                points = float(line.split(":", 1)[1].strip())
            except ValueError as exc:
                raise QuizImportError("POINTS must be a number.") from exc
            if points < 0:
                raise QuizImportError("POINTS must not be negative.")
            current_section = None
        elif upper.startswith("EXPLANATION:"):
            explanation = line.split(":", 1)[1].strip()
            current_section = "EXPLANATION"
        elif upper == "OPTIONAL":
            is_required = False
            current_section = None
        elif len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
        elif current_section == "Q":
            question_lines.append(line)
        elif current_section == "EXPLANATION":
            explanation = f"{explanation}\n{line}"
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(f"Encountered text outside of a known section: '{line}'.")

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError("Question text missing (Q: ...)")

    question_type = declared_type or (QuestionType.SINGLE_SELECT if options else QuestionType.TEXT)
    question = PracticeQuestion(
        text=question_text,
        question_type=question_type,
        points=points,
        is_required=is_required,
        explanation=explanation.strip(),
    )

    if question_type is QuestionType.SINGLE_SELECT:
        _apply_choice_options(question, options, correct_value)
    elif question_type is QuestionType.TRUE_FALSE:
        if options:
            raise QuizImportError("TRUE_FALSE questions must not list options.")
        question.options = list(TRUE_FALSE_CHOICES)
        if correct_value is not None:
            normalized = correct_value.strip().capitalize()
            if normalized not in TRUE_FALSE_CHOICES:
                raise QuizImportError("CORRECT must be TRUE or FALSE for TRUE_FALSE questions.")
            question.correct_index = TRUE_FALSE_CHOICES.index(normalized)
    else:
        if options:
            raise QuizImportError("TEXT questions must not list options.")
        question.correct_text = correct_value or None

    return question


def _apply_choice_options(
    question: PracticeQuestion,
    options: dict[str, str],
    correct_value: str | None,
) -> None:
    letters = [letter for letter in _OPTION_ORDER if letter in options]
    if len(letters) < 2:
        raise QuizImportError("MCQ questions need at least two options.")
    if letters != _OPTION_ORDER[: len(letters)]:
        raise QuizImportError("Options must be lettered consecutively starting at A.")
    option_list = [options[letter].strip() for letter in letters]
    if any(not option for option in option_list):
        raise QuizImportError("Option text cannot be empty.")
    question.options = option_list

    if correct_value is not None:
        correct_letter = correct_value.upper()
        if correct_letter not in letters:
            raise QuizImportError(f"CORRECT must be one of {', '.join(letters)}.")
        question.correct_index = letters.index(correct_letter)


def _parse_type(raw_type: str) -> QuestionType:
    try:
        return QuestionType(raw_type.strip().upper())
    except ValueError as exc:
        raise QuizImportError("TYPE must be MCQ, TRUE_FALSE or TEXT.") from exc
