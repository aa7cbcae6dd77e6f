"""Review view of a scored quiz.

Nothing here computes correctness. The server's verdict is shown as received;
the only decisions made locally are presentational (which blocks to show).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from html import escape

from quiz_taker.core.markdown_math_renderer import MarkdownMathRenderer, renderer as default_renderer
from quiz_taker.core.models import QuestionResult, QuizResult

NO_ANSWER_TEXT = "No answer"

_REVIEW_CSS = """
      .header { border-radius: 8px; padding: 1rem; color: #FFFFFF; }
      .header.passed { background: #107C10; }
      .header.failed { background: #D13438; }
      .summary { display: flex; gap: 2rem; margin: 1rem 0; }
      .summary div { text-align: center; }
      .summary strong { display: block; font-size: 1.6em; }
      .row { border: 1px solid #D1D1D1; border-radius: 8px; padding: 0.75rem; margin-bottom: 0.75rem; }
      .answer.correct { background: #e8f5e9; border-left: 4px solid #107C10; padding: 0.4rem; }
      .answer.wrong { background: #fdecea; border-left: 4px solid #D13438; padding: 0.4rem; }
      .correct-answer { background: #e8f5e9; padding: 0.4rem; margin-top: 0.4rem; }
      .explanation { background: #eef4fb; padding: 0.4rem; margin-top: 0.4rem; }
      .state { text-align: center; margin-top: 3rem; }
"""


@dataclass(slots=True, frozen=True)
class ResultReviewRow:
    """One reviewed question."""

    number: int
    question_text: str
    your_answer: str
    is_correct: bool
    points_earned: float
    correct_answer: str | None = None
    explanation: str | None = None


@dataclass(slots=True, frozen=True)
class ResultReview:
    """Everything the review page shows, already decided."""

    quiz_title: str
    participant_name: str
    headline: str
    status_label: str
    is_passed: bool
    score_line: str
    percentage_label: str
    total_points_label: str
    submitted_label: str | None
    attempt_label: str | None
    rows: tuple[ResultReviewRow, ...]


def format_points(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _review_row(number: int, answer: QuestionResult) -> ResultReviewRow:
    your_answer = answer.selected_option_text or answer.text_answer or NO_ANSWER_TEXT
    correct_answer = None
    if not answer.is_correct and answer.correct_option_text:
        correct_answer = answer.correct_option_text
    return ResultReviewRow(
        number=number,
        question_text=answer.question_text,
        your_answer=your_answer,
        is_correct=answer.is_correct,
        points_earned=answer.points_earned,
        correct_answer=correct_answer,
        explanation=answer.explanation or None,
    )


def build_result_review(result: QuizResult) -> ResultReview:
    submitted_label = None
    if result.submitted_at is not None:
        submitted_label = f"Completed on {result.submitted_at:%Y-%m-%d %H:%M}"
    attempt_label = f"Attempt #{result.attempt_number}" if result.attempt_number > 1 else None
    return ResultReview(
        quiz_title=result.quiz_title,
        participant_name=result.participant_name,
        headline="Congratulations!" if result.is_passed else "Quiz Completed",
        status_label="Passed!" if result.is_passed else "Not Passed",
        is_passed=result.is_passed,
        score_line=f"{result.correct_answers_count}/{result.total_questions_count}",
        percentage_label=f"{math.floor(result.percentage + 0.5)}%",
        total_points_label=format_points(result.total_points),
        submitted_label=submitted_label,
        attempt_label=attempt_label,
        rows=tuple(_review_row(index, answer) for index, answer in enumerate(result.answers, start=1)),
    )


def _render_row(row: ResultReviewRow, markdown: MarkdownMathRenderer) -> str:
    verdict = "correct" if row.is_correct else "wrong"
    mark = "&#10003;" if row.is_correct else "&#10007;"
    parts = [
        '<div class="row">',
        f"<h4>{mark} Question {row.number}: {markdown.render_inline(row.question_text)}</h4>",
        f'<div class="answer {verdict}"><span class="meta">Your answer</span><br/>'
        f"{markdown.render_inline(row.your_answer)}</div>",
    ]
    if row.correct_answer is not None:
        parts.append(
            '<div class="correct-answer"><span class="meta">Correct answer</span><br/>'
            f"{markdown.render_inline(row.correct_answer)}</div>"
        )
    if row.explanation is not None:
        parts.append(
            '<div class="explanation"><span class="meta">Explanation</span>'
            f"{markdown.render_fragment(row.explanation)}</div>"
        )
    parts.append(f'<p class="meta">Points earned: {format_points(row.points_earned)}</p>')
    parts.append("</div>")
    return "\n".join(parts)


def render_review_body(review: ResultReview, markdown: MarkdownMathRenderer = default_renderer) -> str:
    header_class = "passed" if review.is_passed else "failed"
    lines = [
        f'<div class="header {header_class}">',
        f"<h1>{escape(review.headline)}</h1>",
        f"<p>{escape(review.quiz_title)}</p>",
        f"<p>{escape(review.participant_name)}</p>",
        "</div>",
        '<div class="summary">',
        f"<div><strong>{review.score_line}</strong>Correct</div>",
        f"<div><strong>{review.percentage_label}</strong>Score</div>",
        f"<div><strong>{review.total_points_label}</strong>Total points</div>",
        "</div>",
        f"<p><b>{escape(review.status_label)}</b></p>",
    ]
    if review.submitted_label:
        lines.append(f'<p class="meta">{escape(review.submitted_label)}</p>')
    if review.attempt_label:
        lines.append(f'<p class="meta">{escape(review.attempt_label)}</p>')
    if review.rows:
        lines.append("<h2>Answer Review</h2>")
        lines.extend(_render_row(row, markdown) for row in review.rows)
    return "\n".join(lines)


def render_result_html(
    result: QuizResult | None,
    *,
    loading: bool = False,
    font_size: int = 14,
    markdown: MarkdownMathRenderer = default_renderer,
) -> str:
    """Render the review page, or the loading / not-found state without a result."""
    if result is None:
        message = "Loading results..." if loading else "Result not found"
        body = f'<div class="state"><h2>{message}</h2></div>'
        return markdown.wrap_document(body, title="Quiz Results", font_size=font_size, extra_css=_REVIEW_CSS)
    review = build_result_review(result)
    return markdown.wrap_document(
        render_review_body(review, markdown),
        title=f"Results - {result.quiz_title}",
        font_size=font_size,
        extra_css=_REVIEW_CSS,
    )
