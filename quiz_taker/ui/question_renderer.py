"""Question rendering utilities for displaying quiz questions."""

from __future__ import annotations

from html import escape

from quiz_taker.core.markdown_math_renderer import MarkdownMathRenderer, renderer
from quiz_taker.core.models import Question
from quiz_taker.core.result_renderer import format_points


def render_question(
    question: Question,
    number: int,
    total: int,
    font_size: int = 14,
    markdown: MarkdownMathRenderer = renderer,
) -> str:
    """Render one question as HTML for the question view.

    Args:
        question: The question to show (text supports Markdown and LaTeX)
        number: 1-based position of the question in the quiz
        total: Number of questions in the quiz
        font_size: Font size in points for the question text (default 14)

    Returns:
        HTML string ready for display in QWebEngineView
    """
    required_mark = '<span class="required">*</span>' if question.is_required else ""
    points_label = "point" if question.points == 1 else "points"
    lines = [
        f'<p class="meta">Question {number} of {total} &middot; '
        f"{format_points(question.points)} {points_label}</p>",
        f'<div class="question">{markdown.render_fragment(question.text, "(No question text)")}</div>',
    ]
    if required_mark:
        lines.append(f'<p class="meta">{required_mark} Required</p>')
    if question.notice:
        lines.append(f'<div class="notice">{escape(question.notice)}</div>')
    return markdown.wrap_document("\n".join(lines), title=f"Question {number}", font_size=font_size)
