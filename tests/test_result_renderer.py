from datetime import datetime

from quiz_taker.core.models import QuestionResult
from quiz_taker.core.result_renderer import (
    NO_ANSWER_TEXT,
    build_result_review,
    format_points,
    render_result_html,
)

from conftest import make_result


def test_correct_answer_block_only_for_wrong_answers(sample_result):
    review = build_result_review(sample_result)
    right, wrong = review.rows

    assert right.is_correct and right.correct_answer is None
    assert not wrong.is_correct and wrong.correct_answer == "First"
    assert wrong.explanation == "Because."


def test_wrong_answer_without_key_shows_no_correct_block():
    result = make_result(
        answers=(QuestionResult(question_text="Essay", text_answer="", is_correct=False),),
    )
    row = build_result_review(result).rows[0]
    assert row.correct_answer is None
    assert row.your_answer == NO_ANSWER_TEXT


def test_passed_headline_and_rounded_percentage(sample_result):
    review = build_result_review(sample_result)
    assert review.headline == "Congratulations!"
    assert review.status_label == "Passed!"
    assert review.percentage_label == "67%"
    assert review.score_line == "2/3"
    assert review.attempt_label is None


def test_failed_result_on_later_attempt():
    result = make_result(
        is_passed=False,
        percentage=40.5,
        attempt_number=3,
        submitted_at=datetime(2026, 1, 5, 9, 30),
    )
    review = build_result_review(result)
    assert review.headline == "Quiz Completed"
    assert review.status_label == "Not Passed"
    assert review.percentage_label == "41%"
    assert review.attempt_label == "Attempt #3"
    assert review.submitted_label == "Completed on 2026-01-05 09:30"


def test_format_points():
    assert format_points(2.0) == "2"
    assert format_points(1.5) == "1.5"


def test_render_document_states(sample_result):
    assert "Loading results..." in render_result_html(None, loading=True)
    assert "Result not found" in render_result_html(None)

    html = render_result_html(sample_result)
    assert "Answer Review" in html
    assert html.count('class="correct-answer"') == 1


def test_markup_in_answers_is_escaped():
    result = make_result(
        answers=(QuestionResult(question_text="Q", text_answer="<script>x</script>", is_correct=True),),
    )
    html = render_result_html(result)
    assert "<script>x</script>" not in html
