import pytest
from pydantic import ValidationError

from quiz_taker.client.schemas import (
    NO_OPTIONS_NOTICE,
    parse_quiz,
    parse_quiz_list,
    parse_quiz_result,
    unwrap_envelope,
)
from quiz_taker.core.models import QuestionType


def quiz_body(**overrides):
    body = {
        "id": 5,
        "title": "Geography",
        "description": None,
        "time_limit": 1440,
        "passing_score": "70",
        "questions": [
            {
                "id": 2,
                "question_text": "Capital of France?",
                "question_type": "MCQ",
                "order": 2,
                "points": "2",
                "options": [
                    {"id": 21, "option_text": "Lyon", "order": 1},
                    {"id": 20, "option_text": "Paris", "order": 0},
                ],
            },
            {"id": 1, "question_text": "Name a river.", "question_type": "text", "order": 1},
        ],
    }
    body.update(overrides)
    return body


def test_quiz_is_normalised_and_sorted():
    quiz = parse_quiz(quiz_body())

    assert [question.id for question in quiz.questions] == [1, 2]
    mcq = quiz.questions[1]
    assert mcq.question_type is QuestionType.SINGLE_SELECT
    assert [option.text for option in mcq.options] == ["Paris", "Lyon"]
    assert mcq.points == 2.0
    assert quiz.passing_score == 70.0
    assert quiz.description == ""
    assert not quiz.has_time_limit
    assert quiz.time_limit_label() == "Unlimited"


def test_enveloped_response_is_unwrapped():
    body = {"error": False, "message": "ok", "data": quiz_body(), "status_code": 200}
    assert parse_quiz(body).title == "Geography"
    assert unwrap_envelope({"data": 1}) == {"data": 1}


def test_selectable_question_without_options_carries_notice():
    quiz = parse_quiz(
        quiz_body(questions=[{"id": 1, "question_text": "?", "question_type": "multiple_choice"}])
    )
    assert quiz.questions[0].notice == NO_OPTIONS_NOTICE


def test_unknown_question_type_falls_back_to_text():
    quiz = parse_quiz(
        quiz_body(questions=[{"id": 1, "question_text": "?", "question_type": "MATCHING",
                              "options": [{"id": 3, "option_text": "a"}]}])
    )
    question = quiz.questions[0]
    assert question.question_type is QuestionType.TEXT
    assert question.options == ()
    assert "MATCHING" in question.notice


def test_true_false_without_options_uses_text_choices():
    quiz = parse_quiz(quiz_body(questions=[{"id": 1, "question_text": "?", "question_type": "TRUE_FALSE"}]))
    question = quiz.questions[0]
    assert question.uses_text_choices
    assert question.notice is None


def test_quiz_list_accepts_pages_and_plain_lists():
    entry = {"id": 1, "title": "A", "time_limit": 10, "total_questions": 4}
    paged = parse_quiz_list({"count": 1, "next": None, "previous": None, "results": [entry]})
    plain = parse_quiz_list([entry])

    assert paged == plain
    assert paged[0].time_limit_label() == "10 min"


def test_result_defaults_missing_texts():
    result = parse_quiz_result(
        {
            "quiz_title": "Geography",
            "participant_name": "Ada",
            "score": 1,
            "total_points": 2,
            "percentage": 50,
            "is_passed": False,
            "submitted_at": "2026-01-05T09:30:00Z",
            "answers": [{"question_text": "Q", "is_correct": False, "correct_option_text": None}],
        }
    )
    assert result.answers[0].correct_option_text == ""
    assert result.submitted_at.year == 2026


def test_quiz_without_title_is_invalid():
    with pytest.raises(ValidationError):
        parse_quiz({"id": 1})
