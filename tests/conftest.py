import pytest

from quiz_taker.core.models import (
    Option,
    ParticipantInfo,
    Question,
    QuestionResult,
    QuestionType,
    Quiz,
    QuizResult,
)


def make_question(question_id, question_type=QuestionType.SINGLE_SELECT, *, required=True, options=None, points=1.0):
    if options is None and question_type is QuestionType.SINGLE_SELECT:
        options = (
            Option(id=question_id * 10 + 1, text="First", order=0),
            Option(id=question_id * 10 + 2, text="Second", order=1),
        )
    return Question(
        id=question_id,
        text=f"Question {question_id}",
        question_type=question_type,
        order=question_id,
        points=points,
        is_required=required,
        options=tuple(options or ()),
    )


def make_quiz(questions, time_limit_minutes=0, quiz_id=7):
    return Quiz(
        id=quiz_id,
        title="Sample Quiz",
        questions=tuple(questions),
        time_limit_minutes=time_limit_minutes,
        passing_score=60.0,
    )


def make_result(**overrides):
    values = dict(
        quiz_title="Sample Quiz",
        participant_name="Ada",
        score=2.0,
        total_points=3.0,
        percentage=66.67,
        is_passed=True,
        correct_answers_count=2,
        total_questions_count=3,
        answers=(
            QuestionResult(question_text="Question 1", selected_option_text="First", is_correct=True,
                           points_earned=1.0, correct_option_text="First"),
            QuestionResult(question_text="Question 2", selected_option_text="Second", is_correct=False,
                           points_earned=0.0, correct_option_text="First", explanation="Because."),
        ),
    )
    values.update(overrides)
    return QuizResult(**values)


@pytest.fixture
def participant():
    return ParticipantInfo(name="Ada Lovelace", email="ada@example.com")


@pytest.fixture
def three_question_quiz():
    """Q1 and Q2 required, Q3 optional."""
    return make_quiz(
        [
            make_question(1),
            make_question(2),
            make_question(3, required=False),
        ]
    )


@pytest.fixture
def timed_quiz():
    return make_quiz([make_question(1), make_question(2)], time_limit_minutes=1)


@pytest.fixture
def sample_result():
    return make_result()
