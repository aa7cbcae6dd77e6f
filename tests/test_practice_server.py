from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from quiz_taker.client.api_client import ApiClient, QuizNotFoundError
from quiz_taker.core.models import ParticipantInfo, SessionState
from quiz_taker.core.quiz_session import QuizSession
from quiz_taker.server.practice_server import API_PREFIX, PracticeBackend, create_practice_app

PRACTICE_DIR = Path(__file__).resolve().parents[1] / "practice_quizzes"


@pytest.fixture
def backend():
    return PracticeBackend.from_directory(PRACTICE_DIR)


@pytest.fixture
def http(backend):
    with TestClient(create_practice_app(backend), base_url=f"http://testserver{API_PREFIX}") as client:
        yield client


@pytest.fixture
def api(http):
    return ApiClient(http_client=http)


def test_quiz_detail_hides_the_answer_key(http):
    response = http.get("/public/quizzes/1/")
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Radians"
    assert all("is_correct" not in option for question in body["questions"] for option in question["options"])


def test_unknown_quiz_is_404(http):
    assert http.get("/public/quizzes/99/").status_code == 404


def test_invalid_participant_is_400(http):
    response = http.post(
        "/public/quizzes/1/submit/",
        json={"participant_name": "Ada", "participant_email": "not-an-email", "answers": []},
    )
    assert response.status_code == 400


def test_unknown_question_in_submission_is_400(http):
    response = http.post(
        "/public/quizzes/1/submit/",
        json={"participant_name": "Ada", "participant_email": "ada@example.com",
              "answers": [{"question_id": 42, "text_answer": "x"}]},
    )
    assert response.status_code == 400


def test_full_attempt_through_client_and_session(api):
    summaries = api.list_quizzes()
    assert [summary.title for summary in summaries] == ["Radians"]

    quiz = api.fetch_quiz(summaries[0].id)
    assert quiz.time_limit_label() == "10 min"

    session = QuizSession.create(quiz, api.submit_quiz)
    session.start(ParticipantInfo(name="Ada", email="ada@example.com"))
    mcq, true_false, numeric, _essay = quiz.questions
    session.set_answer(mcq.id, option_id=mcq.options[0].id)
    session.set_answer(true_false.id, option_id=true_false.options[0].id)
    session.set_answer(numeric.id, text=" 57 ")

    result = session.submit()

    assert session.state is SessionState.SUBMITTED
    assert result.correct_answers_count == 2
    assert result.total_points == 5.0
    assert result.score == 2.0
    assert not result.is_passed
    wrong = result.answers[0]
    assert not wrong.is_correct
    assert wrong.correct_option_text == "$\\frac{\\pi}{6}$"

    stored = api.fetch_result(result.session_id)
    assert stored.percentage == result.percentage


def test_attempts_are_counted_per_email(api):
    quiz = api.fetch_quiz(1)
    for expected_attempt in (1, 2):
        session = QuizSession.create(quiz, api.submit_quiz)
        session.start(ParticipantInfo(name="Ada", email="ADA@example.com"))
        for question in quiz.questions:
            if question.options:
                session.set_answer(question.id, option_id=question.options[0].id)
            else:
                session.set_answer(question.id, text="57")
        assert session.submit().attempt_number == expected_attempt


def test_missing_result_is_not_found(api):
    with pytest.raises(QuizNotFoundError):
        api.fetch_result("does-not-exist")
