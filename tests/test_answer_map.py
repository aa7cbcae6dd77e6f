import pytest

from quiz_taker.core.models import QuestionType
from quiz_taker.core.services.answer_map import AnswerMap, UnknownQuestionError

from conftest import make_question


@pytest.fixture
def answer_map():
    return AnswerMap(
        [
            make_question(1),
            make_question(2, QuestionType.TEXT),
            make_question(3, required=False),
        ]
    )


def test_overwriting_keeps_a_single_answer(answer_map):
    answer_map.set_answer(1, option_id=11)
    answer_map.set_answer(1, option_id=12)

    assert answer_map.count_answered() == 1
    assert answer_map.get_answer(1).selected_option_id == 12


def test_unknown_question_id_is_rejected_on_write_and_none_on_read(answer_map):
    with pytest.raises(UnknownQuestionError):
        answer_map.set_answer(99, option_id=1)
    assert answer_map.get_answer(99) is None
    assert answer_map.count_answered() == 0


def test_blank_text_clears_previous_answer(answer_map):
    answer_map.set_answer(2, text="Paris")
    assert answer_map.is_answered(2)

    assert answer_map.set_answer(2, text="   ") is None
    assert not answer_map.is_answered(2)


def test_option_ids_are_not_validated(answer_map):
    answer = answer_map.set_answer(1, option_id=12345)
    assert answer.selected_option_id == 12345


def test_unanswered_required_follows_quiz_order(answer_map):
    assert answer_map.unanswered_required() == [1, 2]
    answer_map.set_answer(2, text="Paris")
    assert answer_map.unanswered_required() == [1]


def test_answers_are_listed_in_quiz_order(answer_map):
    answer_map.set_answer(3, option_id=31)
    answer_map.set_answer(1, option_id=11)

    assert [answer.question_id for answer in answer_map.answers()] == [1, 3]


def test_clear_answer(answer_map):
    answer_map.set_answer(1, option_id=11)
    answer_map.clear_answer(1)
    assert answer_map.count_answered() == 0
    with pytest.raises(KeyError):
        answer_map.clear_answer(42)


def test_selectable_question_without_options_is_never_reported_missing():
    answer_map = AnswerMap([make_question(1), make_question(2, options=())])
    answer_map.set_answer(1, option_id=11)
    assert answer_map.unanswered_required() == []
