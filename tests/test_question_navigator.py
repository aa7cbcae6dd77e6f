import pytest

from quiz_taker.core.services.question_navigator import QuestionNavigator


def test_previous_on_first_question_stays_put():
    navigator = QuestionNavigator(3)
    assert navigator.previous() == 0
    assert navigator.is_first()


def test_next_on_last_question_does_not_wrap():
    navigator = QuestionNavigator(3)
    navigator.jump_to(2)
    assert navigator.next() == 2
    assert navigator.is_last()


@pytest.mark.parametrize(("target", "expected"), [(-5, 0), (1, 1), (10, 2)])
def test_jump_to_is_clamped(target, expected):
    navigator = QuestionNavigator(3)
    assert navigator.jump_to(target) == expected


def test_progress_fraction_counts_current_question():
    navigator = QuestionNavigator(4)
    assert navigator.progress_fraction() == 0.25
    navigator.next()
    assert navigator.progress_fraction() == 0.5


def test_empty_quiz_is_rejected():
    with pytest.raises(ValueError):
        QuestionNavigator(0)
