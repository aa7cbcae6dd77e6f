import pytest

from quiz_taker.core.services.answer_map import AnswerMap
from quiz_taker.core.services.submission_assembler import SubmissionAssembler, SubmissionError

from conftest import make_question, make_result


@pytest.fixture
def assembler(participant):
    answer_map = AnswerMap([make_question(1), make_question(2)])
    answer_map.set_answer(1, option_id=11)
    return SubmissionAssembler(answer_map, participant)


def test_payload_omits_absent_keys(assembler):
    wire = assembler.build_payload().to_wire()
    assert wire == {
        "participant_name": "Ada Lovelace",
        "participant_email": "ada@example.com",
        "answers": [{"question_id": 1, "selected_option_id": 11}],
    }


def test_reentrant_submit_sends_once(assembler):
    sent = []

    def send(payload):
        sent.append(payload)
        # A timer expiry arriving while this request is in flight
        assert assembler.submit(send) is None
        return make_result()

    result = assembler.submit(send)

    assert len(sent) == 1
    assert result.is_passed
    assert assembler.is_completed()
    assert assembler.submit(send) is None


def test_failure_releases_latch_for_retry(assembler):
    def failing_send(_payload):
        raise RuntimeError("500")

    with pytest.raises(SubmissionError):
        assembler.submit(failing_send)
    assert not assembler.is_in_flight()

    result = assembler.submit(lambda _payload: make_result())
    assert result is assembler.result


def test_begin_returns_none_while_in_flight(assembler):
    assert assembler.begin() is not None
    assert assembler.begin() is None
    assembler.fail(RuntimeError("boom"))
    assert assembler.begin() is not None
