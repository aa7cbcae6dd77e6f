import pytest

from quiz_taker.core.services.countdown_timer import CountdownTimer


class ExpiryRecorder:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


@pytest.mark.parametrize("minutes", [0, -3, 1440])
def test_no_timer_for_unlimited_time_limits(minutes):
    assert CountdownTimer.from_time_limit(minutes, ExpiryRecorder()) is None


def test_time_limit_is_converted_to_seconds():
    timer = CountdownTimer.from_time_limit(2, ExpiryRecorder())
    assert timer.total_seconds == 120
    assert timer.format_remaining() == "2:00"


def test_expiry_fires_exactly_once():
    recorder = ExpiryRecorder()
    timer = CountdownTimer(3, recorder)
    timer.start()
    for _ in range(10):
        timer.tick()

    assert recorder.calls == 1
    assert timer.remaining_seconds == 0
    assert timer.has_expired()
    assert not timer.is_running()


def test_ticks_are_ignored_until_started_and_after_cancel():
    recorder = ExpiryRecorder()
    timer = CountdownTimer(2, recorder)
    timer.tick()
    assert timer.remaining_seconds == 2

    timer.start()
    timer.tick()
    timer.cancel()
    timer.start()
    timer.tick()

    assert timer.remaining_seconds == 1
    assert recorder.calls == 0


def test_low_on_time_under_five_minutes():
    timer = CountdownTimer(301, ExpiryRecorder())
    timer.start()
    assert not timer.is_low_on_time()
    timer.tick()
    timer.tick()
    assert timer.is_low_on_time()
    assert timer.format_remaining() == "4:59"
