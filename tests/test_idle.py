import threading
import time
from datetime import timedelta

from remotecache.idle import IdleTimer


def test_idle_timer_resets_then_fires():
    tear_down = threading.Event()
    timer = IdleTimer(1, tear_down.set)
    timer.start()

    for _ in range(5):
        fired = tear_down.wait(0.5)
        assert not fired, "unexpected timeout"
        timer.reset_timer()

    assert tear_down.wait(2), "expected idle timer to trigger"


def test_zero_timeout_fires_on_first_tick():
    tear_down = threading.Event()
    timer = IdleTimer(timedelta(seconds=0), tear_down.set)
    timer.start()
    assert tear_down.wait(3)


def test_notify_called_exactly_once():
    calls = []
    done = threading.Event()

    def notify():
        calls.append(1)
        done.set()

    timer = IdleTimer(0, notify)
    timer.start()
    assert done.wait(3)

    # Resetting after the timer has fired must not start it again.
    before = timer.last_request
    time.sleep(0.01)
    timer.reset_timer()
    assert timer.last_request > before
    time.sleep(1.5)
    assert calls == [1]


def test_reset_timer_moves_last_request_forward():
    timer = IdleTimer(60, lambda: None)
    before = timer.last_request
    time.sleep(0.01)
    timer.reset_timer()
    assert timer.last_request > before


def test_wrap_handler_passes_through_and_resets():
    timer = IdleTimer(60, lambda: None)

    def handler(a, b, scale=1):
        return (a + b) * scale

    wrapped = timer.wrap_handler(handler)
    before = timer.last_request
    time.sleep(0.01)
    assert wrapped(2, 3, scale=4) == handler(2, 3, scale=4)
    assert timer.last_request > before
    assert wrapped.__name__ == "handler"