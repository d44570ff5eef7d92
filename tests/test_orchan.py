import threading
import time

from unixkit.orchan import or_channel, signal_after


def test_fires_after_shortest_signal():
    start = time.monotonic()
    done = or_channel(
        signal_after(2),
        signal_after(5),
        signal_after(0.1),
        signal_after(0.1),
        signal_after(0.1),
    )
    assert done.wait(1.5) is True
    assert time.monotonic() - start < 1.5


def test_not_set_before_any_signal():
    done = or_channel(signal_after(0.4), signal_after(0.6))
    assert done.is_set() is False
    assert done.wait(2) is True


def test_no_signals_returns_none():
    assert or_channel() is None


def test_single_signal_returned_unchanged():
    event = threading.Event()
    assert or_channel(event) is event


def test_already_set_signal():
    ready = threading.Event()
    ready.set()
    done = or_channel(threading.Event(), ready)
    assert done.wait(1) is True


def test_signal_after_sets_event():
    event = signal_after(0.05)
    assert event.wait(1) is True