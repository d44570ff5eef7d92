"""Combine several done signals into one."""

from __future__ import annotations

import threading

_POLL = 0.05


def signal_after(delay: float) -> threading.Event:
    """Return an event that becomes set after ``delay`` seconds."""
    event = threading.Event()
    timer = threading.Timer(delay, event.set)
    timer.daemon = True
    timer.start()
    return event


def _watch(source: threading.Event, done: threading.Event) -> None:
    while not done.is_set():
        if source.wait(_POLL):
            done.set()


def or_channel(*args: threading.Event) -> threading.Event | None:
    """Return an event that is set as soon as any of ``args`` is set.

    With no signals there is nothing to wait on and ``None`` is returned;
    a single signal is returned as it is.
    """
    if not args:
        return None
    if len(args) == 1:
        return args[0]
    done = threading.Event()
    for source in args:
        threading.Thread(target=_watch, args=(source, done), daemon=True).start()
    return done