"""Shut the server down after a period without requests."""

from __future__ import annotations

import functools
import threading
import time
from datetime import timedelta
from typing import Any, Callable

_TICK_SECONDS = 1.0


class IdleTimer:
    """Calls ``notify`` once no request has been seen for longer than ``timeout``.

    ``timeout`` is in seconds or a :class:`datetime.timedelta`.
    """

    def __init__(self, timeout: float | timedelta, notify: Callable[[], Any]) -> None:
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self._timeout = float(timeout)
        self._notify = notify
        self._lock = threading.Lock()
        self._last_request = time.monotonic()

    @property
    def last_request(self) -> float:
        """Monotonic time of the most recent reset."""
        with self._lock:
            return self._last_request

    def start(self) -> None:
        """Begin watching for idleness in a background thread and return at once."""
        threading.Thread(target=self._run, name="idle-timer", daemon=True).start()

    def _run(self) -> None:
        while True:
            time.sleep(_TICK_SECONDS)
            with self._lock:
                elapsed = time.monotonic() - self._last_request
            if elapsed > self._timeout:
                self._notify()
                return

    def reset_timer(self) -> None:
        """Restart the countdown; call at the start of each request."""
        now = time.monotonic()
        with self._lock:
            self._last_request = now

    def wrap_handler(self, handler: Callable[..., Any]) -> Callable[..., Any]:
        """Return ``handler`` wrapped so that each call first resets the timer."""

        @functools.wraps(handler)
        def wrapped(*args: Any, **kwargs: Any) -> Any:
            self.reset_timer()
            return handler(*args, **kwargs)

        return wrapped