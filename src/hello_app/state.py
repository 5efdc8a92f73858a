"""Shared application state injected into handlers."""

import threading
from dataclasses import dataclass, field


class RequestCounter:
    """Integer counter safe to bump from FastAPI's worker threads.

    increment() adds one and returns the new value as a single step, so two
    concurrent callers never read back the same count.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


@dataclass
class AppState:
    """State owned by one application instance (see main.create_app)."""

    app_name: str
    counter: RequestCounter = field(default_factory=RequestCounter)
