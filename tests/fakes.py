# tests/fakes.py
"""
Hand-written test doubles shared by the test suite.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List

from application.ports.clock import ClockPort
from application.ports.logger import LoggerPort


class FakeClock(ClockPort):
    """
    Returns the given ticks in order, then counts up from the last one.
    Without ticks, starts at `start` and advances by `step` on every call.
    """

    def __init__(self, ticks: Iterable[int] = (), start: int = 1000, step: int = 1):
        self._ticks = list(ticks)
        self._now = start
        self._step = step
        self.calls = 0

    def now_millis(self) -> int:
        self.calls += 1
        if self._ticks:
            value = self._ticks.pop(0)
            self._now = value
            return value
        value = self._now
        self._now += self._step
        return value


class MockLogger(LoggerPort):
    def __init__(self, bound: Dict[str, Any] = None, calls: List[Dict[str, Any]] = None) -> None:
        self.bound: Dict[str, Any] = bound or {}
        self.calls: List[Dict[str, Any]] = [] if calls is None else calls

    def debug(self, event: str, **fields: Any) -> None:
        self.calls.append({"event": event, "level": "debug", **self.bound, **fields})

    def info(self, event: str, **fields: Any) -> None:
        self.calls.append({"event": event, "level": "info", **self.bound, **fields})

    def error(self, event: str, **fields: Any) -> None:
        self.calls.append({"event": event, "level": "error", **self.bound, **fields})

    def bind(self, **fields: Any) -> "MockLogger":
        merged = dict(self.bound)
        merged.update(fields)
        # bound loggers share the same call list
        return MockLogger(bound=merged, calls=self.calls)

    def events(self) -> List[str]:
        return [c["event"] for c in self.calls]
