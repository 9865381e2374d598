# application/ports/clock.py
from __future__ import annotations

import time
from abc import ABC, abstractmethod


class ClockPort(ABC):
    @abstractmethod
    def now_millis(self) -> int:
        ...


class SystemClock(ClockPort):
    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000
