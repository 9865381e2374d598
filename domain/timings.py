# domain/timings.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimingMarks:
    """
    The four timing marks of one exchange, in epoch milliseconds.
    Raw marks come from different callbacks and may disagree with causal
    order; reconcile() returns the clamped, monotonic version.
    """

    first_byte_sent: int = 0
    last_byte_sent: int = 0
    first_byte_received: int = 0
    last_byte_received: int = 0

    def reconcile(self) -> "TimingMarks":
        # request doesn't end before starting
        last_sent = max(self.last_byte_sent, self.first_byte_sent)
        # response doesn't start before request ends
        first_received = max(self.first_byte_received, last_sent)
        # response doesn't end before starting
        last_received = max(self.last_byte_received, first_received)
        return TimingMarks(
            first_byte_sent=self.first_byte_sent,
            last_byte_sent=last_sent,
            first_byte_received=first_received,
            last_byte_received=last_received,
        )

    def is_monotonic(self) -> bool:
        return (
            self.first_byte_sent
            <= self.last_byte_sent
            <= self.first_byte_received
            <= self.last_byte_received
        )

    @property
    def request_duration(self) -> int:
        return self.last_byte_sent - self.first_byte_sent

    @property
    def latency(self) -> int:
        """Network and server time, between end of send and first received byte."""
        return self.first_byte_received - self.last_byte_sent

    @property
    def response_duration(self) -> int:
        return self.last_byte_received - self.first_byte_received

    @property
    def response_time(self) -> int:
        return self.last_byte_received - self.first_byte_sent
