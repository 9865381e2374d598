# domain/check.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from domain.body_usage import ResponseBodyUsageStrategy


@dataclass(frozen=True)
class ResponseCheck:
    """
    What a downstream check needs from the response. Evaluating the check
    happens elsewhere; only the needs are declared here.
    """

    name: str
    checksum_algorithm: Optional[str] = None
    body_usage_strategy: Optional[ResponseBodyUsageStrategy] = None


def checksum_check(algorithm: str) -> ResponseCheck:
    return ResponseCheck(name=f"checksum:{algorithm}", checksum_algorithm=algorithm)
