# domain/body_usage.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Set


class ResponseBodyUsage(str, Enum):
    BYTE_ARRAY = "byte_array"
    STRING = "string"
    INPUT_STREAM = "input_stream"


class ResponseBodyUsageStrategy(ABC):
    """What a downstream consumer needs the body materialized as, given its length."""

    @abstractmethod
    def body_usage(self, body_length: int) -> ResponseBodyUsage: ...


@dataclass(frozen=True)
class ConstantBodyUsageStrategy(ResponseBodyUsageStrategy):
    usage: ResponseBodyUsage

    def body_usage(self, body_length: int) -> ResponseBodyUsage:
        return self.usage


@dataclass(frozen=True)
class ThresholdBodyUsageStrategy(ResponseBodyUsageStrategy):
    """below if body_length < threshold, otherwise above (e.g. bytes, then stream)."""
    threshold: int
    below: ResponseBodyUsage = ResponseBodyUsage.BYTE_ARRAY
    above: ResponseBodyUsage = ResponseBodyUsage.INPUT_STREAM

    def body_usage(self, body_length: int) -> ResponseBodyUsage:
        return self.below if body_length < self.threshold else self.above


BYTE_ARRAY_USAGE = ConstantBodyUsageStrategy(ResponseBodyUsage.BYTE_ARRAY)
STRING_USAGE = ConstantBodyUsageStrategy(ResponseBodyUsage.STRING)
INPUT_STREAM_USAGE = ConstantBodyUsageStrategy(ResponseBodyUsage.INPUT_STREAM)


def resolve_body_usage(
    strategies: Iterable[ResponseBodyUsageStrategy],
    body_length: int,
) -> ResponseBodyUsage:
    """
    Pick one representation for the whole response. First match wins:
    any byte-array need, then any stream need or no declaration at all,
    otherwise string.
    """
    usages: Set[ResponseBodyUsage] = {s.body_usage(body_length) for s in strategies}

    if ResponseBodyUsage.BYTE_ARRAY in usages:
        return ResponseBodyUsage.BYTE_ARRAY
    if ResponseBodyUsage.INPUT_STREAM in usages or not usages:
        return ResponseBodyUsage.INPUT_STREAM
    return ResponseBodyUsage.STRING
