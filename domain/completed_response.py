# domain/completed_response.py
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from domain.exchange import ExchangeRequest, HttpStatus
from domain.headers import HttpHeaders
from domain.response_body import ResponseBody
from domain.timings import TimingMarks


@dataclass(frozen=True)
class CompletedResponse:
    """
    Immutable result of one exchange. status is None when the exchange
    failed before the status line arrived.
    """

    request: ExchangeRequest
    status: Optional[HttpStatus]
    headers: HttpHeaders
    body: ResponseBody
    checksums: Mapping[str, str]
    body_length: int
    charset: str
    timings: TimingMarks = field(default_factory=TimingMarks)

    def __post_init__(self) -> None:
        if not isinstance(self.checksums, MappingProxyType):
            object.__setattr__(self, "checksums", MappingProxyType(dict(self.checksums)))

    @property
    def status_code(self) -> Optional[int]:
        return self.status.code if self.status is not None else None

    @property
    def is_received(self) -> bool:
        return self.status is not None

    def checksum(self, algorithm: str) -> Optional[str]:
        return self.checksums.get(algorithm)

    def header(self, name: str) -> Optional[str]:
        return self.headers.get_first(name)
