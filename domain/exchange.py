# domain/exchange.py
from __future__ import annotations

from dataclasses import dataclass, field

from domain.headers import EMPTY_HEADERS, HttpHeaders


@dataclass(frozen=True)
class ExchangeRequest:
    """Reference to the request a completed response belongs to."""
    method: str
    url: str
    headers: HttpHeaders = field(default=EMPTY_HEADERS)


@dataclass(frozen=True)
class HttpStatus:
    code: int
    reason: str = ""
    protocol: str = "HTTP/1.1"

    def __str__(self) -> str:
        return f"{self.protocol} {self.code} {self.reason}".rstrip()
