# infrastructure/http/requests_transport.py
from __future__ import annotations

from typing import Dict, List, Optional

import requests

from application.ports.logger import LoggerPort, NullLogger
from application.response_accumulator import ResponseAccumulator
from domain.completed_response import CompletedResponse
from domain.exchange import ExchangeRequest, HttpStatus
from domain.headers import HttpHeaders

_PROTOCOLS = {10: "HTTP/1.0", 11: "HTTP/1.1", 20: "HTTP/2"}

# requests decodes gzip/deflate bodies but keeps Content-Encoding, which is read as the charset
IDENTITY_ENCODING = ("Accept-Encoding", "identity")


class RequestsStreamingTransport:
    """
    Drives a ResponseAccumulator from a streamed requests exchange.

    requests exposes no "request written" callback: the send phase is
    considered over when the session returns the response head.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        chunk_size: int = 16 * 1024,
        timeout_sec: float = 20,
        logger: Optional[LoggerPort] = None,
    ):
        self._session = session or requests.Session()
        self._chunk_size = chunk_size
        self._timeout = timeout_sec
        self._logger = logger or NullLogger()

    def execute(self, request: ExchangeRequest, accumulator: ResponseAccumulator) -> CompletedResponse:
        accumulator.begin()
        try:
            resp = self._session.request(
                method=request.method.upper(),
                url=request.url,
                headers=_outgoing_headers(request.headers),
                timeout=self._timeout,
                allow_redirects=False,
                stream=True,
            )
        except requests.RequestException as e:
            # no status line: build the failed exchange as is
            self._logger.error(
                "http.exchange_failed",
                method=request.method,
                url=request.url,
                error=str(e),
            )
            return accumulator.build()

        with resp:
            accumulator.mark_last_byte_sent()
            accumulator.on_status(
                HttpStatus(
                    code=resp.status_code,
                    reason=resp.reason or "",
                    protocol=_protocol_of(resp),
                )
            )
            accumulator.on_headers(HttpHeaders(resp.headers.items()))
            try:
                for chunk in resp.iter_content(chunk_size=self._chunk_size):
                    if chunk:
                        accumulator.on_body_part(chunk)
            except requests.RequestException as e:
                # keep what arrived, the partial body is still reported
                self._logger.error(
                    "http.body_interrupted",
                    method=request.method,
                    url=request.url,
                    received=accumulator.received_length,
                    error=str(e),
                )

        completed = accumulator.build()
        self._logger.info(
            "http.exchange",
            method=request.method,
            url=request.url,
            status=completed.status_code,
            body_len=completed.body_length,
            response_time_ms=completed.timings.response_time,
            checksums=dict(completed.checksums),
        )
        return completed


def _protocol_of(resp: requests.Response) -> str:
    version = getattr(resp.raw, "version", None)
    return _PROTOCOLS.get(version, "HTTP/1.1")


def _outgoing_headers(headers: HttpHeaders) -> Dict[str, str]:
    """Repeated names are folded into one comma-separated value."""
    names: Dict[str, str] = {}
    values: Dict[str, List[str]] = {}
    for name, value in headers:
        key = name.lower()
        names.setdefault(key, name)
        values.setdefault(key, []).append(value)
    out = {names[key]: ", ".join(vs) for key, vs in values.items()}
    if IDENTITY_ENCODING[0].lower() not in values:
        out[IDENTITY_ENCODING[0]] = IDENTITY_ENCODING[1]
    return out
