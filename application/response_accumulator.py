# application/response_accumulator.py
from __future__ import annotations

from typing import FrozenSet, List, Optional

from application.checksum import ChecksumEngine, RunningChecksums
from application.ports.clock import ClockPort
from application.ports.logger import LoggerPort
from application.response_transformer import ResponseTransformer
from application.services.charset import resolve_charset
from application.services.content_type import is_css, is_html
from domain.body_usage import ResponseBodyUsageStrategy, resolve_body_usage
from domain.completed_response import CompletedResponse
from domain.exceptions import ResponseAlreadyBuiltError
from domain.exchange import ExchangeRequest, HttpStatus
from domain.headers import EMPTY_HEADERS, HttpHeaders
from domain.response_body import materialize_body
from domain.timings import TimingMarks


class ResponseAccumulator:
    """
    Mutable state of one in-flight exchange.

    Transport events must arrive sequentially, in this order:
    begin -> mark_last_byte_sent -> on_status -> on_headers -> on_body_part* -> build.
    No locking is done here; one accumulator serves one exchange at a time.
    """

    def __init__(
        self,
        request: ExchangeRequest,
        *,
        checksum_engine: ChecksumEngine,
        body_usage_strategies: FrozenSet[ResponseBodyUsageStrategy],
        transformer: ResponseTransformer,
        store_body_parts: bool,
        infer_html_resources: bool,
        default_charset: str,
        clock: ClockPort,
        logger: LoggerPort,
    ):
        self._request = request
        self._checksum_engine = checksum_engine
        self._body_usage_strategies = body_usage_strategies
        self._transformer = transformer
        self._store_body_parts = store_body_parts
        self._infer_html_resources = infer_html_resources
        self._default_charset = default_charset
        self._clock = clock
        self._logger = logger
        self._init_state()

    def _init_state(self) -> None:
        self._status: Optional[HttpStatus] = None
        self._headers: HttpHeaders = EMPTY_HEADERS
        self._chunks: List[bytes] = []
        self._received_length = 0
        self._store_html_or_css = False
        self._checksums: RunningChecksums = self._checksum_engine.start()
        self._first_byte_sent = self._clock.now_millis()
        self._last_byte_sent = 0
        self._first_byte_received = 0
        self._last_byte_received = 0
        self._built = False

    # ---------- introspection ----------

    @property
    def request(self) -> ExchangeRequest:
        return self._request

    @property
    def status(self) -> Optional[HttpStatus]:
        return self._status

    @property
    def headers(self) -> HttpHeaders:
        return self._headers

    @property
    def stores_body_parts(self) -> bool:
        return self._store_body_parts or self._store_html_or_css

    @property
    def retained_chunk_count(self) -> int:
        return len(self._chunks)

    @property
    def retained_length(self) -> int:
        return sum(len(c) for c in self._chunks)

    @property
    def received_length(self) -> int:
        return self._received_length

    @property
    def raw_timings(self) -> TimingMarks:
        return TimingMarks(
            first_byte_sent=self._first_byte_sent,
            last_byte_sent=self._last_byte_sent,
            first_byte_received=self._first_byte_received,
            last_byte_received=self._last_byte_received,
        )

    # ---------- transport events ----------

    def begin(self) -> None:
        self._first_byte_sent = self._clock.now_millis()

    def mark_last_byte_sent(self) -> None:
        self._last_byte_sent = self._clock.now_millis()

    def on_status(self, status: HttpStatus) -> None:
        self._status = status
        now = self._clock.now_millis()
        self._first_byte_received = now
        self._last_byte_received = now

    def on_headers(self, headers: HttpHeaders) -> None:
        self._headers = headers
        self._store_html_or_css = self._infer_html_resources and (is_html(headers) or is_css(headers))
        self._last_byte_received = self._clock.now_millis()

    def on_body_part(self, chunk: bytes) -> None:
        self._last_byte_received = self._clock.now_millis()

        data = bytes(chunk)
        self._received_length += len(data)

        if self._store_body_parts or self._store_html_or_css:
            self._chunks.append(data)

        self._checksums.update(data)

    # ---------- completion ----------

    def build(self) -> CompletedResponse:
        if self._built:
            raise ResponseAlreadyBuiltError(
                f"response already built for {self._request.method} {self._request.url}; call reset() first"
            )
        self._built = True

        timings = self.raw_timings.reconcile()
        self._last_byte_sent = timings.last_byte_sent
        self._first_byte_received = timings.first_byte_received
        self._last_byte_received = timings.last_byte_received

        checksums = self._checksums.finalize()
        body_length = self._received_length
        usage = resolve_body_usage(self._body_usage_strategies, body_length)
        charset = resolve_charset(self._headers, self._default_charset)

        response = CompletedResponse(
            request=self._request,
            status=self._status,
            headers=self._headers,
            body=materialize_body(usage, self._chunks, charset),
            checksums=checksums,
            body_length=body_length,
            charset=charset,
            timings=timings,
        )

        self._logger.debug(
            "response.built",
            method=self._request.method,
            status=response.status_code,
            body_len=body_length,
            retained_chunks=len(self._chunks),
            usage=usage.value,
            charset=charset,
            checksums=dict(checksums),
            response_time_ms=timings.response_time,
        )

        transformed = self._transformer.apply(response)
        if transformed is not response:
            self._logger.debug("response.transformed", transformer=type(self._transformer).__name__)
        return transformed

    def reset(self) -> None:
        self._init_state()
