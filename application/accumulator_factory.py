# application/accumulator_factory.py
from __future__ import annotations

from typing import FrozenSet, Iterable, Optional

from application.checksum import ChecksumEngine
from application.ports.clock import ClockPort, SystemClock
from application.ports.logger import LoggerPort, NullLogger
from application.response_accumulator import ResponseAccumulator
from application.response_transformer import DECLINING_TRANSFORMER, ResponseTransformer
from domain.body_usage import ResponseBodyUsageStrategy
from domain.check import ResponseCheck
from domain.exchange import ExchangeRequest
from domain.policy import ProtocolPolicy


class AccumulatorFactory:
    """
    Binds a scenario's ProtocolPolicy and check declarations once, then
    hands out one ResponseAccumulator per dispatched request.

    Unsupported checksum algorithms fail here, not on first use.
    """

    def __init__(
        self,
        policy: ProtocolPolicy,
        checks: Iterable[ResponseCheck] = (),
        *,
        clock: Optional[ClockPort] = None,
        logger: Optional[LoggerPort] = None,
        capture_full_body: bool = False,
    ):
        checks = list(checks)
        self._policy = policy
        self._clock = clock or SystemClock()
        self._logger = logger or NullLogger()

        algorithms = set(policy.checksum_algorithms)
        algorithms.update(c.checksum_algorithm for c in checks if c.checksum_algorithm)
        self._checksum_engine = ChecksumEngine(algorithms)

        self._body_usage_strategies: FrozenSet[ResponseBodyUsageStrategy] = frozenset(
            c.body_usage_strategy for c in checks if c.body_usage_strategy is not None
        )

        self._store_body_parts = (
            capture_full_body
            or not policy.discard_response_chunks
            or bool(self._body_usage_strategies)
            or self._checksum_engine.enabled
        )

        self._transformer: ResponseTransformer = policy.response_transformer or DECLINING_TRANSFORMER

    @property
    def policy(self) -> ProtocolPolicy:
        return self._policy

    @property
    def checksum_algorithms(self) -> FrozenSet[str]:
        return frozenset(self._checksum_engine.algorithms)

    @property
    def stores_body_parts(self) -> bool:
        return self._store_body_parts

    def new_accumulator(self, request: ExchangeRequest) -> ResponseAccumulator:
        self._logger.debug(
            "response.accumulator_created",
            method=request.method,
            url=request.url,
            store_body_parts=self._store_body_parts,
            checksums=sorted(self._checksum_engine.algorithms),
        )
        return ResponseAccumulator(
            request,
            checksum_engine=self._checksum_engine,
            body_usage_strategies=self._body_usage_strategies,
            transformer=self._transformer,
            store_body_parts=self._store_body_parts,
            infer_html_resources=self._policy.infer_html_resources,
            default_charset=self._policy.default_charset,
            clock=self._clock,
            logger=self._logger.bind(url=request.url),
        )

    __call__ = new_accumulator
