# tests/application/test_accumulator_factory.py
from __future__ import annotations

import pytest

from application.accumulator_factory import AccumulatorFactory
from application.response_accumulator import ResponseAccumulator
from domain.body_usage import STRING_USAGE
from domain.check import ResponseCheck, checksum_check
from domain.exceptions import UnsupportedChecksumAlgorithmError
from domain.exchange import ExchangeRequest, HttpStatus
from domain.policy import ProtocolPolicy
from tests.fakes import FakeClock, MockLogger


def test_unsupported_algorithm_fails_at_construction() -> None:
    with pytest.raises(UnsupportedChecksumAlgorithmError):
        AccumulatorFactory(ProtocolPolicy(checksum_algorithms=frozenset({"CRC-99"})))


def test_unsupported_algorithm_from_check_fails_at_construction() -> None:
    with pytest.raises(UnsupportedChecksumAlgorithmError):
        AccumulatorFactory(ProtocolPolicy(), [checksum_check("whirlpool-9000")])


def test_algorithms_are_merged_from_policy_and_checks() -> None:
    factory = AccumulatorFactory(
        ProtocolPolicy(checksum_algorithms=frozenset({"SHA-256"})),
        [checksum_check("MD5"), checksum_check("SHA-256")],
    )
    assert factory.checksum_algorithms == frozenset({"SHA-256", "MD5"})


@pytest.mark.parametrize(
    "policy, checks, capture, expected",
    [
        (ProtocolPolicy(discard_response_chunks=True), [], False, False),
        (ProtocolPolicy(discard_response_chunks=False), [], False, True),
        (ProtocolPolicy(discard_response_chunks=True), [], True, True),
        (ProtocolPolicy(discard_response_chunks=True), [ResponseCheck("s", body_usage_strategy=STRING_USAGE)], False, True),
        (ProtocolPolicy(discard_response_chunks=True), [checksum_check("MD5")], False, True),
        (ProtocolPolicy(discard_response_chunks=True, infer_html_resources=True), [], False, False),
    ],
)
def test_store_body_parts_flag(policy, checks, capture, expected) -> None:
    factory = AccumulatorFactory(policy, checks, capture_full_body=capture)
    assert factory.stores_body_parts is expected


def test_each_call_returns_a_fresh_accumulator_bound_to_its_request() -> None:
    # Arrange
    factory = AccumulatorFactory(ProtocolPolicy(), clock=FakeClock())
    req_a = ExchangeRequest(method="GET", url="https://a.example")
    req_b = ExchangeRequest(method="POST", url="https://b.example")

    # Act
    acc_a = factory.new_accumulator(req_a)
    acc_b = factory(req_b)
    acc_a.on_status(HttpStatus(200))

    # Assert
    assert isinstance(acc_a, ResponseAccumulator)
    assert acc_a is not acc_b
    assert acc_a.build().request == req_a
    assert acc_b.build().request == req_b
    assert acc_b.status is None


def test_factory_logs_accumulator_creation() -> None:
    logger = MockLogger()
    factory = AccumulatorFactory(ProtocolPolicy(), logger=logger)
    factory.new_accumulator(ExchangeRequest(method="GET", url="https://x.example"))
    assert logger.events() == ["response.accumulator_created"]
    assert logger.calls[0]["url"] == "https://x.example"


def test_policy_is_shared_read_only() -> None:
    policy = ProtocolPolicy(checksum_algorithms={"MD5"})
    factory = AccumulatorFactory(policy)
    assert factory.policy is policy
    assert isinstance(policy.checksum_algorithms, frozenset)
    with pytest.raises(Exception):  # FrozenInstanceError
        policy.discard_response_chunks = False
