# tests/infrastructure/test_loguru_logger.py
from __future__ import annotations

import pytest
from loguru import logger

from infrastructure.logging.loguru_logger import LoguruLogger


@pytest.fixture
def records():
    captured = []
    sink_id = logger.add(lambda msg: captured.append(msg.record), level="DEBUG", format="{message}")
    yield captured
    logger.remove(sink_id)


def test_loguru_logger_emits_event_and_fields(records) -> None:
    LoguruLogger().info("response.built", status=200, body_len=4)

    assert len(records) == 1
    record = records[0]
    assert record["message"] == "response.built"
    assert record["level"].name == "INFO"
    assert record["extra"]["type"] == "response.built"
    assert record["extra"]["status"] == 200
    assert record["extra"]["body_len"] == 4


def test_loguru_logger_bind_attaches_fields(records) -> None:
    bound = LoguruLogger().bind(url="https://example.com")
    bound.debug("response.accumulator_created")
    bound.error("http.exchange_failed", error="boom")

    assert [r["level"].name for r in records] == ["DEBUG", "ERROR"]
    assert all(r["extra"]["url"] == "https://example.com" for r in records)
    assert records[1]["extra"]["error"] == "boom"


def test_bind_does_not_mutate_parent() -> None:
    parent = LoguruLogger()
    child = parent.bind(a=1)
    assert parent.bound == {}
    assert child.bound == {"a": 1}
