#!/usr/bin/env python3
"""
Fetch one URL through the streaming accumulator and print the completed response.

Usage:
  python scripts/fetch_response.py <url> [--method GET] [--checksum SHA-256 ...] [--config <path>]

Examples:
  python scripts/fetch_response.py https://example.com --checksum SHA-256 --checksum MD5
  python scripts/fetch_response.py https://example.com --config config/http.yaml --show-body
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from application.accumulator_factory import AccumulatorFactory
from domain.body_usage import BYTE_ARRAY_USAGE
from domain.check import ResponseCheck, checksum_check
from domain.completed_response import CompletedResponse
from domain.exceptions import ResponseBuilderError
from domain.exchange import ExchangeRequest
from domain.headers import HttpHeaders
from infrastructure.config.env_settings import EnvSettingsProvider
from infrastructure.config.loader import load_protocol_config
from infrastructure.http.requests_transport import RequestsStreamingTransport
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger

ENV_FILE = Path(__file__).parent.parent / ".env"


def _parse_header(raw: str) -> tuple:
    if ":" not in raw:
        raise ValueError(f"Invalid header (expected 'Name: value'): {raw}")
    name, value = raw.split(":", 1)
    return name.strip(), value.strip()


def _summary(response: CompletedResponse, show_body: bool) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "url": response.request.url,
        "status": response.status_code,
        "reason": response.status.reason if response.status else None,
        "headers": response.headers.to_dict(),
        "body_length": response.body_length,
        "body_usage": response.body.usage.value,
        "charset": response.charset,
        "checksums": dict(response.checksums),
        "timings_ms": {
            "request": response.timings.request_duration,
            "latency": response.timings.latency,
            "response": response.timings.response_duration,
            "total": response.timings.response_time,
        },
    }
    if show_body:
        out["body"] = response.body.text
    return out


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch a URL and print the accumulated response")
    parser.add_argument("url", type=str)
    parser.add_argument("--method", type=str, default="GET")
    parser.add_argument("--header", type=str, action="append", default=[])
    parser.add_argument("--checksum", type=str, action="append", default=[])
    parser.add_argument("--config", type=str)
    parser.add_argument("--show-body", action="store_true")
    parser.add_argument("--chunk-size", type=int, default=16 * 1024)
    parser.add_argument("--timeout-sec", type=float, default=20)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(sys.argv[1:] if argv is None else argv)

    try:
        overrides = EnvSettingsProvider(env_file=ENV_FILE).overrides()
        config = load_protocol_config(args.config, overrides)
        setup_console_logging(level=config.log_level)
        logger = LoguruLogger().bind(component="fetch_response")

        checks: List[ResponseCheck] = [checksum_check(a) for a in args.checksum]
        if args.show_body:
            checks.append(ResponseCheck(name="show_body", body_usage_strategy=BYTE_ARRAY_USAGE))

        factory = AccumulatorFactory(
            config.to_policy(),
            checks,
            logger=logger,
            capture_full_body=config.debug_enabled,
        )
        request = ExchangeRequest(
            method=args.method.upper(),
            url=args.url,
            headers=HttpHeaders([_parse_header(h) for h in args.header]),
        )
        transport = RequestsStreamingTransport(
            chunk_size=args.chunk_size,
            timeout_sec=args.timeout_sec,
            logger=logger,
        )
        response = transport.execute(request, factory.new_accumulator(request))
    except (ValueError, ResponseBuilderError) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    print(json.dumps(_summary(response, args.show_body), ensure_ascii=False, indent=2))
    sys.exit(0 if response.is_received else 2)


if __name__ == "__main__":
    main()
