# infrastructure/config/protocol_config.py
from __future__ import annotations

import codecs
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from application.checksum import ChecksumEngine
from application.response_transformer import ResponseTransformer
from domain.policy import DEFAULT_CHARSET, ProtocolPolicy


class ProtocolConfig(BaseModel):
    """Response handling options of one scenario's HTTP protocol"""
    discard_response_chunks: bool = Field(default=True, description="Drop body bytes nobody needs")
    infer_html_resources: bool = Field(default=False, description="Keep HTML/CSS bodies for resource inference")
    checksum_algorithms: List[str] = Field(default_factory=list, description="e.g. SHA-256, MD5")
    default_charset: str = Field(default=DEFAULT_CHARSET, description="Charset used when the response names none")
    log_level: str = Field(default="INFO", description="Console log level")

    @field_validator("checksum_algorithms")
    @classmethod
    def _validate_algorithms(cls, value: List[str]) -> List[str]:
        cleaned = [v.strip() for v in value if v and v.strip()]
        # propagates UnsupportedChecksumAlgorithmError as is, not as a pydantic error
        ChecksumEngine(cleaned)
        return cleaned

    @field_validator("default_charset")
    @classmethod
    def _validate_charset(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as e:
            raise ValueError(f"unknown charset: {value}") from e

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def debug_enabled(self) -> bool:
        return self.log_level in ("TRACE", "DEBUG")

    def to_policy(self, response_transformer: Optional[ResponseTransformer] = None) -> ProtocolPolicy:
        return ProtocolPolicy(
            discard_response_chunks=self.discard_response_chunks,
            infer_html_resources=self.infer_html_resources,
            checksum_algorithms=frozenset(self.checksum_algorithms),
            response_transformer=response_transformer,
            default_charset=self.default_charset,
        )
