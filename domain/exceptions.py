# domain/exceptions.py
from __future__ import annotations


class ResponseBuilderError(Exception):
    """Base class of every error raised by the response accumulation core."""


class ConfigurationError(ResponseBuilderError):
    pass


class UnsupportedChecksumAlgorithmError(ConfigurationError):
    def __init__(self, algorithm: str):
        super().__init__(f"Unsupported checksum algorithm: {algorithm}")
        self.algorithm = algorithm


class UnknownCharsetError(ResponseBuilderError):
    def __init__(self, charset: str):
        super().__init__(f"Unknown charset: {charset}")
        self.charset = charset


class ChecksumAlreadyFinalizedError(ResponseBuilderError):
    pass


class ResponseAlreadyBuiltError(ResponseBuilderError):
    pass
