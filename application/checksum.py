# application/checksum.py
"""
Incremental checksums over response body bytes.

Lifecycle of one cycle: ChecksumEngine.start() -> RunningChecksums.update()* ->
RunningChecksums.finalize() -> ChecksumResult. A RunningChecksums cannot be
used after finalize(); start a new cycle instead.
"""
from __future__ import annotations

import hashlib
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple

from domain.exceptions import ChecksumAlreadyFinalizedError, UnsupportedChecksumAlgorithmError


def normalize_algorithm(name: str) -> str:
    """'SHA-256' -> 'sha256', 'SHA3-512' -> 'sha3_512', 'MD5' -> 'md5'."""
    n = name.strip().lower()
    if n.startswith("sha3-"):
        return "sha3_" + n[5:]
    return n.replace("-", "")


def _new_hash(hashlib_name: str) -> Any:
    return hashlib.new(hashlib_name)


class ChecksumResult(Mapping[str, str]):
    """Finalized hex digests, keyed by the configured algorithm names."""

    def __init__(self, digests: Mapping[str, str]):
        self._digests = MappingProxyType(dict(digests))

    def __getitem__(self, algorithm: str) -> str:
        return self._digests[algorithm]

    def __iter__(self) -> Iterator[str]:
        return iter(self._digests)

    def __len__(self) -> int:
        return len(self._digests)

    def __repr__(self) -> str:
        return f"ChecksumResult({dict(self._digests)!r})"


class RunningChecksums:
    def __init__(self, algorithms: Tuple[Tuple[str, str], ...]):
        self._digests: Dict[str, Any] = {name: _new_hash(hl) for name, hl in algorithms}
        self._finalized = False

    @property
    def algorithms(self) -> Tuple[str, ...]:
        return tuple(self._digests)

    def update(self, data: bytes) -> None:
        if self._finalized:
            raise ChecksumAlreadyFinalizedError("checksums already finalized")
        for digest in self._digests.values():
            digest.update(data)

    def finalize(self) -> ChecksumResult:
        if self._finalized:
            raise ChecksumAlreadyFinalizedError("checksums already finalized")
        self._finalized = True
        result = ChecksumResult({name: d.hexdigest() for name, d in self._digests.items()})
        self._digests = {}
        return result


class ChecksumEngine:
    """Validates algorithm names once; hands out fresh running checksums per cycle."""

    def __init__(self, algorithms: Iterable[str] = ()):
        resolved = []
        for name in sorted(set(algorithms)):
            hashlib_name = normalize_algorithm(name)
            # shake_* need a digest length, not usable as a plain checksum
            if hashlib_name not in hashlib.algorithms_available or hashlib_name.startswith("shake"):
                raise UnsupportedChecksumAlgorithmError(name)
            try:
                _new_hash(hashlib_name)
            except ValueError as e:
                raise UnsupportedChecksumAlgorithmError(name) from e
            resolved.append((name, hashlib_name))
        self._algorithms: Tuple[Tuple[str, str], ...] = tuple(resolved)

    @property
    def algorithms(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self._algorithms)

    @property
    def enabled(self) -> bool:
        return bool(self._algorithms)

    def start(self) -> RunningChecksums:
        return RunningChecksums(self._algorithms)
