# domain/policy.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, FrozenSet, Optional

if TYPE_CHECKING:
    from application.response_transformer import ResponseTransformer


DEFAULT_CHARSET = "utf-8"


@dataclass(frozen=True)
class ProtocolPolicy:
    """Read-only response policy shared by every exchange of one scenario."""

    discard_response_chunks: bool = True
    infer_html_resources: bool = False
    checksum_algorithms: FrozenSet[str] = field(default_factory=frozenset)
    response_transformer: Optional["ResponseTransformer"] = None
    default_charset: str = DEFAULT_CHARSET

    def __post_init__(self) -> None:
        if not isinstance(self.checksum_algorithms, frozenset):
            object.__setattr__(self, "checksum_algorithms", frozenset(self.checksum_algorithms))
