# domain/response_body.py
from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import cached_property
from typing import BinaryIO, Sequence, Tuple

from domain.body_usage import ResponseBodyUsage


class ChunksInputStream(io.RawIOBase):
    """Readable binary stream over a sequence of chunks, without joining them."""

    def __init__(self, chunks: Sequence[bytes]):
        super().__init__()
        self._chunks = chunks
        self._index = 0
        self._offset = 0

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        view = memoryview(buffer).cast("B")
        written = 0
        while written < len(view) and self._index < len(self._chunks):
            chunk = self._chunks[self._index]
            available = len(chunk) - self._offset
            if available <= 0:
                self._index += 1
                self._offset = 0
                continue
            n = min(available, len(view) - written)
            view[written:written + n] = chunk[self._offset:self._offset + n]
            written += n
            self._offset += n
        return written


@dataclass(frozen=True)
class ResponseBody(ABC):
    chunks: Tuple[bytes, ...]
    charset: str

    @property
    @abstractmethod
    def usage(self) -> ResponseBodyUsage: ...

    @property
    def length(self) -> int:
        return sum(len(c) for c in self.chunks)

    @cached_property
    def content(self) -> bytes:
        return b"".join(self.chunks)

    @cached_property
    def text(self) -> str:
        return self.content.decode(self.charset, errors="replace")

    def stream(self) -> BinaryIO:
        return io.BufferedReader(ChunksInputStream(self.chunks))


@dataclass(frozen=True)
class ByteArrayResponseBody(ResponseBody):
    def __post_init__(self) -> None:
        # materialize now, that is what byte-array consumers asked for
        self.__dict__["content"] = b"".join(self.chunks)

    @property
    def usage(self) -> ResponseBodyUsage:
        return ResponseBodyUsage.BYTE_ARRAY


@dataclass(frozen=True)
class StringResponseBody(ResponseBody):
    def __post_init__(self) -> None:
        self.__dict__["text"] = b"".join(self.chunks).decode(self.charset, errors="replace")

    @property
    def usage(self) -> ResponseBodyUsage:
        return ResponseBodyUsage.STRING


@dataclass(frozen=True)
class InputStreamResponseBody(ResponseBody):
    @property
    def usage(self) -> ResponseBodyUsage:
        return ResponseBodyUsage.INPUT_STREAM


def materialize_body(
    usage: ResponseBodyUsage,
    chunks: Sequence[bytes],
    charset: str,
) -> ResponseBody:
    frozen = tuple(chunks)
    if usage is ResponseBodyUsage.BYTE_ARRAY:
        return ByteArrayResponseBody(frozen, charset)
    if usage is ResponseBodyUsage.STRING:
        return StringResponseBody(frozen, charset)
    return InputStreamResponseBody(frozen, charset)
