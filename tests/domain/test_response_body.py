# tests/domain/test_response_body.py
import pytest

from domain.body_usage import ResponseBodyUsage
from domain.response_body import (
    ByteArrayResponseBody,
    ChunksInputStream,
    InputStreamResponseBody,
    StringResponseBody,
    materialize_body,
)

CHUNKS = (b"caf", b"\xc3", b"\xa9 ", b"", b"au lait")


class TestMaterializeBody:
    @pytest.mark.parametrize(
        "usage, cls",
        [
            (ResponseBodyUsage.BYTE_ARRAY, ByteArrayResponseBody),
            (ResponseBodyUsage.STRING, StringResponseBody),
            (ResponseBodyUsage.INPUT_STREAM, InputStreamResponseBody),
        ],
    )
    def test_variant_matches_usage(self, usage, cls):
        body = materialize_body(usage, list(CHUNKS), "utf-8")
        assert isinstance(body, cls)
        assert body.usage is usage

    @pytest.mark.parametrize("usage", list(ResponseBodyUsage))
    def test_every_variant_exposes_all_representations(self, usage):
        body = materialize_body(usage, list(CHUNKS), "utf-8")
        assert body.content == b"caf\xc3\xa9 au lait"
        assert body.text == "café au lait"
        assert body.stream().read() == b"caf\xc3\xa9 au lait"
        assert body.length == len(b"caf\xc3\xa9 au lait")

    def test_chunks_are_copied_into_a_tuple(self):
        chunks = [b"a", b"b"]
        body = materialize_body(ResponseBodyUsage.INPUT_STREAM, chunks, "utf-8")
        chunks.append(b"c")
        assert body.chunks == (b"a", b"b")

    def test_string_body_uses_charset(self):
        body = StringResponseBody((b"\xe9t\xe9",), "iso8859-1")
        assert body.text == "été"

    def test_stream_can_be_opened_twice(self):
        body = InputStreamResponseBody((b"ab", b"cd"), "utf-8")
        assert body.stream().read() == b"abcd"
        assert body.stream().read() == b"abcd"

    def test_empty_body(self):
        body = materialize_body(ResponseBodyUsage.STRING, [], "utf-8")
        assert body.text == ""
        assert body.content == b""
        assert body.stream().read() == b""


class TestChunksInputStream:
    def test_small_reads_cross_chunk_boundaries(self):
        stream = ChunksInputStream([b"abc", b"", b"de", b"f"])
        buf = bytearray(2)
        out = b""
        while True:
            n = stream.readinto(buf)
            if n == 0:
                break
            out += bytes(buf[:n])
        assert out == b"abcdef"

    def test_readall(self):
        assert ChunksInputStream([b"x" * 10, b"y" * 5]).readall() == b"x" * 10 + b"y" * 5
