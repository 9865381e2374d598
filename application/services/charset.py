# application/services/charset.py
from __future__ import annotations

import codecs

from domain.exceptions import UnknownCharsetError
from domain.headers import HttpHeaders

CHARSET_HEADER = "Content-Encoding"


def resolve_charset(headers: HttpHeaders, default: str) -> str:
    """
    Charset named by the Content-Encoding header, or default when absent.
    A value that is present but not a known codec is an error.
    """
    value = headers.get_first(CHARSET_HEADER)
    if value is None:
        return default

    name = value.strip().strip('"').strip("'")
    if not name:
        raise UnknownCharsetError(value)
    try:
        resolved = codecs.lookup(name).name
        # bytes-to-bytes codecs (zlib, base64, ...) are not charsets
        b"".decode(resolved)
        return resolved
    except (LookupError, ValueError) as e:
        # ValueError covers NUL and unencodable characters in the name
        raise UnknownCharsetError(value) from e
