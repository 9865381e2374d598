# application/services/content_type.py
from __future__ import annotations

from typing import Optional

from domain.headers import HttpHeaders

HTML_MIME_TYPES = {"text/html", "application/xhtml+xml"}
CSS_MIME_TYPES = {"text/css"}


def mime_type(headers: HttpHeaders) -> Optional[str]:
    ctype = headers.get_first("Content-Type")
    if not ctype:
        return None
    return ctype.split(";", 1)[0].strip().lower() or None


def is_html(headers: HttpHeaders) -> bool:
    return mime_type(headers) in HTML_MIME_TYPES


def is_css(headers: HttpHeaders) -> bool:
    return mime_type(headers) in CSS_MIME_TYPES
