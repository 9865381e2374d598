# tests/application/services/test_content_type.py
import pytest

from application.services.content_type import is_css, is_html, mime_type
from domain.headers import EMPTY_HEADERS, HttpHeaders


def _headers(ctype: str) -> HttpHeaders:
    return HttpHeaders([("Content-Type", ctype)])


@pytest.mark.parametrize("ctype", ["text/html", "text/html; charset=UTF-8", "TEXT/HTML", "application/xhtml+xml"])
def test_is_html(ctype) -> None:
    assert is_html(_headers(ctype))
    assert not is_css(_headers(ctype))


@pytest.mark.parametrize("ctype", ["text/css", "text/css;charset=utf-8"])
def test_is_css(ctype) -> None:
    assert is_css(_headers(ctype))
    assert not is_html(_headers(ctype))


@pytest.mark.parametrize("ctype", ["text/plain", "application/json", "image/png"])
def test_other_types(ctype) -> None:
    assert not is_html(_headers(ctype))
    assert not is_css(_headers(ctype))


def test_missing_content_type() -> None:
    assert mime_type(EMPTY_HEADERS) is None
    assert not is_html(EMPTY_HEADERS)
