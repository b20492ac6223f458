from __future__ import annotations

import pytest

from link_preview_core.content_type import (
    ContentType,
    content_type_from_headers,
    parse_content_type,
    resolve_encoding,
)


@pytest.mark.parametrize(
    ("header", "expected"),
    [
        ("text/html", ContentType("text/html", None)),
        ("text/html; charset=UTF-8", ContentType("text/html", "UTF-8")),
        ("Text/HTML;CHARSET=iso-8859-1", ContentType("text/html", "iso-8859-1")),
        ('text/html; boundary=x; charset="windows-1252"', ContentType("text/html", "windows-1252")),
        ("application/json; charset=utf-8", ContentType("application/json", "utf-8")),
        ("text/html; charset=x-made-up", ContentType("text/html", "x-made-up")),
        ("text/html;", ContentType("text/html", None)),
    ],
)
def test_parse_content_type(header: str, expected: ContentType) -> None:
    assert parse_content_type(header) == expected


def test_parse_content_type_rejects_none() -> None:
    with pytest.raises(ValueError):
        parse_content_type(None)  # type: ignore[arg-type]


def test_parse_content_type_rejects_blank_mime() -> None:
    with pytest.raises(ValueError):
        parse_content_type(" ; charset=utf-8")


def test_is_html() -> None:
    assert parse_content_type("text/html; charset=utf-8").is_html
    assert not parse_content_type("application/xhtml+xml").is_html
    assert not parse_content_type("application/json").is_html


def test_content_type_from_headers_is_case_insensitive() -> None:
    ct = content_type_from_headers({"content-TYPE": "text/html; charset=utf-8"})
    assert ct == ContentType("text/html", "utf-8")


def test_content_type_from_headers_absent_is_none() -> None:
    assert content_type_from_headers({"Content-Length": "10"}) is None


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [
        (None, "utf-8"),
        (ContentType("text/html"), "utf-8"),
        (ContentType("text/html", "ISO-8859-1"), "iso8859-1"),
        (ContentType("text/html", "Shift_JIS"), "shift_jis"),
        (ContentType("text/html", "x-made-up"), "utf-8"),
    ],
)
def test_resolve_encoding(content_type: ContentType | None, expected: str) -> None:
    assert resolve_encoding(content_type) == expected


def test_resolve_encoding_uses_given_default() -> None:
    assert resolve_encoding(ContentType("text/html", "nope"), default="cp1252") == "cp1252"


@pytest.mark.parametrize("charset", ["base64", "hex", "rot13", "zlib", "bz2", "uu"])
def test_resolve_encoding_rejects_non_text_codecs(charset: str) -> None:
    assert resolve_encoding(ContentType("text/html", charset)) == "utf-8"
