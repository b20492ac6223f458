from __future__ import annotations

import codecs
import re
from collections.abc import Mapping
from dataclasses import dataclass

_CHARSET_RE = re.compile(r"""charset\s*=\s*["']?([-_a-zA-Z0-9]+)""", re.IGNORECASE)


@dataclass(frozen=True)
class ContentType:
    mime_type: str
    charset: str | None = None

    @property
    def is_html(self) -> bool:
        return self.mime_type == "text/html"


def parse_content_type(header_value: str) -> ContentType:
    """
    Parse a raw `Content-Type` header value.

    The charset is recorded verbatim even when Python has no codec for it;
    see `resolve_encoding` for the fallback.
    """
    if header_value is None:
        raise ValueError("ContentType must be constructed with a non-null header value")

    mime, sep, params = header_value.partition(";")
    mime_type = mime.strip().lower()
    if not mime_type:
        raise ValueError(f"Content-Type header has no MIME type: {header_value!r}")

    charset: str | None = None
    if sep:
        m = _CHARSET_RE.search(params)
        if m:
            charset = m.group(1)
    return ContentType(mime_type=mime_type, charset=charset)


def content_type_from_headers(headers: Mapping[str, str]) -> ContentType | None:
    """
    Returns None when the response carried no Content-Type header at all.
    """
    for name, value in headers.items():
        if name.lower() == "content-type":
            return parse_content_type(value)
    return None


def resolve_encoding(content_type: ContentType | None, default: str = "utf-8") -> str:
    """
    Codec name for decoding the body, or `default` when the declared charset
    is missing, unknown to Python, or not a text encoding (base64, hex, rot13...).
    """
    if content_type is None or not content_type.charset:
        return default
    try:
        info = codecs.lookup(content_type.charset)
    except LookupError:
        return default
    if not getattr(info, "_is_text_encoding", True):
        return default
    return info.name
