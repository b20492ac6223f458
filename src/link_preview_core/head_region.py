from __future__ import annotations

import codecs
import re
from collections.abc import Iterable, Iterator

_HEAD_CLOSE = r"</head\s*>"
_HEAD_CLOSE_RE = re.compile(_HEAD_CLOSE, re.IGNORECASE)
_HEAD_RE = re.compile(r"<head(?:\s[^>]*)?>.*" + _HEAD_CLOSE, re.IGNORECASE | re.DOTALL)


def iter_decoded_lines(chunks: Iterable[bytes], encoding: str) -> Iterator[str]:
    """
    Lazily decode a byte-chunk stream into lines (line endings kept).

    Undecodable bytes are replaced; chunks are pulled only as lines are consumed.
    """
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    pending = ""
    for chunk in chunks:
        if not chunk:
            continue
        pending += decoder.decode(chunk)
        *lines, pending = pending.split("\n")
        for line in lines:
            yield line + "\n"
    pending += decoder.decode(b"", final=True)
    if pending:
        yield pending


def read_head_region(lines: Iterable[str]) -> str:
    """
    Accumulate lines up to and including the first one containing `</head>`.

    Reads to end of stream when no closing tag shows up. Lines after the stop
    line are never pulled from the iterator.
    """
    parts: list[str] = []
    for line in lines:
        parts.append(line)
        if _HEAD_CLOSE_RE.search(line):
            break
    return "".join(parts)


def isolate_head(region: str) -> str:
    m = _HEAD_RE.search(region or "")
    if not m:
        return ""
    return m.group(0)
