from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from html.parser import HTMLParser

from link_preview_core.errors import ScanError


@dataclass(frozen=True)
class StartTag:
    name: str
    attrs: tuple[tuple[str, str], ...] = ()

    def get(self, key: str) -> str | None:
        key = key.lower()
        for name, value in self.attrs:
            if name == key:
                return value
        return None


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class EndTag:
    name: str


Event = StartTag | Text | EndTag


class _EventParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._events: list[Event] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        normalized = tuple((k.lower(), v if v is not None else "") for k, v in attrs)
        self._events.append(StartTag(name=tag.lower(), attrs=normalized))

    # handle_startendtag is inherited: `<meta ... />` becomes StartTag + EndTag.

    def handle_endtag(self, tag: str) -> None:
        self._events.append(EndTag(name=tag.lower()))

    def handle_data(self, data: str) -> None:
        if data:
            self._events.append(Text(content=data))

    def drain(self) -> list[Event]:
        events, self._events = self._events, []
        return events


def scan(text: str, *, chunk_size: int = 4096) -> Iterator[Event]:
    """
    Lazily tokenize markup into StartTag / Text / EndTag events.

    Every call starts from fresh parser state, so the same text can be scanned
    again. Parser failures surface as ScanError after the events produced so
    far have been yielded.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")

    parser = _EventParser()
    text = text or ""
    for start in range(0, len(text), chunk_size):
        try:
            parser.feed(text[start : start + chunk_size])
        except Exception as exc:  # noqa: BLE001
            yield from parser.drain()
            raise ScanError(f"tag scan aborted near offset {start}") from exc
        yield from parser.drain()

    try:
        parser.close()
    except Exception as exc:  # noqa: BLE001
        yield from parser.drain()
        raise ScanError("tag scan aborted at end of input") from exc
    yield from parser.drain()
