from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from link_preview_core.errors import ScanError
from link_preview_core.scanner import EndTag, Event, StartTag, Text

logger = logging.getLogger(__name__)

TITLE_KEYS = ("og:title", "twitter:title")
DESCRIPTION_KEYS = ("og:description", "twitter:description", "description")
IMAGE_KEYS = ("og:image",)
RECOGNIZED_KEYS = frozenset(TITLE_KEYS + DESCRIPTION_KEYS + IMAGE_KEYS)

# Synthetic element the pipeline prepends to carry the root address.
ROOT_MARKER = "root"

_WS_RE = re.compile(r"\s+")


class MetadataCollector:
    """
    Accumulates title text, recognized `<meta>` values and the root marker.

    One instance per extraction; nothing is shared between instances.
    """

    def __init__(self) -> None:
        self.meta: dict[str, str] = {}
        self.root_address: str | None = None
        self._title: str | None = None
        self._open: str | None = None
        self._parts: list[str] = []

    @property
    def title(self) -> str | None:
        return self._title

    def feed(self, event: Event) -> None:
        if isinstance(event, StartTag):
            if event.name == "title" or (event.name == ROOT_MARKER and self.root_address is None):
                self._open = event.name
                self._parts = []
            elif event.name == "meta":
                self._record_meta(event)
        elif isinstance(event, Text):
            if self._open is not None:
                self._parts.append(event.content)
        elif isinstance(event, EndTag):
            if event.name == self._open:
                self._close()

    def collect(self, events: Iterable[Event]) -> MetadataCollector:
        try:
            for event in events:
                self.feed(event)
        except ScanError:
            logger.warning("Tag scan aborted; keeping metadata collected so far", exc_info=True)
        return self

    def _record_meta(self, tag: StartTag) -> None:
        # name/property may come before or after content.
        key: str | None = None
        content: str | None = None
        for name, value in tag.attrs:
            if name == "content":
                content = value
            elif name in ("name", "property"):
                candidate = value.strip().lower()
                if candidate in RECOGNIZED_KEYS:
                    key = candidate
        if key is not None and content is not None:
            self.meta[key] = content
            logger.debug("meta %s=%r", key, content)

    def _close(self) -> None:
        raw = "".join(self._parts)
        if self._open == "title":
            text = _WS_RE.sub(" ", raw).strip()
            if text and self._title is None:
                self._title = text
        elif self._open == ROOT_MARKER and self.root_address is None:
            self.root_address = raw
        self._open = None
        self._parts = []
