from __future__ import annotations

import html
import logging
import re
from collections.abc import Iterable

from link_preview_core.collector import ROOT_MARKER, MetadataCollector
from link_preview_core.head_region import isolate_head, read_head_region
from link_preview_core.models import LinkPreview
from link_preview_core.resolver import resolve_preview
from link_preview_core.scanner import scan

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^(?:http://|https://)")


def root_address_from_url(url: str) -> str:
    """
    "https://example.com/a/b?c" -> "example.com"
    """
    stripped = _SCHEME_RE.sub("", url or "", count=1)
    return stripped.split("/", 1)[0]


def build_scan_document(head: str, root_address: str) -> str:
    marker = f"<{ROOT_MARKER}>{html.escape(root_address, quote=False)}</{ROOT_MARKER}>"
    return f"{marker}\n{head}"


def extract_from_head(
    head_region: str,
    root_address: str,
    *,
    chunk_size: int = 4096,
) -> LinkPreview:
    """
    Build a LinkPreview from an already-read head region.
    """
    head = isolate_head(head_region)
    if not head:
        logger.debug("No complete <head> element in %d chars read", len(head_region or ""))

    collector = MetadataCollector().collect(
        scan(build_scan_document(head, root_address), chunk_size=chunk_size)
    )
    return resolve_preview(
        title=collector.title,
        meta=collector.meta,
        root_address=collector.root_address if collector.root_address is not None else root_address,
    )


def extract(
    stream: Iterable[str],
    root_address: str,
    *,
    chunk_size: int = 4096,
) -> LinkPreview:
    """
    Read the head region from a decoded line stream and extract its preview.

    `stream` is anything yielding text lines: an open text file, a list, or
    `head_region.iter_decoded_lines(...)`. Only lines up to `</head>` are read.
    """
    return extract_from_head(read_head_region(stream), root_address, chunk_size=chunk_size)
