from __future__ import annotations

import logging

import httpx

from link_preview_core.config import Settings, load_settings
from link_preview_core.content_type import content_type_from_headers, resolve_encoding
from link_preview_core.errors import TransportError
from link_preview_core.head_region import iter_decoded_lines
from link_preview_core.models import LinkPreview
from link_preview_core.pipeline import extract, root_address_from_url

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> httpx.Client:
    return httpx.Client(
        timeout=settings.timeout_s,
        follow_redirects=settings.follow_redirects,
    )


def fetch_link_preview(
    url: str,
    *,
    settings: Settings | None = None,
    client: httpx.Client | None = None,
) -> LinkPreview | None:
    """
    Fetch `url` and extract its link preview from the response head.

    Returns None for responses that cannot carry a preview: no Content-Type,
    a non-HTML MIME type, or a final status outside [200, 400). Network
    failures raise TransportError. A passed-in client is left open.
    """
    settings = settings or load_settings()
    if client is None:
        with build_client(settings) as owned:
            return _fetch(owned, url, settings)
    return _fetch(client, url, settings)


def _fetch(client: httpx.Client, url: str, settings: Settings) -> LinkPreview | None:
    try:
        with client.stream("GET", url, headers={"User-Agent": settings.user_agent}) as r:
            try:
                content_type = content_type_from_headers(r.headers)
            except ValueError:
                logger.debug("Unusable Content-Type header for %s: %r", url, r.headers.get("content-type"))
                return None
            if content_type is None:
                logger.debug("No Content-Type header for %s", url)
                return None
            if not content_type.is_html:
                logger.debug("Invalid content type. Not HTML: %s", content_type.mime_type)
                return None
            if not 200 <= r.status_code < 400:
                logger.error("HTTP error while connecting to %s: response code %s", url, r.status_code)
                return None

            encoding = resolve_encoding(content_type, settings.default_charset)
            logger.debug("Decoding %s as %s", url, encoding)
            return extract(
                iter_decoded_lines(r.iter_bytes(), encoding),
                root_address_from_url(url),
                chunk_size=settings.scan_chunk_size,
            )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise TransportError(f"Failed to fetch {url}: {exc}", url=url) from exc
