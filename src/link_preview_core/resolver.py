from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from link_preview_core.collector import DESCRIPTION_KEYS, IMAGE_KEYS, TITLE_KEYS
from link_preview_core.models import LinkPreview

logger = logging.getLogger(__name__)

_IMAGE_SCHEMES = ("http://", "https://")


def _first_non_empty(meta: Mapping[str, str], keys: Iterable[str]) -> str | None:
    for key in keys:
        value = (meta.get(key) or "").strip()
        if value:
            return value
    return None


def is_absolute_image_url(url: str | None) -> bool:
    return bool(url) and url.lower().startswith(_IMAGE_SCHEMES)


def resolve_preview(
    *,
    title: str | None,
    meta: Mapping[str, str],
    root_address: str,
) -> LinkPreview:
    """
    Merge the document title and recognized meta values into one record.

    A non-empty `<title>` beats og:/twitter: titles. Image URLs that are not
    absolute http(s) URLs are dropped.
    """
    resolved_title = (title or "").strip() or _first_non_empty(meta, TITLE_KEYS)
    description = _first_non_empty(meta, DESCRIPTION_KEYS)

    image_url = _first_non_empty(meta, IMAGE_KEYS)
    if image_url is not None and not is_absolute_image_url(image_url):
        logger.debug("Discarding non-absolute image url %r", image_url)
        image_url = None

    return LinkPreview(
        root_address=root_address,
        title=resolved_title,
        description=description,
        image_url=image_url,
    )
