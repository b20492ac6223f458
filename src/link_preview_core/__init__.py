from link_preview_core.config import Settings, load_settings
from link_preview_core.content_type import (
    ContentType,
    content_type_from_headers,
    parse_content_type,
    resolve_encoding,
)
from link_preview_core.errors import LinkPreviewError, ScanError, TransportError
from link_preview_core.fetch import fetch_link_preview
from link_preview_core.models import LinkPreview
from link_preview_core.pipeline import extract, extract_from_head, root_address_from_url

__all__ = [
    "__version__",
    "ContentType",
    "LinkPreview",
    "LinkPreviewError",
    "ScanError",
    "Settings",
    "TransportError",
    "content_type_from_headers",
    "extract",
    "extract_from_head",
    "fetch_link_preview",
    "load_settings",
    "parse_content_type",
    "resolve_encoding",
    "root_address_from_url",
]

__version__ = "0.1.0"
