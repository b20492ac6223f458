from __future__ import annotations


class LinkPreviewError(Exception):
    """Base exception for link preview extraction failures."""


class TransportError(LinkPreviewError):
    """The document could not be fetched or read from the network."""

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class ScanError(LinkPreviewError):
    """The tag scanner could not tokenize the rest of the document."""
