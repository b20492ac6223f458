from __future__ import annotations

import pytest

from link_preview_core.models import LinkPreview
from link_preview_core.resolver import is_absolute_image_url, resolve_preview


def test_document_title_beats_social_titles() -> None:
    p = resolve_preview(title="Doc", meta={"og:title": "OG", "twitter:title": "TW"}, root_address="r")
    assert p.title == "Doc"


def test_social_title_is_fallback() -> None:
    assert resolve_preview(title=None, meta={"og:title": " OG ", "twitter:title": "TW"}, root_address="r").title == "OG"
    assert resolve_preview(title="  ", meta={"og:title": "", "twitter:title": "TW"}, root_address="r").title == "TW"


def test_description_precedence() -> None:
    meta = {"description": "plain", "twitter:description": "tw", "og:description": "og"}
    assert resolve_preview(title=None, meta=meta, root_address="r").description == "og"
    del meta["og:description"]
    assert resolve_preview(title=None, meta=meta, root_address="r").description == "tw"
    meta["twitter:description"] = "   "
    assert resolve_preview(title=None, meta=meta, root_address="r").description == "plain"


def test_empty_description_is_absent() -> None:
    assert resolve_preview(title="t", meta={"description": " \n "}, root_address="r").description is None


@pytest.mark.parametrize(
    ("url", "kept"),
    [
        ("https://ex.com/a.png", True),
        ("http://ex.com/a.png", True),
        ("HTTPS://EX.COM/A.PNG", True),
        ("/static/a.png", False),
        ("//cdn.ex.com/a.png", False),
        ("a.png", False),
        ("data:image/png;base64,AAAA", False),
        ("javascript:alert(1)", False),
        ("ftp://ex.com/a.png", False),
    ],
)
def test_image_must_be_absolute_http_url(url: str, kept: bool) -> None:
    p = resolve_preview(title=None, meta={"og:image": url}, root_address="r")
    assert (p.image_url == url) is kept
    if not kept:
        assert p.image_url is None
    assert is_absolute_image_url(url) is kept


def test_image_url_is_trimmed() -> None:
    p = resolve_preview(title=None, meta={"og:image": "  https://ex.com/a.png\n"}, root_address="r")
    assert p.image_url == "https://ex.com/a.png"


def test_nothing_found_keeps_root() -> None:
    assert resolve_preview(title=None, meta={}, root_address="example.com") == LinkPreview(root_address="example.com")


def test_link_preview_helpers() -> None:
    p = LinkPreview(root_address="ex.com", title="T")
    assert p.has_title
    assert not LinkPreview(root_address="ex.com").has_title
    assert p.to_dict() == {"root_address": "ex.com", "title": "T", "description": None, "image_url": None}
