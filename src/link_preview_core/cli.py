"""Command line link preview extraction.

Usage:
    link-preview URL [URL ...] [--require-title] [--json-logs] [--log-level LEVEL]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from link_preview_core.config import load_settings
from link_preview_core.errors import TransportError
from link_preview_core.fetch import build_client, fetch_link_preview
from link_preview_core.logging_config import configure

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="link-preview",
        description="Print the link preview (title, description, image, root) of web pages as JSON.",
    )
    parser.add_argument("urls", nargs="+", metavar="URL", help="page to preview")
    parser.add_argument(
        "--require-title",
        action="store_true",
        help="print null for pages whose preview has no title",
    )
    parser.add_argument("--json-logs", action="store_true", default=None, help="log as JSON lines")
    parser.add_argument("--log-level", default=None, help="root log level (default from settings)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure(
        json_output=settings.log_json if args.json_logs is None else args.json_logs,
        level=args.log_level or settings.log_level,
    )

    exit_code = 0
    with build_client(settings) as client:
        for url in args.urls:
            try:
                preview = fetch_link_preview(url, settings=settings, client=client)
            except TransportError as exc:
                print(f"error: {exc}", file=sys.stderr)
                exit_code = 1
                continue
            if preview is not None and args.require_title and not preview.has_title:
                logger.info("No title for %s; suppressing preview", url)
                preview = None
            print(json.dumps(preview.to_dict() if preview is not None else None, ensure_ascii=False))
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
