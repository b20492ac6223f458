"""Logging setup for the `link-preview` command.

JSON goes to stdout, so log records are rendered by structlog on stderr.
Library modules only call `logging.getLogger(__name__)`; nothing here runs on import.
"""

from __future__ import annotations

import logging
import sys

import structlog

# httpx/httpcore log every request at INFO; one line per fetched URL is noise here.
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure(*, json_output: bool = False, level: str = "INFO") -> None:
    """Install a single stderr handler on the root logger.

    Args:
        json_output: JSON lines (for log shippers) instead of console output.
        level: Root level name; unknown names fall back to INFO.
    """
    pre_chain: list = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if json_output:
        pre_chain.append(structlog.processors.format_exc_info)
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=pre_chain,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(root_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))
