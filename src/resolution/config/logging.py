"""Log setup for the resolution CLI.

Resolutions, reports and error messages go to stdout; log lines go to
stderr so the two never mix.  ``--log-json`` switches the log lines to one
JSON object each, otherwise they are rendered for a terminal.  Only the
``resolution`` loggers drop to DEBUG under ``--verbose``; third-party
loggers stay at WARNING.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _final_renderer(log_json: bool, out: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=out.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Safe to call again: the root handler is replaced, not stacked.  Tests
    pass *stream* to capture log lines.
    """
    out = stream or sys.stderr

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _final_renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("resolution").setLevel(logging.DEBUG if verbose else logging.WARNING)
