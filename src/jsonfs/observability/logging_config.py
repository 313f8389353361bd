"""Application-side logging setup for jsonfs events.

The library itself never configures logging. Applications that want to see
``fs.*`` events call :func:`setup_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from jsonfs.config import ObservabilityConfig


def _pick_renderer(json_logs: bool | None) -> structlog.types.Processor:
    if json_logs is None:
        json_logs = not sys.stderr.isatty()
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(config: ObservabilityConfig) -> None:
    """Route structlog events into the stdlib root logger on stderr.

    Replaces any handlers already on the root logger. ``config.json_logs``
    selects JSON lines or console output; unset, it follows whether stderr is
    a terminal.
    """
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    pre_chain: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _pick_renderer(config.json_logs),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # The jsonfs logger may have been lowered or raised by an earlier call.
    logging.getLogger("jsonfs").setLevel(level)
