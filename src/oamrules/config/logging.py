"""structlog routing for the rule engine's stdlib loggers.

Library modules log through ``logging.getLogger(__name__)`` and attach
rule context (``rules``, ``sources``, ``from_type``, ``authorized``) via
``extra=``. This module lifts those fields into structured events, either
as console lines or as JSON lines on stderr.

Per-query resolution events from ``oamrules.services.cache`` are only
emitted with ``log_queries``; load-time events follow ``verbose``.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "oamrules"
QUERY_LOGGER = "oamrules.services.cache"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    log_queries: bool = False,
) -> None:
    """Install a single stderr handler that renders oamrules events.

    Args:
        verbose: Emit load-time DEBUG events (rule and source counts).
        log_json: JSON lines instead of console output.
        log_queries: Emit one DEBUG event per match resolution.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger(QUERY_LOGGER).setLevel(logging.DEBUG if log_queries else logging.WARNING)
