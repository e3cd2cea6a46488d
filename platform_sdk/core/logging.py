"""Opt-in log output for applications and the CLI.

Library modules only call ``structlog.get_logger("platform_sdk.<area>")``;
nothing is emitted until :func:`setup_logging` routes those events to stderr.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog

LOGGER_NAME = "platform_sdk"

# Client libraries underneath the SDK; their request lines duplicate ours.
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Send SDK log events to stderr.

    *level* wins over ``PLATFORM_SDK_LOG_LEVEL`` (default: INFO).
    ``PLATFORM_SDK_LOG_FORMAT=json`` switches from console to JSON lines.
    Calling it again replaces the previous handler.
    """
    log_level = (level or os.environ.get("PLATFORM_SDK_LOG_LEVEL", "INFO")).upper()
    as_json = os.environ.get("PLATFORM_SDK_LOG_FORMAT", "console").lower() == "json"

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if as_json else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
            foreign_pre_chain=pre_chain,
        )
    )

    sdk_logger = logging.getLogger(LOGGER_NAME)
    sdk_logger.handlers = [handler]
    sdk_logger.setLevel(log_level)
    sdk_logger.propagate = False

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
