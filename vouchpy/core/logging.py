"""Logging setup — structlog events rendered through stdlib handlers on stderr."""

from __future__ import annotations

import logging
import logging.config
import os

import structlog

_RENDERERS = {
    "console": structlog.dev.ConsoleRenderer,
    "json": structlog.processors.JSONRenderer,
}


def setup_logging(level: str | None = None) -> None:
    """Configure structlog and stdlib logging for vouchpy.

    Environment:
        VOUCHPY_LOG_LEVEL  — log level (default: WARNING)
        VOUCHPY_LOG_FORMAT — console | json (default: console)

    An explicit *level* wins over the environment. Records go to stderr so
    the CLI's JSON on stdout stays parseable.
    """
    log_level = (level or os.environ.get("VOUCHPY_LOG_LEVEL", "WARNING")).upper()
    log_format = os.environ.get("VOUCHPY_LOG_FORMAT", "console").lower()
    renderer = _RENDERERS.get(log_format, structlog.dev.ConsoleRenderer)()

    # Registry fetches and lockfile scans are short and synchronous: level,
    # logger name and timestamp are all a record needs.
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "vouchpy": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "foreign_pre_chain": pre_chain,
                    "processors": [
                        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                        renderer,
                    ],
                },
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "vouchpy",
                },
            },
            "root": {"handlers": ["stderr"], "level": log_level},
            "loggers": {
                "vouchpy": {"level": log_level},
                # httpx logs every request at INFO.
                "httpx": {"level": "WARNING"},
                "httpcore": {"level": "WARNING"},
            },
        }
    )
