"""
Structured logging setup.

Log events go to stderr so they never interleave with reports written
to stdout.

    from mocknet_report.logging_setup import setup_logging

    setup_logging(level="DEBUG", log_format="console")
"""
import logging
import sys

import structlog


def setup_logging(level: str = "WARNING", log_format: str = "console"):
    """
    Configure structlog on top of the stdlib logging module.

    Args:
        level: Minimum level name (e.g. "INFO")
        log_format: "console" for a human-readable renderer, "json" otherwise
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level.upper())

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
