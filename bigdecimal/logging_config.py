"""structlog setup for the bigdecimal command line tool.

Library modules only call ``structlog.get_logger()``; output format and
level are decided by the application that configures structlog.
"""

from __future__ import annotations

import logging

import structlog


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure structlog with a console renderer filtered at ``level``."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
