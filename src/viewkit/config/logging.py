"""Routing viewkit's structlog events through the ``viewkit`` stdlib logger.

Every viewkit module logs with ``structlog.get_logger(__name__)``. Once
``configure_logging`` has run, those events become records of the stdlib
loggers ``viewkit.core.aggregation``, ``viewkit.core.declarations`` and so
on, so a test run controls them with one level on ``viewkit`` and pytest's
``caplog`` sees them.
"""

import logging
import sys

import structlog

from viewkit.config.settings import get_settings

ROOT_LOGGER = "viewkit"
_HANDLER_NAME = "viewkit-structlog"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure structlog and attach one handler to the ``viewkit`` logger.

    Calling it again replaces the handler instead of adding a second one.

    Args:
        level: Level for viewkit loggers; defaults to ``settings.log_level``.

    Returns:
        The ``viewkit`` stdlib logger.
    """
    settings = get_settings()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        # Test runs reconfigure between sessions
        cache_logger_on_first_use=False,
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer()
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer))

    logger = logging.getLogger(ROOT_LOGGER)
    for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level or settings.log_level)
    return logger
