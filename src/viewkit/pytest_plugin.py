"""pytest plugin: configure viewkit logging for the test session.

Registered through the ``pytest11`` entry point, so installing viewkit is
enough. The level comes from ``--viewkit-log-level`` or ``VIEWKIT_LOG_LEVEL``.
"""

from typing import Any

from viewkit.config.logging import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def pytest_addoption(parser: Any) -> None:
    group = parser.getgroup("viewkit")
    group.addoption(
        "--viewkit-log-level",
        action="store",
        default=None,
        choices=LOG_LEVELS,
        help="Level for viewkit page-object logs (default: VIEWKIT_LOG_LEVEL or INFO)",
    )


def pytest_configure(config: Any) -> None:
    configure_logging(config.getoption("viewkit_log_level"))
