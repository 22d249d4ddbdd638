"""Configuration module for viewkit.

Usage:
    from viewkit.config import configure_logging, get_settings

    configure_logging()
    settings = get_settings()  # Cached singleton
"""

from viewkit.config.logging import ROOT_LOGGER, configure_logging
from viewkit.config.settings import Settings, get_settings

__all__ = ["ROOT_LOGGER", "Settings", "configure_logging", "get_settings"]
