"""Configuration module for neo-fetch.

Settings come from pydantic-settings; logging is configured through
``logging.config.dictConfig``.
"""

from .settings import FetchSettings, get_settings

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Settings
    "FetchSettings",
    "get_settings",
    
    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
