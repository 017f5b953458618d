"""Common models and logging helpers shared across appdir modules."""

from .logging import LoggingConfig, LogLevel, create_logger, disable_library_logging, enable_library_logging
from .models import AppInfo

__all__ = [
    "AppInfo",
    "LogLevel",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
]
