"""Logging utilities for appdir using Loguru.

appdir is a library, so its records are disabled by default and nothing is
written anywhere until the host application opts in:
- ``enable_library_logging`` adds a stderr handler for appdir records, leaving other handlers alone
- ``disable_library_logging`` silences them again and drops that handler
"""

import sys
from contextlib import suppress
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from appdir.constants import APP_NAME

from .models import AppInfo

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    log_level: LogLevel = Field(default="INFO")
    format: Literal["json", "text"] = Field(default="text")


# Handler installed by the last enable_library_logging call
_handler_id: int | None = None


def disable_library_logging() -> None:
    logger.disable(APP_NAME)
    _remove_handler()


def enable_library_logging(config: LoggingConfig, app_info: AppInfo) -> int:
    """Route appdir records to stderr.

    Calling it again replaces the previous appdir handler. Returns the loguru
    handler id so callers can ``logger.remove()`` it.
    """
    global _handler_id
    _remove_handler()
    logger.enable(APP_NAME)

    if config.format == "json":
        handler_id = logger.add(
            sys.stderr,
            level=config.log_level,
            serialize=True,
            filter=APP_NAME,
            diagnose=(app_info.environment == "dev"),
        )
    else:
        handler_id = logger.add(
            sys.stderr,
            level=config.log_level,
            format=_get_text_format(),
            filter=APP_NAME,
            colorize=False,
            diagnose=(app_info.environment == "dev"),
        )

    logger.debug(
        "Library logging enabled",
        project=app_info.project_name,
        version=app_info.version,
        level=config.log_level,
        format=config.format,
    )

    _handler_id = handler_id
    return handler_id


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _remove_handler() -> None:
    global _handler_id
    if _handler_id is None:
        return
    # the caller may already have removed it through the returned id
    with suppress(ValueError):
        logger.remove(_handler_id)
    _handler_id = None


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
