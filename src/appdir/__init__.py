"""appdir - resolve per-application config, cache, data and state directories.

Paths follow the XDG Base Directory conventions on POSIX systems and the
``%APPDATA%`` / ``%LOCALAPPDATA%`` conventions on Windows. Nothing is created
on disk; every call just computes a path from the current environment.

appdir's internal logging is disabled by default. Call ``appdir.enable_logging()``
to see resolution records; ``APPDIR_LOGGING__*`` variables are only read then.
"""

from appdir.common import LogLevel, disable_library_logging, enable_library_logging
from appdir.constants import VERSION
from appdir.environment import EnvironmentReader, MappingEnvironment, OsEnvironment, Platform
from appdir.resolver import AppDir, UnresolvableError, XdgDir
from appdir.settings import get_settings

__version__ = VERSION


def enable_logging(level: LogLevel | None = None) -> int:
    """Send appdir records to stderr, using ``APPDIR_LOGGING__*`` settings for anything not given.

    Settings are loaded here rather than at import, so a bad ``APPDIR_`` value
    only surfaces as a ``ValidationError`` from this call.
    """
    settings = get_settings()
    config = settings.logging
    if level is not None:
        config = config.model_copy(update={"log_level": level})
    return enable_library_logging(config, settings.app)


disable_logging = disable_library_logging

disable_library_logging()

__all__ = [
    "AppDir",
    "EnvironmentReader",
    "MappingEnvironment",
    "OsEnvironment",
    "Platform",
    "UnresolvableError",
    "XdgDir",
    "__version__",
    "disable_logging",
    "enable_logging",
]
