"""Platform families and their path conventions."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from appdir.utils.functools.models import Option, Some


class Platform(str, Enum):
    """Platform family whose directory conventions apply."""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def current(cls) -> Platform:
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @property
    def path_type(self) -> type[PurePath]:
        """Concrete ``Path`` for the host platform, a pure flavour for any other."""
        if self is Platform.current():
            return Path
        return PureWindowsPath if self is Platform.WINDOWS else PurePosixPath

    @property
    def default_temp_dir(self) -> PurePath:
        return self.path_type(_DEFAULT_TEMP_DIRS[self])

    def absolute_path(self, value: str) -> Option[PurePath]:
        """Parse ``value`` as a path, keeping it only if it is absolute on this platform."""
        return Some(self.path_type(value)).filter(lambda path: path.is_absolute())


_DEFAULT_TEMP_DIRS: dict[Platform, str] = {
    Platform.POSIX: "/tmp",
    Platform.WINDOWS: r"C:\Windows\Temp",
}
