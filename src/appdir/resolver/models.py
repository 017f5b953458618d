"""Directory kinds, their lookup table and the resolution error model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final

from pydantic import BaseModel, ConfigDict


class XdgDir(str, Enum):
    """Categories of application-owned storage."""

    DATA = "data"
    CONFIG = "config"
    CACHE = "cache"
    STATE = "state"

    @property
    def layout(self) -> DirectoryLayout:
        return DIRECTORY_LAYOUTS[self]

    @property
    def env_var(self) -> str:
        return DIRECTORY_LAYOUTS[self].env_var


@dataclass(frozen=True, slots=True)
class DirectoryLayout:
    """Where one directory kind lives on each platform.

    Attributes:
        env_var: Override variable, honoured on every platform when absolute
        posix_default: Offset under the home directory on POSIX
        windows_var: Variable naming the base directory on Windows
        windows_default: Offset under the home directory when ``windows_var`` is unusable
    """

    env_var: str
    posix_default: tuple[str, ...]
    windows_var: str
    windows_default: tuple[str, ...]


_ROAMING = ("AppData", "Roaming")
_LOCAL = ("AppData", "Local")

DIRECTORY_LAYOUTS: Final = MappingProxyType(
    {
        XdgDir.DATA: DirectoryLayout("XDG_DATA_HOME", (".local", "share"), "APPDATA", _ROAMING),
        XdgDir.CONFIG: DirectoryLayout("XDG_CONFIG_HOME", (".config",), "APPDATA", _ROAMING),
        XdgDir.CACHE: DirectoryLayout("XDG_CACHE_HOME", (".cache",), "LOCALAPPDATA", _LOCAL),
        XdgDir.STATE: DirectoryLayout("XDG_STATE_HOME", (".local", "state"), "LOCALAPPDATA", _LOCAL),
    }
)


class UnresolvableError(BaseModel):
    """No usable base directory: no valid override and no home directory."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    app_name: str
    kind: XdgDir | None = None
    message: str
