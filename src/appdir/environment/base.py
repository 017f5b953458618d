"""Lookup rules shared by every environment reader."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePath

from appdir.utils.functools.models import NONE, Option, is_some, option

from .models import Platform

TEMP_DIR_VARS = ("TMPDIR", "TEMP", "TMP")


class BaseEnvironment(ABC):
    """Implements the reader protocol on top of a raw ``_get`` lookup.

    Home directory lookup order:
    - POSIX: ``HOME``, then ``_fallback_home()``
    - Windows: ``USERPROFILE``, then ``HOMEDRIVE`` + ``HOMEPATH``, then ``_fallback_home()``

    Values that are not absolute paths count as missing.
    """

    def __init__(self, platform: Platform) -> None:
        self._platform = platform

    @property
    def platform(self) -> Platform:
        return self._platform

    @abstractmethod
    def _get(self, name: str) -> str | None: ...

    def read_var(self, name: str) -> Option[str]:
        return option(self._get(name)).filter(bool)

    def home_dir(self) -> Option[PurePath]:
        match self._platform:
            case Platform.WINDOWS:
                home = self._absolute_var("USERPROFILE").or_else(self._home_from_drive)
            case _:
                home = self._absolute_var("HOME")
        return home.or_else(self._fallback_home)

    def temp_dir(self) -> PurePath:
        for name in TEMP_DIR_VARS:
            candidate = self._absolute_var(name)
            if is_some(candidate):
                return candidate.unwrap()
        return self._platform.default_temp_dir

    def _fallback_home(self) -> Option[PurePath]:
        return NONE

    def _absolute_var(self, name: str) -> Option[PurePath]:
        return self.read_var(name).and_then(self._platform.absolute_path)

    def _home_from_drive(self) -> Option[PurePath]:
        return (
            self.read_var("HOMEDRIVE")
            .and_then(lambda drive: self.read_var("HOMEPATH").map(lambda path: drive + path))
            .and_then(self._platform.absolute_path)
        )
