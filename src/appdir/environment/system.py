"""Environment reader backed by the live process environment."""

from __future__ import annotations

import os
from pathlib import PurePath

from appdir.utils.functools.models import NONE, Option, as_option

from .base import BaseEnvironment
from .models import Platform


@as_option(ImportError, KeyError, AttributeError)
def _passwd_home() -> str:
    import pwd

    return pwd.getpwuid(os.getuid()).pw_dir


class OsEnvironment(BaseEnvironment):
    """Reads ``os.environ`` on every call, so later changes are always observed."""

    def __init__(self) -> None:
        super().__init__(Platform.current())

    def _get(self, name: str) -> str | None:
        return os.environ.get(name)

    def _fallback_home(self) -> Option[PurePath]:
        if self.platform is Platform.WINDOWS:
            return NONE
        return _passwd_home().and_then(self.platform.absolute_path)

    def __repr__(self) -> str:
        return f"OsEnvironment(platform={self.platform.value!r})"
