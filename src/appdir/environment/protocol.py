"""Environment reader protocol."""

from __future__ import annotations

from pathlib import PurePath
from typing import Protocol

from appdir.utils.functools.models import Option

from .models import Platform


class EnvironmentReader(Protocol):
    """Read-only view of the process environment.

    Lookups never raise: anything missing or unusable comes back as ``NONE``.
    """

    @property
    def platform(self) -> Platform: ...

    def read_var(self, name: str) -> Option[str]:
        """Return ``Some(value)`` when ``name`` is set to a non-empty string."""
        ...

    def home_dir(self) -> Option[PurePath]: ...

    def temp_dir(self) -> PurePath: ...
