"""Environment reader over an explicit mapping."""

from __future__ import annotations

from collections.abc import Mapping

from .base import BaseEnvironment
from .models import Platform


class MappingEnvironment(BaseEnvironment):
    """Resolve against a fixed set of variables instead of ``os.environ``.

    Useful in tests and for computing another platform's layout, e.g.
    ``MappingEnvironment({"USERPROFILE": r"C:\\Users\\alice"}, Platform.WINDOWS)``.
    The mapping is copied, so later changes to the caller's dict are not seen.
    """

    def __init__(self, environ: Mapping[str, str], platform: Platform | None = None) -> None:
        super().__init__(platform if platform is not None else Platform.current())
        self._environ = dict(environ)

    def _get(self, name: str) -> str | None:
        return self._environ.get(name)

    def __repr__(self) -> str:
        return f"MappingEnvironment({self._environ!r}, platform={self.platform.value!r})"
