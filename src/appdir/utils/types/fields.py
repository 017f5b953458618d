"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, Field, StrictStr

_PATH_SEPARATORS = ("/", "\\")
_RESERVED_SEGMENTS = frozenset({".", ".."})


def _ensure_single_segment(value: str) -> str:
    if any(separator in value for separator in _PATH_SEPARATORS):
        raise ValueError("application name must not contain path separators")
    # "D:" or "D:foo" would replace the base directory when joined on Windows
    if ":" in value:
        raise ValueError("application name must not contain a drive marker ':'")
    if value in _RESERVED_SEGMENTS:
        raise ValueError(f"application name must not be {value!r}")
    return value


# Application identifier appended as the last segment of every resolved path
AppName = Annotated[
    StrictStr,
    Field(min_length=1, description="Application name used as the final path segment"),
    AfterValidator(_ensure_single_segment),
]

__all__ = [
    "AppName",
]
