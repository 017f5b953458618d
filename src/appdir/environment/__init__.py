"""Environment readers: variables, home directory and temp directory lookups."""

from .base import BaseEnvironment
from .mapping import MappingEnvironment
from .models import Platform
from .protocol import EnvironmentReader
from .system import OsEnvironment

__all__ = [
    "BaseEnvironment",
    "EnvironmentReader",
    "MappingEnvironment",
    "OsEnvironment",
    "Platform",
]
