"""Directory resolution for a named application."""

from .app_dir import AppDir
from .models import DIRECTORY_LAYOUTS, DirectoryLayout, UnresolvableError, XdgDir

__all__ = [
    "DIRECTORY_LAYOUTS",
    "AppDir",
    "DirectoryLayout",
    "UnresolvableError",
    "XdgDir",
]
