"""Utilities for reusable typed field annotations."""

from .fields import AppName

__all__ = [
    "AppName",
]
