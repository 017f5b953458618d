from .types import AppName

__all__ = ["AppName"]
