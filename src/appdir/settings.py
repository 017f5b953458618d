from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from appdir.common import AppInfo, LoggingConfig


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="APPDIR_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached instance so the next ``get_settings()`` re-reads the environment."""
    global _settings
    _settings = None


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
