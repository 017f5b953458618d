"""Common models used across appdir."""

from typing import Literal

from pydantic import BaseModel

from appdir.constants import APP_NAME, VERSION


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = VERSION
    environment: Literal["test", "dev", "prod"] = "prod"
