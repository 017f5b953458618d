"""Per-application directory resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath

from pydantic import TypeAdapter

from appdir.common import create_logger
from appdir.environment import EnvironmentReader, OsEnvironment, Platform
from appdir.utils.functools.models import Option, Result, is_none, is_some
from appdir.utils.types import AppName

from .models import DirectoryLayout, UnresolvableError, XdgDir

logger = create_logger("resolver")

_app_name_adapter: TypeAdapter[str] = TypeAdapter(AppName)


@dataclass(frozen=True, slots=True)
class AppDir:
    """Resolves the standard directories of a single application.

    Every call re-reads the environment; nothing is cached and nothing on disk
    is touched.

    Attributes:
        app_name: Appended verbatim as the last segment of every resolved path
        environment: Source of variables and the home directory
    """

    app_name: str
    environment: EnvironmentReader = field(default_factory=OsEnvironment, compare=False, repr=False)

    def __post_init__(self) -> None:
        _app_name_adapter.validate_python(self.app_name)

    def __str__(self) -> str:
        return self.app_name

    @property
    def platform(self) -> Platform:
        return self.environment.platform

    def xdg_dir(self, kind: XdgDir) -> Result[PurePath, UnresolvableError]:
        """Resolve ``kind`` to ``<base>/<app_name>``.

        The base is the kind's override variable when it holds an absolute
        path, otherwise the platform default.
        """
        layout = kind.layout
        return (
            self._override(layout.env_var)
            .or_else(lambda: self._platform_default(layout))
            .map(lambda base: base / self.app_name)
            .inspect(lambda path: logger.debug("Resolved directory", kind=kind.value, path=str(path)))
            .ok_or_else(lambda: self._unresolvable(kind))
        )

    def config_dir(self) -> Result[PurePath, UnresolvableError]:
        return self.xdg_dir(XdgDir.CONFIG)

    def cache_dir(self) -> Result[PurePath, UnresolvableError]:
        return self.xdg_dir(XdgDir.CACHE)

    def data_dir(self) -> Result[PurePath, UnresolvableError]:
        return self.xdg_dir(XdgDir.DATA)

    def state_dir(self) -> Result[PurePath, UnresolvableError]:
        return self.xdg_dir(XdgDir.STATE)

    def all_dirs(self) -> dict[XdgDir, Result[PurePath, UnresolvableError]]:
        return {kind: self.xdg_dir(kind) for kind in XdgDir}

    def user_data_dir(self) -> Result[PurePath, UnresolvableError]:
        """Single per-user directory: ``~/.<app_name>`` on POSIX, ``%APPDATA%\\<app_name>`` on Windows."""
        match self.platform:
            case Platform.WINDOWS:
                # Roaming profile, with no XDG override
                directory = self._platform_default(XdgDir.DATA.layout).map(lambda base: base / self.app_name)
            case _:
                directory = self.environment.home_dir().map(lambda home: home / f".{self.app_name}")
        return directory.ok_or_else(lambda: self._unresolvable(None))

    def temp_dir(self) -> PurePath:
        return self.environment.temp_dir() / self.app_name

    def _override(self, name: str) -> Option[PurePath]:
        value = self.environment.read_var(name)
        base = value.and_then(self.platform.absolute_path)
        if is_some(value) and is_none(base):
            logger.debug("Ignoring non-absolute directory override", variable=name, value=value.unwrap())
        return base

    def _platform_default(self, layout: DirectoryLayout) -> Option[PurePath]:
        match self.platform:
            case Platform.WINDOWS:
                return self._override(layout.windows_var).or_else(lambda: self._under_home(layout.windows_default))
            case _:
                return self._under_home(layout.posix_default)

    def _under_home(self, parts: tuple[str, ...]) -> Option[PurePath]:
        return self.environment.home_dir().map(lambda home: home.joinpath(*parts))

    def _unresolvable(self, kind: XdgDir | None) -> UnresolvableError:
        target = f"{kind.value} directory" if kind is not None else "user data directory"
        logger.debug("Directory unresolvable", app_name=self.app_name, target=target)
        return UnresolvableError(
            app_name=self.app_name,
            kind=kind,
            message=f"Cannot resolve {target} for '{self.app_name}': no absolute override and no home directory",
        )
