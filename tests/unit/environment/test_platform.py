from __future__ import annotations

import os
from pathlib import Path, PurePosixPath, PureWindowsPath

import pytest

from appdir.environment import Platform
from appdir.utils.functools.models import NONE, Some


def test_current_matches_os_name() -> None:
    expected = Platform.WINDOWS if os.name == "nt" else Platform.POSIX

    assert Platform.current() is expected


def test_host_platform_uses_concrete_paths() -> None:
    assert Platform.current().path_type is Path


@pytest.mark.skipif(os.name == "nt", reason="POSIX host only")
def test_foreign_platform_uses_pure_paths() -> None:
    assert Platform.WINDOWS.path_type is PureWindowsPath


@pytest.mark.parametrize(
    ("platform", "value", "expected"),
    [
        (Platform.POSIX, "/etc/xdg", Some(PurePosixPath("/etc/xdg"))),
        (Platform.POSIX, "relative/path", NONE),
        (Platform.POSIX, "", NONE),
        (Platform.WINDOWS, r"C:\Users\alice", Some(PureWindowsPath(r"C:\Users\alice"))),
        (Platform.WINDOWS, r"\\server\share\dir", Some(PureWindowsPath(r"\\server\share\dir"))),
        (Platform.WINDOWS, r"\Users\alice", NONE),
        (Platform.WINDOWS, "C:relative", NONE),
    ],
)
def test_absolute_path(platform: Platform, value: str, expected: object) -> None:
    assert platform.absolute_path(value) == expected
