from __future__ import annotations

import json
from collections.abc import Iterator
from typing import Any

import pytest
from loguru import logger

from appdir.common import AppInfo, LoggingConfig, create_logger, disable_library_logging, enable_library_logging
from appdir.constants import APP_NAME
from appdir.environment import MappingEnvironment, Platform
from appdir.resolver import AppDir, XdgDir


@pytest.fixture
def captured_records() -> Iterator[list[dict[str, Any]]]:
    records: list[dict[str, Any]] = []
    logger.enable(APP_NAME)
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE", filter=APP_NAME)
    yield records
    logger.remove(handler_id)
    disable_library_logging()


def _messages(records: list[dict[str, Any]]) -> list[str]:
    return [record["message"] for record in records]


def test_library_records_are_dropped_when_disabled(captured_records: list[dict[str, Any]]) -> None:
    disable_library_logging()

    AppDir("foo-bar-app", MappingEnvironment({"HOME": "/home/alice"}, Platform.POSIX)).config_dir()

    assert captured_records == []


def test_resolution_is_logged_when_enabled(captured_records: list[dict[str, Any]]) -> None:
    AppDir("foo-bar-app", MappingEnvironment({"HOME": "/home/alice"}, Platform.POSIX)).config_dir()

    assert "Resolved directory" in _messages(captured_records)
    assert captured_records[-1]["level"].name == "DEBUG"


def test_ignored_override_is_logged(captured_records: list[dict[str, Any]]) -> None:
    environment = MappingEnvironment({"HOME": "/home/alice", "XDG_CACHE_HOME": "relative"}, Platform.POSIX)

    AppDir("foo-bar-app", environment).xdg_dir(XdgDir.CACHE)

    assert "Ignoring non-absolute directory override" in _messages(captured_records)


def test_unresolvable_is_logged(captured_records: list[dict[str, Any]]) -> None:
    AppDir("foo-bar-app", MappingEnvironment({}, Platform.POSIX)).data_dir()

    assert "Directory unresolvable" in _messages(captured_records)


def test_create_logger_binds_scope() -> None:
    records: list[dict[str, Any]] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    try:
        create_logger("tests").info("hello")
    finally:
        logger.remove(handler_id)

    assert records[-1]["extra"]["scope"] == "tests"
    assert records[-1]["message"] == "hello"


def test_enable_library_logging_writes_text_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    handler_id = enable_library_logging(LoggingConfig(log_level="DEBUG"), AppInfo(environment="test"))
    try:
        AppDir("foo-bar-app", MappingEnvironment({"HOME": "/home/alice"}, Platform.POSIX)).config_dir()
    finally:
        logger.remove(handler_id)
        disable_library_logging()

    err = capsys.readouterr().err
    assert "Library logging enabled" in err
    assert "Resolved directory" in err


def test_enable_library_logging_respects_level(capsys: pytest.CaptureFixture[str]) -> None:
    handler_id = enable_library_logging(LoggingConfig(log_level="WARNING"), AppInfo(environment="test"))
    try:
        AppDir("foo-bar-app", MappingEnvironment({"HOME": "/home/alice"}, Platform.POSIX)).config_dir()
    finally:
        logger.remove(handler_id)
        disable_library_logging()

    assert "Resolved directory" not in capsys.readouterr().err


def test_enable_library_logging_json_format(capsys: pytest.CaptureFixture[str]) -> None:
    handler_id = enable_library_logging(
        LoggingConfig(log_level="DEBUG", format="json"),
        AppInfo(environment="test"),
    )
    try:
        AppDir("foo-bar-app", MappingEnvironment({}, Platform.POSIX)).cache_dir()
    finally:
        logger.remove(handler_id)
        disable_library_logging()

    lines = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    messages = [line["record"]["message"] for line in lines]
    assert "Directory unresolvable" in messages


def test_logging_config_forbids_unknown_fields() -> None:
    with pytest.raises(ValueError):
        LoggingConfig.model_validate({"rotation": "1 MB"})


def test_enable_library_logging_keeps_host_handlers() -> None:
    host_records: list[dict[str, Any]] = []
    host_handler_id = logger.add(lambda message: host_records.append(message.record), level="INFO")
    try:
        enable_library_logging(LoggingConfig(log_level="DEBUG"), AppInfo(environment="test"))
        logger.info("host application message")
    finally:
        disable_library_logging()
        logger.remove(host_handler_id)

    assert [record["message"] for record in host_records] == ["host application message"]


def test_enable_library_logging_does_not_touch_host_extra() -> None:
    records: list[dict[str, Any]] = []
    logger.configure(extra={"request_id": "abc"})
    handler_id = logger.add(lambda message: records.append(message.record), level="INFO")
    try:
        enable_library_logging(LoggingConfig(), AppInfo(environment="test"))
        logger.info("host application message")
    finally:
        disable_library_logging()
        logger.remove(handler_id)
        logger.configure(extra={})

    assert records[-1]["extra"]["request_id"] == "abc"


def test_enabling_again_replaces_previous_handler() -> None:
    first = enable_library_logging(LoggingConfig(), AppInfo(environment="test"))
    second = enable_library_logging(LoggingConfig(), AppInfo(environment="test"))
    try:
        with pytest.raises(ValueError):
            logger.remove(first)
    finally:
        disable_library_logging()

    with pytest.raises(ValueError):
        logger.remove(second)
