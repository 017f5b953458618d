from __future__ import annotations

import pytest

from appdir.utils.functools.models import NONE, Err, Ok, Some, UnwrapNoneError, as_option, is_none, is_some, option


def test_option_wraps_none_as_absent() -> None:
    assert option(None) == NONE
    assert option("") == Some("")


def test_filter_drops_rejected_values() -> None:
    assert Some("").filter(bool) == NONE
    assert Some("x").filter(bool) == Some("x")
    assert NONE.filter(bool) == NONE


def test_or_else_only_runs_when_absent() -> None:
    calls: list[str] = []

    def fallback() -> Some[str]:
        calls.append("called")
        return Some("fallback")

    assert Some("value").or_else(fallback) == Some("value")
    assert calls == []
    assert NONE.or_else(fallback) == Some("fallback")
    assert calls == ["called"]


def test_map_and_and_then() -> None:
    assert Some(2).map(lambda x: x * 3) == Some(6)
    assert Some(2).and_then(lambda x: NONE) == NONE
    assert NONE.map(lambda x: x * 3) == NONE


def test_ok_or_else_converts_to_result() -> None:
    assert Some(1).ok_or_else(lambda: "missing") == Ok(1)
    assert NONE.ok_or_else(lambda: "missing") == Err("missing")


def test_unwrap_on_none_raises() -> None:
    with pytest.raises(UnwrapNoneError):
        NONE.unwrap()
    with pytest.raises(UnwrapNoneError, match="no home"):
        NONE.expect("no home")


def test_type_guards() -> None:
    assert is_some(Some(1))
    assert is_none(NONE)
    assert not is_some(NONE)


def test_as_option_maps_listed_exceptions_to_none() -> None:
    @as_option(KeyError)
    def lookup(key: str) -> int:
        return {"a": 1}[key]

    assert lookup("a") == Some(1)
    assert lookup("b") == NONE


def test_as_option_requires_exception_types() -> None:
    with pytest.raises(TypeError):
        as_option()
