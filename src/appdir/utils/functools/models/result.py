from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, Generic, Literal, NoReturn, TypeIs, TypeVar

################################################################
# A trimmed-down take on https://github.com/rustedpy/result.
# Only the combinators the resolver and its callers rely on are kept.
################################################################

T = TypeVar("T", covariant=True)  # Success type  # noqa: PLC0105
E = TypeVar("E", covariant=True)  # Error type  # noqa: PLC0105
U = TypeVar("U")
F = TypeVar("F")


class Ok(Generic[T]):
    """
    A value that indicates success and which stores arbitrary data for the return value.
    """

    __match_args__ = ("ok_value",)
    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        return isinstance(other, Ok) and self._value == other._value

    def __ne__(self, other: Any) -> bool:  # noqa: ANN401
        return not (self == other)

    def __hash__(self) -> int:
        return hash((True, self._value))

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def ok(self) -> T:
        """
        Returns the contained `Ok` value.

        Examples:
        ```python
        assert Ok(2).ok() == 2
        assert Err("nothing here").ok() is None
        ```
        """
        return self._value

    def err(self) -> None:
        return None

    @property
    def ok_value(self) -> T:
        """
        Returns the contained `Ok` value as a property.

        Examples:
        ```python
        match result:
            case Ok(path):
                print(f"Resolved: {path}")
            case Err(error):
                print(f"Failed: {error.message}")
        ```
        """
        return self._value

    def expect(self, _: str) -> T:
        return self._value

    def unwrap(self) -> T:
        """
        Returns the contained `Ok` value or raises an UnwrapError if `self` is an `Err`.
        """
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, "Called `Result.unwrap_err()` on an `Ok` value")

    def unwrap_or(self, _: object) -> T:
        return self._value

    def unwrap_or_else(self, _: object) -> T:
        return self._value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        """
        Maps a `Result[T, E]` to `Result[U, E]` by applying a function to the contained `Ok` value.

        Examples:
        ```python
        assert Ok(Path("/tmp")).map(lambda p: p / "app").unwrap() == Path("/tmp/app")
        assert Err("missing").map(lambda p: p / "app").unwrap_err() == "missing"
        ```
        """
        return Ok(op(self._value))

    def map_err(self, _: object) -> Ok[T]:
        return self

    def and_then(self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Calls the provided function with the contained value if the result is `Ok`,
        otherwise returns the `Err` value.
        """
        return op(self._value)

    def or_else(self, _: object) -> Ok[T]:
        return self

    def inspect(self, op: Callable[[T], Any]) -> Result[T, E]:
        """
        Calls a function with the contained value if `Ok`. Returns the original result.
        """
        op(self._value)
        return self

    def inspect_err(self, _: Callable[[E], Any]) -> Result[T, E]:
        return self


class Err(Generic[E]):
    """
    A value that signifies failure and which stores arbitrary data for the error.
    """

    __match_args__ = ("err_value",)
    __slots__ = ("_value",)

    def __init__(self, value: E) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Err({self._value!r})"

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        return isinstance(other, Err) and self._value == other._value

    def __ne__(self, other: Any) -> bool:  # noqa: ANN401
        return not (self == other)

    def __hash__(self) -> int:
        return hash((False, self._value))

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self._value

    @property
    def err_value(self) -> E:
        """
        Returns the contained `Err` value as a property.
        """
        return self._value

    def expect(self, message: str) -> NoReturn:
        """
        Raises an `UnwrapError` carrying `message` and the contained error.
        """
        exc = UnwrapError(self, f"{message}: {self._value!r}")
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap(self) -> NoReturn:
        exc = UnwrapError(self, f"Called `Result.unwrap()` on an `Err` value: {self._value!r}")
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_else(self, op: Callable[[E], U]) -> U:
        """
        Computes a value from the contained error.

        Examples:
        ```python
        fallback = Path("/var/lib/app")
        assert Err("no home").unwrap_or_else(lambda _: fallback) == fallback
        ```
        """
        return op(self._value)

    def map(self, _: object) -> Err[E]:
        return self

    def map_err(self, op: Callable[[E], F]) -> Err[F]:
        """
        Maps a `Result[T, E]` to `Result[T, F]` by applying a function to the contained error.
        """
        return Err(op(self._value))

    def and_then(self, _: object) -> Err[E]:
        return self

    def or_else(self, op: Callable[[E], Result[U, F]]) -> Result[U, F]:
        """
        Calls the provided function with the contained error value and returns its result.
        """
        return op(self._value)

    def inspect(self, _: Callable[[Any], Any]) -> Err[E]:
        return self

    def inspect_err(self, op: Callable[[E], Any]) -> Err[E]:
        """
        Calls a function with the contained error. Returns the original result.
        """
        op(self._value)
        return self


"""
A simple `Result` type inspired by Rust.
"""
type Result[T, E] = Ok[T] | Err[E]


"""
A type to use in `isinstance` checks.
"""
OkErr: Final = (Ok, Err)


class UnwrapError(Exception):
    """
    Exception raised from ``.unwrap()`` and ``.expect()`` calls on an `Err`
    and from ``.unwrap_err()`` on an `Ok`.
    """

    _result: Result[object, object]

    def __init__(self, result: Result[object, object], message: str) -> None:
        self._result = result
        super().__init__(message)

    @property
    def result(self) -> Result[Any, Any]:
        """
        Returns the original result.
        """
        return self._result


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    """A type guard to check if a result is an Ok

    Usage:

    ```python
    r: Result[Path, UnresolvableError] = app_dir.config_dir()
    if is_ok(r):
        r   # r is of type Ok[Path]
    elif is_err(r):
        r   # r is of type Err[UnresolvableError]
    ```
    """
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    """A type guard to check if a result is an Err"""
    return result.is_err()
