from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, Final, Generic, Literal, NoReturn, ParamSpec, TypeIs, TypeVar

from .result import Err, Ok

################################################################
# Mirrors Rust's std::Option and follows the same pattern as the
# Result type in result.py.
################################################################

T = TypeVar("T", covariant=True)  # Value type  # noqa: PLC0105
U = TypeVar("U")
P = ParamSpec("P")
R = TypeVar("R")


class Some(Generic[T]):
    """
    A type that represents the presence of a value.
    """

    __match_args__ = ("some_value",)
    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        return isinstance(other, Some) and self._value == other._value

    def __ne__(self, other: Any) -> bool:  # noqa: ANN401
        return not (self == other)

    def __hash__(self) -> int:
        return hash((True, self._value))

    def is_some(self) -> Literal[True]:
        return True

    def is_none(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.
        """
        return self._value

    def unwrap_or(self, _: object) -> T:
        return self._value

    def expect(self, _: str) -> T:
        return self._value

    def map(self, f: Callable[[T], U]) -> Some[U]:
        """
        Maps an `Option<T>` to `Option<U>` by applying a function to a contained value.
        """
        return Some(f(self._value))

    def ok_or_else(self, _: Callable[[], object]) -> Ok[T]:
        """
        Transforms the `Option<T>` into a `Result<T, E>`, mapping `Some(v)` to `Ok(v)` and `None` to `Err(err_fn())`.
        """
        return Ok(self._value)

    def and_then(self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Returns `None` if the option is `None`, otherwise calls `f` with the contained value and returns the result.
        """
        return f(self._value)

    def or_else(self, _: Callable[[], Option[T]]) -> Some[T]:
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Returns `Some(t)` if predicate returns true for the wrapped value, `None` otherwise.
        """
        if predicate(self._value):
            return self
        return NONE

    def inspect(self, f: Callable[[T], Any]) -> Option[T]:
        f(self._value)
        return self

    @property
    def some_value(self) -> T:
        return self._value


class _NoneSingleton:
    """
    A type that represents the absence of a value.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "None_"

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        return isinstance(other, _NoneSingleton)

    def __ne__(self, other: Any) -> bool:  # noqa: ANN401
        return not (self == other)

    def __hash__(self) -> int:
        return hash((False,))

    def is_some(self) -> Literal[False]:
        return False

    def is_none(self) -> Literal[True]:
        return True

    def unwrap(self) -> NoReturn:
        """
        Raises an `UnwrapNoneError` since there is no value.
        """
        raise UnwrapNoneError(self, "Called `Option.unwrap()` on a `None` value")

    def unwrap_or(self, default: U) -> U:
        return default

    def expect(self, msg: str) -> NoReturn:
        raise UnwrapNoneError(self, msg)

    def map(self, _: Callable[[Any], Any]) -> _NoneSingleton:
        return self

    def ok_or_else(self, err_fn: Callable[[], object]) -> Err:
        return Err(err_fn())

    def and_then(self, _: Callable[[Any], Option[Any]]) -> _NoneSingleton:
        return self

    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]:
        """
        Returns the option if it contains a value, otherwise calls `f` and returns the result.
        """
        return f()

    def filter(self, _: Callable[[Any], bool]) -> _NoneSingleton:
        return self

    def inspect(self, _: Callable[[Any], Any]) -> _NoneSingleton:
        return self


# Singleton absent value, the Option counterpart of Python's None
NONE = _NoneSingleton()


"""
A simple `Option` type inspired by Rust.
"""
type Option[T] = Some[T] | _NoneSingleton


"""
A type to use in `isinstance` checks.
"""
SomeNone: Final = (Some, _NoneSingleton)


class UnwrapNoneError(Exception):
    """
    Exception raised from ``.unwrap()`` and ``.expect()`` calls on a `None` value.
    """

    _option: Option[Any]

    def __init__(self, option: Option[Any], message: str) -> None:
        self._option = option
        super().__init__(message)

    @property
    def option(self) -> Option[Any]:
        return self._option


def as_option(
    *exceptions: type[BaseException],
) -> Callable[[Callable[P, R]], Callable[P, Option[R]]]:
    """
    Make a decorator to turn a function into one that returns an ``Option``.

    Regular return values are turned into ``Some(return_value)``. Raised
    exceptions of the specified exception type(s) are turned into ``None_``.
    """
    if not exceptions or not all(
        inspect.isclass(exception) and issubclass(exception, BaseException) for exception in exceptions
    ):
        raise TypeError("as_option() requires one or more exception types")

    def decorator(f: Callable[P, R]) -> Callable[P, Option[R]]:
        @functools.wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Option[R]:
            try:
                return Some(f(*args, **kwargs))
            except exceptions:
                return NONE

        return wrapper

    return decorator


def is_some(option: Option[T]) -> TypeIs[Some[T]]:
    """A type guard to check if an option contains a value

    Usage:

    ```python
    o: Option[str] = environment.read_var("XDG_CONFIG_HOME")
    if is_some(o):
        o   # o is of type Some[str]
    elif is_none(o):
        o   # o is of type _NoneSingleton
    ```
    """
    return option.is_some()


def is_none(option: Option[T]) -> TypeIs[_NoneSingleton]:
    """A type guard to check if an option is None"""
    return option.is_none()


def option(value: T | None) -> Option[T]:
    """
    Convert a value to an Option.
    If the value is None, return None.
    Otherwise, return Some(value).
    """
    if value is None:
        return NONE
    else:
        return Some(value)
