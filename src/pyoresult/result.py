from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Never, cast

from ._core import get_config

if TYPE_CHECKING:
    from typing import TypeIs

__all__ = [
    "Err",
    "Ok",
    "Result",
    "ResultUnwrapError",
    "err",
    "is_err",
    "is_ok",
    "map",
    "map_err",
    "ok",
    "unwrap",
    "unwrap_err",
    "unwrap_or",
    "unwrap_or_else",
]


class ResultUnwrapError(RuntimeError):
    """Raised when `unwrap` or `unwrap_err` is called on the wrong variant.

    The payload of the variant actually held is kept on the exception, untouched.

    Args:
        msg (str): The error message.
        payload (object): The value (for `Ok`) or error (for `Err`) held by the result.
        variant (Literal["ok", "err"]): The tag of the variant actually held.

    Example:
    ```python
    >>> from pyoresult import Err
    >>> try:
    ...     Err({"code": 404}).unwrap()
    ... except Exception as exc:
    ...     print(exc.variant, exc.payload)
    err {'code': 404}

    ```
    """

    def __init__(self, msg: str, payload: object, variant: Literal["ok", "err"]) -> None:
        super().__init__(msg)
        self.payload = payload
        self.variant = variant


class Result[T, E](ABC):
    """The outcome of a computation that may fail.

    A `Result` is always exactly one of `Ok` (holding a value) or `Err` (holding an error).

    `T` and `E` are independent; the error does not need to be an exception.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> def parse(text: str) -> pr.Result[int, str]:
    ...     if text.isdigit():
    ...         return pr.Ok(int(text))
    ...     return pr.Err(f"not a number: {text!r}")
    >>> parse("42")
    Ok(value=42)
    >>> parse("x")
    Err(error="not a number: 'x'")

    ```
    """

    __slots__ = ()

    type: Literal["ok", "err"]

    @abstractmethod
    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Ok.

        Equivalent to Rust's Result::is_ok().
        """
        ...

    @abstractmethod
    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        """
        Returns True if the result is Err.

        Equivalent to Rust's Result::is_err().
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained Ok value.

        Raises:
            ResultUnwrapError: If the result is Err, carrying the error as `payload`.

        Example:
            ```python
            >>> from pyoresult import Ok, Err
            >>> Ok(1).unwrap()
            1
            >>> Err("error").unwrap()
            Traceback (most recent call last):
                ...
            pyoresult.result.ResultUnwrapError: called `unwrap` on an `Err` value: 'error'

            ```
        """
        ...

    @abstractmethod
    def unwrap_err(self) -> E:
        """
        Returns the contained Err value.

        Raises:
            ResultUnwrapError: If the result is Ok, carrying the value as `payload`.

        Example:
            ```python
            >>> from pyoresult import Ok, Err
            >>> Err("error").unwrap_err()
            'error'
            >>> Ok(1).unwrap_err()
            Traceback (most recent call last):
                ...
            pyoresult.result.ResultUnwrapError: called `unwrap_err` on an `Ok` value: 1

            ```
        """
        ...

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained Ok value or a provided default.

        Args:
            default: The value to return if the result is Err.

        Returns:
            The contained Ok value or the default.

        Example:
            ```python
            >>> from pyoresult import Ok, Err
            >>> Err("error").unwrap_or(1)
            1
            >>> Ok(1).unwrap_or(2)
            1

            ```
        """
        return self.unwrap() if self.is_ok() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained Ok value or computes it from a function if Err.

        Args:
            f: Callable taking no argument, only called if the result is Err.

        Returns:
            The contained Ok value or the result of f().
        """
        return self.unwrap() if self.is_ok() else f()

    def map[U](self, f: Callable[[T], U]) -> Result[U, E]:
        """
        Maps a Result[T, E] to Result[U, E] by applying a function to a contained Ok value, leaving Err untouched.

        Args:
            f: Callable to apply to the Ok value.

        Returns:
            Result[U, E]: Ok(f(value)) if Ok, otherwise the same Err.

        Example:
            ```python
            >>> from pyoresult import Ok, Err
            >>> Ok("hello").map(len)
            Ok(value=5)
            >>> Err("error").map(len)
            Err(error='error')

            ```
        """
        if self.is_ok():
            return Ok(f(self.unwrap()))
        return cast(Result[U, E], self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]:
        """
        Maps a Result[T, E] to Result[T, F] by applying a function to a contained Err value, leaving Ok untouched.

        Args:
            f: Callable to apply to the Err value.

        Returns:
            Result[T, F]: Err(f(error)) if Err, otherwise the same Ok.

        Example:
            ```python
            >>> from pyoresult import Ok, Err
            >>> Err("error").map_err(str.upper)
            Err(error='ERROR')
            >>> Ok(1).map_err(str.upper)
            Ok(value=1)

            ```
        """
        if self.is_err():
            return Err(f(self.unwrap_err()))
        return cast(Result[T, F], self)


def _unwrap_failure(
    method: str, payload: object, variant: Literal["ok", "err"]
) -> ResultUnwrapError:
    held = "an `Ok`" if variant == "ok" else "an `Err`"
    msg = f"called `{method}` on {held} value: {get_config().payload_repr(payload)}"
    return ResultUnwrapError(msg, payload, variant)


@dataclass(frozen=True, slots=True)
class Ok[T, E](Result[T, E]):
    """Represents a successful value."""

    value: T
    type: Literal["ok"] = field(default="ok", init=False, repr=False)

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return True

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_err(self) -> Never:
        exc = _unwrap_failure("unwrap_err", self.value, "ok")
        if isinstance(self.value, BaseException):
            raise exc from self.value
        raise exc


@dataclass(frozen=True, slots=True)
class Err[T, E](Result[T, E]):
    """Represents an error value."""

    error: E
    type: Literal["err"] = field(default="err", init=False, repr=False)

    def is_ok(self) -> TypeIs[Ok[T, E]]:  # type: ignore[misc]
        return False

    def is_err(self) -> TypeIs[Err[T, E]]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        exc = _unwrap_failure("unwrap", self.error, "err")
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc

    def unwrap_err(self) -> E:
        return self.error


def ok[T, E](value: T) -> Result[T, E]:
    """Wrap a value in an `Ok` result."""
    return Ok(value)


def err[T, E](error: E) -> Result[T, E]:
    """Wrap an error in an `Err` result."""
    return Err(error)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T, E]]:
    """Check if a result is an `Ok`."""
    return result.is_ok()


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[T, E]]:
    """Check if a result is an `Err`."""
    return result.is_err()


def unwrap[T, E](result: Result[T, E]) -> T:
    """Return the value of an `Ok`, raising `ResultUnwrapError` carrying the error of an `Err`."""
    return result.unwrap()


def unwrap_err[T, E](result: Result[T, E]) -> E:
    """Return the error of an `Err`, raising `ResultUnwrapError` carrying the value of an `Ok`."""
    return result.unwrap_err()


def unwrap_or[T, E](result: Result[T, E], default: T) -> T:
    """Return the value of an `Ok`, or `default` for an `Err`."""
    return result.unwrap_or(default)


def unwrap_or_else[T, E](result: Result[T, E], f: Callable[[], T]) -> T:
    """Return the value of an `Ok`, or the result of `f()` for an `Err`."""
    return result.unwrap_or_else(f)


def map[T, E, U](result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Apply `f` to the value of an `Ok`, passing an `Err` through unchanged.

    Example:
    ```python
    >>> from pyoresult import result
    >>> result.map(result.ok(2), lambda x: x * 10)
    Ok(value=20)
    >>> result.map(result.err("boom"), lambda x: x * 10)
    Err(error='boom')

    ```
    """
    return result.map(f)


def map_err[T, E, F](result: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Apply `f` to the error of an `Err`, passing an `Ok` through unchanged."""
    return result.map_err(f)
