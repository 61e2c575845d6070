from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Literal, Never

if TYPE_CHECKING:
    from typing import TypeIs

__all__ = [
    "NONE",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Some",
    "is_none",
    "is_some",
    "none",
    "some",
    "unwrap",
    "unwrap_or",
    "unwrap_or_else",
]


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """A value that may be absent.

    An `Option` is always exactly one of `Some` (holding a value) or `NONE` (holding nothing).

    The variant can be read from the `type` tag, from the `is_some` / `is_none` predicates, or with a `match` statement.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> def describe(opt: pr.Option[int]) -> str:
    ...     match opt:
    ...         case pr.Some(value):
    ...             return f"got {value}"
    ...         case _:
    ...             return "nothing"
    >>> describe(pr.Some(3))
    'got 3'
    >>> describe(pr.NONE)
    'nothing'

    ```
    """

    __slots__ = ()

    type: Literal["some", "none"]

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Returns:
            `True` if the option is a `Some` variant, `False` otherwise.

        Example:
            ```python
            >>> from pyoresult import Some, NONE, Option
            >>> x: Option[int] = Some(2)
            >>> x.is_some()
            True
            >>> y: Option[int] = NONE
            >>> y.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `None` value.

        Returns:
            `True` if the option is the `NoneOption` variant, `False` otherwise.

        Example:
            ```python
            >>> from pyoresult import Some, NONE
            >>> Some(2).is_none()
            False
            >>> NONE.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Check with `is_some` first, or use `unwrap_or` / `unwrap_or_else`, when the option may be empty.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> from pyoresult import Some, NONE
            >>> Some("car").unwrap()
            'car'
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            pyoresult.option.OptionUnwrapError: Tried to unwrap a None value

            ```
        """
        ...

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        The default is evaluated eagerly, by the caller.

        Args:
            default: The value to return if the option is `None`.

        Returns:
            The contained `Some` value or the provided default.

        Example:
            ```python
            >>> from pyoresult import Some, NONE
            >>> Some("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        `f` is only called when the option is `None`.

        Args:
            f: A function that returns a default value if the option is `None`.

        Returns:
            The contained `Some` value or the result of the function.

        Example:
            ```python
            >>> from pyoresult import Some, NONE
            >>> k = 10
            >>> Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()


@dataclass(frozen=True, slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> import pyoresult as pr
    >>> pr.Some(42)
    Some(value=42)
    >>> pr.Some(42).type
    'some'

    ```
    """

    value: T
    type: Literal["some"] = field(default="some", init=False, repr=False)

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value.

    Use the `NONE` singleton rather than instantiating this class.
    """

    type: Literal["none"] = field(default="none", init=False, repr=False)

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("Tried to unwrap a None value")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""


def some[T](value: T) -> Option[T]:
    """Wrap `value` in a `Some`.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.some("hello")
    Some(value='hello')

    ```
    """
    return Some(value)


def none() -> Option[Any]:
    """Return the `NONE` singleton.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.none() is option.NONE
    True

    ```
    """
    return NONE


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Check if `option` is a `Some`."""
    return option.is_some()


def is_none[T](option: Option[T]) -> TypeIs[NoneOption]:
    """Check if `option` is `NONE`."""
    return option.is_none()


def unwrap[T](option: Option[T]) -> T:
    """Return the value held by `option`, raising `OptionUnwrapError` on `NONE`.

    Example:
    ```python
    >>> from pyoresult import option
    >>> option.unwrap(option.some(1))
    1
    >>> option.unwrap(option.none())
    Traceback (most recent call last):
        ...
    pyoresult.option.OptionUnwrapError: Tried to unwrap a None value

    ```
    """
    return option.unwrap()


def unwrap_or[T](option: Option[T], default: T) -> T:
    """Return the value held by `option`, or `default` on `NONE`."""
    return option.unwrap_or(default)


def unwrap_or_else[T](option: Option[T], f: Callable[[], T]) -> T:
    """Return the value held by `option`, or the result of `f()` on `NONE`."""
    return option.unwrap_or_else(f)
