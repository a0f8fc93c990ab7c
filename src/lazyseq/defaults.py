import enum
from dataclasses import dataclass
from typing import Literal

from typing_extensions import TypeIs


class Unit(enum.Enum):
    """Placeholder value yielded by `infinite()`; only its position matters."""

    UNIT = enum.auto()


# TODO: Replace with enum.global_enum if ever supported in pyright
UNIT: Literal[Unit.UNIT] = Unit.UNIT


@dataclass(frozen=True, slots=True)
class Some[T]:
    """A present value.

    Example:
        >>> Some(None)
        Some(value=None)
        >>> Some(1) == Some(1)
        True
    """

    value: T


@dataclass(frozen=True, slots=True)
class Nothing:
    """An absent value, distinct from every `Some`, including `Some(None)`."""


NOTHING = Nothing()

type Maybe[T] = Some[T] | Nothing


def is_some[T](maybe: Maybe[T]) -> TypeIs[Some[T]]:
    return isinstance(maybe, Some)


def is_nothing[T](maybe: Maybe[T]) -> TypeIs[Nothing]:
    return isinstance(maybe, Nothing)


def unwrap_or[T, TDefault](maybe: Maybe[T], default: TDefault) -> T | TDefault:
    """Return the wrapped value, or `default` if absent.

    Example:
        >>> unwrap_or(Some(3), 0)
        3
        >>> unwrap_or(NOTHING, 0)
        0
    """
    match maybe:
        case Some(value):
            return value
        case Nothing():
            return default
