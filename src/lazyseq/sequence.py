"""
The sequence abstraction everything else is built on.

A sequence is any re-iterable: every `iter()` call hands out a fresh cursor.
Functions decorated with `lazy` return `Lazy` objects, which rebuild their
generator on each `iter()` and never cache values.
"""

import itertools as it
import typing as tp
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from functools import partial, wraps

from lazyseq.defaults import NOTHING, Maybe, Some
from lazyseq.index import Entry


@tp.final
@dataclass(frozen=True, slots=True)
class Lazy[T](Iterable[T]):
    """
    Re-iterable sequence backed by a cursor factory.

    Args:
        factory: zero-argument callable returning a new cursor on every call

    Example:
        >>> evens = Lazy(lambda: iter(range(0, 6, 2)))
        >>> list(evens), list(evens)
        ([0, 2, 4], [0, 2, 4])
    """

    factory: Callable[[], Iterator[T]]

    @tp.override
    def __iter__(self) -> Iterator[T]:
        return self.factory()


def lazy[**P, T](func: Callable[P, Iterator[T]]) -> Callable[P, Lazy[T]]:
    """Defer a cursor-producing function until its result is iterated.

    Arguments are bound at call time; `func` runs once per `iter()`.

    Example:
        >>> @lazy
        ... def countdown(n):
        ...     print("started")
        ...     yield from range(n, 0, -1)
        >>> seq = countdown(3)
        >>> list(seq)
        started
        [3, 2, 1]
        >>> list(seq)
        started
        [3, 2, 1]
    """

    @wraps(func)
    def inner(*args: P.args, **kwargs: P.kwargs) -> Lazy[T]:
        return Lazy(partial(func, *args, **kwargs))

    return inner


def advance[T](cursor: Iterator[T]) -> Maybe[T]:
    """Pull exactly one value from `cursor`.

    Example:
        >>> cursor = iter([None])
        >>> advance(cursor), advance(cursor)
        (Some(value=None), Nothing())
    """
    for value in cursor:
        return Some(value)
    return NOTHING


@lazy
def indexed[T](input: Iterable[T]) -> Iterator[Entry[T]]:
    """
    Pair every value of `input` with its 0-based position.

    Example:
        >>> list(indexed("ab"))
        [Entry(idx=0, value='a'), Entry(idx=1, value='b')]
    """
    return it.starmap(Entry, enumerate(input))
