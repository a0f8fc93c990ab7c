"""
Terminal consumers: drain (fully or partially) a sequence into a scalar.
"""

import builtins
import functools as ft
import math
from collections.abc import Iterable
from operator import add

from lazyseq._helpers import consume
from lazyseq.defaults import NOTHING, Maybe, Some, is_some
from lazyseq.index import Entry
from lazyseq.operators import Not
from lazyseq.sequence import advance, indexed
from lazyseq.transforms import filter, map
from lazyseq.wtyping import Folder, IndexedFunc, IndexedPredicate


def fold[A, T](input: Iterable[T], func: Folder[A, T], init: A) -> A:
    """
    Left fold of `input`, threading the accumulator in pull order.

    Args:
        input: sequence to consume
        func: called as func(acc, value, index)
        init: initial accumulator, returned unchanged for an empty input

    Returns:
        A: the final accumulator

    Example:
        >>> fold("abc", lambda acc, v, i: acc + v * (i + 1), "")
        'abbccc'
        >>> fold([], lambda acc, v, i: acc + v, 10)
        10
    """
    return ft.reduce(
        lambda acc, entry: func(acc, entry.value, entry.idx), indexed(input), init
    )


def reduce[T](input: Iterable[T], func: Folder[T, T]) -> Maybe[T]:
    """
    Fold `input` seeded with its first value.

    `func` is called as func(acc, value, index), where index is that of
    `value`; the first combination therefore sees index 1.

    Returns:
        Maybe[T]: NOTHING for an empty input

    Example:
        >>> reduce([1, 2, 3], lambda a, b, _: a + b)
        Some(value=6)
        >>> reduce([5], lambda a, b, _: a + b)
        Some(value=5)
        >>> reduce([], lambda a, b, _: a + b)
        Nothing()
    """
    cursor = iter(indexed(input))
    match advance(cursor):
        case Some(Entry(value=first)):
            return Some(
                ft.reduce(
                    lambda acc, entry: func(acc, entry.value, entry.idx), cursor, first
                )
            )
        case _:
            return NOTHING


def last[T](input: Iterable[T]) -> Maybe[T]:
    """
    Example:
        >>> last(iter([1, 2, 3]))
        Some(value=3)
        >>> last([])
        Nothing()
    """
    return reduce(input, lambda _acc, value, _idx: value)


def find[T](input: Iterable[T], func: IndexedPredicate[T]) -> Maybe[T]:
    """
    Return the first value satisfying `func`, pulling nothing past it.

    Example:
        >>> find([1, 4, 6], lambda v, _: v % 2 == 0)
        Some(value=4)
        >>> find([1, 3], lambda v, _: v % 2 == 0)
        Nothing()
    """
    return advance(iter(filter(input, func)))


def some[T](input: Iterable[T], func: IndexedPredicate[T]) -> bool:
    """
    Example:
        >>> some([1, 2], lambda v, _: v > 1), some([], lambda v, _: True)
        (True, False)
    """
    return is_some(find(input, func))


def every[T](input: Iterable[T], func: IndexedPredicate[T]) -> bool:
    """
    True if `func` holds for all values; vacuously True for an empty input.

    Example:
        >>> every([2, 4], lambda v, _: v % 2 == 0), every([], lambda v, _: False)
        (True, True)
    """
    return not some(input, Not(func))


def for_each[T](input: Iterable[T], func: IndexedFunc[T, object]) -> None:
    """
    Call `func(value, index)` on each value for its side effects.

    Example:
        >>> for_each("ab", lambda v, i: print(i, v))
        0 a
        1 b
    """
    consume(map(input, func))


def sum[T](input: Iterable[T]) -> T | int:
    """
    Example:
        >>> sum([1, 2, 3]), sum([])
        (6, 0)
    """
    return fold(input, lambda acc, value, _idx: add(acc, value), 0)


def min(input: Iterable[float]) -> float:
    """
    Smallest value, or positive infinity for an empty input.

    Example:
        >>> min([3, 1, 2]), min([])
        (1, inf)
    """
    return fold(input, lambda acc, value, _idx: builtins.min(acc, value), math.inf)


def max(input: Iterable[float]) -> float:
    """
    Largest value, or negative infinity for an empty input.

    Example:
        >>> max([3, 1, 2]), max([])
        (3, -inf)
    """
    return fold(input, lambda acc, value, _idx: builtins.max(acc, value), -math.inf)


def to_list[T](input: Iterable[T]) -> list[T]:
    return list(input)
