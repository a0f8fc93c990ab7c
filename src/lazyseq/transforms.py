"""
Elementwise transforms, filtering and bounding.

Every function here returns a `Lazy` sequence and performs no work, and no
callback invocation, until the result is iterated.
"""

import itertools as it
from collections.abc import Iterable, Iterator

from lazyseq.defaults import NOTHING, Maybe, Some
from lazyseq.sequence import Lazy, indexed, lazy
from lazyseq.wtyping import IndexedFunc, IndexedPredicate


@lazy
def map[T, R](input: Iterable[T], func: IndexedFunc[T, R]) -> Iterator[R]:
    """
    Apply `func(value, index)` to each value of `input`.

    Args:
        input: source sequence
        func: called exactly once per pulled value, never ahead of demand

    Returns:
        Lazy[R]: the transformed sequence

    Example:
        >>> list(map(["a", "b"], lambda v, i: v * (i + 1)))
        ['a', 'bb']
    """
    for idx, value in indexed(input):
        yield func(value, idx)


@lazy
def flatten[T](input: Iterable[Iterable[T]]) -> Iterator[T]:
    """
    Concatenate the inner sequences of `input` in order.

    An inner sequence is drained completely before the next one is pulled.

    Example:
        >>> list(flatten([[1, 2], [], [3]]))
        [1, 2, 3]
    """
    return it.chain.from_iterable(input)


def flat_map[T, R](input: Iterable[T], func: IndexedFunc[T, Iterable[R]]) -> Lazy[R]:
    """
    Example:
        >>> list(flat_map([1, 2, 3], lambda v, _: [v] * v))
        [1, 2, 2, 3, 3, 3]
    """
    return flatten(map(input, func))


def concat[T](*inputs: Iterable[T]) -> Lazy[T]:
    """
    Example:
        >>> list(concat([1], (2, 3), range(4, 6)))
        [1, 2, 3, 4, 5]
        >>> list(concat())
        []
    """
    return flatten(inputs)


@lazy
def take_while[T](input: Iterable[T], func: IndexedPredicate[T]) -> Iterator[T]:
    """
    Yield values while `func(value, index)` holds.

    The first failing value is not yielded, and nothing further is pulled
    from `input` once `func` has returned False.

    Example:
        >>> list(take_while([1, 2, 3, 4, 1], lambda v, _: v < 3))
        [1, 2]
    """
    for idx, value in indexed(input):
        if not func(value, idx):
            return
        yield value


def _project[T](maybe: Maybe[T]) -> tuple[T] | tuple[()]:
    match maybe:
        case Some(value):
            return (value,)
        case _:
            return ()


def filter_map[T, R](input: Iterable[T], func: IndexedFunc[T, Maybe[R]]) -> Lazy[R]:
    """
    Yield the payload of every `Some` returned by `func`, skip `NOTHING`.

    Example:
        >>> def halve_evens(v, _):
        ...     return Some(v // 2) if v % 2 == 0 else NOTHING
        >>> list(filter_map([1, 2, 3, 4], halve_evens))
        [1, 2]
        >>> list(filter_map([None, 1], lambda v, _: Some(v)))
        [None, 1]
    """
    return flat_map(input, lambda value, idx: _project(func(value, idx)))


def filter[T](input: Iterable[T], func: IndexedPredicate[T]) -> Lazy[T]:
    """
    Keep the values for which `func(value, index)` is truthy.

    `index` is the position in `input`, not in the filtered result.

    Example:
        >>> list(filter([1, 2, 3, 4], lambda v, _: v % 2 == 0))
        [2, 4]
        >>> list(filter("abcd", lambda _, i: i > 1))
        ['c', 'd']
    """
    return filter_map(
        input, lambda value, idx: Some(value) if func(value, idx) else NOTHING
    )
