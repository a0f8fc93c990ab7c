"""
Operations over several sequences at once.
"""

import typing as tp
from collections.abc import Iterable, Iterator
from operator import eq

from lazyseq.defaults import Nothing, Some
from lazyseq.sequence import Lazy, advance, lazy
from lazyseq.wtyping import ElementEquals


@tp.overload
def zip() -> Lazy[tuple[()]]: ...
@tp.overload
def zip[T1](iter1: Iterable[T1], /) -> Lazy[tuple[T1]]: ...
@tp.overload
def zip[T1, T2](iter1: Iterable[T1], iter2: Iterable[T2], /) -> Lazy[tuple[T1, T2]]: ...
@tp.overload
def zip[T1, T2, T3](
    iter1: Iterable[T1], iter2: Iterable[T2], iter3: Iterable[T3], /
) -> Lazy[tuple[T1, T2, T3]]: ...
@tp.overload
def zip(*inputs: Iterable[tp.Any]) -> Lazy[tuple[tp.Any, ...]]: ...
@lazy
def zip(*inputs: Iterable[tp.Any]) -> Iterator[tuple[tp.Any, ...]]:
    """
    Align the inputs into tuples, stopping at the shortest.

    Each round pulls one value from every input in argument order. The round
    in which an input runs out is abandoned: later inputs are not pulled and
    values already pulled in that round are dropped.

    Without inputs this yields empty tuples forever; bound it yourself.

    Example:
        >>> list(zip([1, 2, 3], ["a", "b"]))
        [(1, 'a'), (2, 'b')]
        >>> from itertools import islice
        >>> list(islice(zip(), 2))
        [(), ()]
    """
    cursors = [iter(input) for input in inputs]
    while True:
        row: list[tp.Any] = []
        for cursor in cursors:
            match advance(cursor):
                case Some(value):
                    row.append(value)
                case Nothing():
                    return
        yield tuple(row)


def is_equal[T1, T2](
    a: Iterable[T1],
    b: Iterable[T2],
    element_equals: ElementEquals[T1, T2] = eq,
) -> bool:
    """
    Compare two sequences element by element.

    A sequence is always equal to itself, without being iterated. Otherwise
    both are walked in lockstep until the first mismatch or until either
    runs out.

    Args:
        a: first sequence
        b: second sequence
        element_equals (optional): comparator for aligned elements.
            default: operator.eq

    Returns:
        bool: True if both have the same length and all elements compare equal

    Example:
        >>> is_equal([1, 2], (1, 2))
        True
        >>> is_equal([1, 2], [1, 2, 3])
        False
        >>> is_equal(["a"], ["A"], lambda x, y: x.lower() == y.lower())
        True
    """
    if a is b:
        return True
    left, right = iter(a), iter(b)
    while True:
        match advance(left), advance(right):
            case Some(x), Some(y):
                if not element_equals(x, y):
                    return False
            case Nothing(), Nothing():
                return True
            case _:
                return False
