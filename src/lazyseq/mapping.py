"""
Bridging between string-keyed mappings and sequences of (key, value) pairs.
"""

from collections.abc import Iterable, Mapping
from functools import singledispatch

from lazyseq.index import Entry
from lazyseq.sequence import Lazy, indexed
from lazyseq.transforms import map
from lazyseq.wtyping import Merger


def name_value[T](name: str, value: T) -> tuple[str, T]:
    return (name, value)


def values[T](obj: Mapping[str, T]) -> Lazy[T]:
    """
    Lazily yield the values of `obj` in its key order.

    Example:
        >>> list(values({"a": 1, "b": 2}))
        [1, 2]
    """
    return map(obj.keys(), lambda name, _idx: obj[name])


@singledispatch
def entries[T](input: Iterable[T]) -> Lazy[Entry[T]] | Lazy[tuple[str, T]]:
    """
    Pair each value with where it came from.

    For a mapping, yields (key, value) in key order; for any other
    sequence, yields (index, value) in pull order.

    Example:
        >>> list(entries({"a": 1, "b": 2}))
        [('a', 1), ('b', 2)]
        >>> list(entries(["x", "y"]))
        [Entry(idx=0, value='x'), Entry(idx=1, value='y')]
    """
    return indexed(input)


@entries.register(Mapping)
def _entries_of_mapping[T](input: Mapping[str, T]) -> Lazy[tuple[str, T]]:
    return map(input.keys(), lambda name, _idx: name_value(name, input[name]))


def group_by[T](input: Iterable[tuple[str, T]], reduce: Merger[T]) -> dict[str, T]:
    """
    Collect (key, value) pairs into a dict, merging values of repeated keys.

    The first value seen for a key is stored as is; each later one is merged
    as reduce(stored, new), left to right.

    Args:
        input: sequence of (key, value) pairs
        reduce: merge policy for a key that is already present

    Returns:
        dict: one entry per distinct key, in first-seen order

    Example:
        >>> group_by([("a", 1), ("b", 2), ("a", 3)], lambda x, y: x + y)
        {'a': 4, 'b': 2}
    """
    result: dict[str, T] = {}
    for name, value in input:
        result[name] = reduce(result[name], value) if name in result else value
    return result
