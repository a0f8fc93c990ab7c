import itertools as it
from collections.abc import Callable, Iterator

from lazyseq.defaults import UNIT, Unit
from lazyseq.sequence import Lazy, lazy
from lazyseq.transforms import map, take_while


@lazy
def infinite() -> Iterator[Unit]:
    """Unbounded sequence of `UNIT` placeholders; only positions matter."""
    return it.repeat(UNIT)


def generate[T](func: Callable[[int], T], count: int | None = None) -> Lazy[T]:
    """
    Yield `func(0), func(1), ...`, stopping after `count` values if given.

    Args:
        func: called with the index of each value as it is pulled
        count (optional): number of values to produce, unbounded when None

    Returns:
        Lazy[T]

    Raises:
        ValueError: if count is negative

    Example:
        >>> list(generate(lambda i: i * i, 4))
        [0, 1, 4, 9]
        >>> list(generate(str, 0))
        []
    """
    if count is not None and count < 0:
        raise ValueError(f"count must be non-negative, got {count!r}")
    bounded = take_while(infinite(), lambda _, idx: idx != count)
    return map(bounded, lambda _, idx: func(idx))


def repeat[T](value: T, count: int | None = None) -> Lazy[T]:
    """
    Example:
        >>> list(repeat("x", 3))
        ['x', 'x', 'x']
    """
    return generate(lambda _: value, count)
