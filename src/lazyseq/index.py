import typing as tp


class Entry[T](tp.NamedTuple):
    """A value paired with its 0-based position in pull order.

    Example:
        >>> idx, value = Entry(0, "a")
        >>> Entry(0, "a") == (0, "a")
        True
    """

    idx: int
    value: T
