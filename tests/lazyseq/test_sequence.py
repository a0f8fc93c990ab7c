from collections.abc import Iterator

import pytest

from lazyseq.defaults import NOTHING, Nothing, Some, is_nothing, is_some, unwrap_or
from lazyseq.index import Entry
from lazyseq.sequence import Lazy, advance, indexed, lazy


def test_lazy_builds_fresh_cursor_per_iteration():
    seq = Lazy(lambda: iter([1, 2, 3]))
    first, second = iter(seq), iter(seq)
    assert next(first) == 1
    assert next(first) == 2
    assert next(second) == 1
    assert list(seq) == [1, 2, 3]


def test_lazy_decorator_defers_call():
    calls: list[int] = []

    @lazy
    def numbers(n: int) -> Iterator[int]:
        calls.append(n)
        yield from range(n)

    seq = numbers(3)
    assert calls == []
    assert list(seq) == [0, 1, 2]
    assert list(seq) == [0, 1, 2]
    assert calls == [3, 3]
    assert numbers.__name__ == "numbers"


def test_advance():
    cursor = iter([0, None])
    assert advance(cursor) == Some(0)
    assert advance(cursor) == Some(None)
    assert advance(cursor) is NOTHING
    # exhausted cursors stay exhausted
    assert advance(cursor) is NOTHING


def test_indexed(recorded):
    source = recorded("abc")
    seq = indexed(source)
    assert source.iterations == 0

    cursor = iter(seq)
    assert next(cursor) == Entry(0, "a")
    assert source.pulls == 1
    assert list(cursor) == [(1, "b"), (2, "c")]
    assert [entry.idx for entry in seq] == [0, 1, 2]
    assert source.iterations == 2


def test_indexed_empty():
    assert list(indexed([])) == []


def test_entry_unpacks_like_tuple():
    idx, value = Entry(3, "x")
    assert (idx, value) == (3, "x")
    assert Entry(3, "x").value == "x"


@pytest.mark.parametrize(
    ("maybe", "expected"),
    [(Some(1), 1), (Some(None), None), (NOTHING, "default")],
)
def test_unwrap_or(maybe, expected):
    assert unwrap_or(maybe, "default") == expected


def test_is_some_is_nothing():
    assert is_some(Some(None))
    assert not is_nothing(Some(None))
    assert is_nothing(NOTHING)
    assert Nothing() == NOTHING
    assert Some(None) != NOTHING
