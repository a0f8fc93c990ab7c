import itertools as itl
from operator import is_

from lazyseq.aggregate import to_list
from lazyseq.combine import is_equal, zip
from lazyseq.generate import generate


def test_zip_truncates_to_shortest():
    assert to_list(zip([1, 2, 3], ["a", "b"])) == [(1, "a"), (2, "b")]
    assert to_list(zip(["a", "b"], [1, 2, 3])) == [("a", 1), ("b", 2)]
    assert to_list(zip([1, 2], [], [3])) == []


def test_zip_many():
    assert to_list(zip("ab", "cd", "ef", "gh")) == [
        ("a", "c", "e", "g"),
        ("b", "d", "f", "h"),
    ]
    assert to_list(zip([1, 2])) == [(1,), (2,)]


def test_zip_with_unbounded_input():
    squares = generate(lambda i: i * i)
    assert to_list(zip("abc", squares)) == [("a", 0), ("b", 1), ("c", 4)]


def test_zip_without_inputs_is_unbounded():
    assert list(itl.islice(zip(), 3)) == [(), (), ()]


def test_zip_stops_pulling_at_exhausted_input(recorded):
    short, long = recorded([1]), recorded([10, 20, 30])
    assert to_list(zip(short, long)) == [(1, 10)]
    # the final round stops at `short` before touching `long`
    assert long.pulls == 1

    long, short = recorded([10, 20, 30]), recorded([1])
    assert to_list(zip(long, short)) == [(10, 1)]
    # `long` was pulled once more in the final round, and that value is dropped
    assert long.pulls == 2


def test_zip_is_lazy_and_reiterable(recorded):
    left, right = recorded("ab"), recorded("cd")
    seq = zip(left, right)
    assert left.iterations == right.iterations == 0
    assert next(iter(seq)) == ("a", "c")
    assert to_list(seq) == [("a", "c"), ("b", "d")]
    assert left.iterations == right.iterations == 2


def test_is_equal():
    assert is_equal([1, 2], (1, 2))
    assert is_equal([], ())
    assert not is_equal([1, 2], [1, 2, 3])
    assert not is_equal([1, 2, 3], [1, 2])
    assert not is_equal([1, 2], [1, 3])
    assert is_equal([1.0], [1])


def test_is_equal_identity_fast_path(recorded):
    source = recorded([1, 2])
    assert is_equal(source, source)
    assert source.iterations == 0

    cursor = iter([1, 2])
    assert is_equal(cursor, cursor)
    assert list(cursor) == [1, 2]


def test_is_equal_symmetric():
    pairs = [([1, 2], [1, 2]), ([1], [1, 2]), ([2], [1]), ([], [0])]
    for a, b in pairs:
        assert is_equal(a, b) == is_equal(b, a)


def test_is_equal_custom_comparator():
    assert is_equal(["a", "B"], ["A", "b"], lambda x, y: x.lower() == y.lower())
    a, b = [object()], [object()]
    assert not is_equal(a, b, is_)
    assert is_equal(a, list(a), is_)


def test_is_equal_stops_at_divergence(recorded):
    a, b = recorded([1, 9, 3, 4]), recorded([1, 2, 3, 4])
    assert not is_equal(a, b)
    assert a.pulls == b.pulls == 2


def test_is_equal_length_mismatch_pulls_one_ahead(recorded):
    a, b = recorded([1]), recorded([1, 2, 3])
    assert not is_equal(a, b)
    assert b.pulls == 2
