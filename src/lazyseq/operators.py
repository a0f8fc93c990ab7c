"""
Defines functors that build indexed callbacks from plain operators
"""

from collections.abc import Callable, Container
from operator import contains, eq, ge, gt, is_, is_not, le, lt, ne

from lazyseq.wtyping import IndexedFunc, IndexedPredicate


def binop_factory[T1, T2](
    op: Callable[[T1, T2], bool],
) -> Callable[[T2], IndexedPredicate[T1]]:
    def comparator(rhs: T2, /) -> IndexedPredicate[T1]:
        """
        Given an operand (rhs), returns an indexed predicate that takes another
        operand (lhs) and its index, and returns the operation result.
        The index is ignored.

        Example:
            >>> from lazyseq.transforms import filter
            >>> list(filter(range(3, 8), LessThan(5)))
            [3, 4]
            >>> assert IsEqual(5)(6, 0) == False

        Returns:
            a closure that takes (LHS, index) and returns operation result
        """

        def wrapper(lhs: T1, _idx: int, /) -> bool:
            return op(lhs, rhs)

        return wrapper

    return comparator


LessThan = binop_factory(lt)
GreaterThan = binop_factory(gt)
LessEqual = binop_factory(le)
GreaterEqual = binop_factory(ge)

IsEqual = binop_factory(eq)
NotEqual = binop_factory(ne)

Is = binop_factory(is_)
IsNot = binop_factory(is_not)


def Not[T](predicate: IndexedPredicate[T]) -> IndexedPredicate[T]:
    return lambda value, idx: not predicate(value, idx)


def IsNone(obj: object, _idx: int, /) -> bool:
    return obj is None


def IsNotNone(obj: object, _idx: int, /) -> bool:
    return obj is not None


def Contains[T](obj: T) -> IndexedPredicate[Container[T]]:
    return lambda container, _idx: contains(container, obj)


def Unpacked[*Ts, R](func: Callable[[*Ts], R]) -> IndexedFunc[tuple[*Ts], R]:
    return lambda tup, _idx: func(*tup)


def Indexless[T, R](func: Callable[[T], R]) -> IndexedFunc[T, R]:
    """
    Adapt a single-argument callable to the (value, index) callback shape.

    Example:
        >>> from lazyseq.transforms import map
        >>> list(map(["0", "1", "10"], Indexless(int)))
        [0, 1, 10]
    """
    return lambda value, _idx: func(value)
