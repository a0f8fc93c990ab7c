# pyright: reportImportCycles=false
from __future__ import annotations

import typing as tp
from collections.abc import Callable, Iterable, Iterator, Mapping
from functools import wraps

from lazyseq import aggregate, combine, generate, mapping, transforms
from lazyseq.defaults import Maybe, Unit
from lazyseq.index import Entry
from lazyseq.sequence import indexed
from lazyseq.wtyping import ElementEquals, Folder, IndexedFunc, Merger


class MethodKind[T]:
    @staticmethod
    def consumer[**P, R](
        func: Callable[tp.Concatenate[Iterable[T], P], R],
    ) -> Callable[tp.Concatenate[Seq[T], P], R]:
        @wraps(func)
        def inner(self: Seq[T], *args: P.args, **kwargs: P.kwargs) -> R:
            return func(self, *args, **kwargs)

        inner.__doc__ = f"see {func.__module__}.{func.__name__}"
        return inner

    @staticmethod
    def augmentor[**P, R](
        func: Callable[tp.Concatenate[Iterable[T], P], Iterable[R]],
    ) -> Callable[tp.Concatenate[Seq[T], P], Seq[R]]:
        @wraps(func)
        def inner(self: Seq[T], *args: P.args, **kwargs: P.kwargs) -> Seq[R]:
            return Seq(func(self, *args, **kwargs))

        inner.__doc__ = f"see {func.__module__}.{func.__name__}"
        return inner


@tp.final
class Seq[T](Iterable[T]):
    """
    Re-iterable sequence providing method chaining over the lazyseq functions.

    Nothing is pulled from `iterable` until a terminal method is called or the
    Seq is iterated, and every iteration starts over from `iterable`.

    Args:
        iterable: the sequence to wrap

    Example:
        >>> evens = Seq([1, 2, 3, 4]).filter(lambda v, _: v % 2 == 0)
        >>> evens.map(lambda v, i: (i, v * 10)).to_list()
        [(0, 20), (1, 40)]
        >>> evens.sum(), evens.sum()
        (6, 6)
    """

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self.iterable: Iterable[T] = (
            iterable.iterable if isinstance(iterable, Seq) else iterable
        )

    @tp.override
    def __iter__(self) -> Iterator[T]:
        return iter(self.iterable)

    @tp.override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(iterable={self.iterable!r})"

    @classmethod
    def infinite(cls) -> Seq[Unit]:
        return Seq(generate.infinite())

    @classmethod
    def generate[R](cls, func: Callable[[int], R], count: int | None = None) -> Seq[R]:
        """
        see lazyseq.generate.generate

        Example:
            >>> Seq.generate(lambda i: i * i, 4).to_list()
            [0, 1, 4, 9]
        """
        return Seq(generate.generate(func, count))

    @classmethod
    def repeat[R](cls, value: R, count: int | None = None) -> Seq[R]:
        return Seq(generate.repeat(value, count))

    @classmethod
    def values[R](cls, obj: Mapping[str, R]) -> Seq[R]:
        return Seq(mapping.values(obj))

    map = MethodKind[T].augmentor(transforms.map)
    flat_map = MethodKind[T].augmentor(transforms.flat_map)
    filter = MethodKind[T].augmentor(transforms.filter)
    filter_map = MethodKind[T].augmentor(transforms.filter_map)
    take_while = MethodKind[T].augmentor(transforms.take_while)
    concat = MethodKind[T].augmentor(transforms.concat)
    """see lazyseq.transforms.concat; self comes first"""
    zip_with = MethodKind[T].augmentor(combine.zip)
    """see lazyseq.combine.zip; self comes first"""

    def flatten[R](self: Seq[Iterable[R]]) -> Seq[R]:
        """
        Example:
            >>> Seq([[1, 2], [], [3]]).flatten().to_list()
            [1, 2, 3]
        """
        return Seq(transforms.flatten(self))

    def indexed(self) -> Seq[Entry[T]]:
        return Seq(indexed(self))

    def fold[A](self, func: Folder[A, T], init: A) -> A:
        return aggregate.fold(self, func, init)

    def reduce(self, func: Folder[T, T]) -> Maybe[T]:
        return aggregate.reduce(self, func)

    last = MethodKind[T].consumer(aggregate.last)
    find = MethodKind[T].consumer(aggregate.find)
    some = MethodKind[T].consumer(aggregate.some)
    every = MethodKind[T].consumer(aggregate.every)
    sum = MethodKind[T].consumer(aggregate.sum)
    min = MethodKind[T].consumer(aggregate.min)
    max = MethodKind[T].consumer(aggregate.max)
    to_list = MethodKind[T].consumer(aggregate.to_list)
    """convert to list"""

    def for_each(self, func: IndexedFunc[T, object]) -> None:
        aggregate.for_each(self, func)

    def is_equal[T2](
        self, other: Iterable[T2], element_equals: ElementEquals[T, T2] | None = None
    ) -> bool:
        """
        see lazyseq.combine.is_equal

        Example:
            >>> s = Seq(iter([1, 2]))
            >>> s.is_equal(s)
            True
            >>> Seq([1, 2]).is_equal([1, 2, 3])
            False
        """
        if element_equals is None:
            return combine.is_equal(self, other)
        return combine.is_equal(self, other, element_equals)

    def group_by[V](self: Seq[tuple[str, V]], reduce: Merger[V]) -> dict[str, V]:
        return mapping.group_by(self, reduce)
