from collections.abc import Callable, Iterable, Iterator
from typing import Any

import pytest


class Recorded[T](Iterable[T]):
    """Re-iterable source that records how often it is iterated and pulled."""

    def __init__(self, items: Iterable[T]) -> None:
        self.items = list(items)
        self.iterations = 0
        self.pulls = 0

    def __iter__(self) -> Iterator[T]:
        self.iterations += 1
        for item in self.items:
            self.pulls += 1
            yield item


class Counting[R]:
    """Callable wrapper that records the arguments of every call."""

    def __init__(self, func: Callable[..., R]) -> None:
        self.func = func
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> R:
        self.calls.append(args)
        return self.func(*args)


@pytest.fixture
def recorded() -> type[Recorded[Any]]:
    return Recorded


@pytest.fixture
def counting() -> type[Counting[Any]]:
    return Counting
