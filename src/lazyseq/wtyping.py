from collections.abc import Callable

# Callbacks receive the value together with its 0-based position.
type IndexedFunc[T, R] = Callable[[T, int], R]
type IndexedPredicate[T] = Callable[[T, int], bool]
type Folder[A, T] = Callable[[A, T, int], A]
type Merger[T] = Callable[[T, T], T]
type ElementEquals[T1, T2] = Callable[[T1, T2], bool]
