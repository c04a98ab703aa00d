"""Callback contracts and interop protocols shared by SuperSet and SuperMap."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Protocol, Tuple, runtime_checkable

__all__ = [
    "MapKeyMapper",
    "MapLike",
    "MapMapper",
    "MapPredicate",
    "MapReducer",
    "SetLike",
    "SetMapper",
    "SetPredicate",
    "SetReducer",
]


type SetPredicate[T] = Callable[[T], bool]

type SetMapper[T, U] = Callable[[T], U]

type SetReducer[T, U] = Callable[[U, T], U]

# Map callbacks receive the value first, then the key
type MapPredicate[K, V] = Callable[[V, K], bool]

type MapMapper[K, V, U] = Callable[[V, K], U]

# Except for key mappers, which receive the key first
type MapKeyMapper[K, V, U] = Callable[[K, V], U]

type MapReducer[K, V, U] = Callable[[U, V, K], U]


@runtime_checkable
class SetLike[T](Protocol):
    """Anything that can be iterated for elements and tested for membership.

    Native sets, frozensets, dict key views and SuperSet all qualify.
    """

    def __iter__(self) -> Iterator[T]: ...

    def __contains__(self, value: object, /) -> bool: ...


@runtime_checkable
class MapLike[K, V](Protocol):
    """Anything that exposes its keys and entries and tests membership by key.

    Native dicts, other Mapping implementations and SuperMap all qualify.
    """

    def keys(self) -> Iterable[K]: ...

    def items(self) -> Iterable[Tuple[K, V]]: ...

    def __contains__(self, key: object, /) -> bool: ...
