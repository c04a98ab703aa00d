"""Enhanced map with key-set algebra, functional combinators and set projections.

A SuperMap owns a private insertion-ordered dict. Iterating a SuperMap yields
(key, value) entries. Subset, superset and disjointness tests look at keys
only; the "is intersection/union of" tests compare whole entries.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from itertools import chain
from typing import (
    Any,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    Type,
    Union,
    override,
)

from supercoll.common import MISSING, Iterating, Missing, Sized
from supercoll.set import SuperSet
from supercoll.types import (
    MapKeyMapper,
    MapLike,
    MapMapper,
    MapPredicate,
    MapReducer,
)

__all__ = ["SuperMap"]


_PRIMITIVES = (int, float, complex, str, bytes, type(None))


def _same_value(a: Any, b: Any) -> bool:
    """Identity for objects, equality only between primitives (bool is an int)."""
    if a is b:
        return True
    return isinstance(a, _PRIMITIVES) and isinstance(b, _PRIMITIVES) and a == b


class SuperMap[K, V](Sized, Iterating[Tuple[K, V]]):
    def __init__(self, entries: Iterable[Tuple[K, V]] = ()) -> None:
        """Create a map from an iterable of key-value pairs.

        A repeated key keeps the position of its first occurrence and the
        value of its last.

        Args:
            entries: Iterable of (key, value) tuples with hashable keys.
        """
        self._entries: Dict[K, V] = dict(entries)

    @staticmethod
    def empty(
        _kty: Optional[Type[K]] = None, _vty: Optional[Type[V]] = None
    ) -> SuperMap[K, V]:
        """Create an empty map.

        Args:
            _kty: Optional key type hint (unused).
            _vty: Optional value type hint (unused).

        Returns:
            An empty map instance.
        """
        return SuperMap()

    @staticmethod
    def from_(source: MapLike[K, V]) -> SuperMap[K, V]:
        """Create a map from a native mapping or another SuperMap.

        Entries keep the iteration order of the source. The result shares
        nothing with the source.

        Args:
            source: Any map-like object.

        Returns:
            A new map containing the same entries.
        """
        return SuperMap(source.items())

    @override
    def size(self) -> int:
        return len(self._entries)

    @override
    def iter(self) -> Iterator[Tuple[K, V]]:
        """Iterate over all (key, value) pairs in insertion order."""
        yield from self._entries.items()

    def keys(self) -> Iterator[K]:
        """Iterate over all keys in insertion order."""
        yield from self._entries

    def values(self) -> Iterator[V]:
        """Iterate over all values in insertion order."""
        yield from self._entries.values()

    def items(self) -> Iterator[Tuple[K, V]]:
        """Iterate over all (key, value) pairs in insertion order."""
        yield from self._entries.items()

    # Native primitives

    def get(self, key: K, default: Union[V, Missing] = MISSING) -> V:
        """Get the value associated with a key.

        Time Complexity: O(1) average

        Args:
            key: The key to look up.
            default: Value to return if key is not found. If not provided and key
                    is not found, raises KeyError.

        Returns:
            The value associated with the key, or default if key is not found
            and default is provided.

        Raises:
            KeyError: If key is not found and no default is provided.
        """
        try:
            return self._entries[key]
        except KeyError:
            if isinstance(default, Missing):
                raise
            return default

    def lookup(self, key: K) -> Optional[V]:
        """Get the value associated with a key, returning None if not found."""
        return self._entries.get(key)

    def __getitem__(self, key: K) -> V:
        return self._entries[key]

    def has(self, key: K) -> bool:
        return key in self._entries

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def set(self, key: K, value: V) -> SuperMap[K, V]:
        """Insert or update an entry in place.

        Returns:
            This map, to allow chaining.
        """
        self._entries[key] = value
        return self

    def delete(self, key: K) -> bool:
        """Remove an entry in place.

        Returns:
            True if the key was present, False otherwise.
        """
        if key in self._entries:
            del self._entries[key]
            return True
        return False

    def clear(self) -> None:
        self._entries.clear()

    # Queries

    def is_subset(self, other: MapLike[K, Any]) -> bool:
        """Check if every key of this map is a key of the other.

        Values are not compared. Vacuously true when this map is empty.
        """
        return all(key in other for key in self._entries)

    def is_superset(self, other: MapLike[K, Any]) -> bool:
        """Check if every key of the other map is a key of this one.

        Values are not compared.
        """
        return all(key in self._entries for key in other.keys())

    def is_disjoint(self, other: MapLike[K, Any]) -> bool:
        """Check if this map shares no key with the other."""
        return not any(key in other for key in self._entries)

    def is_intersection_of(self, *maps: MapLike[K, V]) -> bool:
        """Check if this map equals the key intersection of the given maps.

        The candidate is seeded with this map and narrowed by the keys of
        each argument in turn. Narrowing keeps the candidate's own values,
        so the result compares this map against a subset of itself.

        Args:
            maps: The maps to intersect.

        Returns:
            True if the candidate has the same size as this map and holds
            every entry of this map with the same value (identity for
            objects, equality for primitives).
        """
        candidate: SuperMap[K, V] = self
        for other in maps:
            candidate = candidate.intersection(other)
        return self._same_entries(candidate)

    def is_union_of(self, *maps: MapLike[K, V]) -> bool:
        """Check if this map equals the union of the given maps.

        The candidate starts empty and each argument is overlaid in order,
        later values overriding earlier ones.

        Args:
            maps: The maps to unite.

        Returns:
            True if the candidate has the same size as this map and holds
            every entry of this map with the same value (identity for
            objects, equality for primitives).
        """
        candidate: SuperMap[K, V] = SuperMap.empty()
        for other in maps:
            candidate = candidate.union(other)
        return self._same_entries(candidate)

    def some(self, predicate: MapPredicate[K, V]) -> bool:
        """Check if any entry satisfies predicate(value, key). False when empty."""
        return any(predicate(value, key) for key, value in self._entries.items())

    def every(self, predicate: MapPredicate[K, V]) -> bool:
        """Check if all entries satisfy predicate(value, key). True when empty."""
        return all(predicate(value, key) for key, value in self._entries.items())

    def includes_key(self, key: K) -> bool:
        return key in self._entries

    def includes_value(self, value: V) -> bool:
        """Check if any entry holds the given value.

        Containers and other objects match only by identity; primitives
        (numbers, strings, bytes, None) also match by equality.

        Time Complexity: O(n), a linear scan
        """
        return any(
            _same_value(existing, value) for existing in self._entries.values()
        )

    def _same_entries(self, candidate: SuperMap[K, V]) -> bool:
        if self.size() != candidate.size():
            return False
        for key, value in self._entries.items():
            other_value = candidate._entries.get(key, MISSING)
            if isinstance(other_value, Missing) or not _same_value(
                other_value, value
            ):
                return False
        return True

    # Transformations

    def union(self, other: MapLike[K, V]) -> SuperMap[K, V]:
        """Return the entries of both maps, the other map winning on shared keys.

        Shared keys keep their position from this map.

        Args:
            other: The map to overlay on this one.

        Returns:
            A new map containing all entries.
        """
        if logging.getLogger().isEnabledFor(logging.DEBUG):
            overridden = sum(1 for key in other.keys() if key in self._entries)
            if overridden:
                logging.debug("SuperMap.union overrode %d shared keys", overridden)
        return SuperMap(chain(self._entries.items(), other.items()))

    def intersection(self, other: MapLike[K, Any]) -> SuperMap[K, V]:
        """Return the entries of this map whose key is in the other.

        Values always come from this map.
        """
        return SuperMap(
            (key, value) for key, value in self._entries.items() if key in other
        )

    def subtract(self, other: MapLike[K, Any]) -> SuperMap[K, V]:
        """Return the entries of this map whose key is absent from the other."""
        return SuperMap(
            (key, value) for key, value in self._entries.items() if key not in other
        )

    def map_keys[U](self, mapper: MapKeyMapper[K, V, U]) -> SuperMap[U, V]:
        """Replace every key k with mapper(k, v).

        When two entries map to the same new key, the entry iterated later
        wins and the earlier value is lost.

        Args:
            mapper: A function taking the key and the value.

        Returns:
            A new map with the transformed keys.
        """
        result: SuperMap[U, V] = SuperMap(
            (mapper(key, value), value) for key, value in self._entries.items()
        )
        if result.size() < self.size():
            logging.debug(
                "SuperMap.map_keys collapsed %d keys into %d",
                self.size(),
                result.size(),
            )
        return result

    def map_values[W](self, mapper: MapMapper[K, V, W]) -> SuperMap[K, W]:
        """Replace every value v with mapper(v, k), keeping keys and order."""
        return SuperMap(
            (key, mapper(value, key)) for key, value in self._entries.items()
        )

    def filter(self, predicate: MapPredicate[K, V]) -> SuperMap[K, V]:
        """Keep the entries for which predicate(value, key) holds."""
        return SuperMap(
            (key, value)
            for key, value in self._entries.items()
            if predicate(value, key)
        )

    def reduce[Z](self, reducer: MapReducer[K, V, Z], initial: Z) -> Z:
        """Fold the map from left to right in insertion order.

        Args:
            reducer: A function taking the accumulator, value and key and
                returning the new accumulator.
            initial: The initial accumulator value.

        Returns:
            The final accumulator value.
        """
        acc = initial
        for key, value in self._entries.items():
            acc = reducer(acc, value, key)
        return acc

    # Projections

    def values_to_set(self) -> SuperSet[V]:
        """Snapshot the values into a new SuperSet.

        Raises:
            TypeError: If any value is unhashable.
        """
        return SuperSet(self._entries.values())

    def keys_to_set(self) -> SuperSet[K]:
        return SuperSet(self._entries)

    def entries_to_set(self) -> SuperSet[Tuple[K, V]]:
        """Snapshot the (key, value) pairs into a new SuperSet.

        Raises:
            TypeError: If any value is unhashable.
        """
        return SuperSet(self._entries.items())

    def values_to_list(self) -> List[V]:
        return list(self._entries.values())

    def keys_to_list(self) -> List[K]:
        return list(self._entries)

    def to_dict(self) -> Dict[K, V]:
        """Snapshot into a native dict."""
        return dict(self._entries)

    # Operators

    def __or__(self, other: MapLike[K, V]) -> SuperMap[K, V]:
        return self.union(other)

    def __and__(self, other: MapLike[K, Any]) -> SuperMap[K, V]:
        return self.intersection(other)

    def __sub__(self, other: MapLike[K, Any]) -> SuperMap[K, V]:
        return self.subtract(other)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SuperMap):
            return self._entries == other._entries
        elif isinstance(other, Mapping):
            return self._entries == dict(other.items())
        else:
            return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SuperMap({list(self._entries.items())!r})"
