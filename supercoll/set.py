"""Enhanced set with set algebra and functional combinators.

A SuperSet owns a private insertion-ordered hash table, so iteration follows
first-insertion order and membership tests are O(1) on average. Every
algebraic or functional operation returns a new SuperSet; only the explicit
mutators (add, delete, clear) change the receiver.
"""

from __future__ import annotations

import logging
from itertools import chain
from typing import Any, Dict, Iterable, Iterator, Optional, Set, Type, override

from supercoll.common import Iterating, Sized
from supercoll.types import SetLike, SetMapper, SetPredicate, SetReducer

__all__ = ["SuperSet"]


class SuperSet[T](Sized, Iterating[T]):
    def __init__(self, values: Iterable[T] = ()) -> None:
        """Create a set from an iterable of values.

        Duplicates are dropped; the first occurrence fixes the position.

        Args:
            values: Iterable of hashable values to include in the set.
        """
        self._items: Dict[T, None] = dict.fromkeys(values)

    @staticmethod
    def empty(_ty: Optional[Type[T]] = None) -> SuperSet[T]:
        """Create an empty set.

        Args:
            _ty: Optional type hint (unused).

        Returns:
            An empty set instance.
        """
        return SuperSet()

    @staticmethod
    def from_(source: SetLike[T]) -> SuperSet[T]:
        """Create a set from a native set or another SuperSet.

        The iteration order of the source is preserved. The result shares
        nothing with the source.

        Args:
            source: Any set-like object.

        Returns:
            A new set containing the same elements.
        """
        return SuperSet(source)

    @override
    def size(self) -> int:
        return len(self._items)

    @override
    def iter(self) -> Iterator[T]:
        yield from self._items

    # Native primitives

    def has(self, value: T) -> bool:
        """Check if a value is present in the set.

        Time Complexity: O(1) average
        """
        return value in self._items

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def add(self, value: T) -> SuperSet[T]:
        """Insert a value in place.

        Returns:
            This set, to allow chaining.
        """
        self._items[value] = None
        return self

    def delete(self, value: T) -> bool:
        """Remove a value in place.

        Returns:
            True if the value was present, False otherwise.
        """
        if value in self._items:
            del self._items[value]
            return True
        return False

    def clear(self) -> None:
        self._items.clear()

    # Queries

    def is_subset(self, other: SetLike[T]) -> bool:
        """Check if every element of this set is present in the other.

        Vacuously true when this set is empty.

        Time Complexity: O(n) in the size of this set
        """
        return all(value in other for value in self._items)

    def is_superset(self, other: SetLike[T]) -> bool:
        """Check if every element of the other set is present in this one.

        Time Complexity: O(m) in the size of the other set
        """
        return all(value in self._items for value in other)

    def is_disjoint(self, other: SetLike[T]) -> bool:
        """Check if no element of this set is present in the other.

        Vacuously true when this set is empty.
        """
        return not any(value in other for value in self._items)

    def is_intersection_of(self, *sets: SetLike[T]) -> bool:
        """Check if this set equals the intersection of the given sets.

        The candidate intersection is seeded with this set and narrowed by
        each argument in turn, so with no arguments the result is True.

        Args:
            sets: The sets to intersect.

        Returns:
            True if this set has exactly the elements of the narrowed
            intersection.
        """
        candidate: SuperSet[T] = self
        for other in sets:
            candidate = candidate.intersection(other)
        return self._same_elements(candidate)

    def is_union_of(self, *sets: SetLike[T]) -> bool:
        """Check if this set equals the union of the given sets.

        The candidate union starts empty, so with no arguments the result is
        True only for an empty set.

        Args:
            sets: The sets to unite.

        Returns:
            True if this set has exactly the elements of the union.
        """
        candidate: SuperSet[T] = SuperSet.empty()
        for other in sets:
            candidate = candidate.union(other)
        return self._same_elements(candidate)

    def some(self, predicate: SetPredicate[T]) -> bool:
        """Check if any element satisfies the predicate. False when empty."""
        return any(predicate(value) for value in self._items)

    def every(self, predicate: SetPredicate[T]) -> bool:
        """Check if all elements satisfy the predicate. True when empty."""
        return all(predicate(value) for value in self._items)

    def _same_elements(self, candidate: SuperSet[T]) -> bool:
        # Equal sizes plus one-way containment imply equality for unique elements
        return self.size() == candidate.size() and all(
            value in candidate for value in self._items
        )

    # Transformations

    def union(self, other: SetLike[T]) -> SuperSet[T]:
        """Return the union of two sets.

        Elements of this set come first, followed by the elements of the
        other set that were not already present.

        Time Complexity: O(n + m)

        Args:
            other: The set to union with this one.

        Returns:
            A new set containing all elements from both sets.
        """
        return SuperSet(chain(self._items, other))

    def intersection(self, other: SetLike[T]) -> SuperSet[T]:
        """Return the elements of this set that are also in the other.

        Order follows this set.

        Args:
            other: The set to intersect with this one.

        Returns:
            A new set containing only elements present in both sets.
        """
        return SuperSet(value for value in self._items if value in other)

    def subtract(self, other: SetLike[T]) -> SuperSet[T]:
        """Return the elements of this set that are absent from the other.

        Order follows this set.

        Args:
            other: The set to subtract from this one.

        Returns:
            A new set containing elements in self but not in other.
        """
        return SuperSet(value for value in self._items if value not in other)

    def map[U](self, mapper: SetMapper[T, U]) -> SuperSet[U]:
        """Transform each element.

        Elements that map to the same result collapse into one, so the
        result may be smaller than this set.

        Args:
            mapper: A function applied to every element.

        Returns:
            A new set of the mapped elements.
        """
        result: SuperSet[U] = SuperSet(mapper(value) for value in self._items)
        if result.size() < self.size():
            logging.debug(
                "SuperSet.map collapsed %d elements into %d",
                self.size(),
                result.size(),
            )
        return result

    def filter(self, predicate: SetPredicate[T]) -> SuperSet[T]:
        """Keep the elements satisfying the predicate, preserving order."""
        return SuperSet(value for value in self._items if predicate(value))

    def reduce[U](self, reducer: SetReducer[T, U], initial: U) -> U:
        """Fold the set from left to right in iteration order.

        Args:
            reducer: A function taking the accumulator and an element and
                returning the new accumulator.
            initial: The initial accumulator value.

        Returns:
            The final accumulator value.
        """
        acc = initial
        for value in self._items:
            acc = reducer(acc, value)
        return acc

    def to_set(self) -> Set[T]:
        """Snapshot into a native set."""
        return set(self._items)

    # Operators

    def __or__(self, other: SetLike[T]) -> SuperSet[T]:
        return self.union(other)

    def __and__(self, other: SetLike[T]) -> SuperSet[T]:
        return self.intersection(other)

    def __sub__(self, other: SetLike[T]) -> SuperSet[T]:
        return self.subtract(other)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SuperSet):
            return self._items.keys() == other._items.keys()
        elif isinstance(other, (set, frozenset)):
            return self._items.keys() == other
        else:
            return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SuperSet({list(self._items)!r})"
