"""Common utility types shared by the supercoll containers.

This module provides the abstract mixins both containers build on, along
with the sentinel used for optional defaults.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List

__all__ = [
    "Iterating",
    "MISSING",
    "Missing",
    "Sized",
]


@dataclass(frozen=True)
class Missing:
    """Marker for an omitted optional argument where None is a valid value."""

    pass


MISSING = Missing()


class Sized(metaclass=ABCMeta):
    @abstractmethod
    def size(self) -> int: ...

    def is_empty(self) -> bool:
        """Check whether the container holds no elements.

        Time Complexity: O(1)
        """
        return self.size() == 0

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __len__(self) -> int:
        return self.size()


class Iterating[U](metaclass=ABCMeta):
    @abstractmethod
    def iter(self) -> Iterator[U]: ...

    def to_list(self) -> List[U]:
        """Snapshot the contents into a list in iteration order."""
        return list(self.iter())

    def __iter__(self) -> Iterator[U]:
        return self.iter()
