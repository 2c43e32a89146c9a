from __future__ import annotations
from typing import Generic, Iterator, List, Optional, TypeVar

from .errors import BadIndexError, EmptyListError, RanOutOfSpaceError

T = TypeVar("T")


class FixedSizeList(Generic[T]):
    """Array-backed block that holds at most ``capacity`` items.

    Slots are allocated once up front. Every insert or removal shifts the
    tail of the block, so operations are O(capacity).
    """

    __slots__ = ("_slots", "_fill")

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._slots: List[Optional[T]] = [None] * capacity
        self._fill: int = 0

    # ---- basics ----
    def size(self) -> int:
        return self._fill

    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._fill == 0

    def is_full(self) -> bool:
        return self._fill == len(self._slots)

    def _check_not_empty(self) -> None:
        if self._fill == 0:
            raise EmptyListError()

    def _check_index(self, index: int, upper: int) -> None:
        if index < 0 or index >= upper:
            raise BadIndexError(index)

    # ---- add ----
    def add_front(self, item: T) -> None:
        self.add_index(0, item)

    def add_back(self, item: T) -> None:
        self.add_index(self._fill, item)

    def add_index(self, index: int, item: T) -> None:
        if self.is_full():
            raise RanOutOfSpaceError(len(self._slots))
        self._check_index(index, self._fill + 1)
        slots = self._slots
        for j in range(self._fill, index, -1):
            slots[j] = slots[j - 1]
        slots[index] = item
        self._fill += 1

    # ---- remove ----
    def remove_front(self) -> T:
        self._check_not_empty()
        return self.remove_index(0)

    def remove_back(self) -> T:
        self._check_not_empty()
        return self.remove_index(self._fill - 1)

    def remove_index(self, index: int) -> T:
        self._check_not_empty()
        self._check_index(index, self._fill)
        slots = self._slots
        removed = slots[index]
        for j in range(index, self._fill - 1):
            slots[j] = slots[j + 1]
        self._fill -= 1
        slots[self._fill] = None
        return removed

    # ---- access ----
    def get_front(self) -> T:
        self._check_not_empty()
        return self._slots[0]

    def get_back(self) -> T:
        self._check_not_empty()
        return self._slots[self._fill - 1]

    def get_index(self, index: int) -> T:
        self._check_not_empty()
        self._check_index(index, self._fill)
        return self._slots[index]

    def set_index(self, index: int, value: T) -> None:
        self._check_not_empty()
        self._check_index(index, self._fill)
        self._slots[index] = value

    # ---- utils ----
    def to_list(self) -> List[T]:
        return self._slots[: self._fill]

    def __iter__(self) -> Iterator[T]:
        for i in range(self._fill):
            yield self._slots[i]

    def __len__(self) -> int:
        return self._fill

    def __repr__(self) -> str:
        return f"FixedSizeList({self.to_list()!r}, capacity={len(self._slots)})"
