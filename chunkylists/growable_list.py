from __future__ import annotations
from collections import deque
from typing import Deque, Generic, Iterator, TypeVar

from .errors import BadIndexError, EmptyListError

T = TypeVar("T")


class GrowableList(Generic[T]):
    """Unbounded ordered directory used to hold the blocks of a chunky list.

    Amortized O(1) at both ends, O(n) for positional insert/remove.
    """

    __slots__ = ("_items",)

    def __init__(self):
        self._items: Deque[T] = deque()

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def _check_not_empty(self) -> None:
        if not self._items:
            raise EmptyListError()

    # ---- add ----
    def add_front(self, item: T) -> None:
        self._items.appendleft(item)

    def add_back(self, item: T) -> None:
        self._items.append(item)

    def add_index(self, index: int, item: T) -> None:
        if index < 0 or index > len(self._items):
            raise BadIndexError(index)
        self._items.insert(index, item)

    # ---- remove ----
    def remove_front(self) -> T:
        self._check_not_empty()
        return self._items.popleft()

    def remove_back(self) -> T:
        self._check_not_empty()
        return self._items.pop()

    def remove_index(self, index: int) -> T:
        self._check_not_empty()
        if index < 0 or index >= len(self._items):
            raise BadIndexError(index)
        removed = self._items[index]
        del self._items[index]
        return removed

    # ---- access ----
    def get_front(self) -> T:
        self._check_not_empty()
        return self._items[0]

    def get_back(self) -> T:
        self._check_not_empty()
        return self._items[-1]

    def get_index(self, index: int) -> T:
        if index < 0 or index >= len(self._items):
            raise BadIndexError(index)
        return self._items[index]

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
