from __future__ import annotations
import weakref
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from .errors import BadIndexError
from .list_adt import ListADT

T = TypeVar("T")


class _Node(Generic[T]):
    """Chain link. ``next`` owns the following node; ``prev`` is a weak back-reference."""

    __slots__ = ("value", "next", "_prev", "__weakref__")

    def __init__(self, value: T):
        self.value: T = value
        self.next: Optional[_Node[T]] = None
        self._prev: Optional[weakref.ReferenceType] = None

    @property
    def prev(self) -> Optional["_Node[T]"]:
        return self._prev() if self._prev is not None else None

    @prev.setter
    def prev(self, node: Optional["_Node[T]"]) -> None:
        self._prev = weakref.ref(node) if node is not None else None


class DoublyLinkedList(ListADT[T]):
    def __init__(self, items: Optional[Iterable[T]] = None):
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size: int = 0
        super().__init__(items)

    # ---- basics ----
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        n = self._head
        while n is not None:
            nxt = n.next
            n.next = None
            n.prev = None
            n = nxt
        self._head = self._tail = None
        self._size = 0

    def _steal(self, other: "DoublyLinkedList[T]") -> None:
        self._head, self._tail, self._size = other._head, other._tail, other._size
        other._head = other._tail = None
        other._size = 0

    def __iter__(self) -> Iterator[T]:
        n = self._head
        while n is not None:
            yield n.value
            n = n.next

    def _node_at(self, index: int) -> _Node[T]:
        """Walk from whichever end is closer."""
        if index < 0 or index >= self._size:
            raise BadIndexError(index)
        if index < self._size // 2:
            n = self._head
            for _ in range(index):
                n = n.next
        else:
            n = self._tail
            for _ in range(self._size - 1 - index):
                n = n.prev
        return n

    def _unlink(self, n: _Node[T]) -> T:
        before, after = n.prev, n.next
        if before is None:
            self._head = after
        else:
            before.next = after
        if after is None:
            self._tail = before
        else:
            after.prev = before
        n.next = None
        n.prev = None
        self._size -= 1
        return n.value

    # ---- add ----
    def add_front(self, item: T) -> None:
        n = _Node(item)
        if self._head is None:
            self._head = self._tail = n
        else:
            n.next = self._head
            self._head.prev = n
            self._head = n
        self._size += 1

    def add_back(self, item: T) -> None:
        n = _Node(item)
        if self._tail is None:
            self._head = self._tail = n
        else:
            n.prev = self._tail
            self._tail.next = n
            self._tail = n
        self._size += 1

    def add_index(self, index: int, item: T) -> None:
        if index < 0 or index > self._size:
            raise BadIndexError(index)
        if index == 0:
            self.add_front(item)
            return
        if index == self._size:
            self.add_back(item)
            return
        after = self._node_at(index)
        before = after.prev
        n = _Node(item)
        n.prev = before
        n.next = after
        before.next = n
        after.prev = n
        self._size += 1

    # ---- remove ----
    def remove_front(self) -> T:
        self.check_not_empty()
        return self._unlink(self._head)

    def remove_back(self) -> T:
        self.check_not_empty()
        return self._unlink(self._tail)

    def remove_index(self, index: int) -> T:
        self.check_not_empty()
        return self._unlink(self._node_at(index))

    # ---- access ----
    def get_front(self) -> T:
        self.check_not_empty()
        return self._head.value

    def get_back(self) -> T:
        self.check_not_empty()
        return self._tail.value

    def get_index(self, index: int) -> T:
        self.check_not_empty()
        return self._node_at(index).value

    def set_index(self, index: int, value: T) -> None:
        self.check_not_empty()
        self._node_at(index).value = value
