from __future__ import annotations
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from .errors import BadIndexError
from .list_adt import ListADT

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional["_Node[T]"] = None):
        self.value: T = value
        self.next: Optional[_Node[T]] = next


class SinglyLinkedList(ListADT[T]):
    """Head-only chain of nodes. Anything at the back costs a full walk."""

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._head: Optional[_Node[T]] = None
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
            n = nxt
        self._head = None
        self._size = 0

    def _steal(self, other: "SinglyLinkedList[T]") -> None:
        self._head, self._size = other._head, other._size
        other._head = None
        other._size = 0

    def __iter__(self) -> Iterator[T]:
        n = self._head
        while n is not None:
            yield n.value
            n = n.next

    def _node_at(self, index: int) -> _Node[T]:
        if index < 0 or index >= self._size:
            raise BadIndexError(index)
        n = self._head
        for _ in range(index):
            n = n.next
        return n

    def _last_node(self) -> _Node[T]:
        n = self._head
        while n.next is not None:
            n = n.next
        return n

    # ---- add ----
    def add_front(self, item: T) -> None:
        self._head = _Node(item, self._head)
        self._size += 1

    def add_back(self, item: T) -> None:
        if self._head is None:
            self._head = _Node(item)
        else:
            self._last_node().next = _Node(item)
        self._size += 1

    def add_index(self, index: int, item: T) -> None:
        if index < 0 or index > self._size:
            raise BadIndexError(index)
        if index == 0:
            self.add_front(item)
            return
        prev = self._node_at(index - 1)
        prev.next = _Node(item, prev.next)
        self._size += 1

    # ---- remove ----
    def remove_front(self) -> T:
        self.check_not_empty()
        n = self._head
        self._head = n.next
        n.next = None
        self._size -= 1
        return n.value

    def remove_back(self) -> T:
        self.check_not_empty()
        if self._head.next is None:
            return self.remove_front()
        prev = self._head
        while prev.next.next is not None:
            prev = prev.next
        victim = prev.next
        prev.next = None
        self._size -= 1
        return victim.value

    def remove_index(self, index: int) -> T:
        self.check_not_empty()
        if index < 0 or index >= self._size:
            raise BadIndexError(index)
        if index == 0:
            return self.remove_front()
        prev = self._node_at(index - 1)
        victim = prev.next
        prev.next = victim.next
        victim.next = None
        self._size -= 1
        return victim.value

    # ---- access ----
    def get_front(self) -> T:
        self.check_not_empty()
        return self._head.value

    def get_back(self) -> T:
        self.check_not_empty()
        return self._last_node().value

    def get_index(self, index: int) -> T:
        self.check_not_empty()
        return self._node_at(index).value

    def set_index(self, index: int, value: T) -> None:
        self.check_not_empty()
        self._node_at(index).value = value
