from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from .errors import EmptyListError

T = TypeVar("T")


class ListADT(ABC, Generic[T]):
    """Ordered, zero-indexed sequence contract shared by every list variant.

    Subclasses provide storage and the primitive operations below; the
    conveniences at the bottom (``to_list``, ``copy``, equality, ...) are
    written once here in terms of those primitives.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        if items is not None:
            self.extend(items)

    # ---- add ----
    @abstractmethod
    def add_front(self, item: T) -> None: ...

    @abstractmethod
    def add_back(self, item: T) -> None: ...

    @abstractmethod
    def add_index(self, index: int, item: T) -> None: ...

    # ---- remove ----
    @abstractmethod
    def remove_front(self) -> T: ...

    @abstractmethod
    def remove_back(self) -> T: ...

    @abstractmethod
    def remove_index(self, index: int) -> T: ...

    # ---- access ----
    @abstractmethod
    def get_front(self) -> T: ...

    @abstractmethod
    def get_back(self) -> T: ...

    @abstractmethod
    def get_index(self, index: int) -> T: ...

    @abstractmethod
    def set_index(self, index: int, value: T) -> None: ...

    # ---- basics ----
    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def is_empty(self) -> bool: ...

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """Forward traversal. Undefined if the list is mutated mid-pass."""

    @abstractmethod
    def _steal(self, other: "ListADT[T]") -> None:
        """Take over ``other``'s storage; ``self`` is already cleared."""

    def _empty_like(self) -> "ListADT[T]":
        return type(self)()

    # ---- utils ----
    def check_not_empty(self) -> None:
        if self.is_empty():
            raise EmptyListError()

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.add_back(item)

    def to_list(self) -> List[T]:
        return list(self)

    def copy(self) -> "ListADT[T]":
        out = self._empty_like()
        out.extend(self)
        return out

    def steal_from(self, other: "ListADT[T]") -> None:
        """Move ``other``'s items into ``self``, leaving ``other`` empty."""
        if type(other) is not type(self):
            raise TypeError(
                f"cannot steal from {type(other).__name__} into {type(self).__name__}"
            )
        if other is self:
            return
        self.clear()
        self._steal(other)

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ListADT):
            return NotImplemented
        if self.size() != other.size():
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
