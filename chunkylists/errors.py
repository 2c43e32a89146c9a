from __future__ import annotations


class ListError(Exception):
    """Base class for every error raised by the list structures."""


class EmptyListError(ListError, IndexError):
    def __init__(self, message: str = "operation on empty list"):
        super().__init__(message)


class BadIndexError(ListError, IndexError):
    def __init__(self, index: int):
        super().__init__(f"bad index: {index}")
        self.index: int = index


class RanOutOfSpaceError(ListError):
    def __init__(self, capacity: int):
        super().__init__(f"no room left in block of capacity {capacity}")
        self.capacity: int = capacity
