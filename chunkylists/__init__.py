from .chunky_array_list import ChunkyArrayList, ChunkyIterator
from .doubly_linked_list import DoublyLinkedList
from .errors import BadIndexError, EmptyListError, ListError, RanOutOfSpaceError
from .fixed_size_list import FixedSizeList
from .growable_list import GrowableList
from .list_adt import ListADT
from .singly_linked_list import SinglyLinkedList

__all__ = [
    "BadIndexError",
    "ChunkyArrayList",
    "ChunkyIterator",
    "DoublyLinkedList",
    "EmptyListError",
    "FixedSizeList",
    "GrowableList",
    "ListADT",
    "ListError",
    "RanOutOfSpaceError",
    "SinglyLinkedList",
]
