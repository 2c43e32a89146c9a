"""
Pytest fixtures shared by the list tests.

Provides:
- ``make_list``: a factory for each list variant (parametrized, so any test
  using it runs once per variant)
- ``variant_factories``: all three factories at once, for replay tests
"""

import pytest

from chunkylists import ChunkyArrayList, DoublyLinkedList, SinglyLinkedList


FACTORIES = {
    "singly": SinglyLinkedList,
    "doubly": DoublyLinkedList,
    "chunky2": lambda items=None: ChunkyArrayList(2, items),
    "chunky5": lambda items=None: ChunkyArrayList(5, items),
}


@pytest.fixture(params=sorted(FACTORIES))
def make_list(request):
    """
    Fixture that returns a function building an empty (or pre-filled) list.

    Usage:
        lst = make_list([1, 2, 3])
        assert lst.size() == 3
    """
    factory = FACTORIES[request.param]

    def _make(items=None):
        return factory(items)

    return _make


@pytest.fixture
def variant_factories():
    return dict(FACTORIES)
