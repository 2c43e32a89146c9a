"""Tests for the block directory."""

import pytest

from chunkylists import BadIndexError, EmptyListError, GrowableList


class TestGrowableList:
    def test_ends(self):
        d = GrowableList()
        assert d.is_empty()
        d.add_back("b")
        d.add_front("a")
        d.add_back("c")
        assert list(d) == ["a", "b", "c"]
        assert d.get_front() == "a"
        assert d.get_back() == "c"
        assert d.remove_front() == "a"
        assert d.remove_back() == "c"
        assert d.size() == 1

    def test_positional(self):
        d = GrowableList()
        for x in (1, 2, 4):
            d.add_back(x)
        d.add_index(2, 3)
        d.add_index(4, 5)
        assert list(d) == [1, 2, 3, 4, 5]
        assert d.get_index(2) == 3
        assert d.remove_index(0) == 1
        assert list(d) == [2, 3, 4, 5]
        assert len(d) == 4

    def test_errors(self):
        d = GrowableList()
        with pytest.raises(EmptyListError):
            d.remove_front()
        with pytest.raises(EmptyListError):
            d.get_back()
        with pytest.raises(BadIndexError):
            d.add_index(1, "x")
        d.add_back("x")
        with pytest.raises(BadIndexError):
            d.remove_index(1)
        with pytest.raises(BadIndexError):
            d.get_index(-1)

    def test_clear(self):
        d = GrowableList()
        d.add_back(1)
        d.clear()
        assert d.is_empty()
