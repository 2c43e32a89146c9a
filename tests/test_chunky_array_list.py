"""Tests for the block layout of ChunkyArrayList."""

import logging
import random

import pytest

from chunkylists import BadIndexError, ChunkyArrayList, EmptyListError, GrowableList
from chunkylists.config import Config


class TestConstruction:
    def test_default_chunk_size_comes_from_config(self):
        assert ChunkyArrayList().chunk_size == Config.DEFAULT_CHUNK_SIZE

    @pytest.mark.parametrize("chunk_size", [0, -3])
    def test_rejects_bad_chunk_size(self, chunk_size):
        with pytest.raises(ValueError):
            ChunkyArrayList(chunk_size)

    def test_starts_with_no_blocks(self):
        lst = ChunkyArrayList(4)
        assert lst.chunk_count() == 0
        assert lst.chunk_layout() == []

    def test_copy_keeps_chunk_size(self):
        lst = ChunkyArrayList(3, range(7))
        dup = lst.copy()
        assert dup.chunk_size == 3
        assert dup.chunk_layout() == [[0, 1, 2], [3, 4, 5], [6]]

    def test_repr_shows_chunk_size(self):
        assert repr(ChunkyArrayList(2, [1, 2])) == "ChunkyArrayList(2, [1, 2])"


class TestEnds:
    def test_add_back_fills_then_opens_new_block(self):
        lst = ChunkyArrayList(2)
        lst.add_back(1)
        lst.add_back(2)
        lst.add_back(3)
        assert lst.chunk_layout() == [[1, 2], [3]]
        assert lst.size() == 3
        assert lst.get_index(2) == 3

    def test_add_front_opens_block_at_front(self):
        lst = ChunkyArrayList(2)
        for i in (3, 2, 1):
            lst.add_front(i)
        assert lst.chunk_layout() == [[1], [2, 3]]

    def test_remove_front_prunes_emptied_block(self):
        lst = ChunkyArrayList(2, [1, 2, 3])
        assert lst.remove_front() == 1
        assert lst.chunk_layout() == [[2], [3]]
        assert lst.remove_front() == 2
        assert lst.chunk_layout() == [[3]]

    def test_remove_back_prunes_emptied_block(self):
        lst = ChunkyArrayList(2, [1, 2, 3])
        assert lst.remove_back() == 3
        assert lst.chunk_layout() == [[1, 2]]
        assert lst.chunk_count() == 1

    def test_front_and_back(self):
        lst = ChunkyArrayList(2, [1, 2, 3])
        assert lst.get_front() == 1
        assert lst.get_back() == 3


class TestAddIndex:
    def test_insert_into_full_block_splits_it(self):
        lst = ChunkyArrayList(2, [1, 2, 3, 4])
        assert lst.chunk_layout() == [[1, 2], [3, 4]]
        lst.add_index(1, 9)
        assert lst.to_list() == [1, 9, 2, 3, 4]
        assert lst.chunk_layout() == [[1, 9], [2], [3, 4]]

    def test_insert_at_start_of_full_block(self):
        lst = ChunkyArrayList(2, [1, 2])
        lst.add_index(0, 0)
        assert lst.chunk_layout() == [[0, 1], [2]]

    def test_insert_on_boundary_goes_to_next_block(self):
        lst = ChunkyArrayList(2, [1, 2, 3])
        lst.add_index(2, 9)
        assert lst.chunk_layout() == [[1, 2], [9, 3]]
        assert lst.to_list() == [1, 2, 9, 3]

    def test_insert_at_end_of_partial_block_stays_there(self):
        lst = ChunkyArrayList(3, [1, 2, 3, 4])
        lst.remove_index(1)
        assert lst.chunk_layout() == [[1, 3], [4]]
        lst.add_index(2, 9)
        assert lst.chunk_layout() == [[1, 3, 9], [4]]

    def test_append_when_back_block_full(self):
        lst = ChunkyArrayList(2, [1, 2])
        lst.add_index(2, 3)
        assert lst.chunk_layout() == [[1, 2], [3]]

    def test_chunk_size_one(self):
        lst = ChunkyArrayList(1, [1, 2, 3])
        lst.add_index(1, 9)
        assert lst.chunk_layout() == [[1], [9], [2], [3]]

    def test_bad_index_leaves_layout_untouched(self):
        lst = ChunkyArrayList(2, [1, 2, 3])
        with pytest.raises(BadIndexError):
            lst.add_index(5, 0)
        assert lst.chunk_layout() == [[1, 2], [3]]


class TestRemoveIndex:
    def test_remove_from_two_element_block_then_prune(self):
        lst = ChunkyArrayList(2, ["a", "b", "c"])
        assert lst.remove_index(1) == "b"
        assert lst.chunk_layout() == [["a"], ["c"]]
        assert lst.remove_index(0) == "a"
        assert lst.chunk_layout() == [["c"]]
        assert lst.chunk_count() == 1

    def test_remove_last_item_empties_directory(self):
        lst = ChunkyArrayList(4, [1])
        lst.remove_index(0)
        assert lst.is_empty()
        assert lst.chunk_count() == 0
        with pytest.raises(EmptyListError):
            lst.remove_index(0)

    def test_get_and_set_across_blocks(self):
        lst = ChunkyArrayList(2, range(5))
        lst.set_index(3, 30)
        assert [lst.get_index(i) for i in range(5)] == [0, 1, 2, 30, 4]
        assert lst.chunk_layout() == [[0, 1], [2, 30], [4]]


class TestInvariants:
    @pytest.mark.parametrize("chunk_size", [1, 2, 3, 7])
    def test_random_operations_keep_blocks_in_range(self, chunk_size):
        rng = random.Random(chunk_size)
        lst = ChunkyArrayList(chunk_size)
        mirror = []
        for _ in range(600):
            roll = rng.random()
            if roll < 0.5 or not mirror:
                i = rng.randint(0, len(mirror))
                x = rng.randint(0, 999)
                lst.add_index(i, x)
                mirror.insert(i, x)
            elif roll < 0.6:
                assert lst.remove_front() == mirror.pop(0)
            elif roll < 0.7:
                assert lst.remove_back() == mirror.pop()
            else:
                i = rng.randint(0, len(mirror) - 1)
                assert lst.remove_index(i) == mirror.pop(i)
            lst.check_invariants()
            for block in lst.chunk_layout():
                assert 1 <= len(block) <= chunk_size
            assert lst.to_list() == mirror
            assert lst.size() == len(mirror)

    def test_check_invariants_reports_empty_block(self):
        lst = ChunkyArrayList(2, [1])
        # reach into the directory to fake a stale empty block
        lst._chunks.get_front().remove_front()
        with pytest.raises(AssertionError):
            lst.check_invariants()


class TestIterator:
    def test_walks_blocks_in_order(self):
        lst = ChunkyArrayList(2, range(5))
        it = iter(lst)
        assert iter(it) is it
        assert list(it) == [0, 1, 2, 3, 4]

    def test_exhausted_iterator_stays_exhausted(self):
        lst = ChunkyArrayList(2, [1])
        it = iter(lst)
        assert next(it) == 1
        with pytest.raises(StopIteration):
            next(it)
        with pytest.raises(StopIteration):
            next(it)

    def test_walks_directory_without_positional_lookups(self, monkeypatch):
        lst = ChunkyArrayList(1, range(50))

        def no_lookup(self, index):
            raise AssertionError(f"directory looked up by position: {index}")

        monkeypatch.setattr(GrowableList, "get_index", no_lookup)
        assert list(lst) == list(range(50))
        assert lst.to_list() == list(range(50))

    def test_empty_list_iterates_nothing(self):
        assert list(ChunkyArrayList(3)) == []


class TestLogging:
    def test_split_and_prune_are_logged(self, caplog):
        lst = ChunkyArrayList(2, [1, 2])
        with caplog.at_level(logging.DEBUG, logger="chunkylists.chunky_array_list"):
            lst.add_index(1, 9)
            lst.remove_index(2)
        messages = [r.getMessage() for r in caplog.records]
        assert any("split block 0" in m for m in messages)
        assert any("pruned empty block 1" in m for m in messages)
