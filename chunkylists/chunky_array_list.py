from __future__ import annotations
import logging
from typing import Iterable, Iterator, List, Optional, Tuple, TypeVar

from .config import Config
from .errors import BadIndexError
from .fixed_size_list import FixedSizeList
from .growable_list import GrowableList
from .list_adt import ListADT

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ChunkyIterator(Iterator[T]):
    """Forward cursor over a chunky list: (current block, offset in block).

    Blocks are pulled from an iterator over the directory, never looked up
    by position. The cursor is only valid while the list is not mutated.
    Once exhausted it stays exhausted.
    """

    __slots__ = ("_blocks", "_chunk", "_offset")

    def __init__(self, chunks: GrowableList[FixedSizeList[T]]):
        self._blocks: Iterator[FixedSizeList[T]] = iter(chunks)
        self._chunk: Optional[FixedSizeList[T]] = None
        self._offset: int = 0

    def __iter__(self) -> "ChunkyIterator[T]":
        return self

    def __next__(self) -> T:
        while self._chunk is None or self._offset >= self._chunk.size():
            # raises StopIteration past the last block
            self._chunk = next(self._blocks)
            self._offset = 0
        item = self._chunk.get_index(self._offset)
        self._offset += 1
        return item


class ChunkyArrayList(ListADT[T]):
    """List stored as a directory of fixed-capacity blocks.

    New blocks are made only when an end block is full or an insert lands in
    a full block (which is then split in two). Blocks that become empty are
    dropped straight away, so every block holds between 1 and ``chunk_size``
    items. Global indices are translated by walking the directory and
    summing block sizes, recomputed on every call.
    """

    def __init__(self, chunk_size: Optional[int] = None, items: Optional[Iterable[T]] = None):
        if chunk_size is None:
            chunk_size = Config.DEFAULT_CHUNK_SIZE
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be at least 1, got {chunk_size}")
        self._chunk_size: int = chunk_size
        self._chunks: GrowableList[FixedSizeList[T]] = GrowableList()
        super().__init__(items)

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    def _make_chunk(self) -> FixedSizeList[T]:
        return FixedSizeList(self._chunk_size)

    def _empty_like(self) -> "ChunkyArrayList[T]":
        return ChunkyArrayList(self._chunk_size)

    def _spans(self) -> Iterator[Tuple[int, FixedSizeList[T], int, int]]:
        """Yield ``(chunk_index, chunk, start, end)`` for each block in order."""
        start = 0
        for chunk_index, chunk in enumerate(self._chunks):
            end = start + chunk.size()
            yield chunk_index, chunk, start, end
            start = end

    def _find(self, index: int) -> Tuple[int, FixedSizeList[T], int]:
        for chunk_index, chunk, start, end in self._spans():
            if start <= index < end:
                return chunk_index, chunk, index - start
        raise BadIndexError(index)

    def _split(self, chunk_index: int, chunk: FixedSizeList[T]) -> None:
        new_chunk = self._make_chunk()
        new_chunk.add_back(chunk.remove_back())
        self._chunks.add_index(chunk_index + 1, new_chunk)
        logger.debug("split block %d, directory now holds %d blocks", chunk_index, self._chunks.size())

    def _prune(self, chunk_index: int) -> None:
        self._chunks.remove_index(chunk_index)
        logger.debug("pruned empty block %d, directory now holds %d blocks", chunk_index, self._chunks.size())

    # ---- basics ----
    def size(self) -> int:
        total = 0
        for chunk in self._chunks:
            total += chunk.size()
        return total

    def is_empty(self) -> bool:
        return self._chunks.is_empty()

    def clear(self) -> None:
        self._chunks.clear()

    def _steal(self, other: "ChunkyArrayList[T]") -> None:
        self._chunk_size = other._chunk_size
        self._chunks, other._chunks = other._chunks, GrowableList()

    def __iter__(self) -> ChunkyIterator[T]:
        return ChunkyIterator(self._chunks)

    # ---- add ----
    def add_front(self, item: T) -> None:
        if self._chunks.is_empty() or self._chunks.get_front().is_full():
            self._chunks.add_front(self._make_chunk())
        self._chunks.get_front().add_front(item)

    def add_back(self, item: T) -> None:
        if self._chunks.is_empty() or self._chunks.get_back().is_full():
            self._chunks.add_back(self._make_chunk())
        self._chunks.get_back().add_back(item)

    def add_index(self, index: int, item: T) -> None:
        total = 0
        for chunk_index, chunk, start, end in self._spans():
            total = end
            # Inserting right after a full block goes to the start of the next one.
            last = end - 1 if index - start == self._chunk_size else end
            if start <= index <= last:
                if chunk.is_full():
                    self._split(chunk_index, chunk)
                chunk.add_index(index - start, item)
                return
        if index == total:
            self.add_back(item)
            return
        raise BadIndexError(index)

    # ---- remove ----
    def remove_front(self) -> T:
        self.check_not_empty()
        removed = self._chunks.get_front().remove_front()
        if self._chunks.get_front().is_empty():
            self._prune(0)
        return removed

    def remove_back(self) -> T:
        self.check_not_empty()
        removed = self._chunks.get_back().remove_back()
        if self._chunks.get_back().is_empty():
            self._prune(self._chunks.size() - 1)
        return removed

    def remove_index(self, index: int) -> T:
        self.check_not_empty()
        chunk_index, chunk, local = self._find(index)
        removed = chunk.remove_index(local)
        if chunk.is_empty():
            self._prune(chunk_index)
        return removed

    # ---- access ----
    def get_front(self) -> T:
        self.check_not_empty()
        return self._chunks.get_front().get_front()

    def get_back(self) -> T:
        self.check_not_empty()
        return self._chunks.get_back().get_back()

    def get_index(self, index: int) -> T:
        self.check_not_empty()
        _, chunk, local = self._find(index)
        return chunk.get_index(local)

    def set_index(self, index: int, value: T) -> None:
        self.check_not_empty()
        _, chunk, local = self._find(index)
        chunk.set_index(local, value)

    # ---- diagnostics ----
    def chunk_count(self) -> int:
        return self._chunks.size()

    def chunk_layout(self) -> List[List[T]]:
        return [chunk.to_list() for chunk in self._chunks]

    def check_invariants(self) -> None:
        for chunk_index, chunk in enumerate(self._chunks):
            if chunk.is_empty():
                raise AssertionError(f"block {chunk_index} is empty")
            if chunk.size() > self._chunk_size:
                raise AssertionError(
                    f"block {chunk_index} holds {chunk.size()} items, capacity {self._chunk_size}"
                )

    def __repr__(self) -> str:
        return f"ChunkyArrayList({self._chunk_size}, {self.to_list()!r})"
