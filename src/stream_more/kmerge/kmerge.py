from __future__ import annotations

import heapq
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from stream_more.comparators import (
    Ascending,
    Compare,
    Descending,
    FnCmp,
    as_compare,
)
from stream_more.kmerge.heap_entry import HeapEntry, HeapEntryCmp
from stream_more.utils.stream import EXHAUSTED, StreamLike, as_stream, astep, step

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KMerge(Generic[T]):
    """
    Merges multiple streams into one, in comparator order.

    Each attached stream is kept in a heap entry together with the item peeked
    from it. An entry that has not been peeked ranks above every peeked entry,
    so all streams are peeked before any item is returned. From then on the top
    of the heap holds the next item to return.

    The merge is both an iterator and an async iterator. Sync iteration
    requires every attached stream to be a sync iterable; async iteration
    accepts both kinds.

    If every stream yields items in comparator order the result is sorted.
    Otherwise the order is undefined, but the merge still returns every item.

    Parameters
    ----------
    cmp :
        If `cmp.compare(a, b)` returns `Ordering.GREATER`, `a` is chosen
        before `b`. Plain three-way `cmp` functions are accepted as well.

    Notes
    -----
    - The order of items that compare equal is unspecified.
    - A merge must not be stepped concurrently from multiple tasks.
    """

    def __init__(self, cmp: Compare[T] | Callable[[T, T], int]) -> None:
        self._curr_id = 0
        self._cmp: HeapEntryCmp[T] = HeapEntryCmp(as_compare(cmp))
        self._heap: list[HeapEntry[T]] = []

    @classmethod
    def by(cls, first: Callable[[T, T], bool]) -> KMerge[T]:
        """
        Create an empty merge ordered by a predicate.

        Parameters
        ----------
        first :
            Called with two items `a`, `b`; returns `True` if `a` is ordered
            before `b`.

        Returns
        -------
        :
            The merge, with no streams attached.
        """
        return cls(FnCmp(first))

    @classmethod
    def by_cmp(cls, cmp: Compare[T] | Callable[[T, T], int]) -> KMerge[T]:
        """Create an empty merge ordered by a comparator."""
        return cls(cmp)

    @classmethod
    def max(cls) -> KMerge[Any]:
        """Create an empty merge choosing the largest item first."""
        return cls(Descending())

    @classmethod
    def min(cls) -> KMerge[Any]:
        """Create an empty merge choosing the smallest item first."""
        return cls(Ascending())

    def merge(self, stream: StreamLike[T]) -> KMerge[T]:
        """
        Attach another stream.

        This may be called at any time, also after items have been returned.
        Items already returned are unaffected; the new stream is merged into
        everything not returned yet.

        Parameters
        ----------
        stream :
            An iterable or async iterable. The merge takes ownership of it.

        Returns
        -------
        :
            This merge, to allow chaining.

        Raises
        ------
        TypeError
            If `stream` is neither iterable nor async iterable.
        """
        entry = HeapEntry(as_stream(stream), self._cmp)
        self._curr_id += 1
        heapq.heappush(self._heap, entry.with_id(self._curr_id))
        logger.debug("Attached stream %s to merge", entry.id)
        return self

    def pending(self) -> int:
        """Return the number of attached streams not yet exhausted."""
        return len(self._heap)

    def __iter__(self) -> KMerge[T]:
        return self

    def __next__(self) -> T:
        while self._heap:
            top = self._heap[0]
            if top.peeked.has_peeked():
                return top.peeked.take()
            self._rank(top, step(top.stream))
        raise StopIteration

    def __aiter__(self) -> KMerge[T]:
        return self

    async def __anext__(self) -> T:
        while self._heap:
            top = self._heap[0]
            if top.peeked.has_peeked():
                # The emptied entry outranks every other entry, so it stays on
                # top and is stepped on the next call.
                return top.peeked.take()
            self._rank(top, await astep(top.stream))
        raise StopAsyncIteration

    def _rank(self, top: HeapEntry[T], item: T) -> None:
        """Record the item just produced by the top entry and restore heap order."""
        # An unpeeked entry cannot be displaced while its stream is stepped:
        # streams attached meanwhile rank equal to it.
        if item is EXHAUSTED:
            heapq.heappop(self._heap)
            logger.debug("Stream %s exhausted, %d remaining", top.id, len(self._heap))
        else:
            top.peeked.fill(item)
            heapq.heapreplace(self._heap, top)

    def __repr__(self) -> str:
        return f"KMerge(cmp={self._cmp.cmp!r}, pending={len(self._heap)})"
