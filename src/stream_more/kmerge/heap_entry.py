"""Heap entries of a k-way merge and the comparator ranking them."""

from __future__ import annotations

from typing import Generic, TypeVar, overload

from stream_more.comparators import Compare, Ordering
from stream_more.peeked import Peeked
from stream_more.utils.stream import Stream

T = TypeVar("T")


class HeapEntryCmp(Generic[T]):
    """
    Ranks [Peeked][stream_more.Peeked] cells, and the heap entries holding them.

    An empty cell always ranks above a filled one, so the merge peeks every
    stream before emitting anything. Two filled cells are ranked by the user
    comparator.

    Parameters
    ----------
    cmp :
        The user comparator applied to peeked values.
    """

    def __init__(self, cmp: Compare[T]) -> None:
        self.cmp = cmp

    @overload
    def compare(self, left: Peeked[T], right: Peeked[T]) -> Ordering: ...

    @overload
    def compare(self, left: HeapEntry[T], right: HeapEntry[T]) -> Ordering: ...

    def compare(self, left, right):
        """
        Compare two cells, or the cells of two heap entries.

        Returns
        -------
        :
            `Ordering.GREATER` if `left` should be handled before `right`.
        """
        if isinstance(left, HeapEntry):
            left = left.peeked
        if isinstance(right, HeapEntry):
            right = right.peeked

        match (left.has_peeked(), right.has_peeked()):
            case (False, False):
                return Ordering.EQUAL
            case (False, True):
                return Ordering.GREATER
            case (True, False):
                return Ordering.LESS
            case _:
                return self.cmp.compare(left.value, right.value)


class HeapEntry(Generic[T]):
    """
    A stream attached to a merge, with the item peeked from it.

    Entries live in a `heapq` min-heap, so an entry sorts first when its
    comparator ranks it `Ordering.GREATER`.

    Parameters
    ----------
    stream :
        The producer, owned by this entry.
    cmp :
        The comparator shared by all entries of the merge.
    """

    __slots__ = ("peeked", "stream", "id", "_cmp")

    def __init__(self, stream: Stream[T], cmp: HeapEntryCmp[T]) -> None:
        self.peeked: Peeked[T] = Peeked()
        self.stream = stream
        # For debugging only; the merge numbers its streams from 1.
        self.id = ""
        self._cmp = cmp

    def with_id(self, id: object) -> HeapEntry[T]:
        """Set the diagnostic id and return the entry."""
        self.id = str(id)
        return self

    def __lt__(self, other: HeapEntry[T]) -> bool:
        return self._cmp.compare(self, other) == Ordering.GREATER

    def __repr__(self) -> str:
        return f"HeapEntry(id={self.id!r}, peeked={self.peeked!r})"
