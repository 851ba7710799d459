"""
Shortcuts building merges and coalescers from streams.

These play the role of extension methods on streams, which Python lacks.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from stream_more.coalesce import Coalesce, CoalesceFn
from stream_more.comparators import Compare
from stream_more.kmerge import KMerge
from stream_more.utils.stream import StreamLike

T = TypeVar("T")


def kmerge_by(first: Callable[[T, T], bool], *streams: StreamLike[T]) -> KMerge[T]:
    """
    Merge streams according to a "chosen first" predicate.

    Parameters
    ----------
    first :
        Called with two items `a`, `b`; returns `True` if `a` is ordered
        before `b`. If every stream is sorted by `first`, the result is sorted.
    streams :
        The streams to merge. More can be attached with `.merge()`.

    Returns
    -------
    :
        The merge.

    Examples
    --------
    >>> list(kmerge_by(lambda a, b: a < b, [1, 3], [2, 4]))
    [1, 2, 3, 4]
    """
    return _attach(KMerge.by(first), streams)


def kmerge_by_cmp(
    cmp: Compare[T] | Callable[[T, T], int], *streams: StreamLike[T]
) -> KMerge[T]:
    """
    Merge streams according to a comparator.

    If `cmp.compare(a, b)` returns `Ordering.GREATER`, `a` is chosen before
    `b`, where `a` and `b` are the next items of different streams.

    Examples
    --------
    >>> from stream_more.comparators import Ascending
    >>> list(kmerge_by_cmp(Ascending(), [1, 3], [2, 4]))
    [1, 2, 3, 4]
    """
    return _attach(KMerge.by_cmp(cmp), streams)


def kmerge_max(*streams: StreamLike[Any]) -> KMerge[Any]:
    """
    Merge streams choosing the largest item first, like a max-heap.

    Examples
    --------
    >>> list(kmerge_max([3, 1], [4, 2], [5]))
    [5, 4, 3, 2, 1]
    """
    return _attach(KMerge.max(), streams)


def kmerge_min(*streams: StreamLike[Any]) -> KMerge[Any]:
    """
    Merge streams choosing the smallest item first, like a min-heap.

    Examples
    --------
    >>> list(kmerge_min([3, 1], [4, 2]))
    [3, 1, 4, 2]
    """
    return _attach(KMerge.min(), streams)


def coalesce(stream: StreamLike[T], f: CoalesceFn[T]) -> Coalesce[T]:
    """
    Fuse consecutive items of a stream with `f`.

    Parameters
    ----------
    stream :
        The stream to coalesce.
    f :
        Called with `previous` and `current`; returns `Combined(value)` to fuse
        them or `Apart(previous, current)` to emit `previous`.

    Returns
    -------
    :
        The coalescing stream.

    Examples
    --------
    Sum same-sign runs together:

    >>> from stream_more import Apart, Combined
    >>> list(
    ...     coalesce(
    ...         [-1, -2, -3, 3, 1, 0, -1],
    ...         lambda x, y: Combined(x + y) if x * y >= 0 else Apart(x, y),
    ...     )
    ... )
    [-6, 4, -1]
    """
    return Coalesce(stream, f)


def _attach(merge: KMerge[T], streams: tuple[StreamLike[T], ...]) -> KMerge[T]:
    for stream in streams:
        merge.merge(stream)
    return merge
