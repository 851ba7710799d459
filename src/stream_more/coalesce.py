"""Fuse adjacent items of a stream."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, Generic, TypeAlias, TypeVar, Union

from stream_more.peeked import Peeked
from stream_more.utils.stream import EXHAUSTED, StreamLike, as_stream, astep, step

T = TypeVar("T")

_NOTHING: Any = object()


@dataclasses.dataclass(frozen=True)
class Combined(Generic[T]):
    """Two adjacent items were fused into `value`."""

    value: T


@dataclasses.dataclass(frozen=True)
class Apart(Generic[T]):
    """
    Two adjacent items must not be fused.

    `previous` is emitted right away and `current` becomes the pending item.
    """

    previous: T
    current: T


CoalesceResult: TypeAlias = Union[Combined[T], Apart[T]]
CoalesceFn: TypeAlias = Callable[[T, T], CoalesceResult[T]]


class Coalesce(Generic[T]):
    """
    Stream adaptor that optionally fuses consecutive items.

    The function `f` is passed two items `previous` and `current` and returns
    either [Combined][stream_more.Combined] to fuse them, or
    [Apart][stream_more.Apart] to keep them separate. In the latter case the
    `previous` of the result is emitted. The combined value, or the `current`
    of the result, becomes the `previous` of the next pair. The value that
    remains at the end is emitted too.

    Like [KMerge][stream_more.KMerge], this is both an iterator and an async
    iterator.

    Parameters
    ----------
    stream :
        The stream to coalesce. It is never stepped again once it has ended.
    f :
        The combine function.
    """

    def __init__(self, stream: StreamLike[T], f: CoalesceFn[T]) -> None:
        self._prev: Peeked[T] = Peeked()
        self._finished = False
        self._stream = as_stream(stream)
        self._f = f

    def __iter__(self) -> Coalesce[T]:
        return self

    def __next__(self) -> T:
        while not self._finished:
            item = self._push(step(self._stream))
            if item is not _NOTHING:
                return item
        raise StopIteration

    def __aiter__(self) -> Coalesce[T]:
        return self

    async def __anext__(self) -> T:
        while not self._finished:
            item = self._push(await astep(self._stream))
            if item is not _NOTHING:
                return item
        raise StopAsyncIteration

    def _push(self, current: T) -> T:
        """
        Fold the next produced item into the pending one.

        Returns
        -------
        :
            The item to emit, or `_NOTHING` to keep reading.

        Raises
        ------
        TypeError
            If `f` returns something other than `Combined` or `Apart`.
        """
        if current is EXHAUSTED:
            self._finished = True
            if self._prev.has_peeked():
                return self._prev.take()
            return _NOTHING

        if not self._prev.has_peeked():
            self._prev.fill(current)
            return _NOTHING

        # Leave the pending item in place until `f` has returned.
        result = self._f(self._prev.value, current)
        if isinstance(result, Combined):
            self._prev.take()
            self._prev.fill(result.value)
            return _NOTHING
        if isinstance(result, Apart):
            self._prev.take()
            self._prev.fill(result.current)
            return result.previous
        raise TypeError(
            f"Unsupported coalesce result type {type(result).__name__}."
            " Must be Combined or Apart."
        )
