"""Step sync and async producers through one interface."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from typing import Any, TypeAlias, TypeVar, Union

T = TypeVar("T")

Stream: TypeAlias = Union[Iterator[T], AsyncIterator[T]]
"""An owned producer: a sync iterator or an async iterator."""

StreamLike: TypeAlias = Union[Iterable[T], AsyncIterable[T]]
"""Anything that can be turned into a [Stream][stream_more.utils.stream.Stream]."""


class _Exhausted:
    def __repr__(self) -> str:
        return "EXHAUSTED"


EXHAUSTED: Any = _Exhausted()
"""Returned by `step` and `astep` once a producer reports the end."""


def as_stream(stream: StreamLike[T]) -> Stream[T]:
    """
    Take ownership of a producer as a sync or async iterator.

    Parameters
    ----------
    stream :
        An iterable or async iterable. Iterators are used as they are, which
        keeps objects that are both sync and async iterators (such as a
        [KMerge][stream_more.KMerge]) usable either way.

    Returns
    -------
    :
        An iterator over `stream`. Async iterables stay async.

    Raises
    ------
    TypeError
        If `stream` is neither iterable nor async iterable.
    """
    if isinstance(stream, (Iterator, AsyncIterator)):
        return stream
    if isinstance(stream, AsyncIterable):
        return aiter(stream)
    if isinstance(stream, Iterable):
        return iter(stream)
    raise TypeError(
        f"Unsupported stream type {type(stream).__name__}."
        " Must be an iterable or an async iterable."
    )


def step(stream: Stream[T]) -> T:
    """
    Produce the next item of a sync producer, or `EXHAUSTED`.

    Raises
    ------
    TypeError
        If `stream` is async only; those can only be stepped with `astep`.
    """
    if not isinstance(stream, Iterator):
        raise TypeError(
            f"Cannot iterate async stream {stream!r} synchronously. Use `async for`."
        )
    return next(stream, EXHAUSTED)


async def astep(stream: Stream[T]) -> T:
    """
    Produce the next item of a sync or async producer, or `EXHAUSTED`.

    Awaiting an async producer may suspend. Nothing is recorded until it
    returns, so a cancelled step leaves no trace.
    """
    if isinstance(stream, AsyncIterator):
        try:
            return await anext(stream)
        except StopAsyncIteration:
            return EXHAUSTED
    return next(stream, EXHAUSTED)
