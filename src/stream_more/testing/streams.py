"""Async streams with scripted readiness, for testing stream adaptors."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class _Marker:
    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


PENDING: Any = _Marker("PENDING")
"""Script entry: not ready yet, suspend once."""

END: Any = _Marker("END")
"""Script entry: the stream has ended."""


class ScriptedStream(Generic[T]):
    """
    Async iterator replaying a script of poll results.

    Parameters
    ----------
    script :
        The results, in order. `PENDING` yields to the event loop once before
        moving on to the next entry, `END` ends the current step with
        `StopAsyncIteration`, and any other entry is returned as an item.
        Entries after an `END` are only reached if the stream is stepped
        again, which a well-behaved consumer never does.

    Notes
    -----
    Stepping past the end of the script raises `AssertionError`.
    """

    def __init__(self, script: Iterable[Any]) -> None:
        self._script = list(script)
        self.polls = 0
        self.pending = 0

    def __aiter__(self) -> ScriptedStream[T]:
        return self

    async def __anext__(self) -> T:
        self.polls += 1
        while True:
            assert self._script, "Stream stepped past the end of its script."
            result = self._script.pop(0)
            if result is PENDING:
                self.pending += 1
                await asyncio.sleep(0)
            elif result is END:
                raise StopAsyncIteration
            else:
                return result


class GatedStream(Generic[T]):
    """
    Async iterator whose steps block until a gate is opened.

    Parameters
    ----------
    items :
        The items to produce once the gate is open.
    """

    def __init__(self, items: Iterable[T]) -> None:
        self._items = list(items)
        self._gate = asyncio.Event()
        self.produced = 0

    def open(self) -> None:
        """Let current and future steps proceed."""
        self._gate.set()

    def __aiter__(self) -> GatedStream[T]:
        return self

    async def __anext__(self) -> T:
        await self._gate.wait()
        if not self._items:
            raise StopAsyncIteration
        self.produced += 1
        return self._items.pop(0)
