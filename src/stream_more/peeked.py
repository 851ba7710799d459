"""Defines the `Peeked` lookahead cell."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")

_NOT_PEEKED: Any = object()


class Peeked(Generic[T]):
    """
    Holds at most one item read ahead of a stream.

    The cell is either *not peeked* (empty) or *peeked* (holding one value).
    It moves between the two states only through [`fill`][stream_more.Peeked.fill]
    and [`take`][stream_more.Peeked.take]. `None` is a valid value.

    Parameters
    ----------
    value :
        Optional initial value. If omitted, the cell starts empty.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T = _NOT_PEEKED) -> None:
        self._value: T = value

    def has_peeked(self) -> bool:
        """Return `True` if the cell holds a value."""
        return self._value is not _NOT_PEEKED

    @property
    def value(self) -> T:
        """
        The held value, left in place.

        Raises
        ------
        ValueError
            If the cell is empty.
        """
        if self._value is _NOT_PEEKED:
            raise ValueError("Nothing has been peeked.")
        return self._value

    def fill(self, value: T) -> None:
        """
        Store a peeked value in an empty cell.

        Parameters
        ----------
        value :
            The value read ahead of the stream.

        Raises
        ------
        ValueError
            If the cell already holds a value.
        """
        if self._value is not _NOT_PEEKED:
            raise ValueError(f"Already peeked {self._value!r}, cannot peek {value!r}.")
        self._value = value

    def take(self) -> T:
        """
        Take the peeked value and reset the cell to empty.

        Returns
        -------
        :
            The value that was held.

        Raises
        ------
        ValueError
            If the cell is empty.
        """
        value = self.value
        self._value = _NOT_PEEKED
        return value

    def __repr__(self) -> str:
        if self._value is _NOT_PEEKED:
            return "Peeked()"
        return f"Peeked({self._value!r})"
