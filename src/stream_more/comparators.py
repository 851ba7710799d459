"""
Comparators deciding which item a k-way merge chooses first.

A comparator returns [`Ordering.GREATER`][stream_more.comparators.Ordering]
when its left argument should be chosen before its right argument.
"""

from __future__ import annotations

import abc
import dataclasses
import enum
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from typing_extensions import override

T = TypeVar("T")
K = TypeVar("K")


class Ordering(enum.IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, left: Any, right: Any) -> Ordering:
        """Compare two values by their natural order, using only `<`."""
        if left < right:
            return cls.LESS
        if right < left:
            return cls.GREATER
        return cls.EQUAL


class Compare(abc.ABC, Generic[T]):
    """
    Interface for three-way comparators used by a merge.

    Instances are callable: `cmp(left, right)` is `cmp.compare(left, right)`.
    """

    @abc.abstractmethod
    def compare(self, left: T, right: T) -> Ordering:
        """
        Compare two items.

        Parameters
        ----------
        left :
            The first item.
        right :
            The second item.

        Returns
        -------
        :
            `Ordering.GREATER` if `left` should be chosen before `right`,
            `Ordering.LESS` if `right` should be chosen first, and
            `Ordering.EQUAL` if either may come first.
        """
        ...

    def __call__(self, left: T, right: T) -> Ordering:
        return self.compare(left, right)


class Descending(Compare[Any]):
    """Choose the largest item first."""

    @override
    def compare(self, left: Any, right: Any) -> Ordering:
        return Ordering.of(left, right)

    def __repr__(self) -> str:
        return "Descending()"


class Ascending(Compare[Any]):
    """Choose the smallest item first."""

    @override
    def compare(self, left: Any, right: Any) -> Ordering:
        return Ordering.of(right, left)

    def __repr__(self) -> str:
        return "Ascending()"


@dataclasses.dataclass(frozen=True)
class FnCmp(Compare[T]):
    """
    Comparator built from a "chosen first" predicate.

    Parameters
    ----------
    first :
        Called with two items `a`, `b`; returns `True` if `a` is ordered
        before `b`. Never yields `Ordering.EQUAL`.
    """

    first: Callable[[T, T], bool]

    @override
    def compare(self, left: T, right: T) -> Ordering:
        if self.first(left, right):
            return Ordering.GREATER
        return Ordering.LESS


@dataclasses.dataclass(frozen=True)
class KeyCmp(Compare[T], Generic[T, K]):
    """
    Comparator ordering items by a key, smallest key first.

    Parameters
    ----------
    key :
        Extracts the sort key of an item.
    reverse :
        If `True`, choose the largest key first.
    """

    key: Callable[[T], K]
    reverse: bool = False

    @override
    def compare(self, left: T, right: T) -> Ordering:
        if self.reverse:
            return Ordering.of(self.key(left), self.key(right))
        return Ordering.of(self.key(right), self.key(left))


@dataclasses.dataclass(frozen=True)
class ThreeWayCmp(Compare[T]):
    """
    Comparator built from an old-style `cmp` function.

    Parameters
    ----------
    cmp :
        Returns a negative number if `a` sorts before `b`, zero if they are
        equal and a positive number if `a` sorts after `b`, as accepted by
        `functools.cmp_to_key`. The smallest item is chosen first.
    """

    cmp: Callable[[T, T], int]

    @override
    def compare(self, left: T, right: T) -> Ordering:
        result = self.cmp(left, right)
        if result < 0:
            return Ordering.GREATER
        if result > 0:
            return Ordering.LESS
        return Ordering.EQUAL


def as_compare(cmp: Compare[T] | Callable[[T, T], int]) -> Compare[T]:
    """
    Coerce a comparator argument into a [Compare][stream_more.comparators.Compare].

    Parameters
    ----------
    cmp :
        A `Compare` instance, returned unchanged, or a three-way `cmp`
        function, wrapped in a [ThreeWayCmp][stream_more.comparators.ThreeWayCmp].

    Returns
    -------
    :
        The comparator.

    Raises
    ------
    TypeError
        If `cmp` is neither a `Compare` nor callable.
    """
    if isinstance(cmp, Compare):
        return cmp
    if callable(cmp):
        return ThreeWayCmp(cmp)
    raise TypeError(
        f"Unsupported comparator type {type(cmp).__name__}."
        " Must be a Compare or a callable returning an int."
    )
