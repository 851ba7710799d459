import pytest
from stream_more.comparators import (
    Ascending,
    Descending,
    FnCmp,
    KeyCmp,
    Ordering,
    ThreeWayCmp,
    as_compare,
)


def test_ordering_of():
    assert Ordering.of(1, 2) == Ordering.LESS
    assert Ordering.of(2, 1) == Ordering.GREATER
    assert Ordering.of(2, 2) == Ordering.EQUAL
    assert Ordering.of("b", "a") == Ordering.GREATER


def test_descending():
    cmp = Descending()
    assert cmp.compare(2, 1) == Ordering.GREATER
    assert cmp.compare(1, 2) == Ordering.LESS
    assert cmp.compare(1, 1) == Ordering.EQUAL
    assert cmp(2, 1) == Ordering.GREATER


def test_ascending():
    cmp = Ascending()
    assert cmp.compare(2, 1) == Ordering.LESS
    assert cmp.compare(1, 2) == Ordering.GREATER
    assert cmp.compare(1, 1) == Ordering.EQUAL


def test_fn_cmp():
    cmp = FnCmp(lambda a, b: a % 3 < b % 3)
    assert cmp.compare(3, 4) == Ordering.GREATER
    assert cmp.compare(4, 3) == Ordering.LESS
    # A predicate never reports equality.
    assert cmp.compare(3, 6) == Ordering.LESS


def test_key_cmp():
    cmp = KeyCmp(key=lambda record: record["ts"])
    assert cmp.compare({"ts": 1}, {"ts": 2}) == Ordering.GREATER
    assert cmp.compare({"ts": 2}, {"ts": 1}) == Ordering.LESS
    assert cmp.compare({"ts": 1}, {"ts": 1}) == Ordering.EQUAL

    reverse = KeyCmp(key=len, reverse=True)
    assert reverse.compare("abc", "a") == Ordering.GREATER


def test_three_way_cmp():
    cmp = ThreeWayCmp(lambda a, b: a - b)
    assert cmp.compare(1, 5) == Ordering.GREATER
    assert cmp.compare(5, 1) == Ordering.LESS
    assert cmp.compare(5, 5) == Ordering.EQUAL


def test_as_compare():
    descending = Descending()
    assert as_compare(descending) is descending

    wrapped = as_compare(lambda a, b: a - b)
    assert isinstance(wrapped, ThreeWayCmp)
    assert wrapped.compare(1, 2) == Ordering.GREATER

    with pytest.raises(TypeError, match="Unsupported comparator type int"):
        as_compare(5)  # type: ignore[arg-type]
