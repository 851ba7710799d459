import pytest
from stream_more import Peeked


def test_empty():
    peeked: Peeked[int] = Peeked()
    assert not peeked.has_peeked()
    assert repr(peeked) == "Peeked()"
    with pytest.raises(ValueError, match="Nothing has been peeked"):
        peeked.value
    with pytest.raises(ValueError, match="Nothing has been peeked"):
        peeked.take()


def test_fill_and_take():
    peeked: Peeked[int] = Peeked()
    peeked.fill(3)
    assert peeked.has_peeked()
    assert peeked.value == 3
    assert repr(peeked) == "Peeked(3)"

    assert peeked.take() == 3
    assert not peeked.has_peeked()

    peeked.fill(4)
    assert peeked.take() == 4


def test_fill_twice():
    peeked = Peeked(1)
    with pytest.raises(ValueError, match="Already peeked 1, cannot peek 2"):
        peeked.fill(2)
    assert peeked.value == 1


def test_none_is_a_value():
    peeked = Peeked(None)
    assert peeked.has_peeked()
    assert peeked.take() is None
    assert not peeked.has_peeked()
