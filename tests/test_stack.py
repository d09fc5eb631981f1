import pytest

from potionmaze.errors import InvalidConfigurationError, StackOverflowError
from potionmaze.mapgen.stack import CellStack

def test_lifo_order():
    st = CellStack(3)
    for c in [(1, 1), (3, 1), (3, 3)]:
        st.push(c)
    assert len(st) == 3
    assert [st.pop(), st.pop(), st.pop()] == [(3, 3), (3, 1), (1, 1)]
    assert not st

def test_pop_empty_returns_none():
    st = CellStack(1)
    assert st.pop() is None
    st.push((1, 1))
    st.pop()
    assert st.pop() is None

def test_push_beyond_capacity_is_fatal():
    st = CellStack(2)
    st.push((1, 1))
    st.push((3, 1))
    with pytest.raises(StackOverflowError):
        st.push((5, 1))
    assert len(st) == 2

def test_capacity_must_be_positive():
    for cap in (0, -1):
        with pytest.raises(InvalidConfigurationError):
            CellStack(cap)
