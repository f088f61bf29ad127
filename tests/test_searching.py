import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import binary_search, linear_search


def test_linear_search_finds_first_occurrence():
    assert linear_search([10, 20, 30, 20], 20) == 1


def test_linear_search_missing_returns_none():
    assert linear_search([10, 20, 30, 40, 50], 35) is None


def test_linear_search_empty():
    assert linear_search([], 1) is None


@given(st.lists(st.integers(-50, 50)), st.integers(-50, 50))
def test_linear_search_invariant(items, key):
    index = linear_search(items, key)
    if key in items:
        assert items[index] == key
        assert key not in items[:index]
    else:
        assert index is None


@pytest.mark.parametrize("position", range(5))
def test_binary_search_each_position(position):
    items = [10, 20, 30, 40, 50]
    assert binary_search(items, items[position]) == position


@pytest.mark.parametrize("key", [5, 25, 55])
def test_binary_search_missing(key):
    assert binary_search([10, 20, 30, 40, 50], key) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


@given(st.lists(st.integers(-100, 100)), st.integers(-100, 100))
def test_binary_search_invariant(items, key):
    items = sorted(items)
    index = binary_search(items, key)
    if key in items:
        assert items[index] == key
    else:
        assert index is None