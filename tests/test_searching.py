from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import binary_search, binary_search_recursive, linear_search

SAMPLE = [10, 25, 33, 47, 58]
BINARY_EXAMPLE = [2, 5, 8, 12, 16, 23, 38]


def test_finds_example_target():
    assert linear_search(SAMPLE, 33) == 2
    assert binary_search(SAMPLE, 33) == 2
    assert binary_search_recursive(SAMPLE, 33) == 2


def test_missing_returns_minus_one():
    assert linear_search(SAMPLE, 34) == -1
    assert binary_search(SAMPLE, 34) == -1
    assert binary_search_recursive(SAMPLE, 34) == -1
    assert linear_search([], 1) == -1
    assert binary_search([], 1) == -1
    assert binary_search_recursive([], 1) == -1


def test_binary_search_example_array():
    for expected_index, value in enumerate(BINARY_EXAMPLE):
        assert linear_search(BINARY_EXAMPLE, value) == expected_index
        assert binary_search(BINARY_EXAMPLE, value) == expected_index
        assert binary_search_recursive(BINARY_EXAMPLE, value) == expected_index


def test_linear_search_returns_first_match():
    data = [5, 1, 5, 1]
    assert linear_search(data, 1) == data.index(1)


def test_recursive_respects_bounds():
    assert binary_search_recursive(SAMPLE, 10, 1, 4) == -1
    assert binary_search_recursive(SAMPLE, 58, 1, 4) == SAMPLE.index(58)


@given(st.lists(st.integers(), unique=True), st.integers())
def test_binary_search_agrees_with_index(data, target):
    data.sort()
    expected = data.index(target) if target in data else -1
    assert binary_search(data, target) == expected
    assert binary_search_recursive(data, target) == expected


@given(st.lists(st.integers(min_value=0, max_value=10)), st.integers(0, 10))
def test_linear_search_invariant(data, target):
    result = linear_search(data, target)
    if target in data:
        assert data[result] == target
        assert target not in data[:result]
    else:
        assert result == -1