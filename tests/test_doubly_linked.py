import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.doubly_linked import DoublyLinkedList

ints = st.lists(st.integers(min_value=-50, max_value=50), max_size=30)


def assert_consistent(dll, expected):
    assert list(dll) == expected
    assert list(reversed(dll)) == expected[::-1]
    assert len(dll) == len(expected)


def test_source_build_sequence():
    dll = DoublyLinkedList([1])
    dll.append(2)
    dll.append(3)
    dll.prepend(4)
    assert_consistent(dll, [4, 1, 2, 3])
    assert str(dll) == "4 -> 1 -> 2 -> 3"


def test_empty_str():
    assert str(DoublyLinkedList()) == "empty"


def test_delete_first_and_last():
    dll = DoublyLinkedList([4, 1, 2, 3])
    assert dll.delete_last() == 3
    assert dll.delete_first() == 4
    assert_consistent(dll, [1, 2])


def test_delete_until_empty():
    dll = DoublyLinkedList([7])
    assert dll.delete_last() == 7
    assert_consistent(dll, [])
    with pytest.raises(IndexError):
        dll.delete_last()
    with pytest.raises(IndexError):
        dll.delete_first()


@given(ints)
def test_get_matches_python_indexing(values):
    dll = DoublyLinkedList(values)
    assert [dll.get(i) for i in range(len(values))] == values


def test_get_out_of_range():
    dll = DoublyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        dll.get(3)
    with pytest.raises(IndexError):
        dll.get(-1)


@given(ints, st.data())
def test_set_replaces_value(values, data):
    dll = DoublyLinkedList(values)
    if values:
        index = data.draw(st.integers(0, len(values) - 1))
        dll.set(index, 999)
        values = values.copy()
        values[index] = 999
    assert_consistent(dll, values)


def test_set_out_of_range():
    with pytest.raises(IndexError):
        DoublyLinkedList([1]).set(1, 5)


@given(ints, st.data())
def test_insert_matches_list_insert(values, data):
    dll = DoublyLinkedList(values)
    index = data.draw(st.integers(0, len(values)))
    dll.insert(index, 1000)
    expected = values.copy()
    expected.insert(index, 1000)
    assert_consistent(dll, expected)


def test_insert_out_of_range():
    dll = DoublyLinkedList([1, 2])
    with pytest.raises(IndexError):
        dll.insert(3, 0)
    with pytest.raises(IndexError):
        dll.insert(-1, 0)


@given(st.lists(st.integers(), min_size=1, max_size=30), st.data())
def test_delete_node_matches_pop(values, data):
    dll = DoublyLinkedList(values)
    index = data.draw(st.integers(0, len(values) - 1))
    expected = values.copy()
    removed = expected.pop(index)
    assert dll.delete_node(index) == removed
    assert_consistent(dll, expected)


def test_delete_node_out_of_range():
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2]).delete_node(2)


@given(ints)
def test_palindrome_of_mirrored_list(values):
    assert DoublyLinkedList(values + values[::-1]).is_palindrome() is True


def test_not_palindrome():
    assert DoublyLinkedList([4, 1, 2, 3]).is_palindrome() is False


@given(ints)
def test_reverse(values):
    dll = DoublyLinkedList(values)
    dll.reverse()
    assert_consistent(dll, values[::-1])
    dll.append(5)
    assert list(dll)[-1] == 5


@given(ints, st.integers(min_value=-50, max_value=50))
def test_partition_invariants(values, x):
    dll = DoublyLinkedList(values)
    dll.partition(x)
    result = list(dll)
    assert list(reversed(dll)) == result[::-1]
    assert sorted(result) == sorted(values)
    split = sum(1 for v in values if v < x)
    assert all(v < x for v in result[:split])
    assert all(v >= x for v in result[split:])
    assert [v for v in result if v < x] == [v for v in values if v < x]


@given(st.lists(st.integers(), min_size=1, max_size=30), st.data())
def test_reverse_between_twice_restores(values, data):
    m = data.draw(st.integers(0, len(values) - 1))
    n = data.draw(st.integers(m, len(values) - 1))
    dll = DoublyLinkedList(values)
    dll.reverse_between(m, n)
    assert list(reversed(dll)) == list(dll)[::-1]
    assert list(dll)[:m] == values[:m]
    assert list(dll)[n + 1 :] == values[n + 1 :]
    assert list(dll)[m : n + 1] == values[m : n + 1][::-1]
    dll.reverse_between(m, n)
    assert_consistent(dll, values)


def test_reverse_between_out_of_range():
    with pytest.raises(IndexError):
        DoublyLinkedList([1, 2, 3]).reverse_between(1, 3)


@given(ints)
def test_swap_pairs_twice_restores(values):
    dll = DoublyLinkedList(values)
    dll.swap_pairs()
    swapped = list(dll)
    assert list(reversed(dll)) == swapped[::-1]
    assert sorted(swapped) == sorted(values)
    assert swapped[0::2][: len(values) // 2] == values[1::2][: len(values) // 2]
    dll.swap_pairs()
    assert_consistent(dll, values)


def test_swap_pairs_odd_keeps_tail():
    dll = DoublyLinkedList([1, 2, 3])
    dll.swap_pairs()
    assert_consistent(dll, [2, 1, 3])