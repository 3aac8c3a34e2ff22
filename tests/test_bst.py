from hypothesis import given
from hypothesis import strategies as st

from dsakit.bst import BinarySearchTree

SOURCE_VALUES = [47, 20, 70, 17, 52, 82, 27, 20]
ints = st.lists(st.integers(min_value=-40, max_value=40), max_size=40)


def make_tree():
    return BinarySearchTree(SOURCE_VALUES)


def test_in_order_is_sorted():
    assert make_tree().in_order() == sorted(SOURCE_VALUES)


def test_pre_order_of_source_tree():
    assert make_tree().pre_order() == [47, 20, 17, 27, 20, 70, 52, 82]


def test_post_order_ends_with_root():
    tree = make_tree()
    post = tree.post_order()
    assert post[-1] == 47
    assert sorted(post) == sorted(SOURCE_VALUES)


def test_contains():
    tree = make_tree()
    assert tree.contains(20) is True
    assert tree.contains(99) is False
    assert 52 in tree
    assert 53 not in tree


def test_find_all_duplicates():
    assert make_tree().find_all(20) == [20, 20]
    assert make_tree().find_all(99) == []


def test_range_queries():
    tree = make_tree()
    ordered = sorted(SOURCE_VALUES)
    assert tree.less_or_equal(47) == [v for v in ordered if v <= 47]
    assert tree.greater_or_equal(47) == [v for v in ordered if v >= 47]


def test_source_deletions():
    tree = make_tree()
    expected = sorted(SOURCE_VALUES)
    for value in (20, 82, 70):
        assert tree.delete(value) is True
        expected.remove(value)
        assert tree.in_order() == expected
    assert tree.delete(99) is False


def test_empty_tree():
    tree = BinarySearchTree()
    assert tree.in_order() == []
    assert tree.pre_order() == []
    assert tree.post_order() == []
    assert tree.delete(1) is False
    assert 1 not in tree


@given(ints)
def test_in_order_sorted_property(values):
    tree = BinarySearchTree(values)
    assert list(tree) == sorted(values)
    assert sorted(tree.pre_order()) == sorted(values)
    assert sorted(tree.post_order()) == sorted(values)


@given(ints, st.integers(min_value=-40, max_value=40))
def test_range_query_properties(values, limit):
    tree = BinarySearchTree(values)
    ordered = sorted(values)
    assert tree.less_or_equal(limit) == [v for v in ordered if v <= limit]
    assert tree.greater_or_equal(limit) == [v for v in ordered if v >= limit]
    assert tree.find_all(limit) == [limit] * values.count(limit)
    assert tree.contains(limit) == (limit in values)


@given(ints, st.lists(st.integers(min_value=-40, max_value=40), max_size=20))
def test_delete_property(values, removals):
    tree = BinarySearchTree(values)
    expected = sorted(values)
    for value in removals:
        present = value in expected
        assert tree.delete(value) is present
        if present:
            expected.remove(value)
        assert list(tree) == expected