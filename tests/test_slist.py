import pytest

from dolkit.slist import (
    SListNode,
    alloc_and_append,
    alloc_and_prepend,
    append_list,
    iter_data,
    prepend_list,
    remove,
)


def test_append_to_empty_makes_single_node():
    head = alloc_and_append(None, "a")
    assert list(iter_data(head)) == ["a"]
    assert head.next is None


def test_append_inserts_after_head():
    head = alloc_and_append(None, 1)
    head = alloc_and_append(head, 2)
    head = alloc_and_append(head, 3)
    assert list(iter_data(head)) == [1, 3, 2]


def test_append_returns_same_head():
    head = SListNode("h")
    assert append_list(head, SListNode("x")) is head


def test_append_to_empty_clears_stale_next():
    stale = SListNode("stale")
    node = SListNode("n", next=stale)
    result = append_list(None, node)
    assert result is node
    assert result.next is None


def test_prepend_builds_reverse_order():
    head = None
    for value in "abc":
        head = alloc_and_prepend(head, value)
    assert list(iter_data(head)) == ["c", "b", "a"]


def test_prepend_returns_new_node():
    head = SListNode("old")
    node = SListNode("new")
    assert prepend_list(head, node) is node
    assert node.next is head


def test_missing_node_rejected():
    with pytest.raises(ValueError):
        append_list(None, None)
    with pytest.raises(ValueError):
        prepend_list(SListNode(), None)


def test_remove_returns_rest():
    head = alloc_and_prepend(alloc_and_prepend(None, 2), 1)
    rest = remove(head)
    assert list(iter_data(rest)) == [2]
    assert head.next is None


def test_remove_none_is_none():
    assert remove(None) is None


def test_remove_last_node_gives_empty():
    assert remove(SListNode("only")) is None


def test_iter_data_of_empty():
    assert list(iter_data(None)) == []


def test_node_iteration_yields_nodes():
    head = alloc_and_prepend(alloc_and_prepend(None, "y"), "x")
    assert [node.data for node in head] == ["x", "y"]