import pytest

from fractscope.linkedlist import LinkedList, Node, delete_one


def test_construct_and_iterate():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_front_puts_node_first():
    lst = LinkedList([2, 3])
    lst.add_front(Node(1))
    assert list(lst) == [1, 2, 3]


def test_add_front_none_is_ignored():
    lst = LinkedList([2, 3])
    lst.add_front(None)
    assert list(lst) == [2, 3]


def test_add_back_appends():
    lst = LinkedList([1])
    lst.add_back(Node(2))
    assert list(lst) == [1, 2]
    assert lst.last().content == 2


def test_add_back_to_empty_sets_head():
    lst = LinkedList()
    node = Node("x")
    lst.add_back(node)
    assert lst.head is node
    assert lst.last() is node


def test_add_back_keeps_chain():
    lst = LinkedList([1])
    lst.add_back(Node(2, Node(3)))
    assert list(lst) == [1, 2, 3]


def test_clear_deletes_every_content():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["p", "q"]).for_each(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda v: v * 10, None)
    assert list(mapped) == [v * 10 for v in [1, 2, 3]]
    assert list(lst) == [1, 2, 3]


def test_map_failure_releases_partial_result():
    deleted = []
    lst = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        lst.map(lambda v: None if v == 3 else v, deleted.append)
    assert deleted == [1, 2]


def test_delete_one_calls_deleter_and_detaches():
    deleted = []
    second = Node("b")
    first = Node("a", second)
    delete_one(first, deleted.append)
    assert deleted == ["a"]
    assert first.next is None


def test_delete_one_without_deleter_does_nothing():
    second = Node("b")
    first = Node("a", second)
    delete_one(first, None)
    assert first.next is second