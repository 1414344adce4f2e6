import pytest

from pushswap.linkedlist import LinkedList, Node


def test_construction_keeps_order_and_size():
    lst = LinkedList([3, 1, 2])
    assert list(lst) == [3, 1, 2]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_returns_linked_node():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert isinstance(node, Node)
    assert node.content == 2
    assert lst.head.next is node


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c"])
    assert lst.last().content == "c"
    assert lst.last().next is None
    lst.push_front("z")
    assert lst.last().content == "c"


def test_pop_front_returns_content_and_calls_delete():
    deleted = []
    lst = LinkedList([5, 6])
    assert lst.pop_front(deleted.append) == 5
    assert deleted == [5]
    assert list(lst) == [6]
    assert lst.pop_front() == 6
    assert len(lst) == 0
    assert lst.last() is None


def test_pop_front_on_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_content_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_then_reuse():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(9)
    assert list(lst) == [9]
    assert lst.last().content == 9


def test_for_each_visits_all_contents():
    seen = []
    LinkedList(["x", "y"]).for_each(seen.append)
    assert seen == ["x", "y"]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(str)
    assert list(mapped) == ["1", "2", "3"]
    assert list(original) == [1, 2, 3]
    assert len(mapped) == len(original)


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(x):
        if x == 3:
            raise RuntimeError("boom")
        return x * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3]).map(func, deleted.append)
    assert deleted == [10, 20]