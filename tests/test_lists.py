import pytest

from printfmt.lists import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]


def test_push_returns_node_linked_in():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert node.next is None
    front = lst.push_front(0)
    assert lst.head is front
    assert front.next.content == 1


def test_last_content():
    lst = LinkedList(["x", "y"])
    last = lst.last()
    assert isinstance(last, Node) and last.content == "y"


def test_clear_calls_delete_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_all():
    seen = []
    LinkedList("abc").iterate(seen.append)
    assert seen == ["a", "b", "c"]


def test_iterate_none_is_noop():
    lst = LinkedList([1, 2])
    lst.iterate(None)
    assert list(lst) == [1, 2]


def test_map_builds_new_list():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(str)
    assert list(mapped) == ["1", "2", "3"]
    assert list(lst) == [1, 2, 3]
    assert mapped is not lst


def test_map_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [10, 20]