import pytest

from pipechain.linked import LinkedList, Node


def test_empty_list():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None
    assert items.head is None


def test_init_keeps_order():
    items = LinkedList(["a", "b", "c"])
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_push_front_and_back():
    items = LinkedList()
    items.push_back(2)
    items.push_front(1)
    items.push_back(3)
    assert list(items) == [1, 2, 3]
    assert items.head.content == 1


def test_push_returns_linked_node():
    items = LinkedList()
    node = items.push_back("x")
    assert isinstance(node, Node)
    assert items.head is node
    assert node.next is None


def test_last_returns_tail_node():
    items = LinkedList(["a", "b"])
    tail = items.push_back("z")
    assert items.last() is tail
    assert items.last().content == "z"


def test_remove_middle_and_release():
    released = []
    items = LinkedList(["a", "b", "c"])
    assert items.remove("b", released.append) is True
    assert list(items) == ["a", "c"]
    assert released == ["b"]


def test_remove_head():
    items = LinkedList(["a", "b"])
    assert items.remove("a") is True
    assert list(items) == ["b"]
    assert items.head.content == "b"


def test_remove_only_first_match():
    items = LinkedList(["a", "b", "a"])
    items.remove("a")
    assert list(items) == ["b", "a"]


def test_remove_missing_returns_false():
    released = []
    items = LinkedList(["a"])
    assert items.remove("q", released.append) is False
    assert list(items) == ["a"]
    assert released == []


def test_remove_by_identity():
    marker = object()
    items = LinkedList([object(), marker])
    assert items.remove(marker) is True
    assert marker not in list(items)
    assert len(items) == 1


def test_clear_releases_in_order():
    released = []
    items = LinkedList([1, 2, 3])
    items.clear(released.append)
    assert released == [1, 2, 3]
    assert len(items) == 0
    assert items.head is None


def test_clear_without_release():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_for_each_visits_all():
    seen = []
    LinkedList(["x", "y"]).for_each(seen.append)
    assert seen == ["x", "y"]


def test_map_builds_new_list():
    items = LinkedList(["ab", "c"])
    mapped = items.map(str.upper)
    assert list(mapped) == ["AB", "C"]
    assert list(items) == ["ab", "c"]
    assert mapped is not items


@pytest.mark.parametrize("values", [[], [0], [1, 2, 3, 4, 5]])
def test_len_matches_iteration(values):
    items = LinkedList(values)
    assert len(items) == len(list(items)) == len(values)