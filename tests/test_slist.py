import pytest

from dscollections.slist import SList


def test_new_list_is_empty():
    sl = SList()
    assert len(sl) == 0
    assert list(sl) == []
    assert sl.sentinel.next is None


def test_push_front_is_lifo():
    sl = SList()
    for value in ("a", "b", "c"):
        sl.push_front(value)
    assert list(sl) == ["c", "b", "a"]
    assert len(sl) == 3
    assert sl.pop_front() == "c"
    assert sl.pop_front() == "b"
    assert sl.pop_front() == "a"
    assert len(sl) == 0


def test_pop_empty_raises():
    sl = SList()
    with pytest.raises(IndexError):
        sl.pop_front()


def test_insert_after_builds_in_order():
    sl = SList()
    node = sl.sentinel
    for value in range(5):
        node = sl.insert_after(node, value)
    assert list(sl) == [0, 1, 2, 3, 4]
    assert node.next is None
    assert node.data == 4


def test_insert_after_middle():
    sl = SList()
    first = sl.push_front("first")
    first_next = sl.insert_after(first, "last")
    sl.insert_after(first, "middle")
    assert list(sl) == ["first", "middle", "last"]
    assert first.next.next is first_next


def test_remove_after_returns_data():
    sl = SList()
    head = sl.push_front("a")
    sl.insert_after(head, "b")
    assert sl.remove_after(head) == "b"
    assert list(sl) == ["a"]
    assert len(sl) == 1


def test_remove_after_last_raises():
    sl = SList()
    head = sl.push_front("a")
    with pytest.raises(IndexError):
        sl.remove_after(head)
    assert len(sl) == 1


def test_foreign_node_raises():
    other = SList()
    foreign = other.push_front("x")
    sl = SList()
    with pytest.raises(ValueError):
        sl.insert_after(foreign, "y")
    with pytest.raises(ValueError):
        sl.remove_after(other.sentinel)
    assert len(sl) == 0


def test_removed_node_is_detached():
    sl = SList()
    sl.push_front("b")
    node = sl.push_front("a")
    sl.pop_front()
    with pytest.raises(ValueError):
        sl.insert_after(node, "c")
    assert list(sl) == ["b"]


def test_clear_releases_in_order():
    released = []
    sl = SList()
    node = sl.sentinel
    for value in ("a", "b", "c"):
        node = sl.insert_after(node, value)
    sl.clear(released.append)
    assert released == ["a", "b", "c"]
    assert len(sl) == 0
    assert sl.sentinel.next is None


def test_stress_lifo_order():
    sl = SList()
    for i in range(1000):
        sl.push_front(i)
    assert len(sl) == 1000
    assert [sl.pop_front() for _ in range(1000)] == list(range(999, -1, -1))
    assert len(sl) == 0


def test_alternating_push_pop():
    sl = SList()
    for i in range(100):
        sl.push_front(i)
        if i % 2 == 1:
            assert sl.pop_front() == i
    assert len(sl) == 50
    assert list(sl) == list(range(98, -1, -2))