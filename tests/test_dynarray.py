import pytest

from dscollections.dynarray import DynArray


def make(values, capacity=2, **kwargs):
    arr = DynArray(capacity, **kwargs)
    for v in values:
        arr.push_back(v)
    return arr


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        DynArray(0)


def test_push_back_and_iterate():
    arr = make([1, 2, 3, 4, 5])
    assert list(arr) == [1, 2, 3, 4, 5]
    assert len(arr) == 5
    assert arr.capacity >= len(arr)


def test_capacity_doubles():
    arr = make([1, 2, 3], capacity=2)
    assert arr.capacity == 4


def test_insert_in_middle():
    arr = make([1, 5])
    arr.insert(1, [2, 3, 4])
    assert list(arr) == [1, 2, 3, 4, 5]


def test_insert_at_both_ends():
    arr = make([2])
    arr.insert(0, [1])
    arr.insert(len(arr), [3])
    assert list(arr) == [1, 2, 3]


def test_self_insert():
    arr = make([1, 2, 3])
    arr.insert(1, arr)
    assert list(arr) == [1, 1, 2, 3, 2, 3]


def test_insert_out_of_range():
    arr = make([1])
    with pytest.raises(IndexError):
        arr.insert(5, [1])
    assert list(arr) == [1]


def test_insert_copy_failure_rolls_back():
    released = []

    def copy(v):
        if v == "bad":
            raise RuntimeError("copy failed")
        return v

    arr = make(["a", "b"], capacity=8, copy=copy, release=released.append)
    with pytest.raises(RuntimeError):
        arr.insert(1, ["x", "y", "bad"])
    assert list(arr) == ["a", "b"]
    assert released == ["y", "x"]
    assert arr.capacity == len(arr)


def test_copy_is_applied():
    arr = make([[1], [2]], copy=list)
    source = [9]
    arr.push_back(source)
    source.append(10)
    assert arr[2] == [9]


def test_getitem_bounds():
    arr = make([7, 8])
    assert arr[1] == 8
    with pytest.raises(IndexError):
        arr[2]
    with pytest.raises(IndexError):
        arr[-1]


def test_setitem_releases_old_value():
    released = []
    arr = make([1, 2], release=released.append)
    arr[0] = 10
    assert list(arr) == [10, 2]
    assert released == [1]


def test_setitem_failure_clears_slot():
    def copy(v):
        if v is None:
            raise ValueError("no None")
        return v

    arr = make([1, 2], copy=copy)
    with pytest.raises(ValueError):
        arr[0] = None
    assert arr[0] is None
    assert arr[1] == 2


def test_setitem_out_of_range():
    arr = make([1])
    with pytest.raises(IndexError):
        arr[1] = 3
    assert list(arr) == [1]
    assert len(arr) == 1


def test_delete_range_releases():
    released = []
    arr = make([1, 2, 3, 4, 5], release=released.append)
    arr.delete(1, 3)
    assert list(arr) == [1, 4, 5]
    assert released == [2, 3]


def test_delete_bad_range():
    arr = make([1, 2])
    with pytest.raises(IndexError):
        arr.delete(1, 3)
    with pytest.raises(IndexError):
        arr.delete(2, 1)
    assert list(arr) == [1, 2]


def test_pop_back():
    arr = make([1, 2])
    arr.pop_back()
    assert list(arr) == [1]
    arr.pop_back()
    arr.pop_back()
    assert len(arr) == 0


def test_reserve_only_grows():
    arr = DynArray(4)
    arr.reserve(2)
    assert arr.capacity == 4
    arr.reserve(16)
    assert arr.capacity == 16


def test_shrink_to_fit_and_regrow():
    arr = make([1, 2, 3], capacity=16)
    arr.shrink_to_fit()
    assert arr.capacity == len(arr)
    arr.clear()
    arr.shrink_to_fit()
    arr.push_back(1)
    assert list(arr) == [1]
    assert arr.capacity >= 1


def test_clear_releases_all():
    released = []
    arr = make([1, 2, 3], release=released.append)
    arr.clear()
    assert len(arr) == 0
    assert released == [1, 2, 3]


def test_resize_grow_and_shrink():
    arr = make([1, 2])
    arr.resize(5, 0)
    assert list(arr) == [1, 2, 0, 0, 0]
    assert arr.capacity >= 5
    arr.resize(1)
    assert list(arr) == [1]


def test_resize_failure_keeps_partial():
    calls = []

    def copy(v):
        calls.append(v)
        if len(calls) > 3:
            raise RuntimeError("exhausted")
        return v

    arr = make([1], copy=copy)
    with pytest.raises(RuntimeError):
        arr.resize(6, 9)
    assert list(arr) == [1, 9, 9]


def test_front_back():
    arr = DynArray(2)
    assert arr.front() is None
    assert arr.back() is None
    arr.push_back("a")
    arr.push_back("b")
    assert arr.front() == "a"
    assert arr.back() == "b"