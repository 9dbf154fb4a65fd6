import pytest

from ftxpm.linked import LinkedList


def test_push_back_keeps_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_prepends():
    lst = LinkedList(["b"])
    lst.push_front("a")
    assert list(lst) == ["a", "b"]


def test_last_of_empty_is_none():
    assert LinkedList().last() is None


def test_last_returns_final_content():
    lst = LinkedList([1, 2, 3])
    assert lst.last() == 3
    lst.push_back(9)
    assert lst.last() == 9


def test_len_of_empty_is_zero():
    assert len(LinkedList()) == 0


def test_clear_calls_delete_in_order_and_empties():
    deleted = []
    lst = LinkedList(["x", "y", "z"])
    lst.clear(deleted.append)
    assert deleted == ["x", "y", "z"]
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear(None)
    assert len(lst) == 0


def test_for_each_visits_every_content():
    seen = []
    lst = LinkedList([4, 5, 6])
    lst.for_each(seen.append)
    assert seen == [4, 5, 6]


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda v: v * 10, lambda v: None)
    assert list(mapped) == [v * 10 for v in [1, 2, 3]]
    assert list(lst) == [1, 2, 3]
    assert mapped is not lst


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str, None)) == 0


def test_map_failure_deletes_produced_contents():
    deleted = []

    def func(v):
        if v == 3:
            raise RuntimeError("boom")
        return v + 100

    lst = LinkedList([1, 2, 3, 4])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == [101, 102]