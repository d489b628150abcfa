import pytest

from minishell.linkedlist import LinkedList


def test_init_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_add_back_and_front():
    lst = LinkedList(["b"])
    lst.add_back("c")
    lst.add_front("a")
    assert list(lst) == ["a", "b", "c"]
    assert lst.last() == "c"


def test_add_back_to_empty_sets_last():
    lst = LinkedList()
    lst.add_back("x")
    assert lst.last() == "x"
    assert len(lst) == 1


def test_add_back_accepts_none_content():
    lst = LinkedList(["a"])
    lst.add_back(None)
    assert list(lst) == ["a", None]


def test_clear_deletes_each_in_order():
    seen = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(seen.append)
    assert seen == ["a", "b", "c"]
    assert len(lst) == 0


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_all():
    seen = []
    LinkedList(["x", "y"]).iterate(seen.append)
    assert seen == ["x", "y"]


def test_iterate_with_none_does_nothing():
    lst = LinkedList(["x"])
    lst.iterate(None)
    assert list(lst) == ["x"]


def test_map_builds_new_list():
    lst = LinkedList(["ab", "c"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["AB", "C"]
    assert list(lst) == ["ab", "c"]


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_propagates_errors():
    def fail(_):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        LinkedList([1]).map(fail)