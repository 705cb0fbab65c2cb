import pytest

from minish.linked import LinkedList


def test_iteration_keeps_order():
    items = ["ls", "-l", "/tmp"]
    assert list(LinkedList(items)) == items


def test_empty_by_default():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []


def test_len_matches_items():
    items = [4, 5, 6, 7]
    assert len(LinkedList(items)) == len(items)


def test_push_back_appends():
    lst = LinkedList(["a"])
    lst.push_back("b")
    assert list(lst) == ["a", "b"]
    assert lst.last() == "b"


def test_push_front_prepends():
    lst = LinkedList(["b"])
    lst.push_front("a")
    assert list(lst) == ["a", "b"]
    assert lst.last() == "b"


def test_push_back_on_empty_sets_last():
    lst = LinkedList()
    lst.push_back("only")
    assert lst.last() == "only"
    assert list(lst) == ["only"]


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_clear_calls_delete_in_order_and_empties():
    items = ["x", "y", "z"]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_item():
    items = ["echo", "hi"]
    seen = []
    LinkedList(items).for_each(seen.append)
    assert seen == items


def test_map_builds_new_list_and_keeps_original():
    items = ["a", "bb", "ccc"]
    lst = LinkedList(items)
    mapped = lst.map(str.upper)
    assert list(mapped) == [s.upper() for s in items]
    assert list(lst) == items


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_releases_produced_items():
    def f(x):
        if x == "bad":
            raise ValueError(x)
        return x.upper()

    released = []
    with pytest.raises(ValueError):
        LinkedList(["ok", "fine", "bad", "never"]).map(f, released.append)
    assert released == ["OK", "FINE"]