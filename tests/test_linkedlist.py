import pytest
from hypothesis import given, strategies as st

from ftkit.linkedlist import LinkedList, Node


def test_new_list_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_add_front_puts_content_first():
    lst = LinkedList([2, 3])
    node = lst.add_front(1)
    assert list(lst) == [1, 2, 3]
    assert lst.head is node
    assert node.next.content == 2


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.add_front("x")
    assert lst.last() is node
    assert len(lst) == 1


def test_add_back_appends():
    lst = LinkedList([1])
    node = lst.add_back(2)
    assert list(lst) == [1, 2]
    assert lst.last() is node
    assert node.next is None


def test_add_back_on_empty_sets_head():
    lst = LinkedList()
    node = lst.add_back("only")
    assert lst.head is node
    assert lst.last() is node


def test_last_returns_final_node():
    lst = LinkedList(["first", "middle", "end"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "end"


def test_delete_first_calls_delete_with_content():
    deleted = []
    lst = LinkedList(["a", "b"])
    lst.delete_first(deleted.append)
    assert deleted == ["a"]
    assert list(lst) == ["b"]
    assert len(lst) == 1


def test_delete_first_on_empty_does_nothing():
    deleted = []
    lst = LinkedList()
    lst.delete_first(deleted.append)
    assert deleted == []
    assert len(lst) == 0


def test_delete_first_of_single_resets_last():
    lst = LinkedList(["a"])
    lst.delete_first()
    assert lst.last() is None
    lst.add_back("b")
    assert list(lst) == ["b"]


def test_clear_deletes_all_in_order():
    deleted = []
    lst = LinkedList([1, 2, 3])
    lst.clear(deleted.append)
    assert deleted == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_for_each_visits_every_content():
    seen = []
    LinkedList(["x", "y", "z"]).for_each(seen.append)
    assert seen == ["x", "y", "z"]


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList(["ab", "cd"])
    mapped = lst.map(str.upper)
    assert list(mapped) == ["AB", "CD"]
    assert list(lst) == ["ab", "cd"]
    assert mapped.last().content == "CD"


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str.upper)) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(value):
        if value == "bad":
            raise RuntimeError("boom")
        return value * 2

    lst = LinkedList(["a", "b", "bad", "c"])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert deleted == ["aa", "bb"]


@given(st.lists(st.integers()))
def test_length_matches_contents(items):
    lst = LinkedList(items)
    assert len(lst) == len(items)
    assert list(lst) == items


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_front_and_back_insertion(front, back):
    lst = LinkedList()
    for item in back:
        lst.add_back(item)
    for item in front:
        lst.add_front(item)
    assert list(lst) == list(reversed(front)) + back
    assert len(lst) == len(front) + len(back)


@given(st.lists(st.integers(), min_size=1))
def test_last_is_final_item(items):
    assert LinkedList(items).last().content == items[-1]


@given(st.lists(st.integers()))
def test_map_matches_elementwise(items):
    assert list(LinkedList(items).map(lambda v: v + 1)) == [v + 1 for v in items]