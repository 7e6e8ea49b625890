import pytest

from sigtalk.linked_list import LinkedList, Node


def test_empty_list_has_no_length_and_no_last():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_back_keeps_insertion_order():
    lst = LinkedList()
    lst.push_back("Hello")
    lst.push_back("World")
    lst.push_back("!")
    assert list(lst) == ["Hello", "World", "!"]
    assert len(lst) == 3


def test_push_front_reverses_insertion_order():
    lst = LinkedList()
    lst.push_front("!")
    lst.push_front("World")
    lst.push_front("Hello")
    assert list(lst) == ["Hello", "World", "!"]


def test_push_returns_the_new_node():
    lst = LinkedList()
    node = lst.push_back(42)
    assert node.content == 42
    assert node.next is None
    assert lst.head is node


def test_last_returns_final_node():
    lst = LinkedList(["Hello", "World", "!"])
    tail = lst.last()
    assert tail.content == "!"
    assert tail.next is None


def test_constructor_from_iterable():
    lst = LinkedList(range(5))
    assert list(lst) == [0, 1, 2, 3, 4]
    assert len(lst) == 5


def test_node_links():
    second = Node("b")
    first = Node("a", second)
    assert first.next is second
    assert second.next is None


def test_clear_calls_delete_in_order_and_empties():
    lst = LinkedList(["a", "b", "c"])
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_for_each_visits_every_content():
    lst = LinkedList([1, 2, 3])
    seen = []
    lst.for_each(seen.append)
    assert seen == [1, 2, 3]


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList(["a", "b"])
    mapped = lst.map(str.upper, lambda _: None)
    assert list(mapped) == ["A", "B"]
    assert list(lst) == ["a", "b"]
    assert mapped.head is not lst.head


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str.upper)) == 0


def test_map_failure_deletes_partial_result():
    lst = LinkedList([1, 2, 0, 4])
    deleted = []

    def invert(value):
        return 12 // value

    with pytest.raises(ZeroDivisionError):
        lst.map(invert, deleted.append)
    assert deleted == [12, 6]
    assert list(lst) == [1, 2, 0, 4]


def test_length_matches_iteration():
    lst = LinkedList()
    for value in range(10):
        lst.push_front(value)
        assert len(lst) == len(list(lst))
    assert list(lst) == list(reversed(range(10)))