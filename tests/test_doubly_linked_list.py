import pytest

from algolab.doubly_linked_list import DoublyLinkedList
from algolab.errors import ElementNotFoundError, PositionOutOfRangeError


def _consistent(lst):
    return list(reversed(lst)) == list(lst)[::-1] and len(list(lst)) == len(lst)


def test_construct_and_reverse():
    lst = DoublyLinkedList([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]


def test_insert_both_ends():
    lst = DoublyLinkedList()
    lst.insert_beginning(2)
    lst.insert_beginning(1)
    lst.insert_end(3)
    assert list(lst) == [1, 2, 3]
    assert _consistent(lst)


def test_insert_at_middle():
    lst = DoublyLinkedList([1, 2, 3])
    lst.insert_at(9, 1)
    assert list(lst) == [1, 9, 2, 3]
    assert _consistent(lst)


def test_insert_at_zero_or_negative_goes_to_front():
    lst = DoublyLinkedList([1, 2])
    lst.insert_at(5, 0)
    lst.insert_at(6, -3)
    assert list(lst) == [6, 5, 1, 2]


def test_insert_at_length_appends():
    lst = DoublyLinkedList([1, 2])
    lst.insert_at(3, 2)
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]


def test_insert_at_empty_list_ignores_position():
    lst = DoublyLinkedList()
    lst.insert_at(4, 10)
    assert list(lst) == [4]


def test_insert_past_end_raises():
    lst = DoublyLinkedList([1, 2])
    with pytest.raises(PositionOutOfRangeError) as info:
        lst.insert_at(7, 3)
    assert info.value.position == 3
    assert list(lst) == [1, 2]


def test_delete_keeps_links_consistent():
    lst = DoublyLinkedList([1, 2, 3, 4])
    lst.delete(1)
    lst.delete(4)
    assert list(lst) == [2, 3]
    assert list(reversed(lst)) == [3, 2]
    lst.delete(2)
    lst.delete(3)
    assert list(lst) == []
    assert list(reversed(lst)) == []
    assert len(lst) == 0


def test_delete_missing_raises():
    lst = DoublyLinkedList([1])
    with pytest.raises(ElementNotFoundError):
        lst.delete(2)
    assert list(lst) == [1]