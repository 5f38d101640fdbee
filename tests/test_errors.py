import pytest

from algolab.errors import (
    ElementNotFoundError,
    EmptyQueueError,
    InvalidPriorityError,
    ListFullError,
    PositionOutOfRangeError,
)


def test_element_not_found_message_and_attribute():
    err = ElementNotFoundError(7)
    assert err.element == 7
    assert str(err) == "Element 7 not found in the list."
    assert isinstance(err, ValueError)


def test_list_full_message():
    err = ListFullError(100)
    assert err.capacity == 100
    assert str(err) == "List is full. Cannot add more elements."


def test_empty_queue_default_and_custom_message():
    assert str(EmptyQueueError()) == "Priority queue is empty."
    assert str(EmptyQueueError("Queue is empty.")) == "Queue is empty."
    with pytest.raises(IndexError):
        raise EmptyQueueError()


def test_position_out_of_range_message():
    err = PositionOutOfRangeError(5)
    assert err.position == 5
    assert str(err) == "Position 5 is out of bounds. Element not inserted."


def test_invalid_priority_message():
    err = InvalidPriorityError(9)
    assert (err.priority, err.low, err.high) == (9, 1, 6)
    assert str(err) == "Invalid priority. Please enter a priority between 1 and 6."