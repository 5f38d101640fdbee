"""A doubly linked list of values."""

from dataclasses import dataclass
from typing import Any, Optional

from algolab.errors import ElementNotFoundError, PositionOutOfRangeError


@dataclass
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A doubly linked list that can be walked in both directions."""

    def __init__(self, items=()):
        self._head = None
        self._tail = None
        self._size = 0
        for item in items:
            self.insert_end(item)

    def insert_beginning(self, value):
        """Put ``value`` in front of the first element."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_end(self, value):
        """Put ``value`` after the last element."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value, position):
        """Insert ``value`` so that it ends up at index ``position``.

        An empty list or a position of zero or less inserts at the front.
        A position beyond the length raises PositionOutOfRangeError.
        """
        if self._head is None or position <= 0:
            self.insert_beginning(value)
            return
        if position > self._size:
            raise PositionOutOfRangeError(position)
        if position == self._size:
            self.insert_end(value)
            return
        current = self._head
        for _ in range(position - 1):
            current = current.next
        node = _Node(value, current, current.next)
        current.next.prev = node
        current.next = node
        self._size += 1

    def delete(self, value):
        """Remove the first node holding ``value``."""
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is None:
            raise ElementNotFoundError(value)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self):
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"DoublyLinkedList({list(self)!r})"