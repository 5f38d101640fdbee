"""A singly linked list of values."""

from dataclasses import dataclass
from typing import Any, Optional

from algolab.errors import ElementNotFoundError


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A singly linked list supporting insertion at both ends and deletion."""

    def __init__(self, items=()):
        self._head = None
        self._tail = None
        self._size = 0
        for item in items:
            self.insert_end(item)

    def insert_beginning(self, value):
        """Put ``value`` in front of the first element."""
        node = _Node(value, self._head)
        if self._head is None:
            self._tail = node
        self._head = node
        self._size += 1

    def insert_end(self, value):
        """Put ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def delete(self, value):
        """Remove the first node holding ``value``."""
        previous = None
        current = self._head
        while current is not None and current.value != value:
            previous, current = current, current.next
        if current is None:
            raise ElementNotFoundError(value)
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        if current is self._tail:
            self._tail = previous
        self._size -= 1

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"SinglyLinkedList({list(self)!r})"