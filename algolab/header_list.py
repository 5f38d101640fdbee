"""A singly linked list with a header node, where new values go to the front."""

from dataclasses import dataclass
from typing import Any, Optional

from algolab.errors import ElementNotFoundError

_HEADER_VALUE = -1


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class HeaderList:
    """A linked list anchored at a header node; insertions go right after it."""

    def __init__(self):
        self._header = _Node(_HEADER_VALUE)
        self._size = 0

    def insert(self, value):
        """Insert ``value`` directly after the header."""
        self._header.next = _Node(value, self._header.next)
        self._size += 1

    def _previous(self, value):
        node = self._header
        while node.next is not None and node.next.value != value:
            node = node.next
        return node

    def find(self, value):
        """Return the index of the first element equal to ``value``."""
        for index, item in enumerate(self):
            if item == value:
                return index
        raise ElementNotFoundError(value)

    def delete(self, value):
        """Remove the first element equal to ``value``; report whether one was removed."""
        previous = self._previous(value)
        if previous.next is None:
            return False
        previous.next = previous.next.next
        self._size -= 1
        return True

    def clear(self):
        """Remove every element, keeping the header."""
        self._header.next = None
        self._size = 0

    def __iter__(self):
        node = self._header.next
        while node is not None:
            yield node.value
            node = node.next

    def __contains__(self, value):
        return any(item == value for item in self)

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"HeaderList({list(self)!r})"