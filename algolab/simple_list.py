"""A list of fixed maximum capacity."""

from algolab.errors import ElementNotFoundError, ListFullError

DEFAULT_CAPACITY = 100


class BoundedList:
    """An ordered list that refuses to grow beyond ``capacity`` elements."""

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items = []

    def add(self, element):
        """Append ``element``; raise ListFullError when the list is full."""
        if len(self._items) >= self.capacity:
            raise ListFullError(self.capacity)
        self._items.append(element)

    def remove(self, element):
        """Remove the first occurrence of ``element``."""
        try:
            self._items.remove(element)
        except ValueError:
            raise ElementNotFoundError(element) from None

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"BoundedList({self._items!r}, capacity={self.capacity})"