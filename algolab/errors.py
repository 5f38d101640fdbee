"""Exceptions raised by the list and queue containers."""


class ElementNotFoundError(ValueError):
    """Raised when a value to remove or find is not in the container."""

    def __init__(self, element):
        self.element = element
        super().__init__(f"Element {element} not found in the list.")


class ListFullError(OverflowError):
    """Raised when adding to a bounded list that has reached its capacity."""

    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__("List is full. Cannot add more elements.")


class EmptyQueueError(IndexError):
    """Raised when taking an item from an empty queue."""

    def __init__(self, message="Priority queue is empty."):
        super().__init__(message)


class PositionOutOfRangeError(IndexError):
    """Raised when inserting past the end of a list."""

    def __init__(self, position):
        self.position = position
        super().__init__(
            f"Position {position} is out of bounds. Element not inserted."
        )


class InvalidPriorityError(ValueError):
    """Raised when a priority lies outside the accepted range."""

    def __init__(self, priority, low=1, high=6):
        self.priority = priority
        self.low = low
        self.high = high
        super().__init__(
            f"Invalid priority. Please enter a priority between {low} and {high}."
        )