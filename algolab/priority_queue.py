"""Priority queues where a lower priority number is served first."""

import bisect
import enum
from dataclasses import dataclass

from algolab.errors import EmptyQueueError, InvalidPriorityError

MIN_LIFT_PRIORITY = 1
MAX_LIFT_PRIORITY = 6


class PriorityQueue:
    """A stable priority queue of data values; equal priorities keep arrival order."""

    def __init__(self):
        self._entries = []

    def enqueue(self, data, priority):
        """Add ``data`` behind every entry whose priority is not higher than ``priority``."""
        bisect.insort_right(self._entries, (priority, data), key=lambda entry: entry[0])

    def dequeue(self):
        """Remove and return the data at the front of the queue."""
        if not self._entries:
            raise EmptyQueueError()
        return self._entries.pop(0)[1]

    def __iter__(self):
        """Yield ``(data, priority)`` pairs in serving order."""
        for priority, data in self._entries:
            yield data, priority

    def __len__(self):
        return len(self._entries)

    def __bool__(self):
        return bool(self._entries)


class Direction(enum.Enum):
    """Travel direction a lift passenger asks for."""

    UP = "U"
    DOWN = "D"


@dataclass(frozen=True)
class LiftRequest:
    """A passenger waiting for the lift."""

    floor: int
    direction: Direction
    priority: int


class LiftQueue:
    """A queue of lift requests ordered by priority (1 is served first)."""

    def __init__(self, priority):
        self.priority = priority
        self._requests = []

    def enqueue(self, floor, direction, priority):
        """Add a request; the priority must lie between 1 and 6."""
        if not MIN_LIFT_PRIORITY <= priority <= MAX_LIFT_PRIORITY:
            raise InvalidPriorityError(priority, MIN_LIFT_PRIORITY, MAX_LIFT_PRIORITY)
        if not isinstance(direction, Direction):
            direction = Direction(str(direction).upper())
        request = LiftRequest(floor, direction, priority)
        bisect.insort_right(self._requests, request, key=lambda r: r.priority)
        return request

    def dequeue(self):
        """Remove and return the request at the front of the queue."""
        if not self._requests:
            raise EmptyQueueError("Queue is empty.")
        return self._requests.pop(0)

    def __iter__(self):
        return iter(list(self._requests))

    def __len__(self):
        return len(self._requests)