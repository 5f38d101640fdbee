"""Interactive menu programs for the containers and the step-by-step quicksort."""

import argparse
import sys

from algolab.doubly_linked_list import DoublyLinkedList
from algolab.errors import (
    ElementNotFoundError,
    EmptyQueueError,
    InvalidPriorityError,
    PositionOutOfRangeError,
)
from algolab.linked_list import SinglyLinkedList
from algolab.priority_queue import LiftQueue, PriorityQueue
from algolab.sorting import quicksort, quicksort_steps

INVALID_CHOICE = "Invalid choice. Please try again.\n"
MAX_WORD_LENGTH = 99


class _EndOfInput(Exception):
    """The input ran out before the session finished."""


class _BadInput(Exception):
    """A token could not be read as the expected kind of value."""

    def __init__(self, token):
        self.token = token
        super().__init__(f"Invalid input: {token!r}")


class _Console:
    """Reads whitespace-separated tokens and writes prompts and results."""

    def __init__(self, stream, out):
        self._tokens = self._split(stream)
        self._out = out

    @staticmethod
    def _split(stream):
        for line in stream:
            yield from line.split()

    def write(self, text):
        self._out.write(text)
        self._out.flush()

    def ask_word(self, prompt=""):
        if prompt:
            self.write(prompt)
        try:
            return next(self._tokens)
        except StopIteration:
            raise _EndOfInput() from None

    def ask_int(self, prompt=""):
        word = self.ask_word(prompt)
        try:
            return int(word)
        except ValueError:
            raise _BadInput(word) from None


def _joined(values):
    return "".join(f"{value} " for value in values)


def _doubly_linked_session(console):
    items = DoublyLinkedList()
    while True:
        choice = console.ask_int(
            "\n--- Doubly Linked List Operations ---\n"
            "1. Display Doubly Linked List\n"
            "2. Insert at Beginning\n"
            "3. Insert at End\n"
            "4. Delete Element\n"
            "5. Exit\n"
            "Enter your choice: "
        )
        if choice == 1:
            console.write(f"Doubly Linked List Elements: {_joined(items)}\n")
        elif choice == 2:
            items.insert_beginning(
                console.ask_int("Enter the el to insert at the beginning: ")
            )
        elif choice == 3:
            items.insert_end(console.ask_int("Enter the el to insert at the end: "))
        elif choice == 4:
            value = console.ask_int("Enter the el to delete: ")
            try:
                items.delete(value)
            except ElementNotFoundError as error:
                console.write(f"{error}\n")
        elif choice == 5:
            console.write("Exiting the program.\n")
            return
        elif choice == 6:
            value = console.ask_int("Enter the el to insert: ")
            position = console.ask_int("Enter the position to insert at: ")
            try:
                items.insert_at(value, position)
            except PositionOutOfRangeError as error:
                console.write(f"{error}\n")
        else:
            console.write(INVALID_CHOICE)


def _linked_session(console):
    items = SinglyLinkedList()
    while True:
        choice = console.ask_int(
            "\nLinked List Operations :\n"
            "1. Display Linked List\n"
            "2. Insert at Beginning\n"
            "3. Insert at End\n"
            "4. Delete element\n"
            "5. Exit\n"
            "Enter your choice: "
        )
        if choice == 1:
            console.write(f"Linked List els: {_joined(items)}\n")
        elif choice == 2:
            items.insert_beginning(console.ask_int("Insert element at the beginning: "))
        elif choice == 3:
            items.insert_end(console.ask_int("Enter the el to insert at the end: "))
        elif choice == 4:
            value = console.ask_int("Enter the el to delete: ")
            if not items:
                console.write("List is empty. Cannot delete.\n")
                continue
            try:
                items.delete(value)
            except ElementNotFoundError:
                console.write(f"el {value} not found in the list.\n")
        elif choice == 5:
            console.write("Exiting the program.\n")
            return
        else:
            console.write(INVALID_CHOICE)


def _priority_queue_session(console):
    queue = PriorityQueue()
    while True:
        choice = console.ask_int(
            "\nPriority Queue Menu:\n"
            "1. Enqueue\n"
            "2. Dequeue\n"
            "3. Display\n"
            "4. Exit\n"
            "Enter your choice: "
        )
        if choice == 1:
            data = console.ask_int("Enter data: ")
            priority = console.ask_int("Enter priority: ")
            queue.enqueue(data, priority)
        elif choice == 2:
            try:
                data = queue.dequeue()
            except EmptyQueueError as error:
                console.write(f"{error}\n")
            else:
                console.write(f"Dequeued element with data {data}\n")
        elif choice == 3:
            if not queue:
                console.write("Priority queue is empty.\n")
                continue
            console.write("Priority Queue Contents:\n")
            for data, priority in queue:
                console.write(f"Data: {data}, Priority: {priority}\n")
        elif choice == 4:
            return
        else:
            console.write(INVALID_CHOICE)


def _lift_session(console):
    queue = LiftQueue(console.ask_int("Enter priority for the lift queue: "))
    while True:
        choice = console.ask_int(
            "\n1. Add person to lift queue\n"
            "2. Remove person from lift queue\n"
            "3. Display lift queue\n"
            "4. Exit\n"
            "Enter your choice: "
        )
        if choice == 1:
            floor = console.ask_int("Enter floor: ")
            direction = console.ask_word("Enter direction (U/D): ")[0]
            priority = console.ask_int("Enter priority (1-6): ")
            try:
                queue.enqueue(floor, direction, priority)
            except InvalidPriorityError as error:
                console.write(f"{error}\n")
            except ValueError:
                console.write("Invalid direction. Please enter U or D.\n")
        elif choice == 2:
            try:
                queue.dequeue()
            except EmptyQueueError as error:
                console.write(f"{error}\n")
            console.write("Person removed from lift queue.\n")
        elif choice == 3:
            console.write(f"Queue Priority: {queue.priority}\n")
            for request in queue:
                console.write(
                    f"Priority: {request.priority}, Floor: {request.floor}, "
                    f"Direction: {request.direction.value}\n"
                )
        elif choice == 4:
            return
        else:
            console.write(INVALID_CHOICE)


def _show_sorting(console, items):
    console.write(f"Original Array: {_joined(items)}\n")
    console.write("Sorting Steps:\n")
    for snapshot in quicksort_steps(items):
        console.write(f"{_joined(snapshot)}\n")
    console.write(f"\nSorted Array: {_joined(quicksort(items))}\n")


def _sort_session(console):
    choice = console.ask_int(
        "Choose the type of array to sort:\n1. Integer Array\n2. String Array\n"
    )
    if choice == 1:
        size = console.ask_int("Enter the size of the integer array: ")
        console.write(f"Enter {size} elements:\n")
        items = [console.ask_int() for _ in range(size)]
    elif choice == 2:
        size = console.ask_int("Enter the size of the string array: ")
        console.write(f"Enter {size} strings:\n")
        items = [console.ask_word()[:MAX_WORD_LENGTH] for _ in range(size)]
    else:
        console.write("Invalid choice!\n")
        return
    _show_sorting(console, items)


_SESSIONS = {
    "doubly-linked-list": _doubly_linked_session,
    "linked-list": _linked_session,
    "priority-queue": _priority_queue_session,
    "lift-queue": _lift_session,
    "quicksort": _sort_session,
}


def main(argv=None):
    """Run one interactive program, reading answers from standard input."""
    parser = argparse.ArgumentParser(
        prog="algolab", description="Interactive container and sorting programs."
    )
    parser.add_argument("program", choices=sorted(_SESSIONS))
    args = parser.parse_args(argv)
    console = _Console(sys.stdin, sys.stdout)
    try:
        _SESSIONS[args.program](console)
    except _EndOfInput:
        return 0
    except _BadInput as error:
        sys.stderr.write(f"{error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())