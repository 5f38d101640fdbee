# algolab

Classic data structures and algorithm exercises in plain Python, with no
third-party dependencies. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algolab.simple_list` | `BoundedList`, a list with a fixed capacity (100 by default) |
| `algolab.linked_list` | `SinglyLinkedList` |
| `algolab.doubly_linked_list` | `DoublyLinkedList`, with `insert_at` and reverse iteration |
| `algolab.header_list` | `HeaderList`, a list with a header node; `insert` puts values at the front |
| `algolab.priority_queue` | `PriorityQueue`, and `LiftQueue` holding `LiftRequest`s with a `Direction` |
| `algolab.sorting` | `quicksort`, `quicksort_steps`, `first_pivot_quicksort`, `inclusive_pivot_quicksort` |
| `algolab.searching` | `binary_search`, `find_peak`, `find_extremes` (returns `Extremes`) |
| `algolab.dynamic` | `knapsack`, `matrix_chain_order`, `count_divisible_splits` |
| `algolab.numerals` | `to_roman`, `min_bottles` |
| `algolab.puzzles` | `mod_inverse`, `expected_days`, `count_cricket_balls`, `word_operations` |
| `algolab.geometry` | `Point`, `orientation`, `on_segment`, `do_intersect`, `is_inside`, `can_place_eggs`, `max_egg_distance` |
| `algolab.matrix` | `multiply`, `format_matrix` |
| `algolab.forest_fire` | `Cell`, `random_forest`, `ignite`, `spread_once`, `simulate`, `nearest_exit`, `evacuation_plan` |
| `algolab.cli` | `main`, the interactive menus behind the `algolab` command |

A few behaviours worth knowing:

- Both priority queues serve the lowest priority number first and keep arrival
  order among equal priorities. `LiftQueue.enqueue` accepts priorities 1 to 6
  only, and a direction of `"U"`/`"D"` (either case) or a `Direction`.
- The sorting functions return new lists and leave their input unchanged.
  `quicksort_steps` yields a snapshot of the working array after every
  partition step.
- `binary_search` returns `None` when the target is absent; `find_peak` raises
  `ValueError` when no element is larger than both neighbours; `find_extremes`
  raises `ValueError` for fewer than two elements.
- `count_divisible_splits` and `expected_days` return results modulo
  1 000 000 007.
- `random_forest` and `ignite` take an optional `random.Random` for
  reproducible runs.

Failures are reported with exceptions from `algolab.errors`:
`ElementNotFoundError`, `ListFullError`, `EmptyQueueError`,
`PositionOutOfRangeError` and `InvalidPriorityError`. Each derives from the
matching built-in (`ValueError`, `OverflowError` or `IndexError`).

## Examples

```python
from algolab.dynamic import knapsack, matrix_chain_order
from algolab.numerals import to_roman
from algolab.doubly_linked_list import DoublyLinkedList

knapsack(50, [10, 20, 30], [60, 100, 120])   # 220
matrix_chain_order([10, 30, 5, 60])          # 4500
to_roman(1994)                               # 'MCMXCIV'

items = DoublyLinkedList([1, 2, 4])
items.insert_at(3, 2)
list(items)            # [1, 2, 3, 4]
list(reversed(items))  # [4, 3, 2, 1]
```

## Command line

The `algolab` command runs one interactive menu program, reading answers as
whitespace-separated tokens from standard input:

```
algolab linked-list
algolab doubly-linked-list
algolab priority-queue
algolab lift-queue
algolab quicksort
```

- `linked-list` and `doubly-linked-list` offer display, insert at the
  beginning, insert at the end, delete and exit. The doubly linked menu also
  accepts choice 6, insert at a position, which is not listed in the menu.
- `priority-queue` offers enqueue, dequeue, display and exit.
- `lift-queue` first asks for the queue's own priority, then offers adding,
  removing and displaying lift requests.
- `quicksort` sorts integers or words, printing the array after each
  partition step and then the sorted result.

The session ends at the exit choice or when input runs out (exit status 0). A
token that is not a number where one is expected ends it with an error
message and exit status 1.

## What it does not do

Only the five programs above have a command. The other modules — bounded and
header lists, searching, dynamic programming, numerals, puzzles, geometry,
matrices and the forest fire simulation — are library functions only and
have no command-line front end.