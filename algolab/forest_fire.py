"""A forest fire on a grid, spreading to neighbouring trees, with evacuation routes."""

import enum
import random


class Cell(enum.IntEnum):
    """State of one square of the forest."""

    EMPTY = 0
    TREE = 1
    BURNING = 2


_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def random_forest(rows, cols, rng=None):
    """Return a ``rows`` by ``cols`` grid where each square is randomly a tree or empty."""
    rng = rng if rng is not None else random.Random()
    return [[Cell(rng.randrange(2)) for _ in range(cols)] for _ in range(rows)]


def ignite(grid, rng=None):
    """Set a random square of ``grid`` on fire and return its (row, col)."""
    if not grid or not grid[0]:
        raise ValueError("cannot ignite an empty forest")
    rng = rng if rng is not None else random.Random()
    row = rng.randrange(len(grid))
    col = rng.randrange(len(grid[0]))
    grid[row][col] = Cell.BURNING
    return row, col


def spread_once(grid):
    """Spread fire over ``grid`` in one row-major pass; return the trees set alight.

    Squares are updated as the pass goes, so a tree lit below or to the right
    of the scan position spreads the fire further in the same pass.
    """
    height = len(grid)
    burnt = 0
    for i, row in enumerate(grid):
        width = len(row)
        for j in range(width):
            if grid[i][j] != Cell.BURNING:
                continue
            for di, dj in _NEIGHBOURS:
                ni, nj = i + di, j + dj
                if 0 <= ni < height and 0 <= nj < width and grid[ni][nj] == Cell.TREE:
                    grid[ni][nj] = Cell.BURNING
                    burnt += 1
    return burnt


def simulate(grid):
    """Spread fire until nothing more burns, yielding a copy of the grid after each pass."""
    while True:
        burnt = spread_once(grid)
        yield [list(row) for row in grid]
        if burnt == 0:
            return


def nearest_exit(cell, exits, limit):
    """Return the first exit closer than ``limit`` in Manhattan distance, nearest first.

    Returns None when no exit is closer than ``limit``.
    """
    row, col = cell
    best = None
    best_distance = limit
    for exit_row, exit_col in exits:
        distance = abs(row - exit_row) + abs(col - exit_col)
        if distance < best_distance:
            best_distance = distance
            best = (exit_row, exit_col)
    return best


def evacuation_plan(grid, exits):
    """Yield ((row, col), exit) for each burning square, in row-major order."""
    exits = list(exits)
    rows = len(grid)
    for i, line in enumerate(grid):
        limit = rows + len(line)
        for j, state in enumerate(line):
            if state == Cell.BURNING:
                yield (i, j), nearest_exit((i, j), exits, limit)