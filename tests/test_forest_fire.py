import random

import pytest

from algolab.forest_fire import (
    Cell,
    evacuation_plan,
    ignite,
    nearest_exit,
    random_forest,
    simulate,
    spread_once,
)

B, T, E = Cell.BURNING, Cell.TREE, Cell.EMPTY


def test_random_forest_shape_and_values():
    grid = random_forest(3, 4, random.Random(1))
    assert len(grid) == 3
    assert all(len(row) == 4 for row in grid)
    assert {cell for row in grid for cell in row} <= {E, T}


def test_random_forest_is_reproducible():
    first = random_forest(5, 5, random.Random(7))
    second = random_forest(5, 5, random.Random(7))
    assert len(first) == 5
    assert all(len(row) == 5 for row in first)
    assert {cell for row in first for cell in row} <= {E, T}
    assert first == second


def test_ignite_sets_one_square_burning():
    grid = random_forest(4, 6, random.Random(3))
    before = [list(row) for row in grid]
    row, col = ignite(grid, random.Random(2))
    assert 0 <= row < 4 and 0 <= col < 6
    assert grid[row][col] == B
    changed = [
        (i, j) for i in range(4) for j in range(6) if grid[i][j] != before[i][j]
    ]
    assert changed in ([], [(row, col)])


def test_ignite_empty_forest():
    with pytest.raises(ValueError):
        ignite([], random.Random(0))


def test_spread_once_cascades_rightwards():
    grid = [[B, T, T]]
    burnt = spread_once(grid)
    assert grid == [[B, B, B]]
    assert burnt == 2


def test_spread_once_leftward_single_step():
    grid = [[T, T, B]]
    assert spread_once(grid) == 1
    assert grid == [[T, B, B]]


def test_spread_once_count_matches_new_fires():
    grid = [[T, E, T], [T, B, T], [E, T, T]]
    before = sum(cell == B for row in grid for cell in row)
    burnt = spread_once(grid)
    after = sum(cell == B for row in grid for cell in row)
    assert burnt == after - before


def test_simulate_burns_connected_forest():
    grid = [[B, T, T], [T, T, T], [T, T, T]]
    snapshots = list(simulate(grid))
    assert all(cell == B for row in snapshots[-1] for cell in row)
    assert snapshots[-1] == snapshots[-2]


def test_simulate_stops_at_empty_barrier():
    grid = [[B, E, T]]
    snapshots = list(simulate(grid))
    assert snapshots[-1] == [[B, E, T]]


def test_nearest_exit_first_of_ties():
    assert nearest_exit((0, 0), [(0, 2), (2, 0)], 10) == (0, 2)


def test_nearest_exit_none_within_limit():
    assert nearest_exit((0, 0), [(5, 5)], 3) is None


def test_evacuation_plan_lists_burning_squares():
    grid = [[B, E], [E, B]]
    plan = list(evacuation_plan(grid, [(0, 0), (1, 1)]))
    assert plan == [((0, 0), (0, 0)), ((1, 1), (1, 1))]


def test_evacuation_plan_skips_trees():
    grid = [[T, T], [T, T]]
    assert list(evacuation_plan(grid, [(0, 0)])) == []