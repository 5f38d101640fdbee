"""Small counting puzzles: infection days, cricket balls and word operations."""

MOD = 1_000_000_007

_EDGE_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))
_CORNER_NEIGHBOURS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def mod_inverse(value, modulus=MOD):
    """Return the multiplicative inverse of ``value`` modulo ``modulus``.

    A modulus of 1 gives 0. Raises ValueError when no inverse exists.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    return pow(value, -1, modulus)


def _half(value):
    """Halve an integer, truncating toward zero."""
    return value // 2 if value >= 0 else -(-value // 2)


def expected_days(grid, d0, d1, d2):
    """Return the expected total number of days for the passengers in ``grid``, mod 1e9+7.

    ``grid`` is a sequence of equally long rows. ``V`` marks an infected
    passenger, ``.`` an empty seat and any other character a passenger with a
    half chance of infection. Each occupied seat adds ``d1`` per infected edge
    neighbour and ``d2`` per infected corner neighbour.
    """
    rows = [str(row) for row in grid]
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    height = len(rows)

    def infected_count(i, j, offsets):
        return sum(
            1
            for di, dj in offsets
            if 0 <= i + di < height
            and 0 <= j + dj < width
            and rows[i + di][j + dj] == "V"
        )

    total = 0
    for i, row in enumerate(rows):
        for j, seat in enumerate(row):
            if seat == ".":
                continue
            total += d0 if seat == "V" else _half(d0)
            total += d1 * infected_count(i, j, _EDGE_NEIGHBOURS)
            total += d2 * infected_count(i, j, _CORNER_NEIGHBOURS)
            total %= MOD
    return total * mod_inverse(2, MOD) % MOD


def count_cricket_balls(bag, sequence):
    """Count the characters of ``sequence`` that also occur in ``bag``."""
    available = set(bag)
    return sum(1 for char in sequence if char in available)


def word_operations(words, query):
    """Count the operations needed for ``query`` against the dictionary ``words``.

    Every dictionary word shorter than the query costs its length. The query's
    characters are then matched against the remaining words in length order;
    the first mismatch makes every later character cost one operation.
    """
    ordered = sorted(words, key=len)
    operations = 0
    index = 0
    while index < len(ordered) and len(ordered[index]) < len(query):
        operations += len(ordered[index])
        index += 1
    for position, char in enumerate(query):
        if index < len(ordered) and ordered[index][position] == char:
            index += 1
        else:
            operations += 1
            index = len(ordered)
    return operations