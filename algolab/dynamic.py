"""Dynamic programming: knapsack, matrix chain ordering and divisible splits."""

MOD = 1_000_000_007


def knapsack(capacity, weights, values):
    """Return the largest total value of items whose weights fit in ``capacity``."""
    weights = list(weights)
    values = list(values)
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, max(weight, 1) - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def matrix_chain_order(dims):
    """Return the fewest scalar multiplications needed to multiply a matrix chain.

    Matrix ``i`` has ``dims[i]`` rows and ``dims[i + 1]`` columns.
    """
    dims = list(dims)
    count = len(dims) - 1
    if count < 1:
        raise ValueError("at least two dimensions are needed")
    cost = [[0] * count for _ in range(count)]
    for length in range(2, count + 1):
        for i in range(count - length + 1):
            j = i + length - 1
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]


def count_divisible_splits(digits, modulus):
    """Count ways to cut ``digits`` into pieces each divisible by ``modulus``, mod 1e9+7."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if any(char not in "0123456789" for char in digits):
        raise ValueError("digits must contain only decimal digits")
    ways = [1]
    for end in range(1, len(digits) + 1):
        total = 0
        remainder = 0
        factor = 1
        for start in reversed(range(end)):
            remainder = (int(digits[start]) * factor + remainder) % modulus
            factor = factor * 10 % modulus
            if remainder == 0:
                total += ways[start]
        ways.append(total % MOD)
    return ways[-1]