"""Greedy conversions: Roman numerals and bottle counts."""

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

BOTTLE_SIZES = (10, 7, 5, 1)


def to_roman(number):
    """Write ``number`` as a Roman numeral; zero or less gives an empty string."""
    if number <= 0:
        return ""
    parts = []
    for value, symbol in _ROMAN_TABLE:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def min_bottles(demand):
    """Count bottles needed to fill ``demand``, always taking the largest size that fits."""
    bottles = 0
    for size in BOTTLE_SIZES:
        if demand <= 0:
            break
        count, demand = divmod(demand, size)
        bottles += count
    return bottles