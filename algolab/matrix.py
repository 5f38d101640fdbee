"""Integer matrix multiplication and display."""


def _rows_and_width(matrix):
    rows = [list(row) for row in matrix]
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("all matrix rows must have the same length")
    return rows, width


def multiply(left, right):
    """Return the matrix product ``left`` times ``right`` as a list of rows."""
    left_rows, left_width = _rows_and_width(left)
    right_rows, _ = _rows_and_width(right)
    if left_width != len(right_rows):
        raise ValueError("Matrix multiplication not possible. Invalid dimensions.")
    columns = list(zip(*right_rows))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in left_rows
    ]


def format_matrix(matrix):
    """Render ``matrix`` one row per line, each value followed by a space."""
    return "".join(
        "".join(f"{value} " for value in row) + "\n" for row in matrix
    )