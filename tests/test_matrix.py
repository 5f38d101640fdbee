import pytest

from algolab.matrix import format_matrix, multiply


def test_multiply_two_by_two():
    assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_by_identity():
    matrix = [[2, -1, 3], [0, 4, 5]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert multiply(matrix, identity) == matrix


def test_multiply_is_associative():
    a = [[1, 2], [3, 4], [5, 6]]
    b = [[7, 8, 9], [1, 0, 2]]
    c = [[3], [1], [4]]
    assert multiply(multiply(a, b), c) == multiply(a, multiply(b, c))


def test_multiply_result_shape():
    result = multiply([[1, 2, 3]], [[1], [2], [3]])
    assert len(result) == 1
    assert len(result[0]) == 1


def test_multiply_invalid_dimensions():
    with pytest.raises(ValueError, match="Invalid dimensions"):
        multiply([[1, 2]], [[1, 2]])


def test_multiply_ragged_rows():
    with pytest.raises(ValueError):
        multiply([[1, 2], [3]], [[1], [2]])


def test_format_matrix_layout():
    assert format_matrix([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"


def test_format_matrix_empty():
    assert format_matrix([]) == ""