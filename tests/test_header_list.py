import pytest

from algolab.errors import ElementNotFoundError
from algolab.header_list import HeaderList


def _filled(values):
    lst = HeaderList()
    for value in values:
        lst.insert(value)
    return lst


def test_new_list_is_empty():
    lst = HeaderList()
    assert list(lst) == []
    assert len(lst) == 0


def test_insert_goes_to_front():
    lst = _filled([1, 2, 3])
    assert list(lst) == [3, 2, 1]
    assert len(lst) == 3


def test_find_returns_index_of_value():
    lst = _filled([10, 20, 30])
    for value in (10, 20, 30):
        assert list(lst)[lst.find(value)] == value


def test_find_missing_raises():
    lst = _filled([1])
    with pytest.raises(ElementNotFoundError):
        lst.find(2)


def test_header_value_is_not_an_element():
    lst = _filled([5])
    assert -1 not in lst
    assert 5 in lst


def test_delete_reports_outcome():
    lst = _filled([1, 2, 3])
    assert lst.delete(2) is True
    assert list(lst) == [3, 1]
    assert lst.delete(2) is False
    assert len(lst) == 2


def test_clear_empties_and_list_remains_usable():
    lst = _filled([1, 2, 3])
    lst.clear()
    assert list(lst) == []
    assert len(lst) == 0
    lst.insert(4)
    assert list(lst) == [4]