import pytest

from bankdesk.sorter import quick_sort


def ascending(a, b):
    return (a > b) - (a < b)


CASES = [
    [],
    [1],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 4, 4],
    [10, -3, 7, 7, 0, -3, 22, 1],
    list(range(20, 0, -1)),
    list(range(15)),
]


@pytest.mark.parametrize("values", CASES)
def test_sorts_ascending(values):
    items = list(values)
    quick_sort(items, ascending)
    assert items == sorted(values)


@pytest.mark.parametrize("values", CASES)
def test_sorts_descending_with_reversed_comparator(values):
    items = list(values)
    quick_sort(items, lambda a, b: ascending(b, a))
    assert items == sorted(values, reverse=True)


def test_sorts_records_by_attribute():
    records = [("carla", 30.0), ("ana", 5.5), ("beto", 12.0)]
    quick_sort(records, lambda a, b: ascending(a[1], b[1]))
    assert [name for name, _ in records] == ["ana", "beto", "carla"]


def test_sort_keeps_all_elements():
    values = ["pera", "uva", "kiwi", "uva", "mango"]
    items = list(values)
    quick_sort(items, ascending)
    assert sorted(items) == sorted(values)
    assert items == sorted(values)