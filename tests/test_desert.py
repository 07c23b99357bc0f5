import pytest

from bankdesk.desert import Group, Oasis, main, nearest_value, quick_sort


@pytest.mark.parametrize(
    "values",
    [[], [1], [3, 1, 2], [5, -2, 5, 0, -2, 9], [10, 9, 8, 7, 6, 5], [-6, 0, 9, 15]],
)
def test_quick_sort_matches_sorted(values):
    assert quick_sort(values) == sorted(values)


def test_quick_sort_leaves_input_untouched():
    values = [4, 1, 3]
    quick_sort(values)
    assert values == [4, 1, 3]


@pytest.mark.parametrize("target", [-6, 0, 9, 15])
def test_nearest_value_exact_hit(target):
    assert nearest_value([-6, 0, 9, 15], target) == target


@pytest.mark.parametrize("target", range(-20, 25))
def test_nearest_value_has_minimal_distance(target):
    values = [-6, 0, 9, 15]
    found = nearest_value(values, target)
    assert found in values
    assert abs(found - target) == min(abs(value - target) for value in values)


def test_nearest_value_empty_raises():
    with pytest.raises(ValueError):
        nearest_value([], 3)


def test_group_median_and_distance():
    group = Group([10, -5, 3])
    assert group.find_median() == 3
    assert group.positions == [-5, 3, 10]
    total = group.total_distance()
    assert total == group.distance
    for other in group.positions:
        assert total <= sum(abs(other - value) for value in group.positions)


def test_group_requires_three_positions():
    with pytest.raises(ValueError):
        Group([1, 2])


def test_oasis_nearest_returns_value_and_distance():
    oasis = Oasis([15, 9, 0, -6])
    oasis.sort()
    assert oasis.positions == [-6, 0, 9, 15]
    closest, distance = oasis.nearest(9)
    assert (closest, distance) == (9, 0)


def test_main_prints_worked_example(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Punto de encuentro: 3",
        "Distancia total: 15",
        "Oasis más cercano: 0 a distancia 3",
    ]