import pytest

from algokit.dp import knapsack_max_value, lis_length, lis_length_quadratic

ITEMS = [(3, 30), (4, 50), (5, 60), (2, 15), (7, 80)]

SEQUENCES = [
    [10, 9, 2, 5, 3, 7, 101, 18],
    [0, 1, 0, 3, 2, 3],
    [7, 7, 7, 7],
    [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5],
    [5],
    [-2, -1, -5, 0, 4, -3, 6],
]


def test_knapsack_worked_example():
    assert knapsack_max_value(8, [(3, 30), (4, 50), (5, 60)]) == 90


def test_knapsack_everything_fits():
    capacity = sum(weight for weight, _ in ITEMS)
    assert knapsack_max_value(capacity, ITEMS) == sum(value for _, value in ITEMS)


def test_knapsack_is_monotone_in_capacity():
    results = [knapsack_max_value(capacity, ITEMS) for capacity in range(25)]
    assert results == sorted(results)
    assert results[-1] <= sum(value for _, value in ITEMS)


@pytest.mark.parametrize("capacity", [0, 5, 9, 14])
def test_knapsack_ignores_item_heavier_than_capacity(capacity):
    heavy = [(capacity + 1, 10_000)]
    assert knapsack_max_value(capacity, ITEMS + heavy) == knapsack_max_value(capacity, ITEMS)


def test_knapsack_rejects_negative_weight():
    with pytest.raises(ValueError):
        knapsack_max_value(10, [(-1, 5)])


@pytest.mark.parametrize("values", SEQUENCES)
def test_lis_implementations_agree(values):
    assert lis_length(values) == lis_length_quadratic(values)
    assert lis_length(values) <= len(values)


@pytest.mark.parametrize("values", SEQUENCES)
def test_lis_grows_when_appending_larger_value(values):
    extended = values + [max(values) + 1]
    assert lis_length(extended) == lis_length(values) + 1
    assert lis_length_quadratic(extended) == lis_length_quadratic(values) + 1


def test_lis_of_increasing_sequence_is_its_length():
    values = list(range(-3, 12, 2))
    assert lis_length(values) == len(values)
    assert lis_length_quadratic(values) == len(values)


def test_lis_of_decreasing_sequence():
    values = list(range(10, 0, -1))
    assert lis_length(values) == lis_length_quadratic(values) == 1


def test_lis_of_empty_sequence():
    assert lis_length([]) == lis_length_quadratic([]) == 0