import pytest

from mudutils.math import (
    MathError,
    get_random_item_from_array,
    random_int,
    random_int_max,
)


def test_random_int_within_bounds():
    values = {random_int(10, 20) for _ in range(500)}
    assert all(10 <= value < 20 for value in values)
    assert len(values) > 1


def test_random_int_single_value_range():
    assert random_int(5, 6) == 5


@pytest.mark.parametrize("start, end", [(5, 5), (10, 3)])
def test_random_int_rejects_bad_range(start, end):
    with pytest.raises(MathError) as info:
        random_int(start, end)
    assert info.value.message == "start should be less than end"
    assert str(info.value) == "Invalid argument: start should be less than end"


def test_random_int_max_within_bounds():
    values = [random_int_max(100) for _ in range(500)]
    assert all(0 <= value < 100 for value in values)


@pytest.mark.parametrize("max_value", [0, -3])
def test_random_int_max_rejects_non_positive(max_value):
    with pytest.raises(MathError) as info:
        random_int_max(max_value)
    assert info.value.message == "max should be greater than 0"


def test_random_item_is_member():
    items = [1, 2, 3, 4, 5]
    picks = [get_random_item_from_array(items) for _ in range(200)]
    assert all(pick in items for pick in picks)


def test_random_item_single_element():
    assert get_random_item_from_array(["only"]) == "only"


def test_random_item_empty_raises():
    with pytest.raises(MathError) as info:
        get_random_item_from_array([])
    assert info.value.message == "array should not be empty"