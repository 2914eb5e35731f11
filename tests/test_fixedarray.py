"""Tests for the fixed-capacity array used on geometry hot paths."""

import pytest

from orbitalview.geometry.errors import CapacityError
from orbitalview.geometry.fixedarray import FixedArray


def test_starts_empty() -> None:
    arr = FixedArray(2)

    assert arr.empty()
    assert len(arr) == 0
    assert arr.size == 0
    assert arr.capacity == 2
    assert list(arr) == []


def test_push_back_appends_and_returns_value() -> None:
    arr = FixedArray(3)

    assert arr.push_back(1.5) == 1.5
    arr.push_back(2.5)

    assert len(arr) == 2
    assert arr[0] == 1.5
    assert arr.front() == 1.5
    assert arr.back() == 2.5
    assert arr == [1.5, 2.5]


def test_push_back_past_capacity_raises() -> None:
    arr = FixedArray(2, [1, 2])

    with pytest.raises(CapacityError):
        arr.push_back(3)
    assert len(arr) == 2


def test_emplace_back_constructs_element() -> None:
    arr = FixedArray(1)

    value = arr.emplace_back(tuple, [1.0, 2.0])

    assert value == (1.0, 2.0)
    assert arr.back() == (1.0, 2.0)
    with pytest.raises(CapacityError):
        arr.emplace_back(tuple, [3.0, 4.0])


def test_initial_items_longer_than_capacity_raise() -> None:
    with pytest.raises(CapacityError):
        FixedArray(2, [1, 2, 3])


def test_zero_capacity_rejected() -> None:
    with pytest.raises(CapacityError):
        FixedArray(0)


def test_iteration_covers_live_prefix_only() -> None:
    arr = FixedArray(4, [3, 1, 2])
    arr.resize(2)

    assert list(arr) == [3, 1]
    # Slots past the live length are not cleared by truncation
    assert arr[2] == 2
    # Never written
    assert arr[3] is None


def test_resize_beyond_capacity_raises() -> None:
    arr = FixedArray(2)

    with pytest.raises(CapacityError):
        arr.resize(3)


def test_sort_orders_live_prefix() -> None:
    arr = FixedArray(4, [3.0, 1.0, 2.0])

    arr.sort()

    assert arr.to_list() == [1.0, 2.0, 3.0]


def test_repr() -> None:
    assert repr(FixedArray(3, [1, 2])) == "[ 1, 2 ]"
    assert repr(FixedArray(3)) == "[ ]"
