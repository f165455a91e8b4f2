from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from eposuser.drawing import Painter
from eposuser.graphics import GraphicDevice
from eposuser.sorting import (
    bubble_sort,
    create_array,
    insertion_sort,
    quick_sort,
    selection_sort,
)
from eposuser.stdlib import ParkMillerRandom

ints = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


def make_painter(sleeps):
    device = GraphicDevice(
        x_resolution=120,
        y_resolution=80,
        bytes_per_scan_line=480,
        bits_per_pixel=32,
        number_of_planes=1,
        frame_buffer_size=480 * 80,
        linear=True,
    )
    return Painter(device, sleep=sleeps.append)


def test_create_array_range_and_length():
    arr = create_array(50, ParkMillerRandom(7))
    assert len(arr) == 50
    assert all(0 <= v < 1000 for v in arr)


def test_create_array_reproducible():
    first = create_array(20, ParkMillerRandom(3))
    assert first[:2] == [421, 747]
    assert create_array(20, ParkMillerRandom(3)) == first


def test_create_array_matches_generator():
    rng = ParkMillerRandom(11)
    expected = [v % 1000 for v in (ParkMillerRandom(11).rand() for _ in range(1))]
    assert create_array(1, rng)[:1] == expected


def test_create_array_negative_size():
    with pytest.raises(ValueError):
        create_array(-1)


def test_insertion_sort_with_painter():
    sleeps = []
    arr = [9, 3, 7, 1, 5]
    insertion_sort(arr, make_painter(sleeps), 0)
    assert arr == [1, 3, 5, 7, 9]
    assert len(sleeps) > len(arr)


def test_bubble_sort_with_painter():
    sleeps = []
    arr = [4, 2, 8, 6]
    bubble_sort(arr, make_painter(sleeps), 0)
    assert arr == [2, 4, 6, 8]
    assert len(sleeps) >= len(arr)


def test_sorted_input_makes_no_swaps():
    sleeps = []
    arr = [1, 2, 3, 4]
    insertion_sort(arr, make_painter(sleeps), 0)
    assert arr == [1, 2, 3, 4]
    assert len(sleeps) == len(arr)


@given(ints)
def test_insertion_sort_without_painter(values):
    arr = list(values)
    insertion_sort(arr)
    assert arr == sorted(values)


@given(ints)
def test_bubble_sort_without_painter(values):
    arr = list(values)
    bubble_sort(arr)
    assert arr == sorted(values)


@given(ints)
def test_selection_sort(values):
    arr = list(values)
    selection_sort(arr)
    assert arr == sorted(values)


@given(ints)
def test_quick_sort(values):
    arr = list(values)
    quick_sort(arr)
    assert arr == sorted(values)


@given(ints)
def test_quick_sort_swaps_replay(values):
    arr = list(values)
    swaps = []
    quick_sort(arr, on_swap=lambda a, i, j: swaps.append((i, j)))
    replay = list(values)
    for i, j in swaps:
        replay[i], replay[j] = replay[j], replay[i]
    assert replay == arr
    assert Counter(arr) == Counter(values)


def test_quick_sort_subrange():
    arr = [9, 5, 3, 4, 0]
    quick_sort(arr, 1, 3)
    assert arr == [9, 3, 4, 5, 0]