"""Sorting routines, some of which animate each swap through a painter."""

from typing import Callable, List, MutableSequence, Optional

from .drawing import Painter
from .graphics import rgb
from .stdlib import ParkMillerRandom

BAR_COLOR = rgb(255, 0, 0)
VALUE_LIMIT = 1000

SwapHook = Callable[[MutableSequence[int], int, int], None]


def create_array(size: int, rng: Optional[ParkMillerRandom] = None) -> List[int]:
    """Return ``size`` pseudo-random integers in ``0..999``."""
    if size < 0:
        raise ValueError(f"negative array size {size}")
    generator = rng if rng is not None else ParkMillerRandom()
    return [generator.rand() % VALUE_LIMIT for _ in range(size)]


def _swap(arr: MutableSequence[int], i: int, j: int, painter: Optional[Painter],
          l_edge: int) -> None:
    if painter is None:
        arr[i], arr[j] = arr[j], arr[i]
    else:
        painter.draw_swap(arr, i, j, l_edge, BAR_COLOR)


def insertion_sort(arr: MutableSequence[int], painter: Optional[Painter] = None,
                   l_edge: int = 0) -> None:
    """Sort in place by insertion, drawing every swap when a painter is given."""
    if painter is not None:
        painter.draw_arr(arr, l_edge, BAR_COLOR)
    for i in range(1, len(arr)):
        j = i
        while j > 0 and arr[j - 1] > arr[j]:
            _swap(arr, j, j - 1, painter, l_edge)
            if painter is not None:
                painter.delay()
            j -= 1


def bubble_sort(arr: MutableSequence[int], painter: Optional[Painter] = None,
                l_edge: int = 0) -> None:
    """Sort in place by bubbling, drawing every swap when a painter is given."""
    if painter is not None:
        painter.draw_arr(arr, l_edge, BAR_COLOR)
    size = len(arr)
    for i in range(size - 1):
        for j in range(size - i - 1):
            if arr[j] > arr[j + 1]:
                _swap(arr, j, j + 1, painter, l_edge)


def selection_sort(arr: MutableSequence[int]) -> None:
    """Sort in place by repeatedly selecting the smallest remaining element."""
    size = len(arr)
    for i in range(size - 1):
        smallest = min(range(i, size), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]


def _partition(arr: MutableSequence[int], low: int, high: int, pivot: int,
               on_swap: Optional[SwapHook]) -> int:
    while True:
        low += 1
        while arr[low] < pivot:
            low += 1
        while low < high:
            high -= 1
            if not pivot < arr[high]:
                break
        _quick_swap(arr, low, high, on_swap)
        if low >= high:
            return low


def _quick_swap(arr: MutableSequence[int], i: int, j: int, on_swap: Optional[SwapHook]) -> None:
    arr[i], arr[j] = arr[j], arr[i]
    if on_swap is not None:
        on_swap(arr, i, j)


def quick_sort(arr: MutableSequence[int], low: int = 0, high: Optional[int] = None,
               on_swap: Optional[SwapHook] = None) -> None:
    """Sort ``arr[low..high]`` in place with a middle-element pivot.

    ``on_swap(arr, i, j)`` is called after every exchange of two positions.
    """
    if high is None:
        high = len(arr) - 1
    if high <= low:
        return
    pivot_index = (low + high) // 2
    _quick_swap(arr, pivot_index, high, on_swap)
    k = _partition(arr, low - 1, high, arr[high], on_swap)
    _quick_swap(arr, k, high, on_swap)
    quick_sort(arr, low, k - 1, on_swap)
    quick_sort(arr, k + 1, high, on_swap)