"""In-place quicksort with median-of-three pivots and fat partitioning."""

from typing import Any, Callable, List

Comparator = Callable[[Any, Any], int]

_INSERTION_LIMIT = 7
_NINTHER_LIMIT = 40


def _med3(items: List[Any], a: int, b: int, c: int, cmp: Comparator) -> int:
    if cmp(items[a], items[b]) < 0:
        if cmp(items[b], items[c]) < 0:
            return b
        return c if cmp(items[a], items[c]) < 0 else a
    if cmp(items[b], items[c]) > 0:
        return b
    return a if cmp(items[a], items[c]) < 0 else c


def _swap(items: List[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def _vecswap(items: List[Any], i: int, j: int, n: int) -> None:
    if n > 0:
        items[i:i + n], items[j:j + n] = items[j:j + n], items[i:i + n]


def _insertion_sort(items: List[Any], lo: int, n: int, cmp: Comparator) -> None:
    for pm in range(lo + 1, lo + n):
        pl = pm
        while pl > lo and cmp(items[pl - 1], items[pl]) > 0:
            _swap(items, pl, pl - 1)
            pl -= 1


def _sort(items: List[Any], lo: int, n: int, cmp: Comparator) -> None:
    while True:
        if n < _INSERTION_LIMIT:
            _insertion_sort(items, lo, n, cmp)
            return

        pm = lo + n // 2
        if n > _INSERTION_LIMIT:
            pl = lo
            pn = lo + n - 1
            if n > _NINTHER_LIMIT:
                d = n // 8
                pl = _med3(items, pl, pl + d, pl + 2 * d, cmp)
                pm = _med3(items, pm - d, pm, pm + d, cmp)
                pn = _med3(items, pn - 2 * d, pn - d, pn, cmp)
            pm = _med3(items, pl, pm, pn, cmp)
        _swap(items, lo, pm)

        swapped = False
        pa = pb = lo + 1
        pc = pd = lo + n - 1
        while True:
            while pb <= pc:
                r = cmp(items[pb], items[lo])
                if r > 0:
                    break
                if r == 0:
                    swapped = True
                    _swap(items, pa, pb)
                    pa += 1
                pb += 1
            while pb <= pc:
                r = cmp(items[pc], items[lo])
                if r < 0:
                    break
                if r == 0:
                    swapped = True
                    _swap(items, pc, pd)
                    pd -= 1
                pc -= 1
            if pb > pc:
                break
            _swap(items, pb, pc)
            swapped = True
            pb += 1
            pc -= 1

        if not swapped:
            _insertion_sort(items, lo, n, cmp)
            return

        pn = lo + n
        r = min(pa - lo, pb - pa)
        _vecswap(items, lo, pb - r, r)
        r = min(pd - pc, pn - pd - 1)
        _vecswap(items, pb, pn - r, r)

        r = pb - pa
        if r > 1:
            _sort(items, lo, r, cmp)
        r = pd - pc
        if r <= 1:
            return
        lo = pn - r
        n = r


def qsort(items: List[Any], cmp: Comparator) -> None:
    """Sort ``items`` in place by ``cmp``, which returns <0, 0 or >0.

    The sort is not stable.
    """
    _sort(items, 0, len(items), cmp)