"""Bentley-McIlroy three-way quicksort with a comparison function."""

from __future__ import annotations

from typing import Any, Callable, MutableSequence

Comparator = Callable[[Any, Any], int]


def _default_cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _insertion_sort(a: MutableSequence, lo: int, n: int, cmp: Comparator) -> None:
    for pm in range(lo + 1, lo + n):
        pl = pm
        while pl > lo and cmp(a[pl - 1], a[pl]) > 0:
            a[pl], a[pl - 1] = a[pl - 1], a[pl]
            pl -= 1


def _med3(a: MutableSequence, i: int, j: int, k: int, cmp: Comparator) -> int:
    if cmp(a[i], a[j]) < 0:
        if cmp(a[j], a[k]) < 0:
            return j
        return k if cmp(a[i], a[k]) < 0 else i
    if cmp(a[j], a[k]) > 0:
        return j
    return i if cmp(a[i], a[k]) < 0 else k


def _vecswap(a: MutableSequence, i: int, j: int, n: int) -> None:
    for x, y in zip(range(i, i + n), range(j, j + n)):
        a[x], a[y] = a[y], a[x]


def _sort(a: MutableSequence, lo: int, n: int, cmp: Comparator) -> None:
    while True:
        if n < 7:
            _insertion_sort(a, lo, n, cmp)
            return
        pm = lo + n // 2
        if n > 7:
            pl = lo
            pn = lo + n - 1
            if n > 40:
                d = n // 8
                pl = _med3(a, pl, pl + d, pl + 2 * d, cmp)
                pm = _med3(a, pm - d, pm, pm + d, cmp)
                pn = _med3(a, pn - 2 * d, pn - d, pn, cmp)
            pm = _med3(a, pl, pm, pn, cmp)
        a[lo], a[pm] = a[pm], a[lo]
        pa = pb = lo + 1
        pc = pd = lo + n - 1
        swapped = False
        while True:
            while pb <= pc and (result := cmp(a[pb], a[lo])) <= 0:
                if result == 0:
                    swapped = True
                    a[pa], a[pb] = a[pb], a[pa]
                    pa += 1
                pb += 1
            while pb <= pc and (result := cmp(a[pc], a[lo])) >= 0:
                if result == 0:
                    swapped = True
                    a[pc], a[pd] = a[pd], a[pc]
                    pd -= 1
                pc -= 1
            if pb > pc:
                break
            a[pb], a[pc] = a[pc], a[pb]
            swapped = True
            pb += 1
            pc -= 1
        if not swapped:
            _insertion_sort(a, lo, n, cmp)
            return

        pn = lo + n
        r = min(pa - lo, pb - pa)
        _vecswap(a, lo, pb - r, r)
        r = min(pd - pc, pn - (pd + 1))
        _vecswap(a, pb, pn - r, r)
        r = pb - pa
        if r > 1:
            _sort(a, lo, r, cmp)
        r = pd - pc
        if r > 1:
            lo = pn - r
            n = r
            continue
        return


def qsort(items: MutableSequence, cmp: Comparator | None = None) -> None:
    """Sort `items` in place; `cmp(a, b)` returns negative, zero or positive."""
    _sort(items, 0, len(items), cmp if cmp is not None else _default_cmp)