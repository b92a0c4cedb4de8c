from __future__ import annotations

from .base import Occurrence


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Move the trailing occurrence of ``occs`` to its place in descending frequency order.

    Elements ``0..n-2`` must already be sorted. The position is found by a binary
    search over that sorted prefix; an occurrence whose frequency ties with existing
    entries goes after all of them, so earlier-merged documents stay ahead.

    Returns the indices compared during the search, in order, or ``None`` when the
    list holds a single element and nothing had to be searched.
    """
    if not occs:
        raise ValueError("cannot place the last occurrence of an empty list")
    if len(occs) == 1:
        return None

    target = occs[-1].frequency
    last = len(occs) - 2
    lo, hi = 0, last
    probes: list[int] = []

    while lo < hi:
        mid = (lo + hi) // 2
        probes.append(mid)
        freq = occs[mid].frequency
        if target == freq:
            _move_last(occs, _end_of_run(occs, mid, last) + 1)
            return probes
        if target > freq:
            hi = mid - 1
        else:
            lo = mid + 1

    # everything left of lo is strictly greater, everything right of hi strictly smaller
    if lo > hi:
        position = lo
    else:
        probes.append(lo)
        freq = occs[lo].frequency
        if target > freq:
            position = lo
        elif target == freq:
            position = _end_of_run(occs, lo, last) + 1
        else:
            position = lo + 1
    _move_last(occs, position)
    return probes


def _end_of_run(occs: list[Occurrence], start: int, last: int) -> int:
    freq = occs[start].frequency
    end = start
    while end < last and occs[end + 1].frequency == freq:
        end += 1
    return end


def _move_last(occs: list[Occurrence], position: int) -> None:
    if position >= len(occs) - 1:
        return
    occs.insert(position, occs.pop())
