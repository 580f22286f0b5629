from __future__ import generator_stop

import logging
from typing import List, Optional, Sequence, Tuple, TypeVar

from .rand import choose_random
from .typing import Orderable, PivotFunc

T = TypeVar("T", bound=Orderable)

logger = logging.getLogger(__name__)

GROUP_SIZE = 5


def partition(seq: Sequence[T], pivot: T) -> Tuple[List[T], List[T], List[T]]:

    """Splits `seq` into the elements strictly less than, equal to and strictly greater than `pivot`.
    The relative order of the elements is kept.
    """

    lows = [x for x in seq if x < pivot]
    pivots = [x for x in seq if x == pivot]
    highs = [x for x in seq if x > pivot]
    return lows, pivots, highs


def quickselect(seq: Sequence[T], k: int, pivot_fn: PivotFunc = choose_random) -> Optional[T]:

    """Returns the element which would be at index `k` if `seq` was sorted in ascending order,
    without sorting `seq`. `seq` is not modified.

    `pivot_fn` is called on the current working list and must return one of its elements
    (or a value between its smallest and largest element), or `None` if it cannot decide.
    Returns `None` if `seq` is empty, `k` is out of range or `pivot_fn` returned `None`.

    The elements must be totally ordered and equality must be reflexive, so NaN is not allowed.
    """

    while True:
        n = len(seq)
        if not 0 <= k < n:
            return None
        elif n == 1:
            return seq[0]

        pivot = pivot_fn(seq)
        if pivot is None:
            return None

        lows, pivots, highs = partition(seq, pivot)

        if len(lows) == n or len(highs) == n:
            logger.warning("Pivot %r is not part of the input. Selection aborted.", pivot)
            return None

        if k < len(lows):
            seq = lows
        elif k < len(lows) + len(pivots):
            return pivots[0]
        else:
            k -= len(lows) + len(pivots)
            seq = highs


select = quickselect


def group_medians(seq: Sequence[T]) -> List[T]:

    """Sorts consecutive groups of `GROUP_SIZE` elements and returns the middle element of each.
    A trailing incomplete group is ignored.
    """

    end = len(seq) - len(seq) % GROUP_SIZE
    mid = GROUP_SIZE // 2
    return [sorted(seq[i : i + GROUP_SIZE])[mid] for i in range(0, end, GROUP_SIZE)]


def pick_pivot(seq: Sequence[T]) -> Optional[T]:

    """Median of medians pivot selection. Used as `pivot_fn` for `quickselect`
    it guarantees linear run time in the worst case.
    The result is always an element of `seq`: for an even number of elements (or group medians)
    the lower median is used instead of the average of the two middle elements.
    """

    n = len(seq)
    if n == 0:
        return None
    elif n < GROUP_SIZE:
        return sorted(seq)[(n - 1) // 2]

    medians = group_medians(seq)
    return quickselect(medians, (len(medians) - 1) // 2, pick_pivot)
