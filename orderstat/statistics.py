from typing import Optional, Sequence, TypeVar

from .algorithms import pick_pivot, quickselect
from .exceptions import assert_numeric
from .math import midpoint
from .typing import Numeric, PivotFunc

NumericT = TypeVar("NumericT", bound=Numeric)


def median_sorted(seq: Sequence[NumericT]) -> Optional[NumericT]:
    """Median of `seq` computed by sorting a copy of it. For an even number of elements
    the two middle elements are averaged (see `orderstat.math.midpoint`).
    Returns `None` for an empty `seq`.
    """

    assert_numeric("seq", seq)

    n = len(seq)
    if n == 0:
        return None

    a = sorted(seq)
    mid = n // 2
    if n % 2 == 0:
        return midpoint(a[mid - 1], a[mid])
    else:
        return a[mid]


nlogn_median = median_sorted


def quickselect_median(seq: Sequence[NumericT], pivot_fn: PivotFunc = pick_pivot) -> Optional[NumericT]:
    """Median of `seq` in linear time using `quickselect`.
    With the default median of medians `pivot_fn` this is linear in the worst case as well.
    """

    assert_numeric("seq", seq)

    n = len(seq)
    if n == 0:
        return None

    mid = n // 2
    if n % 2 == 1:
        return quickselect(seq, mid, pivot_fn)

    # no single middle element
    lower = quickselect(seq, mid - 1, pivot_fn)
    if lower is None:
        return None
    upper = quickselect(seq, mid, pivot_fn)
    if upper is None:
        return None

    return midpoint(lower, upper)
