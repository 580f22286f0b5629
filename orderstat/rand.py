from random import choice, sample
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def choose_random(seq: Sequence[T]) -> Optional[T]:
    """Returns a (noncryptographic) uniformly random element of `seq`,
    or `None` if `seq` is empty. The elements are never compared.
    """

    if len(seq) == 0:
        return None

    return choice(seq)  # nosec


def randomized(seq: Sequence[T]) -> List[T]:
    """Like `random.shuffle`, but not in-place."""

    return sample(seq, len(seq))
