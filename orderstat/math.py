import logging
from typing import Optional, TypeVar

from .typing import Computable

ComputableT = TypeVar("ComputableT", bound=Computable)

logger = logging.getLogger(__name__)


def midpoint(a: ComputableT, b: ComputableT) -> Optional[ComputableT]:
    """Returns the arithmetic mean of `a` and `b`.
    The divisor is constructed from the integer 2 by the type of `a + b`, so rational and decimal
    types stay exact and `bool` is averaged as `int`. Returns `None` if that type cannot be
    constructed from an integer.
    For operands of the same sign the half difference is added to `a`, which cannot overflow
    for floats close to the maximum.
    """

    try:
        two = type(a + b)(2)
    except (TypeError, ValueError):
        logger.debug("Cannot construct %s from integer 2", type(a + b).__name__)
        return None

    zero = two - two
    if (a < zero) == (b < zero):
        return a + (b - a) / two
    else:
        return (a + b) / two
