from __future__ import generator_stop

from typing import Any, Callable, Optional, Sequence, TypeVar

from typing_extensions import Protocol, runtime_checkable  # typing.Protocol is available in Python 3.8+

T = TypeVar("T")

PivotFunc = Callable[[Sequence[T]], Optional[T]]


class Orderable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...


class Computable(Protocol):
    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...


@runtime_checkable
class Numeric(Protocol):
    """Everything needed to select and average medians: comparison, equality,
    addition, subtraction and division by a value of the same type constructed from the int 2.
    """

    def __eq__(self, other: Any) -> bool:
        ...

    def __lt__(self, other: Any) -> bool:
        ...

    def __gt__(self, other: Any) -> bool:
        ...

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...
