from __future__ import generator_stop

from typing import Any, Iterable, Tuple, Type, Union

from .typing import Numeric


def assert_type(name: str, value: Any, types: Union[Type[Any], Tuple[Type[Any], ...]]) -> None:

    if not isinstance(value, types):
        if not isinstance(types, tuple):
            types = (types,)
        raise TypeError(
            "{} must be one of these types: {}. Not: {}".format(
                name, ", ".join(t.__name__ for t in types), type(value).__name__
            )
        )


def assert_numeric(name: str, values: Iterable[Any]) -> None:

    """Raises `TypeError` if any element of `values` cannot be compared, added and divided,
    which is what averaging two medians requires.
    """

    for i, value in enumerate(values):
        assert_type(f"{name}[{i}]", value, Numeric)
