from __future__ import annotations

from typing import Any, Union

import numpy as np


# Integer scalars accepted as fraction components. numpy scalars are converted to python int,
# so arithmetic never wraps around at a fixed width.
IntegerLike = Union[
    int,
    np.integer,
]


def is_integer_like(x: Any) -> bool:
    # bool is a subclass of int, but True/False are not meaningful fraction components
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (int, np.integer))


def as_int(x: Any, name: str = "value") -> int:
    """Converts an integer scalar to a python int.

    Args:
        x (Any): python int or numpy integer scalar
        name (str, optional): name used in the error message. Defaults to "value".

    Raises:
        TypeError: if x is not an integer scalar

    Returns:
        int: the same value as python int
    """
    if not is_integer_like(x):
        raise TypeError(f"{name} must be an integer, got {type(x).__name__}: {x!r}")
    return int(x)
