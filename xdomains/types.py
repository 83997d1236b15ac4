from numbers import Integral, Real as _Real
from typing import Union

import numpy as np

Real = Union[int, float, np.integer, np.floating]
Integer = Union[int, np.integer]
Binary = Union[bool, np.bool_]
Label = str


def is_binary(x) -> bool:
    return isinstance(x, (bool, np.bool_))


def is_integer(x) -> bool:
    # bool is an int subclass but belongs to the binary domains
    return isinstance(x, (Integral, np.integer)) and not is_binary(x)


def is_real(x) -> bool:
    return isinstance(x, (_Real, np.integer, np.floating)) and not is_binary(x)
