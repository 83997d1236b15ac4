"""
Concrete domain definitions.

This module defines the domains a variable can range over: continuous
intervals, integer ranges and sets, the binary range, and categorical
label sets. All of them are immutable values, validated on construction.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Tuple

import numpy as np

from .base import (
    BinaryDomain,
    CategoricalDomain,
    Domain,
    IntegerDomain,
    RealDomain,
    numeric_batch,
)
from .errors import EmptyDomainError, InvalidRangeError
from .types import Binary, Integer, Label, Real, is_binary, is_integer, is_real

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RealInterval(RealDomain):
    """
    Continuous interval over the reals.

    Each bound is closed unless its ``*_open`` flag is set, so the four
    combinations [a, b], [a, b), (a, b] and (a, b) are all expressible.
    Openness only changes membership: the reported bounds are always the
    stored values.
    """

    lower: Real
    upper: Real
    lower_open: bool = False
    upper_open: bool = False

    def __post_init__(self):
        if not (is_real(self.lower) and is_real(self.upper)):
            raise TypeError(
                f"RealInterval bounds must be real numbers, "
                f"got {self.lower!r} and {self.upper!r}"
            )
        # also rejects NaN bounds
        if not self.lower <= self.upper:
            logger.debug("Rejected RealInterval(%r, %r)", self.lower, self.upper)
            raise InvalidRangeError(self.lower, self.upper)
        object.__setattr__(self, "lower_open", bool(self.lower_open))
        object.__setattr__(self, "upper_open", bool(self.upper_open))

    @property
    def eltype(self) -> type:
        # a float bound promotes the interval to float
        for bound in (self.lower, self.upper):
            if isinstance(bound, (float, np.floating)):
                return type(bound)
        return type(self.lower)

    def lower_bound(self) -> Real:
        return self.lower

    def upper_bound(self) -> Real:
        return self.upper

    def contains(self, x) -> bool:
        if not is_real(x):
            return False
        above = self.lower < x if self.lower_open else self.lower <= x
        below = x < self.upper if self.upper_open else x <= self.upper
        return bool(above and below)

    def mask(self, values) -> np.ndarray:
        arr = numeric_batch(values, "iuf")
        if arr is None:
            return super().mask(values)
        above = arr > self.lower if self.lower_open else arr >= self.lower
        below = arr < self.upper if self.upper_open else arr <= self.upper
        return (above & below).ravel()

    def __str__(self):
        left = "(" if self.lower_open else "["
        right = ")" if self.upper_open else "]"
        return f"{left}{self.lower}, {self.upper}{right}"


@dataclass(frozen=True)
class IntegerRange(IntegerDomain):
    """Contiguous range of integers, closed on both sides."""

    lower: Integer
    upper: Integer

    def __post_init__(self):
        if not (is_integer(self.lower) and is_integer(self.upper)):
            raise TypeError(
                f"IntegerRange bounds must be integers, "
                f"got {self.lower!r} and {self.upper!r}"
            )
        if self.lower > self.upper:
            logger.debug("Rejected IntegerRange(%r, %r)", self.lower, self.upper)
            raise InvalidRangeError(self.lower, self.upper)

    @property
    def eltype(self) -> type:
        return type(self.lower)

    def lower_bound(self) -> Integer:
        return self.lower

    def upper_bound(self) -> Integer:
        return self.upper

    def contains(self, x) -> bool:
        return is_integer(x) and bool(self.lower <= x <= self.upper)

    def mask(self, values) -> np.ndarray:
        arr = numeric_batch(values, "iu")
        if arr is None:
            return super().mask(values)
        return ((arr >= self.lower) & (arr <= self.upper)).ravel()

    def __str__(self):
        return f"{{{self.lower}..{self.upper}}}"


@dataclass(frozen=True)
class IntegerSet(IntegerDomain):
    """
    Explicit set of integers.

    Duplicates collapse on construction. The bounds are the smallest and
    largest members.
    """

    values: FrozenSet[Integer]

    def __post_init__(self):
        values = frozenset(self.values)
        if not values:
            logger.debug("Rejected empty IntegerSet")
            raise EmptyDomainError("IntegerSet requires at least one value")
        invalid = [v for v in values if not is_integer(v)]
        if invalid:
            raise TypeError(f"IntegerSet values must be integers, got {invalid!r}")
        object.__setattr__(self, "values", values)

    @property
    def eltype(self) -> type:
        return type(self.lower_bound())

    def lower_bound(self) -> Integer:
        return min(self.values)

    def upper_bound(self) -> Integer:
        return max(self.values)

    def contains(self, x) -> bool:
        return is_integer(x) and x in self.values

    def mask(self, values) -> np.ndarray:
        arr = numeric_batch(values, "iu")
        if arr is None:
            return super().mask(values)
        return np.isin(arr, list(self.values)).ravel()


@dataclass(frozen=True)
class BinaryRange(BinaryDomain):
    """
    Range over the booleans, ordered False < True.

    ``BinaryRange()`` holds both values. Other bound pairs are accepted
    as given: ``BinaryRange(True, True)`` only holds True.
    """

    lower: Binary = False
    upper: Binary = True

    def __post_init__(self):
        if not (is_binary(self.lower) and is_binary(self.upper)):
            raise TypeError(
                f"BinaryRange bounds must be booleans, "
                f"got {self.lower!r} and {self.upper!r}"
            )
        object.__setattr__(self, "lower", bool(self.lower))
        object.__setattr__(self, "upper", bool(self.upper))

    @property
    def eltype(self) -> type:
        return bool

    def lower_bound(self) -> bool:
        return self.lower

    def upper_bound(self) -> bool:
        return self.upper

    def contains(self, x) -> bool:
        return is_binary(x) and self.lower <= bool(x) <= self.upper


@dataclass(frozen=True)
class CategoricalSet(CategoricalDomain):
    """
    Sequence of string labels, kept as given.

    Labels have no order, so bound queries raise BoundUndefinedError.
    """

    categories: Tuple[Label, ...] = ()

    def __post_init__(self):
        if isinstance(self.categories, str):
            raise TypeError(
                "CategoricalSet expects a sequence of labels, not a string"
            )
        categories = tuple(self.categories)
        invalid = [c for c in categories if not isinstance(c, str)]
        if invalid:
            raise TypeError(f"CategoricalSet labels must be strings, got {invalid!r}")
        object.__setattr__(self, "categories", categories)

    @property
    def eltype(self) -> type:
        return str

    def contains(self, x) -> bool:
        return isinstance(x, str) and x in self.categories


FeatureDomains = List[Domain]
# one domain per feature
