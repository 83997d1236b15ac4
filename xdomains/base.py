"""
Domain interfaces.

This module defines the capability contract shared by every domain: a
membership test for all of them, and lower/upper bound queries for the
ordered ones. Concrete domains live in :mod:`xdomains.domains`.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional, Tuple

import numpy as np

from .errors import BoundUndefinedError


class Domain(ABC):
    """
    Interface for the admissible set of values of a scalar variable.

    Required queries:
    - contains: membership test
    - eltype: element type of the domain

    Bound queries are only answered by :class:`BoundedDomain`; on any other
    domain they raise :class:`BoundUndefinedError`.
    """

    is_bounded = False

    @property
    @abstractmethod
    def eltype(self) -> type:
        """Return the type of the elements of the domain."""
        pass

    @abstractmethod
    def contains(self, x: Any) -> bool:
        """
        Check whether a value belongs to the domain.

        Args:
            x: Candidate value

        Returns:
            True if x is in the domain, False otherwise
        """
        pass

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def lower_bound(self):
        raise BoundUndefinedError(self, "lower")

    def upper_bound(self):
        raise BoundUndefinedError(self, "upper")

    def mask(self, values: Iterable[Any]) -> np.ndarray:
        """
        Element-wise membership test.

        Args:
            values: Sequence or numpy array of candidate values

        Returns:
            Boolean numpy array, True where the value is in the domain

        Raises:
            TypeError: if values is a string or a scalar
        """
        check_batch(values)
        if isinstance(values, np.ndarray):
            values = values.ravel().tolist()
        return np.array([self.contains(v) for v in values], dtype=bool)


class BoundedDomain(Domain):
    """
    Interface for ordered domains.

    Required queries (superset of Domain):
    - lower_bound: smallest value of the domain
    - upper_bound: largest value of the domain
    """

    is_bounded = True

    @abstractmethod
    def lower_bound(self):
        """Return the lower bound of the domain."""
        pass

    @abstractmethod
    def upper_bound(self):
        """Return the upper bound of the domain."""
        pass

    @property
    def bounds(self) -> Tuple[Any, Any]:
        return self.lower_bound(), self.upper_bound()


class RealDomain(BoundedDomain):
    """Domain of a continuous variable."""


class IntegerDomain(BoundedDomain):
    """Domain of a discrete variable, as a range or an explicit set."""


class BinaryDomain(BoundedDomain):
    """Domain of a boolean variable."""


class CategoricalDomain(Domain):
    """Domain of a categorical variable. Labels are unordered."""


def check_batch(values):
    if isinstance(values, (str, bytes)):
        raise TypeError("mask expects a sequence of values, not a string")
    scalar_array = isinstance(values, np.ndarray) and values.ndim == 0
    if scalar_array or not isinstance(values, Iterable):
        raise TypeError(f"mask expects a sequence of values, got {values!r}")


def numeric_batch(values, kinds: str) -> Optional[np.ndarray]:
    """
    Return values when they can be compared in a single numpy pass.

    Only numpy arrays whose dtype kind is in ``kinds`` qualify. Python
    sequences go element by element, since numpy would turn their bools
    into numbers.
    """
    check_batch(values)
    if isinstance(values, np.ndarray) and values.dtype.kind in kinds:
        return values
    return None
