"""
Variable domains

This package provides the domain types describing the admissible values
of a scalar variable (real, integer, binary, categorical), with membership
tests and, for ordered domains, bound queries.
"""

import logging

from .base import (
    Domain,
    BoundedDomain,
    RealDomain,
    IntegerDomain,
    BinaryDomain,
    CategoricalDomain
)

from .domains import (
    FeatureDomains,
    RealInterval,
    IntegerRange,
    IntegerSet,
    BinaryRange,
    CategoricalSet
)

from .errors import (
    DomainError,
    InvalidRangeError,
    BoundUndefinedError,
    EmptyDomainError
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Domain',
    'BoundedDomain',
    'RealDomain',
    'IntegerDomain',
    'BinaryDomain',
    'CategoricalDomain',
    'FeatureDomains',
    'RealInterval',
    'IntegerRange',
    'IntegerSet',
    'BinaryRange',
    'CategoricalSet',
    'DomainError',
    'InvalidRangeError',
    'BoundUndefinedError',
    'EmptyDomainError'
]
