"""
Errors raised by domain construction and bound queries.
"""


class DomainError(ValueError):
    """Base class for all domain errors."""


class InvalidRangeError(DomainError):
    """Raised when a range is built with a lower bound above its upper bound."""

    def __init__(self, lower, upper):
        super().__init__(
            f"lower bound ({lower}) must be less than or equal to "
            f"upper bound ({upper})"
        )
        self.lower = lower
        self.upper = upper


class BoundUndefinedError(DomainError):
    """Raised when a bound is requested from an unordered domain."""

    def __init__(self, domain, which: str = "lower"):
        super().__init__(
            f"{which.capitalize()} bound is undefined for "
            f"{type(domain).__name__}"
        )
        self.domain = domain


class EmptyDomainError(DomainError):
    """Raised when a discrete domain is built from no values."""
