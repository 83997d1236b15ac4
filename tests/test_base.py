"""Tests for the domain interfaces and the error hierarchy."""

import logging
from dataclasses import dataclass

import pytest

from xdomains import (
    BinaryDomain,
    BinaryRange,
    BoundedDomain,
    BoundUndefinedError,
    CategoricalDomain,
    CategoricalSet,
    Domain,
    DomainError,
    EmptyDomainError,
    IntegerDomain,
    IntegerRange,
    IntegerSet,
    InvalidRangeError,
    RealDomain,
    RealInterval,
)


@dataclass(frozen=True)
class EvenIntegers(Domain):
    """Unbounded domain defined outside the package."""

    @property
    def eltype(self):
        return int

    def contains(self, x):
        return isinstance(x, int) and x % 2 == 0


class TestHierarchy:
    def test_families(self):
        assert isinstance(RealInterval(0, 1), RealDomain)
        assert isinstance(IntegerRange(0, 1), IntegerDomain)
        assert isinstance(IntegerSet([0]), IntegerDomain)
        assert isinstance(BinaryRange(), BinaryDomain)
        assert isinstance(CategoricalSet(), CategoricalDomain)

    def test_only_ordered_domains_are_bounded(self):
        for d in (RealInterval(0, 1), IntegerRange(0, 1), IntegerSet([0]), BinaryRange()):
            assert isinstance(d, BoundedDomain)
            assert d.is_bounded
        assert not isinstance(CategoricalSet(), BoundedDomain)
        assert not CategoricalSet().is_bounded

    def test_interfaces_are_abstract(self):
        with pytest.raises(TypeError):
            Domain()
        with pytest.raises(TypeError):
            BoundedDomain()

    def test_bounded_subclass_must_implement_bounds(self):
        class Incomplete(BoundedDomain):
            @property
            def eltype(self):
                return int

            def contains(self, x):
                return False

        with pytest.raises(TypeError):
            Incomplete()


class TestExtension:
    def test_new_variant(self):
        d = EvenIntegers()
        assert 4 in d
        assert 3 not in d
        assert d.mask([1, 2, 3, 4]).tolist() == [False, True, False, True]

    def test_new_variant_has_no_bounds(self):
        with pytest.raises(BoundUndefinedError, match="EvenIntegers"):
            EvenIntegers().lower_bound()


class TestErrors:
    def test_hierarchy(self):
        for cls in (InvalidRangeError, BoundUndefinedError, EmptyDomainError):
            assert issubclass(cls, DomainError)
        assert issubclass(DomainError, ValueError)

    def test_invalid_range_message(self):
        with pytest.raises(InvalidRangeError, match=r"lower bound \(5\)") as excinfo:
            IntegerRange(5, 1)
        assert excinfo.value.lower == 5
        assert excinfo.value.upper == 1

    def test_bound_undefined_message(self):
        d = CategoricalSet(["a"])
        with pytest.raises(BoundUndefinedError, match="Upper bound is undefined for CategoricalSet") as excinfo:
            d.upper_bound()
        assert excinfo.value.domain is d

    def test_rejection_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="xdomains"):
            with pytest.raises(InvalidRangeError):
                RealInterval(2.0, 1.0)
        assert "Rejected RealInterval" in caplog.text
