"""Tests for parameter validation and strict mode."""

from dataclasses import replace

import pytest

from secretshares import (
    IncompatibleSharesError,
    InvalidParametersError,
    NoSharesError,
    check_compatible,
    is_probable_prime,
)
from secretshares.share import FieldShare

from conftest import PRIME


class TestPrimality:
    """Tests for the Miller-Rabin check."""

    @pytest.mark.parametrize("n", [2, 3, 5, 37, 41, 7919, 7907, 2**61 - 1, 2**127 - 1])
    def test_primes(self, n):
        assert is_probable_prime(n)

    @pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 1234, 7917, 561, 41041, 2**61 + 1])
    def test_composites(self, n):
        assert not is_probable_prime(n)

    def test_product_of_large_primes(self):
        """Composite with no small factors."""
        assert not is_probable_prime((2**61 - 1) * (2**31 - 1))


class TestGenerationParameters:
    """Checks applied by both generators regardless of mode."""

    @pytest.mark.parametrize("n_shares", [0, -1])
    def test_share_count(self, engine, n_shares):
        with pytest.raises(InvalidParametersError, match="Share count"):
            engine.share_finite_field(1, PRIME, 0, n_shares)

    def test_negative_degree(self, engine):
        with pytest.raises(InvalidParametersError, match="Degree"):
            engine.share_integers(1, 10, 40, -1, 3)

    @pytest.mark.parametrize("field_size", [1, 0, -7919])
    def test_field_size(self, engine, field_size):
        with pytest.raises(InvalidParametersError, match="Field size"):
            engine.share_finite_field(1, field_size, 1, 3)

    def test_upper_bound(self, engine):
        with pytest.raises(InvalidParametersError, match="upper bound"):
            engine.share_integers(0, 0, 40, 1, 3)

    def test_stat_sec_param(self, engine):
        with pytest.raises(InvalidParametersError, match="Statistical security"):
            engine.share_integers(1, 10, -1, 1, 3)

    def test_invalid_parameters_is_value_error(self, engine):
        """Callers catching ValueError see parameter errors too."""
        with pytest.raises(ValueError):
            engine.share_finite_field(1, PRIME, -1, 3)

    def test_degree_at_least_n_allowed(self, engine):
        """Unreconstructable sharings are the caller's choice by default."""
        shares = engine.share_finite_field(1, PRIME, 5, 3)

        assert len(shares) == 3

    def test_composite_field_allowed(self, engine):
        """Primality is not checked by default."""
        shares = engine.share_finite_field(1, 1234, 1, 3)

        assert shares[0].field_size == 1234


class TestStrictMode:
    """Checks enabled by strict validation."""

    def test_composite_field_rejected(self, strict_engine):
        with pytest.raises(InvalidParametersError, match="not prime"):
            strict_engine.share_finite_field(1, 1234, 1, 3)

    def test_prime_field_accepted(self, strict_engine):
        shares = strict_engine.share_finite_field(1, PRIME, 1, 3)

        assert strict_engine.combine(shares) == 1

    def test_degree_must_be_below_share_count(self, strict_engine):
        with pytest.raises(InvalidParametersError, match="needs 4 shares"):
            strict_engine.share_finite_field(1, PRIME, 3, 3)

    def test_secret_bound_enforced(self, strict_engine):
        with pytest.raises(InvalidParametersError, match="exceeds"):
            strict_engine.share_integers(-10001, 10000, 40, 1, 3)

    def test_non_positive_point_rejected(self, strict_engine):
        shares = strict_engine.share_finite_field(1, PRIME, 1, 3)
        shares[0] = replace(shares[0], x=0)

        with pytest.raises(InvalidParametersError, match="positive"):
            strict_engine.combine(shares)

    def test_non_positive_point_allowed_by_default(self, engine):
        """A share at x=0 holds the secret itself."""
        shares = engine.share_finite_field(42, PRIME, 1, 3)
        shares[0] = FieldShare(field_size=PRIME, degree=1, x=0, y=42)

        assert engine.combine(shares) == 42

    def test_scale_factor_mismatch_rejected(self, strict_engine):
        shares1 = strict_engine.share_integers(2, 100, 40, 1, 4)
        shares2 = strict_engine.share_integers(3, 100, 40, 1, 5)

        with pytest.raises(IncompatibleSharesError, match="scale factors"):
            strict_engine.add([shares1[0], shares2[0]])

    def test_strict_from_settings(self, monkeypatch):
        """Strict mode follows SECRETSHARES_STRICT_VALIDATION."""
        from secretshares.config import get_settings
        from secretshares.engine import SecretSharingEngine

        monkeypatch.setenv("SECRETSHARES_STRICT_VALIDATION", "true")
        get_settings.cache_clear()

        engine = SecretSharingEngine()

        assert engine.strict is True
        with pytest.raises(InvalidParametersError):
            engine.share_finite_field(1, 1234, 1, 3)


class TestCheckCompatible:
    """Tests for the public compatibility helper."""

    def test_empty(self):
        with pytest.raises(NoSharesError):
            check_compatible([])

    def test_compatible(self, engine):
        shares = engine.share_finite_field(1, PRIME, 1, 3)

        check_compatible(shares)

    def test_points_only_checked_on_request(self, engine):
        shares = engine.share_finite_field(1, PRIME, 1, 3)

        check_compatible(shares, same_point=False)
        with pytest.raises(IncompatibleSharesError):
            check_compatible(shares, same_point=True)
