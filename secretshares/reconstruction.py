"""Secret reconstruction and share recovery by Lagrange interpolation.

Interpolation runs over exact rationals. For field shares the rational
result is mapped into the field with a modular inverse of its denominator,
which equals interpolating directly in the field. For integer shares the
result must come out integral; a fraction means the shares do not lie on one
polynomial of the assumed degree (too few, corrupted, or tampered indices).
"""

from fractions import Fraction
from typing import Sequence

from secretshares.errors import (
    FractionalSecretError,
    InvalidParametersError,
    NoSharesError,
    TooFewSharesError,
)
from secretshares.logging import get_logger
from secretshares.polynomial import lagrange_interpolate, reduce_fraction_mod
from secretshares.share import FieldShare, IntegerShare, Share
from secretshares.validation import check_compatible, check_distinct_points

logger = get_logger(__name__)


def _interpolation_points(shares: Sequence[Share], strict: bool) -> list[Share]:
    """Validate shares and select the first degree + 1 of them."""
    if not shares:
        raise NoSharesError()

    needed = shares[0].degree + 1
    if len(shares) < needed:
        raise TooFewSharesError(needed, len(shares))

    check_compatible(shares)

    points = list(shares[:needed])
    check_distinct_points(points, require_positive=strict)
    return points


def _to_field(value: Fraction, field_size: int) -> int:
    try:
        return reduce_fraction_mod(value, field_size)
    except ValueError as e:
        raise InvalidParametersError(
            f"Interpolation denominator is not invertible modulo {field_size}; "
            "field size must be prime and larger than the share indices"
        ) from e


def combine(shares: Sequence[Share], *, strict: bool = False) -> int:
    """Reconstruct a secret from its shares.

    Only the first degree + 1 shares are used.

    Args:
        shares: Compatible shares of one secret
        strict: Also reject non-positive evaluation points

    Returns:
        The secret (reduced modulo the field size for field shares)

    Raises:
        NoSharesError: If no shares are given
        TooFewSharesError: If fewer than degree + 1 shares are given
        IncompatibleSharesError: If shares differ in domain, field size or degree
        FractionalSecretError: If integer reconstruction is not integral
        InvalidParametersError: On duplicate evaluation points or a
            non-invertible denominator
    """
    points = _interpolation_points(shares, strict)
    value = lagrange_interpolate([(s.x, s.y) for s in points], 0)
    first = points[0]

    if isinstance(first, FieldShare):
        return _to_field(value, first.field_size)

    # Integer shares carry secret * scale_factor in the constant term
    if value.denominator != 1:
        logger.warning(
            "Integer reconstruction produced a fraction",
            degree=first.degree,
            n_points=len(points),
        )
        raise FractionalSecretError()
    secret, remainder = divmod(value.numerator, first.scale_factor)
    if remainder:
        logger.warning(
            "Integer reconstruction is not a multiple of the scale factor",
            degree=first.degree,
            n_points=len(points),
        )
        raise FractionalSecretError()
    return secret


def recover_share(shares: Sequence[Share], x: int, *, strict: bool = False) -> Share:
    """Recover the share held by the participant at evaluation point x.

    If a participant loses their share, any degree + 1 others can
    recompute it by interpolating the sharing polynomial at x.

    Args:
        shares: Compatible shares of one secret
        x: Evaluation point of the share to recover
        strict: Also reject non-positive evaluation points in ``shares``

    Returns:
        The recovered share

    Raises:
        NoSharesError: If no shares are given
        TooFewSharesError: If fewer than degree + 1 shares are given
        IncompatibleSharesError: If shares differ in domain, field size or degree
        InvalidParametersError: If x is not positive or already present
        FractionalSecretError: If integer interpolation is not integral
    """
    points = _interpolation_points(shares, strict)
    if x <= 0:
        raise InvalidParametersError(f"Evaluation point must be positive, got x={x}")
    if any(s.x == x for s in shares):
        raise InvalidParametersError(f"Share with x={x} already exists")

    value = lagrange_interpolate([(s.x, s.y) for s in points], x)
    first = points[0]

    if isinstance(first, FieldShare):
        return FieldShare(
            field_size=first.field_size,
            degree=first.degree,
            x=x,
            y=_to_field(value, first.field_size),
        )

    if value.denominator != 1:
        raise FractionalSecretError("Recovered share value is not an integer")
    return IntegerShare(
        scale_factor=first.scale_factor,
        degree=first.degree,
        x=x,
        y=value.numerator,
    )
