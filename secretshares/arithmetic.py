"""Homomorphic arithmetic on shares.

A participant holding shares of several secrets at the same point x can
derive, without any interaction, a share of their sum or product:

- sum: f(x) + g(x) is a point on f + g, whose constant term is the sum of the
  secrets and whose degree is the common degree.
- product: f(x) * g(x) is a point on f * g, whose degree is the sum of the
  degrees. Reconstructing a product of k degree-t factors therefore takes
  k*t + 1 shares.

For integer shares the scale factors multiply along with the values, so the
product share carries the product of the factors.
"""

from dataclasses import replace
from typing import Sequence

from secretshares.share import FieldShare, IntegerShare, Share
from secretshares.validation import check_compatible


def add(shares: Sequence[Share], *, strict: bool = False) -> Share:
    """Add one participant's shares of several secrets.

    Args:
        shares: Shares with equal domain, field size, degree and x
        strict: Also require equal scale factors on integer shares

    Returns:
        A share of the sum of the secrets

    Raises:
        NoSharesError: If no shares are given
        IncompatibleSharesError: If the shares do not match
    """
    check_compatible(shares, same_point=True, same_scale=strict)

    first = shares[0]
    modulus = first.modulus
    y = first.y
    for share in shares[1:]:
        y += share.y
        if modulus is not None:
            y %= modulus

    return replace(first, y=y)


def multiply(shares: Sequence[Share]) -> Share:
    """Multiply one participant's shares of several secrets.

    Args:
        shares: Shares with equal domain, field size, degree and x

    Returns:
        A share of the product of the secrets, of degree equal to the sum of
        the input degrees

    Raises:
        NoSharesError: If no shares are given
        IncompatibleSharesError: If the shares do not match
    """
    check_compatible(shares, same_point=True)

    first = shares[0]
    y = first.y
    degree = first.degree
    for share in shares[1:]:
        y *= share.y
        degree += share.degree
        if isinstance(first, FieldShare):
            y %= first.field_size

    if isinstance(first, IntegerShare):
        scale_factor = 1
        for share in shares:
            scale_factor *= share.scale_factor
        return replace(first, y=y, degree=degree, scale_factor=scale_factor)

    return replace(first, y=y, degree=degree)
