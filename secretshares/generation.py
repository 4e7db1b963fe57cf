"""Share generation.

Both generators build a random polynomial f of the requested degree whose
constant term embeds the secret, and hand participant i (1..n) the value
f(i):

- ``share_finite_field``: Shamir sharing modulo a prime. Perfectly hiding:
  any ``degree`` shares are independent of the secret.
- ``share_integers``: sharing over the integers without modular reduction.
  Statistically hiding: coefficients are drawn from a range
  2^sigma * n^2 * B wide, so ``degree`` shares are within 2^-sigma
  statistical distance of being independent of any secret with |s| <= B.
  The secret is multiplied by n! so reconstruction can divide out the
  Lagrange denominators exactly.

References:
- Shamir, A. "How to share a secret." Communications of the ACM, 1979
- Damgard, I., Thorbek, R. "Linear integer secret sharing and distributed
  exponentiation." PKC 2006
"""

import math
import secrets
from typing import Callable

from secretshares.logging import get_logger
from secretshares.polynomial import evaluate_polynomial
from secretshares.share import FieldShare, IntegerShare, ShareDomain
from secretshares.validation import (
    check_field_size,
    check_integer_parameters,
    check_sharing_parameters,
)

logger = get_logger(__name__)

# Uniform integer in [0, bound) from a cryptographically secure source
RandomBelow = Callable[[int], int]


def share_finite_field(
    secret: int,
    field_size: int,
    degree: int,
    n_shares: int,
    random_below: RandomBelow = secrets.randbelow,
    *,
    strict: bool = False,
    primality_rounds: int = 40,
) -> list[FieldShare]:
    """Share a secret over the field of integers modulo ``field_size``.

    The caller must ensure ``field_size`` is prime (checked only when
    ``strict`` is set). ``degree + 1`` shares are needed to reconstruct.

    Args:
        secret: The secret; reduced modulo field_size
        field_size: Prime modulus
        degree: Polynomial degree
        n_shares: Number of shares to create
        random_below: Secure source of uniform integers in [0, bound)
        strict: Also check primality and degree < n_shares
        primality_rounds: Miller-Rabin rounds in strict mode

    Returns:
        Shares for participants x = 1..n_shares

    Raises:
        InvalidParametersError: If parameters are invalid
    """
    check_sharing_parameters(degree, n_shares, strict=strict)
    check_field_size(field_size, strict=strict, rounds=primality_rounds)

    coefficients = [secret % field_size]
    for _ in range(degree):
        coefficients.append(random_below(field_size))

    shares = [
        FieldShare(
            field_size=field_size,
            degree=degree,
            x=x,
            y=evaluate_polynomial(coefficients, x, field_size),
        )
        for x in range(1, n_shares + 1)
    ]

    logger.debug(
        "Shares generated",
        domain=ShareDomain.FINITE_FIELD.value,
        degree=degree,
        n_shares=n_shares,
        field_bits=field_size.bit_length(),
    )
    return shares


def share_integers(
    secret: int,
    secret_upper_bound: int,
    stat_sec_param: int,
    degree: int,
    n_shares: int,
    random_below: RandomBelow = secrets.randbelow,
    *,
    strict: bool = False,
) -> list[IntegerShare]:
    """Share a secret over the integers.

    Args:
        secret: The secret, |secret| <= secret_upper_bound
        secret_upper_bound: Known bound on the secret's magnitude
        stat_sec_param: Statistical security in bits
        degree: Polynomial degree
        n_shares: Number of shares to create
        random_below: Secure source of uniform integers in [0, bound)
        strict: Also check |secret| <= bound and degree < n_shares

    Returns:
        Shares for participants x = 1..n_shares, each with scale factor n_shares!

    Raises:
        InvalidParametersError: If parameters are invalid
    """
    check_sharing_parameters(degree, n_shares, strict=strict)
    check_integer_parameters(secret, secret_upper_bound, stat_sec_param, strict=strict)

    coefficient_bound = (1 << stat_sec_param) * n_shares * n_shares * secret_upper_bound
    scale_factor = math.factorial(n_shares)

    coefficients = [secret * scale_factor]
    for _ in range(degree):
        coefficients.append(random_below(coefficient_bound))

    shares = [
        IntegerShare(
            scale_factor=scale_factor,
            degree=degree,
            x=x,
            y=evaluate_polynomial(coefficients, x),
        )
        for x in range(1, n_shares + 1)
    ]

    logger.debug(
        "Shares generated",
        domain=ShareDomain.INTEGER.value,
        degree=degree,
        n_shares=n_shares,
        stat_sec_param=stat_sec_param,
    )
    return shares
