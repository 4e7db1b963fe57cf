"""Share compatibility and parameter checks."""

import secrets
from typing import Sequence

from secretshares.errors import (
    IncompatibleSharesError,
    InvalidParametersError,
    NoSharesError,
)
from secretshares.share import IntegerShare, Share


def check_compatible(
    shares: Sequence[Share],
    same_point: bool = False,
    same_scale: bool = False,
) -> None:
    """Check that shares can be combined with each other.

    All shares must match the first one in domain, field size and degree.

    Args:
        shares: Shares to check
        same_point: Also require equal evaluation points (add/multiply)
        same_scale: Also require equal scale factors on integer shares

    Raises:
        NoSharesError: If no shares are given
        IncompatibleSharesError: On the first mismatch
    """
    if not shares:
        raise NoSharesError()

    first = shares[0]
    for share in shares[1:]:
        if not first.is_compatible_with(share):
            raise IncompatibleSharesError(
                f"Cannot combine {first.domain.value} share (modulus={first.modulus}) "
                f"with {share.domain.value} share (modulus={share.modulus})"
            )
        if share.degree != first.degree:
            raise IncompatibleSharesError(
                f"Shares have different degrees: {first.degree} and {share.degree}"
            )
        if same_point and share.x != first.x:
            raise IncompatibleSharesError(
                f"Shares belong to different participants: x={first.x} and x={share.x}"
            )
        if (
            same_scale
            and isinstance(first, IntegerShare)
            and share.scale_factor != first.scale_factor
        ):
            raise IncompatibleSharesError("Shares have different scale factors")


def check_distinct_points(
    shares: Sequence[Share],
    require_positive: bool = False,
) -> None:
    """Check that evaluation points are distinct (and optionally positive).

    Raises:
        InvalidParametersError: On a duplicate or non-positive point
    """
    seen: set[int] = set()
    for share in shares:
        if require_positive and share.x <= 0:
            raise InvalidParametersError(f"Evaluation point must be positive, got x={share.x}")
        if share.x in seen:
            raise InvalidParametersError(f"Duplicate share index x={share.x}")
        seen.add(share.x)


def is_probable_prime(n: int, rounds: int = 40) -> bool:
    """Miller-Rabin probabilistic primality test.

    A composite passes with probability at most 4^-rounds.
    """
    if n < 2:
        return False
    for p in (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37):
        if n % p == 0:
            return n == p

    # Write n-1 as d*2^s
    s = 0
    d = n - 1
    while d % 2 == 0:
        d //= 2
        s += 1

    for _ in range(rounds):
        a = secrets.randbelow(n - 3) + 2
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def check_sharing_parameters(degree: int, n_shares: int, strict: bool = False) -> None:
    """Validate degree and share count common to both generators.

    Raises:
        InvalidParametersError: If parameters are invalid
    """
    if n_shares < 1:
        raise InvalidParametersError(f"Share count must be at least 1, got {n_shares}")
    if degree < 0:
        raise InvalidParametersError(f"Degree must be non-negative, got {degree}")
    if strict and degree >= n_shares:
        raise InvalidParametersError(
            f"Degree {degree} needs {degree + 1} shares to reconstruct, "
            f"only {n_shares} would be generated"
        )


def check_field_size(field_size: int, strict: bool = False, rounds: int = 40) -> None:
    """Validate a field modulus.

    Primality is only tested in strict mode.

    Raises:
        InvalidParametersError: If the modulus is invalid
    """
    if field_size < 2:
        raise InvalidParametersError(f"Field size must be at least 2, got {field_size}")
    if strict and not is_probable_prime(field_size, rounds):
        raise InvalidParametersError(f"Field size {field_size} is not prime")


def check_integer_parameters(
    secret: int,
    secret_upper_bound: int,
    stat_sec_param: int,
    strict: bool = False,
) -> None:
    """Validate integer sharing parameters.

    Raises:
        InvalidParametersError: If parameters are invalid
    """
    if secret_upper_bound < 1:
        raise InvalidParametersError(
            f"Secret upper bound must be positive, got {secret_upper_bound}"
        )
    if stat_sec_param < 0:
        raise InvalidParametersError(
            f"Statistical security parameter must be non-negative, got {stat_sec_param}"
        )
    if strict and abs(secret) > secret_upper_bound:
        raise InvalidParametersError("Secret exceeds the given upper bound")
