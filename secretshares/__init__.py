"""
secretshares - Threshold secret sharing with homomorphic arithmetic.

Splits a secret into n shares such that any degree + 1 of them reconstruct
it while degree or fewer reveal nothing, and adds or multiplies shares
without reconstructing intermediate secrets. Sharing works over a prime
field (perfectly hiding) or over the integers (statistically hiding, no
modular wraparound).

Example:
    from secretshares import share_finite_field, combine, multiply

    a = share_finite_field(-123, 7919, 2, 5)
    b = share_finite_field(456, 7919, 2, 5)
    product = [multiply([ai, bi]) for ai, bi in zip(a, b)]
    assert combine(product) == (-123 * 456) % 7919
"""

from secretshares.share import (
    Share,
    FieldShare,
    IntegerShare,
    ShareDomain,
)
from secretshares.errors import (
    ErrorKind,
    SecretSharingError,
    NoSharesError,
    TooFewSharesError,
    IncompatibleSharesError,
    FractionalSecretError,
    InvalidParametersError,
)
from secretshares.validation import (
    check_compatible,
    is_probable_prime,
)
from secretshares.schemas import (
    share_to_json,
    share_from_json,
)
from secretshares.config import Settings, get_settings
from secretshares.engine import SecretSharingEngine, secret_sharing_engine

share_finite_field = secret_sharing_engine.share_finite_field
share_integers = secret_sharing_engine.share_integers
combine = secret_sharing_engine.combine
add = secret_sharing_engine.add
multiply = secret_sharing_engine.multiply
recover_share = secret_sharing_engine.recover_share

__version__ = "0.1.0"

__all__ = [
    # Shares
    "Share",
    "FieldShare",
    "IntegerShare",
    "ShareDomain",
    # Operations
    "share_finite_field",
    "share_integers",
    "combine",
    "add",
    "multiply",
    "recover_share",
    "SecretSharingEngine",
    "secret_sharing_engine",
    # Validation
    "check_compatible",
    "is_probable_prime",
    # Transport
    "share_to_json",
    "share_from_json",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "ErrorKind",
    "SecretSharingError",
    "NoSharesError",
    "TooFewSharesError",
    "IncompatibleSharesError",
    "FractionalSecretError",
    "InvalidParametersError",
]
