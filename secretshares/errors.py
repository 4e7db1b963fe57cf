"""Exceptions raised by secret sharing operations.

Every failure is terminal and reported to the caller; nothing is retried or
replaced by a default value. Each exception carries an ``ErrorKind`` so that
callers that need a closed set of failure kinds (e.g. to send over a wire)
can switch on ``exc.kind`` instead of the class.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""
    NO_SHARES = "no_shares"
    TOO_FEW_SHARES = "too_few_shares"
    INCOMPATIBLE_SHARES = "incompatible_shares"
    FRACTIONAL_SECRET = "fractional_secret"
    INVALID_PARAMETERS = "invalid_parameters"


class SecretSharingError(Exception):
    """Secret sharing operation failed."""

    kind: ErrorKind | None = None

    def __init__(self, message: str | None = None):
        super().__init__(message or self.__doc__)


class NoSharesError(SecretSharingError):
    """Empty share collection given."""

    kind = ErrorKind.NO_SHARES


class TooFewSharesError(SecretSharingError):
    """Too few shares given to reconstruct."""

    kind = ErrorKind.TOO_FEW_SHARES

    def __init__(self, needed: int, got: int):
        super().__init__(f"Need at least {needed} shares, got {got}")
        self.needed = needed
        self.got = got


class IncompatibleSharesError(SecretSharingError):
    """Attempted to combine shares with different parameters."""

    kind = ErrorKind.INCOMPATIBLE_SHARES


class FractionalSecretError(SecretSharingError):
    """Reconstruction of the secret failed."""

    kind = ErrorKind.FRACTIONAL_SECRET


class InvalidParametersError(SecretSharingError, ValueError):
    """Sharing parameters are invalid."""

    kind = ErrorKind.INVALID_PARAMETERS
