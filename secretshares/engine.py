"""Secret Sharing Engine.

Binds the sharing operations to a randomness source and to the validation
settings. Splits secrets into shares where a threshold number is required
for reconstruction, and computes on shares without reconstructing.

Security Properties:
- Finite field: information-theoretic; degree shares reveal nothing
- Integers: statistical; degree shares reveal at most 2^-sigma
- No computational assumptions required

Use Cases:
- Multiparty computation on shared inputs (sums, products)
- Distributed key management and backup
- Multi-party authorization

Usage:
    engine = SecretSharingEngine()

    # 4 shares each of 123 and 456 over GF(7919), degree 3
    a = engine.share_finite_field(123, 7919, degree=3, n_shares=4)
    b = engine.share_finite_field(456, 7919, degree=3, n_shares=4)

    # Each participant adds locally
    total = [engine.add([ai, bi]) for ai, bi in zip(a, b)]
    assert engine.combine(total) == 579
"""

import secrets
from typing import Sequence

from secretshares import arithmetic, generation, reconstruction
from secretshares.config import Settings, get_settings
from secretshares.generation import RandomBelow
from secretshares.logging import log_operation
from secretshares.share import FieldShare, IntegerShare, Share


class SecretSharingEngine:
    """Threshold secret sharing over finite fields and over the integers.

    Args:
        random_below: Secure source of uniform integers in [0, bound).
            Defaults to ``secrets.randbelow``; an injected source must be
            thread-safe if the engine is shared between threads.
        strict: Enable strict validation (defaults to settings.strict_validation)
        settings: Settings to use (defaults to get_settings())
    """

    def __init__(
        self,
        random_below: RandomBelow | None = None,
        strict: bool | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or get_settings()
        self.random_below = random_below or secrets.randbelow
        self.strict = self.settings.strict_validation if strict is None else strict

    @log_operation("share_finite_field")
    def share_finite_field(
        self,
        secret: int,
        field_size: int,
        degree: int,
        n_shares: int,
    ) -> list[FieldShare]:
        """Share a secret modulo a prime field size."""
        return generation.share_finite_field(
            secret,
            field_size,
            degree,
            n_shares,
            self.random_below,
            strict=self.strict,
            primality_rounds=self.settings.primality_rounds,
        )

    @log_operation("share_integers")
    def share_integers(
        self,
        secret: int,
        secret_upper_bound: int,
        stat_sec_param: int | None,
        degree: int,
        n_shares: int,
    ) -> list[IntegerShare]:
        """Share a secret over the integers.

        Pass ``stat_sec_param=None`` to use settings.default_stat_sec_param.
        """
        if stat_sec_param is None:
            stat_sec_param = self.settings.default_stat_sec_param
        return generation.share_integers(
            secret,
            secret_upper_bound,
            stat_sec_param,
            degree,
            n_shares,
            self.random_below,
            strict=self.strict,
        )

    @log_operation("combine")
    def combine(self, shares: Sequence[Share]) -> int:
        """Reconstruct a secret from at least degree + 1 shares."""
        return reconstruction.combine(shares, strict=self.strict)

    @log_operation("add")
    def add(self, shares: Sequence[Share]) -> Share:
        """Share of the sum of the secrets, from one participant's shares."""
        return arithmetic.add(shares, strict=self.strict)

    @log_operation("multiply")
    def multiply(self, shares: Sequence[Share]) -> Share:
        """Share of the product of the secrets, from one participant's shares."""
        return arithmetic.multiply(shares)

    @log_operation("recover_share")
    def recover_share(self, shares: Sequence[Share], x: int) -> Share:
        """Recompute the share at evaluation point x."""
        return reconstruction.recover_share(shares, x, strict=self.strict)


# Singleton instance
secret_sharing_engine = SecretSharingEngine()
