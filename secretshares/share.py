"""Share data types.

A share is one participant's fragment of a secret: the value ``y`` of a
secret polynomial at the participant's evaluation point ``x``. Shares come in
two variants, one per sharing domain:

- ``FieldShare``: Shamir sharing modulo a prime ``field_size``.
- ``IntegerShare``: sharing over the integers, with the secret embedded
  multiplied by ``scale_factor`` (n! at generation time).

Shares are immutable. Use ``dataclasses.replace`` to derive a modified copy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar


class ShareDomain(str, Enum):
    """Domain a share was produced in."""
    FINITE_FIELD = "finite-field"
    INTEGER = "integer"


@dataclass(frozen=True, kw_only=True)
class Share:
    """A single share of a secret.

    Attributes:
        degree: Degree of the sharing polynomial; degree + 1 shares are
            needed to reconstruct
        x: Evaluation point (participant index, 1..n)
        y: Polynomial value at x
    """

    domain: ClassVar[ShareDomain]

    degree: int
    x: int
    y: int

    @property
    def modulus(self) -> int | None:
        """Field modulus, or None for integer shares."""
        return None

    @property
    def threshold(self) -> int:
        """Minimum number of shares needed to reconstruct."""
        return self.degree + 1

    def is_compatible_with(self, other: "Share") -> bool:
        """Same domain and, for field shares, same field size."""
        return self.domain is other.domain and self.modulus == other.modulus

    def to_dict(self) -> dict[str, Any]:
        """Transport structure with camelCase keys."""
        raise NotImplementedError

    def to_json(self) -> str:
        """Serialize share to a JSON string."""
        from secretshares.schemas import share_to_json

        return share_to_json(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Share":
        """Create a share of the right variant from its transport structure."""
        from secretshares.schemas import share_from_dict

        share = share_from_dict(data)
        if not isinstance(share, cls):
            raise TypeError(f"Expected {cls.__name__}, got {type(share).__name__}")
        return share


@dataclass(frozen=True, kw_only=True)
class FieldShare(Share):
    """Shamir share over the field of integers modulo a prime."""

    domain: ClassVar[ShareDomain] = ShareDomain.FINITE_FIELD

    field_size: int

    @property
    def modulus(self) -> int | None:
        return self.field_size

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain.value,
            "fieldSize": self.field_size,
            "degree": self.degree,
            "x": self.x,
            "y": self.y,
        }


@dataclass(frozen=True, kw_only=True)
class IntegerShare(Share):
    """Share over the integers."""

    domain: ClassVar[ShareDomain] = ShareDomain.INTEGER

    scale_factor: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain.value,
            "scaleFactor": self.scale_factor,
            "degree": self.degree,
            "x": self.x,
            "y": self.y,
        }
