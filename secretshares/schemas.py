"""Transport schemas for shares.

Shares travel between parties as JSON objects with camelCase keys:

    {"domain": "finite-field", "fieldSize": 7919, "degree": 3, "x": 1, "y": 42}
    {"domain": "integer", "scaleFactor": 120, "degree": 2, "x": 1, "y": 98765}

Integers are JSON numbers of arbitrary size. Encoding goes through the json
module so values beyond 64 bits survive the round trip.
"""

import json
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

from secretshares.errors import InvalidParametersError
from secretshares.share import FieldShare, IntegerShare, Share, ShareDomain


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class _ShareModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    degree: int = Field(ge=0, description="Degree of the sharing polynomial")
    x: int = Field(description="Evaluation point (participant index)")
    y: int = Field(description="Polynomial value at x")


class FieldShareModel(_ShareModel):
    """A Shamir share over a prime field."""

    domain: Literal["finite-field"] = ShareDomain.FINITE_FIELD.value
    field_size: int = Field(ge=2, description="Prime modulus of the field")

    def to_share(self) -> FieldShare:
        return FieldShare(
            field_size=self.field_size,
            degree=self.degree,
            x=self.x,
            y=self.y,
        )


class IntegerShareModel(_ShareModel):
    """A share over the integers."""

    domain: Literal["integer"] = ShareDomain.INTEGER.value
    scale_factor: int = Field(ge=1, description="Accumulated n! scale factor")

    def to_share(self) -> IntegerShare:
        return IntegerShare(
            scale_factor=self.scale_factor,
            degree=self.degree,
            x=self.x,
            y=self.y,
        )


class ShareEnvelope(RootModel):
    """Either share variant, discriminated on ``domain``."""

    root: Annotated[
        Union[FieldShareModel, IntegerShareModel],
        Field(discriminator="domain"),
    ]

    @classmethod
    def from_share(cls, share: Share) -> "ShareEnvelope":
        if isinstance(share, FieldShare):
            return cls(root=FieldShareModel(
                field_size=share.field_size,
                degree=share.degree,
                x=share.x,
                y=share.y,
            ))
        if isinstance(share, IntegerShare):
            return cls(root=IntegerShareModel(
                scale_factor=share.scale_factor,
                degree=share.degree,
                x=share.x,
                y=share.y,
            ))
        raise TypeError(f"Unsupported share type: {type(share).__name__}")

    def to_share(self) -> Share:
        return self.root.to_share()


def share_to_json(share: Share) -> str:
    """Serialize a share to JSON."""
    return json.dumps(ShareEnvelope.from_share(share).model_dump(by_alias=True))


def share_from_json(data: str | bytes) -> Share:
    """Deserialize a share from JSON.

    Raises:
        InvalidParametersError: If the document is not a valid share
    """
    try:
        document = json.loads(data)
    except ValueError as e:
        raise InvalidParametersError(f"Invalid share document: {e}") from e
    return share_from_dict(document)


def share_from_dict(data: dict[str, Any]) -> Share:
    """Create a share from its transport structure.

    Raises:
        InvalidParametersError: If the structure is not a valid share
    """
    try:
        return ShareEnvelope.model_validate(data).to_share()
    except ValidationError as e:
        raise InvalidParametersError(f"Invalid share document: {e}") from e
