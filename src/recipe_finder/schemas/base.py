"""Base classes for the service's pydantic models.

Usage:
    - APIResponse: records and bodies served by this service, camelCase on
      the wire and accepted in either case on input
    - GatewayPayload: JSON received from the recipe gateway, whose field
      names are fixed upstream and must not be re-aliased
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIResponse(BaseModel):
    """Base class for records and response bodies.

    Extra fields are forbidden so a response only ever carries what its
    schema declares.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Accept both snake_case and camelCase
        use_enum_values=True,
        validate_default=True,
        validate_assignment=True,
        serialize_by_alias=True,
        extra="forbid",
    )


class GatewayPayload(BaseModel):
    """Base class for gateway responses.

    Unknown fields are ignored; the gateway adds fields (``strTags``,
    ``dateModified`` and the like) that nothing here reads.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)
