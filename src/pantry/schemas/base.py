"""Base schema configuration for all Pydantic models.

Usage:
    - DomainRecord: records that come from the pantry store (inventory items,
      recipes). Extra fields are ignored so upstream ingestion can attach
      bookkeeping columns without breaking parsing.
    - DerivedResult: values produced by the engine (match results, pairing
      suggestions, shopping list rows). Extra fields are forbidden.

Both are frozen: the engine never mutates its inputs or outputs.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        # camelCase on the wire, snake_case in Python
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
        use_enum_values=True,
        validate_default=True,
        frozen=True,
    )


class DomainRecord(_BaseSchema):
    """Base class for records read from the pantry store."""

    model_config = ConfigDict(
        extra="ignore",
    )


class DerivedResult(_BaseSchema):
    """Base class for results computed by the engine."""

    model_config = ConfigDict(
        extra="forbid",
    )
