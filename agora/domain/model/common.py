"""Base models for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for immutable domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # Entities are replaced, never mutated in place
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class AggregateRoot(BaseModel):
    """Base class for aggregates that are changed through setters.

    Assignments are validated with the same field and model validators as
    construction, so an aggregate cannot be put into an invalid state by
    any setter.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )
