"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and the camelCase wire
    format used by the platform API. Fields can be populated by their
    Python name as well as by alias.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
        alias_generator=to_camel,
        populate_by_name=True,
    )
