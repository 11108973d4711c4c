"""Pagination envelope attached to list responses."""

from typing import Generic, TypeVar

from pydantic import Field, model_validator

from hub.domain.value.common import ValueObject

T = TypeVar("T")


class Pagination(ValueObject):
    """Position of a page within a paginated result set."""

    current: int = Field(ge=1)
    pages: int = Field(ge=0)
    total: int = Field(ge=0)

    @model_validator(mode="after")
    def validate_position(self) -> "Pagination":
        """Current page must exist, except for an empty result set."""
        if self.current > self.pages and self.total > 0:
            raise ValueError(
                f"Current page {self.current} exceeds page count {self.pages}"
            )
        return self

    @property
    def has_next(self) -> bool:
        return self.current < self.pages

    @property
    def has_previous(self) -> bool:
        return self.current > 1


class Page(ValueObject, Generic[T]):
    """A list result together with its pagination metadata (if any)."""

    items: list[T]
    pagination: Pagination | None = None
