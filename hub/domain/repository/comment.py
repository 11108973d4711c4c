"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import Field

from hub.domain.model.comment import Comment
from hub.domain.model.form import CommentForm
from hub.domain.model.pagination import Page
from hub.domain.value import CommentId, EventId
from hub.domain.value.common import ValueObject


class CommentQuery(ValueObject):
    """Filters for a comment list request.

    `parent_id` distinguishes "not given" from an explicit None:
    - omitted: no parent filter (replies are listed too)
    - None: top-level comments only
    - an id: direct replies of that comment
    """

    page: Optional[int] = Field(default=None, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    approved: Optional[bool] = None
    event_id: Optional[EventId] = None
    parent_id: Optional[CommentId] = None

    @property
    def filters_parent(self) -> bool:
        """Whether a parent filter was requested (including None)."""
        return "parent_id" in self.model_fields_set

    @property
    def top_level_only(self) -> bool:
        return self.filters_parent and self.parent_id is None

    def without_approved(self) -> "CommentQuery":
        """Copy of this query with the approved filter dropped."""
        fields = self.model_dump(exclude={"approved"}, exclude_unset=True)
        return CommentQuery(**fields)

    def to_params(self) -> dict[str, str]:
        """Query string parameters, in the API's camelCase."""
        params: dict[str, str] = {}
        if self.page:
            params["page"] = str(self.page)
        if self.limit:
            params["limit"] = str(self.limit)
        if self.approved is not None:
            params["approved"] = "true" if self.approved else "false"
        if self.event_id:
            params["eventId"] = self.event_id
        if self.filters_parent:
            params["parentId"] = "null" if self.parent_id is None else self.parent_id
        return params


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for the comment endpoints of the platform API.
    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def find_page(self, query: CommentQuery) -> Page[Comment]:
        """List comments matching a query.

        Args:
            query: Pagination and filters

        Returns:
            One page of comments with pagination metadata
        """
        pass

    @abstractmethod
    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        """List the direct replies of a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Replies of the comment
        """
        pass

    @abstractmethod
    async def create(self, form: CommentForm) -> Comment:
        """Submit a new comment. The server stores it unapproved.

        Args:
            form: Validated comment form

        Returns:
            The created comment
        """
        pass

    @abstractmethod
    async def set_approval(self, comment_id: CommentId, is_approved: bool) -> Comment:
        """Approve or reject a comment (admin).

        Args:
            comment_id: The comment ID
            is_approved: New approval state

        Returns:
            The updated comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment permanently (admin).

        Args:
            comment_id: The comment ID to delete
        """
        pass
