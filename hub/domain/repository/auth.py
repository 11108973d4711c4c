"""Authentication repository interface."""

from abc import ABC, abstractmethod

from hub.domain.model.form import LoginForm
from hub.domain.model.user import User


class AuthRepository(ABC):
    """Admin authentication against the platform API."""

    @abstractmethod
    async def login(self, form: LoginForm) -> tuple[User, str]:
        """Exchange credentials for a bearer token.

        Returns:
            The signed-in user and their token
        """
        pass

    @abstractmethod
    async def validate(self) -> User:
        """Check the current bearer token and return its user."""
        pass
