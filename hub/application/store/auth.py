"""Admin authentication store."""

from typing import Optional

import logfire

from hub.adapter.error import AdapterError, error_message
from hub.adapter.http.session import AuthSession
from hub.application.store.base import Store
from hub.domain.model.form import LoginForm, parse_form
from hub.domain.model.user import User
from hub.domain.repository.auth import AuthRepository


class AuthStore(Store):
    """Sign-in state of the admin dashboard.

    The token lives in the shared AuthSession so the API client can attach
    it to every request.
    """

    name = "auth_store"

    def __init__(self, auth_repository: AuthRepository, session: AuthSession) -> None:
        super().__init__()
        self.auth_repository = auth_repository
        self.session = session

    @property
    def user(self) -> Optional[User]:
        return self.session.user

    @property
    def token(self) -> Optional[str]:
        return self.session.token

    @property
    def is_authenticated(self) -> bool:
        return self.session.is_authenticated

    def _reset_state(self) -> None:
        self.session.clear()

    async def login(self, email: str, password: str) -> User:
        """Sign in with admin credentials.

        Raises:
            ValidationError: If the credentials are malformed
            AdapterError: If the server rejects them (message kept in `error`)
        """
        form = parse_form(LoginForm, {"email": email, "password": password})
        self.error = None
        try:
            user, token = await self._mutate(
                "login",
                lambda: self.auth_repository.login(form),
                lambda result: self.session.start(result[1], result[0]),
            )
        except AdapterError as e:
            self.error = error_message(e)
            self._notify()
            raise
        logfire.info("Admin signed in", user_id=user.id)
        return user

    async def validate_token(self) -> bool:
        """Check the held token, signing out if it is no longer valid."""
        if not self.session.is_authenticated:
            return False

        with logfire.span(f"{self.name}.validate_token"):
            try:
                user = await self.auth_repository.validate()
            except AdapterError as e:
                logfire.info("Token rejected, signing out", error=str(e))
                self.logout()
                return False

        self.session.user = user
        self._notify()
        return True

    def logout(self) -> None:
        self.session.clear()
        self.error = None
        self._notify()
