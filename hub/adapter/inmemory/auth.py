"""In-memory authentication repository for testing."""

from secrets import token_urlsafe

from hub.adapter.error import ApplicationError, UnauthorizedError
from hub.adapter.http.session import AuthSession
from hub.adapter.inmemory.common import new_id
from hub.domain.model.form import LoginForm
from hub.domain.model.user import User
from hub.domain.repository.auth import AuthRepository
from hub.domain.value import UserId


class InMemoryAuthRepository(AuthRepository):
    """In-memory implementation of AuthRepository for testing.

    Reads the bearer token from the shared session, like the HTTP client,
    and clears the session when the token is rejected.
    """

    def __init__(self, session: AuthSession) -> None:
        self.session = session
        self._accounts: dict[str, tuple[str, User]] = {}
        self._tokens: dict[str, User] = {}

    def register(self, email: str, password: str, name: str = "") -> User:
        """Create an admin account (test seeding)."""
        user = User(id=UserId(new_id()), email=email, name=name)
        self._accounts[email] = (password, user)
        return user

    def revoke(self, token: str) -> None:
        """Invalidate a token server-side (test helper)."""
        self._tokens.pop(token, None)

    async def login(self, form: LoginForm) -> tuple[User, str]:
        account = self._accounts.get(form.email)
        if account is None or account[0] != form.password:
            raise ApplicationError("Invalid email or password", 400)
        token = token_urlsafe(16)
        self._tokens[token] = account[1]
        return account[1], token

    async def validate(self) -> User:
        user = self._tokens.get(self.session.token or "")
        if user is None:
            self.session.clear()
            raise UnauthorizedError("Invalid or expired token", 401)
        return user
