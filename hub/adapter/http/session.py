"""Authentication session shared by the API client and the auth store."""

from typing import Optional

from hub.domain.model.user import User


class AuthSession:
    """Holds the admin bearer token for outgoing requests.

    One instance is shared per container; the API client reads the token
    on every request and clears the session when the server answers 401.
    """

    def __init__(self) -> None:
        self.token: Optional[str] = None
        self.user: Optional[User] = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def start(self, token: str, user: User) -> None:
        self.token = token
        self.user = user

    def clear(self) -> None:
        self.token = None
        self.user = None
