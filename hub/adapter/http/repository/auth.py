"""HTTP authentication repository."""

import logfire

from hub.adapter.error import ProtocolError
from hub.adapter.http.client import ApiClient
from hub.adapter.http.envelope import parse_entity, unwrap
from hub.domain.model.form import LoginForm
from hub.domain.model.user import User
from hub.domain.repository.auth import AuthRepository


class HttpAuthRepository(AuthRepository):
    """Authentication backed by the /auth endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def login(self, form: LoginForm) -> tuple[User, str]:
        with logfire.span("auth_repository.login", email=form.email):
            data = unwrap(await self.client.post("/auth/login", form.to_payload()))
            token = data.get("token")
            if not isinstance(token, str) or not token:
                raise ProtocolError("Login response is missing its token")
            return parse_entity(User, data, "user"), token

    async def validate(self) -> User:
        data = unwrap(await self.client.get("/auth/validate"))
        return parse_entity(User, data, "user")
