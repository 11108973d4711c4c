"""HTTP client for the community hub REST API."""

from typing import Any, Optional

import httpx
import logfire
from pydantic import ValidationError

from hub.adapter.error import (
    ApplicationError,
    ProtocolError,
    TransportError,
    UnauthorizedError,
)
from hub.adapter.http.envelope import ApiEnvelope
from hub.adapter.http.session import AuthSession


class ApiClient:
    """Thin async wrapper around httpx for the platform API.

    Attaches the admin bearer token, decodes the response envelope and maps
    failures onto the adapter error hierarchy. No retries are performed:
    each call is attempted exactly once.
    """

    def __init__(
        self,
        base_url: str,
        session: AuthSession,
        timeout: float | None = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize API client.

        Args:
            base_url: API base URL including the /api prefix
            session: Shared authentication session
            timeout: Request timeout in seconds
            transport: Custom transport (tests use httpx.MockTransport)
        """
        self.session = session
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    async def get(self, path: str, params: Optional[dict[str, str]] = None) -> ApiEnvelope:
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: Optional[dict[str, Any]] = None) -> ApiEnvelope:
        return await self._request("POST", path, json=body)

    async def put(self, path: str, body: Optional[dict[str, Any]] = None) -> ApiEnvelope:
        return await self._request("PUT", path, json=body)

    async def delete(self, path: str) -> ApiEnvelope:
        return await self._request("DELETE", path)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> ApiEnvelope:
        """Send a request and decode its envelope.

        Raises:
            TransportError: If no response was received
            UnauthorizedError: If the server rejected the token (session is cleared)
            ApplicationError: If the server reported a failure (any status)
            ProtocolError: If the body is not a valid envelope
        """
        headers = {}
        if self.session.token:
            headers["Authorization"] = f"Bearer {self.session.token}"

        try:
            response = await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logfire.error("API request failed", method=method, path=path, error=str(e))
            raise TransportError() from e

        envelope = self._decode(response)

        if response.status_code == 401:
            logfire.warn("API token rejected, clearing session", path=path)
            self.session.clear()
            raise UnauthorizedError(
                envelope.message if envelope else "Unauthorized", 401
            )

        if envelope is None:
            if response.is_error:
                logfire.error(
                    "API error without envelope",
                    method=method,
                    path=path,
                    status_code=response.status_code,
                )
                raise ApplicationError(
                    f"Request failed with status {response.status_code}",
                    response.status_code,
                )
            raise ProtocolError("Response is not a valid envelope", response.status_code)

        # An error status is a failure even with a success flag
        if response.is_error or not envelope.success:
            logfire.warn(
                "API reported failure",
                method=method,
                path=path,
                status_code=response.status_code,
                message=envelope.message,
            )
            raise ApplicationError(envelope.message, response.status_code, envelope.errors)

        return envelope

    @staticmethod
    def _decode(response: httpx.Response) -> Optional[ApiEnvelope]:
        try:
            return ApiEnvelope.model_validate(response.json())
        except (ValueError, ValidationError):
            return None
