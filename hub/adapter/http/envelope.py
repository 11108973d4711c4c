"""Response envelope handling for the platform API.

Every response has the shape `{success, message, data?, errors?}`.
`success: false` is an error whatever the HTTP status, and a successful
response without `data` violates the contract.
"""

from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from hub.adapter.error import ApplicationError, ProtocolError
from hub.domain.model.pagination import Pagination

M = TypeVar("M", bound=BaseModel)


class ApiEnvelope(BaseModel):
    """Raw response envelope."""

    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    errors: Optional[Any] = None


def unwrap(envelope: ApiEnvelope, status_code: int | None = None) -> dict[str, Any]:
    """Return the `data` object of a successful envelope.

    Raises:
        ApplicationError: If the server reported a failure
        ProtocolError: If `data` is missing or not an object
    """
    ensure_success(envelope, status_code)
    if envelope.data is None:
        raise ProtocolError("Response is missing its data field", status_code)
    if not isinstance(envelope.data, dict):
        raise ProtocolError("Response data is not an object", status_code)
    return envelope.data


def ensure_success(envelope: ApiEnvelope, status_code: int | None = None) -> None:
    """Raise ApplicationError unless the envelope reports success."""
    if not envelope.success:
        raise ApplicationError(envelope.message, status_code, envelope.errors)


def normalize_identifier(payload: dict[str, Any]) -> dict[str, Any]:
    """Copy `id` into the canonical `_id` field.

    The backend returns either field depending on the storage variant;
    when both are present `id` wins.
    """
    identifier = payload.get("id") or payload.get("_id")
    normalized = {k: v for k, v in payload.items() if k != "id"}
    if identifier is not None:
        normalized["_id"] = identifier
    return normalized


def parse_entity(model: type[M], data: dict[str, Any], key: str) -> M:
    """Parse `data[key]` into an entity.

    Raises:
        ProtocolError: If the key is missing or the payload is invalid
    """
    payload = data.get(key)
    if not isinstance(payload, dict):
        raise ProtocolError(f"Response data is missing '{key}'")
    return _validate(model, payload)


def parse_entities(model: type[M], data: dict[str, Any], key: str) -> list[M]:
    """Parse the list `data[key]` into entities."""
    payloads = data.get(key)
    if not isinstance(payloads, list):
        raise ProtocolError(f"Response data is missing '{key}' list")
    return [_validate(model, payload) for payload in payloads]


def parse_pagination(data: dict[str, Any]) -> Pagination | None:
    """Parse the optional pagination block of a list response."""
    payload = data.get("pagination")
    if payload is None:
        return None
    try:
        return Pagination.model_validate(payload)
    except ValidationError as e:
        raise ProtocolError(f"Invalid pagination: {e}") from e


def _validate(model: type[M], payload: Any) -> M:
    if not isinstance(payload, dict):
        raise ProtocolError(f"Invalid {model.__name__} payload")
    try:
        return model.model_validate(normalize_identifier(payload))
    except ValidationError as e:
        raise ProtocolError(f"Invalid {model.__name__} payload: {e}") from e
