"""Admin user entity."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from hub.domain.model.common import DomainModel
from hub.domain.value import UserId


class User(DomainModel):
    """Authenticated dashboard user. Only admins can sign in."""

    id: UserId = Field(alias="_id")
    email: str
    role: Literal["admin"] = "admin"
    name: str = ""
    phone_number: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""
    profile_image_url: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
