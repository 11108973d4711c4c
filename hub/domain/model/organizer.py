"""Organizer entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hub.domain.model.common import DomainModel
from hub.domain.value import OrganizerId


class SocialLinks(DomainModel):
    """Optional social profiles of an organizer."""

    whatsapp: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None


class Organizer(DomainModel):
    """Member of the organizing team."""

    id: OrganizerId = Field(alias="_id")
    name: str
    position: str = ""
    bio: str = ""
    profile_image_url: str = ""
    social_links: Optional[SocialLinks] = None
    phone_number: str = ""
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
