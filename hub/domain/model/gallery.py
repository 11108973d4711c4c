"""Gallery image entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from hub.domain.model.common import DomainModel
from hub.domain.value import GalleryImageId, UserId


class Uploader(DomainModel):
    """Admin who uploaded an image."""

    id: UserId = Field(alias="_id")
    email: str


class GalleryImage(DomainModel):
    """Image shown in the public gallery."""

    id: GalleryImageId = Field(alias="_id")
    image_url: str
    title: Optional[str] = None
    description: Optional[str] = None
    caption: str = ""
    uploaded_by: Optional[Uploader] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
