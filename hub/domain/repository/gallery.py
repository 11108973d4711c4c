"""Gallery repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model.form import GalleryImageForm
from hub.domain.model.gallery import GalleryImage
from hub.domain.model.pagination import Page
from hub.domain.value import GalleryImageId


class GalleryRepository(ABC):
    """Repository for gallery images."""

    @abstractmethod
    async def find_page(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[GalleryImage]:
        pass

    @abstractmethod
    async def create(self, form: GalleryImageForm) -> GalleryImage:
        pass

    @abstractmethod
    async def delete(self, image_id: GalleryImageId) -> None:
        pass
