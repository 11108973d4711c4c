"""In-memory gallery repository for testing."""

from typing import Optional

from hub.adapter.error import ApplicationError
from hub.adapter.inmemory.common import new_id, now, paginate
from hub.domain.model.form import GalleryImageForm
from hub.domain.model.gallery import GalleryImage
from hub.domain.model.pagination import Page
from hub.domain.repository.gallery import GalleryRepository
from hub.domain.value import GalleryImageId


class InMemoryGalleryRepository(GalleryRepository):
    """In-memory implementation of GalleryRepository for testing."""

    def __init__(self) -> None:
        self._images: dict[GalleryImageId, GalleryImage] = {}

    async def find_page(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[GalleryImage]:
        images = sorted(
            self._images.values(), key=lambda i: i.created_at or now(), reverse=True
        )
        return paginate(images, page, limit)

    async def create(self, form: GalleryImageForm) -> GalleryImage:
        timestamp = now()
        image = GalleryImage(
            id=GalleryImageId(new_id()),
            image_url=form.image_url,
            title=form.title,
            description=form.description,
            caption=form.title,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._images[image.id] = image
        return image

    async def delete(self, image_id: GalleryImageId) -> None:
        if self._images.pop(image_id, None) is None:
            raise ApplicationError("Gallery image not found", 404)
