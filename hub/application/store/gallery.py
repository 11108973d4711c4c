"""Gallery aggregate store."""

from collections.abc import Mapping
from typing import Any, Optional

from hub.application.store.base import Store
from hub.domain.model.form import GalleryImageForm, parse_form
from hub.domain.model.gallery import GalleryImage
from hub.domain.model.pagination import Page, Pagination
from hub.domain.repository.gallery import GalleryRepository
from hub.domain.value import GalleryImageId


class GalleryStore(Store):
    name = "gallery_store"

    def __init__(self, gallery_repository: GalleryRepository) -> None:
        super().__init__()
        self.gallery_repository = gallery_repository
        self.images: list[GalleryImage] = []
        self.pagination: Optional[Pagination] = None

    def _reset_state(self) -> None:
        self.images = []
        self.pagination = None

    async def fetch_images(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> None:
        await self._fetch(
            "fetch_images",
            lambda: self.gallery_repository.find_page(page=page, limit=limit),
            self._apply_listing,
        )

    async def create_image(self, form: GalleryImageForm | Mapping[str, Any]) -> GalleryImage:
        image_form = parse_form(GalleryImageForm, form)
        return await self._mutate(
            "create_image",
            lambda: self.gallery_repository.create(image_form),
            lambda image: setattr(self, "images", [image, *self.images]),
        )

    async def delete_image(self, image_id: GalleryImageId) -> None:
        await self._mutate(
            "delete_image",
            lambda: self.gallery_repository.delete(image_id),
            lambda _: setattr(
                self, "images", [i for i in self.images if i.id != image_id]
            ),
        )

    def _apply_listing(self, page: Page[GalleryImage]) -> None:
        self.images = page.items
        self.pagination = page.pagination
