"""HTTP gallery repository."""

from typing import Optional

from hub.adapter.http.client import ApiClient
from hub.adapter.http.envelope import (
    ensure_success,
    parse_entities,
    parse_entity,
    parse_pagination,
    unwrap,
)
from hub.domain.model.form import GalleryImageForm
from hub.domain.model.gallery import GalleryImage
from hub.domain.model.pagination import Page
from hub.domain.repository.gallery import GalleryRepository
from hub.domain.value import GalleryImageId


class HttpGalleryRepository(GalleryRepository):
    """Gallery repository backed by the /gallery endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self.client = client

    async def find_page(
        self, page: Optional[int] = None, limit: Optional[int] = None
    ) -> Page[GalleryImage]:
        params: dict[str, str] = {}
        if page:
            params["page"] = str(page)
        if limit:
            params["limit"] = str(limit)

        data = unwrap(await self.client.get("/gallery", params=params))
        return Page[GalleryImage](
            items=parse_entities(GalleryImage, data, "images"),
            pagination=parse_pagination(data),
        )

    async def create(self, form: GalleryImageForm) -> GalleryImage:
        data = unwrap(await self.client.post("/gallery", form.to_payload()))
        return parse_entity(GalleryImage, data, "galleryImage")

    async def delete(self, image_id: GalleryImageId) -> None:
        ensure_success(await self.client.delete(f"/gallery/{image_id}"))
