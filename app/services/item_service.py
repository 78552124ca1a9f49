"""
Item service - catalog use cases: fiches, their photos, soft delete and restore.
Keeps controllers thin; raises domain errors from app.core.exceptions.
"""

import base64
import binascii
import logging
import re
from datetime import datetime, timezone

from app.core.exceptions import NotFound, ValidationError
from app.db.models.item import Item
from app.db.models.photo import Photo
from app.db.models.user import User
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.photo_repository import PhotoRepository
from app.schemas.item import ItemCreate, ItemResponse, ItemUpdate, PhotoResponse

logger = logging.getLogger(__name__)

DATA_URL_RE = re.compile(r"data:image/[\w.+-]+;base64,(?P<payload>[A-Za-z0-9+/]+={0,2})")

UPDATABLE_FIELDS = ("title", "description", "value")


def validate_photo_data(data: str, max_bytes: int) -> str:
    """Check that data is a base64 image data URL whose decoded size fits max_bytes."""
    match = DATA_URL_RE.fullmatch(data)
    if match is None:
        raise ValidationError("Photo must be a base64 image data URL")
    try:
        raw = base64.b64decode(match["payload"], validate=True)
    except binascii.Error:
        raise ValidationError("Photo payload is not valid base64") from None
    if len(raw) > max_bytes:
        raise ValidationError(f"Photo exceeds {max_bytes // (1024 * 1024)} MB")
    return data


def item_to_response(item: Item, **enrichment) -> ItemResponse:
    """Map a detail-loaded item (photos + deleter) to the canonical response plus optional view fields."""
    resp = ItemResponse.model_validate(item)
    resp.photos = sorted(resp.photos, key=lambda p: (p.position, p.id))
    if item.deleter is not None:
        resp.deleted_by_name = item.deleter.name
    for name, value in enrichment.items():
        setattr(resp, name, value)
    return resp


class ItemService:
    """Handles fiche use cases. Every mutation re-reads the item so responses carry fresh photos."""

    def __init__(self, item_repo: ItemRepository, photo_repo: PhotoRepository, max_photo_bytes: int):
        self.item_repo = item_repo
        self.photo_repo = photo_repo
        self.max_photo_bytes = max_photo_bytes

    async def _get_or_404(self, id: int) -> Item:
        item = await self.item_repo.get_with_photos(id)
        if item is None:
            raise NotFound("Item not found")
        return item

    async def create(self, data: ItemCreate, user: User) -> ItemResponse:
        """Create a fiche numbered max+1 with its first photo at position 0."""
        photo_data = validate_photo_data(data.photo, self.max_photo_bytes)
        number = await self.item_repo.next_number()
        item = await self.item_repo.add(
            Item(
                number=number,
                title=data.title,
                description=data.description,
                value=data.value,
                created_by=user.id,
            )
        )
        await self.photo_repo.add(Photo(item_id=item.id, data=photo_data, position=0))
        logger.info("User %s created item #%s (id=%s)", user.id, number, item.id)
        return item_to_response(await self._get_or_404(item.id))

    async def get(self, id: int) -> ItemResponse:
        return item_to_response(await self._get_or_404(id))

    async def list_items(self, show_deleted: bool = True) -> list[ItemResponse]:
        items = await self.item_repo.list_with_photos(show_deleted=show_deleted)
        return [item_to_response(i) for i in items]

    async def list_deleted(self) -> list[ItemResponse]:
        return [item_to_response(i) for i in await self.item_repo.list_deleted()]

    async def update(self, id: int, data: ItemUpdate) -> ItemResponse:
        """Partial update: fields absent from the request body are left untouched."""
        item = await self._get_or_404(id)
        for field in UPDATABLE_FIELDS:
            if field in data.model_fields_set:
                setattr(item, field, getattr(data, field))
        await self.item_repo.save(item)
        return item_to_response(await self._get_or_404(id))

    async def soft_delete(self, id: int, user: User) -> None:
        item = await self._get_or_404(id)
        if item.is_deleted:
            return
        item.deleted_at = datetime.now(timezone.utc)
        item.deleted_by = user.id
        await self.item_repo.save(item)
        logger.info("User %s deleted item #%s", user.id, item.number)

    async def restore(self, id: int) -> ItemResponse:
        item = await self._get_or_404(id)
        if item.is_deleted:
            item.deleted_at = None
            item.deleted_by = None
            await self.item_repo.save(item)
            logger.info("Restored item #%s", item.number)
        return item_to_response(await self._get_or_404(id))

    async def add_photo(self, item_id: int, data: str) -> PhotoResponse:
        await self._get_or_404(item_id)
        photo_data = validate_photo_data(data, self.max_photo_bytes)
        position = await self.photo_repo.next_position(item_id)
        photo = await self.photo_repo.add(Photo(item_id=item_id, data=photo_data, position=position))
        return PhotoResponse.model_validate(photo)

    async def delete_photo(self, item_id: int, photo_id: int) -> None:
        """Remove a photo; the last one cannot go. Remaining positions are kept as stored."""
        await self._get_or_404(item_id)
        photo = await self.photo_repo.get_for_item(item_id, photo_id)
        if photo is None:
            raise NotFound("Photo not found")
        if await self.photo_repo.count_for_item(item_id) <= 1:
            logger.warning("Rejected deletion of the only photo of item %s", item_id)
            raise ValidationError("An item must keep at least one photo")
        await self.photo_repo.delete(photo)

    async def reorder_photos(self, item_id: int, photo_ids: list[int]) -> list[PhotoResponse]:
        """Rewrite positions 0..n-1 in the given order. The ids must be exactly the item's photos."""
        await self._get_or_404(item_id)
        photos = {p.id: p for p in await self.photo_repo.list_for_item(item_id)}
        if len(set(photo_ids)) != len(photo_ids) or set(photo_ids) != set(photos):
            raise ValidationError("photoIds must list every photo of the item exactly once")
        for position, photo_id in enumerate(photo_ids):
            photos[photo_id].position = position
        await self.photo_repo.session.flush()
        return [PhotoResponse.model_validate(p) for p in await self.photo_repo.list_for_item(item_id)]
