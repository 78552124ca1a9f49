"""
Photo repository - per-item photo ordering queries.
"""

from sqlalchemy import func, select

from app.db.models.photo import Photo
from app.db.repositories.base_repository import BaseRepository


class PhotoRepository(BaseRepository[Photo]):
    def __init__(self, session):
        super().__init__(session, Photo)

    async def list_for_item(self, item_id: int) -> list[Photo]:
        result = await self.session.execute(
            select(Photo).where(Photo.item_id == item_id).order_by(Photo.position, Photo.id)
        )
        return list(result.scalars().all())

    async def get_for_item(self, item_id: int, photo_id: int) -> Photo | None:
        result = await self.session.execute(
            select(Photo).where(Photo.id == photo_id, Photo.item_id == item_id)
        )
        return result.scalar_one_or_none()

    async def count_for_item(self, item_id: int) -> int:
        result = await self.session.execute(
            select(func.count(Photo.id)).where(Photo.item_id == item_id)
        )
        return result.scalar_one()

    async def next_position(self, item_id: int) -> int:
        """Max position + 1, or 0 when the item has no photo."""
        result = await self.session.execute(
            select(func.max(Photo.position)).where(Photo.item_id == item_id)
        )
        current = result.scalar_one_or_none()
        return 0 if current is None else current + 1
