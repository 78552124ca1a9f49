"""
Item repository - catalog queries.
Photos and the deleting user are eager-loaded (selectinload) so responses never lazy-load in async context.
"""

from collections.abc import Sequence

from sqlalchemy import Select, case, exists, func, select
from sqlalchemy.orm import selectinload

from app.db.models.item import Item
from app.db.models.preference import Preference
from app.db.repositories.base_repository import BaseRepository


def _with_details(stmt: Select) -> Select:
    # populate_existing refreshes collections already in the identity map
    return stmt.options(selectinload(Item.photos), selectinload(Item.deleter)).execution_options(
        populate_existing=True
    )


class ItemRepository(BaseRepository[Item]):
    def __init__(self, session):
        super().__init__(session, Item)

    async def next_number(self) -> int:
        """Current max number + 1, deleted items included so numbers are never reused.

        Read-then-insert: two concurrent creates can compute the same number; the unique
        constraint on items.number rejects the second insert.
        """
        result = await self.session.execute(select(func.coalesce(func.max(Item.number), 0)))
        return result.scalar_one() + 1

    async def get_with_photos(self, id: int) -> Item | None:
        result = await self.session.execute(_with_details(select(Item).where(Item.id == id)))
        return result.scalar_one_or_none()

    async def list_with_photos(self, *, show_deleted: bool = True) -> list[Item]:
        """Active items first, then deleted ones; each group by ascending number."""
        stmt = select(Item)
        if not show_deleted:
            stmt = stmt.where(Item.deleted_at.is_(None))
        stmt = stmt.order_by(case((Item.deleted_at.is_(None), 0), else_=1), Item.number)
        result = await self.session.execute(_with_details(stmt))
        return list(result.scalars().all())

    async def list_deleted(self) -> list[Item]:
        """Deleted items, most recently deleted first."""
        stmt = (
            select(Item)
            .where(Item.deleted_at.is_not(None))
            .order_by(Item.deleted_at.desc(), Item.number)
        )
        result = await self.session.execute(_with_details(stmt))
        return list(result.scalars().all())

    async def list_active_by_ids(self, ids: Sequence[int]) -> dict[int, Item]:
        if not ids:
            return {}
        stmt = select(Item).where(Item.id.in_(ids), Item.deleted_at.is_(None))
        result = await self.session.execute(_with_details(stmt))
        return {item.id: item for item in result.scalars().all()}

    async def list_with_user_level(self, user_id: int, level: str | None = None) -> list[tuple[Item, str]]:
        """Active items on which the user has a preference (optionally a given level), with that level."""
        stmt = (
            select(Item, Preference.level)
            .join(Preference, Preference.item_id == Item.id)
            .where(Preference.user_id == user_id, Item.deleted_at.is_(None))
            .order_by(Item.number)
        )
        if level is not None:
            stmt = stmt.where(Preference.level == level)
        result = await self.session.execute(_with_details(stmt))
        return [(item, item_level) for item, item_level in result.all()]

    async def list_without_user_preference(self, user_id: int) -> list[Item]:
        """Active items the user has not rated at any level."""
        rated = exists().where(Preference.item_id == Item.id, Preference.user_id == user_id)
        stmt = select(Item).where(Item.deleted_at.is_(None), ~rated).order_by(Item.number)
        result = await self.session.execute(_with_details(stmt))
        return list(result.scalars().all())
