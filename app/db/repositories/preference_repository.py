"""
Preference repository - per-(item, user) lookups and the grouping queries behind the derived views.
"""

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from app.db.models.item import Item
from app.db.models.preference import Preference
from app.db.models.user import User
from app.db.repositories.base_repository import BaseRepository


class PreferenceRepository(BaseRepository[Preference]):
    def __init__(self, session):
        super().__init__(session, Preference)

    async def get_for(self, item_id: int, user_id: int) -> Preference | None:
        result = await self.session.execute(
            select(Preference).where(Preference.item_id == item_id, Preference.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_for_item(self, item_id: int) -> list[Preference]:
        """All preferences on an item with their users, by user name."""
        result = await self.session.execute(
            select(Preference)
            .join(User, User.id == Preference.user_id)
            .where(Preference.item_id == item_id)
            .options(selectinload(Preference.user))
            .order_by(User.name_key, User.id)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars().all())

    async def love_counts(self, min_count: int = 2) -> list[tuple[int, int]]:
        """(item_id, lover count) for active items loved by at least min_count users."""
        love_count = func.count(Preference.user_id).label("love_count")
        stmt = (
            select(Preference.item_id, love_count)
            .join(Item, Item.id == Preference.item_id)
            .where(Preference.level == "love", Item.deleted_at.is_(None))
            .group_by(Preference.item_id)
            .having(func.count(Preference.user_id) >= min_count)
        )
        result = await self.session.execute(stmt)
        return [(item_id, count) for item_id, count in result.all()]

    async def lover_names(self, item_ids: list[int]) -> list[tuple[int, str]]:
        """(item_id, user name) pairs for every love preference on the given items."""
        if not item_ids:
            return []
        stmt = (
            select(Preference.item_id, User.name)
            .join(User, User.id == Preference.user_id)
            .where(Preference.level == "love", Preference.item_id.in_(item_ids))
        )
        result = await self.session.execute(stmt)
        return [(item_id, name) for item_id, name in result.all()]

    async def totals_by_user_and_level(self) -> list[tuple[int, str, int, int, float]]:
        """(user_id, level, item count, items with a value, summed value) over active items, love/maybe only."""
        stmt = (
            select(
                Preference.user_id,
                Preference.level,
                func.count(Item.id),
                func.count(Item.value),
                func.coalesce(func.sum(Item.value), 0),
            )
            .join(Item, Item.id == Preference.item_id)
            .where(Item.deleted_at.is_(None), Preference.level.in_(("love", "maybe")))
            .group_by(Preference.user_id, Preference.level)
        )
        result = await self.session.execute(stmt)
        return [tuple(row) for row in result.all()]
