"""
User repository - family members lookup by id and by case-insensitive name.
"""

from sqlalchemy import select

from app.db.models.user import User, make_name_key
from app.db.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    def __init__(self, session):
        super().__init__(session, User)

    async def get_by_name(self, name: str) -> User | None:
        """Case-insensitive match on the stored key; "marie" finds "Marie", "élise" finds "ÉLISE"."""
        result = await self.session.execute(select(User).where(User.name_key == make_name_key(name)))
        return result.scalar_one_or_none()

    async def list_sorted_by_name(self) -> list[User]:
        result = await self.session.execute(select(User).order_by(User.name_key, User.id))
        return list(result.scalars().all())
