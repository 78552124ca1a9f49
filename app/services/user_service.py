"""
User service - identification: list, fetch and register family members.
"""

import logging

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import Conflict, NotFound
from app.db.models.user import User
from app.db.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def list_users(self) -> list[User]:
        return await self.user_repo.list_sorted_by_name()

    async def get_user(self, id: int) -> User:
        user = await self.user_repo.get_by_id(id)
        if user is None:
            raise NotFound("User not found")
        return user

    async def create_user(self, data: UserCreate) -> User:
        """Register a first name. Names are unique regardless of case."""
        if await self.user_repo.get_by_name(data.name):
            logger.warning("Rejected duplicate user name %r", data.name)
            raise Conflict("This first name already exists")
        try:
            user = await self.user_repo.add(User(name=data.name, role=data.role))
        except IntegrityError:
            # a concurrent registration of the same name won the unique key
            raise Conflict("This first name already exists") from None
        logger.info("Created user %s (%s, id=%s)", user.name, user.role, user.id)
        return user
