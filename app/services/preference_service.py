"""
Preference service - per-person interest level on an item (love / maybe / no).

Every actual change of level is announced in the item's comment thread by a system comment
authored by the person who changed it.
"""

import logging

from app.core.exceptions import NotFound
from app.db.models.preference import Preference
from app.db.models.user import User
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.preference_repository import PreferenceRepository
from app.schemas.preference import PreferenceResponse, PreferenceWithUserResponse
from app.services.comment_service import CommentService

logger = logging.getLogger(__name__)

ANNOUNCEMENTS = {
    "love": "{name} a un coup de cœur !",
    "maybe": "{name} est intéressé(e) si personne d'autre ne le veut",
    "no": "{name} n'est pas intéressé(e)",
}


def announcement(name: str, level: str) -> str:
    return ANNOUNCEMENTS[level].format(name=name)


class PreferenceService:
    def __init__(
        self,
        item_repo: ItemRepository,
        preference_repo: PreferenceRepository,
        comment_service: CommentService,
    ):
        self.item_repo = item_repo
        self.preference_repo = preference_repo
        self.comment_service = comment_service

    async def _ensure_item(self, item_id: int) -> None:
        if await self.item_repo.get_by_id(item_id) is None:
            raise NotFound("Item not found")

    async def set_level(self, item_id: int, user: User, level: str) -> PreferenceResponse:
        """Upsert the caller's level. Same level again is a no-op: no write, no comment."""
        await self._ensure_item(item_id)
        pref = await self.preference_repo.get_for(item_id, user.id)
        if pref is not None and pref.level == level:
            return PreferenceResponse.model_validate(pref)

        if pref is None:
            pref = await self.preference_repo.add(Preference(item_id=item_id, user_id=user.id, level=level))
        else:
            pref.level = level
            pref = await self.preference_repo.save(pref)

        await self.comment_service.create(item_id, user, announcement(user.name, level), is_system=True)
        logger.info("User %s set preference %s on item %s", user.id, level, item_id)
        return PreferenceResponse.model_validate(pref)

    async def get_mine(self, item_id: int, user: User) -> PreferenceResponse | None:
        await self._ensure_item(item_id)
        pref = await self.preference_repo.get_for(item_id, user.id)
        return PreferenceResponse.model_validate(pref) if pref else None

    async def list_for_item(self, item_id: int) -> list[PreferenceWithUserResponse]:
        await self._ensure_item(item_id)
        prefs = await self.preference_repo.list_for_item(item_id)
        return [PreferenceWithUserResponse.model_validate(p) for p in prefs]
