"""
Aggregation service - derived views over preferences.

Item filters (my-love, user-love, user-preferences, conflicts, to-review, deleted) and the
per-person repartition statistics. The grouping itself runs in SQL (see PreferenceRepository);
this layer resolves users, assembles the annotated item responses and orders them.
Filters other than "deleted" only consider items that are not deleted.
"""

import logging
from collections import defaultdict

from app.core.exceptions import NotFound, Unauthenticated, ValidationError
from app.db.models.user import User
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.preference_repository import PreferenceRepository
from app.db.repositories.user_repository import UserRepository
from app.schemas.item import ItemResponse
from app.schemas.stats import LevelStats, RepartitionStat
from app.services.item_service import item_to_response

logger = logging.getLogger(__name__)

CALLER_FILTERS = ("my-love", "to-review")
USER_FILTERS = ("user-love", "user-preferences")
FILTERS = CALLER_FILTERS + USER_FILTERS + ("conflicts", "deleted")


class AggregationService:
    def __init__(
        self,
        item_repo: ItemRepository,
        preference_repo: PreferenceRepository,
        user_repo: UserRepository,
    ):
        self.item_repo = item_repo
        self.preference_repo = preference_repo
        self.user_repo = user_repo

    async def filter_items(
        self,
        name: str,
        *,
        caller: User | None = None,
        user_id: int | None = None,
    ) -> list[ItemResponse]:
        """Dispatch a named filter. Caller filters need the X-User-Id caller, user filters a userId."""
        if name not in FILTERS:
            raise ValidationError(f"Unknown filter '{name}'")
        if name in CALLER_FILTERS and caller is None:
            raise Unauthenticated("Missing X-User-Id header")
        if name in USER_FILTERS:
            if user_id is None:
                raise ValidationError(f"Filter '{name}' requires userId")
            if await self.user_repo.get_by_id(user_id) is None:
                raise NotFound("User not found")

        if name == "my-love":
            return await self.loved_by(caller.id)
        if name == "user-love":
            return await self.loved_by(user_id)
        if name == "user-preferences":
            return await self.rated_by(user_id)
        if name == "conflicts":
            return await self.conflicts()
        if name == "to-review":
            return await self.to_review(caller.id)
        return [item_to_response(i) for i in await self.item_repo.list_deleted()]

    async def loved_by(self, user_id: int) -> list[ItemResponse]:
        rows = await self.item_repo.list_with_user_level(user_id, "love")
        return [item_to_response(item) for item, _ in rows]

    async def rated_by(self, user_id: int) -> list[ItemResponse]:
        """Items the user has any preference on, each annotated with that level."""
        rows = await self.item_repo.list_with_user_level(user_id)
        return [item_to_response(item, user_preference=level) for item, level in rows]

    async def conflicts(self) -> list[ItemResponse]:
        """Items loved by two or more people; most contested first, then by number."""
        counts = dict(await self.preference_repo.love_counts(min_count=2))
        items = await self.item_repo.list_active_by_ids(list(counts))
        lovers: dict[int, list[str]] = defaultdict(list)
        for item_id, name in await self.preference_repo.lover_names(list(counts)):
            lovers[item_id].append(name)

        result = [
            item_to_response(
                item,
                lovers=sorted(lovers[item.id], key=str.lower),
                love_count=counts[item.id],
            )
            for item in items.values()
        ]
        result.sort(key=lambda r: (-r.love_count, r.number))
        return result

    async def to_review(self, user_id: int) -> list[ItemResponse]:
        """Items the user has not expressed any preference on yet."""
        return [item_to_response(i) for i in await self.item_repo.list_without_user_preference(user_id)]

    async def repartition(self) -> list[RepartitionStat]:
        """
        Per person: how many items (and how much estimated value) they love, and would take if nobody else does.

        Only people with at least one love or maybe claim get a row. Rows are ordered by loved value,
        highest first, so the leading claimant comes first; ties fall back to the name.
        """
        totals: dict[tuple[int, str], LevelStats] = {}
        for user_id, level, count, with_value, total in await self.preference_repo.totals_by_user_and_level():
            totals[(user_id, level)] = LevelStats(
                item_count=count,
                items_with_value=with_value,
                total_value=float(total or 0),
            )
        claimants = {user_id for user_id, _ in totals}

        stats = [
            RepartitionStat(
                user_id=user.id,
                user_name=user.name,
                user_role=user.role,
                love=totals.get((user.id, "love"), LevelStats()),
                maybe=totals.get((user.id, "maybe"), LevelStats()),
            )
            for user in await self.user_repo.list_sorted_by_name()
            if user.id in claimants
        ]
        # sort is stable: equal love totals keep the name order from the query
        stats.sort(key=lambda s: -s.love.total_value)
        logger.debug("Computed repartition for %d claimants", len(stats))
        return stats
