"""
Statistics endpoints - repartition of claims across the family.
"""

from fastapi import APIRouter

from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.preference_repository import PreferenceRepository
from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession
from app.schemas.stats import RepartitionStat
from app.services.aggregation_service import AggregationService

router = APIRouter()


@router.get("/repartition", response_model=list[RepartitionStat])
async def repartition(session: DbSession):
    svc = AggregationService(ItemRepository(session), PreferenceRepository(session), UserRepository(session))
    return await svc.repartition()
