"""Repartition statistics schemas."""

from app.schemas.common import CamelModel


class LevelStats(CamelModel):
    item_count: int = 0
    # Items carrying an estimated value; lets the UI flag partial valuations
    items_with_value: int = 0
    total_value: float = 0.0


class RepartitionStat(CamelModel):
    user_id: int
    user_name: str
    user_role: str
    love: LevelStats
    maybe: LevelStats
