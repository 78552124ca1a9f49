"""
Preference model - one user's interest level for one item.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.db.models.user import User

LEVELS = ("love", "maybe", "no")


class Preference(Base):
    """At most one row per (item, user); changing the level updates the row in place."""

    __tablename__ = "preferences"
    __table_args__ = (UniqueConstraint("item_id", "user_id", name="uq_preferences_item_user"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False, index=True)
    level: Mapped[str] = mapped_column(String(10), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user: Mapped["User"] = relationship("User")

    def __repr__(self) -> str:
        return f"<Preference(item_id={self.item_id}, user_id={self.user_id}, level={self.level})>"
