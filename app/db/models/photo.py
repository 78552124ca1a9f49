"""
Photo model - an image attached to an item, stored inline as a base64 data URL.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import Text, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.db.models.item import Item


class Photo(Base):
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(ForeignKey("items.id"), nullable=False, index=True)
    data: Mapped[str] = mapped_column(Text, nullable=False)
    # 0-based display order; gaps are allowed after deletes
    position: Mapped[int] = mapped_column(nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    item: Mapped["Item"] = relationship("Item", back_populates="photos")

    def __repr__(self) -> str:
        return f"<Photo(id={self.id}, item_id={self.item_id}, position={self.position})>"
