"""
Item model - a catalog entry ("fiche") for one household object.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import String, Text, Float, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

if TYPE_CHECKING:
    from app.db.models.photo import Photo
    from app.db.models.user import User


class Item(Base):
    """Numbered fiche. Soft-deleted only: deleted_at/deleted_by are set and cleared, the row stays."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    number: Mapped[int] = mapped_column(nullable=False, unique=True, index=True)
    title: Mapped[str | None] = mapped_column(String(100), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Estimated value in euros, used by the repartition view
    value: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_by: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    deleted_by: Mapped[int | None] = mapped_column(ForeignKey("users.id"), nullable=True)

    photos: Mapped[list["Photo"]] = relationship(
        "Photo",
        back_populates="item",
        order_by="Photo.position",
        cascade="all, delete-orphan",
    )
    deleter: Mapped[Optional["User"]] = relationship("User", foreign_keys=[deleted_by])

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, number={self.number})>"
