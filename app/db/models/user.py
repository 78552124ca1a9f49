"""
User model - a family member identified by first name.
"""

from datetime import datetime

from sqlalchemy import String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.db.base import Base

ROLES = ("parent", "enfant")


def make_name_key(name: str) -> str:
    """Comparison key for first names: "Élise" and "ÉLISE" share one key."""
    return name.casefold()


class User(Base):
    """Family member. Created once; never updated or deleted."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    # Casefolded name, kept in step with `name`. Casefolding can lengthen a string ("ß" -> "ss")
    name_key: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    role: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    @validates("name")
    def _set_name_key(self, key: str, value: str) -> str:
        self.name_key = make_name_key(value)
        return value

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name={self.name})>"
