# Repository pattern: one class per entity, all sharing the request-scoped AsyncSession

from app.db.repositories.comment_repository import CommentRepository
from app.db.repositories.item_repository import ItemRepository
from app.db.repositories.photo_repository import PhotoRepository
from app.db.repositories.preference_repository import PreferenceRepository
from app.db.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
    "ItemRepository",
    "PhotoRepository",
    "CommentRepository",
    "PreferenceRepository",
]
