from app.db.models.comment import Comment
from app.db.models.item import Item
from app.db.models.photo import Photo
from app.db.models.preference import Preference
from app.db.models.user import User

__all__ = ["User", "Item", "Photo", "Comment", "Preference"]
