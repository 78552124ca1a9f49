"""
User endpoints - identification by first name (no passwords).
"""

from fastapi import APIRouter, status

from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession
from app.schemas.user import UserCreate, UserResponse
from app.services.user_service import UserService

router = APIRouter()


def _get_user_service(session: DbSession) -> UserService:
    return UserService(UserRepository(session))


@router.get("", response_model=list[UserResponse])
async def list_users(session: DbSession):
    """All family members, sorted by name (case-insensitive)."""
    users = await _get_user_service(session).list_users()
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(session: DbSession, user_id: int):
    return UserResponse.model_validate(await _get_user_service(session).get_user(user_id))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(session: DbSession, data: UserCreate):
    """Register a new first name. 409 if it already exists in any letter case."""
    user = await _get_user_service(session).create_user(data)
    return UserResponse.model_validate(user)
