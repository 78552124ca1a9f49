"""
FastAPI dependencies - caller identity from the X-User-Id header.

Identity is self-asserted: the client stores the chosen user id and sends it on every call.
There is no password or token; this header is trusted as-is.
"""

from typing import Annotated

from fastapi import Depends, Header

from app.core.exceptions import Unauthenticated
from app.db.models.user import User
from app.db.repositories.user_repository import UserRepository
from app.db.session import DbSession


async def _resolve_user(session, raw_id: str) -> User:
    try:
        user_id = int(raw_id)
    except ValueError:
        raise Unauthenticated("Invalid X-User-Id header") from None
    user = await UserRepository(session).get_by_id(user_id)
    if user is None:
        raise Unauthenticated("Unknown user")
    return user


async def get_current_user(
    session: DbSession,
    x_user_id: Annotated[str | None, Header()] = None,
) -> User:
    """Resolve X-User-Id to an existing user. Raises 401 if missing, malformed or unknown."""
    if not x_user_id:
        raise Unauthenticated("Missing X-User-Id header")
    return await _resolve_user(session, x_user_id)


async def get_optional_user(
    session: DbSession,
    x_user_id: Annotated[str | None, Header()] = None,
) -> User | None:
    """Same as get_current_user, but an absent header yields None."""
    if not x_user_id:
        return None
    return await _resolve_user(session, x_user_id)


CurrentUser = Annotated[User, Depends(get_current_user)]
OptionalUser = Annotated[User | None, Depends(get_optional_user)]
