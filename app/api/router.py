"""
API router - aggregates all endpoint modules (mounted under /api).
"""

from fastapi import APIRouter

from app.api.endpoints import comments, health, items, photos, preferences, stats, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
api_router.include_router(photos.router, prefix="/items", tags=["photos"])
api_router.include_router(comments.router, prefix="/items", tags=["comments"])
api_router.include_router(preferences.router, prefix="/items", tags=["preferences"])
api_router.include_router(stats.router, prefix="/stats", tags=["stats"])
