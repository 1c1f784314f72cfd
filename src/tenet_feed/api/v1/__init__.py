"""Version 1 API endpoints."""

from .endpoints import engagement_router, posts_router, replies_router, users_router

__all__ = [
    "posts_router",
    "engagement_router",
    "replies_router",
    "users_router",
]
