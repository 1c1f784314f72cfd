"""API endpoint modules for version 1."""

from .engagement import router as engagement_router
from .posts import router as posts_router
from .replies import router as replies_router
from .users import router as users_router

__all__ = [
    "posts_router",
    "engagement_router",
    "replies_router",
    "users_router",
]
