# src/tenet_feed/models/__init__.py
"""SQLAlchemy models for the Tenet Feed service."""

from .agreement import AgreementScore
from .echo import Echo
from .post import Post
from .reply import Reply
from .user import User

__all__ = [
    "AgreementScore",
    "Echo",
    "Post",
    "Reply",
    "User",
]
