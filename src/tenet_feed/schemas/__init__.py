"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .engagement import AgreementResponse, AgreementUpdate, EchoResponse
from .post import PostCreate, PostDetailResponse, PostResponse, ViewerStateResponse
from .reply import ReplyCreate, ReplyResponse
from .user import UserResponse

__all__ = [
    "AgreementResponse", "AgreementUpdate", "EchoResponse",
    "PostCreate", "PostDetailResponse", "PostResponse", "ViewerStateResponse",
    "ReplyCreate", "ReplyResponse",
    "UserResponse",
]
