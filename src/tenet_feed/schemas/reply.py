# src/tenet_feed/schemas/reply.py
"""Reply-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ReplyCreate(BaseModel):
    """Schema for submitting a reply."""

    reply_text: str = Field(..., description="Reply text")


class ReplyResponse(BaseModel):
    """Schema for a reply returned by the API."""

    post_id: str
    user_id: str
    author_handle: str
    reply_text: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
