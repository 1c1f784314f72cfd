# src/tenet_feed/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .reply import ReplyResponse

Visibility = Literal["public", "private", "followers"]


class PostCreate(BaseModel):
    """Schema for creating a new post.

    Length, profanity and link rules are applied by the content guard so that
    rejections carry a readable reason.
    """

    content: str = Field(..., description="Post text")
    source_title: str | None = Field(None, description="Title of the linked source")
    source_url: str | None = Field(None, description="Link to the source")
    visibility: Visibility = Field("public", description="Audience of the post")


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: str
    author_uid: str
    author_did: str
    author_handle: str
    content: str
    source_title: str | None = None
    source_url: str | None = None
    created_at: datetime
    echo_count: int
    reply_count: int
    avg_agreement_score: int
    visibility: Visibility
    parent_id: str | None = None

    model_config = ConfigDict(from_attributes=True)


class PostDetailResponse(PostResponse):
    """Post together with its replies, oldest reply first."""

    replies: list[ReplyResponse] = []


class ViewerStateResponse(BaseModel):
    """The signed-in viewer's own interactions with a post."""

    has_echoed: bool
    my_score: int | None
    has_replied: bool

    model_config = ConfigDict(from_attributes=True)
