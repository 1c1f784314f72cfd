"""Post-related endpoints for the Tenet Feed API."""

from datetime import datetime

from fastapi import APIRouter, HTTPException, Query, status

from tenet_feed.api.v1.dependencies import CurrentUserDep, SessionDep
from tenet_feed.core.settings import settings
from tenet_feed.models import Post
from tenet_feed.repositories.post_repo import PostRepository
from tenet_feed.schemas.post import (
    PostCreate,
    PostDetailResponse,
    PostResponse,
    ViewerStateResponse,
)
from tenet_feed.schemas.reply import ReplyResponse
from tenet_feed.services import feed, post_lifecycle

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("/", response_model=list[PostResponse])
async def list_posts(
    db: SessionDep,
    limit: int = Query(settings.feed_page_size, ge=1, le=100, description="Page size"),
    before: datetime | None = Query(
        None, description="Return posts created before this timestamp"
    ),
) -> list[Post]:
    """List posts newest first.

    Pass the ``created_at`` of the last post on the current page as ``before``
    to load the next page.
    """
    return feed.list_feed(db, limit=limit, before=before)


@router.get("/search", response_model=list[PostResponse])
async def search_posts(
    db: SessionDep,
    q: str = Query(..., description="Text to find in content or author handle"),
) -> list[Post]:
    """Search recent public posts by content or author handle."""
    return feed.search_posts(db, q)


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(post_id: str, db: SessionDep) -> PostDetailResponse:
    """Get a post with its replies, oldest reply first."""
    post, replies = feed.get_post_with_replies(db, post_id)
    detail = PostDetailResponse.model_validate(post)
    detail.replies = [ReplyResponse.model_validate(reply) for reply in replies]
    return detail


@router.get("/{post_id}/viewer-state", response_model=ViewerStateResponse)
async def get_viewer_state(
    post_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> feed.ViewerState:
    """Get whether the caller has echoed, scored or replied to a post."""
    return feed.viewer_state(db, post_id, current_user.uid)


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Post:
    """Create a new post authored by the caller."""
    return post_lifecycle.create_post(db, current_user, post_data)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> None:
    """Delete a post and everything attached to it.

    Deleting a post that is already gone succeeds.
    """
    post = PostRepository(db).get_by_id(post_id)
    if post is None:
        return

    # Only the author can delete their own posts
    if post.author_uid != current_user.uid:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only delete your own posts",
        )

    post_lifecycle.delete_post(db, post_id)
