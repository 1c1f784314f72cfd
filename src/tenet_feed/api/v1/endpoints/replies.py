"""Reply endpoints for the Tenet Feed API."""

from fastapi import APIRouter, status

from tenet_feed.api.v1.dependencies import CurrentUserDep, SessionDep
from tenet_feed.models import Reply
from tenet_feed.repositories.post_repo import PostRepository
from tenet_feed.schemas.reply import ReplyCreate, ReplyResponse
from tenet_feed.services import replies

router = APIRouter(prefix="/posts", tags=["replies"])


@router.get("/{post_id}/replies", response_model=list[ReplyResponse])
async def list_replies(post_id: str, db: SessionDep) -> list[Reply]:
    """List a post's replies, oldest first."""
    PostRepository(db).require(post_id)
    return replies.list_replies(db, post_id)


@router.post(
    "/{post_id}/replies",
    response_model=ReplyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_reply(
    post_id: str,
    reply_data: ReplyCreate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> Reply:
    """Submit the caller's reply; a second submit replaces the first."""
    return replies.submit_reply(db, post_id, current_user, reply_data.reply_text)
