"""User profile endpoints for the Tenet Feed API."""

from fastapi import APIRouter

from tenet_feed.api.v1.dependencies import CurrentUserDep
from tenet_feed.models import User
from tenet_feed.schemas.user import UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
async def read_me(current_user: CurrentUserDep) -> User:
    """Return the caller's stored profile."""
    return current_user
