"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tenet_feed.core.errors import Unauthenticated
from tenet_feed.core.security import decode_subject
from tenet_feed.db.session import get_db
from tenet_feed.models import User

# HTTP Bearer scheme; missing credentials are reported as 401 below, not 403.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Resolve the authenticated caller from the bearer token.

    Args:
        credentials: HTTP Bearer token credentials
        db: Database session

    Returns:
        Profile of the authenticated user

    Raises:
        HTTPException: If the token is missing or invalid, or the profile is unknown
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    try:
        uid = decode_subject(credentials.credentials)
    except Unauthenticated as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(err),
        ) from err

    user = db.get(User, uid)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]
