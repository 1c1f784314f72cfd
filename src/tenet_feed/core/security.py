"""Access token helpers.

Tokens are normally minted by the authentication provider; ``create_access_token``
exists for tooling and tests that need a token signed with the shared secret.
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from tenet_feed.core.errors import Unauthenticated
from tenet_feed.core.settings import settings


def create_access_token(uid: str) -> str:
    """Create a JWT whose subject is the user's uid."""
    to_encode: dict[str, object] = {"sub": uid}
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_subject(token: str) -> str:
    """Return the uid carried by a token.

    Raises:
        Unauthenticated: If the token is invalid, expired or has no subject.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise Unauthenticated("Could not validate credentials") from err
    subject = payload.get("sub")
    if not subject:
        raise Unauthenticated("Could not validate credentials")
    return str(subject)
