# src/tenet_feed/models/user.py
"""SQLAlchemy model for provisioned user profiles."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from tenet_feed.db.session import Base


class User(Base):
    """Profile written by the provisioning function and read to resolve callers.

    Provisioning itself (username uniqueness, handle and DID issuance) happens
    outside this service.
    """

    __tablename__ = "user_profile"

    uid: Mapped[str] = mapped_column(String(128), primary_key=True)
    handle: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    did: Mapped[str] = mapped_column(Text, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar_uri: Mapped[str | None] = mapped_column(Text, nullable=True)
    provision_status: Mapped[str] = mapped_column(
        String(32), nullable=False, default="provisioned"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )