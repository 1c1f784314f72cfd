# src/tenet_feed/schemas/user.py
"""User profile schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Profile shape produced by the provisioning collaborator."""

    uid: str
    handle: str
    did: str
    name: str
    bio: str | None = None
    avatar_uri: str | None = None
    provision_status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
