# src/tenet_feed/schemas/engagement.py
"""Schemas for agreement scores and echoes."""

from pydantic import BaseModel, Field


class AgreementUpdate(BaseModel):
    """Schema for setting the caller's agreement score on a post."""

    score: int = Field(..., ge=0, le=100, description="Agreement from 0 to 100")


class AgreementResponse(BaseModel):
    """The post's community average after the caller's score was stored."""

    avg_agreement_score: int


class EchoResponse(BaseModel):
    """Echo state after a toggle."""

    echoed: bool
    echo_count: int
