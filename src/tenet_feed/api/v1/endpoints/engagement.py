"""Agreement score and echo endpoints for the Tenet Feed API."""

from fastapi import APIRouter

from tenet_feed.api.v1.dependencies import CurrentUserDep, SessionDep
from tenet_feed.schemas.engagement import AgreementResponse, AgreementUpdate, EchoResponse
from tenet_feed.services import echoes, scoring

router = APIRouter(prefix="/posts", tags=["engagement"])


@router.put("/{post_id}/agreement", response_model=AgreementResponse)
async def set_agreement(
    post_id: str,
    agreement: AgreementUpdate,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> AgreementResponse:
    """Store the caller's agreement score and return the new community average."""
    average = scoring.set_score(db, post_id, current_user.uid, agreement.score)
    return AgreementResponse(avg_agreement_score=average)


@router.post("/{post_id}/echo", response_model=EchoResponse)
async def toggle_echo(
    post_id: str,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> EchoResponse:
    """Echo the post, or remove the caller's echo if it is already there."""
    echoed, echo_count = echoes.toggle_echo_with_count(db, post_id, current_user.uid)
    return EchoResponse(echoed=echoed, echo_count=echo_count)
