"""
Proposal API endpoints.

Both endpoints require a valid session token.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.middleware.auth import get_current_user
from api.dependencies import get_proposal_service
from shared.models import AuthenticatedUser

from .interfaces import IProposalService
from .models import CreateProposalRequest, Proposal

router = APIRouter()


@router.get("", response_model=list[Proposal])
async def list_proposals(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProposalService = Depends(get_proposal_service),
) -> list[Proposal]:
    """
    List the current user's proposals, most recent first.
    """
    return await service.list_proposals(user.id)


@router.post("", status_code=201, response_class=PlainTextResponse)
async def create_proposal(
    request: CreateProposalRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProposalService = Depends(get_proposal_service),
) -> PlainTextResponse:
    """
    Save a new proposal owned by the current user.
    """
    await service.create_proposal(user.id, request.title, request.data)
    return PlainTextResponse("Proposal saved successfully!", status_code=201)
