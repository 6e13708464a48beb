from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.invitation_service import InvitationService
from ..schemas.invitation import (
    InvitationCreate,
    InvitationUpdate,
    InvitationBulkCreate,
    InvitationResponse,
)
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..models.user import User

router = APIRouter(tags=["invitations"])


def _invitations(invitations) -> list:
    return [InvitationResponse.model_validate(i).model_dump() for i in invitations]


@router.get("/", response_model=Dict[str, Any])
@handle_service_errors
async def get_invitations(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    invitations = InvitationService(db).get_user_invitations(current_user.id)
    return RouterResponse.success(data=_invitations(invitations))


@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_invitation(
    body: InvitationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    invitation = InvitationService(db).create_invitation(
        current_user.id, body.guest_id, body.event_id, body.rsvp
    )
    return RouterResponse.created(
        data=InvitationResponse.model_validate(invitation).model_dump()
    )


@router.post("/bulk", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_invitations(
    body: InvitationBulkCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Invite several guests to several events, existing pairs are skipped"""
    created = InvitationService(db).create_for_guests_and_events(
        current_user.id, body.guest_ids, body.event_ids, body.rsvp
    )
    return RouterResponse.created(data={"created": created})


@router.get("/event/{event_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_event_invitations(
    event_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    invitations = InvitationService(db).get_event_invitations(event_id, current_user.id)
    return RouterResponse.success(data=_invitations(invitations))


@router.get("/event/{event_id}/stats", response_model=Dict[str, Any])
@handle_service_errors
async def get_event_stats(
    event_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    stats = InvitationService(db).get_event_stats(event_id, current_user.id)
    return RouterResponse.success(data=stats)


@router.get("/guest/{guest_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_guest_invitations(
    guest_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    invitations = InvitationService(db).get_guest_invitations(guest_id, current_user.id)
    return RouterResponse.success(data=_invitations(invitations))


@router.put("/{guest_id}/{event_id}", response_model=Dict[str, Any])
@handle_service_errors
async def update_invitation(
    guest_id: int,
    event_id: str,
    body: InvitationUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    invitation = InvitationService(db).update_invitation(
        guest_id, event_id, current_user.id, body.rsvp
    )
    return RouterResponse.updated(
        data=InvitationResponse.model_validate(invitation).model_dump()
    )
