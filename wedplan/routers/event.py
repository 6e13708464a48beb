from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.event_service import EventService
from ..schemas.event import EventCreate, EventUpdate, EventResponse, CollectRsvpUpdate
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..models.user import User

router = APIRouter(tags=["event"])


def _event(event) -> dict:
    return EventResponse.model_validate(event).model_dump()


@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_event(
    event_data: EventCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create an event, every existing guest starts as Not Invited"""
    event = EventService(db).create_event(current_user.id, event_data)
    return RouterResponse.created(data=_event(event), message="Event created")


@router.get("/", response_model=Dict[str, Any])
@handle_service_errors
async def get_events(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    events = EventService(db).get_events(current_user.id)
    return RouterResponse.success(data=[_event(e) for e in events])


@router.get("/{event_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_event(
    event_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    event = EventService(db).get_event(event_id, current_user.id)
    return RouterResponse.success(data=_event(event))


@router.put("/{event_id}", response_model=Dict[str, Any])
@handle_service_errors
async def update_event(
    event_id: str,
    event_updates: EventUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    event = EventService(db).update_event(event_id, current_user.id, event_updates)
    return RouterResponse.updated(data=_event(event), message="Event updated")


@router.patch("/{event_id}/collect-rsvp", response_model=Dict[str, Any])
@handle_service_errors
async def update_collect_rsvp(
    event_id: str,
    body: CollectRsvpUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Turn RSVP collection on or off for an event"""
    event = EventService(db).update_collect_rsvp(
        event_id, current_user.id, body.collect_rsvp
    )
    return RouterResponse.updated(data=_event(event))


@router.delete("/{event_id}", response_model=Dict[str, Any])
@handle_service_errors
async def delete_event(
    event_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    deleted_id = EventService(db).delete_event(event_id, current_user.id)
    return RouterResponse.deleted(message="Event deleted", data={"id": deleted_id})
