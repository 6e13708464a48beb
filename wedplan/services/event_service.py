from sqlalchemy.orm import Session
from typing import List
import logging

from ..models.event import Event
from ..repositories.event_repository import EventRepository
from ..repositories.guest_repository import GuestRepository
from ..repositories.invitation_repository import InvitationRepository
from ..schemas.event import EventCreate, EventUpdate
from .exceptions import (
    ServiceError,
    NotFoundError,
    PermissionDeniedError,
    BusinessRuleViolationError,
)

logger = logging.getLogger(__name__)


class EventServiceError(ServiceError):
    """Base exception for event service errors"""

    pass


class EventNotFoundError(EventServiceError, NotFoundError):
    """Event not found"""

    pass


class EventPermissionError(EventServiceError, PermissionDeniedError):
    """Event belongs to another user"""

    pass


class EventService:
    def __init__(self, db: Session):
        self.db = db
        self.events = EventRepository(db)
        self.guests = GuestRepository(db)
        self.invitations = InvitationRepository(db)

    def create_event(self, user_id: str, event_data: EventCreate) -> Event:
        """Create an event and a 'Not Invited' invitation for every existing guest"""
        try:
            event = self.events.create(user_id, event_data.model_dump())

            guest_ids = self.guests.find_ids_by_user_id(user_id)
            self.invitations.create_many(user_id, guest_ids, [event.id])

            self.db.commit()
            self.db.refresh(event)
            logger.info(
                f"Created event {event.id} for user {user_id} ({len(guest_ids)} invitations)"
            )
            return event

        except Exception as e:
            self.db.rollback()
            raise EventServiceError(f"Failed to create event: {str(e)}")

    def get_events(self, user_id: str) -> List[Event]:
        return self.events.find_by_user_id(user_id)

    def get_event(self, event_id: str, user_id: str) -> Event:
        event = self.events.find_by_id(event_id)
        if not event:
            raise EventNotFoundError("Event not found")
        if event.user_id != user_id:
            raise EventPermissionError("You do not have access to this event")
        return event

    def update_event(
        self, event_id: str, user_id: str, event_updates: EventUpdate
    ) -> Event:
        event = self.get_event(event_id, user_id)

        update_data = event_updates.model_dump(exclude_unset=True)
        if "name" in update_data and not update_data["name"]:
            raise BusinessRuleViolationError("Event name is required")

        try:
            self.events.update(event, update_data)
            self.db.commit()
            self.db.refresh(event)
            return event

        except Exception as e:
            self.db.rollback()
            raise EventServiceError(f"Failed to update event: {str(e)}")

    def update_collect_rsvp(
        self, event_id: str, user_id: str, collect_rsvp: bool
    ) -> Event:
        event = self.get_event(event_id, user_id)

        try:
            self.events.update(event, {"collect_rsvp": collect_rsvp})
            self.db.commit()
            self.db.refresh(event)
            return event

        except Exception as e:
            self.db.rollback()
            raise EventServiceError(f"Failed to update RSVP collection: {str(e)}")

    def delete_event(self, event_id: str, user_id: str) -> str:
        """Delete an event with its questions, invitations and gifts"""
        event = self.get_event(event_id, user_id)

        try:
            self.events.delete(event)
            self.db.commit()
            logger.info(f"Deleted event {event_id}")
            return event_id

        except Exception as e:
            self.db.rollback()
            raise EventServiceError(f"Failed to delete event: {str(e)}")
