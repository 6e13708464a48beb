from sqlalchemy.orm import Session
from typing import List, Dict
import logging

from ..models.invitation import Invitation
from ..models.enums import RsvpStatus
from ..repositories.invitation_repository import InvitationRepository
from ..repositories.guest_repository import GuestRepository
from ..repositories.event_repository import EventRepository
from .exceptions import ServiceError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


class InvitationServiceError(ServiceError):
    pass


class InvitationNotFoundError(InvitationServiceError, NotFoundError):
    pass


class InvitationPermissionError(InvitationServiceError, PermissionDeniedError):
    pass


def tally_rsvps(invitations, event_id: str) -> Dict[str, int]:
    """Count one event's invitations by status"""
    counts = {"attending": 0, "declined": 0, "invited": 0, "not_invited": 0}
    for invitation in invitations:
        if invitation.event_id != event_id:
            continue
        if invitation.rsvp == RsvpStatus.ATTENDING.value:
            counts["attending"] += 1
        elif invitation.rsvp == RsvpStatus.DECLINED.value:
            counts["declined"] += 1
        elif invitation.rsvp == RsvpStatus.INVITED.value:
            counts["invited"] += 1
        else:
            counts["not_invited"] += 1
    return counts


class InvitationService:
    def __init__(self, db: Session):
        self.db = db
        self.invitations = InvitationRepository(db)
        self.guests = GuestRepository(db)
        self.events = EventRepository(db)

    def _check_guest_and_event(self, guest_id: int, event_id: str, user_id: str):
        if not self.guests.find_by_id(guest_id):
            raise InvitationNotFoundError("Guest not found")
        if not self.events.find_by_id(event_id):
            raise InvitationNotFoundError("Event not found")
        if not self.guests.belongs_to_user(
            guest_id, user_id
        ) or not self.events.belongs_to_user(event_id, user_id):
            raise InvitationPermissionError("You do not have access to this invitation")

    def create_invitation(
        self,
        user_id: str,
        guest_id: int,
        event_id: str,
        rsvp: RsvpStatus = RsvpStatus.NOT_INVITED,
    ) -> Invitation:
        self._check_guest_and_event(guest_id, event_id, user_id)
        if self.invitations.find(guest_id, event_id):
            raise InvitationServiceError("Invitation already exists")

        try:
            invitation = self.invitations.create(
                user_id, guest_id, event_id, RsvpStatus(rsvp).value
            )
            self.db.commit()
            self.db.refresh(invitation)
            return invitation

        except Exception as e:
            self.db.rollback()
            raise InvitationServiceError(f"Failed to create invitation: {str(e)}")

    def get_invitation(self, guest_id: int, event_id: str, user_id: str) -> Invitation:
        invitation = self.invitations.find(guest_id, event_id)
        if not invitation:
            raise InvitationNotFoundError("Invitation not found")
        if invitation.user_id != user_id:
            raise InvitationPermissionError("You do not have access to this invitation")
        return invitation

    def update_invitation(
        self, guest_id: int, event_id: str, user_id: str, rsvp: RsvpStatus
    ) -> Invitation:
        invitation = self.get_invitation(guest_id, event_id, user_id)

        try:
            self.invitations.update_rsvp(invitation, RsvpStatus(rsvp).value)
            self.db.commit()
            self.db.refresh(invitation)
            return invitation

        except Exception as e:
            self.db.rollback()
            raise InvitationServiceError(f"Failed to update invitation: {str(e)}")

    def get_user_invitations(self, user_id: str) -> List[Invitation]:
        return self.invitations.find_by_user_id(user_id)

    def get_event_invitations(self, event_id: str, user_id: str) -> List[Invitation]:
        if not self.events.find_by_id(event_id):
            raise InvitationNotFoundError("Event not found")
        if not self.events.belongs_to_user(event_id, user_id):
            raise InvitationPermissionError("You do not have access to this event")
        return self.invitations.find_by_event_id(event_id)

    def get_guest_invitations(self, guest_id: int, user_id: str) -> List[Invitation]:
        if not self.guests.find_by_id(guest_id):
            raise InvitationNotFoundError("Guest not found")
        if not self.guests.belongs_to_user(guest_id, user_id):
            raise InvitationPermissionError("You do not have access to this guest")
        return self.invitations.find_by_guest_id(guest_id)

    def get_event_stats(self, event_id: str, user_id: str) -> Dict[str, int]:
        """RSVP counts for one event"""
        invitations = self.get_event_invitations(event_id, user_id)
        stats = tally_rsvps(invitations, event_id)
        stats["total"] = len(invitations)
        return stats

    def create_for_guests_and_events(
        self,
        user_id: str,
        guest_ids: List[int],
        event_ids: List[str],
        rsvp: RsvpStatus = RsvpStatus.NOT_INVITED,
    ) -> int:
        """Create missing invitations for every guest/event pair"""
        for guest_id in guest_ids:
            if not self.guests.belongs_to_user(guest_id, user_id):
                raise InvitationPermissionError(f"Guest {guest_id} is not yours")
        for event_id in event_ids:
            if not self.events.belongs_to_user(event_id, user_id):
                raise InvitationPermissionError(f"Event {event_id} is not yours")

        try:
            created = self.invitations.create_many(
                user_id, guest_ids, event_ids, RsvpStatus(rsvp).value
            )
            self.db.commit()
            return created

        except Exception as e:
            self.db.rollback()
            raise InvitationServiceError(f"Failed to create invitations: {str(e)}")
