from sqlalchemy.orm import Session
from typing import List, Optional
from ..models.invitation import Invitation
from ..models.enums import RsvpStatus


class InvitationRepository:
    def __init__(self, db: Session):
        self.db = db

    def find(self, guest_id: int, event_id: str) -> Optional[Invitation]:
        return self.db.get(Invitation, (guest_id, event_id))

    def find_by_user_id(self, user_id: str) -> List[Invitation]:
        return self.db.query(Invitation).filter(Invitation.user_id == user_id).all()

    def find_by_event_id(self, event_id: str) -> List[Invitation]:
        return self.db.query(Invitation).filter(Invitation.event_id == event_id).all()

    def find_by_guest_id(self, guest_id: int) -> List[Invitation]:
        return self.db.query(Invitation).filter(Invitation.guest_id == guest_id).all()

    def create(
        self,
        user_id: str,
        guest_id: int,
        event_id: str,
        rsvp: str = RsvpStatus.NOT_INVITED.value,
    ) -> Invitation:
        invitation = Invitation(
            user_id=user_id, guest_id=guest_id, event_id=event_id, rsvp=rsvp
        )
        self.db.add(invitation)
        self.db.flush()
        return invitation

    def create_many(
        self,
        user_id: str,
        guest_ids: List[int],
        event_ids: List[str],
        rsvp: str = RsvpStatus.NOT_INVITED.value,
    ) -> int:
        count = 0
        for guest_id in guest_ids:
            for event_id in event_ids:
                if self.find(guest_id, event_id) is None:
                    self.db.add(
                        Invitation(
                            user_id=user_id,
                            guest_id=guest_id,
                            event_id=event_id,
                            rsvp=rsvp,
                        )
                    )
                    count += 1
        self.db.flush()
        return count

    def update_rsvp(self, invitation: Invitation, rsvp: str) -> Invitation:
        invitation.rsvp = rsvp
        self.db.flush()
        return invitation
