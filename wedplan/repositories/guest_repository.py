from sqlalchemy.orm import Session, selectinload
from typing import List, Optional, Dict, Any
from ..models.guest import Guest
from ..models.guest_tag import GuestTagAssignment


class GuestRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, guest_id: int) -> Optional[Guest]:
        return self.db.query(Guest).filter(Guest.id == guest_id).first()

    def find_by_user_id(self, user_id: str) -> List[Guest]:
        return (
            self.db.query(Guest)
            .filter(Guest.user_id == user_id)
            .order_by(Guest.id.asc())
            .all()
        )

    def find_by_household_id(self, household_id: str) -> List[Guest]:
        return (
            self.db.query(Guest)
            .options(selectinload(Guest.invitations))
            .filter(Guest.household_id == household_id)
            .order_by(Guest.id.asc())
            .all()
        )

    def find_ids_by_user_id(self, user_id: str) -> List[int]:
        return [
            guest_id
            for (guest_id,) in self.db.query(Guest.id).filter(Guest.user_id == user_id)
        ]

    def belongs_to_user(self, guest_id: int, user_id: str) -> bool:
        return (
            self.db.query(Guest.id)
            .filter(Guest.id == guest_id, Guest.user_id == user_id)
            .first()
            is not None
        )

    def create(self, user_id: str, household_id: str, data: Dict[str, Any]) -> Guest:
        guest = Guest(user_id=user_id, household_id=household_id, **data)
        self.db.add(guest)
        self.db.flush()
        return guest

    def update(self, guest: Guest, data: Dict[str, Any]) -> Guest:
        for field, value in data.items():
            setattr(guest, field, value)
        self.db.flush()
        return guest

    def clear_primary_contact(self, household_id: str) -> None:
        self.db.query(Guest).filter(Guest.household_id == household_id).update(
            {Guest.is_primary_contact: False}, synchronize_session="fetch"
        )
        self.db.flush()

    def ensure_primary_contact(self, household_id: str) -> Optional[Guest]:
        """Flag the lowest-id guest when the household has no primary contact"""
        guests = (
            self.db.query(Guest)
            .filter(Guest.household_id == household_id)
            .order_by(Guest.id.asc())
            .all()
        )
        primary = next((g for g in guests if g.is_primary_contact), None)
        if primary is None and guests:
            primary = guests[0]
            primary.is_primary_contact = True
            self.db.flush()
        return primary

    def delete(self, guest: Guest) -> None:
        self.delete_many([guest])

    def delete_many(self, guests: List[Guest]) -> int:
        """Delete guests together with their invitations and tag assignments"""
        for guest in guests:
            for invitation in list(guest.invitations):
                self.db.delete(invitation)
            for assignment in list(guest.tag_assignments):
                self.db.delete(assignment)
            self.db.delete(guest)
        self.db.flush()
        return len(guests)

    def replace_tags(self, guest: Guest, tag_ids: List[str]) -> None:
        """Drop all tag assignments of the guest and assign the given tags"""
        guest.tag_assignments.clear()
        self.db.flush()
        for tag_id in dict.fromkeys(tag_ids):
            guest.tag_assignments.append(GuestTagAssignment(guest_tag_id=tag_id))
        self.db.flush()
