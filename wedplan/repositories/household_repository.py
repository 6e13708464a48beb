from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload
from typing import List, Optional, Dict, Any
from ..models.household import Household
from ..models.guest import Guest
from ..models.gift import Gift
from ..models.invitation import Invitation
from ..models.enums import INVITED_STATUSES


class HouseholdRepository:
    def __init__(self, db: Session):
        self.db = db

    def _with_party(self):
        return self.db.query(Household).options(
            selectinload(Household.guests).selectinload(Guest.invitations),
            selectinload(Household.guests).selectinload(Guest.tag_assignments),
            selectinload(Household.gifts).selectinload(Gift.event),
        )

    def find_by_id(self, household_id: str) -> Optional[Household]:
        return self.db.query(Household).filter(Household.id == household_id).first()

    def find_with_guests_and_gifts(self, household_id: str) -> Optional[Household]:
        return self._with_party().filter(Household.id == household_id).first()

    def find_by_user_id(self, user_id: str) -> List[Household]:
        return (
            self._with_party()
            .filter(Household.user_id == user_id)
            .order_by(Household.created_at.asc())
            .all()
        )

    def search(self, search_text: str, user_id: Optional[str] = None) -> List[Household]:
        """Households with a matching guest name who hold at least one real invitation"""
        pattern = f"%{search_text.lower()}%"
        matching_guests = (
            self.db.query(Guest.household_id)
            .join(Invitation, Invitation.guest_id == Guest.id)
            .filter(
                or_(
                    Guest.first_name.ilike(pattern),
                    Guest.last_name.ilike(pattern),
                ),
                Invitation.rsvp.in_(INVITED_STATUSES),
            )
        )
        if user_id:
            matching_guests = matching_guests.filter(Guest.user_id == user_id)

        return (
            self._with_party()
            .filter(Household.id.in_(matching_guests.distinct()))
            .order_by(Household.created_at.asc())
            .all()
        )

    def belongs_to_user(self, household_id: str, user_id: str) -> bool:
        return (
            self.db.query(Household.id)
            .filter(Household.id == household_id, Household.user_id == user_id)
            .first()
            is not None
        )

    def create(self, user_id: str, data: Dict[str, Any]) -> Household:
        household = Household(user_id=user_id, **data)
        self.db.add(household)
        self.db.flush()
        return household

    def update(self, household: Household, data: Dict[str, Any]) -> Household:
        for field, value in data.items():
            setattr(household, field, value)
        self.db.flush()
        return household

    def delete(self, household: Household) -> None:
        self.db.delete(household)
        self.db.flush()
