from sqlalchemy.orm import Session
from typing import List, Dict, Any, Optional

from ..models.household import Household
from ..models.guest import Guest
from ..repositories.household_repository import HouseholdRepository
from ..utils.constants import AppConstants
from .exceptions import (
    ServiceError,
    NotFoundError,
    PermissionDeniedError,
    BusinessRuleViolationError,
)

ADDRESS_FIELDS = (
    "address1",
    "address2",
    "city",
    "state",
    "zip_code",
    "country",
    "phone",
    "email",
    "notes",
)


class HouseholdServiceError(ServiceError):
    pass


class HouseholdNotFoundError(HouseholdServiceError, NotFoundError):
    pass


class HouseholdPermissionError(HouseholdServiceError, PermissionDeniedError):
    pass


def serialize_guest(guest: Guest) -> Dict[str, Any]:
    invitations = [
        {"guest_id": inv.guest_id, "event_id": inv.event_id, "rsvp": inv.rsvp}
        for inv in guest.invitations
    ]
    return {
        "id": guest.id,
        "household_id": guest.household_id,
        "first_name": guest.first_name,
        "last_name": guest.last_name,
        "email": guest.email,
        "phone": guest.phone,
        "age_group": guest.age_group,
        "is_primary_contact": guest.is_primary_contact,
        "invitations": invitations,
        "tag_ids": [a.guest_tag_id for a in guest.tag_assignments],
    }


def serialize_household(household: Household) -> Dict[str, Any]:
    data = {field: getattr(household, field) for field in ADDRESS_FIELDS}
    data["id"] = household.id
    data["guests"] = [serialize_guest(guest) for guest in household.guests]
    data["gifts"] = [
        {
            "household_id": gift.household_id,
            "event_id": gift.event_id,
            "event_name": gift.event.name if gift.event else None,
            "description": gift.description,
            "thankyou": gift.thankyou,
        }
        for gift in household.gifts
    ]
    return data


class HouseholdService:
    """Read side of households, writes go through HouseholdManagementService"""

    def __init__(self, db: Session):
        self.db = db
        self.households = HouseholdRepository(db)

    def get_household(self, household_id: str, user_id: str) -> Household:
        household = self.households.find_with_guests_and_gifts(household_id)
        if not household:
            raise HouseholdNotFoundError("Household not found")
        if household.user_id != user_id:
            raise HouseholdPermissionError("You do not have access to this household")
        return household

    def get_households(self, user_id: str) -> List[Household]:
        return self.households.find_by_user_id(user_id)

    def search_households(
        self, search_text: str, user_id: Optional[str] = None
    ) -> List[Household]:
        """Find households by guest name, only those holding a real invitation"""
        search_text = (search_text or "").strip()
        if len(search_text) < AppConstants.MIN_SEARCH_LENGTH:
            raise BusinessRuleViolationError(
                f"Search text must be at least {AppConstants.MIN_SEARCH_LENGTH} characters"
            )
        return self.households.search(search_text, user_id=user_id)
