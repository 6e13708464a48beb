from sqlalchemy.orm import Session
from typing import List
import logging

from ..models.guest import Guest
from ..repositories.guest_repository import GuestRepository
from ..repositories.household_repository import HouseholdRepository
from ..repositories.event_repository import EventRepository
from ..repositories.invitation_repository import InvitationRepository
from ..repositories.guest_tag_repository import GuestTagRepository
from ..schemas.guest import GuestCreate, GuestUpdate
from ..utils.constants import AppConstants
from .exceptions import (
    ServiceError,
    NotFoundError,
    PermissionDeniedError,
    BusinessRuleViolationError,
)

logger = logging.getLogger(__name__)


class GuestServiceError(ServiceError):
    """Base exception for guest service errors"""

    pass


class GuestNotFoundError(GuestServiceError, NotFoundError):
    pass


class GuestPermissionError(GuestServiceError, PermissionDeniedError):
    pass


class GuestService:
    def __init__(self, db: Session):
        self.db = db
        self.guests = GuestRepository(db)
        self.households = HouseholdRepository(db)
        self.events = EventRepository(db)
        self.invitations = InvitationRepository(db)
        self.tags = GuestTagRepository(db)

    def get_guests(self, user_id: str) -> List[Guest]:
        return self.guests.find_by_user_id(user_id)

    def get_household_guests(self, household_id: str, user_id: str) -> List[Guest]:
        """Guests of one household with their invitations"""
        if not self.households.find_by_id(household_id):
            raise GuestNotFoundError("Household not found")
        if not self.households.belongs_to_user(household_id, user_id):
            raise GuestPermissionError("You do not have access to this household")
        return self.guests.find_by_household_id(household_id)

    def get_guest(self, guest_id: int, user_id: str) -> Guest:
        guest = self.guests.find_by_id(guest_id)
        if not guest:
            raise GuestNotFoundError("Guest not found")
        if guest.user_id != user_id:
            raise GuestPermissionError("You do not have access to this guest")
        return guest

    def create_guest(self, user_id: str, guest_data: GuestCreate) -> Guest:
        """Add a guest to an existing household, uninvited to every event"""
        if not self.households.find_by_id(guest_data.household_id):
            raise GuestNotFoundError("Household not found")
        if not self.households.belongs_to_user(guest_data.household_id, user_id):
            raise GuestPermissionError("You do not have access to this household")

        try:
            data = guest_data.model_dump(exclude={"household_id"})
            data["age_group"] = guest_data.age_group.value
            if data["is_primary_contact"]:
                self.guests.clear_primary_contact(guest_data.household_id)

            guest = self.guests.create(user_id, guest_data.household_id, data)
            event_ids = [event.id for event in self.events.find_by_user_id(user_id)]
            self.invitations.create_many(user_id, [guest.id], event_ids)

            self.db.commit()
            self.db.refresh(guest)
            logger.info(f"Created guest {guest.id} in household {guest.household_id}")
            return guest

        except Exception as e:
            self.db.rollback()
            raise GuestServiceError(f"Failed to create guest: {str(e)}")

    def update_guest(
        self, guest_id: int, user_id: str, guest_updates: GuestUpdate
    ) -> Guest:
        guest = self.get_guest(guest_id, user_id)
        update_data = guest_updates.model_dump(exclude_unset=True)
        if update_data.get("age_group") is not None:
            update_data["age_group"] = guest_updates.age_group.value

        try:
            if update_data.get("is_primary_contact"):
                self.guests.clear_primary_contact(guest.household_id)
            self.guests.update(guest, update_data)
            self.guests.ensure_primary_contact(guest.household_id)
            self.db.commit()
            self.db.refresh(guest)
            return guest

        except Exception as e:
            self.db.rollback()
            raise GuestServiceError(f"Failed to update guest: {str(e)}")

    def delete_guest(self, guest_id: int, user_id: str) -> int:
        guest = self.get_guest(guest_id, user_id)
        household_id = guest.household_id

        try:
            self.guests.delete(guest)
            self.guests.ensure_primary_contact(household_id)
            self.db.commit()
            return guest_id

        except Exception as e:
            self.db.rollback()
            raise GuestServiceError(f"Failed to delete guest: {str(e)}")

    def delete_guests(self, guest_ids: List[int], user_id: str) -> int:
        """Delete several guests, all of which must belong to the user"""
        guests = [self.get_guest(guest_id, user_id) for guest_id in guest_ids]
        household_ids = {guest.household_id for guest in guests}

        try:
            deleted = self.guests.delete_many(guests)
            for household_id in household_ids:
                self.guests.ensure_primary_contact(household_id)
            self.db.commit()
            return deleted

        except Exception as e:
            self.db.rollback()
            raise GuestServiceError(f"Failed to delete guests: {str(e)}")

    def update_tags(self, guest_id: int, user_id: str, tag_ids: List[str]) -> Guest:
        """Replace all tag assignments of a guest"""
        guest = self.get_guest(guest_id, user_id)

        unique_ids = list(dict.fromkeys(tag_ids))
        if len(unique_ids) > AppConstants.MAX_TAGS_PER_GUEST:
            raise BusinessRuleViolationError(
                f"A guest can have at most {AppConstants.MAX_TAGS_PER_GUEST} tags"
            )
        owned = self.tags.find_ids_for_user(user_id, unique_ids)
        if len(owned) != len(unique_ids):
            raise GuestPermissionError("One or more tags do not belong to you")

        try:
            self.guests.replace_tags(guest, unique_ids)
            self.db.commit()
            self.db.refresh(guest)
            return guest

        except Exception as e:
            self.db.rollback()
            raise GuestServiceError(f"Failed to update guest tags: {str(e)}")
