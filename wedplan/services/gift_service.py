from sqlalchemy.orm import Session
from typing import List, Dict, Any
import logging

from ..models.gift import Gift
from ..repositories.gift_repository import GiftRepository
from ..repositories.household_repository import HouseholdRepository
from ..repositories.event_repository import EventRepository
from .exceptions import ServiceError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


class GiftServiceError(ServiceError):
    pass


class GiftNotFoundError(GiftServiceError, NotFoundError):
    pass


class GiftPermissionError(GiftServiceError, PermissionDeniedError):
    pass


class GiftService:
    def __init__(self, db: Session):
        self.db = db
        self.gifts = GiftRepository(db)
        self.households = HouseholdRepository(db)
        self.events = EventRepository(db)

    def _check_household(self, household_id: str, user_id: str) -> None:
        if not self.households.find_by_id(household_id):
            raise GiftNotFoundError("Household not found")
        if not self.households.belongs_to_user(household_id, user_id):
            raise GiftPermissionError("You do not have access to this household")

    def get_gift(self, household_id: str, event_id: str, user_id: str) -> Gift:
        self._check_household(household_id, user_id)
        gift = self.gifts.find(household_id, event_id)
        if not gift:
            raise GiftNotFoundError("Gift not found")
        return gift

    def get_household_gifts(self, household_id: str, user_id: str) -> List[Gift]:
        self._check_household(household_id, user_id)
        return self.gifts.find_by_household_id(household_id)

    def get_event_gifts(self, event_id: str, user_id: str) -> List[Gift]:
        if not self.events.find_by_id(event_id):
            raise GiftNotFoundError("Event not found")
        if not self.events.belongs_to_user(event_id, user_id):
            raise GiftPermissionError("You do not have access to this event")
        return self.gifts.find_by_event_id(event_id)

    def update_gift(
        self, household_id: str, event_id: str, user_id: str, data: Dict[str, Any]
    ) -> Gift:
        gift = self.get_gift(household_id, event_id, user_id)

        try:
            self.gifts.update(gift, data)
            self.db.commit()
            self.db.refresh(gift)
            return gift

        except Exception as e:
            self.db.rollback()
            raise GiftServiceError(f"Failed to update gift: {str(e)}")

    def upsert_gift(
        self, household_id: str, event_id: str, user_id: str, data: Dict[str, Any]
    ) -> Gift:
        self._check_household(household_id, user_id)
        if not self.events.belongs_to_user(event_id, user_id):
            raise GiftPermissionError("You do not have access to this event")

        try:
            gift = self.gifts.upsert(household_id, event_id, data)
            self.db.commit()
            self.db.refresh(gift)
            logger.info(f"Saved gift for household {household_id}, event {event_id}")
            return gift

        except Exception as e:
            self.db.rollback()
            raise GiftServiceError(f"Failed to save gift: {str(e)}")

    def mark_thank_you_sent(
        self, household_id: str, event_id: str, user_id: str
    ) -> Gift:
        return self.update_gift(household_id, event_id, user_id, {"thankyou": True})
