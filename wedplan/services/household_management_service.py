from sqlalchemy.orm import Session
from typing import List, Dict, Any
import logging

from ..models.guest import Guest
from ..models.enums import RsvpStatus
from ..repositories.household_repository import HouseholdRepository
from ..repositories.guest_repository import GuestRepository
from ..repositories.invitation_repository import InvitationRepository
from ..repositories.gift_repository import GiftRepository
from ..repositories.event_repository import EventRepository
from ..repositories.guest_tag_repository import GuestTagRepository
from ..schemas.household import HouseholdCreate, HouseholdUpdate, PartyMember
from .exceptions import OrchestrationError, BusinessRuleViolationError
from .household_service import (
    ADDRESS_FIELDS,
    HouseholdServiceError,
    HouseholdNotFoundError,
    HouseholdPermissionError,
    serialize_household,
)

logger = logging.getLogger(__name__)

GUEST_FIELDS = ("first_name", "last_name", "email", "phone")


def primary_contact_index(party: List[PartyMember]) -> int:
    """Index of the guest who ends up as primary contact: first flagged one, else 0"""
    return next(
        (index for index, member in enumerate(party) if member.is_primary_contact), 0
    )


class HouseholdManagementService:
    """Creates and updates a household with its whole guest party at once"""

    def __init__(self, db: Session):
        self.db = db
        self.households = HouseholdRepository(db)
        self.guests = GuestRepository(db)
        self.invitations = InvitationRepository(db)
        self.gifts = GiftRepository(db)
        self.events = EventRepository(db)
        self.tags = GuestTagRepository(db)

    def _validate_party(self, user_id: str, party: List[PartyMember]) -> None:
        for member in party:
            for event_id in member.invites:
                if not self.events.belongs_to_user(event_id, user_id):
                    raise HouseholdPermissionError(f"Event {event_id} is not yours")
            if member.tag_ids:
                unique_ids = list(dict.fromkeys(member.tag_ids))
                if len(self.tags.find_ids_for_user(user_id, unique_ids)) != len(
                    unique_ids
                ):
                    raise HouseholdPermissionError(
                        "One or more tags do not belong to you"
                    )

    def _guest_fields(self, member: PartyMember, is_primary: bool) -> Dict[str, Any]:
        fields = {field: getattr(member, field) for field in GUEST_FIELDS}
        fields["age_group"] = member.age_group.value
        fields["is_primary_contact"] = is_primary
        return fields

    def _create_guest(
        self,
        user_id: str,
        household_id: str,
        member: PartyMember,
        is_primary: bool,
        event_ids: List[str],
    ) -> Guest:
        guest = self.guests.create(
            user_id, household_id, self._guest_fields(member, is_primary)
        )
        if not guest:
            raise OrchestrationError("Failed to create guest")

        # Every guest gets one invitation per event, uninvited unless stated
        for event_id in event_ids:
            rsvp = member.invites.get(event_id, RsvpStatus.NOT_INVITED)
            self.invitations.create(user_id, guest.id, event_id, RsvpStatus(rsvp).value)

        if member.tag_ids:
            self.guests.replace_tags(guest, member.tag_ids)
        return guest

    def _load(self, household_id: str) -> Dict[str, Any]:
        household = self.households.find_with_guests_and_gifts(household_id)
        if not household:
            raise OrchestrationError("Household disappeared after saving")
        return serialize_household(household)

    def create_household_with_guests(
        self, user_id: str, data: HouseholdCreate
    ) -> Dict[str, Any]:
        self._validate_party(user_id, data.guest_party)

        try:
            household = self.households.create(
                user_id, data.model_dump(include=set(ADDRESS_FIELDS))
            )
            if not household:
                raise OrchestrationError("Failed to create household")

            # One gift row per event the first guest is listed for
            self.gifts.create_many(household.id, list(data.guest_party[0].invites))

            event_ids = [event.id for event in self.events.find_by_user_id(user_id)]
            primary_index = primary_contact_index(data.guest_party)
            for index, member in enumerate(data.guest_party):
                self._create_guest(
                    user_id, household.id, member, index == primary_index, event_ids
                )

            self.db.commit()
            logger.info(
                f"Created household {household.id} with {len(data.guest_party)} guests"
            )
            return self._load(household.id)

        except (OrchestrationError, HouseholdServiceError):
            self.db.rollback()
            raise
        except Exception as e:
            self.db.rollback()
            raise HouseholdServiceError(f"Failed to create household: {str(e)}")

    def update_household_with_guests(
        self, user_id: str, data: HouseholdUpdate
    ) -> Dict[str, Any]:
        household = self.households.find_with_guests_and_gifts(data.household_id)
        if not household:
            raise HouseholdNotFoundError("Household not found")
        if household.user_id != user_id:
            raise HouseholdPermissionError("You do not have access to this household")

        self._validate_party(user_id, data.guest_party)
        for gift in data.gifts:
            if not self.events.belongs_to_user(gift.event_id, user_id):
                raise HouseholdPermissionError(f"Event {gift.event_id} is not yours")

        deleted_ids = set(data.deleted_guests)
        for guest_id in deleted_ids | {
            m.guest_id for m in data.guest_party if m.guest_id is not None
        }:
            if not household.has_guest(guest_id):
                raise BusinessRuleViolationError(
                    f"Guest {guest_id} is not part of this household"
                )
        if any(m.guest_id in deleted_ids for m in data.guest_party):
            raise BusinessRuleViolationError("A deleted guest cannot also be updated")

        try:
            self.households.update(
                household, data.model_dump(include=set(ADDRESS_FIELDS), exclude_unset=True)
            )

            removed = [g for g in household.guests if g.id in deleted_ids]
            if removed:
                for guest in removed:
                    household.guests.remove(guest)
                self.guests.delete_many(removed)
                logger.info(
                    f"Removed guests {sorted(deleted_ids)} from household {household.id}"
                )

            self.guests.clear_primary_contact(household.id)

            event_ids = [event.id for event in self.events.find_by_user_id(user_id)]
            primary_index = primary_contact_index(data.guest_party)
            for index, member in enumerate(data.guest_party):
                is_primary = index == primary_index
                if member.guest_id is None:
                    self._create_guest(
                        user_id, household.id, member, is_primary, event_ids
                    )
                    continue

                guest = self.guests.find_by_id(member.guest_id)
                self.guests.update(guest, self._guest_fields(member, is_primary))
                for event_id, rsvp in member.invites.items():
                    invitation = self.invitations.find(guest.id, event_id)
                    if invitation:
                        self.invitations.update_rsvp(invitation, RsvpStatus(rsvp).value)
                    else:
                        self.invitations.create(
                            user_id, guest.id, event_id, RsvpStatus(rsvp).value
                        )
                if member.tag_ids is not None:
                    self.guests.replace_tags(guest, member.tag_ids)

            for gift in data.gifts:
                self.gifts.upsert(
                    household.id,
                    gift.event_id,
                    {"description": gift.description, "thankyou": gift.thankyou},
                )

            self.db.commit()
            return self._load(household.id)

        except (OrchestrationError, HouseholdServiceError):
            self.db.rollback()
            raise
        except Exception as e:
            self.db.rollback()
            raise HouseholdServiceError(f"Failed to update household: {str(e)}")

    def delete_household(self, user_id: str, household_id: str) -> str:
        """Delete a household, its guests, their invitations and its gifts"""
        household = self.households.find_by_id(household_id)
        if not household:
            raise HouseholdNotFoundError("Household not found")
        if household.user_id != user_id:
            raise HouseholdPermissionError("You do not have access to this household")

        try:
            self.households.delete(household)
            self.db.commit()
            logger.info(f"Deleted household {household_id}")
            return household_id

        except Exception as e:
            self.db.rollback()
            raise HouseholdServiceError(f"Failed to delete household: {str(e)}")
