from pydantic import BaseModel, Field
from typing import Optional, List, Dict

from ..models.enums import AgeGroup, RsvpStatus
from ..utils.constants import AppConstants


class HouseholdBase(BaseModel):
    address1: Optional[str] = Field(None, max_length=200)
    address2: Optional[str] = Field(None, max_length=200)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, max_length=100)
    zip_code: Optional[str] = Field(None, max_length=20)
    country: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=30)
    email: Optional[str] = Field(None, max_length=200)
    notes: Optional[str] = Field(None, max_length=2000)


class PartyMember(BaseModel):
    """A guest as submitted from the household form"""

    guest_id: Optional[int] = None
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=30)
    age_group: AgeGroup = AgeGroup.ADULT
    is_primary_contact: bool = False
    # event id -> rsvp status
    invites: Dict[str, RsvpStatus] = Field(default_factory=dict)
    tag_ids: Optional[List[str]] = Field(
        None, max_length=AppConstants.MAX_TAGS_PER_GUEST
    )


class GiftInput(BaseModel):
    event_id: str
    description: Optional[str] = Field(None, max_length=500)
    thankyou: bool = False


class HouseholdCreate(HouseholdBase):
    guest_party: List[PartyMember] = Field(..., min_length=1)


class HouseholdUpdate(HouseholdBase):
    household_id: str
    guest_party: List[PartyMember] = Field(..., min_length=1)
    deleted_guests: List[int] = Field(default_factory=list)
    gifts: List[GiftInput] = Field(default_factory=list)
