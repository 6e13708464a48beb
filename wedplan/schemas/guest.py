from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime

from ..models.enums import AgeGroup
from ..utils.constants import AppConstants
from .invitation import InvitationResponse


class GuestBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=30)
    age_group: AgeGroup = AgeGroup.ADULT
    is_primary_contact: bool = False


class GuestCreate(GuestBase):
    household_id: str


class GuestUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=30)
    age_group: Optional[AgeGroup] = None
    is_primary_contact: Optional[bool] = None


class GuestTagsUpdate(BaseModel):
    tag_ids: List[str] = Field(
        default_factory=list, max_length=AppConstants.MAX_TAGS_PER_GUEST
    )


class GuestDeleteMany(BaseModel):
    guest_ids: List[int] = Field(..., min_length=1)


class GuestResponse(BaseModel):
    id: int
    household_id: str
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    age_group: AgeGroup
    is_primary_contact: bool
    created_at: Optional[datetime] = None
    invitations: List[InvitationResponse] = []

    class Config:
        from_attributes = True
