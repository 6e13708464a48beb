from pydantic import BaseModel, Field
from typing import List

from ..models.enums import RsvpStatus


class InvitationCreate(BaseModel):
    guest_id: int
    event_id: str
    rsvp: RsvpStatus = RsvpStatus.NOT_INVITED


class InvitationUpdate(BaseModel):
    rsvp: RsvpStatus


class InvitationBulkCreate(BaseModel):
    guest_ids: List[int] = Field(..., min_length=1)
    event_ids: List[str] = Field(..., min_length=1)
    rsvp: RsvpStatus = RsvpStatus.NOT_INVITED


class InvitationResponse(BaseModel):
    guest_id: int
    event_id: str
    rsvp: str

    class Config:
        from_attributes = True
