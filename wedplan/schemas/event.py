from pydantic import BaseModel, validator, Field
from typing import Optional
from datetime import datetime, date

from ..utils.constants import AppConstants


class EventBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=AppConstants.MAX_EVENT_NAME_LENGTH)
    date: Optional[datetime] = None
    start_time: Optional[str] = Field(None, max_length=20)
    end_time: Optional[str] = Field(None, max_length=20)
    venue: Optional[str] = Field(None, max_length=200)
    attire: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=2000)

    @validator("date")
    def validate_date(cls, v):
        if v is not None and v.date() < date.today():
            raise ValueError("Event date cannot be in the past")
        return v


class EventCreate(EventBase):
    collect_rsvp: bool = False


class EventUpdate(EventBase):
    name: Optional[str] = Field(
        None, min_length=1, max_length=AppConstants.MAX_EVENT_NAME_LENGTH
    )


class CollectRsvpUpdate(BaseModel):
    collect_rsvp: bool


class EventResponse(BaseModel):
    id: str
    name: str
    date: Optional[datetime] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    venue: Optional[str] = None
    attire: Optional[str] = None
    description: Optional[str] = None
    collect_rsvp: bool
    user_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
