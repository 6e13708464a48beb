from pydantic import BaseModel, Field, EmailStr
from typing import Optional

from ..utils.constants import AppConstants


class WebsiteCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    partner_first_name: str = Field(..., min_length=1, max_length=100)
    partner_last_name: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    base_path: Optional[str] = None


class WebsiteUpdate(BaseModel):
    is_password_enabled: Optional[bool] = None
    password: Optional[str] = Field(None, min_length=1, max_length=100)
    base_path: Optional[str] = None
    sub_url: Optional[str] = Field(
        None, min_length=1, max_length=100, pattern=AppConstants.SUB_URL_PATTERN
    )


class RsvpEnabledUpdate(BaseModel):
    is_rsvp_enabled: bool


class CoverPhotoUpdate(BaseModel):
    cover_photo_url: Optional[str] = None


class WebsitePasswordCheck(BaseModel):
    password: str
