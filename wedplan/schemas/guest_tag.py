from pydantic import BaseModel, validator, Field
from typing import Optional
import re

from ..utils.constants import AppConstants


def _clean_name(v):
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("Tag name is required")
    if len(v) > AppConstants.MAX_TAG_NAME_LENGTH:
        raise ValueError(
            f"Tag name must be {AppConstants.MAX_TAG_NAME_LENGTH} characters or less"
        )
    return v


def _check_color(v):
    if v is not None and not re.match(AppConstants.HEX_COLOR_PATTERN, v):
        raise ValueError("Color must be a hex value like #3b82f6")
    return v


class GuestTagCreate(BaseModel):
    name: str
    color: Optional[str] = None

    @validator("name")
    def validate_name(cls, v):
        return _clean_name(v)

    @validator("color")
    def validate_color(cls, v):
        return _check_color(v)


class GuestTagUpdate(BaseModel):
    name: Optional[str] = None
    color: Optional[str] = None

    @validator("name")
    def validate_name(cls, v):
        return _clean_name(v)

    @validator("color")
    def validate_color(cls, v):
        return _check_color(v)


class GuestTagResponse(BaseModel):
    id: str
    name: str
    color: Optional[str] = None
    user_id: str
    guest_count: Optional[int] = Field(None, ge=0)

    class Config:
        from_attributes = True
