from pydantic import BaseModel, Field
from typing import Optional


class UserProfileUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    groom_first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    groom_last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    bride_first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    bride_last_name: Optional[str] = Field(None, min_length=1, max_length=100)


class UserResponse(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    website_url: Optional[str] = None
    groom_first_name: Optional[str] = None
    groom_last_name: Optional[str] = None
    bride_first_name: Optional[str] = None
    bride_last_name: Optional[str] = None

    class Config:
        from_attributes = True
