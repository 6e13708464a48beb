from pydantic import BaseModel, Field
from typing import Optional


class GiftUpdate(BaseModel):
    description: Optional[str] = Field(None, max_length=500)
    thankyou: Optional[bool] = None


class GiftUpsert(BaseModel):
    household_id: str
    event_id: str
    description: Optional[str] = Field(None, max_length=500)
    thankyou: bool = False


class GiftResponse(BaseModel):
    household_id: str
    event_id: str
    description: Optional[str] = None
    thankyou: bool

    class Config:
        from_attributes = True
