from pydantic import BaseModel, Field
from typing import Optional, List

from ..models.enums import QuestionType


class OptionInput(BaseModel):
    id: Optional[str] = None
    text: str = Field(..., max_length=200)
    description: Optional[str] = Field(None, max_length=500)


class QuestionUpsert(BaseModel):
    question_id: Optional[str] = None
    event_id: Optional[str] = None
    website_id: Optional[str] = None
    text: str = Field(..., min_length=1, max_length=500)
    type: QuestionType = QuestionType.TEXT
    is_required: bool = False
    options: List[OptionInput] = Field(default_factory=list)
    deleted_options: List[str] = Field(default_factory=list)
