from pydantic import BaseModel, Field
from typing import Optional, List

from ..models.enums import RsvpStatus, QuestionType


class RsvpResponseInput(BaseModel):
    event_id: str
    guest_id: int
    rsvp: RsvpStatus


class QuestionAnswerInput(BaseModel):
    question_id: str
    question_type: QuestionType
    # Answer text, or the chosen option id for Option questions
    response: str
    guest_id: Optional[int] = None
    household_id: Optional[str] = None
    guest_first_name: Optional[str] = None
    guest_last_name: Optional[str] = None


class RsvpSubmission(BaseModel):
    rsvp_responses: List[RsvpResponseInput] = Field(default_factory=list)
    answers_to_questions: List[QuestionAnswerInput] = Field(default_factory=list)
