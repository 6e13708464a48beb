from enum import Enum


class RsvpStatus(str, Enum):
    NOT_INVITED = "Not Invited"
    INVITED = "Invited"
    ATTENDING = "Attending"
    DECLINED = "Declined"


class QuestionType(str, Enum):
    TEXT = "Text"
    OPTION = "Option"


class AgeGroup(str, Enum):
    INFANT = "INFANT"
    CHILD = "CHILD"
    TEEN = "TEEN"
    ADULT = "ADULT"


# Statuses that mean the guest was actually sent an invitation
INVITED_STATUSES = (
    RsvpStatus.INVITED.value,
    RsvpStatus.ATTENDING.value,
    RsvpStatus.DECLINED.value,
)

# Answer/OptionResponse keys are non-nullable, these stand in for "not applicable"
NO_GUEST_ID = -1
NO_HOUSEHOLD_ID = "-1"
