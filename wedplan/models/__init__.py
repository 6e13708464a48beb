from .user import User
from .event import Event
from .household import Household
from .guest import Guest
from .invitation import Invitation
from .question import Question, Option, Answer, OptionResponse
from .website import Website
from .gift import Gift
from .guest_tag import GuestTag, GuestTagAssignment


__all__ = [
    "User",
    "Event",
    "Household",
    "Guest",
    "Invitation",
    "Question",
    "Option",
    "Answer",
    "OptionResponse",
    "Website",
    "Gift",
    "GuestTag",
    "GuestTagAssignment",
]
