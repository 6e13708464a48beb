from .user_repository import UserRepository
from .event_repository import EventRepository
from .household_repository import HouseholdRepository
from .guest_repository import GuestRepository
from .invitation_repository import InvitationRepository
from .question_repository import QuestionRepository
from .website_repository import WebsiteRepository
from .gift_repository import GiftRepository
from .guest_tag_repository import GuestTagRepository

__all__ = [
    "UserRepository",
    "EventRepository",
    "HouseholdRepository",
    "GuestRepository",
    "InvitationRepository",
    "QuestionRepository",
    "WebsiteRepository",
    "GiftRepository",
    "GuestTagRepository",
]
