# Import all router modules to make them available
from . import dashboard
from . import event
from . import households
from . import guests
from . import invitations
from . import questions
from . import gifts
from . import guest_tags
from . import users
from . import website
from . import rsvp

__all__ = [
    "dashboard",
    "event",
    "households",
    "guests",
    "invitations",
    "questions",
    "gifts",
    "guest_tags",
    "users",
    "website",
    "rsvp",
]
