from collections import defaultdict
from sqlalchemy.orm import Session
from typing import Dict, Any, Optional, List

from ..models.question import Question
from ..repositories.household_repository import HouseholdRepository
from ..repositories.invitation_repository import InvitationRepository
from ..repositories.event_repository import EventRepository
from ..repositories.user_repository import UserRepository
from ..repositories.website_repository import WebsiteRepository
from ..repositories.question_repository import QuestionRepository
from ..utils.date_helpers import DateHelpers
from .household_service import serialize_household
from .invitation_service import tally_rsvps
from .question_service import serialize_question
from .website_service import serialize_website, serialize_event, find_wedding_date


class DashboardService:
    """Everything the couple's dashboard shows, in one payload"""

    def __init__(self, db: Session):
        self.db = db
        self.households = HouseholdRepository(db)
        self.invitations = InvitationRepository(db)
        self.events = EventRepository(db)
        self.users = UserRepository(db)
        self.websites = WebsiteRepository(db)
        self.questions = QuestionRepository(db)

    def get_overview(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Dashboard data, or None when the user has not set up a website yet"""

        # Independent reads on the request's session
        households = self.households.find_by_user_id(user_id)
        invitations = self.invitations.find_by_user_id(user_id)
        events = self.events.find_with_questions(user_id)
        user = self.users.find_by_id(user_id)
        website = self.websites.find_by_user_id(user_id)

        if not user or not website:
            return None

        households_data = self._merge_invitations(households, invitations)
        events_data = [
            serialize_event(
                event, [self._with_recent_answer(q) for q in event.questions]
            )
            for event in events
        ]
        for event_data in events_data:
            event_data["guest_responses"] = tally_rsvps(invitations, event_data["id"])

        website_data = serialize_website(website)
        website_data["general_questions"] = [
            self._with_recent_answer(q) for q in website.general_questions
        ]

        wedding_data = {
            "website": website_data,
            "groom_first_name": user.groom_first_name,
            "groom_last_name": user.groom_last_name,
            "bride_first_name": user.bride_first_name,
            "bride_last_name": user.bride_last_name,
        }
        wedding_data.update(DateHelpers.wedding_date_info(find_wedding_date(events)))

        return {
            "wedding_data": wedding_data,
            "total_guests": sum(len(h["guests"]) for h in households_data),
            "total_events": len(events),
            "households": households_data,
            "events": events_data,
        }

    def _merge_invitations(self, households, invitations) -> List[Dict[str, Any]]:
        by_guest = defaultdict(list)
        for invitation in invitations:
            by_guest[invitation.guest_id].append(
                {
                    "guest_id": invitation.guest_id,
                    "event_id": invitation.event_id,
                    "rsvp": invitation.rsvp,
                }
            )

        households_data = []
        for household in households:
            data = serialize_household(household)
            for guest in data["guests"]:
                guest["invitations"] = by_guest.get(guest["id"], [])
            households_data.append(data)
        return households_data

    def _with_recent_answer(self, question: Question) -> Dict[str, Any]:
        data = serialize_question(question)
        answer = self.questions.find_recent_answer(question.id)
        data["recent_answer"] = (
            {
                "response": answer.response,
                "guest_id": answer.guest_id,
                "household_id": answer.household_id,
                "guest_first_name": answer.guest_first_name,
                "guest_last_name": answer.guest_last_name,
                "created_at": answer.created_at,
            }
            if answer
            else None
        )
        data["answer_count"] = self.questions.count_answers(question.id)
        return data
