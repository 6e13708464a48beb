from enum import Enum
from typing import Dict, Any, List, Optional, Iterable

from ..models.enums import INVITED_STATUSES


class StepType(str, Enum):
    FIND_INVITATION = "find_invitation"
    CONFIRM_HOUSEHOLD = "confirm_household"
    EVENT_RSVP = "event_rsvp"
    QUESTION = "question"
    SUBMIT = "submit"
    CONFIRMATION = "confirmation"


class RsvpFormFlow:
    """Ordered steps of the guest RSVP wizard for one household.

    Built from the public wedding data and a serialized household. Nothing is
    stored between steps, the client walks the list and submits once.
    """

    def __init__(self, wedding_data: Dict[str, Any], household: Dict[str, Any]):
        self.wedding_data = wedding_data
        self.household = household

    def _invited_guests(self, event_id: str) -> List[Dict[str, Any]]:
        guests = []
        for guest in self.household["guests"]:
            if any(
                inv["event_id"] == event_id and inv["rsvp"] in INVITED_STATUSES
                for inv in guest["invitations"]
            ):
                guests.append(guest)
        return guests

    def rsvp_events(self) -> List[Dict[str, Any]]:
        """Events collecting RSVPs that someone in the household is invited to"""
        return [
            event
            for event in self.wedding_data["events"]
            if event["collect_rsvp"] and self._invited_guests(event["id"])
        ]

    def build_steps(
        self, attending_event_ids: Optional[Iterable[str]] = None
    ) -> List[Dict[str, Any]]:
        events = self.rsvp_events()
        attending = set(attending_event_ids) if attending_event_ids is not None else None

        steps: List[Dict[str, Any]] = [
            {"type": StepType.FIND_INVITATION.value},
            {
                "type": StepType.CONFIRM_HOUSEHOLD.value,
                "household_id": self.household["id"],
            },
        ]

        for event in events:
            steps.append(
                {
                    "type": StepType.EVENT_RSVP.value,
                    "event_id": event["id"],
                    "event_name": event["name"],
                    "guest_ids": [g["id"] for g in self._invited_guests(event["id"])],
                }
            )

        for event in events:
            if attending is not None and event["id"] not in attending:
                continue
            for question in event.get("questions", []):
                steps.append(self._question_step(question, event["id"]))

        for question in self.wedding_data["website"]["general_questions"]:
            steps.append(self._question_step(question, None))

        steps.append({"type": StepType.SUBMIT.value})
        steps.append({"type": StepType.CONFIRMATION.value})

        for index, step in enumerate(steps):
            step["index"] = index
        return steps

    @staticmethod
    def _question_step(question: Dict[str, Any], event_id: Optional[str]) -> Dict[str, Any]:
        return {
            "type": StepType.QUESTION.value,
            "question_id": question["id"],
            "event_id": event_id,
            "text": question["text"],
            "question_type": question["type"],
            "is_required": question["is_required"],
            "options": question["options"],
        }
