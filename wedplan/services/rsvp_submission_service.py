from sqlalchemy.orm import Session
from typing import Dict, Any
import logging

from ..models.enums import QuestionType, NO_GUEST_ID, NO_HOUSEHOLD_ID
from ..repositories.invitation_repository import InvitationRepository
from ..repositories.question_repository import QuestionRepository
from ..schemas.rsvp import RsvpSubmission, QuestionAnswerInput
from .exceptions import (
    ServiceError,
    NotFoundError,
    BusinessRuleViolationError,
    OrchestrationError,
)

logger = logging.getLogger(__name__)


class RsvpSubmissionError(ServiceError):
    pass


class RsvpTargetNotFoundError(RsvpSubmissionError, NotFoundError):
    pass


class RsvpStorageError(RsvpSubmissionError, OrchestrationError):
    """The database refused part of the submission"""

    pass


class RsvpSubmissionService:
    """Saves a guest's RSVP form: statuses, text answers and option choices.

    The whole submission is one transaction. If any invitation, question or
    option is missing nothing is stored.
    """

    def __init__(self, db: Session):
        self.db = db
        self.invitations = InvitationRepository(db)
        self.questions = QuestionRepository(db)

    def submit_rsvp(self, data: RsvpSubmission) -> Dict[str, Any]:
        try:
            for response in data.rsvp_responses:
                invitation = self.invitations.find(response.guest_id, response.event_id)
                if not invitation:
                    raise RsvpTargetNotFoundError(
                        f"No invitation for guest {response.guest_id} "
                        f"and event {response.event_id}"
                    )
                self.invitations.update_rsvp(invitation, response.rsvp.value)

            for answer in data.answers_to_questions:
                if answer.question_type == QuestionType.TEXT:
                    self._save_text_answer(answer)
                else:
                    self._save_option_answer(answer)

            self.db.commit()
            logger.info(
                f"RSVP submitted: {len(data.rsvp_responses)} responses, "
                f"{len(data.answers_to_questions)} answers"
            )
            return {"success": True}

        except ServiceError:
            self.db.rollback()
            raise
        except Exception as e:
            self.db.rollback()
            logger.error(f"RSVP submission failed: {str(e)}")
            raise RsvpStorageError(f"Failed to submit RSVP: {str(e)}")

    def _names(self, answer: QuestionAnswerInput) -> Dict[str, str]:
        """Guest names sent with the answer, leaving out the missing ones"""
        names = {
            "guest_first_name": answer.guest_first_name,
            "guest_last_name": answer.guest_last_name,
        }
        return {field: value for field, value in names.items() if value is not None}

    def _key(self, answer: QuestionAnswerInput):
        guest_id = answer.guest_id if answer.guest_id is not None else NO_GUEST_ID
        household_id = answer.household_id or NO_HOUSEHOLD_ID
        return answer.question_id, guest_id, household_id

    def _check_question(self, answer: QuestionAnswerInput):
        question = self.questions.find_by_id(answer.question_id)
        if not question:
            raise RsvpTargetNotFoundError(f"Question {answer.question_id} not found")
        if question.type != answer.question_type.value:
            raise BusinessRuleViolationError(
                f"Question {question.id} expects a {question.type} answer"
            )
        return question

    def _save_text_answer(self, answer: QuestionAnswerInput) -> None:
        self._check_question(answer)
        question_id, guest_id, household_id = self._key(answer)
        self.questions.upsert_answer(
            question_id,
            guest_id,
            household_id,
            {"response": answer.response, **self._names(answer)},
        )

    def _save_option_answer(self, answer: QuestionAnswerInput) -> None:
        """Record the chosen option, keeping every option's response_count in step"""
        self._check_question(answer)
        option = self.questions.find_option(answer.response)
        if not option or option.question_id != answer.question_id:
            raise RsvpTargetNotFoundError(
                f"Option {answer.response} not found for question {answer.question_id}"
            )

        question_id, guest_id, household_id = self._key(answer)
        existing = self.questions.find_option_response(
            question_id, guest_id, household_id
        )

        if existing is None:
            self.questions.create_option_response(
                question_id=question_id,
                guest_id=guest_id,
                household_id=household_id,
                option_id=option.id,
                guest_first_name=answer.guest_first_name,
                guest_last_name=answer.guest_last_name,
            )
            self.questions.increment_option_count(option.id)
        elif existing.option_id != option.id:
            previous_option_id = existing.option_id
            self.questions.update_option_response(
                existing,
                {"option_id": option.id, **self._names(answer)},
            )
            self.questions.increment_option_count(previous_option_id, -1)
            self.questions.increment_option_count(option.id)
