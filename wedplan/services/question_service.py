from sqlalchemy.orm import Session
from typing import List
import logging

from ..models.question import Question
from ..models.enums import QuestionType
from ..repositories.question_repository import QuestionRepository
from ..repositories.event_repository import EventRepository
from ..repositories.website_repository import WebsiteRepository
from ..schemas.question import QuestionUpsert
from ..utils.constants import AppConstants
from .exceptions import (
    ServiceError,
    NotFoundError,
    PermissionDeniedError,
    BusinessRuleViolationError,
)

logger = logging.getLogger(__name__)


class QuestionServiceError(ServiceError):
    pass


class QuestionNotFoundError(QuestionServiceError, NotFoundError):
    pass


class QuestionPermissionError(QuestionServiceError, PermissionDeniedError):
    pass


class QuestionService:
    def __init__(self, db: Session):
        self.db = db
        self.questions = QuestionRepository(db)
        self.events = EventRepository(db)
        self.websites = WebsiteRepository(db)

    def _check_parent(self, event_id, website_id, user_id: str) -> None:
        """A question hangs off exactly one event or one website owned by the user"""
        if bool(event_id) == bool(website_id):
            raise BusinessRuleViolationError(
                "A question must belong to either an event or a website"
            )

        if event_id:
            if not self.events.find_by_id(event_id):
                raise QuestionNotFoundError("Event not found")
            if not self.events.belongs_to_user(event_id, user_id):
                raise QuestionPermissionError("You do not have access to this event")
        else:
            website = self.websites.find_by_id(website_id)
            if not website:
                raise QuestionNotFoundError("Website not found")
            if website.user_id != user_id:
                raise QuestionPermissionError("You do not have access to this website")

    def _check_owner(self, question: Question, user_id: str) -> None:
        owner_id = (
            question.event.user_id if question.event else question.website.user_id
        )
        if owner_id != user_id:
            raise QuestionPermissionError("You do not have access to this question")

    def upsert_question(self, user_id: str, data: QuestionUpsert) -> Question:
        """Create or update a question together with its options"""
        self._check_parent(data.event_id, data.website_id, user_id)

        if data.type == QuestionType.OPTION:
            if len(data.options) < AppConstants.MIN_OPTIONS_PER_QUESTION:
                raise BusinessRuleViolationError(
                    "Option questions need at least two options"
                )
            if any(not option.text.strip() for option in data.options):
                raise BusinessRuleViolationError("Options cannot be empty")

        question = None
        if data.question_id:
            question = self.questions.find_by_id(data.question_id)
            if question:
                self._check_owner(question, user_id)

        try:
            fields = {
                "text": data.text,
                "type": data.type.value,
                "is_required": data.is_required,
                "event_id": data.event_id,
                "website_id": data.website_id,
            }
            if question is None:
                if data.question_id:
                    fields["id"] = data.question_id
                question = self.questions.create(fields)
            else:
                self.questions.update(question, fields)

            if data.deleted_options:
                self.questions.delete_options(question, data.deleted_options)

            if data.type == QuestionType.OPTION:
                for option in data.options:
                    self.questions.upsert_option(question, option.model_dump())

            self.db.commit()
            self.db.refresh(question)
            return question

        except Exception as e:
            self.db.rollback()
            raise QuestionServiceError(f"Failed to save question: {str(e)}")

    def get_question(self, question_id: str, user_id: str) -> Question:
        question = self.questions.find_by_id(question_id)
        if not question:
            raise QuestionNotFoundError("Question not found")
        self._check_owner(question, user_id)
        return question

    def delete_question(self, question_id: str, user_id: str) -> str:
        question = self.get_question(question_id, user_id)

        try:
            self.questions.delete(question)
            self.db.commit()
            return question_id

        except Exception as e:
            self.db.rollback()
            raise QuestionServiceError(f"Failed to delete question: {str(e)}")

    def get_event_questions(self, event_id: str, user_id: str) -> List[Question]:
        self._check_parent(event_id, None, user_id)
        return self.questions.find_by_event_id(event_id)

    def get_website_questions(self, website_id: str, user_id: str) -> List[Question]:
        self._check_parent(None, website_id, user_id)
        return self.questions.find_by_website_id(website_id)


def serialize_question(question: Question) -> dict:
    return {
        "id": question.id,
        "text": question.text,
        "type": question.type,
        "is_required": question.is_required,
        "event_id": question.event_id,
        "website_id": question.website_id,
        "options": [
            {
                "id": option.id,
                "text": option.text,
                "description": option.description,
                "response_count": option.response_count,
            }
            for option in question.options
        ],
    }
