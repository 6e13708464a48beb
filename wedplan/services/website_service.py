from sqlalchemy.orm import Session
from typing import Optional, Dict, Any
import logging
import re

from ..config import WEBSITE_BASE_PATH
from ..models.user import User
from ..models.website import Website
from ..models.enums import QuestionType
from ..repositories.website_repository import WebsiteRepository
from ..repositories.event_repository import EventRepository
from ..repositories.guest_repository import GuestRepository
from ..repositories.invitation_repository import InvitationRepository
from ..repositories.question_repository import QuestionRepository
from ..repositories.user_repository import UserRepository
from ..schemas.website import WebsiteCreate, WebsiteUpdate
from ..utils.constants import AppConstants
from ..utils.date_helpers import DateHelpers
from ..utils.security import hash_password, verify_password
from .exceptions import (
    ServiceError,
    NotFoundError,
    ConflictError,
    OrchestrationError,
)
from .guest_tag_service import GuestTagService
from .question_service import serialize_question

logger = logging.getLogger(__name__)


class WebsiteServiceError(ServiceError):
    pass


class WebsiteNotFoundError(WebsiteServiceError, NotFoundError):
    pass


class WebsiteConflictError(WebsiteServiceError, ConflictError):
    pass


def build_sub_url(first_name, last_name, partner_first_name, partner_last_name) -> str:
    """e.g. "johnsmithandjanedoe" """
    raw = f"{first_name}{last_name}and{partner_first_name}{partner_last_name}"
    return re.sub(r"\W", "", raw).lower()


def build_url(base_path: Optional[str], sub_url: str) -> str:
    return f"{(base_path or WEBSITE_BASE_PATH).rstrip('/')}/{sub_url}"


def serialize_website(website: Website) -> Dict[str, Any]:
    """Public view of a website, never includes the password hash"""
    return {
        "id": website.id,
        "user_id": website.user_id,
        "url": website.url,
        "sub_url": website.sub_url,
        "groom_first_name": website.groom_first_name,
        "groom_last_name": website.groom_last_name,
        "bride_first_name": website.bride_first_name,
        "bride_last_name": website.bride_last_name,
        "is_password_enabled": website.is_password_enabled,
        "is_rsvp_enabled": website.is_rsvp_enabled,
        "cover_photo_url": website.cover_photo_url,
        "general_questions": [serialize_question(q) for q in website.general_questions],
    }


def serialize_event(event, questions=None) -> Dict[str, Any]:
    data = {
        "id": event.id,
        "name": event.name,
        "date": event.date,
        "start_time": event.start_time,
        "end_time": event.end_time,
        "venue": event.venue,
        "attire": event.attire,
        "description": event.description,
        "user_id": event.user_id,
        "collect_rsvp": event.collect_rsvp,
    }
    if questions is not None:
        data["questions"] = questions
    return data


def find_wedding_date(events):
    wedding_day = next(
        (e for e in events if e.name == AppConstants.WEDDING_DAY_EVENT_NAME), None
    )
    return wedding_day.date if wedding_day else None


class WebsiteService:
    def __init__(self, db: Session):
        self.db = db
        self.websites = WebsiteRepository(db)
        self.events = EventRepository(db)
        self.guests = GuestRepository(db)
        self.invitations = InvitationRepository(db)
        self.questions = QuestionRepository(db)
        self.users = UserRepository(db)
        self.tag_service = GuestTagService(db)

    def create_website(self, user: User, data: WebsiteCreate) -> Website:
        """Onboard a couple.

        Creates the default "Wedding Day" event, fills in the couple's names on
        the user profile, creates the website with its default general
        questions and seeds the default guest tags. All in one transaction.
        """
        if self.websites.find_by_user_id(user.id):
            raise WebsiteConflictError("You already have a wedding website")

        sub_url = build_sub_url(
            data.first_name,
            data.last_name,
            data.partner_first_name,
            data.partner_last_name,
        )
        if not sub_url:
            raise WebsiteServiceError("Could not build a website address from the names")
        if self.websites.sub_url_taken(sub_url):
            raise WebsiteConflictError(f"The address {sub_url} is already taken")
        url = build_url(data.base_path, sub_url)

        couple = {
            "groom_first_name": data.first_name,
            "groom_last_name": data.last_name,
            "bride_first_name": data.partner_first_name,
            "bride_last_name": data.partner_last_name,
        }

        try:
            event = self.events.create(
                user.id,
                {"name": AppConstants.WEDDING_DAY_EVENT_NAME, "collect_rsvp": True},
            )
            self.invitations.create_many(
                user.id, self.guests.find_ids_by_user_id(user.id), [event.id]
            )

            profile = dict(couple, website_url=url)
            if data.email:
                profile["email"] = data.email
            self.users.update(user, profile)

            website = self.websites.create(
                user.id, dict(couple, url=url, sub_url=sub_url)
            )
            if not website:
                raise OrchestrationError("Failed to create wedding website")

            for text in AppConstants.DEFAULT_GENERAL_QUESTIONS:
                self.questions.create(
                    {
                        "text": text,
                        "type": QuestionType.TEXT.value,
                        "website_id": website.id,
                    }
                )

            self.tag_service.add_initial_tags(user.id)

            self.db.commit()
            self.db.refresh(website)
            logger.info(f"Created website {sub_url} for user {user.id}")
            return website

        except OrchestrationError:
            self.db.rollback()
            raise
        except Exception as e:
            self.db.rollback()
            raise WebsiteServiceError(f"Failed to create website: {str(e)}")

    def get_website(self, user_id: str) -> Optional[Website]:
        return self.websites.find_by_user_id(user_id)

    def _require_website(self, user_id: str) -> Website:
        website = self.websites.find_by_user_id(user_id)
        if not website:
            raise WebsiteNotFoundError("Wedding website not found")
        return website

    def get_by_sub_url(self, sub_url: str) -> Optional[Website]:
        if not sub_url:
            return None
        return self.websites.find_by_sub_url(sub_url)

    def update_website(self, user_id: str, data: WebsiteUpdate) -> Website:
        website = self._require_website(user_id)
        update_data = data.model_dump(exclude_unset=True)
        changes: Dict[str, Any] = {}

        if "is_password_enabled" in update_data:
            changes["is_password_enabled"] = update_data["is_password_enabled"]
        if update_data.get("password"):
            changes["password"] = hash_password(update_data["password"])

        new_url = None
        sub_url = update_data.get("sub_url")
        if sub_url and sub_url != website.sub_url:
            if self.websites.sub_url_taken(sub_url, exclude_user_id=user_id):
                raise WebsiteConflictError(f"The address {sub_url} is already taken")
            base_path = update_data.get("base_path") or website.url.rsplit("/", 1)[0]
            new_url = build_url(base_path, sub_url)
            changes["sub_url"] = sub_url
            changes["url"] = new_url

        if changes.get("is_password_enabled") and not (
            changes.get("password") or website.password
        ):
            raise WebsiteServiceError("Set a password before enabling protection")

        try:
            self.websites.update(website, changes)
            if new_url:
                user = self.users.find_by_id(user_id)
                self.users.update(user, {"website_url": new_url})
            self.db.commit()
            self.db.refresh(website)
            return website

        except Exception as e:
            self.db.rollback()
            raise WebsiteServiceError(f"Failed to update website: {str(e)}")

    def update_rsvp_enabled(self, user_id: str, is_rsvp_enabled: bool) -> Website:
        website = self._require_website(user_id)

        try:
            self.websites.update(website, {"is_rsvp_enabled": is_rsvp_enabled})
            self.db.commit()
            self.db.refresh(website)
            return website

        except Exception as e:
            self.db.rollback()
            raise WebsiteServiceError(f"Failed to update RSVP setting: {str(e)}")

    def update_cover_photo(
        self, user_id: str, cover_photo_url: Optional[str]
    ) -> Website:
        website = self._require_website(user_id)

        try:
            self.websites.update(website, {"cover_photo_url": cover_photo_url})
            self.db.commit()
            self.db.refresh(website)
            return website

        except Exception as e:
            self.db.rollback()
            raise WebsiteServiceError(f"Failed to update cover photo: {str(e)}")

    def verify_website_password(self, sub_url: str, password: str) -> bool:
        website = self.get_by_sub_url(sub_url)
        if not website:
            raise WebsiteNotFoundError("This website does not exist.")
        if not website.is_password_enabled:
            return True
        return verify_password(password, website.password)

    def fetch_wedding_data(self, sub_url: str) -> Dict[str, Any]:
        """Everything the public microsite needs to render"""
        website = self.get_by_sub_url(sub_url)
        if not website:
            raise WebsiteNotFoundError("This website does not exist.")

        wedding_user = self.users.find_by_id(website.user_id)
        if not wedding_user:
            raise OrchestrationError("Failed to fetch wedding website data.")

        events = self.events.find_with_questions(website.user_id)
        data = {
            "groom_first_name": wedding_user.groom_first_name,
            "groom_last_name": wedding_user.groom_last_name,
            "bride_first_name": wedding_user.bride_first_name,
            "bride_last_name": wedding_user.bride_last_name,
            "website": serialize_website(website),
            "events": [
                serialize_event(
                    event, [serialize_question(q) for q in event.questions]
                )
                for event in events
            ],
        }
        data.update(DateHelpers.wedding_date_info(find_wedding_date(events)))
        return data
