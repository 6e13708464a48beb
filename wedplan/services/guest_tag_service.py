from sqlalchemy.orm import Session
from typing import List, Dict, Any
import logging

from ..models.guest_tag import GuestTag
from ..repositories.guest_tag_repository import GuestTagRepository
from ..schemas.guest_tag import GuestTagCreate, GuestTagUpdate
from ..utils.constants import AppConstants
from .exceptions import (
    ServiceError,
    NotFoundError,
    PermissionDeniedError,
    ConflictError,
)

logger = logging.getLogger(__name__)


class GuestTagServiceError(ServiceError):
    pass


class GuestTagNotFoundError(GuestTagServiceError, NotFoundError):
    pass


class GuestTagPermissionError(GuestTagServiceError, PermissionDeniedError):
    pass


class GuestTagConflictError(GuestTagServiceError, ConflictError):
    pass


class GuestTagService:
    def __init__(self, db: Session):
        self.db = db
        self.tags = GuestTagRepository(db)

    def create_tag(self, user_id: str, tag_data: GuestTagCreate) -> GuestTag:
        if self.tags.find_by_name(user_id, tag_data.name):
            raise GuestTagConflictError(f'A tag named "{tag_data.name}" already exists')

        try:
            tag = self.tags.create(user_id, tag_data.model_dump())
            self.db.commit()
            self.db.refresh(tag)
            return tag

        except Exception as e:
            self.db.rollback()
            raise GuestTagServiceError(f"Failed to create tag: {str(e)}")

    def get_tags(self, user_id: str) -> List[GuestTag]:
        return self.tags.find_by_user_id(user_id)

    def get_tag(self, tag_id: str, user_id: str) -> GuestTag:
        tag = self.tags.find_by_id(tag_id)
        if not tag:
            raise GuestTagNotFoundError("Tag not found")
        if tag.user_id != user_id:
            raise GuestTagPermissionError("You do not have access to this tag")
        return tag

    def get_tag_with_count(self, tag_id: str, user_id: str) -> Dict[str, Any]:
        tag = self.get_tag(tag_id, user_id)
        return {
            "id": tag.id,
            "name": tag.name,
            "color": tag.color,
            "user_id": tag.user_id,
            "guest_count": self.tags.count_guests(tag.id),
        }

    def update_tag(
        self, tag_id: str, user_id: str, tag_updates: GuestTagUpdate
    ) -> GuestTag:
        tag = self.get_tag(tag_id, user_id)
        update_data = tag_updates.model_dump(exclude_unset=True)

        new_name = update_data.get("name")
        if new_name and new_name != tag.name:
            if self.tags.find_by_name(user_id, new_name):
                raise GuestTagConflictError(f'A tag named "{new_name}" already exists')

        try:
            self.tags.update(tag, update_data)
            self.db.commit()
            self.db.refresh(tag)
            return tag

        except Exception as e:
            self.db.rollback()
            raise GuestTagServiceError(f"Failed to update tag: {str(e)}")

    def delete_tag(self, tag_id: str, user_id: str) -> str:
        tag = self.get_tag(tag_id, user_id)

        try:
            self.tags.delete(tag)
            self.db.commit()
            return tag_id

        except Exception as e:
            self.db.rollback()
            raise GuestTagServiceError(f"Failed to delete tag: {str(e)}")

    def add_initial_tags(self, user_id: str) -> List[GuestTag]:
        """Add the default tags the user does not have yet, without committing"""
        created = []
        for default in AppConstants.DEFAULT_GUEST_TAGS:
            if not self.tags.find_by_name(user_id, default["name"]):
                created.append(self.tags.create(user_id, dict(default)))
        return created

    def seed_initial_tags(self, user_id: str) -> List[GuestTag]:
        try:
            created = self.add_initial_tags(user_id)
            self.db.commit()
            logger.info(f"Seeded {len(created)} default tags for user {user_id}")
            return created

        except Exception as e:
            self.db.rollback()
            raise GuestTagServiceError(f"Failed to seed tags: {str(e)}")
