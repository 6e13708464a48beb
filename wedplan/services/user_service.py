from sqlalchemy.orm import Session
import logging

from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.user import UserProfileUpdate
from .exceptions import ServiceError, NotFoundError, PermissionDeniedError

logger = logging.getLogger(__name__)


class UserServiceError(ServiceError):
    pass


class UserNotFoundError(UserServiceError, NotFoundError):
    pass


class UserPermissionError(UserServiceError, PermissionDeniedError):
    pass


class UserService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def get_current_user(self, user_id: str) -> User:
        user = self.users.find_by_id(user_id)
        if not user:
            raise UserNotFoundError("User not found")
        return user

    def get_user(self, user_id: str, current_user_id: str) -> User:
        """Users may only read their own record"""
        if user_id != current_user_id:
            raise UserPermissionError("You can only view your own profile")
        return self.get_current_user(user_id)

    def update_profile(
        self, user_id: str, current_user_id: str, profile: UserProfileUpdate
    ) -> User:
        if user_id != current_user_id:
            raise UserPermissionError("You can only update your own profile")
        user = self.get_current_user(user_id)

        try:
            self.users.update(user, profile.model_dump(exclude_unset=True))
            self.db.commit()
            self.db.refresh(user)
            return user

        except Exception as e:
            self.db.rollback()
            raise UserServiceError(f"Failed to update profile: {str(e)}")
