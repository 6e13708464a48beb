from sqlalchemy.orm import Session
from typing import Optional, Dict, Any
from ..models.user import User


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def update(self, user: User, data: Dict[str, Any]) -> User:
        for field, value in data.items():
            setattr(user, field, value)
        self.db.flush()
        return user
