from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List, Optional, Dict, Any
from ..models.guest_tag import GuestTag, GuestTagAssignment


class GuestTagRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, tag_id: str) -> Optional[GuestTag]:
        return self.db.query(GuestTag).filter(GuestTag.id == tag_id).first()

    def find_by_user_id(self, user_id: str) -> List[GuestTag]:
        return (
            self.db.query(GuestTag)
            .filter(GuestTag.user_id == user_id)
            .order_by(GuestTag.name.asc())
            .all()
        )

    def find_by_name(self, user_id: str, name: str) -> Optional[GuestTag]:
        return (
            self.db.query(GuestTag)
            .filter(GuestTag.user_id == user_id, GuestTag.name == name)
            .first()
        )

    def find_ids_for_user(self, user_id: str, tag_ids: List[str]) -> List[str]:
        if not tag_ids:
            return []
        return [
            tag_id
            for (tag_id,) in self.db.query(GuestTag.id).filter(
                GuestTag.user_id == user_id, GuestTag.id.in_(tag_ids)
            )
        ]

    def count_guests(self, tag_id: str) -> int:
        return (
            self.db.query(func.count(GuestTagAssignment.guest_id))
            .filter(GuestTagAssignment.guest_tag_id == tag_id)
            .scalar()
        )

    def belongs_to_user(self, tag_id: str, user_id: str) -> bool:
        return (
            self.db.query(GuestTag.id)
            .filter(GuestTag.id == tag_id, GuestTag.user_id == user_id)
            .first()
            is not None
        )

    def create(self, user_id: str, data: Dict[str, Any]) -> GuestTag:
        tag = GuestTag(user_id=user_id, **data)
        self.db.add(tag)
        self.db.flush()
        return tag

    def update(self, tag: GuestTag, data: Dict[str, Any]) -> GuestTag:
        for field, value in data.items():
            setattr(tag, field, value)
        self.db.flush()
        return tag

    def delete(self, tag: GuestTag) -> None:
        self.db.delete(tag)
        self.db.flush()
