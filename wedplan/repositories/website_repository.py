from sqlalchemy.orm import Session, selectinload
from typing import Optional, Dict, Any
from ..models.website import Website
from ..models.question import Question


class WebsiteRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, website_id: str) -> Optional[Website]:
        return self.db.query(Website).filter(Website.id == website_id).first()

    def find_by_user_id(self, user_id: str) -> Optional[Website]:
        return (
            self.db.query(Website)
            .options(
                selectinload(Website.general_questions).selectinload(Question.options)
            )
            .filter(Website.user_id == user_id)
            .first()
        )

    def find_by_sub_url(self, sub_url: str) -> Optional[Website]:
        return (
            self.db.query(Website)
            .options(
                selectinload(Website.general_questions).selectinload(Question.options)
            )
            .filter(Website.sub_url == sub_url)
            .first()
        )

    def sub_url_taken(self, sub_url: str, exclude_user_id: Optional[str] = None) -> bool:
        query = self.db.query(Website.id).filter(Website.sub_url == sub_url)
        if exclude_user_id:
            query = query.filter(Website.user_id != exclude_user_id)
        return query.first() is not None

    def create(self, user_id: str, data: Dict[str, Any]) -> Website:
        website = Website(user_id=user_id, **data)
        self.db.add(website)
        self.db.flush()
        return website

    def update(self, website: Website, data: Dict[str, Any]) -> Website:
        for field, value in data.items():
            setattr(website, field, value)
        self.db.flush()
        return website
