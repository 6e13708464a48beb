from sqlalchemy.orm import Session, selectinload
from typing import List, Optional, Dict, Any
from ..models.event import Event
from ..models.question import Question


class EventRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, event_id: str) -> Optional[Event]:
        return self.db.query(Event).filter(Event.id == event_id).first()

    def find_by_user_id(self, user_id: str) -> List[Event]:
        return (
            self.db.query(Event)
            .filter(Event.user_id == user_id)
            .order_by(Event.date.asc(), Event.created_at.asc())
            .all()
        )

    def find_with_questions(self, user_id: str) -> List[Event]:
        """Events with their questions and options loaded"""
        return (
            self.db.query(Event)
            .options(selectinload(Event.questions).selectinload(Question.options))
            .filter(Event.user_id == user_id)
            .order_by(Event.date.asc(), Event.created_at.asc())
            .all()
        )

    def find_by_name(self, user_id: str, name: str) -> Optional[Event]:
        return (
            self.db.query(Event)
            .filter(Event.user_id == user_id, Event.name == name)
            .first()
        )

    def belongs_to_user(self, event_id: str, user_id: str) -> bool:
        return (
            self.db.query(Event.id)
            .filter(Event.id == event_id, Event.user_id == user_id)
            .first()
            is not None
        )

    def create(self, user_id: str, data: Dict[str, Any]) -> Event:
        event = Event(user_id=user_id, **data)
        self.db.add(event)
        self.db.flush()
        return event

    def update(self, event: Event, data: Dict[str, Any]) -> Event:
        for field, value in data.items():
            setattr(event, field, value)
        self.db.flush()
        return event

    def delete(self, event: Event) -> None:
        self.db.delete(event)
        self.db.flush()
