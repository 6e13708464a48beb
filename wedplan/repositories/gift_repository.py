from sqlalchemy.orm import Session, selectinload
from typing import List, Optional, Dict, Any
from ..models.gift import Gift


class GiftRepository:
    def __init__(self, db: Session):
        self.db = db

    def find(self, household_id: str, event_id: str) -> Optional[Gift]:
        return self.db.get(Gift, (household_id, event_id))

    def find_by_household_id(self, household_id: str) -> List[Gift]:
        return (
            self.db.query(Gift)
            .options(selectinload(Gift.event))
            .filter(Gift.household_id == household_id)
            .all()
        )

    def find_by_event_id(self, event_id: str) -> List[Gift]:
        return self.db.query(Gift).filter(Gift.event_id == event_id).all()

    def create(self, household_id: str, event_id: str, **fields) -> Gift:
        gift = Gift(household_id=household_id, event_id=event_id, **fields)
        self.db.add(gift)
        self.db.flush()
        return gift

    def create_many(self, household_id: str, event_ids: List[str]) -> List[Gift]:
        gifts = [
            Gift(household_id=household_id, event_id=event_id, thankyou=False)
            for event_id in dict.fromkeys(event_ids)
        ]
        self.db.add_all(gifts)
        self.db.flush()
        return gifts

    def update(self, gift: Gift, data: Dict[str, Any]) -> Gift:
        for field, value in data.items():
            setattr(gift, field, value)
        self.db.flush()
        return gift

    def upsert(self, household_id: str, event_id: str, data: Dict[str, Any]) -> Gift:
        gift = self.find(household_id, event_id)
        if gift is None:
            return self.create(household_id, event_id, **data)
        return self.update(gift, data)
