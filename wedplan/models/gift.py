from sqlalchemy import Column, String, DateTime, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Gift(Base):
    __tablename__ = "gifts"

    household_id = Column(
        String, ForeignKey("households.id", ondelete="CASCADE"), primary_key=True
    )
    event_id = Column(
        String, ForeignKey("events.id", ondelete="CASCADE"), primary_key=True
    )
    description = Column(Text)
    thankyou = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    household = relationship("Household", back_populates="gifts")
    event = relationship("Event", back_populates="gifts")
