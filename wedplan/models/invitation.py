from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from .enums import RsvpStatus


class Invitation(Base):
    __tablename__ = "invitations"

    guest_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), primary_key=True
    )
    event_id = Column(
        String, ForeignKey("events.id", ondelete="CASCADE"), primary_key=True
    )
    user_id = Column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    rsvp = Column(String, default=RsvpStatus.NOT_INVITED.value, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    guest = relationship("Guest", back_populates="invitations")
    event = relationship("Event", back_populates="invitations")
