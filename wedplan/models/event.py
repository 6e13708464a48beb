import uuid
from sqlalchemy import Column, String, DateTime, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(50), nullable=False)
    date = Column(DateTime)
    start_time = Column(String)
    end_time = Column(String)
    venue = Column(String)
    attire = Column(String)
    description = Column(Text)
    collect_rsvp = Column(Boolean, default=False, nullable=False)

    user_id = Column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="events")
    questions = relationship(
        "Question", back_populates="event", cascade="all, delete-orphan"
    )
    invitations = relationship(
        "Invitation", back_populates="event", cascade="all, delete-orphan"
    )
    gifts = relationship("Gift", back_populates="event", cascade="all, delete-orphan")
