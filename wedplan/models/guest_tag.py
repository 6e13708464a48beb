import uuid
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class GuestTag(Base):
    __tablename__ = "guest_tags"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(20), nullable=False)
    color = Column(String(7))

    user_id = Column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_guest_tag_name"),)

    user = relationship("User", back_populates="guest_tags")
    assignments = relationship(
        "GuestTagAssignment", back_populates="guest_tag", cascade="all, delete-orphan"
    )


class GuestTagAssignment(Base):
    __tablename__ = "guest_tag_assignments"

    guest_id = Column(
        Integer, ForeignKey("guests.id", ondelete="CASCADE"), primary_key=True
    )
    guest_tag_id = Column(
        String, ForeignKey("guest_tags.id", ondelete="CASCADE"), primary_key=True
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    guest = relationship("Guest", back_populates="tag_assignments")
    guest_tag = relationship("GuestTag", back_populates="assignments")
