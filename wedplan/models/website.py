import uuid
from sqlalchemy import Column, String, DateTime, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Website(Base):
    __tablename__ = "websites"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    url = Column(String, nullable=False)
    sub_url = Column(String, unique=True, index=True, nullable=False)
    groom_first_name = Column(String)
    groom_last_name = Column(String)
    bride_first_name = Column(String)
    bride_last_name = Column(String)
    is_password_enabled = Column(Boolean, default=False, nullable=False)
    password = Column(String)
    is_rsvp_enabled = Column(Boolean, default=False, nullable=False)
    cover_photo_url = Column(String)

    user_id = Column(
        String,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="website")
    general_questions = relationship(
        "Question",
        back_populates="website",
        cascade="all, delete-orphan",
        order_by="Question.created_at",
    )
